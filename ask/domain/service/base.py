"""Base class for domain services."""


class Service:
    """Marker base for domain services.

    Services hold the rules that span more than one aggregate, or that need
    repositories to enforce (uniqueness, existence, authorization).
    """

    pass
