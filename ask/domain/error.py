"""Domain layer errors.

Each error maps to one HTTP status in the interface layer:

    ValidationError       400
    ConflictError         400
    AuthenticationError   401
    NotAuthorizedError    403
    NotFoundError         404
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error (missing or malformed input)."""

    pass


class ConflictError(DomainError):
    """The request conflicts with the current state of a resource."""

    pass


class DuplicateVoteError(ConflictError):
    """Raised when a voter repeats the direction they already recorded."""

    def __init__(self, answer_id: str, voter_id: str):
        self.answer_id = answer_id
        self.voter_id = voter_id
        super().__init__("You have already voted this way")


class AuthenticationError(DomainError):
    """Missing, invalid or unresolvable credentials."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when an authenticated user may not perform an action."""

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        self.action = action
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(f"Not authorized to {action} this {resource}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found")
