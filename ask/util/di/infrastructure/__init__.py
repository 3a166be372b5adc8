"""Infrastructure providers."""

from .persistence import PersistenceProvider

# Implementations must be imported so __subclasses__() can find them
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
