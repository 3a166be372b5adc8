"""Dependency injection module."""

from typing import Type

from ask.util.di.application import ProdApplicationProvider
from ask.util.di.base import Component, ProviderBase
from ask.util.di.core import ProdConfigProvider
from ask.util.di.domain import ProdDomainProvider
from ask.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider

PROVIDERS: list[Type[ProviderBase]] = [
    # Concrete providers
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Swappable components
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Select the provider class to instantiate for a PROVIDERS entry.

    A provider without subclasses is concrete and used as-is. A provider with
    subclasses is a swappable component; the subclass whose ``__is_mock__``
    matches ``use_mock`` is returned.

    Args:
        base: Provider class from PROVIDERS
        use_mock: Whether the test implementation is wanted

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If no implementation of the requested kind is registered
    """
    subclasses = base.__subclasses__()
    if not subclasses:
        return base

    impl = next(
        (c for c in subclasses if getattr(c, "__is_mock__", False) == use_mock),
        None,
    )
    if not impl:
        kind = "mock" if use_mock else "production"
        component_name = getattr(base, "__mock_component__", None) or base.__name__
        raise ValueError(f"No {kind} implementation for {component_name}")
    return impl


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
