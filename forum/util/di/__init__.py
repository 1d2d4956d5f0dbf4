"""Dependency injection wiring."""

from collections.abc import Collection

from forum.util.di.application import ProdApplicationProvider
from forum.util.di.base import COMPONENTS, Component, ProviderBase
from forum.util.di.core import ProdConfigProvider
from forum.util.di.domain import ProdDomainProvider
from forum.util.di.infrastructure import PersistenceProvider

# Order is irrelevant to dishka; grouped by layer for reading
PROVIDERS: list[type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def build_providers(mocked: Collection[Component] = ()) -> list[ProviderBase]:
    """Instantiate one implementation per registered provider.

    Args:
        mocked: Components to replace with their mock implementation

    Raises:
        ValueError: If an unknown component is named
    """
    unknown = set(mocked) - COMPONENTS
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    return [
        base.implementation(mock=base.__component__ in mocked)()
        for base in PROVIDERS
    ]


__all__ = [
    "COMPONENTS",
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProviderBase",
    "build_providers",
]
