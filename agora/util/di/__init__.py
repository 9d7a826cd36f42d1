"""Dependency injection wiring (dishka)."""

from agora.util.di.application import ProdApplicationProvider
from agora.util.di.base import Component, ProviderBase
from agora.util.di.core import ProdConfigProvider
from agora.util.di.domain import ProdDomainProvider
from agora.util.di.infrastructure import PersistenceProvider

# One entry per layer; swappable entries are resolved via ``implementation``
PROVIDERS: tuple[type[ProviderBase], ...] = (
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
)


def swappable_components() -> set[str]:
    """Names of the components that have a fake implementation slot."""
    return {p.swappable for p in PROVIDERS if p.swappable is not None}


__all__ = [
    "Component",
    "PROVIDERS",
    "ProviderBase",
    "swappable_components",
]
