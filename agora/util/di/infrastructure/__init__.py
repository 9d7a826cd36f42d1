"""Providers for swappable infrastructure components.

Implementations are imported here so that ``__subclasses__`` finds them.
"""

from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = ["PersistenceProvider", "ProdPersistenceProvider"]
