"""Infrastructure providers.

Importing a module here registers its implementations as subclasses of
the component base.
"""

from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = ["PersistenceProvider", "ProdPersistenceProvider"]
