"""Infrastructure providers."""

# Import bases
from .classifier import ClassifierProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .classifier import ProdClassifierProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "ClassifierProvider",
    "PersistenceProvider",
    "ProdClassifierProvider",
    "ProdPersistenceProvider",
]
