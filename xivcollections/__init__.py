"""
XIV Collections: collectible catalogs built from game sheet data
"""

from ._version import __version__
from .categories import CollectibleCategory
from .collectible_cache import CollectibleCache, CollectibleFactory
from .errors import CollectionNotPopulatedError, CollectionsError, SourceStructureError
from .player import PlayerAttributes
from .registry import CategoryEntry, CollectionRegistry

__all__ = [
    "CategoryEntry",
    "CollectibleCache",
    "CollectibleCategory",
    "CollectibleFactory",
    "CollectionNotPopulatedError",
    "CollectionRegistry",
    "CollectionsError",
    "PlayerAttributes",
    "SourceStructureError",
    "__version__",
]
