"""
Collection registry.

Owns one CategoryEntry per collectible category. The registry starts
unpopulated, becomes ready once `initialize` has built every category, and
from then on only the hairstyle entry changes, when a different character
logs in.
"""

import logging
import threading
from typing import Any, Dict, List, NamedTuple, Optional, Tuple, Type, Union

from .adapters import SUPPORTED_EQUIP_SLOTS, ClassJobRow, EquipSlot, StainRow
from .categories import CollectibleCategory
from .category_builders import (
    CATEGORY_BUILDERS,
    BuildContext,
    build_hairstyles,
    is_supported_class_job,
    is_supported_stain,
    select_rows,
)
from .classes import COLLECTIBLE_CLASSES, XivCollectible
from .collectible_cache import CollectibleFactory
from .collections_config import CollectionsConfig
from .errors import CollectionNotPopulatedError
from .parallel_call import parallel_call
from .player import resolve_player_attributes
from .providers import AbstractRowSource
from .sheet_cache import SheetCache
from .sheets import Sheet
from .utils import log_duration

LOGGER = logging.getLogger(__name__)

CategoryKey = Union[CollectibleCategory, Type[XivCollectible], str]


class CategoryEntry(NamedTuple):
    """
    A built collection and how it is presented
    """

    name: str
    order_key: int
    collection: Tuple[XivCollectible, ...]


class CollectionRegistry:
    """
    Builds and serves the collectible collections of one row source
    """

    context: BuildContext
    supported_class_jobs: List[ClassJobRow]
    supported_stains: List[StainRow]
    supported_equip_slots: Tuple[EquipSlot, ...]
    __entries: Dict[CollectibleCategory, CategoryEntry]

    def __init__(
        self,
        row_source: AbstractRowSource,
        factory: Optional[CollectibleFactory] = None,
        pool_size: Optional[int] = None,
        chunk_size: Optional[int] = None,
    ) -> None:
        config = CollectionsConfig()
        self.context = BuildContext(
            sheets=SheetCache(row_source),
            factory=factory or CollectibleFactory(),
            pool_size=pool_size or config.pool_size,
            chunk_size=chunk_size or config.chunk_size,
        )
        self.supported_class_jobs = []
        self.supported_stains = []
        self.supported_equip_slots = SUPPORTED_EQUIP_SLOTS
        self.__entries = {}
        self.__lock = threading.Lock()
        # Serializes whole builds so a rebuild never races an initialize
        self.__build_lock = threading.Lock()
        self.__player_attributes = resolve_player_attributes(None)

    @property
    def is_ready(self) -> bool:
        """Has every category been built."""
        return len(self.__entries) == len(CollectibleCategory)

    def initialize(self) -> None:
        """
        Build every category and publish them together. If any builder
        fails nothing is published and the error propagates. Hairstyles
        are built for the character of the last successful rebuild.
        """
        LOGGER.info(f"Building {len(CATEGORY_BUILDERS)} collections")

        with self.__build_lock, log_duration("Collection population", LOGGER):
            class_jobs = select_rows(
                self.context.sheets, Sheet.CLASS_JOB, is_supported_class_job
            )
            stains = select_rows(self.context.sheets, Sheet.STAIN, is_supported_stain)

            built_entries = parallel_call(
                self.__build_entry,
                list(CollectibleCategory),
                pool_size=self.context.pool_size,
            )

            with self.__lock:
                self.supported_class_jobs = class_jobs
                self.supported_stains = stains
                self.__entries = {
                    category: entry
                    for category, entry in zip(CollectibleCategory, built_entries)
                }

        for entry in sorted(self.__entries.values(), key=lambda e: e.order_key):
            LOGGER.debug(f"{entry.name}: {len(entry.collection):,} collectibles")

    def __build_entry(self, category: CollectibleCategory) -> CategoryEntry:
        """
        Run one category's builder
        :param category: Category to build
        :return: Entry ready to publish
        """
        with log_duration(f"{category.value} collection", LOGGER):
            if category is CollectibleCategory.HAIRSTYLE:
                collection = build_hairstyles(self.context, self.__player_attributes)
            else:
                collection = CATEGORY_BUILDERS[category](self.context)
        return self.__make_entry(category, collection)

    @staticmethod
    def __make_entry(
        category: CollectibleCategory, collection: List[XivCollectible]
    ) -> CategoryEntry:
        return CategoryEntry(
            name=COLLECTIBLE_CLASSES[category].collection_name,
            order_key=category.order_key,
            collection=tuple(collection),
        )

    def get_entry(self, category: CategoryKey) -> CategoryEntry:
        """
        Get a category's entry
        :param category: Category, collectible class, or category value
        :return: The populated entry
        """
        entries = self.__entries
        try:
            return entries[self.__resolve_category(category)]
        except (KeyError, ValueError):
            raise CollectionNotPopulatedError(
                f"Collection {category!r} has not been populated"
            ) from None

    def get_collection(self, category: CategoryKey) -> List[XivCollectible]:
        """
        Get a category's collectibles
        :param category: Category, collectible class, or category value
        :return: Collectibles in sheet order
        """
        return list(self.get_entry(category).collection)

    def get_all_collections(self) -> Dict[str, List[XivCollectible]]:
        """
        Snapshot of every populated collection
        :return: Display name to collectibles, in display order
        """
        entries = self.__entries
        return {
            entry.name: list(entry.collection)
            for entry in sorted(entries.values(), key=lambda e: e.order_key)
        }

    def rebuild_hairstyles(self, player: Optional[Any] = None) -> None:
        """
        Rebuild the hairstyle collection for another character. Only the
        hairstyle entry is replaced; on failure the previous one is kept.
        :param player: None, PlayerAttributes, or a player object
        """
        attributes = resolve_player_attributes(player)

        with self.__build_lock:
            if not self.is_ready:
                raise CollectionNotPopulatedError(
                    "Collections must be initialized before hairstyles are rebuilt"
                )

            LOGGER.info(f"Rebuilding hairstyles for {attributes}")
            entry = self.__make_entry(
                CollectibleCategory.HAIRSTYLE,
                build_hairstyles(self.context, attributes),
            )
            with self.__lock:
                self.__player_attributes = attributes
                self.__entries = {
                    **self.__entries,
                    CollectibleCategory.HAIRSTYLE: entry,
                }

    def repopulate_for_logged_in_player(self, player: Any) -> None:
        """
        Refresh everything that depends on the logged in character
        :param player: Player object exposing a `customize` vector
        """
        self.rebuild_hairstyles(player)

    @staticmethod
    def __resolve_category(category: CategoryKey) -> CollectibleCategory:
        if isinstance(category, CollectibleCategory):
            return category
        if isinstance(category, type) and issubclass(category, XivCollectible):
            resolved = getattr(category, "category", None)
            if not isinstance(resolved, CollectibleCategory):
                raise KeyError(category)
            return resolved
        return CollectibleCategory(category)
