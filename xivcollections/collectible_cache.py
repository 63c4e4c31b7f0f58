"""
Memoizing collectible construction.

A collectible is built at most once per (category, row id). Construction
runs while the category's lock is held, so callers racing on the same row
all receive the instance the first of them built.
"""

import logging
import threading
from typing import Dict, Type

from .adapters import XivSheetRow
from .categories import CollectibleCategory
from .classes import COLLECTIBLE_CLASSES, XivCollectible

LOGGER = logging.getLogger(__name__)


class CollectibleCache:
    """
    Object cache for one collectible category, keyed by source row id
    """

    collectible_class: Type[XivCollectible]
    __objects: Dict[int, XivCollectible]

    def __init__(self, collectible_class: Type[XivCollectible]) -> None:
        self.collectible_class = collectible_class
        self.__objects = {}
        self.__lock = threading.Lock()

    def get_object(self, row: XivSheetRow) -> XivCollectible:
        """
        Get the canonical collectible for a row, building it on first request
        :param row: Adapted row that passed the category filter
        :return: Cached collectible
        """
        cached = self.__objects.get(row.row_id)
        if cached is not None:
            return cached

        with self.__lock:
            cached = self.__objects.get(row.row_id)
            if cached is None:
                cached = self.collectible_class.from_row(row)
                self.__objects[row.row_id] = cached
            return cached

    def __contains__(self, row_id: object) -> bool:
        return row_id in self.__objects

    def __len__(self) -> int:
        return len(self.__objects)


class CollectibleFactory:
    """
    Holds one CollectibleCache per category, so equal row ids from
    unrelated sheets never share an entry
    """

    __caches: Dict[CollectibleCategory, CollectibleCache]

    def __init__(self) -> None:
        self.__caches = {}
        self.__lock = threading.Lock()

    def get_cache(self, category: CollectibleCategory) -> CollectibleCache:
        """
        Get the cache backing a category, creating it if needed
        :param category: Collectible category
        :return: That category's cache
        """
        with self.__lock:
            if category not in self.__caches:
                LOGGER.debug(f"Creating collectible cache for {category.value}")
                self.__caches[category] = CollectibleCache(COLLECTIBLE_CLASSES[category])
            return self.__caches[category]

    def get_object(
        self, category: CollectibleCategory, row: XivSheetRow
    ) -> XivCollectible:
        """
        Get the canonical collectible of a category for a row
        :param category: Collectible category
        :param row: Adapted row that passed the category filter
        :return: Cached collectible
        """
        return self.get_cache(category).get_object(row)
