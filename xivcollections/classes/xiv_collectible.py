"""
XIV Collections top level collectible object
"""

import abc
from typing import Any, ClassVar, Dict, Tuple

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ..categories import CollectibleCategory


class XivCollectible(BaseModel, abc.ABC):
    """
    One immutable catalog entry, derived from exactly one sheet row.
    Subclasses set `category` and `collection_name` and know how to
    build themselves from their sheet's adapted row.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    category: ClassVar[CollectibleCategory]
    collection_name: ClassVar[str]

    id: int
    name: str
    icon_id: int = 0

    @classmethod
    @abc.abstractmethod
    def from_row(cls, row: Any) -> "XivCollectible":
        """
        Build the collectible for a row that passed the category filter
        :param row: Adapted sheet row
        :return: Collectible
        """

    @property
    def key(self) -> Tuple[CollectibleCategory, int]:
        """Identity of the collectible: its category and source row id."""
        return self.category, self.id

    def to_json(self) -> Dict[str, Any]:
        """
        Support json.dump()
        :return: JSON serialized object
        """
        return self.model_dump(mode="json", by_alias=True)
