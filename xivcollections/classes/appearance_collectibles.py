"""
Collectibles that change how the character looks outside of gear
"""

from ..adapters import CharaMakeCustomizeRow, GlassesRow, OrnamentRow
from ..categories import CollectibleCategory
from .xiv_collectible import XivCollectible


class HairstyleCollectible(XivCollectible):
    """
    Hairstyle unlocked through a purchasable item. Named after the item
    that unlocks it when the row links one.
    """

    category = CollectibleCategory.HAIRSTYLE
    collection_name = "Hairstyles"

    feature_id: int = 0

    @classmethod
    def from_row(cls, row: CharaMakeCustomizeRow) -> "HairstyleCollectible":
        return cls(
            id=row.row_id,
            name=row.hint_item_name or f"Hairstyle #{row.feature_id}",
            icon_id=row.icon,
            feature_id=row.feature_id,
        )


class FashionAccessoryCollectible(XivCollectible):
    category = CollectibleCategory.FASHION_ACCESSORY
    collection_name = "Fashion Accessories"

    @classmethod
    def from_row(cls, row: OrnamentRow) -> "FashionAccessoryCollectible":
        return cls(id=row.row_id, name=row.singular, icon_id=row.icon)


class GlassesCollectible(XivCollectible):
    category = CollectibleCategory.GLASSES
    collection_name = "Glasses"

    style_name: str = ""

    @classmethod
    def from_row(cls, row: GlassesRow) -> "GlassesCollectible":
        return cls(
            id=row.row_id,
            name=row.name,
            icon_id=row.icon,
            style_name=row.style_name,
        )
