"""
Collectibles backed by the Item sheet
"""

from typing import Optional

from ..adapters import EquipSlot, ItemAdapter
from ..categories import CollectibleCategory
from .xiv_collectible import XivCollectible


class GlamourCollectible(XivCollectible):
    """
    Equipment that can be worn as glamour
    """

    category = CollectibleCategory.GLAMOUR
    collection_name = "Glamour"

    description: str = ""
    equip_slot: Optional[EquipSlot] = None
    level_equip: int = 0
    dye_count: int = 0

    @classmethod
    def from_row(cls, row: ItemAdapter) -> "GlamourCollectible":
        return cls(
            id=row.row_id,
            name=row.name,
            icon_id=row.icon,
            description=row.description,
            equip_slot=row.equip_slot,
            level_equip=row.level_equip,
            dye_count=row.dye_count,
        )


class OutfitCollectible(XivCollectible):
    """
    Outfit glamour sets, stored in the armoire as one item
    """

    category = CollectibleCategory.OUTFIT
    collection_name = "Outfits"

    description: str = ""
    level_equip: int = 0

    @classmethod
    def from_row(cls, row: ItemAdapter) -> "OutfitCollectible":
        return cls(
            id=row.row_id,
            name=row.name,
            icon_id=row.icon,
            description=row.description,
            level_equip=row.level_equip,
        )


class FramerKitCollectible(XivCollectible):
    category = CollectibleCategory.FRAMER_KIT
    collection_name = "Framer Kits"

    description: str = ""

    @classmethod
    def from_row(cls, row: ItemAdapter) -> "FramerKitCollectible":
        return cls(
            id=row.row_id,
            name=row.name,
            icon_id=row.icon,
            description=row.description,
        )
