"""
Mounts, minions and chocobo bardings
"""

from ..adapters import BuddyEquipRow, CompanionRow, MountRow
from ..categories import CollectibleCategory
from .xiv_collectible import XivCollectible


class MountCollectible(XivCollectible):
    category = CollectibleCategory.MOUNT
    collection_name = "Mounts"

    description: str = ""
    order: int = 0

    @classmethod
    def from_row(cls, row: MountRow) -> "MountCollectible":
        return cls(
            id=row.row_id,
            name=row.singular,
            icon_id=row.icon,
            description=row.description,
            order=row.order,
        )


class MinionCollectible(XivCollectible):
    category = CollectibleCategory.MINION
    collection_name = "Minions"

    @classmethod
    def from_row(cls, row: CompanionRow) -> "MinionCollectible":
        return cls(id=row.row_id, name=row.singular, icon_id=row.icon)


class BardingCollectible(XivCollectible):
    category = CollectibleCategory.BARDING
    collection_name = "Bardings"

    @classmethod
    def from_row(cls, row: BuddyEquipRow) -> "BardingCollectible":
        return cls(id=row.row_id, name=row.name, icon_id=row.icon_head)
