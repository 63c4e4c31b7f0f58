"""
Emotes, cards, spells and music unlocked account-wide per character
"""

from ..adapters import ActionRow, EmoteRow, OrchestrionRow, TripleTriadCardRow
from ..categories import CollectibleCategory
from .xiv_collectible import XivCollectible


class EmoteCollectible(XivCollectible):
    category = CollectibleCategory.EMOTE
    collection_name = "Emotes"

    unlock_link: int = 0

    @classmethod
    def from_row(cls, row: EmoteRow) -> "EmoteCollectible":
        return cls(
            id=row.row_id, name=row.name, icon_id=row.icon, unlock_link=row.unlock_link
        )


class TripleTriadCollectible(XivCollectible):
    category = CollectibleCategory.TRIPLE_TRIAD
    collection_name = "Triple Triad"

    description: str = ""

    @classmethod
    def from_row(cls, row: TripleTriadCardRow) -> "TripleTriadCollectible":
        return cls(id=row.row_id, name=row.name, description=row.description)


class BlueMageCollectible(XivCollectible):
    category = CollectibleCategory.BLUE_MAGE
    collection_name = "Blue Magic"

    @classmethod
    def from_row(cls, row: ActionRow) -> "BlueMageCollectible":
        return cls(id=row.row_id, name=row.name, icon_id=row.icon)


class OrchestrionCollectible(XivCollectible):
    category = CollectibleCategory.ORCHESTRION_ROLL
    collection_name = "Orchestrion Rolls"

    description: str = ""

    @classmethod
    def from_row(cls, row: OrchestrionRow) -> "OrchestrionCollectible":
        return cls(id=row.row_id, name=row.name, description=row.description)
