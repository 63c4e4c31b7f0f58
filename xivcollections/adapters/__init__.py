"""
XIV Collections sheet adapters
"""

from typing import Dict, Type

from ..sheets import Sheet
from .base import XivSheetRow
from .chara_make import CharaMakeCustomizeRow, CharaMakeStructEntry, HairMakeTypeRow
from .item_adapter import SUPPORTED_EQUIP_SLOTS, EquipSlot, ItemAdapter
from .sheet_rows import (
    ActionRow,
    BuddyEquipRow,
    ClassJobRow,
    CompanionRow,
    EmoteRow,
    GlassesRow,
    MountRow,
    OrchestrionRow,
    OrnamentRow,
    StainRow,
    TripleTriadCardRow,
)

SHEET_ADAPTERS: Dict[Sheet, Type[XivSheetRow]] = {
    Sheet.ACTION: ActionRow,
    Sheet.BUDDY_EQUIP: BuddyEquipRow,
    Sheet.CHARA_MAKE_CUSTOMIZE: CharaMakeCustomizeRow,
    Sheet.CLASS_JOB: ClassJobRow,
    Sheet.COMPANION: CompanionRow,
    Sheet.EMOTE: EmoteRow,
    Sheet.GLASSES: GlassesRow,
    Sheet.HAIR_MAKE_TYPE: HairMakeTypeRow,
    Sheet.ITEM: ItemAdapter,
    Sheet.MOUNT: MountRow,
    Sheet.ORCHESTRION: OrchestrionRow,
    Sheet.ORNAMENT: OrnamentRow,
    Sheet.STAIN: StainRow,
    Sheet.TRIPLE_TRIAD_CARD: TripleTriadCardRow,
}

__all__ = [
    "SHEET_ADAPTERS",
    "SUPPORTED_EQUIP_SLOTS",
    "ActionRow",
    "BuddyEquipRow",
    "CharaMakeCustomizeRow",
    "CharaMakeStructEntry",
    "ClassJobRow",
    "CompanionRow",
    "EmoteRow",
    "EquipSlot",
    "GlassesRow",
    "HairMakeTypeRow",
    "ItemAdapter",
    "MountRow",
    "OrchestrionRow",
    "OrnamentRow",
    "StainRow",
    "TripleTriadCardRow",
    "XivSheetRow",
]
