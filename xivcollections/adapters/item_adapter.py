"""Item sheet adapter."""

from enum import Enum
from typing import Any, Mapping, Optional, Tuple

from pydantic import Field, field_validator

from .. import constants
from .base import Number, RowLink, SeText, XivSheetRow


class EquipSlot(Enum):
    """Equipment slots, in EquipSlotCategory column order."""

    MAIN_HAND = "MainHand"
    OFF_HAND = "OffHand"
    HEAD = "Head"
    BODY = "Body"
    GLOVES = "Gloves"
    WAIST = "Waist"
    LEGS = "Legs"
    FEET = "Feet"
    EARS = "Ears"
    NECK = "Neck"
    WRISTS = "Wrists"
    FINGER_L = "FingerL"
    FINGER_R = "FingerR"
    SOUL_CRYSTAL = "SoulCrystal"


SUPPORTED_EQUIP_SLOTS: Tuple[EquipSlot, ...] = tuple(
    EquipSlot(name) for name in constants.SUPPORTED_EQUIP_SLOT_NAMES
)


class ItemAdapter(XivSheetRow):
    """
    Item row with the equip slot and item action resolved to plain values
    """

    name: SeText = ""
    description: SeText = ""
    icon: Number = 0
    level_equip: Number = 0
    dye_count: Number = 0
    equip_slot: Optional[EquipSlot] = Field(default=None, alias="EquipSlotCategory")
    item_ui_category: RowLink = Field(default=0, alias="ItemUICategory")
    item_action_type: int = Field(default=0, alias="ItemAction")

    @field_validator("equip_slot", mode="before")
    @classmethod
    def _resolve_equip_slot(cls, value: Any) -> Optional[EquipSlot]:
        # EquipSlotCategory is a row of per-slot flags; the first set flag wins.
        # -1 marks a slot the item blocks, not one it occupies.
        # A bare row id carries no flags, so it resolves to no slot.
        if isinstance(value, EquipSlot):
            return value
        if isinstance(value, str):
            return next((slot for slot in EquipSlot if slot.value == value), None)
        if isinstance(value, Mapping):
            for slot in EquipSlot:
                if int(value.get(slot.value) or 0) > 0:
                    return slot
        return None

    @field_validator("item_action_type", mode="before")
    @classmethod
    def _resolve_item_action_type(cls, value: Any) -> int:
        # Only an expanded ItemAction row carries its Type. A bare cell is the
        # linked row id, not the type, so framer kits need the expanded link.
        if isinstance(value, Mapping):
            return int(value.get("Type") or 0)
        return 0
