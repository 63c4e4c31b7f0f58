"""
Names of the game-data sheets read from a row source
"""

from enum import Enum


class Sheet(Enum):
    """Sheet identifiers, valued by the sheet's name in the game data."""

    ACTION = "Action"
    BUDDY_EQUIP = "BuddyEquip"
    CHARA_MAKE_CUSTOMIZE = "CharaMakeCustomize"
    CLASS_JOB = "ClassJob"
    COMPANION = "Companion"
    EMOTE = "Emote"
    GLASSES = "Glasses"
    HAIR_MAKE_TYPE = "HairMakeType"
    ITEM = "Item"
    MOUNT = "Mount"
    ORCHESTRION = "Orchestrion"
    ORNAMENT = "Ornament"
    STAIN = "Stain"
    TRIPLE_TRIAD_CARD = "TripleTriadCard"
