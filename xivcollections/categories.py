"""
Collectible category constants.

The category set is closed: every collection the registry knows about has
exactly one member here, and its display order key.
"""

from __future__ import annotations

from enum import Enum
from typing import Final


class CollectibleCategory(Enum):
    """Catalog kinds, declared in display order."""

    GLAMOUR = "glamour"
    MOUNT = "mount"
    MINION = "minion"
    EMOTE = "emote"
    HAIRSTYLE = "hairstyle"
    TRIPLE_TRIAD = "triple_triad"
    BLUE_MAGE = "blue_mage"
    BARDING = "barding"
    ORCHESTRION_ROLL = "orchestrion_roll"
    OUTFIT = "outfit"
    FRAMER_KIT = "framer_kit"
    FASHION_ACCESSORY = "fashion_accessory"
    GLASSES = "glasses"

    @property
    def order_key(self) -> int:
        """Fixed display position of the category."""
        return ORDER_KEYS[self]


ORDER_KEYS: Final[dict[CollectibleCategory, int]] = {
    category: index for index, category in enumerate(CollectibleCategory)
}
