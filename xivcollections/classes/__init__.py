"""
XIV Collections Class Dispatcher
"""

from typing import Dict, Type

from ..categories import CollectibleCategory
from .appearance_collectibles import (
    FashionAccessoryCollectible,
    GlassesCollectible,
    HairstyleCollectible,
)
from .companion_collectibles import BardingCollectible, MinionCollectible, MountCollectible
from .item_collectibles import FramerKitCollectible, GlamourCollectible, OutfitCollectible
from .unlock_collectibles import (
    BlueMageCollectible,
    EmoteCollectible,
    OrchestrionCollectible,
    TripleTriadCollectible,
)
from .xiv_collectible import XivCollectible

COLLECTIBLE_CLASSES: Dict[CollectibleCategory, Type[XivCollectible]] = {
    collectible_class.category: collectible_class
    for collectible_class in (
        GlamourCollectible,
        MountCollectible,
        MinionCollectible,
        EmoteCollectible,
        HairstyleCollectible,
        TripleTriadCollectible,
        BlueMageCollectible,
        BardingCollectible,
        OrchestrionCollectible,
        OutfitCollectible,
        FramerKitCollectible,
        FashionAccessoryCollectible,
        GlassesCollectible,
    )
}
