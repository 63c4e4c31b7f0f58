"""Pytest configuration and fixtures for xivcollections tests."""

from typing import Any, Dict, List

import pytest

from xivcollections import data_overrides
from xivcollections.collectible_cache import CollectibleFactory
from xivcollections.data_overrides import DataOverrides
from xivcollections.providers import InMemoryRowSource
from xivcollections.registry import CollectionRegistry
from xivcollections.sheets import Sheet

IGNORED_MINION_ID = 68
IGNORED_EMOTE_ID = 82
IGNORED_BARDING_ID = 40
IGNORED_FASHION_ACCESSORY_ID = 22

TEST_DATA_OVERRIDES = DataOverrides(
    ignore_minion_ids=frozenset({IGNORED_MINION_ID}),
    ignore_emote_ids=frozenset({IGNORED_EMOTE_ID}),
    ignore_barding_ids=frozenset({IGNORED_BARDING_ID}),
    ignore_fashion_accessory_ids=frozenset({IGNORED_FASHION_ACCESSORY_ID}),
)


def hairstyle_menu(*sub_menu_params: int) -> Dict[str, Any]:
    return {"Menu": {"RowId": 3, "Text": "Hairstyle"}, "SubMenuParam": list(sub_menu_params)}


def build_sheets() -> Dict[Sheet, List[Dict[str, Any]]]:
    """
    Small dataset covering every filter branch.
    Comments name the rows each collection should keep.
    """
    return {
        # Glamour: 1600, 1601, 2000. Outfits: 3000. Framer kits: 4000.
        Sheet.ITEM: [
            {"RowId": 1, "Name": "Gil", "LevelEquip": 0},
            {
                "RowId": 1000,
                "Name": "Dated Brass Dagger",
                "LevelEquip": 5,
                "EquipSlotCategory": {"MainHand": 1},
            },
            {
                "RowId": 1600,
                "Name": {"Text": "Weathered Shortsword"},
                "Icon": 30001,
                "LevelEquip": 1,
                "DyeCount": 1,
                "EquipSlotCategory": {"MainHand": 1, "OffHand": -1},
            },
            {
                "RowId": 1601,
                "Name": "Bronze Barbut",
                "Icon": 40001,
                "LevelEquip": 10,
                "EquipSlotCategory": {"Head": 1},
                "ItemUICategory": {"RowId": 34},
            },
            {
                "RowId": 1602,
                "Name": "Leather Belt",
                "LevelEquip": 5,
                "EquipSlotCategory": {"Waist": 1},
            },
            {
                "RowId": 1603,
                "Name": "Soul of the Paladin",
                "LevelEquip": 30,
                "EquipSlotCategory": {"SoulCrystal": 1},
            },
            {
                "RowId": 2000,
                "Name": "Copper Ring",
                "Icon": 50001,
                "LevelEquip": 1,
                "EquipSlotCategory": {"FingerL": 1, "FingerR": 1},
            },
            {
                "RowId": 3000,
                "Name": "Scion Traveler's Attire",
                "LevelEquip": 1,
                "ItemUICategory": {"RowId": 112},
                "EquipSlotCategory": None,
            },
            {
                "RowId": 3001,
                "Name": "Unfinished Attire",
                "LevelEquip": 0,
                "ItemUICategory": 112,
            },
            {
                "RowId": 4000,
                "Name": "Framer's Kit: Ultima",
                "Icon": 60001,
                "ItemAction": {"RowId": 2000, "Type": 29459},
            },
            {"RowId": 4001, "Name": "Potion", "ItemAction": {"RowId": 7, "Type": 847}},
            {"RowId": 4002, "Name": "Ether", "ItemAction": None},
        ],
        # Mounts: 1, 4
        Sheet.MOUNT: [
            {"RowId": 1, "Singular": "Chocobo", "Order": 5, "Icon": 4001},
            {"RowId": 2, "Singular": "", "Order": 1},
            {"RowId": 3, "Singular": "Fat Chocobo", "Order": -1},
            {"RowId": 4, "Singular": "Magitek Armor", "Order": 7, "Icon": 4004},
        ],
        # Minions: 1, 2
        Sheet.COMPANION: [
            {"RowId": 0, "Singular": ""},
            {"RowId": 1, "Singular": "cherry bomb", "Icon": 4401},
            {"RowId": IGNORED_MINION_ID, "Singular": "wind-up cursor", "Icon": 4468},
            {"RowId": 2, "Singular": "wayward hatchling", "Icon": 4402},
        ],
        # Emotes: 10, 13
        Sheet.EMOTE: [
            {"RowId": 1, "Name": "Surprised", "Icon": 64001, "UnlockLink": 0},
            {"RowId": 10, "Name": "Dance", "Icon": 64010, "UnlockLink": 5},
            {"RowId": 11, "Name": "", "Icon": 64011, "UnlockLink": 5},
            {"RowId": 12, "Name": "Hum", "Icon": 0, "UnlockLink": 3},
            {"RowId": IGNORED_EMOTE_ID, "Name": "Hidden", "Icon": 64082, "UnlockLink": 9},
            {"RowId": 13, "Name": "Step Dance", "Icon": 64013, "UnlockLink": 7},
        ],
        # Hairstyles: 102, 105 for the default character, 106 for (4, 7, 1)
        Sheet.HAIR_MAKE_TYPE: [
            {
                "RowId": 0,
                "Race": {"RowId": 1},
                "Tribe": {"RowId": 1},
                "Gender": 0,
                "CharaMakeStruct": [
                    {"Menu": {"RowId": 1, "Text": "Skin Color"}, "SubMenuParam": [1, 2]},
                    hairstyle_menu(101, 102, 0, 105),
                ],
            },
            {
                "RowId": 1,
                "Race": 4,
                "Tribe": 7,
                "Gender": 1,
                "CharaMakeStruct": [hairstyle_menu(101, 106, 0)],
            },
            {
                "RowId": 2,
                "Race": 2,
                "Tribe": 3,
                "Gender": 0,
                "CharaMakeStruct": [
                    {"Menu": {"RowId": 1, "Text": "Skin Color"}, "SubMenuParam": [1]}
                ],
            },
        ],
        Sheet.CHARA_MAKE_CUSTOMIZE: [
            {"RowId": 101, "FeatureID": 1, "Icon": 70101, "IsPurchasable": False},
            {
                "RowId": 102,
                "FeatureID": 102,
                "Icon": 70102,
                "IsPurchasable": True,
                "HintItem": {"RowId": 5001, "Name": "Modern Aesthetics - Curls"},
            },
            {"RowId": 105, "FeatureID": 105, "Icon": 70105, "IsPurchasable": True},
            {"RowId": 106, "FeatureID": 106, "Icon": 70106, "IsPurchasable": True},
            {"RowId": 107, "FeatureID": 107, "Icon": 70107, "IsPurchasable": True},
        ],
        # Triple Triad: 1, 3
        Sheet.TRIPLE_TRIAD_CARD: [
            {"RowId": 0, "Name": ""},
            {"RowId": 1, "Name": "Dodo", "Description": "A flightless bird."},
            {"RowId": 2, "Name": "0"},
            {"RowId": 3, "Name": "Tonberry"},
        ],
        # Blue magic: 11383, 11385
        Sheet.ACTION: [
            {"RowId": 7, "Name": "Attack", "ClassJob": {"RowId": 1}},
            {"RowId": 11383, "Name": "Snort", "Icon": 3001, "ClassJob": {"RowId": 36}},
            {"RowId": 11384, "Name": "", "ClassJob": {"RowId": 36}},
            {"RowId": 11385, "Name": "Water Cannon", "Icon": 3002, "ClassJob": 36},
        ],
        # Bardings: 1, 3
        Sheet.BUDDY_EQUIP: [
            {"RowId": 0, "Name": ""},
            {"RowId": 1, "Name": "Bardings of Light", "IconHead": 9001},
            {"RowId": IGNORED_BARDING_ID, "Name": "Unused Barding"},
            {"RowId": 3, "Name": "Gridanian Barding", "IconHead": 9003},
        ],
        # Orchestrion rolls: 1, 4
        Sheet.ORCHESTRION: [
            {"RowId": 1, "Name": "Answers"},
            {"RowId": 2, "Name": "0"},
            {"RowId": 3, "Name": ""},
            {"RowId": 4, "Name": "Torn from the Heavens"},
        ],
        # Fashion accessories: 2, 4
        Sheet.ORNAMENT: [
            {"RowId": 1, "Singular": "", "Icon": 0},
            {"RowId": 2, "Singular": "parasol", "Icon": 26002},
            {"RowId": IGNORED_FASHION_ACCESSORY_ID, "Singular": "unused", "Icon": 26099},
            {"RowId": 4, "Singular": "wings", "Icon": 26004},
        ],
        # Glasses: 2
        Sheet.GLASSES: [
            {"RowId": 1, "Name": "", "Icon": 0},
            {
                "RowId": 2,
                "Name": "Black Spectacles",
                "Icon": 55001,
                "Style": {"RowId": 1, "Name": "Black Spectacles"},
            },
            {
                "RowId": 3,
                "Name": "Red Eyeglasses",
                "Icon": 55002,
                "Style": {"RowId": 2, "Name": "Eyeglasses"},
            },
        ],
        # Stains: 1, 2
        Sheet.STAIN: [
            {"RowId": 0, "Name": ""},
            {"RowId": 1, "Name": "Snow White", "Color": 15132390},
            {"RowId": 2, "Name": "Ash Grey", "Color": 9606294},
        ],
        # Class jobs: 8, 19
        Sheet.CLASS_JOB: [
            {"RowId": 0, "Name": "adventurer", "ClassJobCategory": 0},
            {
                "RowId": 1,
                "Name": "gladiator",
                "ClassJobCategory": {"RowId": 30},
                "JobIndex": 0,
                "DohDolJobIndex": -1,
            },
            {
                "RowId": 8,
                "Name": "carpenter",
                "ClassJobCategory": {"RowId": 33},
                "JobIndex": 0,
                "DohDolJobIndex": 0,
            },
            {
                "RowId": 19,
                "Name": "paladin",
                "ClassJobCategory": {"RowId": 38},
                "JobIndex": 1,
                "DohDolJobIndex": -1,
            },
        ],
    }


class FakePlayer:
    """Stand-in for the host's player object."""

    def __init__(self, race: int, tribe: int, gender: int) -> None:
        # race, gender, body type, height, tribe
        self.customize = [race, gender, 1, 50, tribe]


@pytest.fixture
def sheets() -> Dict[Sheet, List[Dict[str, Any]]]:
    return build_sheets()


@pytest.fixture
def row_source(sheets) -> InMemoryRowSource:
    return InMemoryRowSource(sheets)


@pytest.fixture
def factory() -> CollectibleFactory:
    return CollectibleFactory()


@pytest.fixture
def registry(row_source, factory) -> CollectionRegistry:
    return CollectionRegistry(row_source, factory=factory, pool_size=4, chunk_size=2)


@pytest.fixture
def ready_registry(registry) -> CollectionRegistry:
    registry.initialize()
    return registry


@pytest.fixture
def make_player():
    return FakePlayer


@pytest.fixture(autouse=True)
def exclusion_overrides(monkeypatch) -> DataOverrides:
    monkeypatch.setattr(data_overrides, "DATA_OVERRIDES", TEST_DATA_OVERRIDES)
    return TEST_DATA_OVERRIDES
