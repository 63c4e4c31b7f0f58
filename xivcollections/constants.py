"""
XIV Collections Constants that cannot be changed and are hardcoded intentionally
"""

import datetime
import os
import pathlib
from typing import Final, Tuple

TOP_LEVEL_DIR: pathlib.Path = pathlib.Path(__file__).resolve().parent.parent
RESOURCE_PATH: pathlib.Path = TOP_LEVEL_DIR.joinpath("xivcollections").joinpath(
    "resources"
)
CONFIG_PATH: pathlib.Path = RESOURCE_PATH.joinpath("xivcollections.properties")
DATA_OVERRIDES_PATH: pathlib.Path = RESOURCE_PATH.joinpath("data_overrides.json")
ENV_OUT_PATH: pathlib.Path = (
    pathlib.Path(os.environ.get("XIVCOLLECTIONS_OUTPUT_PATH", TOP_LEVEL_DIR))
    .expanduser()
    .resolve()
)
OUTPUT_PATH: pathlib.Path = ENV_OUT_PATH.joinpath("output")

LOG_PATH: pathlib.Path = ENV_OUT_PATH.joinpath("xivcollections_logs")

BUILD_DATE: str = datetime.datetime.today().strftime("%Y-%m-%d")

# Items at or below this row id are the 1.0 "Dated" and "Weathered" placeholders
GLAMOUR_MIN_ROW_ID: Final[int] = 1599

BLUE_MAGE_CLASS_JOB_ID: Final[int] = 36
OUTFIT_ITEM_UI_CATEGORY_ID: Final[int] = 112
FRAMER_KIT_ITEM_ACTION_TYPE: Final[int] = 29459

HAIRSTYLE_MENU_LABEL: Final[str] = "Hairstyle"

# Hyur, Midlander, Male
DEFAULT_PLAYER_RACE: Final[int] = 1
DEFAULT_PLAYER_TRIBE: Final[int] = 1
DEFAULT_PLAYER_GENDER: Final[int] = 0

# Glamour slots in the order they are drawn (two columns)
SUPPORTED_EQUIP_SLOT_NAMES: Final[Tuple[str, ...]] = (
    "MainHand",
    "OffHand",
    "Head",
    "Ears",
    "Body",
    "Neck",
    "Gloves",
    "Wrists",
    "Legs",
    "FingerR",
    "Feet",
    "FingerL",
)

DEFAULT_POOL_SIZE: Final[int] = 13
DEFAULT_CHUNK_SIZE: Final[int] = 2048
