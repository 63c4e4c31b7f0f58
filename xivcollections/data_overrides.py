"""
Row ids excluded from collections even though they pass the sheet filters
"""

import json
import logging
import pathlib
from dataclasses import dataclass, field
from typing import FrozenSet

from . import constants

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class DataOverrides:
    """
    Exclusion lists, keyed by the sheet they apply to
    """

    ignore_minion_ids: FrozenSet[int] = field(default_factory=frozenset)
    ignore_emote_ids: FrozenSet[int] = field(default_factory=frozenset)
    ignore_barding_ids: FrozenSet[int] = field(default_factory=frozenset)
    ignore_fashion_accessory_ids: FrozenSet[int] = field(default_factory=frozenset)


def load_data_overrides(
    file_path: pathlib.Path = constants.DATA_OVERRIDES_PATH,
) -> DataOverrides:
    """
    Load the exclusion lists from a JSON resource
    :param file_path: JSON file to read
    :return: Overrides, empty if the file is missing
    """
    if not file_path.exists():
        LOGGER.warning(f"Data overrides not found: {file_path}")
        return DataOverrides()

    with file_path.open(encoding="utf-8") as file:
        contents = json.load(file)

    return DataOverrides(
        **{
            key: frozenset(int(row_id) for row_id in contents.get(key, []))
            for key in DataOverrides.__dataclass_fields__
        }
    )


DATA_OVERRIDES: DataOverrides = load_data_overrides()
