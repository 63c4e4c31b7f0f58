"""
Tests for xivcollections/data_overrides.py
"""

import json

from xivcollections.data_overrides import DataOverrides, load_data_overrides


def test_load_data_overrides(tmp_path):
    overrides_file = tmp_path.joinpath("data_overrides.json")
    overrides_file.write_text(
        json.dumps({"ignore_minion_ids": [68, "69"], "ignore_emote_ids": [82]})
    )

    overrides = load_data_overrides(overrides_file)

    assert overrides.ignore_minion_ids == frozenset({68, 69})
    assert overrides.ignore_emote_ids == frozenset({82})
    assert overrides.ignore_barding_ids == frozenset()
    assert overrides.ignore_fashion_accessory_ids == frozenset()


def test_missing_data_overrides_are_empty(tmp_path, caplog):
    overrides = load_data_overrides(tmp_path.joinpath("missing.json"))

    assert overrides == DataOverrides()
    assert "Data overrides not found" in caplog.text


def test_shipped_data_overrides_load():
    assert isinstance(load_data_overrides(), DataOverrides)
