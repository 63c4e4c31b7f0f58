"""
XIV Collections output generator
"""

import json
import logging
import pathlib
from typing import Any, Dict

from . import constants
from .collections_config import CollectionsConfig
from .registry import CollectionRegistry

LOGGER = logging.getLogger(__name__)


def build_catalog(registry: CollectionRegistry) -> Dict[str, Any]:
    """
    Project the registry into a JSON friendly catalog
    :param registry: Populated registry
    :return: Catalog with a meta block and one list per collection
    """
    return {
        "meta": {"date": constants.BUILD_DATE, "version": CollectionsConfig().version},
        "data": {
            name: [collectible.to_json() for collectible in collection]
            for name, collection in registry.get_all_collections().items()
        },
    }


def write_catalog(
    registry: CollectionRegistry, output_file: pathlib.Path, pretty_print: bool
) -> None:
    """
    Dump the catalog to a file
    :param registry: Populated registry
    :param output_file: File to dump to
    :param pretty_print: Pretty or minimal
    """
    output_file.parent.mkdir(parents=True, exist_ok=True)

    with output_file.open("w", encoding="utf-8") as file:
        json.dump(
            obj=build_catalog(registry),
            fp=file,
            indent=(4 if pretty_print else None),
            ensure_ascii=False,
        )

    LOGGER.info(f"Wrote catalog to {output_file}")
