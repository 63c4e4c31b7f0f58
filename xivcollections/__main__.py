"""
XIV Collections Main Executor
"""

import argparse
import logging
import traceback
from typing import List, Optional

from xivcollections.utils import init_logger

LOGGER: logging.Logger = logging.getLogger(__name__)


def dispatcher(args: argparse.Namespace) -> None:
    """
    XIV Collections Dispatcher
    """
    from xivcollections.collections_config import CollectionsConfig
    from xivcollections.output_generator import write_catalog
    from xivcollections.player import PlayerAttributes
    from xivcollections.providers import JsonRowSource
    from xivcollections.registry import CollectionRegistry

    data_path = args.data_path or CollectionsConfig().data_path
    if data_path is None:
        LOGGER.error(
            "No sheet directory given. Pass --data-path or set "
            "[Dataset] data_path in xivcollections.properties."
        )
        raise ValueError("Sheet directory not configured")

    registry = CollectionRegistry(JsonRowSource(data_path))
    registry.initialize()

    if args.player:
        registry.repopulate_for_logged_in_player(PlayerAttributes(*args.player))

    write_catalog(registry, args.output, args.pretty)


def main(argv: Optional[List[str]] = None) -> None:
    """
    XIV Collections safe main call
    """
    from xivcollections import constants
    from xivcollections.arg_parser import parse_args
    from xivcollections.collections_config import CollectionsConfig

    init_logger()
    args = parse_args(argv)

    LOGGER.info(
        f"Starting xivcollections {CollectionsConfig().version} on {constants.BUILD_DATE}"
    )

    try:
        dispatcher(args)
    except Exception as exception:
        LOGGER.fatal(f"Exception caught: {exception} {traceback.format_exc()}")
        raise


if __name__ == "__main__":
    main()
