"""
XIV Collections Arg Parser to determine what actions to take
"""

import argparse
import logging
import pathlib
from typing import List, Optional

from . import constants

LOGGER = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments from user to determine how to
    build the collections and where to write them.
    :param argv: Arguments to parse, defaults to sys.argv
    :return: Namespace of requests
    """
    parser = argparse.ArgumentParser("xivcollections")

    parser.add_argument(
        "--data-path",
        "-d",
        type=pathlib.Path,
        default=None,
        help="Directory of <Sheet>.json dumps. Defaults to [Dataset] data_path.",
    )
    parser.add_argument(
        "--player",
        type=int,
        nargs=3,
        metavar=("RACE", "TRIBE", "GENDER"),
        default=None,
        help="Build hairstyles for this race, tribe and gender instead of the default character.",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=pathlib.Path,
        default=constants.OUTPUT_PATH.joinpath("collections.json"),
        help="File to write the catalog to.",
    )
    parser.add_argument(
        "--pretty",
        "-p",
        action="store_true",
        help="When dumping JSON files, prettify the contents instead of minifying them.",
    )

    return parser.parse_args(argv)
