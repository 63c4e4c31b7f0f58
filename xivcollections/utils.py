"""
XIV Collections simple utilities
"""

import contextlib
import logging
import os
import time
from typing import Iterator, List, Sequence, TypeVar

from . import constants

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


def init_logger() -> None:
    """
    Initialize the main system logger
    """
    constants.LOG_PATH.mkdir(parents=True, exist_ok=True)

    start_time = time.strftime("%Y-%m-%d_%H.%M.%S")

    logging.basicConfig(
        level=(
            logging.DEBUG
            if os.environ.get("XIVCOLLECTIONS_DEBUG", "").lower() in ["true", "1"]
            else logging.INFO
        ),
        format="[%(levelname)s] %(asctime)s: %(message)s",
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(
                str(constants.LOG_PATH.joinpath(f"xivcollections_{start_time}.log"))
            ),
        ],
    )


@contextlib.contextmanager
def log_duration(label: str, logger: logging.Logger = LOGGER) -> Iterator[None]:
    """
    Log how long the wrapped block took to run
    :param label: What is being timed
    :param logger: Logger to report through
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        logger.debug(f"{label} took {time.perf_counter() - start:.3f}s")


def chunked(items: Sequence[T], chunk_size: int) -> List[Sequence[T]]:
    """
    Split a sequence into consecutive slices, keeping the original order
    :param items: Sequence to split
    :param chunk_size: Max items per slice
    :return: Slices in order
    """
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    return [items[i : i + chunk_size] for i in range(0, len(items), chunk_size)]
