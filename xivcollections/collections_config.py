"""
XIV Collections Configuration Service
"""

import configparser
import logging
import pathlib
from typing import Optional

from singleton_decorator import singleton

from . import constants


@singleton
class CollectionsConfig:
    """
    Configuration Class that loads in the appropriate configuration file
    and provides the contents for the running program
    """

    logger: logging.Logger
    config_parser: configparser.ConfigParser
    version: str
    pool_size: int
    chunk_size: int
    data_path: Optional[pathlib.Path]

    def __init__(self, config_path: Optional[pathlib.Path] = None):
        self.logger = logging.getLogger(__name__)
        self.config_parser = configparser.ConfigParser()

        config_path = config_path or constants.CONFIG_PATH
        if config_path.is_file():
            self.logger.info(f"Loading configuration from {config_path}")
            self.config_parser.read(str(config_path))
        else:
            self.logger.warning(
                f"{config_path.name} was not found ({config_path}), using defaults"
            )

        self.version = self.get("XIVCOLLECTIONS", "version", "1.0.0+fallback")
        self.pool_size = self.get_int(
            "Parallelism", "pool_size", constants.DEFAULT_POOL_SIZE
        )
        self.chunk_size = self.get_int(
            "Parallelism", "chunk_size", constants.DEFAULT_CHUNK_SIZE
        )

        data_path = self.get("Dataset", "data_path")
        self.data_path = pathlib.Path(data_path).expanduser() if data_path else None

    def get(self, section: str, option: str, fallback: str = "") -> str:
        """
        Get a specific value from configuration
        :param section: Section header
        :param option: Key in section
        :param fallback: Default value to use if key not found in section
        :returns Configuration value to use
        """
        if self.has_option(section, option):
            return self.config_parser.get(section, option, fallback=fallback)
        return fallback

    def get_int(self, section: str, option: str, fallback: int) -> int:
        """
        Get a specific value from configuration
        :param section: Section header
        :param option: Key in section
        :param fallback: Default value to use if key not found or not a number
        :returns Configuration value to use (as an Integer)
        """
        if not self.has_option(section, option):
            return fallback

        try:
            value = self.config_parser.getint(section, option)
        except ValueError:
            self.logger.warning(
                f"[{section}] {option} is not an integer, using {fallback}"
            )
            return fallback

        if value < 1:
            self.logger.warning(f"[{section}] {option} must be positive, using {fallback}")
            return fallback
        return value

    def has_option(self, section: str, option: str) -> bool:
        """
        Check if Configuration has a specific option in a specific section
        and has a defined value (ala not VAR=)
        :param section: Section header to find
        :param option: Option to find in section
        :return Does option exist in section
        """
        return (
            self.config_parser.has_option(section, option)
            and len(str(self.config_parser.get(section, option))) > 0
        )
