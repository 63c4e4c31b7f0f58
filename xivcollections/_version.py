"""Dynamic version read from xivcollections.properties."""

import configparser
import pathlib

_config = configparser.ConfigParser()
_config.read(pathlib.Path(__file__).parent / "resources" / "xivcollections.properties")
__version__ = _config.get("XIVCOLLECTIONS", "version", fallback="1.0.0+fallback")
