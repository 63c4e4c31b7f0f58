"""
Row source reading sheet dumps from a directory of JSON files
"""

import json
import logging
import pathlib
import threading
from typing import Any, Dict, List, Sequence

from ..sheets import Sheet
from .abstract_row_source import AbstractRowSource, RawRow

LOGGER = logging.getLogger(__name__)


class JsonRowSource(AbstractRowSource):
    """
    Each sheet lives in <data_path>/<Sheet>.json, either as a list of rows
    or as an object mapping row ids to rows. Files are read on first use.
    """

    data_path: pathlib.Path
    __sheets: Dict[Sheet, List[RawRow]]

    def __init__(self, data_path: pathlib.Path) -> None:
        self.data_path = pathlib.Path(data_path)
        self.__sheets = {}
        self.__lock = threading.Lock()

        if not self.data_path.is_dir():
            LOGGER.error(f"Sheet directory not found: {self.data_path}")
            raise FileNotFoundError(self.data_path)

    def get_rows(self, sheet: Sheet) -> Sequence[RawRow]:
        with self.__lock:
            if sheet not in self.__sheets:
                self.__sheets[sheet] = self.__load_sheet(sheet)
            return self.__sheets[sheet]

    def __load_sheet(self, sheet: Sheet) -> List[RawRow]:
        """
        Read one sheet dump
        :param sheet: Sheet to read
        :return: Rows in file order
        """
        file_path = self.data_path.joinpath(f"{sheet.value}.json")
        if not file_path.exists():
            LOGGER.warning(f"Sheet dump not found: {file_path}")
            return []

        with file_path.open(encoding="utf-8") as file:
            contents: Any = json.load(file)

        if isinstance(contents, dict):
            rows = [{"RowId": int(row_id), **row} for row_id, row in contents.items()]
        else:
            rows = list(contents)

        LOGGER.debug(f"Loaded {len(rows):,} rows from {file_path.name}")
        return rows
