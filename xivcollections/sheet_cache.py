"""
Adapted sheet cache
"""

import logging
import threading
from typing import Dict, List, Tuple

import pydantic

from .adapters import SHEET_ADAPTERS, XivSheetRow
from .providers import AbstractRowSource
from .sheets import Sheet

LOGGER = logging.getLogger(__name__)


class SheetCache:
    """
    Adapts each sheet of a row source once and keeps the adapted rows.
    Safe to call from several workers; a sheet adapted twice by a race
    keeps whichever copy was stored first.
    """

    row_source: AbstractRowSource
    __sheets: Dict[Sheet, Tuple[XivSheetRow, ...]]

    def __init__(self, row_source: AbstractRowSource) -> None:
        self.row_source = row_source
        self.__sheets = {}
        self.__lock = threading.Lock()

    def get_sheet(self, sheet: Sheet) -> Tuple[XivSheetRow, ...]:
        """
        Get a sheet's rows, adapted. Rows that cannot be adapted are
        logged and left out, the same as rows a filter rejects.
        :param sheet: Sheet to read
        :return: Adapted rows in source order
        """
        cached = self.__sheets.get(sheet)
        if cached is not None:
            return cached

        adapter = SHEET_ADAPTERS[sheet]
        rows: List[XivSheetRow] = []
        for raw_row in self.row_source.get_rows(sheet):
            try:
                rows.append(adapter.model_validate(raw_row))
            except pydantic.ValidationError as error:
                LOGGER.warning(
                    f"Skipping {sheet.value} row {raw_row.get('RowId')!r}: {error}"
                )
        LOGGER.debug(f"Adapted {len(rows):,} {sheet.value} rows")

        with self.__lock:
            return self.__sheets.setdefault(sheet, tuple(rows))
