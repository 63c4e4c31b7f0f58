"""
Row source over rows already held in memory
"""

from typing import Dict, Iterable, Mapping, Sequence, Tuple, Union

from ..sheets import Sheet
from .abstract_row_source import AbstractRowSource, RawRow


class InMemoryRowSource(AbstractRowSource):
    """
    Serves rows handed over by the host application
    """

    tables: Dict[Sheet, Tuple[RawRow, ...]]

    def __init__(self, tables: Mapping[Union[Sheet, str], Iterable[RawRow]]) -> None:
        self.tables = {
            Sheet(sheet) if isinstance(sheet, str) else sheet: tuple(rows)
            for sheet, rows in tables.items()
        }

    def get_rows(self, sheet: Sheet) -> Sequence[RawRow]:
        return self.tables.get(sheet, ())
