"""
API for how row sources need to interact with other classes
"""

import abc
from typing import Any, Mapping, Sequence

from ..sheets import Sheet

RawRow = Mapping[str, Any]


class AbstractRowSource(abc.ABC):
    """
    Abstract class to indicate what row sources should provide.
    Rows are read only and may be iterated from several workers at once.
    """

    @abc.abstractmethod
    def get_rows(self, sheet: Sheet) -> Sequence[RawRow]:
        """
        Get every row of a sheet, in the sheet's natural order
        :param sheet: Sheet to read
        :return: Raw rows, each carrying a "RowId"
        """
