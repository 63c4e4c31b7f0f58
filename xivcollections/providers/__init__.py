"""
Row sources the collections are built from
"""

from .abstract_row_source import AbstractRowSource, RawRow
from .json_row_source import JsonRowSource
from .memory_row_source import InMemoryRowSource

__all__ = [
    "AbstractRowSource",
    "InMemoryRowSource",
    "JsonRowSource",
    "RawRow",
]
