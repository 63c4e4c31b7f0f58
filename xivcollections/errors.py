"""
XIV Collections exception types
"""


class CollectionsError(Exception):
    """
    Base class for every error raised while populating collections
    """


class CollectionNotPopulatedError(CollectionsError, KeyError):
    """
    A collection was requested for a category that was never populated
    """

    def __str__(self) -> str:
        # KeyError quotes its argument, keep the message readable
        return str(self.args[0]) if self.args else ""


class SourceStructureError(CollectionsError, LookupError):
    """
    The row source is missing reference data the builders depend on,
    such as the character creation parameters used for hairstyles
    """
