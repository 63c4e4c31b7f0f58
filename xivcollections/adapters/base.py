"""Base Pydantic model for adapted sheet rows."""

from typing import Annotated, Any, Mapping

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_pascal


def extract_text(value: Any) -> str:
    """
    Pull plain text out of a string cell. Cells may be plain strings,
    SeString dumps ({"Text": ...}) or missing.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        return extract_text(value.get("Text"))
    return str(value)


def extract_row_id(value: Any) -> int:
    """
    Dereference a link cell to the row id it points at.
    Links are dumped either as the bare id or as the linked row.
    """
    if value is None:
        return 0
    if isinstance(value, Mapping):
        return extract_row_id(value.get("RowId"))
    return int(value)


def extract_link_name(value: Any) -> str:
    """Name of the row a link cell points at."""
    if isinstance(value, Mapping):
        return extract_text(value.get("Name"))
    return extract_text(value)


SeText = Annotated[str, BeforeValidator(extract_text)]
RowLink = Annotated[int, BeforeValidator(extract_row_id)]
LinkName = Annotated[str, BeforeValidator(extract_link_name)]
Number = Annotated[int, BeforeValidator(lambda value: 0 if value is None else value)]


class XivSheetRow(BaseModel):
    """
    One adapted row. Raw rows use the game's PascalCase column names,
    adapted rows expose snake_case fields.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_pascal,
        populate_by_name=True,
        extra="ignore",
    )

    row_id: int
