"""
Character creation sheets used to work out which hairstyles a
race/tribe/gender combination can wear.
"""

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_pascal

from .base import LinkName, Number, RowLink, SeText, XivSheetRow


class CharaMakeStructEntry(BaseModel):
    """
    One creation menu; `menu` is the label text of the linked Lobby row
    """

    model_config = ConfigDict(
        frozen=True, alias_generator=to_pascal, populate_by_name=True, extra="ignore"
    )

    menu: SeText = ""
    sub_menu_param: Tuple[RowLink, ...] = ()


class HairMakeTypeRow(XivSheetRow):
    race: RowLink = 0
    tribe: RowLink = 0
    gender: Number = 0
    chara_make_struct: Tuple[CharaMakeStructEntry, ...] = ()


class CharaMakeCustomizeRow(XivSheetRow):
    feature_id: Number = Field(default=0, alias="FeatureID")
    icon: Number = 0
    is_purchasable: bool = False
    hint_item_name: LinkName = Field(default="", alias="HintItem")
