"""Adapters for the smaller sheets backing single collections."""

from pydantic import Field

from .base import LinkName, Number, RowLink, SeText, XivSheetRow


class MountRow(XivSheetRow):
    singular: SeText = ""
    description: SeText = ""
    icon: Number = 0
    order: Number = 0


class CompanionRow(XivSheetRow):
    singular: SeText = ""
    icon: Number = 0


class EmoteRow(XivSheetRow):
    name: SeText = ""
    icon: Number = 0
    unlock_link: Number = 0


class TripleTriadCardRow(XivSheetRow):
    name: SeText = ""
    description: SeText = ""


class ActionRow(XivSheetRow):
    name: SeText = ""
    icon: Number = 0
    class_job: RowLink = 0


class BuddyEquipRow(XivSheetRow):
    name: SeText = ""
    icon_head: Number = 0


class OrchestrionRow(XivSheetRow):
    name: SeText = ""
    description: SeText = ""


class OrnamentRow(XivSheetRow):
    singular: SeText = ""
    icon: Number = 0


class GlassesRow(XivSheetRow):
    """
    Glasses row; `style_name` is the name of the linked GlassesStyle row
    """

    name: SeText = ""
    icon: Number = 0
    style_name: LinkName = Field(default="", alias="Style")


class StainRow(XivSheetRow):
    name: SeText = ""
    color: Number = 0
    shade: Number = 0


class ClassJobRow(XivSheetRow):
    name: SeText = ""
    abbreviation: SeText = ""
    class_job_category: RowLink = 0
    job_index: Number = 0
    doh_dol_job_index: Number = 0
