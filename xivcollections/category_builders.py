"""
Category builders.

Each builder reads one sheet, keeps the rows passing its category's
predicate and maps them through the collectible factory. Rows are filtered
in chunks on a gevent pool; chunks are gathered back in sheet order, so the
output matches a sequential filter.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, FrozenSet, List, Optional, Sequence

from . import constants, data_overrides
from .adapters import (
    SUPPORTED_EQUIP_SLOTS,
    ActionRow,
    BuddyEquipRow,
    CharaMakeCustomizeRow,
    ClassJobRow,
    CompanionRow,
    EmoteRow,
    GlassesRow,
    HairMakeTypeRow,
    ItemAdapter,
    MountRow,
    OrchestrionRow,
    OrnamentRow,
    StainRow,
    TripleTriadCardRow,
    XivSheetRow,
)
from .categories import CollectibleCategory
from .classes import XivCollectible
from .collectible_cache import CollectibleFactory
from .errors import SourceStructureError
from .parallel_call import parallel_call
from .player import PlayerAttributes, resolve_player_attributes
from .sheet_cache import SheetCache
from .sheets import Sheet
from .utils import chunked

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildContext:
    """
    Everything a builder needs besides its own rules
    """

    sheets: SheetCache
    factory: CollectibleFactory
    pool_size: int = constants.DEFAULT_POOL_SIZE
    chunk_size: int = constants.DEFAULT_CHUNK_SIZE


def select_collectibles(
    context: BuildContext,
    category: CollectibleCategory,
    rows: Sequence[Any],
    predicate: Callable[[Any], bool],
) -> List[XivCollectible]:
    """
    Filter rows and map the survivors to their cached collectibles
    :param context: Build context
    :param category: Category the collectibles belong to
    :param rows: Adapted rows in sheet order
    :param predicate: Category filter
    :return: Collectibles in sheet order
    """
    cache = context.factory.get_cache(category)

    def _select_chunk(chunk: Sequence[Any]) -> List[XivCollectible]:
        return [cache.get_object(row) for row in chunk if predicate(row)]

    return parallel_call(
        _select_chunk,
        chunked(rows, context.chunk_size),
        fold_list=True,
        pool_size=context.pool_size,
    )


# Predicates. Cheap checks come first and short circuit the rest.


def is_glamour(row: ItemAdapter) -> bool:
    return (
        row.level_equip >= 1
        and row.equip_slot in SUPPORTED_EQUIP_SLOTS
        and row.row_id > constants.GLAMOUR_MIN_ROW_ID
    )


def is_mount(row: MountRow) -> bool:
    return row.singular != "" and row.order != -1


def is_minion(row: CompanionRow) -> bool:
    return (
        row.singular != ""
        and row.row_id not in data_overrides.DATA_OVERRIDES.ignore_minion_ids
    )


def is_emote(row: EmoteRow) -> bool:
    return (
        row.name != ""
        and row.icon != 0
        and row.row_id not in data_overrides.DATA_OVERRIDES.ignore_emote_ids
        and row.unlock_link != 0
    )


def is_triple_triad_card(row: TripleTriadCardRow) -> bool:
    return row.name != "" and row.name != "0"


def is_blue_mage_action(row: ActionRow) -> bool:
    return row.class_job == constants.BLUE_MAGE_CLASS_JOB_ID and row.name != ""


def is_barding(row: BuddyEquipRow) -> bool:
    return (
        row.name != ""
        and row.row_id not in data_overrides.DATA_OVERRIDES.ignore_barding_ids
    )


def is_orchestrion_roll(row: OrchestrionRow) -> bool:
    return row.name != "" and row.name != "0"


def is_outfit(row: ItemAdapter) -> bool:
    return (
        row.level_equip >= 1
        and row.item_ui_category == constants.OUTFIT_ITEM_UI_CATEGORY_ID
    )


def is_framer_kit(row: ItemAdapter) -> bool:
    return row.item_action_type == constants.FRAMER_KIT_ITEM_ACTION_TYPE


def is_fashion_accessory(row: OrnamentRow) -> bool:
    return (
        row.icon != 0
        and row.row_id not in data_overrides.DATA_OVERRIDES.ignore_fashion_accessory_ids
    )


def is_glasses(row: GlassesRow) -> bool:
    return row.icon != 0 and row.name == row.style_name


def is_supported_class_job(row: ClassJobRow) -> bool:
    # Drops the base classes and the junk rows at the end of the sheet
    return row.class_job_category > 0 and (
        row.doh_dol_job_index >= 0 or row.job_index > 0
    )


def is_supported_stain(row: StainRow) -> bool:
    return row.name != ""


def get_available_hairstyle_ids(
    hair_make_types: Sequence[HairMakeTypeRow], attributes: PlayerAttributes
) -> FrozenSet[int]:
    """
    Work out which CharaMakeCustomize rows are hairstyles for a character
    :param hair_make_types: Adapted HairMakeType sheet
    :param attributes: Race, tribe and gender to look up
    :return: Non-zero hairstyle row ids from the "Hairstyle" menu
    """
    parameters = next(
        (
            row
            for row in hair_make_types
            if row.race == attributes.race
            and row.tribe == attributes.tribe
            and row.gender == attributes.gender
        ),
        None,
    )
    if parameters is None:
        LOGGER.error(f"No HairMakeType row for {attributes}")
        raise SourceStructureError(f"No HairMakeType row for {attributes}")

    hairstyle_menu = next(
        (
            entry
            for entry in parameters.chara_make_struct
            if entry.menu == constants.HAIRSTYLE_MENU_LABEL
        ),
        None,
    )
    if hairstyle_menu is None:
        LOGGER.error(
            f"HairMakeType row {parameters.row_id} has no "
            f"'{constants.HAIRSTYLE_MENU_LABEL}' menu"
        )
        raise SourceStructureError(
            f"HairMakeType row {parameters.row_id} has no "
            f"'{constants.HAIRSTYLE_MENU_LABEL}' menu"
        )

    return frozenset(row_id for row_id in hairstyle_menu.sub_menu_param if row_id != 0)


# Builders


def build_glamour(context: BuildContext) -> List[XivCollectible]:
    return select_collectibles(
        context,
        CollectibleCategory.GLAMOUR,
        context.sheets.get_sheet(Sheet.ITEM),
        is_glamour,
    )


def build_mounts(context: BuildContext) -> List[XivCollectible]:
    return select_collectibles(
        context,
        CollectibleCategory.MOUNT,
        context.sheets.get_sheet(Sheet.MOUNT),
        is_mount,
    )


def build_minions(context: BuildContext) -> List[XivCollectible]:
    return select_collectibles(
        context,
        CollectibleCategory.MINION,
        context.sheets.get_sheet(Sheet.COMPANION),
        is_minion,
    )


def build_emotes(context: BuildContext) -> List[XivCollectible]:
    return select_collectibles(
        context,
        CollectibleCategory.EMOTE,
        context.sheets.get_sheet(Sheet.EMOTE),
        is_emote,
    )


def build_hairstyles(
    context: BuildContext, player: Optional[Any] = None
) -> List[XivCollectible]:
    """
    Build the hairstyles a character can unlock. Without a player the
    reference character (Hyur Midlander male) is used.
    :param context: Build context
    :param player: None, PlayerAttributes, or a player object
    :return: Hairstyle collectibles in sheet order
    """
    attributes = resolve_player_attributes(player)
    available_ids = get_available_hairstyle_ids(
        context.sheets.get_sheet(Sheet.HAIR_MAKE_TYPE), attributes
    )

    def _is_available_hairstyle(row: CharaMakeCustomizeRow) -> bool:
        return row.is_purchasable and row.row_id in available_ids

    return select_collectibles(
        context,
        CollectibleCategory.HAIRSTYLE,
        context.sheets.get_sheet(Sheet.CHARA_MAKE_CUSTOMIZE),
        _is_available_hairstyle,
    )


def build_triple_triad_cards(context: BuildContext) -> List[XivCollectible]:
    return select_collectibles(
        context,
        CollectibleCategory.TRIPLE_TRIAD,
        context.sheets.get_sheet(Sheet.TRIPLE_TRIAD_CARD),
        is_triple_triad_card,
    )


def build_blue_mage_actions(context: BuildContext) -> List[XivCollectible]:
    return select_collectibles(
        context,
        CollectibleCategory.BLUE_MAGE,
        context.sheets.get_sheet(Sheet.ACTION),
        is_blue_mage_action,
    )


def build_bardings(context: BuildContext) -> List[XivCollectible]:
    return select_collectibles(
        context,
        CollectibleCategory.BARDING,
        context.sheets.get_sheet(Sheet.BUDDY_EQUIP),
        is_barding,
    )


def build_orchestrion_rolls(context: BuildContext) -> List[XivCollectible]:
    return select_collectibles(
        context,
        CollectibleCategory.ORCHESTRION_ROLL,
        context.sheets.get_sheet(Sheet.ORCHESTRION),
        is_orchestrion_roll,
    )


def build_outfits(context: BuildContext) -> List[XivCollectible]:
    return select_collectibles(
        context,
        CollectibleCategory.OUTFIT,
        context.sheets.get_sheet(Sheet.ITEM),
        is_outfit,
    )


def build_framer_kits(context: BuildContext) -> List[XivCollectible]:
    return select_collectibles(
        context,
        CollectibleCategory.FRAMER_KIT,
        context.sheets.get_sheet(Sheet.ITEM),
        is_framer_kit,
    )


def build_fashion_accessories(context: BuildContext) -> List[XivCollectible]:
    return select_collectibles(
        context,
        CollectibleCategory.FASHION_ACCESSORY,
        context.sheets.get_sheet(Sheet.ORNAMENT),
        is_fashion_accessory,
    )


def build_glasses(context: BuildContext) -> List[XivCollectible]:
    return select_collectibles(
        context,
        CollectibleCategory.GLASSES,
        context.sheets.get_sheet(Sheet.GLASSES),
        is_glasses,
    )


CATEGORY_BUILDERS: Dict[CollectibleCategory, Callable[[BuildContext], List[XivCollectible]]] = {
    CollectibleCategory.GLAMOUR: build_glamour,
    CollectibleCategory.MOUNT: build_mounts,
    CollectibleCategory.MINION: build_minions,
    CollectibleCategory.EMOTE: build_emotes,
    CollectibleCategory.HAIRSTYLE: build_hairstyles,
    CollectibleCategory.TRIPLE_TRIAD: build_triple_triad_cards,
    CollectibleCategory.BLUE_MAGE: build_blue_mage_actions,
    CollectibleCategory.BARDING: build_bardings,
    CollectibleCategory.ORCHESTRION_ROLL: build_orchestrion_rolls,
    CollectibleCategory.OUTFIT: build_outfits,
    CollectibleCategory.FRAMER_KIT: build_framer_kits,
    CollectibleCategory.FASHION_ACCESSORY: build_fashion_accessories,
    CollectibleCategory.GLASSES: build_glasses,
}


def select_rows(
    sheets: SheetCache, sheet: Sheet, predicate: Callable[[Any], bool]
) -> List[XivSheetRow]:
    """
    Filter a sheet's adapted rows without building collectibles
    :param sheets: Sheet cache
    :param sheet: Sheet to read
    :param predicate: Row filter
    :return: Matching rows in sheet order
    """
    return [row for row in sheets.get_sheet(sheet) if predicate(row)]
