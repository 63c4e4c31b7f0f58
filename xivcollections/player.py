"""
Player attributes that decide which hairstyles are available
"""

import enum
from typing import Any, NamedTuple, Optional, Union

from . import constants


class CustomizeIndex(enum.IntEnum):
    """
    Positions inside a character's customize vector
    """

    RACE = 0
    GENDER = 1
    BODY_TYPE = 2
    HEIGHT = 3
    TRIBE = 4


class PlayerAttributes(NamedTuple):
    """
    Race, tribe and gender ids of a character
    """

    race: int
    tribe: int
    gender: int

    @classmethod
    def from_player(cls, player: Any) -> "PlayerAttributes":
        """
        Read the attributes out of a player's customize vector
        :param player: Object exposing an indexable `customize`
        :return: Player attributes
        """
        customize = player.customize
        return cls(
            race=int(customize[CustomizeIndex.RACE]),
            tribe=int(customize[CustomizeIndex.TRIBE]),
            gender=int(customize[CustomizeIndex.GENDER]),
        )


DEFAULT_PLAYER_ATTRIBUTES = PlayerAttributes(
    race=constants.DEFAULT_PLAYER_RACE,
    tribe=constants.DEFAULT_PLAYER_TRIBE,
    gender=constants.DEFAULT_PLAYER_GENDER,
)


def resolve_player_attributes(
    player: Optional[Union[PlayerAttributes, Any]] = None
) -> PlayerAttributes:
    """
    Turn whatever the caller has into player attributes,
    falling back to the reference character when nothing is given
    :param player: None, PlayerAttributes, or a player object
    :return: Player attributes
    """
    if player is None:
        return DEFAULT_PLAYER_ATTRIBUTES
    if isinstance(player, PlayerAttributes):
        return player
    return PlayerAttributes.from_player(player)
