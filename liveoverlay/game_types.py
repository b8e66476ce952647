"""Enumerations shared across the live game model."""

from __future__ import annotations

from enum import Enum, IntEnum, auto


class TeamType(IntEnum):
    BLUE = 0
    RED = 1
    INVALID = 0xFF


class DragonType(Enum):
    UNKNOWN = auto()
    HEXTECH = auto()
    CHEMTECH = auto()
    INFERNAL = auto()
    MOUNTAIN = auto()
    CLOUD = auto()
    OCEAN = auto()
    ELDER = auto()


class EpicMonsterType(Enum):
    DRAGON = auto()
    RIFT_HERALD = auto()
    BARON_NASHOR = auto()
    ELDER_DRAGON = auto()


class LeagueIngameObjectType(IntEnum):
    UNKNOWN = 0
    CHAMPION = 1
    NEXT_DRAGON_INDICATOR = 2
    DRAGON = 3
    RIFT_HERALD = 4
    BARON = 5
    TURRET = 6
    INHIBITOR = 7


_DRAGON_NAMES: dict[DragonType, str] = {
    DragonType.UNKNOWN: "",
    DragonType.HEXTECH: "SRU_Dragon_Hextech",
    DragonType.CHEMTECH: "SRU_Dragon_Chemtech",
    DragonType.INFERNAL: "SRU_Dragon_Fire",
    DragonType.MOUNTAIN: "SRU_Dragon_Earth",
    DragonType.CLOUD: "SRU_Dragon_Air",
    DragonType.OCEAN: "SRU_Dragon_Water",
    DragonType.ELDER: "SRU_Dragon_Elder",
}

_DRAGONS_BY_NAME: dict[str, DragonType] = {name: kind for kind, name in _DRAGON_NAMES.items()}


def dragon_type_from_name(name: str) -> DragonType:
    """Map an internal dragon name such as ``SRU_Dragon_Fire`` to its type."""
    return _DRAGONS_BY_NAME.get(name, DragonType.UNKNOWN)


def dragon_internal_name(dragon_type: DragonType) -> str:
    """Return the internal game name of a dragon type."""
    return _DRAGON_NAMES[dragon_type]