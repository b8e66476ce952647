"""In-game events reported by the live client, and their duplicate detection."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .game_types import DragonType, TeamType, dragon_internal_name, dragon_type_from_name


def _same_text(left: str, right: str) -> bool:
    return left.lower() == right.lower()


def _within(first: float, second: float, limit: float) -> bool:
    return int(abs(first - second)) <= limit


class IngameEvent:
    """An event with a name and the game time it occurred at."""

    GAME_STARTED = "GameStart"
    BARON_KILLED = "OnKillWorm_Spectator"
    DRAKE_KILLED = "OnKillDragon_Spectator"
    RIFT_HERALD_KILLED = "OnKillRiftHerald_Spectator"
    TURRET_KILLED = "TurretKilled"
    INHIBITOR_KILLED = "InhibKilled"
    INHIBITOR_RESPAWNED = "SELFCREATED_EVENT_InhibKilled"

    def __init__(self, name: str, time: float):
        self.name = name
        self.time = time

    def is_identical_to(self, other: IngameEvent | None) -> bool:
        """True when ``other`` has the same name, ignoring case."""
        return other is not None and _same_text(self.name, other.name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, time={self.time!r})"


class InhibitorPosition(IntEnum):
    BOTLANE = 0
    MIDLANE = 1
    TOPLANE = 2
    INHIBITOR_POSITIONS_AMOUNT = 3
    UNKNOWN = 0xFF


@dataclass(frozen=True)
class Inhibitor:
    id: int
    team: TeamType
    position: InhibitorPosition
    name: str


class InhibitorKilledEvent(IngameEvent):
    """An inhibitor destroyed; it respawns a fixed time later."""

    RESPAWN_SECONDS = 300.0

    def __init__(self, name: str, time: float, inhibitor: Inhibitor):
        super().__init__(name, time)
        self.inhibitor = inhibitor
        self._respawn_time = time + self.RESPAWN_SECONDS
        self._remaining_time = 0.0
        self._active = False
        self.update_remaining_time(time)

    def update_remaining_time(self, current_time: float) -> None:
        self._remaining_time = self.RESPAWN_SECONDS - (current_time - self.time)
        self._active = 0.0 < self._remaining_time < self.RESPAWN_SECONDS

    @property
    def remaining_time(self) -> float:
        return self._remaining_time

    @property
    def respawn_time(self) -> float:
        return self._respawn_time

    @property
    def is_active(self) -> bool:
        return self._active

    def is_identical_to(self, other: IngameEvent | None) -> bool:
        return (
            super().is_identical_to(other)
            and isinstance(other, InhibitorKilledEvent)
            and _same_text(other.inhibitor.name, self.inhibitor.name)
            and _within(self.time, other.time, 10.0)
        )


class InhibitorRespawnedEvent(IngameEvent):
    def __init__(self, name: str, time: float, inhibitor: Inhibitor):
        super().__init__(name, time)
        self.inhibitor = inhibitor

    def is_identical_to(self, other: IngameEvent | None) -> bool:
        return (
            super().is_identical_to(other)
            and isinstance(other, InhibitorRespawnedEvent)
            and _same_text(other.inhibitor.name, self.inhibitor.name)
            and _within(self.time, other.time, 10.0)
        )


class TurretKilledEvent(IngameEvent):
    def __init__(self, name: str, time: float, turret_name: str, destroyer_team: TeamType):
        super().__init__(name, time)
        self.turret_name = turret_name
        self.destroyer_team = destroyer_team

    def is_identical_to(self, other: IngameEvent | None) -> bool:
        return (
            super().is_identical_to(other)
            and isinstance(other, TurretKilledEvent)
            and _same_text(self.turret_name, other.turret_name)
        )


class RiftHeraldKilledEvent(IngameEvent):
    def __init__(self, name: str, time: float, kill_team: TeamType):
        super().__init__(name, time)
        self.kill_team = kill_team

    def is_identical_to(self, other: IngameEvent | None) -> bool:
        return (
            super().is_identical_to(other)
            and isinstance(other, RiftHeraldKilledEvent)
            and self.kill_team == other.kill_team
            and _within(self.time, other.time, 10.0)
        )


class DragonKilledEvent(IngameEvent):
    MINIMUM_DIFFERENCE = 300.0

    def __init__(self, name: str, time: float, dragon_type: DragonType, buffed_team: TeamType):
        super().__init__(name, time)
        self.dragon_type = dragon_type
        self.buffed_team = buffed_team

    @staticmethod
    def extract_type_from_string(name: str) -> DragonType:
        return dragon_type_from_name(name)

    @property
    def killed_dragon_name(self) -> str:
        return dragon_internal_name(self.dragon_type)

    def is_identical_to(self, other: IngameEvent | None) -> bool:
        return (
            super().is_identical_to(other)
            and isinstance(other, DragonKilledEvent)
            and other.dragon_type == self.dragon_type
            and _within(self.time, other.time, self.MINIMUM_DIFFERENCE)
        )


class BaronKilledEvent(IngameEvent):
    BUFF_SECONDS = 180.0

    def __init__(self, name: str, time: float, buffed_team: TeamType):
        super().__init__(name, time)
        self.buffed_team = buffed_team
        self._buff_expiration_time = time + self.BUFF_SECONDS

    @property
    def buff_expiration_time(self) -> float:
        return self._buff_expiration_time

    def is_identical_to(self, other: IngameEvent | None) -> bool:
        return (
            super().is_identical_to(other)
            and isinstance(other, BaronKilledEvent)
            and other.buffed_team == self.buffed_team
            and _within(self.time, other.time, 100)
        )