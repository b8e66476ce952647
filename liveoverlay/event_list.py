"""Events of the running game, sorted by kind and cleared of duplicates."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from .events import (
    IngameEvent,
    Inhibitor,
    InhibitorKilledEvent,
    InhibitorPosition,
    TurretKilledEvent,
)
from .game_types import TeamType

_log = logging.getLogger(__name__)

OTHER_EVENTS = ""
_MINIMUM_TIME_UNTIL_FIRST_DRAGON = 300.0
_UINT32 = 0xFFFFFFFF


def _same_text(left: str, right: str) -> bool:
    return left.lower() == right.lower()


def _atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does; 0 if there is none."""
    text = text.lstrip(" \t\n\r\f\v")
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    digits = ""
    for char in text:
        if not char.isdigit():
            break
        digits += char
    return sign * int(digits) if digits else 0


def _truncating_div(value: int, divisor: int) -> int:
    quotient = abs(value) // divisor
    return quotient if value >= 0 else -quotient


def _is_duplicate(stored: Iterable[IngameEvent], event: IngameEvent) -> bool:
    return any(event.is_identical_to(known) for known in stored)


def _parse_inhibitor_kill(name: str, time: float, inhibitor_name: str) -> InhibitorKilledEvent | None:
    marker = inhibitor_name.find("_L")
    if marker < 0:
        return None
    position_value = _atoi(inhibitor_name[marker + 2:]) & 0xFF
    if position_value > InhibitorPosition.TOPLANE:
        return None
    team_numeric = _atoi(inhibitor_name[7:]) & _UINT32
    team_value = (team_numeric // 100 - 1) & _UINT32
    if team_value not in (TeamType.BLUE, TeamType.RED):
        return None
    position = InhibitorPosition(position_value)
    team = TeamType(team_value)
    return InhibitorKilledEvent(name, time, Inhibitor(int(position), team, position, inhibitor_name))


def _turret_destroyer(turret_name: str) -> TeamType:
    destroyed_team = _truncating_div(_atoi(turret_name[8:]), 100) - 1
    return TeamType.RED if destroyed_team == 0 else TeamType.BLUE


class RiotEventList:
    """Events up to the current game time, keyed by event name.

    Inhibitor and turret kills come from the event document; dragon, baron
    and rift herald kills come from the epic takedowns already known.
    All other events are kept under the empty name.
    """

    def __init__(
        self,
        document: Mapping[str, Any],
        epic_takedowns_known: Sequence[IngameEvent],
        current_ingame_time: float,
    ):
        self._game_started = False
        self._turrets_destroyed: dict[TeamType, int] = {TeamType.BLUE: 0, TeamType.RED: 0}
        inhibitor_kills: list[IngameEvent] = []
        turret_kills: list[IngameEvent] = []
        other_events: list[IngameEvent] = []

        for entry in document["Events"]:
            name = entry["EventName"]
            time = float(entry["EventTime"])
            if current_ingame_time < time:
                continue
            _log.debug("event: %s", entry)
            if _same_text(IngameEvent.INHIBITOR_KILLED, name):
                event = _parse_inhibitor_kill(name, time, entry["InhibKilled"])
                if event is not None and not _is_duplicate(inhibitor_kills, event):
                    inhibitor_kills.append(event)
            elif _same_text(IngameEvent.TURRET_KILLED, name):
                turret_name = entry["TurretKilled"]
                destroyer = _turret_destroyer(turret_name)
                event = TurretKilledEvent(name, time, turret_name, destroyer)
                if not _is_duplicate(turret_kills, event):
                    self._turrets_destroyed[destroyer] += 1
                    turret_kills.append(event)
            else:
                if _same_text(IngameEvent.GAME_STARTED, name):
                    self._game_started = True
                event = IngameEvent(name, time)
                if not _is_duplicate(other_events, event):
                    other_events.append(event)

        drakes: list[IngameEvent] = []
        barons: list[IngameEvent] = []
        rift_heralds: list[IngameEvent] = []
        for event in epic_takedowns_known:
            if event.time > current_ingame_time:
                continue
            if _same_text(IngameEvent.BARON_KILLED, event.name):
                barons.append(event)
            elif _same_text(IngameEvent.DRAKE_KILLED, event.name):
                if event.time <= _MINIMUM_TIME_UNTIL_FIRST_DRAGON:
                    continue
                drakes.append(event)
            elif _same_text(IngameEvent.RIFT_HERALD_KILLED, event.name):
                rift_heralds.append(event)

        self._events: dict[str, list[IngameEvent]] = {
            IngameEvent.INHIBITOR_KILLED: inhibitor_kills,
            IngameEvent.TURRET_KILLED: turret_kills,
            IngameEvent.DRAKE_KILLED: drakes,
            IngameEvent.BARON_KILLED: barons,
            IngameEvent.RIFT_HERALD_KILLED: rift_heralds,
            OTHER_EVENTS: other_events,
        }

    def events_by_name(self, event_name: str) -> list[IngameEvent]:
        """Events stored under ``event_name``; raises KeyError for an unknown name."""
        return self._events[event_name]

    @property
    def game_started(self) -> bool:
        return self._game_started

    def turrets_destroyed_by(self, team: TeamType) -> int:
        """Turrets destroyed by ``team``; raises KeyError for a team without a count."""
        return self._turrets_destroyed[team]