"""Differences between two consecutive snapshots of a running game."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .event_list import RiotEventList
from .events import (
    DragonKilledEvent,
    IngameEvent,
    InhibitorKilledEvent,
    InhibitorRespawnedEvent,
)
from .game_types import DragonType, EpicMonsterType, TeamType
from .players import INVENTORY_SLOTS, Item, PlayerList, PlayerSnapshot, Team

FLOAT_MAX = 3.4028234663852886e38
_SOUL_DRAGON_COUNT = 4
_SOULPOINT_DRAGON_COUNT = 3


@dataclass(frozen=True)
class LevelupDelta:
    """A player who gained levels between two snapshots."""

    snapshot: PlayerSnapshot
    previous_level: int
    current_level: int


class DragonKillHistory:
    """Dragons killed so far, per team and per kill time."""

    def __init__(self):
        self._kills_per_team: dict[TeamType, int] = {TeamType.BLUE: 0, TeamType.RED: 0}
        self._kills_by_time: dict[float, tuple[TeamType, DragonType]] = {}

    def add_dragon(self, team: TeamType, dragon_type: DragonType, kill_time: float) -> None:
        """Record a dragon kill; raises KeyError for a team without a count."""
        self._kills_per_team[team] = self._kills_per_team[team] + 1
        self._kills_by_time[kill_time] = (team, dragon_type)

    @property
    def last_kill_timepoint(self) -> float:
        return max(self._kills_by_time, default=0.0)

    @property
    def soulpoint_type(self) -> DragonType:
        """The type of the latest dragon once three are down and no team holds the soul."""
        if (
            len(self._kills_by_time) >= _SOULPOINT_DRAGON_COUNT
            and self._kills_per_team[TeamType.BLUE] < _SOUL_DRAGON_COUNT
            and self._kills_per_team[TeamType.RED] < _SOUL_DRAGON_COUNT
        ):
            return self._kills_by_time[self.last_kill_timepoint][1]
        return DragonType.UNKNOWN

    @property
    def is_soul_acquired(self) -> bool:
        return any(count >= _SOUL_DRAGON_COUNT for count in self._kills_per_team.values())


def _is_completed_item(item: Item | None) -> bool:
    return item is not None and (item.is_legendary or item.is_mythic)


def _per_minute(amount: int, gametime: float) -> float:
    minutes = gametime / 60.0
    if minutes == 0:
        return math.nan if amount == 0 else math.copysign(math.inf, minutes) * amount
    return amount / minutes


class SnapshotDelta:
    """What changed between two player lists, plus the state of the event lists.

    Per-player results (``items_finished``, ``creeps_per_minute``) are keyed
    by spectator slot.
    """

    def __init__(
        self,
        previous: PlayerList | None,
        current: PlayerList | None,
        previous_events: RiotEventList,
        events: RiotEventList,
    ):
        self.levelups: list[LevelupDelta] = []
        self.items_finished: dict[int, list[Item]] = {}
        self.creeps_per_minute: dict[int, float] = {}
        self.recovering_inhibitors: list[InhibitorKilledEvent] = []
        self.respawned_inhibitors: list[InhibitorRespawnedEvent] = []
        self.game_started = False
        self._team_kills: dict[TeamType, int] = {TeamType.BLUE: 0, TeamType.RED: 0}
        self._last_epic_kill_times: dict[EpicMonsterType, float] = {
            EpicMonsterType.BARON_NASHOR: 840.0,
            EpicMonsterType.RIFT_HERALD: 120.0,
            EpicMonsterType.DRAGON: 0.0,
            EpicMonsterType.ELDER_DRAGON: FLOAT_MAX,
        }
        self._dragon_history = DragonKillHistory()

        self.current_game_time = current.gametime if current is not None else 0.0
        if previous is not None and current is not None and previous.gametime < current.gametime:
            self._handle_team(previous.blue_team, current.blue_team, current.gametime)
            self._handle_team(previous.red_team, current.red_team, current.gametime)

        self._handle_inhibitors(previous_events, events)
        self._handle_epic_kills(events)
        self._turret_kills: dict[TeamType, int] = {
            team: events.turrets_destroyed_by(team) for team in (TeamType.BLUE, TeamType.RED)
        }

    def _handle_team(self, previous_team: Team, current_team: Team, gametime: float) -> None:
        for slot, champ_previous in previous_team.champions.items():
            champ_current = current_team.snapshot_by_slot(champ_previous.spectator_slot)
            if champ_previous.level < champ_current.level:
                self.levelups.append(
                    LevelupDelta(champ_current, champ_previous.level, champ_current.level)
                )
            finished = [
                item
                for item in champ_current.inventory[:INVENTORY_SLOTS]
                if _is_completed_item(item) and not champ_previous.has_inventory_item(item.id)
            ]
            if finished:
                self.items_finished[champ_current.spectator_slot] = finished
            team = previous_team.team_type
            self._team_kills[team] = self._team_kills[team] + champ_current.champs_killed
            self.creeps_per_minute.setdefault(
                champ_current.spectator_slot, _per_minute(champ_current.creeps_killed, gametime)
            )

    def _handle_inhibitors(self, previous_events: RiotEventList, events: RiotEventList) -> None:
        for event in events.events_by_name(IngameEvent.INHIBITOR_KILLED):
            event.update_remaining_time(self.current_game_time)
            if event.is_active:
                self.recovering_inhibitors.append(event)
        for previous_event in previous_events.events_by_name(IngameEvent.INHIBITOR_KILLED):
            still_down = any(
                inhib.inhibitor.position == previous_event.inhibitor.position
                and inhib.inhibitor.team == previous_event.inhibitor.team
                for inhib in self.recovering_inhibitors
            )
            if not still_down and previous_event.is_active:
                self.respawned_inhibitors.append(
                    InhibitorRespawnedEvent(
                        IngameEvent.INHIBITOR_RESPAWNED,
                        self.current_game_time,
                        previous_event.inhibitor,
                    )
                )

    def _handle_epic_kills(self, events: RiotEventList) -> None:
        now = self.current_game_time
        for event in events.events_by_name(IngameEvent.BARON_KILLED):
            if event.time < now:
                self._last_epic_kill_times[EpicMonsterType.BARON_NASHOR] = event.time

        for event in events.events_by_name(IngameEvent.DRAKE_KILLED):
            if event.time >= now or not isinstance(event, DragonKilledEvent):
                continue
            self._dragon_history.add_dragon(event.buffed_team, event.dragon_type, event.time)
            if event.dragon_type == DragonType.ELDER or self._dragon_history.is_soul_acquired:
                self._last_epic_kill_times[EpicMonsterType.DRAGON] = 0.0
                self._last_epic_kill_times[EpicMonsterType.ELDER_DRAGON] = event.time
            else:
                self._last_epic_kill_times[EpicMonsterType.DRAGON] = event.time

        for event in events.events_by_name(IngameEvent.RIFT_HERALD_KILLED):
            if event.time < now:
                self._last_epic_kill_times[EpicMonsterType.RIFT_HERALD] = event.time

    def last_kill_time(self, monster_type: EpicMonsterType) -> float:
        """The latest kill time of a monster type, or the largest float if unknown."""
        return self._last_epic_kill_times.get(monster_type, FLOAT_MAX)

    def turrets_killed_by(self, team: TeamType) -> int:
        return self._turret_kills[team]

    def kills_by(self, team: TeamType) -> int:
        return self._team_kills[team]

    @property
    def is_current_dragon_soulpoint(self) -> bool:
        soulpoint = self._dragon_history.soulpoint_type
        return soulpoint not in (DragonType.UNKNOWN, DragonType.ELDER)

    @property
    def dragon_soulpoint_type(self) -> DragonType:
        return self._dragon_history.soulpoint_type

    @property
    def is_dragon_soul_acquired(self) -> bool:
        return self._dragon_history.is_soul_acquired