"""Remembers when epic monsters were killed."""

from __future__ import annotations

from .game_types import EpicMonsterType

_TRACKED = (EpicMonsterType.DRAGON, EpicMonsterType.RIFT_HERALD, EpicMonsterType.BARON_NASHOR)


class EpicKillCache:
    """Kill times per epic monster; untracked monster types share one list."""

    def __init__(self):
        self._kill_times: dict[EpicMonsterType, list[float]] = {kind: [] for kind in _TRACKED}
        self._untracked: list[float] = []

    def _times(self, monster_type: EpicMonsterType) -> list[float]:
        return self._kill_times.get(monster_type, self._untracked)

    def add_kill_timing(
        self,
        monster_type: EpicMonsterType,
        ingame_time: float,
        respawn_time_between_kills: float = 300.0,
    ) -> bool:
        """Record a kill unless one is already known within the respawn time."""
        times = self._times(monster_type)
        if any(abs(known - ingame_time) < respawn_time_between_kills for known in times):
            return False
        times.append(ingame_time)
        return True

    def last_kill_time(self, monster_type: EpicMonsterType, current_ingame_time: float) -> float:
        """The latest recorded kill, in recording order, not after the current time; 0.0 if none."""
        last = 0.0
        for known in self._times(monster_type):
            if known > current_ingame_time:
                break
            last = known
        return last