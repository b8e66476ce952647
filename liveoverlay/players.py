"""Snapshots of the players in a running game, grouped by team."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from .game_types import TeamType

INVENTORY_SLOTS = 7
BLUE_SLOTS = 5

_SCORES = "scores"
_CREEP_SCORE = "creepScore"
_KILLS = "kills"
_DEATHS = "deaths"
_ASSISTS = "assists"

ItemLookup = Callable[[int], "Item | None"]


@dataclass(frozen=True)
class Item:
    """An item known to the item catalogue."""

    id: int
    name: str = ""
    is_legendary: bool = False
    is_mythic: bool = False


def _no_items(_item_id: int) -> Item | None:
    return None


def _spell_name(spells: Mapping[str, Any], key: str) -> str | None:
    if key not in spells:
        return None
    return spells[key]["displayName"]


@dataclass
class PlayerSnapshot:
    """The state of one player at one moment of the game."""

    spectator_slot: int
    champion_name: str
    summoner_name: str
    level: int
    team: TeamType
    inventory: tuple[Item | None, ...]
    item_activatable: tuple[bool, ...]
    creeps_killed: int
    champs_killed: int
    deaths: int
    assists: int
    respawn_timer: float
    first_summoner_spell: str | None = None
    second_summoner_spell: str | None = None

    @classmethod
    def from_json(
        cls,
        entry: Mapping[str, Any],
        slot: int,
        item_lookup: ItemLookup | None = None,
    ) -> PlayerSnapshot:
        """Build a snapshot from one player entry of the live client's player list.

        Items unknown to ``item_lookup`` are dropped; the rest are sorted by id
        and fill the inventory from the first slot.
        """
        lookup = item_lookup if item_lookup is not None else _no_items
        can_use: dict[int, bool] = {}
        known_items: list[Item] = []
        for item_entry in entry["items"]:
            item_id = int(item_entry["itemID"])
            item = lookup(item_id)
            if item is not None:
                can_use[item_id] = bool(item_entry["canUse"])
                known_items.append(item)
        known_items.sort(key=lambda item: item.id)
        inventory = tuple(known_items[:INVENTORY_SLOTS]) + (None,) * max(
            0, INVENTORY_SLOTS - len(known_items)
        )
        activatable = tuple(True if item is None else can_use[item.id] for item in inventory)

        spells = entry["summonerSpells"]
        scores = entry[_SCORES]
        return cls(
            spectator_slot=slot,
            champion_name=entry["championName"],
            summoner_name=entry["summonerName"],
            level=int(entry["level"]),
            team=TeamType.BLUE if entry["team"].lower() == "order" else TeamType.RED,
            inventory=inventory,
            item_activatable=activatable,
            creeps_killed=int(scores[_CREEP_SCORE]),
            champs_killed=int(scores[_KILLS]),
            deaths=int(scores[_DEATHS]),
            assists=int(scores[_ASSISTS]),
            respawn_timer=float(entry["respawnTimer"]),
            first_summoner_spell=_spell_name(spells, "summonerSpellOne"),
            second_summoner_spell=_spell_name(spells, "summonerSpellTwo"),
        )

    def has_inventory_item(self, item_id: int) -> bool:
        return any(item is not None and item.id == item_id for item in self.inventory)


class Team:
    """The player snapshots of one team, keyed by spectator slot."""

    def __init__(self, team_type: TeamType = TeamType.BLUE):
        self.team_type = team_type
        self.champions: dict[int, PlayerSnapshot] = {}

    def add_snapshot(self, snapshot: PlayerSnapshot) -> None:
        """Add a snapshot; a slot already taken keeps its first snapshot."""
        self.champions.setdefault(snapshot.spectator_slot, snapshot)

    def snapshot_by_slot(self, slot: int) -> PlayerSnapshot:
        """The snapshot in ``slot``; raises KeyError if the slot is empty."""
        return self.champions[slot]

    @property
    def player_count(self) -> int:
        return len(self.champions)


class PlayerList:
    """All players at one game time: the first five slots are blue, the rest red."""

    def __init__(
        self,
        document: Iterable[Mapping[str, Any]],
        gametime: float,
        item_lookup: ItemLookup | None = None,
    ):
        self.blue_team = Team(TeamType.BLUE)
        self.red_team = Team(TeamType.RED)
        for slot, entry in enumerate(document):
            snapshot = PlayerSnapshot.from_json(entry, slot, item_lookup)
            team = self.blue_team if slot < BLUE_SLOTS else self.red_team
            team.add_snapshot(snapshot)
        self.gametime = gametime

    @property
    def total_player_count(self) -> int:
        return self.blue_team.player_count + self.red_team.player_count