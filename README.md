# liveoverlay

This package holds the building blocks of a live broadcast overlay for a running match.

- It turns the JSON documents that a live game client reports into typed events and player snapshots.
- It compares two snapshots to find out what changed.
- It finds the coloured digits in small screen captures of the score bar.
- It can write such a capture to a BMP file, for debugging.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

## Modules

### `liveoverlay.game_types`

Enums that the other modules share:

- `TeamType`
- `DragonType`
- `EpicMonsterType`
- `LeagueIngameObjectType`

It also has two functions:

- `dragon_type_from_name("SRU_Dragon_Fire")` returns `DragonType.INFERNAL`. Unknown names give `DragonType.UNKNOWN`.
- `dragon_internal_name` maps a type back to its internal name.

### `liveoverlay.events`

The event classes are:

- `IngameEvent`
- `InhibitorKilledEvent`
- `InhibitorRespawnedEvent`
- `TurretKilledEvent`
- `RiftHeraldKilledEvent`
- `DragonKilledEvent`
- `BaronKilledEvent`

The module also has the `Inhibitor` dataclass and the `InhibitorPosition` enum.

Every event has an `is_identical_to(other)` method, which is used to drop duplicates. It compares:

- the event name, ignoring case;
- the fields that matter for that kind of event;
- for most kinds, whether the two times are close.

`InhibitorKilledEvent` tracks a 300-second respawn:

- `update_remaining_time(now)` refreshes the countdown.
- `remaining_time`, `respawn_time` and `is_active` report on it.

`BaronKilledEvent.buff_expiration_time` is the kill time plus 180 seconds.

### `liveoverlay.event_cache`

`EpicKillCache.add_kill_timing(monster_type, time, respawn_time_between_kills=300.0)` records a kill time. It returns `False` and records nothing if a kill of the same monster type is already known within the respawn window.

`last_kill_time(monster_type, now)` returns the latest recorded kill that is not after `now`. It returns `0.0` if there is none.

### `liveoverlay.event_list`

`RiotEventList(document, epic_takedowns_known, current_ingame_time)` builds the event list. It keeps only events that happened up to `current_ingame_time`.

From the document's `"Events"`:

- Inhibitor kills and turret kills are parsed into their event types, with duplicates removed.
- `GameStart` sets `game_started`.
- All other events are kept under the empty name `""`.

From `epic_takedowns_known`, not from the document:

- Dragon, baron and rift-herald kills are taken from this list.
- Dragon kills at or before 300 seconds are ignored.

To read the results:

- `events_by_name(name)` returns the stored list. It raises `KeyError` for an unknown name.
- `turrets_destroyed_by(team)` counts turret kills per team.

### `liveoverlay.players`

The classes are:

- `Item`: an entry of the item catalogue.
- `PlayerSnapshot`: one player at one moment.
- `Team`: snapshots keyed by spectator slot.
- `PlayerList`: slots 0–4 are blue, the rest are red.

`PlayerSnapshot.from_json(entry, slot, item_lookup)` reads one player entry. `item_lookup` is a callable that you supply. It maps an item id to an `Item`, or to `None` when the id is unknown. Unknown items are dropped, and the known items are sorted by id into the seven inventory slots.

### `liveoverlay.delta`

`SnapshotDelta(previous, current, previous_events, events)` reports:

- level-ups (`levelups`);
- newly finished legendary or mythic items (`items_finished`);
- creeps per minute (`creeps_per_minute`);
- kills per team (`kills_by`);
- turrets per team (`turrets_killed_by`);
- inhibitors still recovering (`recovering_inhibitors`);
- inhibitors that have come back (`respawned_inhibitors`);
- the latest kill time of each epic monster (`last_kill_time`);
- dragon soul state (`is_current_dragon_soulpoint`, `dragon_soulpoint_type`, `is_dragon_soul_acquired`).

Per-player results are keyed by spectator slot. `DragonKillHistory` is the dragon bookkeeping that these results are built on.

### `liveoverlay.ocr_pixels`

This module has:

- `Rect`;
- `OCRPixelData`, a 32-bit pixel buffer stored bottom row first, with `pixel`, `set_pixel` and `copy`;
- `TeamOCRPixelData`, which holds a team's money and grubs regions;
- the enums `OCRDetectionMode` and `LetterColor`;
- `TeamObjectiveValues`.

The functions `blue_money_rect`, `red_money_rect`, `blue_grubs_rect` and `red_grubs_rect` compute each region from the window rectangle.

### `liveoverlay.bounding_box`

`LetterBoundingBoxScanner(pixel_data, color).detect_bounding_boxes(mode)` returns one `LetterBoundingBox` per glyph of the given colour, from left to right.

It has three detection modes:

- ray casting (`WESTERN_RAYFILL`);
- span flood fill (`WESTERN_SPANFLOOD`);
- eight-way flood fill (`KOREAN`).

The module also exposes the colour tests `pixel_value`, `is_valid_color` and `is_valid_color_at`.

### `liveoverlay.image_dumper`

`OCRImageDumper(pixel_data, team_type).render(dump_type)` returns a marked copy of the region:

- `WITH_BOUNDING_BOXES_ONLY` paints each detected box.
- `WITH_FILL_ONLY` flood-fills each glyph.
- `PLAIN` and `WITH_BOUNDING_BOX_AND_FILL` leave the pixels unchanged.

`dump_image(path, dump_type)` writes the rendered region as an uncompressed 32-bit BMP file. `bitmap_headers(width, height, bits_per_pixel)` builds the BMP headers.

### `liveoverlay.randomizer`

`NumericRandomizer(minimum, maximum, rng)` draws from a uniform distribution. `WeightedNumericRandomizer(minimum, maximum, weights, rng)` uses a piecewise-linear density, with the weights spread evenly over the range.

Both add a small offset of 0.002 to every value they draw. If both bounds are integers, the drawn values are integers too.

## Example

```python
from liveoverlay.event_list import RiotEventList
from liveoverlay.game_types import TeamType

document = {
    "Events": [
        {"EventName": "GameStart", "EventTime": 0.0},
        {"EventName": "TurretKilled", "EventTime": 610.0,
         "TurretKilled": "Turret_T1_R_03_A"},
        {"EventName": "TurretKilled", "EventTime": 900.0,
         "TurretKilled": "Turret_T1_C_05_A"},
    ]
}
events = RiotEventList(document, [], 700.0)
print(events.game_started)                          # True
print(len(events.events_by_name("TurretKilled")))   # 1 (the later one is in the future)
```

## What the package does not do

The package only models the data it is handed. It does not do any of the following:

- talk to the live game client over the network;
- capture the screen or read a game window;
- read the process's memory;
- turn the detected glyph boxes into numbers.

You supply the JSON documents, the item catalogue (as `item_lookup`) and the pixel buffers yourself. The package has no command-line program.

## Running the tests

```
pip install .[test]
pytest
```