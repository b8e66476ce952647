from liveoverlay.events import (
    BaronKilledEvent,
    DragonKilledEvent,
    IngameEvent,
    Inhibitor,
    InhibitorKilledEvent,
    InhibitorPosition,
    InhibitorRespawnedEvent,
    RiftHeraldKilledEvent,
    TurretKilledEvent,
)
from liveoverlay.game_types import DragonType, TeamType


def _inhibitor(name="Barracks_T1_L1"):
    return Inhibitor(1, TeamType.BLUE, InhibitorPosition.MIDLANE, name)


def test_event_names_match_api_names():
    started = IngameEvent(IngameEvent.GAME_STARTED, 0.0)
    assert started.is_identical_to(IngameEvent("GameStart", 1.0))
    respawned = IngameEvent(IngameEvent.INHIBITOR_RESPAWNED, 0.0)
    assert respawned.is_identical_to(IngameEvent("SELFCREATED_EVENT_InhibKilled", 1.0))
    assert not respawned.is_identical_to(IngameEvent("InhibKilled", 1.0))


def test_base_identity_ignores_case():
    first = IngameEvent("GameStart", 0.0)
    assert first.is_identical_to(IngameEvent("gamestart", 500.0))
    assert not first.is_identical_to(IngameEvent("FirstBlood", 0.0))
    assert not first.is_identical_to(None)


def test_inhibitor_respawn_time():
    event = InhibitorKilledEvent(IngameEvent.INHIBITOR_KILLED, 1000.0, _inhibitor())
    assert event.respawn_time == 1000.0 + InhibitorKilledEvent.RESPAWN_SECONDS
    assert event.remaining_time == InhibitorKilledEvent.RESPAWN_SECONDS
    assert not event.is_active


def test_inhibitor_active_window():
    event = InhibitorKilledEvent(IngameEvent.INHIBITOR_KILLED, 1000.0, _inhibitor())
    event.update_remaining_time(1100.0)
    assert event.is_active
    assert event.remaining_time == 200.0
    event.update_remaining_time(1300.0)
    assert not event.is_active
    assert event.remaining_time == 0.0


def test_inhibitor_identity_window_truncates():
    first = InhibitorKilledEvent("InhibKilled", 1000.0, _inhibitor())
    close = InhibitorKilledEvent("InhibKilled", 1010.9, _inhibitor("barracks_t1_l1"))
    far = InhibitorKilledEvent("InhibKilled", 1011.0, _inhibitor())
    other = InhibitorKilledEvent("InhibKilled", 1000.0, _inhibitor("Barracks_T2_L1"))
    assert first.is_identical_to(close)
    assert not first.is_identical_to(far)
    assert not first.is_identical_to(other)


def test_inhibitor_events_of_different_kinds_differ():
    killed = InhibitorKilledEvent("InhibKilled", 10.0, _inhibitor())
    respawned = InhibitorRespawnedEvent("InhibKilled", 10.0, _inhibitor())
    assert not killed.is_identical_to(respawned)
    assert not respawned.is_identical_to(killed)
    assert respawned.is_identical_to(InhibitorRespawnedEvent("InhibKilled", 15.0, _inhibitor()))


def test_turret_identity_by_name():
    event = TurretKilledEvent("TurretKilled", 100.0, "Turret_T1_R_03_A", TeamType.RED)
    assert event.is_identical_to(TurretKilledEvent("TurretKilled", 900.0, "turret_t1_r_03_a", TeamType.RED))
    assert not event.is_identical_to(TurretKilledEvent("TurretKilled", 100.0, "Turret_T1_C_05_A", TeamType.RED))
    assert not event.is_identical_to(IngameEvent("TurretKilled", 100.0))
    assert IngameEvent("TurretKilled", 5.0).is_identical_to(event)


def test_rift_herald_identity():
    event = RiftHeraldKilledEvent(IngameEvent.RIFT_HERALD_KILLED, 600.0, TeamType.BLUE)
    assert event.is_identical_to(RiftHeraldKilledEvent(IngameEvent.RIFT_HERALD_KILLED, 605.0, TeamType.BLUE))
    assert not event.is_identical_to(RiftHeraldKilledEvent(IngameEvent.RIFT_HERALD_KILLED, 605.0, TeamType.RED))


def test_dragon_identity_and_name():
    event = DragonKilledEvent(IngameEvent.DRAKE_KILLED, 400.0, DragonType.OCEAN, TeamType.RED)
    assert event.killed_dragon_name == "SRU_Dragon_Water"
    assert event.is_identical_to(DragonKilledEvent(IngameEvent.DRAKE_KILLED, 700.0, DragonType.OCEAN, TeamType.BLUE))
    assert not event.is_identical_to(DragonKilledEvent(IngameEvent.DRAKE_KILLED, 701.0, DragonType.OCEAN, TeamType.RED))
    assert not event.is_identical_to(DragonKilledEvent(IngameEvent.DRAKE_KILLED, 400.0, DragonType.CLOUD, TeamType.RED))


def test_dragon_type_extraction():
    assert DragonKilledEvent.extract_type_from_string("SRU_Dragon_Elder") is DragonType.ELDER
    assert DragonKilledEvent.extract_type_from_string("nothing") is DragonType.UNKNOWN


def test_baron_buff_and_identity():
    event = BaronKilledEvent(IngameEvent.BARON_KILLED, 1500.0, TeamType.BLUE)
    assert event.buff_expiration_time == 1500.0 + BaronKilledEvent.BUFF_SECONDS
    assert event.is_identical_to(BaronKilledEvent(IngameEvent.BARON_KILLED, 1600.5, TeamType.BLUE))
    assert not event.is_identical_to(BaronKilledEvent(IngameEvent.BARON_KILLED, 1601.0, TeamType.BLUE))
    assert not event.is_identical_to(BaronKilledEvent(IngameEvent.BARON_KILLED, 1500.0, TeamType.RED))