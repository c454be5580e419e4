import asyncio

import pytest

from tools.walks import LocationFix, NoLocationFix, WalkSessionManager, WalkSessionNotFound, WalkSessionStateError

START = LocationFix(latitude=55.0, longitude=37.0)


@pytest.mark.asyncio
async def test_open_starts_ticker_and_counts_seconds():
    manager = WalkSessionManager(tick_seconds=0.01)
    active = await manager.open("a1", "dog-1", fix=START)

    await asyncio.sleep(0.1)

    assert len(manager) == 1
    assert active.tracker.duration >= 1
    await manager.shutdown()


@pytest.mark.asyncio
async def test_open_without_location_registers_nothing():
    manager = WalkSessionManager(tick_seconds=0.01)
    with pytest.raises(NoLocationFix):
        await manager.open("a1", "dog-1")
    assert len(manager) == 0


@pytest.mark.asyncio
async def test_pause_freezes_timer():
    manager = WalkSessionManager(tick_seconds=0.01)
    active = await manager.open("a1", "dog-1", fix=START)
    await asyncio.sleep(0.05)

    manager.pause(active.session_id, "a1")
    frozen = active.tracker.duration
    await asyncio.sleep(0.05)

    assert active.tracker.duration == frozen
    with pytest.raises(WalkSessionStateError):
        manager.pause(active.session_id, "a1")

    manager.resume(active.session_id, "a1")
    await asyncio.sleep(0.05)
    assert active.tracker.duration > frozen
    await manager.shutdown()


@pytest.mark.asyncio
async def test_finish_stops_ticker_and_keeps_session_until_released():
    manager = WalkSessionManager(tick_seconds=0.01)
    active = await manager.open("a1", "dog-1", fix=START)
    manager.push_location(active.session_id, LocationFix(latitude=55.0001, longitude=37.0), "a1")

    finished, summary = await manager.finish(active.session_id, "a1")

    assert finished is active
    assert active.ticker is None
    assert summary.distance == pytest.approx(11.1, abs=0.1)

    # повторный finish отдаёт тот же итог, пока он не записан
    again, same_summary = await manager.finish(active.session_id, "a1")
    assert again is active
    assert same_summary is summary
    assert len(manager) == 1

    manager.release(active.session_id, "a1")
    assert len(manager) == 0
    with pytest.raises(WalkSessionNotFound):
        manager.get(active.session_id)


@pytest.mark.asyncio
async def test_sessions_are_scoped_by_account():
    manager = WalkSessionManager(tick_seconds=60)
    active = await manager.open("a1", "dog-1", fix=START, suggestion={"distance_km": 2.5})

    with pytest.raises(WalkSessionNotFound):
        manager.get(active.session_id, "someone-else")
    assert manager.get(active.session_id, "a1").snapshot()["suggestion"] == {"distance_km": 2.5}

    await manager.discard(active.session_id, "a1")
    assert len(manager) == 0
