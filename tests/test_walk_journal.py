from datetime import date, datetime

import pytest

from tools.dogs import DogNotFound, DogService
from tools.walks import JournalService, WalkNotFound, WalkService, WalkSummary, WalkValidationError


@pytest.fixture
def dog(session):
    return DogService(session).add_dog("a1", name="Rex", breed="Beagle", gender="male", age=3)


def _add(session, dog_id, when, distance=1000.0, duration=600, path=None):
    return WalkService(session).add_walk(
        account_id="a1",
        dog_id=dog_id,
        walk_date=when.date(),
        walk_time=when,
        distance=distance,
        duration=duration,
        path=path,
    )


def test_add_walk_keeps_path_order(session, dog):
    path = [[37.0, 55.0], [37.0, 55.0001], [37.0001, 55.0001]]
    walk = _add(session, dog.id, datetime(2026, 3, 5, 8, 30), path=path)

    stored = WalkService(session).get_walk("a1", walk.id)
    assert stored.path == path
    assert stored.date == date(2026, 3, 5)


def test_add_walk_requires_known_dog(session):
    with pytest.raises(DogNotFound):
        _add(session, "missing", datetime(2026, 3, 5, 8, 30))


@pytest.mark.parametrize(
    "kwargs",
    [{"distance": -1}, {"duration": -5}, {"path": [[37.0]]}],
)
def test_add_walk_validation(session, dog, kwargs):
    with pytest.raises(WalkValidationError):
        _add(session, dog.id, datetime(2026, 3, 5, 8, 30), **kwargs)


def test_walks_survive_dog_removal(session, dog):
    _add(session, dog.id, datetime(2026, 3, 5, 8, 30))
    DogService(session).remove_dog("a1", dog.id)

    walks = WalkService(session).get_walks_by_dog_id("a1", dog.id)
    assert len(walks) == 1


def test_save_summary_after_dog_was_removed(session, dog):
    DogService(session).remove_dog("a1", dog.id)
    summary = WalkSummary(
        dog_id=dog.id,
        started_at=datetime(2026, 3, 5, 8, 0),
        finished_at=datetime(2026, 3, 5, 8, 40),
        distance=2400.0,
        duration=2400,
        path=[[37.0, 55.0]],
    )

    walk = WalkService(session).save_summary("a1", summary)

    assert walk.date == date(2026, 3, 5)
    assert walk.time == datetime(2026, 3, 5, 8, 40)
    assert walk.path == [[37.0, 55.0]]


def test_list_newest_first_and_remove(session, dog):
    older = _add(session, dog.id, datetime(2026, 3, 1, 8, 0))
    newer = _add(session, dog.id, datetime(2026, 3, 2, 8, 0))
    service = WalkService(session)

    assert [w.id for w in service.list_walks("a1")] == [newer.id, older.id]
    assert service.list_walks("a2") == []

    service.remove_walk("a1", older.id)
    with pytest.raises(WalkNotFound):
        service.get_walk("a1", older.id)
    assert service.clear_all("a1") == 1


def test_journal_day_in_time_order(session, dog):
    late = _add(session, dog.id, datetime(2026, 3, 5, 19, 0))
    early = _add(session, dog.id, datetime(2026, 3, 5, 7, 0))
    _add(session, dog.id, datetime(2026, 3, 6, 7, 0))

    walks = JournalService(session).get_day("a1", date(2026, 3, 5))
    assert [w.id for w in walks] == [early.id, late.id]


def test_journal_calendar_groups_by_day(session, dog):
    other = DogService(session).add_dog("a1", name="Bella", breed="Poodle", gender="female", age=1)
    _add(session, dog.id, datetime(2026, 3, 5, 7, 0), distance=1000, duration=600)
    _add(session, dog.id, datetime(2026, 3, 5, 19, 0), distance=500, duration=300)
    _add(session, other.id, datetime(2026, 3, 20, 9, 0), distance=800, duration=420)
    _add(session, dog.id, datetime(2026, 4, 1, 9, 0))

    journal = JournalService(session)
    calendar = journal.get_calendar("a1", 2026, 3)

    assert calendar["year"] == 2026 and calendar["month"] == 3
    assert calendar["days"] == {
        "2026-03-05": {"walks": 2, "distance": 1500.0, "duration": 900},
        "2026-03-20": {"walks": 1, "distance": 800.0, "duration": 420},
    }
    assert list(journal.get_calendar("a1", 2026, 3, dog_id=other.id)["days"]) == ["2026-03-20"]
    assert journal.get_calendar("a1", 2026, 2)["days"] == {}


def test_journal_calendar_rejects_bad_month(session):
    with pytest.raises(ValueError):
        JournalService(session).get_calendar("a1", 2026, 13)


def test_journal_summary(session, dog):
    for day in range(1, 8):
        _add(session, dog.id, datetime(2026, 3, day, 8, 0), distance=1000, duration=600)

    summary = JournalService(session).get_summary("a1")

    assert summary["total_walks"] == 7
    assert summary["total_distance"] == 7000
    assert summary["total_duration"] == 4200
    assert len(summary["recent"]) == JournalService.RECENT_LIMIT
    assert summary["recent"][0].date == date(2026, 3, 7)
