import pytest

from tools.walks import WalkService


def _register_dog(client, account_id="a1", **overrides):
    payload = {"name": "Rex", "breed": "Beagle", "gender": "male", "age": 3, "weight": 12.5}
    payload.update(overrides)
    response = client.post(f"/api/dogs?account_id={account_id}", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def test_root(client):
    assert client.get("/").json() == {"status": "ok"}


def test_dog_crud(client):
    dog = _register_dog(client)

    assert dog["age"] == 3
    assert dog["gender"] == "male"
    assert client.get("/api/dogs?account_id=a1").json()[0]["id"] == dog["id"]
    assert client.get("/api/dogs?account_id=a2").json() == []

    patched = client.patch(f"/api/dogs/{dog['id']}?account_id=a1", json={"weight": 13})
    assert patched.status_code == 200
    assert patched.json()["weight"] == 13
    assert patched.json()["name"] == "Rex"

    assert client.delete(f"/api/dogs/{dog['id']}?account_id=a1").status_code == 200
    assert client.get(f"/api/dogs/{dog['id']}?account_id=a1").status_code == 404


def test_dog_validation_error(client):
    response = client.post(
        "/api/dogs?account_id=a1",
        json={"name": "Rex", "breed": "Beagle", "gender": "male", "age": 3, "weight": 0},
    )

    assert response.status_code == 422
    assert response.json()["detail"] == {"field": "weight", "message": "Weight must be greater than 0"}


def test_manual_walk_and_journal(client):
    dog = _register_dog(client)
    walk = {
        "dog_id": dog["id"],
        "date": "2026-03-05",
        "time": "2026-03-05T08:30:00",
        "distance": 1250.0,
        "duration": 1500,
        "path": [[37.0, 55.0], [37.0, 55.0001]],
    }
    created = client.post("/api/walks?account_id=a1", json=walk)
    assert created.status_code == 201, created.text
    assert created.json()["distance_text"] == "1.25 km"
    assert created.json()["duration_text"] == "25:00"

    detail = client.get(f"/api/walks/{created.json()['id']}?account_id=a1").json()
    assert detail["path"] == walk["path"]

    day = client.get("/api/journal/day?account_id=a1&day=2026-03-05").json()
    assert [w["id"] for w in day["walks"]] == [created.json()["id"]]

    calendar = client.get("/api/journal/calendar?account_id=a1&year=2026&month=3").json()
    assert calendar["days"] == {"2026-03-05": {"walks": 1, "distance": 1250.0, "duration": 1500}}

    summary = client.get("/api/journal/summary?account_id=a1").json()
    assert summary["total_walks"] == 1
    assert summary["total_distance_text"] == "1.25 km"
    assert summary["total_duration_text"] == "25m"


def test_walk_for_unknown_dog_is_rejected(client):
    response = client.post(
        "/api/walks?account_id=a1",
        json={"dog_id": "nope", "date": "2026-03-05", "time": "2026-03-05T08:30:00", "distance": 1, "duration": 1},
    )
    assert response.status_code == 404


def test_calendar_rejects_bad_month(client):
    assert client.get("/api/journal/calendar?account_id=a1&year=2026&month=13").status_code == 400


def test_walk_session_flow(client):
    dog = _register_dog(client)
    started = client.post(
        "/api/walk_sessions?account_id=a1",
        json={
            "dog_id": dog["id"],
            "location": {"lat": 55.0, "lon": 37.0},
            "suggestion": {"distance_km": 2.5, "duration_min": 30, "intensity": "medium"},
        },
    )
    assert started.status_code == 201, started.text
    state = started.json()
    session_id = state["session_id"]
    assert state["state"] == "walking"
    assert state["distance"] == 0
    assert state["suggestion"]["distance_km"] == 2.5

    # первая точка в пределах 2 м не засчитывается
    moved = client.post(
        f"/api/walk_sessions/{session_id}/location?account_id=a1",
        json={"points": [{"lat": 55.00001, "lon": 37.0}, {"lat": 55.0001, "lon": 37.0}]},
    ).json()
    assert moved["distance"] == pytest.approx(11.1, abs=0.1)
    assert moved["path_points"] == 2

    paused = client.post(f"/api/walk_sessions/{session_id}/pause?account_id=a1")
    assert paused.json()["state"] == "paused"
    assert client.post(f"/api/walk_sessions/{session_id}/pause?account_id=a1").status_code == 409

    client.post(
        f"/api/walk_sessions/{session_id}/location?account_id=a1",
        json={"points": [{"lat": 55.001, "lon": 37.0}]},
    )
    assert client.post(f"/api/walk_sessions/{session_id}/resume?account_id=a1").json()["state"] == "walking"

    finished = client.post(f"/api/walk_sessions/{session_id}/finish?account_id=a1")
    assert finished.status_code == 200, finished.text
    body = finished.json()
    assert body["session"]["state"] == "finished"
    assert body["walk"]["dog_id"] == dog["id"]
    assert body["walk"]["distance"] == pytest.approx(11.1, abs=0.1)

    walks = client.get(f"/api/walks?account_id=a1&dog_id={dog['id']}").json()
    assert [w["id"] for w in walks] == [body["walk"]["id"]]
    assert client.get(f"/api/walk_sessions/{session_id}?account_id=a1").status_code == 404


def test_walk_session_needs_location_and_dog(client):
    dog = _register_dog(client)

    no_fix = client.post("/api/walk_sessions?account_id=a1", json={"dog_id": dog["id"]})
    assert no_fix.status_code == 400
    assert no_fix.json()["detail"] == "Current location is not available"

    no_dog = client.post(
        "/api/walk_sessions?account_id=a1",
        json={"dog_id": "nope", "location": {"lat": 55.0, "lon": 37.0}},
    )
    assert no_dog.status_code == 404


def test_discarded_walk_is_not_saved(client):
    dog = _register_dog(client)
    session_id = client.post(
        "/api/walk_sessions?account_id=a1",
        json={"dog_id": dog["id"], "location": {"lat": 55.0, "lon": 37.0}},
    ).json()["session_id"]

    assert client.delete(f"/api/walk_sessions/{session_id}?account_id=a1").status_code == 200
    assert client.get("/api/walks?account_id=a1").json() == []


def test_weather_endpoint(client):
    response = client.get("/api/weather?latitude=55.75&longitude=37.61&location=Gorky%20Park")

    assert response.status_code == 200
    weather = response.json()
    assert weather["is_mock"] is False
    assert weather["location"] == "Gorky Park"
    assert weather["icon"] == "🌤️"
    assert weather["advice"]["text"] == "Perfect walking conditions"


def test_recommendation_endpoints_fall_back_to_default(client, failing_llm):
    response = client.post(
        "/api/recommendations",
        json={
            "dog_breed": "Husky",
            "dog_age": 9,
            "dog_gender": "female",
            "weather": {"temperature": 28, "condition": "Sunny"},
        },
    )
    assert response.status_code == 200
    assert response.json()["is_default"] is True
    assert response.json()["recommendation"]["distance_km"] == 1.5

    dog = _register_dog(client, age=1)
    for_dog = client.get(f"/api/recommendations/dogs/{dog['id']}?account_id=a1&latitude=55.75&longitude=37.61")
    assert for_dog.status_code == 200
    assert for_dog.json()["recommendation"]["duration_min"] == 15
    assert for_dog.json()["weather"]["condition"] == "Partly cloudy"
    assert len(failing_llm.calls) == 2


def test_recommendation_for_unknown_dog(client):
    response = client.get("/api/recommendations/dogs/nope?account_id=a1&latitude=55.75&longitude=37.61")
    assert response.status_code == 404


def test_dog_gender_can_be_edited(client):
    dog = _register_dog(client, gender="female")
    assert dog["gender"] == "female"

    patched = client.patch(f"/api/dogs/{dog['id']}?account_id=a1", json={"gender": "male"})

    assert patched.status_code == 200, patched.text
    assert patched.json()["gender"] == "male"


def test_finish_can_be_retried_after_failed_save(client, monkeypatch):
    dog = _register_dog(client)
    session_id = client.post(
        "/api/walk_sessions?account_id=a1",
        json={"dog_id": dog["id"], "location": {"lat": 55.0, "lon": 37.0}},
    ).json()["session_id"]
    client.post(
        f"/api/walk_sessions/{session_id}/location?account_id=a1",
        json={"points": [{"lat": 55.0001, "lon": 37.0}]},
    )

    def broken_save(self, account_id, summary):
        raise RuntimeError("database is locked")

    original_save = WalkService.save_summary
    monkeypatch.setattr(WalkService, "save_summary", broken_save)
    failed = client.post(f"/api/walk_sessions/{session_id}/finish?account_id=a1")
    assert failed.status_code == 500
    assert client.get("/api/walks?account_id=a1").json() == []

    monkeypatch.setattr(WalkService, "save_summary", original_save)
    retried = client.post(f"/api/walk_sessions/{session_id}/finish?account_id=a1")

    assert retried.status_code == 200, retried.text
    assert retried.json()["walk"]["distance"] == pytest.approx(11.1, abs=0.1)
    assert len(client.get("/api/walks?account_id=a1").json()) == 1
    assert client.get(f"/api/walk_sessions/{session_id}?account_id=a1").status_code == 404
