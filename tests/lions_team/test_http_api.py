"""Route-level tests running the FastAPI app against the in-memory store."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from lions_team.app import create_app
from lions_team.infrastructure.storage import MemoryStorage


@pytest.fixture
def client(seeded_storage: MemoryStorage) -> TestClient:
    return TestClient(create_app(storage=seeded_storage))


def _athlete_id(storage: MemoryStorage) -> str:
    (athlete,) = storage.athlete_rows.values()
    return athlete.id


def _admin_id(storage: MemoryStorage) -> str:
    return next(u.id for u in storage.user_rows.values() if u.username == "admin")


def test_login_returns_public_user(client: TestClient) -> None:
    response = client.post("/api/auth/login", json={"username": "admin", "password": "admin123"})

    assert response.status_code == 200
    user = response.json()["user"]
    assert user["username"] == "admin"
    assert user["role"] == "admin"
    assert user["fullName"] == "Administrador Lions"
    assert "password" not in user


@pytest.mark.parametrize(
    "body",
    [{}, {"username": "admin"}, {"password": "admin123"}, {"username": "", "password": ""}],
)
def test_login_requires_both_fields(client: TestClient, body: dict) -> None:
    response = client.post("/api/auth/login", json=body)
    assert response.status_code == 400
    assert response.json() == {"message": "Username and password are required"}


def test_login_rejects_wrong_password(client: TestClient) -> None:
    response = client.post("/api/auth/login", json={"username": "admin", "password": "nope"})
    assert response.status_code == 401
    assert response.json() == {"message": "Invalid credentials"}


def test_register_creates_user_and_athlete_profile(
    client: TestClient, seeded_storage: MemoryStorage
) -> None:
    response = client.post(
        "/api/auth/register",
        json={
            "username": "pedro",
            "email": "pedro@lions.com",
            "password": "pw",
            "fullName": "Pedro Souza",
            "position": "Pivô",
        },
    )

    assert response.status_code == 201
    user = response.json()["user"]
    assert user["role"] == "athlete"
    assert "password" not in user

    profiles = [a for a in seeded_storage.athlete_rows.values() if a.user_id == user["id"]]
    assert len(profiles) == 1
    assert profiles[0].overall_performance == "0"
    assert profiles[0].height is None


def test_register_admin_gets_no_athlete_profile(
    client: TestClient, seeded_storage: MemoryStorage
) -> None:
    response = client.post(
        "/api/auth/register",
        json={
            "username": "coach",
            "email": "coach@lions.com",
            "password": "pw",
            "fullName": "Coach",
            "role": "admin",
        },
    )
    assert response.status_code == 201
    assert len(seeded_storage.athlete_rows) == 1


@pytest.mark.parametrize(
    ("overrides", "message"),
    [
        ({"username": "joao"}, "Username already exists"),
        ({"email": "joao@lions.com"}, "Email already exists"),
        ({"role": "coach"}, "Invalid user data"),
        ({"fullName": None}, "Invalid user data"),
    ],
)
def test_register_rejections(client: TestClient, overrides: dict, message: str) -> None:
    body = {"username": "new", "email": "new@lions.com", "password": "pw", "fullName": "New"}
    body.update(overrides)

    response = client.post("/api/auth/register", json=body)

    assert response.status_code == 400
    assert response.json() == {"message": message}


def test_get_user(client: TestClient, seeded_storage: MemoryStorage) -> None:
    admin_id = _admin_id(seeded_storage)
    response = client.get(f"/api/users/{admin_id}")
    assert response.status_code == 200
    assert response.json()["email"] == "admin@lions.com"
    assert "password" not in response.json()

    missing = client.get("/api/users/unknown")
    assert missing.status_code == 404
    assert missing.json() == {"message": "User not found"}


def test_athletes_are_listed_with_their_user(client: TestClient) -> None:
    response = client.get("/api/athletes")

    assert response.status_code == 200
    (athlete,) = response.json()
    assert athlete["overallPerformance"] == "85.50"
    assert athlete["sleepHours"] == "7.5"
    assert athlete["user"]["username"] == "joao"


def test_athlete_crud(client: TestClient, seeded_storage: MemoryStorage) -> None:
    user_id = _admin_id(seeded_storage)
    created = client.post("/api/athletes", json={"userId": user_id, "height": "1.70m"})
    assert created.status_code == 201
    athlete = created.json()
    assert athlete["overallPerformance"] == "0"

    fetched = client.get(f"/api/athletes/{athlete['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["user"]["username"] == "admin"

    updated = client.put(f"/api/athletes/{athlete['id']}", json={"overallPerformance": "77.00"})
    assert updated.status_code == 200
    assert updated.json()["overallPerformance"] == "77.00"
    assert updated.json()["height"] == "1.70m"

    deleted = client.delete(f"/api/athletes/{athlete['id']}")
    assert deleted.status_code == 204
    assert deleted.content == b""

    again = client.delete(f"/api/athletes/{athlete['id']}")
    assert again.status_code == 404
    assert again.json() == {"message": "Athlete not found"}


def test_athlete_with_dangling_user_reference(client: TestClient) -> None:
    created = client.post("/api/athletes", json={"userId": "ghost"}).json()
    response = client.get(f"/api/athletes/{created['id']}")
    assert response.status_code == 200
    assert response.json()["user"] is None


def test_athlete_validation_and_missing(client: TestClient) -> None:
    invalid = client.post("/api/athletes", json={"height": "1.80m"})
    assert invalid.status_code == 400
    assert invalid.json() == {"message": "Invalid athlete data"}

    assert client.get("/api/athletes/unknown").status_code == 404
    assert client.put("/api/athletes/unknown", json={"height": "2m"}).status_code == 404


def test_exercises_filter_by_category(client: TestClient, seeded_storage: MemoryStorage) -> None:
    admin_id = _admin_id(seeded_storage)
    shooting = client.post(
        "/api/exercises",
        json={
            "name": "Arremesso",
            "category": "basketball",
            "createdBy": admin_id,
            "metrics": {"repetitions": 50, "accuracy": 70},
        },
    )
    assert shooting.status_code == 201
    assert shooting.json()["metrics"]["repetitions"] == 50
    client.post("/api/exercises", json={"name": "Corrida", "category": "aerobic", "createdBy": admin_id})

    basketball = client.get("/api/exercises", params={"category": "basketball"}).json()
    assert [e["name"] for e in basketball] == ["Arremesso"]
    assert len(client.get("/api/exercises").json()) == 2

    bad = client.post("/api/exercises", json={"name": "X", "category": "swim", "createdBy": admin_id})
    assert bad.status_code == 400
    assert bad.json() == {"message": "Invalid exercise data"}


def test_exercise_update_and_delete(client: TestClient, seeded_storage: MemoryStorage) -> None:
    admin_id = _admin_id(seeded_storage)
    exercise = client.post(
        "/api/exercises",
        json={"name": "Agachamento", "category": "strength", "createdBy": admin_id},
    ).json()

    renamed = client.put(f"/api/exercises/{exercise['id']}", json={"name": "Agachamento livre"})
    assert renamed.json()["name"] == "Agachamento livre"
    assert renamed.json()["category"] == "strength"

    rejected = client.put(f"/api/exercises/{exercise['id']}", json={"name": None})
    assert rejected.status_code == 400

    assert client.delete(f"/api/exercises/{exercise['id']}").status_code == 204
    missing = client.put("/api/exercises/unknown", json={"name": "x"})
    assert missing.json() == {"message": "Exercise not found"}


def test_training_sessions(client: TestClient, seeded_storage: MemoryStorage) -> None:
    athlete_id = _athlete_id(seeded_storage)

    missing_param = client.get("/api/training-sessions")
    assert missing_param.status_code == 400
    assert missing_param.json() == {"message": "athleteId is required"}

    created = client.post(
        "/api/training-sessions",
        json={
            "athleteId": athlete_id,
            "exerciseId": "exercise-1",
            "results": {"repetitions": 40, "completed": True},
        },
    )
    assert created.status_code == 201
    assert created.json()["completedAt"].startswith("2024-06-05T15:30:12")

    listed = client.get("/api/training-sessions", params={"athleteId": athlete_id}).json()
    assert len(listed) == 1
    assert listed[0]["results"]["completed"] is True

    invalid = client.post("/api/training-sessions", json={"athleteId": athlete_id})
    assert invalid.json() == {"message": "Invalid training session data"}


def test_events_upcoming_filter(client: TestClient, seeded_storage: MemoryStorage) -> None:
    admin_id = _admin_id(seeded_storage)
    base = {"eventType": "game", "createdBy": admin_id}
    past = client.post(
        "/api/events", json={**base, "title": "Past", "startDate": "2024-06-01T19:00:00Z"}
    )
    future = client.post(
        "/api/events", json={**base, "title": "Final", "startDate": "2024-06-10T19:00:00"}
    )
    assert past.status_code == future.status_code == 201
    assert future.json()["mandatory"] is False
    assert future.json()["startDate"].startswith("2024-06-10T19:00:00")

    upcoming = client.get("/api/events", params={"upcoming": "true"}).json()
    assert [event["title"] for event in upcoming] == ["Final"]
    assert len(client.get("/api/events", params={"upcoming": "yes"}).json()) == 2

    event_id = future.json()["id"]
    moved = client.put(f"/api/events/{event_id}", json={"mandatory": True})
    assert moved.json()["mandatory"] is True
    assert moved.json()["title"] == "Final"

    assert client.delete(f"/api/events/{event_id}").status_code == 204
    assert client.delete(f"/api/events/{event_id}").json() == {"message": "Event not found"}

    invalid = client.post("/api/events", json={**base, "title": "No date"})
    assert invalid.json() == {"message": "Invalid event data"}


def test_gallery_album_default_and_filter(client: TestClient, seeded_storage: MemoryStorage) -> None:
    admin_id = _admin_id(seeded_storage)
    item = client.post(
        "/api/gallery",
        json={"title": "Time", "mediaType": "image", "url": "https://x/1.jpg", "uploadedBy": admin_id},
    )
    client.post(
        "/api/gallery",
        json={
            "title": "Final",
            "mediaType": "video",
            "url": "https://x/2.mp4",
            "uploadedBy": admin_id,
            "album": "finals",
        },
    )

    assert item.status_code == 201
    assert item.json()["album"] == "general"
    general = client.get("/api/gallery", params={"album": "general"}).json()
    assert [g["title"] for g in general] == ["Time"]
    assert len(client.get("/api/gallery").json()) == 2

    assert client.delete(f"/api/gallery/{item.json()['id']}").status_code == 204
    missing = client.delete(f"/api/gallery/{item.json()['id']}")
    assert missing.json() == {"message": "Gallery item not found"}


def test_best_of_week(client: TestClient, seeded_storage: MemoryStorage) -> None:
    missing = client.get("/api/best-of-week")
    assert missing.status_code == 404
    assert missing.json() == {"message": "No best of week set"}

    athlete_id = _athlete_id(seeded_storage)
    created = client.post(
        "/api/best-of-week",
        json={
            "athleteId": athlete_id,
            "weekStart": "2024-06-02T00:00:00Z",
            "setBy": _admin_id(seeded_storage),
            "achievements": {"shooting": "60%", "assists": "9"},
        },
    )
    assert created.status_code == 201

    current = client.get("/api/best-of-week")
    assert current.status_code == 200
    body = current.json()
    assert body["achievements"]["assists"] == "9"
    assert body["athlete"]["id"] == athlete_id
    assert body["athlete"]["user"]["username"] == "joao"


def test_best_of_week_invalid_body(client: TestClient) -> None:
    response = client.post("/api/best-of-week", json={"athleteId": "a"})
    assert response.status_code == 400
    assert response.json() == {"message": "Invalid best of week data"}


def test_live_streams(client: TestClient, seeded_storage: MemoryStorage) -> None:
    admin_id = _admin_id(seeded_storage)
    stream = client.post(
        "/api/live-streams",
        json={"title": "Lions x Tigers", "youtubeUrl": "https://youtu.be/abc", "createdBy": admin_id},
    )
    assert stream.status_code == 201
    assert stream.json()["category"] == "nbb"
    assert stream.json()["isActive"] is False
    assert client.get("/api/live-streams", params={"active": "true"}).json() == []

    stream_id = stream.json()["id"]
    live = client.put(f"/api/live-streams/{stream_id}", json={"isActive": True})
    assert live.json()["isActive"] is True
    assert len(client.get("/api/live-streams", params={"active": "true"}).json()) == 1

    assert client.delete(f"/api/live-streams/{stream_id}").status_code == 204
    missing = client.put(f"/api/live-streams/{stream_id}", json={"isActive": False})
    assert missing.json() == {"message": "Live stream not found"}

    invalid = client.post(
        "/api/live-streams",
        json={"title": "NBA", "youtubeUrl": "https://youtu.be/x", "createdBy": admin_id, "category": "euro"},
    )
    assert invalid.json() == {"message": "Invalid live stream data"}


def test_health_reports_backend_and_counts(client: TestClient) -> None:
    response = client.get("/api/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["backend"] == "memory"
    assert body["counts"]["athletes"] == 1
    assert body["counts"]["liveStreams"] == 0


def test_unexpected_errors_become_500(seeded_storage: MemoryStorage, monkeypatch) -> None:
    async def explode() -> None:
        raise RuntimeError("database on fire")

    monkeypatch.setattr(seeded_storage.athletes, "list_all", explode)
    client = TestClient(create_app(storage=seeded_storage), raise_server_exceptions=False)

    response = client.get("/api/athletes")

    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error"}


def test_lifespan_builds_storage_from_settings(monkeypatch) -> None:
    monkeypatch.setenv("STORAGE_BACKEND", "memory")
    monkeypatch.setenv("STORAGE_SEED", "0")

    with TestClient(create_app()) as client:
        response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["counts"]["athletes"] == 0


def test_best_of_week_with_missing_athlete(client: TestClient, seeded_storage: MemoryStorage) -> None:
    created = client.post(
        "/api/best-of-week",
        json={"athleteId": "gone", "weekStart": "2024-06-02T00:00:00", "setBy": _admin_id(seeded_storage)},
    )
    assert created.status_code == 201

    body = client.get("/api/best-of-week").json()
    assert body["athleteId"] == "gone"
    assert body["athlete"] is None
