"""Tests for the recommendation HTTP API."""

from fastapi.testclient import TestClient

from photo_triage.api.app import create_app
from tests.conftest import HOUR_MS, START_MS


def _photo(photo_id: str, offset_ms: int = 0, **overrides) -> dict[str, object]:
    payload: dict[str, object] = {
        "id": photo_id,
        "location": f"content://media/external/images/media/{photo_id}",
        "date_modified": START_MS + offset_ms,
        "size": 2_000_000,
        "width": 4000,
        "height": 3000,
        "album_name": "Camera",
    }
    payload.update(overrides)
    return payload


def _catalog(count: int) -> list[dict[str, object]]:
    return [_photo(f"p{index}", index * 3 * 86_400_000) for index in range(count)]


def test_health(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_startup_removes_expired_cooldowns(container, cooldown_repository) -> None:
    cooldown_repository.picks.update(
        {"stale": START_MS - 25 * HOUR_MS, "fresh": START_MS - HOUR_MS}
    )

    with TestClient(create_app(container)) as client:
        assert client.get("/health").status_code == 200

    assert cooldown_repository.picks == {"fresh": START_MS - HOUR_MS}


def test_startup_survives_cooldown_storage_outage(
    container, cooldown_repository
) -> None:
    cooldown_repository.fail = True

    with TestClient(create_app(container)) as client:
        assert client.get("/health").status_code == 200


def test_batch_uses_stored_preferences(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/recommendations/batch", json={"catalog": _catalog(30)})

    assert response.status_code == 200
    data = response.json()
    assert data["mode"] == "RANDOM_WALK"
    assert len(data["batch"]) == 15
    assert len({photo["id"] for photo in data["batch"]}) == 15


def test_batch_clamps_requested_size(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/recommendations/batch",
        json={"catalog": _catalog(10), "batch_size": 2},
    )

    assert response.status_code == 200
    assert len(response.json()["batch"]) == 5


def test_empty_catalog_returns_empty_batch(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/recommendations/batch", json={"catalog": []})

    assert response.status_code == 200
    assert response.json()["batch"] == []
    assert container.cooldown_store.active_ids(START_MS) == set()


def test_similar_batch_starts_with_anchor(container) -> None:
    client = TestClient(create_app(container))
    anchor = _photo("x")
    catalog = [
        _photo("c", 2 * 86_400_000),
        _photo("b", 40_000),
        anchor,
        _photo("a", 2_000),
        _photo("d", 3_000, width=100, height=900, size=10, album_name=None),
        _photo("e", 5 * 86_400_000, width=100, height=900, size=10, album_name=None),
    ]

    response = client.post(
        "/recommendations/batch",
        json={
            "catalog": catalog,
            "batch_size": 5,
            "mode": "SIMILAR",
            "anchor": anchor,
        },
    )

    assert response.status_code == 200
    ids = [photo["id"] for photo in response.json()["batch"]]
    assert ids == ["x", "a", "b", "c", "d"]


def test_second_request_skips_cooled_photos(container) -> None:
    client = TestClient(create_app(container))
    catalog = _catalog(10)

    first = client.post(
        "/recommendations/batch", json={"catalog": catalog, "batch_size": 5}
    ).json()
    second = client.post(
        "/recommendations/batch", json={"catalog": catalog, "batch_size": 5}
    ).json()

    first_ids = {photo["id"] for photo in first["batch"]}
    second_ids = {photo["id"] for photo in second["batch"]}
    assert first_ids.isdisjoint(second_ids)


def test_invalid_photo_is_rejected(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/recommendations/batch",
        json={"catalog": [_photo("bad", size=-1)]},
    )

    assert response.status_code == 422


def test_preferences_roundtrip(container) -> None:
    client = TestClient(create_app(container))

    initial = client.get("/preferences").json()
    updated = client.put(
        "/preferences", json={"recommend_mode": "SIMILAR", "batch_size": 70}
    ).json()

    assert initial["recommend_mode"] == "RANDOM_WALK"
    assert initial["batch_size"] == 15
    assert initial["batch_size_options"] == [5, 10, 15, 20, 30, 50]
    assert updated["recommend_mode"] == "SIMILAR"
    assert updated["batch_size"] == 50
    assert client.get("/preferences").json()["recommend_mode"] == "SIMILAR"


def test_review_stats_endpoints(container) -> None:
    client = TestClient(create_app(container))

    client.post("/stats/reviews", json={"reviewed": 15, "deleted": 3})
    response = client.post("/stats/reviews", json={"reviewed": 5})

    assert response.json() == {"total_reviewed": 20, "total_deleted": 3}
    assert client.get("/stats").json() == {"total_reviewed": 20, "total_deleted": 3}
    assert client.post("/stats/reviews", json={"reviewed": -1}).status_code == 422
