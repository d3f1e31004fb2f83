"""Tests for the HTTP surface."""

from fastapi.testclient import TestClient

from food_lookup.api.app import create_app
from food_lookup.containers import AppContainer
from tests.conftest import FakeBarcodeAdapter


def test_health_endpoint(container: AppContainer) -> None:
    with TestClient(create_app(container)) as client:
        response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_search_endpoint_returns_ranked_records(container: AppContainer) -> None:
    with TestClient(create_app(container)) as client:
        response = client.get("/foods/search", params={"q": "banana"})

    assert response.status_code == 200
    payload = response.json()
    assert [record["name"] for record in payload["records"]] == [
        "Banana",
        "Banana Bread",
    ]
    assert payload["records"][0]["serving_label"] == "1 medium (118g)"
    assert payload["per_source_counts"] == {"local": 2}
    assert payload["outcomes"] == {"local": "ok"}
    assert payload["total_available_count"] == 2


def test_search_endpoint_rejects_bad_input(container: AppContainer) -> None:
    with TestClient(create_app(container)) as client:
        blank = client.get("/foods/search", params={"q": "   "})
        missing = client.get("/foods/search")
        zero_limit = client.get("/foods/search", params={"q": "rice", "limit": 0})

    assert blank.status_code == 422
    assert blank.json() == {"detail": "Search query must not be empty"}
    assert missing.status_code == 422
    assert zero_limit.status_code == 422


def test_barcode_lookup_endpoint(
    container: AppContainer, off_provider: FakeBarcodeAdapter
) -> None:
    with TestClient(create_app(container)) as client:
        found = client.get("/barcodes/3017620422003")
        again = client.get("/barcodes/3017620422003")
        missing = client.get("/barcodes/4000000000000")
        invalid = client.get("/barcodes/not-a-code")

    assert found.status_code == 200
    body = found.json()
    assert body["found"] is True
    assert body["source"] == "openfoodfacts"
    assert body["confidence"] == "high"
    assert body["was_cached"] is False
    assert body["record"]["name"] == "Nutella (Ferrero)"
    assert again.json()["was_cached"] is True
    assert off_provider.calls == ["3017620422003", "4000000000000"]
    assert missing.json() == {
        "found": False,
        "record": None,
        "source": None,
        "confidence": "not_found",
        "was_cached": False,
    }
    assert invalid.status_code == 422


def test_barcode_submission_and_history(container: AppContainer) -> None:
    with TestClient(create_app(container)) as client:
        created = client.post(
            "/barcodes/5449000000996",
            json={"name": "Cola", "calories": 42, "carbs_g": 10.6},
        )
        rejected = client.post("/barcodes/5449000000996", json={"calories": 42})
        unnamed = client.post(
            "/barcodes/5449000000996", json={"name": "   ", "calories": 42}
        )
        lookup = client.get("/barcodes/5449000000996")
        history = client.get("/barcodes/history")

    assert created.status_code == 201
    entry = created.json()
    assert entry["barcode"] == "5449000000996"
    assert entry["source"] == "user_submitted"
    assert entry["record"]["external_id"] == "5449000000996"
    assert entry["record"]["carbs_g"] == 10.6
    assert rejected.status_code == 422
    assert unnamed.status_code == 422
    assert lookup.json()["source"] == "user_submitted"
    assert [item["barcode"] for item in history.json()["entries"]] == [
        "5449000000996"
    ]
    assert history.json()["entries"][0]["hit_count"] == 1


def test_recent_and_trending_endpoints(container: AppContainer) -> None:
    with TestClient(create_app(container)) as client:
        client.get("/foods/search", params={"q": "banana"})
        client.get("/foods/search", params={"q": "Banana"})
        recent = client.get("/searches/recent")
        trending = client.get("/searches/trending")
        cleared = client.delete("/searches/recent")
        after = client.get("/searches/recent")
        trending_after = client.get("/searches/trending")

    searches = recent.json()["searches"]
    assert [item["query"] for item in searches] == ["Banana"]
    assert searches[0]["result_count"] == 2
    terms = trending.json()["terms"]
    assert [(item["term"], item["count"]) for item in terms] == [("banana", 2)]
    assert cleared.json() == {"status": "ok"}
    assert after.json() == {"searches": []}
    assert len(trending_after.json()["terms"]) == 1
