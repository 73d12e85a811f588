from __future__ import annotations

from fastapi.testclient import TestClient

from resonance.analytics.aggregator import compute_analytics
from resonance.analytics.config import AnalyticsConfig
from resonance.analytics.store import configure, get_events, record_event
from resonance.app import app, get_recommender
from resonance.tests.catalog_fixtures import make_recommender, row

client = TestClient(app)

CATALOG = [row(174, primary_intentions=["pain"]), row(432), row(528, primary_intentions=["emotional"])]


def setup_function():
    app.dependency_overrides[get_recommender] = lambda: make_recommender(CATALOG)


def teardown_function():
    app.dependency_overrides.clear()


def test_analytics_returns_empty_initially():
    resp = client.get("/analytics")
    assert resp.status_code == 200
    body = resp.json()
    assert body["total_recommendations"] == 0
    assert body["avg_response_time_ms"] == 0.0
    assert body["fallback_rate"] == 0.0


def test_analytics_tracks_recommendations():
    client.post("/recommendations", json={"intentions": ["pain"]})
    client.post("/recommendations", json={"intentions": ["pain", "emotional"]})
    client.post("/recommendations", json={})
    body = client.get("/analytics").json()

    assert body["total_recommendations"] == 3
    assert body["strategy_usage"] == {"scored": 2, "default_frequency": 1}
    assert body["fallback_rate"] == 33.3
    assert body["top_intentions"][0] == {"name": "pain", "count": 2}


def test_compute_analytics_distribution_and_ties():
    events = [
        {"type": "recommendation", "frequency": 174, "strategy": "scored", "tie_count": 2,
         "catalog_size": 3, "intentions": ["pain"], "response_time_ms": 2.0},
        {"type": "recommendation", "frequency": 174, "strategy": "scored", "tie_count": 1,
         "catalog_size": 3, "intentions": [], "response_time_ms": 4.0},
        {"type": "recommendation", "frequency": 432, "strategy": "last_resort", "tie_count": 0,
         "catalog_size": 0, "intentions": [], "response_time_ms": 3.0},
        {"type": "other"},
    ]
    summary = compute_analytics(events)
    assert summary["total_recommendations"] == 3
    assert summary["avg_response_time_ms"] == 3.0
    assert summary["frequency_distribution"] == [{"hz": "174", "count": 2}, {"hz": "432", "count": 1}]
    assert summary["avg_tie_size"] == 1.5
    assert summary["empty_catalog_requests"] == 1


def test_event_log_keeps_only_newest_events():
    configure(AnalyticsConfig(max_events=5))
    try:
        for i in range(50):
            record_event("recommendation", {"frequency": i})
        events = get_events()
        assert len(events) == 5
        assert [e["frequency"] for e in events] == [45, 46, 47, 48, 49]
    finally:
        configure()


def test_event_log_resize_keeps_newest():
    for i in range(4):
        record_event("recommendation", {"frequency": i})
    configure(AnalyticsConfig(max_events=2))
    try:
        assert [e["frequency"] for e in get_events()] == [2, 3]
    finally:
        configure()
