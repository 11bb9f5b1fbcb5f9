from fastapi.testclient import TestClient

from heatmap_calendar.core.middleware import SlidingWindowLimiter
from heatmap_calendar.main import create_app
from heatmap_calendar.settings import Settings


def test_calendar_endpoint_rate_limited_after_threshold() -> None:
    """Rate limiter blocks repeated calendar builds from one client."""

    app = create_app(Settings(rate_limit_per_minute=1, rate_limit_window_seconds=60))
    client = TestClient(app)

    headers = {"X-Forwarded-For": "203.0.113.10, 10.0.0.1"}

    first = client.post("/heatmap/calendar", json={}, headers=headers)
    second = client.post("/heatmap/rows", json={}, headers=headers)
    other_client = client.post(
        "/heatmap/calendar", json={}, headers={"X-Forwarded-For": "203.0.113.11"}
    )

    assert first.status_code == 200
    assert second.status_code == 429
    assert second.json() == {"detail": "Too Many Requests"}
    assert second.headers["Retry-After"]
    assert other_client.status_code == 200


def test_non_heatmap_routes_not_rate_limited(monkeypatch) -> None:
    """Rate limiter does not affect routes outside /heatmap/."""

    monkeypatch.setenv("RATE_LIMIT_PER_MINUTE", "1")
    monkeypatch.setenv("RATE_LIMIT_WINDOW_SECONDS", "60")
    app = create_app()
    client = TestClient(app)

    first = client.get("/health/live")
    second = client.get("/health/live")

    assert first.status_code == 200
    assert second.status_code == 200


def test_limiter_reports_wait_time_and_expires_hits() -> None:
    now = [0.0]
    limiter = SlidingWindowLimiter(1, 60, clock=lambda: now[0])

    assert limiter.acquire("client") is None

    now[0] = 1.0
    assert limiter.acquire("client") == 59
    assert limiter.acquire("another") is None

    now[0] = 60.0
    assert limiter.acquire("client") is None


def test_limiter_clamps_invalid_config() -> None:
    limiter = SlidingWindowLimiter(0, -5)

    assert limiter.max_requests == 1
    assert limiter.window_seconds == 1


def test_limiter_drops_keys_once_their_hits_expire() -> None:
    now = [0.0]
    limiter = SlidingWindowLimiter(1, 60, clock=lambda: now[0])

    for i in range(1000):
        limiter.acquire(f"client-{i}")
    assert limiter.tracked_keys == 1000

    now[0] = 61.0
    assert limiter.acquire("fresh") is None

    assert limiter.tracked_keys == 1
