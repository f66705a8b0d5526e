"""Tests for API endpoints."""

import asyncio
import threading

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from api.main import app
from twentyone.statistics import TrialSummary


@pytest_asyncio.fixture
async def client():
    """Create test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


OUTCOMES = {"user_quit", "user_busted", "house_busted", "house_won", "user_won"}


@pytest.mark.asyncio
async def test_health_check(client):
    """Test health check endpoint."""
    response = await client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


@pytest.mark.asyncio
async def test_play_game(client):
    """Test playing a single game."""
    response = await client.post(
        "/api/game/play",
        json={
            "player": {"name": "louis"},
            "house": {"name": "stop_at", "limit": 17},
            "seed": 42,
        },
    )
    assert response.status_code == 200
    data = response.json()

    assert data["outcome"] in OUTCOMES
    assert 1 <= data["player_up_card"] <= 10
    assert 1 <= data["house_up_card"] <= 10
    assert data["player_tally"] <= 21
    assert data["house_tally"] <= 21
    assert data["events"][0]["event_type"] == "GAME_STARTED"
    assert data["events"][-1]["event_type"] == "GAME_RESOLVED"
    assert data["events"][-1]["data"]["outcome"] == data["outcome"]


@pytest.mark.asyncio
async def test_play_game_seed_is_reproducible(client):
    """Test that the same seed replays the same game."""
    body = {
        "player": {"name": "stop_at", "limit": 15},
        "house": {"name": "stop_at", "limit": 17},
        "seed": 7,
    }
    first = (await client.post("/api/game/play", json=body)).json()
    second = (await client.post("/api/game/play", json=body)).json()
    assert first["outcome"] == second["outcome"]
    assert first["player_tally"] == second["player_tally"]
    assert first["house_tally"] == second["house_tally"]


@pytest.mark.asyncio
async def test_play_game_house_busts(client):
    """Test that a house that never stops always busts."""
    response = await client.post(
        "/api/game/play",
        json={"player": {"name": "always_done"}, "house": {"name": "always_draw"}},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["outcome"] == "house_busted"
    assert data["player_wins"] is True
    assert data["player_tally"] == data["player_up_card"]


@pytest.mark.asyncio
async def test_play_game_unknown_strategy(client):
    """Test that unknown strategy names are rejected."""
    response = await client.post(
        "/api/game/play",
        json={"player": {"name": "martingale"}, "house": {"name": "louis"}},
    )
    assert response.status_code == 400
    assert "martingale" in response.json()["detail"]


@pytest.mark.asyncio
async def test_play_game_missing_limit(client):
    """Test that stop_at without a limit is rejected."""
    response = await client.post(
        "/api/game/play",
        json={"player": {"name": "stop_at"}, "house": {"name": "louis"}},
    )
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_list_strategies(client):
    """Test listing strategy names."""
    response = await client.get("/api/trials/strategies")
    assert response.status_code == 200
    assert response.json()["strategies"] == ["always_done", "always_draw", "louis", "stop_at"]


@pytest.mark.asyncio
async def test_run_trials(client):
    """Test running a batch of games."""
    response = await client.post(
        "/api/trials/run",
        json={
            "player": {"name": "louis"},
            "house": {"name": "stop_at", "limit": 16},
            "count": 200,
            "seed": 3,
        },
    )
    assert response.status_code == 200
    data = response.json()

    assert data["games"] == 200
    assert set(data["outcomes"]) == OUTCOMES
    assert sum(data["outcomes"].values()) == 200
    assert data["wins"] == data["outcomes"]["user_won"] + data["outcomes"]["house_busted"]
    assert data["win_rate"] == pytest.approx(data["wins"] / 200)


@pytest.mark.asyncio
async def test_run_zero_trials(client):
    """Test that zero trials is valid."""
    response = await client.post(
        "/api/trials/run",
        json={
            "player": {"name": "stop_at", "limit": 16},
            "house": {"name": "stop_at", "limit": 16},
            "count": 0,
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert data["games"] == 0
    assert data["wins"] == 0
    assert data["win_rate"] == 0.0


@pytest.mark.asyncio
async def test_run_trials_negative_count(client):
    """Test that negative counts fail validation."""
    response = await client.post(
        "/api/trials/run",
        json={"player": {"name": "louis"}, "house": {"name": "louis"}, "count": -1},
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_run_trials_over_max(client):
    """Test that counts above the configured maximum are rejected."""
    from config import config

    response = await client.post(
        "/api/trials/run",
        json={
            "player": {"name": "louis"},
            "house": {"name": "louis"},
            "count": config.simulation.max_trials + 1,
        },
    )
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_health_answers_during_trial_batch(client, monkeypatch):
    """Test that a running batch doesn't hold up other requests."""
    started = threading.Event()
    release = threading.Event()
    released = []

    def slow_summarize(player, house, count, cards=None):
        started.set()
        released.append(release.wait(timeout=5))
        return TrialSummary(games=0)

    monkeypatch.setattr("api.routes.trials.summarize_trials", slow_summarize)

    batch = asyncio.create_task(
        client.post(
            "/api/trials/run",
            json={"player": {"name": "louis"}, "house": {"name": "louis"}, "count": 10},
        )
    )
    assert await asyncio.to_thread(started.wait, 5)

    health = await client.get("/api/health")
    assert health.status_code == 200
    release.set()

    response = await batch
    assert response.status_code == 200
    assert released == [True]
