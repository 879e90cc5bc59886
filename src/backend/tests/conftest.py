"""
Pytest fixtures for Pin-It badge backend tests.
"""

import os
from collections.abc import AsyncGenerator
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

# Set test environment variables before importing app
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("DEBUG", "false")


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    """Use asyncio backend for async tests."""
    return "asyncio"


@pytest.fixture
async def app() -> Any:
    """Create FastAPI application for testing."""
    from main import app as fastapi_app

    return fastapi_app


@pytest.fixture
async def client(app: Any) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        headers={"Origin": "http://localhost:3000"},
    ) as ac:
        yield ac


@pytest.fixture
def empty_stats() -> dict[str, Any]:
    """A brand-new user with no activity at all."""
    return {}


@pytest.fixture
def active_user_stats() -> dict[str, Any]:
    """Stats for an established user, keyed the way the stats provider sends them."""
    return {
        "pinsCreated": 30,
        "commentsMade": 12,
        "votesCast": 140,
        "verificationsMade": 3,
        "ngosCreated": 1,
        "eventsCreated": 0,
        "suggestionsMade": 2,
        "suggestionsImplemented": 0,
        "currentStreak": 9,
        "pinsResolved": 1,
        "pinsWithImages": 4,
        "maxPinsInCity": 12,
        "citiesWithPins": 2,
        "emailVerified": True,
        "role": "reviewer",
        "weeklyRank": 7,
        "accountAgeDays": 400,
        "totalPoints": 620,
    }


@pytest.fixture
def maxed_out_stats() -> dict[str, Any]:
    """Stats that satisfy every badge except the mutually exclusive ones."""
    return {
        "pinsCreated": 250,
        "commentsMade": 100,
        "votesCast": 500,
        "verificationsMade": 100,
        "ngosCreated": 10,
        "eventsCreated": 5,
        "suggestionsMade": 25,
        "suggestionsImplemented": 1,
        "currentStreak": 100,
        "pinsResolved": 1,
        "pinsWith50Upvotes": 1,
        "criticalPins": 1,
        "pinsWithImages": 10,
        "maxPinsInCity": 10,
        "citiesWithPins": 5,
        "emailVerified": True,
        "role": "admin",
        "weeklyRank": 1,
        "accountAgeDays": 730,
        "totalPoints": 1000,
        "commentsWith10Likes": 1,
        "pinsWith10Comments": 1,
        "pinsWith10Saves": 1,
    }
