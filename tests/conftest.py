"""Pytest fixtures for card deck tests."""

import pytest
import pytest_asyncio
from random import Random

from httpx import AsyncClient, ASGITransport

from api.main import create_app
from core.cards import DeckState


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A fresh, ordered deck."""
    return DeckState(rng=rng)


@pytest.fixture
def empty_deck(deck):
    """A deck with every card drawn."""
    for _ in range(52):
        deck.draw()
    return deck


@pytest.fixture
def app(deck):
    """Application serving the fixture deck."""
    return create_app(deck)


@pytest_asyncio.fixture
async def client(app):
    """Create test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
