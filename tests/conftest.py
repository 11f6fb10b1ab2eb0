"""Test configuration and common fixtures."""

from typing import List
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio

from fact_sphere.domain.models.fact import Category, Fact
from fact_sphere.domain.ports.fact_store import FactStore
from fact_sphere.domain.services.fact_feed_service import FactFeedController
from fact_sphere.infrastructure.store.memory_adapter import InMemoryFactStore


def make_fact(
    fact_id=1,
    category: str = "science",
    interesting: int = 0,
    mindblowing: int = 0,
    false: int = 0,
    text: str = "Water boils at 100C",
) -> Fact:
    """Build a fact the way the store returns it."""
    return Fact.model_validate({
        "id": fact_id,
        "text": text,
        "source": "https://example.com",
        "category": category,
        "votesInteresting": interesting,
        "votesMindblowing": mindblowing,
        "votesFalse": false,
    })


@pytest.fixture
def fact_factory():
    """Provide the fact builder to tests."""
    return make_fact


@pytest.fixture
def seeded_facts() -> List[Fact]:
    """Provide a mix of facts across every category."""
    facts = []
    fact_id = 1
    for index, category in enumerate(Category):
        for votes in (index, index * 3 + 1, 0, 7):
            facts.append(make_fact(fact_id, category.value, interesting=votes))
            fact_id += 1
    return facts


@pytest_asyncio.fixture
async def memory_store(seeded_facts) -> InMemoryFactStore:
    """Provide an initialized in-memory store with seeded facts."""
    store = InMemoryFactStore(seeded_facts)
    await store.initialize()
    yield store
    await store.shutdown()


@pytest_asyncio.fixture
async def empty_store() -> InMemoryFactStore:
    """Provide an initialized in-memory store without facts."""
    store = InMemoryFactStore()
    await store.initialize()
    yield store
    await store.shutdown()


@pytest.fixture
def mock_store() -> AsyncMock:
    """Provide a mock fact store."""
    return AsyncMock(spec=FactStore)


@pytest.fixture
def notifier():
    """Provide a notifier recording the alerts it was given."""

    class RecordingNotifier:
        def __init__(self):
            self.messages = []

        def alert(self, message: str) -> None:
            self.messages.append(message)

    return RecordingNotifier()


@pytest.fixture
def mock_feed(mock_store, notifier) -> FactFeedController:
    """Provide a controller backed by the mock store."""
    return FactFeedController(mock_store, notifier)
