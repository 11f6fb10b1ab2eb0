"""Tests for configuration and the service container."""

from unittest.mock import patch

import pytest

from fact_sphere.domain.services.fact_feed_service import FactFeedController
from fact_sphere.domain.services.submission_service import FactSubmissionForm
from fact_sphere.domain.services.vote_service import VoteCoordinator
from fact_sphere.infrastructure.config import FactSphereConfig
from fact_sphere.infrastructure.dependencies import ServiceContainer
from fact_sphere.infrastructure.store.memory_adapter import InMemoryFactStore


def test_config_from_env():
    """Test configuration values come from the environment."""
    env = {
        "FACT_STORE_PROVIDER": "Memory",
        "FACTS_TABLE": "facts_v2",
        "FACT_STORE_TIMEOUT": "2.5",
        "LOG_LEVEL": "debug",
    }
    with patch.dict("os.environ", env):
        config = FactSphereConfig.from_env()

    assert config.store_provider == "memory"
    assert config.facts_table == "facts_v2"
    assert config.timeout == 2.5
    assert config.log_level == "DEBUG"


def test_config_defaults():
    """Test defaults when nothing is set."""
    with patch.dict("os.environ", {}, clear=True):
        config = FactSphereConfig.from_env()

    assert config.store_provider == "supabase"
    assert config.supabase_url == ""
    assert config.facts_table == "facts"
    assert config.timeout == 10.0


@pytest.mark.asyncio
async def test_container_shares_one_store(notifier):
    """Test every service receives the same store and controller."""
    container = ServiceContainer(
        config=FactSphereConfig(store_provider="memory"),
        notifier=notifier,
    )
    await container.start()

    store = container.get_fact_store()
    feed = container.get_fact_feed()
    assert isinstance(store, InMemoryFactStore)
    assert isinstance(feed, FactFeedController)
    assert isinstance(container.get_submission_form(), FactSubmissionForm)
    assert isinstance(container.get_vote_coordinator(), VoteCoordinator)
    assert container.get_submission_form()._store is store
    assert container.get_vote_coordinator()._feed is feed

    await container.shutdown()
    assert not store.is_available


def test_container_unknown_service():
    """Test getting a service before start."""
    container = ServiceContainer(config=FactSphereConfig(store_provider="memory"))
    with pytest.raises(KeyError):
        container.get_fact_feed()


@pytest.mark.asyncio
async def test_container_passes_supabase_settings():
    """Test Supabase settings reach the adapter."""
    config = FactSphereConfig(
        supabase_url="https://project.supabase.co",
        supabase_key="key",
        facts_table="facts_v2",
        timeout=3.0,
    )
    container = ServiceContainer(config=config)
    with patch("httpx.AsyncClient"):
        await container.start()

    adapter_config = container.get_fact_store()._config
    assert adapter_config.url == "https://project.supabase.co"
    assert adapter_config.api_key == "key"
    assert adapter_config.table == "facts_v2"
    assert adapter_config.timeout == 3.0
