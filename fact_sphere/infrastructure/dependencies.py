"""Dependency injection configuration for hexagonal architecture."""

import logging
from typing import Any, Dict, Optional

from ..domain.ports.fact_store import FactStore, Notifier
from ..domain.services.fact_feed_service import FactFeedController
from ..domain.services.submission_service import FactSubmissionForm
from ..domain.services.vote_service import VoteCoordinator
from .config import FactSphereConfig
from .store.factory import FactStoreFactory

logger = logging.getLogger(__name__)


class ServiceContainer:
    """Service container for dependency injection.

    The fact store is created once in ``start`` and handed to every
    service that talks to it.
    """

    def __init__(
        self,
        config: Optional[FactSphereConfig] = None,
        notifier: Optional[Notifier] = None,
        factory: Optional[FactStoreFactory] = None,
    ):
        """Initialize service container."""
        self._config = config or FactSphereConfig.from_env()
        self._notifier = notifier
        self._factory = factory or FactStoreFactory()
        self._services: Dict[str, Any] = {}

    @property
    def config(self) -> FactSphereConfig:
        return self._config

    def _store_config(self) -> dict:
        if self._config.store_provider == "supabase":
            return {
                "url": self._config.supabase_url,
                "api_key": self._config.supabase_key,
                "table": self._config.facts_table,
                "timeout": self._config.timeout,
            }
        return {}

    async def start(self) -> None:
        """Create the fact store and the services that depend on it."""
        if self._services:
            return

        logger.info(f"🔧 Setting up service container with '{self._config.store_provider}' store...")
        store = await self._factory.create_provider(
            self._config.store_provider,
            self._store_config(),
        )
        feed = FactFeedController(store, self._notifier)

        self._services = {
            'fact_store': store,
            'fact_feed': feed,
            'submission_form': FactSubmissionForm(store, feed),
            'vote_coordinator': VoteCoordinator(store, feed),
        }
        logger.info("✅ Service container setup completed")

    def get(self, service_name: str) -> Any:
        """Get a service by name.

        Args:
            service_name: Name of the service

        Returns:
            Service instance

        Raises:
            KeyError: If service not found
        """
        if service_name not in self._services:
            raise KeyError(f"Service '{service_name}' not found")
        return self._services[service_name]

    def get_fact_store(self) -> FactStore:
        return self.get('fact_store')

    def get_fact_feed(self) -> FactFeedController:
        """Get the fact list controller."""
        return self.get('fact_feed')

    def get_submission_form(self) -> FactSubmissionForm:
        """Get the submission form."""
        return self.get('submission_form')

    def get_vote_coordinator(self) -> VoteCoordinator:
        """Get the vote coordinator."""
        return self.get('vote_coordinator')

    async def shutdown(self) -> None:
        """Shut down the fact store."""
        await self._factory.shutdown_all()
        self._services = {}
        logger.info("🔄 Service container shut down")
