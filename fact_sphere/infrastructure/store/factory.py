"""Registry that builds the configured fact store."""

import logging
from typing import Callable, Dict, Optional

from ...domain.ports.fact_store import FactStore
from .memory_adapter import InMemoryFactStore
from .supabase_adapter import SupabaseConfig, SupabaseFactStore

logger = logging.getLogger(__name__)

StoreBuilder = Callable[[dict], FactStore]


def _build_supabase(settings: dict) -> FactStore:
    return SupabaseFactStore(config=SupabaseConfig(**settings), provider_name="supabase")


def _build_memory(settings: dict) -> FactStore:
    return InMemoryFactStore(**settings)


class FactStoreFactory:
    """Builds one store per provider name and closes them on shutdown.

    Settings are taken only from the caller; environment lookup belongs
    to FactSphereConfig.
    """

    def __init__(self):
        self._builders: Dict[str, StoreBuilder] = {}
        self._stores: Dict[str, FactStore] = {}

        self.register_provider("supabase", _build_supabase)
        self.register_provider("memory", _build_memory)

    def register_provider(self, provider_name: str, builder: StoreBuilder) -> None:
        """Register a builder for a provider name.

        Args:
            provider_name: Name used in FACT_STORE_PROVIDER
            builder: Callable turning a settings dict into an uninitialized store
        """
        if provider_name in self._builders:
            raise ValueError(f"Provider {provider_name} already registered")
        self._builders[provider_name] = builder

    async def create_provider(
        self,
        provider_name: str,
        settings: Optional[dict] = None,
    ) -> FactStore:
        """Build and initialize a store, reusing one already created.

        Args:
            provider_name: Registered provider name
            settings: Keyword settings for the provider

        Returns:
            Initialized store
        """
        if provider_name in self._stores:
            return self._stores[provider_name]

        builder = self._builders.get(provider_name)
        if builder is None:
            raise ValueError(f"Unknown provider: {provider_name}")

        store = builder(dict(settings or {}))
        await store.initialize()
        self._stores[provider_name] = store
        logger.info(f"🔌 Fact store '{store.provider_name}' ready")
        return store

    async def shutdown_all(self) -> None:
        """Shut down every created store."""
        while self._stores:
            provider_name, store = self._stores.popitem()
            await store.shutdown()
            logger.debug(f"Fact store '{provider_name}' closed")
