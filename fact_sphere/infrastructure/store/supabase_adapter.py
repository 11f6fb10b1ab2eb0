"""Supabase implementation of the fact store interface."""

from typing import Any, Dict, List, Optional

import httpx
from pydantic import BaseModel

from ...domain.models.errors import (
    FetchFailure,
    SubmissionWriteFailure,
    VoteWriteFailure,
)
from ...domain.models.fact import MAX_FACTS, Fact, FactId, VoteKind
from ...domain.ports.fact_store import FactStore


class SupabaseConfig(BaseModel):
    """Configuration for the Supabase adapter."""

    url: str = ""
    api_key: str = ""
    table: str = "facts"
    timeout: float = 10.0

    @property
    def rest_url(self) -> str:
        return f"{self.url.rstrip('/')}/rest/v1"


class SupabaseFactStore(FactStore):
    """Fact store backed by a Supabase table through its PostgREST API."""

    def __init__(
        self,
        config: Optional[SupabaseConfig] = None,
        provider_name: str = "Supabase",
    ):
        """Initialize the adapter."""
        self._config = config or SupabaseConfig()
        self._name = provider_name
        self._client = None
        self._initialized = False

    async def initialize(self) -> None:
        """Initialize the HTTP client."""
        if not self._config.url:
            raise ConnectionError("Failed to initialize Supabase store: no project URL configured")

        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._config.rest_url,
                timeout=self._config.timeout,
                headers={
                    "apikey": self._config.api_key,
                    "Authorization": f"Bearer {self._config.api_key}",
                    "Content-Type": "application/json",
                },
            )
        self._initialized = True

    @property
    def _table(self) -> str:
        return f"/{self._config.table}"

    def _require_client(self) -> httpx.AsyncClient:
        if not self._client:
            raise RuntimeError("Provider not initialized")
        return self._client

    @staticmethod
    def _first_row(rows: Any) -> Dict[str, Any]:
        # PostgREST answers writes with the affected rows as a list
        if not isinstance(rows, list) or not rows:
            raise ValueError("store returned no rows")
        return rows[0]

    async def fetch_facts(
        self,
        category: Optional[str] = None,
        limit: int = MAX_FACTS,
    ) -> List[Fact]:
        """Fetch facts ordered by interesting votes."""
        params = {
            "select": "*",
            "order": f"{VoteKind.INTERESTING.value}.desc",
            "limit": str(limit),
        }
        if category is not None:
            params["category"] = f"eq.{category}"

        try:
            client = self._require_client()
            response = await client.get(self._table, params=params)
            response.raise_for_status()
            return [Fact.model_validate(row) for row in response.json()]
        except Exception as e:
            raise FetchFailure(f"Fetching facts failed: {e}") from e

    async def insert_fact(self, text: str, source: str, category: str) -> Fact:
        """Insert a fact and return the stored row."""
        try:
            client = self._require_client()
            response = await client.post(
                self._table,
                json={"text": text, "source": source, "category": category},
                headers={"Prefer": "return=representation"},
            )
            response.raise_for_status()
            return Fact.model_validate(self._first_row(response.json()))
        except Exception as e:
            raise SubmissionWriteFailure(f"Inserting fact failed: {e}") from e

    async def update_vote(
        self,
        fact_id: FactId,
        vote_kind: VoteKind,
        new_value: int,
    ) -> Fact:
        """Set a vote counter and return the updated row."""
        column = VoteKind(vote_kind).value

        try:
            client = self._require_client()
            response = await client.patch(
                self._table,
                params={"id": f"eq.{fact_id}"},
                json={column: new_value},
                headers={"Prefer": "return=representation"},
            )
            response.raise_for_status()
            return Fact.model_validate(self._first_row(response.json()))
        except Exception as e:
            raise VoteWriteFailure(f"Updating {column} of fact {fact_id} failed: {e}") from e

    async def shutdown(self) -> None:
        """Clean up resources."""
        if self._client:
            await self._client.aclose()
            self._client = None
        self._initialized = False

    @property
    def provider_name(self) -> str:
        """Get the provider name."""
        return self._name

    @property
    def is_available(self) -> bool:
        """Check if the provider is available."""
        return self._initialized and self._client is not None
