"""In-memory implementation of the fact store interface."""

from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional

from ...domain.models.errors import (
    FetchFailure,
    SubmissionWriteFailure,
    VoteWriteFailure,
)
from ...domain.models.fact import MAX_FACTS, Fact, FactId, VoteKind
from ...domain.ports.fact_store import FactStore

_VOTE_FIELDS = {
    VoteKind.INTERESTING: "votes_interesting",
    VoteKind.MINDBLOWING: "votes_mindblowing",
    VoteKind.FALSE: "votes_false",
}


class InMemoryFactStore(FactStore):
    """Deterministic fact store kept in process memory.

    Ids are sequential integers. Fetch order is by interesting votes,
    descending, with ties kept in insertion order.
    """

    def __init__(
        self,
        facts: Optional[Iterable[Fact]] = None,
        provider_name: str = "Memory",
    ):
        self._name = provider_name
        self._rows: Dict[FactId, Fact] = {}
        self._next_id = 1
        self._initialized = False
        for fact in facts or []:
            self._rows[fact.id] = fact
            if isinstance(fact.id, int):
                self._next_id = max(self._next_id, fact.id + 1)

    async def initialize(self) -> None:
        self._initialized = True

    def _check_available(self, error_type: type) -> None:
        if not self._initialized:
            raise error_type("Memory store not initialized")

    async def fetch_facts(
        self,
        category: Optional[str] = None,
        limit: int = MAX_FACTS,
    ) -> List[Fact]:
        self._check_available(FetchFailure)
        rows = [
            fact for fact in self._rows.values()
            if category is None or fact.category.value == category
        ]
        rows.sort(key=lambda fact: fact.votes_interesting, reverse=True)
        return rows[:limit]

    async def insert_fact(self, text: str, source: str, category: str) -> Fact:
        self._check_available(SubmissionWriteFailure)
        try:
            fact = Fact(
                id=self._next_id,
                text=text,
                source=source,
                category=category,
                created_at=datetime.now(timezone.utc),
            )
        except ValueError as e:
            raise SubmissionWriteFailure(f"Inserting fact failed: {e}") from e

        self._rows[fact.id] = fact
        self._next_id += 1
        return fact

    async def update_vote(
        self,
        fact_id: FactId,
        vote_kind: VoteKind,
        new_value: int,
    ) -> Fact:
        self._check_available(VoteWriteFailure)
        if fact_id not in self._rows:
            raise VoteWriteFailure(f"No fact with id {fact_id}")
        if new_value < 0:
            raise VoteWriteFailure(f"Vote counters cannot be negative: {new_value}")

        field = _VOTE_FIELDS[VoteKind(vote_kind)]
        updated = self._rows[fact_id].model_copy(update={field: new_value})
        self._rows[fact_id] = updated
        return updated

    async def shutdown(self) -> None:
        self._initialized = False

    @property
    def provider_name(self) -> str:
        return self._name

    @property
    def is_available(self) -> bool:
        return self._initialized
