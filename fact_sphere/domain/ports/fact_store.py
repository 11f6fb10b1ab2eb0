"""Port interface for the remote fact store."""

from abc import ABC, abstractmethod
from typing import List, Optional, Protocol

from ..models.fact import MAX_FACTS, Fact, FactId, VoteKind


class FactStore(ABC):
    """Abstract interface for the remote store holding facts.

    This port defines how the client core talks to the store. The store is
    the id authority: every write returns the canonical record it holds
    after the write. Concrete implementations live in the infrastructure
    layer (Supabase, in-memory).
    """

    @abstractmethod
    async def initialize(self) -> None:
        """Initialize the store client and its resources."""
        pass

    @abstractmethod
    async def fetch_facts(
        self,
        category: Optional[str] = None,
        limit: int = MAX_FACTS,
    ) -> List[Fact]:
        """Fetch facts ordered by interesting votes, most voted first.

        Args:
            category: Equality filter on category, no filter when None
            limit: Maximum number of rows to return

        Returns:
            Ordered list of facts

        Raises:
            FetchFailure: If the store could not be queried
        """
        pass

    @abstractmethod
    async def insert_fact(self, text: str, source: str, category: str) -> Fact:
        """Insert a new fact with zeroed counters.

        Args:
            text: Statement text
            source: Source URL
            category: Category name

        Returns:
            The stored fact, carrying its store-assigned id

        Raises:
            SubmissionWriteFailure: If the insert failed
        """
        pass

    @abstractmethod
    async def update_vote(
        self,
        fact_id: FactId,
        vote_kind: VoteKind,
        new_value: int,
    ) -> Fact:
        """Set one vote counter of a fact to an absolute value.

        Args:
            fact_id: Identifier of the fact
            vote_kind: Counter to set
            new_value: New absolute counter value

        Returns:
            The fact as stored after the update

        Raises:
            VoteWriteFailure: If the update failed or no fact matched
        """
        pass

    @abstractmethod
    async def shutdown(self) -> None:
        """Shutdown the store client and clean up resources."""
        pass

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Get the provider name."""
        pass

    @property
    @abstractmethod
    def is_available(self) -> bool:
        """Check if the store is available."""
        pass


class Notifier(Protocol):
    """Protocol for blocking user-visible notifications."""

    def alert(self, message: str) -> None:
        """Show a message the user has to acknowledge."""
        ...
