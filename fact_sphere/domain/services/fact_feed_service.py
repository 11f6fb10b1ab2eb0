"""Domain service owning the authoritative fact list."""

import logging
from typing import List, Optional, Tuple

from ..models.errors import FactStoreError
from ..models.fact import (
    ALL_CATEGORIES,
    MAX_FACTS,
    Fact,
    FactId,
    is_known_category,
)
from ..ports.fact_store import FactStore, Notifier

logger = logging.getLogger(__name__)

FETCH_ERROR_MESSAGE = "There was a problem getting data"


class LoggingNotifier:
    """Notifier used when no user-facing one is injected."""

    def alert(self, message: str) -> None:
        logger.error(f"🚨 {message}")


class FactFeedController:
    """View state for the fact list.

    Owns the ordered list of facts, the active category filter and the
    loading flag. It is the only place the list is mutated: wholesale by
    ``load_facts``, by append in ``append_fact`` and in place by
    ``replace_fact``. Order is the one the store returned; nothing here
    re-sorts.

    Every fetch gets a generation number. A response is applied only if
    its generation is still the latest one issued, so a slow response for
    an old category never overwrites the list of a newer one.
    """

    def __init__(self, store: FactStore, notifier: Optional[Notifier] = None):
        """Initialize the controller.

        Args:
            store: Remote fact store
            notifier: Blocking notification channel for fetch errors
        """
        self._store = store
        self._notifier = notifier or LoggingNotifier()
        self._facts: List[Fact] = []
        self._category = ALL_CATEGORIES
        self._shown_category = ALL_CATEGORIES
        self._generation = 0
        self.is_loading = False
        self.last_error: Optional[str] = None

    @property
    def facts(self) -> Tuple[Fact, ...]:
        """Get a read-only view of the authoritative list."""
        return tuple(self._facts)

    @property
    def category(self) -> str:
        """Get the active category filter."""
        return self._category

    @property
    def fact_count(self) -> int:
        """Get the number of facts in the list."""
        return len(self._facts)

    async def set_category(self, category: str) -> bool:
        """Switch the category filter and reload the list.

        Args:
            category: "all" or one of the fixed category names

        Returns:
            True if this call's fetch result was applied
        """
        if category != ALL_CATEGORIES and not is_known_category(category):
            raise ValueError(f"Unknown category: {category}")

        logger.info(f"🗂️ Category changed: {self._category} -> {category}")
        self._category = category
        return await self.load_facts()

    async def load_facts(self) -> bool:
        """Fetch the list for the active category and replace it.

        Returns:
            True if the response was applied, False if it failed or a newer
            fetch superseded it
        """
        self._generation += 1
        generation = self._generation
        category = self._category
        self.is_loading = True

        try:
            facts = await self._store.fetch_facts(
                category=None if category == ALL_CATEGORIES else category,
                limit=MAX_FACTS,
            )
        except FactStoreError as e:
            if generation != self._generation:
                logger.debug(f"Dropping failed fetch #{generation} for '{category}': superseded")
                return False
            logger.error(f"❌ Fetching facts for '{category}' failed: {e}")
            self._category = self._shown_category
            self.is_loading = False
            self.last_error = FETCH_ERROR_MESSAGE
            self._notifier.alert(FETCH_ERROR_MESSAGE)
            return False

        if generation != self._generation:
            logger.debug(f"Dropping fetch #{generation} for '{category}': superseded")
            return False

        self._facts = list(facts[:MAX_FACTS])
        self._shown_category = category
        self.is_loading = False
        self.last_error = None
        logger.info(f"✅ Loaded {len(self._facts)} facts for '{category}'")
        return True

    def get_fact(self, fact_id: FactId) -> Optional[Fact]:
        """Get the cached fact with the given id, if listed."""
        for fact in self._facts:
            if fact.id == fact_id:
                return fact
        return None

    def append_fact(self, fact: Fact) -> None:
        """Add a confirmed new fact at the end of the list."""
        if self.replace_fact(fact.id, fact):
            logger.warning(f"⚠️ Fact {fact.id} already listed, replaced in place")
            return
        self._facts.append(fact)

    def replace_fact(self, fact_id: FactId, updated: Fact) -> bool:
        """Replace the entry with the given id.

        Unknown ids leave the list unchanged.

        Returns:
            True if an entry was replaced
        """
        for index, fact in enumerate(self._facts):
            if fact.id == fact_id:
                self._facts[index] = updated
                return True
        return False
