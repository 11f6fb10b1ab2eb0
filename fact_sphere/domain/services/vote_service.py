"""Domain service applying votes to facts."""

import logging
from typing import Optional, Set, Union

from ..models.errors import VoteWriteFailure
from ..models.fact import Fact, FactId, VoteKind
from ..ports.fact_store import FactStore
from .fact_feed_service import FactFeedController

logger = logging.getLogger(__name__)


class VoteCoordinator:
    """Casts votes and merges the stored result back into the list.

    The new counter value is the cached value plus one, sent as an absolute
    set. Two sessions voting on the same counter at the same time can
    therefore lose an update (last writer wins). Within this session a fact
    with a vote in flight refuses further votes until the first resolves.
    """

    def __init__(self, store: FactStore, feed: FactFeedController):
        """Initialize the coordinator.

        Args:
            store: Remote fact store
            feed: Controller owning the fact list
        """
        self._store = store
        self._feed = feed
        self._in_flight: Set[FactId] = set()

    def is_voting(self, fact_id: FactId) -> bool:
        """Check whether a vote for the fact is outstanding."""
        return fact_id in self._in_flight

    async def cast_vote(
        self,
        fact_id: FactId,
        vote_kind: Union[VoteKind, str],
    ) -> Optional[Fact]:
        """Add one vote of the given kind to a fact.

        Args:
            fact_id: Identifier of the fact
            vote_kind: Counter to increment

        Returns:
            The updated fact, or None if the vote was blocked or failed
        """
        kind = VoteKind(vote_kind)

        if fact_id in self._in_flight:
            logger.debug(f"Vote on fact {fact_id} ignored: another vote in flight")
            return None

        fact = self._feed.get_fact(fact_id)
        if fact is None:
            logger.warning(f"⚠️ Cannot vote on fact {fact_id}: not in the list")
            return None

        new_value = fact.votes_for(kind) + 1
        self._in_flight.add(fact_id)
        try:
            updated = await self._store.update_vote(fact_id, kind, new_value)
        except VoteWriteFailure as e:
            logger.warning(f"⚠️ Vote {kind.value} on fact {fact_id} failed: {e}")
            return None
        finally:
            self._in_flight.discard(fact_id)

        self._feed.replace_fact(fact_id, updated)
        logger.info(f"🗳️ Fact {fact_id}: {kind.value} = {updated.votes_for(kind)}")
        return updated
