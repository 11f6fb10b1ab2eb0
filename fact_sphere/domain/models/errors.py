"""Error taxonomy for fact synchronization and voting."""

from typing import List


class FactStoreError(RuntimeError):
    """A call to the remote fact store failed."""


class FetchFailure(FactStoreError):
    """Fetching the fact list failed."""


class SubmissionWriteFailure(FactStoreError):
    """Inserting a new fact failed after it passed validation."""


class VoteWriteFailure(FactStoreError):
    """Updating a vote counter failed."""


class ValidationFailure(ValueError):
    """A fact draft was rejected before any network call."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors) or "Invalid fact draft")
