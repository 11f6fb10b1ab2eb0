"""Validation and submission of new facts."""

import logging
from typing import List, Optional

from pydantic import BaseModel, Field, AnyHttpUrl, TypeAdapter, ValidationError

from ..models.errors import SubmissionWriteFailure, ValidationFailure
from ..models.fact import MAX_FACT_LENGTH, Fact, is_known_category
from ..ports.fact_store import FactStore
from .fact_feed_service import FactFeedController

logger = logging.getLogger(__name__)

INVALID_DRAFT_MESSAGE = "Some of the data in the input fields are not valid. Try again!"
UPLOAD_ERROR_MESSAGE = "There was a problem uploading the fact. Try again!"

_http_url = TypeAdapter(AnyHttpUrl)


def is_valid_http_url(value: str) -> bool:
    """Check that a string is an absolute http or https URL."""
    try:
        _http_url.validate_python(value)
    except ValidationError:
        return False
    return True


class DraftValidation(BaseModel):
    """Outcome of validating a fact draft."""

    is_valid: bool
    errors: List[str] = Field(default_factory=list)

    def raise_for_errors(self) -> None:
        """Raise ValidationFailure if the draft was rejected."""
        if not self.is_valid:
            raise ValidationFailure(self.errors)


def validate_fact_draft(text: str, source: str, category: str) -> DraftValidation:
    """Decide whether a draft may be sent to the store.

    Args:
        text: Statement text
        source: Source URL
        category: Category name

    Returns:
        Validation outcome listing every problem found
    """
    errors = []
    if not text:
        errors.append("Fact text is empty")
    elif len(text) > MAX_FACT_LENGTH:
        errors.append(f"Fact text is longer than {MAX_FACT_LENGTH} characters")

    if not is_valid_http_url(source):
        errors.append("Source must be an http or https URL")

    if not category:
        errors.append("Category is missing")
    elif not is_known_category(category):
        errors.append(f"Unknown category: {category}")

    return DraftValidation(is_valid=not errors, errors=errors)


class FactSubmissionForm:
    """State of the "share a fact" panel.

    Holds the draft fields and the upload flag. While an insert is
    outstanding further submits are ignored. Fields are cleared and the
    panel closed only once the store confirmed the insert; a failed write
    keeps the draft so the user can retry.
    """

    def __init__(self, store: FactStore, feed: FactFeedController):
        self._store = store
        self._feed = feed
        self.text = ""
        self.source = ""
        self.category = ""
        self.is_open = False
        self.is_uploading = False
        self.error: Optional[str] = None

    @property
    def remaining_characters(self) -> int:
        return MAX_FACT_LENGTH - len(self.text.strip())

    def toggle(self) -> bool:
        """Open or close the panel, returning the new state."""
        self.is_open = not self.is_open
        return self.is_open

    def reset(self) -> None:
        self.text = ""
        self.source = ""
        self.category = ""
        self.error = None

    def validate(self) -> DraftValidation:
        return validate_fact_draft(self.text.strip(), self.source.strip(), self.category)

    async def submit(self) -> Optional[Fact]:
        """Validate the draft and insert it into the store.

        Returns:
            The stored fact, or None if the submit was blocked, rejected
            or failed
        """
        if self.is_uploading:
            logger.debug("Submit ignored: upload already in flight")
            return None

        validation = self.validate()
        if not validation.is_valid:
            logger.info(f"📝 Draft rejected: {', '.join(validation.errors)}")
            self.error = INVALID_DRAFT_MESSAGE
            return None

        self.is_uploading = True
        try:
            fact = await self._store.insert_fact(
                text=self.text.strip(),
                source=self.source.strip(),
                category=self.category,
            )
        except SubmissionWriteFailure as e:
            logger.warning(f"⚠️ Fact upload failed: {e}")
            self.error = UPLOAD_ERROR_MESSAGE
            return None
        finally:
            self.is_uploading = False

        logger.info(f"✅ Fact {fact.id} stored in '{fact.category.value}'")
        self._feed.append_fact(fact)
        self.reset()
        self.is_open = False
        return fact
