"""Tests for fact draft validation and submission."""

import asyncio

import pytest

from fact_sphere.domain.models.errors import SubmissionWriteFailure, ValidationFailure
from fact_sphere.domain.services.fact_feed_service import FactFeedController
from fact_sphere.domain.services.submission_service import (
    INVALID_DRAFT_MESSAGE,
    UPLOAD_ERROR_MESSAGE,
    FactSubmissionForm,
    is_valid_http_url,
    validate_fact_draft,
)


@pytest.mark.parametrize(
    "text,source,category,accepted",
    [
        ("Water boils at 100C", "https://example.com", "science", True),
        ("", "https://example.com", "science", False),
        ("x" * 201, "https://example.com", "science", False),
        ("x" * 200, "https://example.com", "science", True),
        ("fact", "not-a-url", "science", False),
        ("fact", "ftp://example.com", "science", False),
        ("fact", "http://example.com/page?q=1", "science", True),
        ("fact", "https://example.com/" + "a" * 2100, "science", True),
        ("fact", "https://example.com", "", False),
        ("fact", "https://example.com", "sports", False),
    ],
)
def test_validate_fact_draft(text, source, category, accepted):
    """Test the draft acceptance table."""
    result = validate_fact_draft(text, source, category)
    assert result.is_valid is accepted
    assert bool(result.errors) is not accepted


def test_validation_reports_every_problem():
    """Test all problems of a draft are listed."""
    result = validate_fact_draft("", "not-a-url", "")
    assert len(result.errors) == 3

    with pytest.raises(ValidationFailure) as exc_info:
        result.raise_for_errors()
    assert exc_info.value.errors == result.errors


@pytest.mark.parametrize(
    "value,valid",
    [
        ("https://example.com", True),
        ("http://example.com", True),
        ("https://example.com/" + "a" * 3000, True),
        ("example.com", False),
        ("mailto:someone@example.com", False),
        ("", False),
    ],
)
def test_is_valid_http_url(value, valid):
    """Test only absolute http(s) URLs pass."""
    assert is_valid_http_url(value) is valid


@pytest.fixture
def form(mock_store, mock_feed) -> FactSubmissionForm:
    """Provide an open form filled with a valid draft."""
    form = FactSubmissionForm(mock_store, mock_feed)
    form.toggle()
    form.text = "Water boils at 100C"
    form.source = "https://example.com"
    form.category = "science"
    return form


@pytest.mark.asyncio
async def test_submit_success(form, mock_store, mock_feed, fact_factory):
    """Test a confirmed insert appends the stored fact and resets the form."""
    stored = fact_factory(42)
    mock_store.insert_fact.return_value = stored

    result = await form.submit()

    assert result == stored
    mock_store.insert_fact.assert_awaited_once_with(
        text="Water boils at 100C",
        source="https://example.com",
        category="science",
    )
    assert mock_feed.facts == (stored,)
    assert (form.text, form.source, form.category) == ("", "", "")
    assert not form.is_open
    assert not form.is_uploading
    assert form.error is None


@pytest.mark.asyncio
async def test_submit_invalid_draft(form, mock_store, mock_feed):
    """Test a rejected draft is kept and nothing is sent."""
    form.source = "not-a-url"

    assert await form.submit() is None

    mock_store.insert_fact.assert_not_awaited()
    assert form.error == INVALID_DRAFT_MESSAGE
    assert form.source == "not-a-url"
    assert form.text == "Water boils at 100C"
    assert form.is_open
    assert mock_feed.facts == ()


@pytest.mark.asyncio
async def test_submit_write_failure_keeps_draft(form, mock_store, mock_feed):
    """Test a failed insert keeps the draft and the panel open."""
    mock_store.insert_fact.side_effect = SubmissionWriteFailure("Test error")

    assert await form.submit() is None

    assert form.error == UPLOAD_ERROR_MESSAGE
    assert form.text == "Water boils at 100C"
    assert form.is_open
    assert not form.is_uploading
    assert mock_feed.facts == ()


@pytest.mark.asyncio
async def test_double_submit_blocked(form, mock_store, fact_factory):
    """Test a second submit while uploading sends nothing."""
    gate = asyncio.Event()
    stored = fact_factory(42)

    async def insert(text, source, category):
        await gate.wait()
        return stored

    mock_store.insert_fact.side_effect = insert

    first = asyncio.create_task(form.submit())
    await asyncio.sleep(0)
    assert form.is_uploading

    assert await form.submit() is None
    gate.set()
    assert await first == stored

    assert mock_store.insert_fact.await_count == 1


@pytest.mark.asyncio
async def test_submit_strips_whitespace(form, mock_store, fact_factory):
    """Test surrounding whitespace is not sent to the store."""
    form.text = "  Water boils at 100C  "
    mock_store.insert_fact.return_value = fact_factory(1)

    await form.submit()

    assert mock_store.insert_fact.await_args.kwargs["text"] == "Water boils at 100C"


@pytest.mark.asyncio
async def test_whitespace_only_text_rejected(form, mock_store):
    """Test a blank statement counts as empty."""
    form.text = "   "
    assert await form.submit() is None
    mock_store.insert_fact.assert_not_awaited()


def test_remaining_characters(form):
    """Test the remaining character counter."""
    form.text = "x" * 150
    assert form.remaining_characters == 50
    form.text = "x" * 210
    assert form.remaining_characters == -10


def test_remaining_characters_ignores_surrounding_whitespace(form):
    """Test the counter agrees with what validation accepts."""
    form.text = "  " + "x" * 150 + "     "
    assert form.remaining_characters == 50

    form.text = "x" * 200 + "   "
    assert form.remaining_characters == 0
    assert form.validate().is_valid


def test_toggle(mock_store):
    """Test opening and closing the panel."""
    form = FactSubmissionForm(mock_store, FactFeedController(mock_store))
    assert not form.is_open
    assert form.toggle()
    assert not form.toggle()
