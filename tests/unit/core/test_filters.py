"""Unit tests for core/filters.py"""

from datetime import datetime, timedelta, timezone

import pytest

from docstore.core.filters import (
    matches, matches_author, matches_content, matches_created, matches_title,
)
from docstore.core.models import Author, Document, SearchRequest


T0 = datetime(2026, 1, 1, tzinfo=timezone.utc)

DOC = Document(
    id="doc_1", title="Quarterly Report", content="Revenue grew in Q3",
    author=Author(id="1", name="John Doe"), created=T0,
)
BARE = Document(id="doc_2")


# --- matches_title ---

@pytest.mark.parametrize("prefixes,expected", [
    (None, True),
    ([], True),
    (["Quarterly"], True),
    (["Annual", "Quart"], True),
    (["quarterly"], False),
    (["Report"], False),
])
def test_matches_title(prefixes, expected):
    """Title must start with one of the prefixes, case-sensitively."""
    assert matches_title(DOC, prefixes) is expected


def test_matches_title_none_title():
    """A document without a title fails any active prefix filter."""
    assert matches_title(BARE, ["Q"]) is False
    assert matches_title(BARE, [""]) is False
    assert matches_title(BARE, None) is True


# --- matches_content ---

@pytest.mark.parametrize("contents,expected", [
    (None, True),
    ([], True),
    (["grew"], True),
    (["fell", "Q3"], True),
    (["revenue"], False),
])
def test_matches_content(contents, expected):
    """Content must contain one of the substrings."""
    assert matches_content(DOC, contents) is expected


def test_matches_content_none_content_is_empty_string():
    """None content is treated as '' so only an empty substring matches."""
    assert matches_content(BARE, ["x"]) is False
    assert matches_content(BARE, [""]) is True


# --- matches_author ---

@pytest.mark.parametrize("author_ids,expected", [
    (None, True),
    ([], True),
    (["1"], True),
    (["2", "1"], True),
    (["2"], False),
])
def test_matches_author(author_ids, expected):
    """Author id must be in the list."""
    assert matches_author(DOC, author_ids) is expected


def test_matches_author_without_author():
    """A document with no author fails whenever the filter is active."""
    assert matches_author(BARE, ["1"]) is False
    assert matches_author(BARE, None) is True


# --- matches_created ---

@pytest.mark.parametrize("lo,hi,expected", [
    (None, None, True),
    (T0, None, True),
    (None, T0, True),
    (T0, T0, True),
    (T0 + timedelta(seconds=1), None, False),
    (None, T0 - timedelta(seconds=1), False),
    (T0 - timedelta(days=1), T0 + timedelta(days=1), True),
])
def test_matches_created(lo, hi, expected):
    """Both bounds are inclusive."""
    assert matches_created(DOC, lo, hi) is expected


def test_matches_created_rejects_missing_created():
    """A document with created=None never passes, even with no bounds."""
    assert matches_created(BARE, None, None) is False


def test_matches_created_naive_document_created():
    """A naive created that bypassed validation is compared as UTC."""
    doc = DOC.model_copy(update={"created": datetime(2026, 1, 1)})
    assert matches_created(doc, T0, T0) is True
    assert matches_created(doc, T0 + timedelta(seconds=1), None) is False


# --- matches ---

def test_matches_combines_with_and():
    """All filters must pass."""
    assert matches(DOC, SearchRequest(title_prefixes=["Quarterly"], author_ids=["1"]))
    assert not matches(DOC, SearchRequest(title_prefixes=["Quarterly"], author_ids=["2"]))


def test_matches_empty_request_requires_created():
    """An empty request matches any document that has a creation time."""
    assert matches(DOC, SearchRequest())
    assert not matches(BARE, SearchRequest())
