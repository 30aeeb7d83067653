"""Search predicates: one per SearchRequest field, combined with logical AND"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from docstore.core.models import Document, SearchRequest, as_utc


def matches_title(doc: Document, prefixes: Optional[list[str]]) -> bool:
    """True if no prefixes are given or the title starts with any of them (case-sensitive)."""
    if not prefixes:
        return True
    return doc.title is not None and any(doc.title.startswith(p) for p in prefixes)


def matches_content(doc: Document, contents: Optional[list[str]]) -> bool:
    """True if no substrings are given or the content contains any of them. None content reads as ''."""
    if not contents:
        return True
    content = doc.content or ""
    return any(s in content for s in contents)


def matches_author(doc: Document, author_ids: Optional[list[str]]) -> bool:
    """True if no author ids are given or the document's author id is listed."""
    if not author_ids:
        return True
    return doc.author is not None and doc.author.id in author_ids


def matches_created(doc: Document, created_from: Optional[datetime], created_to: Optional[datetime]) -> bool:
    """True if created falls within [created_from, created_to]. A document without created never matches."""
    if doc.created is None:
        return False
    created = as_utc(doc.created)
    return (created_from is None or created >= as_utc(created_from)) and \
        (created_to is None or created <= as_utc(created_to))


def matches(doc: Document, request: SearchRequest) -> bool:
    """Apply all four filters to doc."""
    return (
        matches_title(doc, request.title_prefixes)
        and matches_content(doc, request.contains_contents)
        and matches_author(doc, request.author_ids)
        and matches_created(doc, request.created_from, request.created_to)
    )
