"""Immutable record types: documents, authors, and search requests"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to naive datetimes and convert aware ones to UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class Author(BaseModel):
    """Author attached to a document; plain value data, never deduplicated."""
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    name: Optional[str] = None


class Document(BaseModel):
    """A stored document. `id` and `created` are filled in by the store on save."""
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[Author] = None
    created: Optional[datetime] = None

    @field_validator("created")
    @classmethod
    def normalize_created(cls, v: Optional[datetime]) -> Optional[datetime]:
        return as_utc(v)


class SearchRequest(BaseModel):
    """Search criteria; every field is optional and an empty field matches everything."""
    model_config = ConfigDict(frozen=True)

    title_prefixes: Optional[list[str]] = None
    contains_contents: Optional[list[str]] = None
    author_ids: Optional[list[str]] = None
    created_from: Optional[datetime] = None   # inclusive
    created_to: Optional[datetime] = None     # inclusive

    @field_validator("created_from", "created_to")
    @classmethod
    def normalize_bounds(cls, v: Optional[datetime]) -> Optional[datetime]:
        return as_utc(v)
