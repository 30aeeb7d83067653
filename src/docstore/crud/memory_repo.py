"""Thread-safe in-memory document store: upsert, lookup by id, filtered search"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from loguru import logger

from docstore.core.filters import matches
from docstore.core.models import Document, SearchRequest, as_utc
from docstore.core.utils.ids import new_id
from docstore.crud.repo import DocumentRepo
from docstore.errors import InvalidArgumentError


@dataclass
class MemoryRepo(DocumentRepo):
    id_prefix: str = "doc_"
    _docs: dict[str, Document] = field(default_factory=dict, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False, compare=False)

    def save(self, document: Document) -> Document:
        """Upsert document and return the stored record.

        Without an id, a new id and the current UTC time are assigned (any
        supplied `created` is dropped). With an id already in the store, the
        existing `created` replaces the supplied one. With an unseen id, the
        document is stored as given.
        """
        if document is None:
            raise InvalidArgumentError("Document cannot be null")

        with self._lock:
            if document.id is None:
                document = document.model_copy(update={
                    "id": new_id(self.id_prefix),
                    "created": datetime.now(timezone.utc),
                })
                logger.debug("Assigned id {} to new document", document.id)
            else:
                existing = self._docs.get(document.id)
                if existing is not None:
                    document = document.model_copy(update={"created": existing.created})
                    logger.debug("Preserved created={} for {}", existing.created, document.id)
                elif document.created is not None and document.created.tzinfo is None:
                    # model_copy skips validators, so a naive created can arrive here
                    document = document.model_copy(update={"created": as_utc(document.created)})
            self._docs[document.id] = document
        return document

    def find_by_id(self, doc_id: str) -> Document | None:
        """Return the document stored under doc_id, or None."""
        with self._lock:
            return self._docs.get(doc_id)

    def search(self, request: Optional[SearchRequest] = None) -> list[Document]:
        """Return stored documents matching every filter in request, in insertion order.

        A None request returns all documents.
        """
        with self._lock:
            snapshot = list(self._docs.values())
        if request is None:
            return snapshot
        results = [doc for doc in snapshot if matches(doc, request)]
        logger.debug("Search matched {} of {} document(s)", len(results), len(snapshot))
        return results


DocumentStore = MemoryRepo
