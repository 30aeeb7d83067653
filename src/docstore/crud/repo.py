from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional

from docstore.core.models import Document, SearchRequest


class DocumentRepo(ABC):
    @abstractmethod
    def save(self, document: Document) -> Document:
        """Upsert document and return the record as stored."""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, doc_id: str) -> Document | None:
        raise NotImplementedError

    @abstractmethod
    def search(self, request: Optional[SearchRequest] = None) -> list[Document]:
        raise NotImplementedError
