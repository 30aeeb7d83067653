"""Root test configuration: shared store fixture and document builders"""

from datetime import datetime, timedelta, timezone

import pytest

from docstore.core.models import Author, Document
from docstore.crud.memory_repo import MemoryRepo


NOW = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(name="store")
def store_fixture():
    """Fresh empty store per test."""
    return MemoryRepo()


@pytest.fixture(name="two_docs")
def two_docs_fixture(store):
    """Two documents by authors '1' and '2', created 1h and 2h before NOW."""
    doc1 = store.save(Document(
        id="doc_1", title="Document 1", content="Content 1",
        author=Author(id="1", name="John Doe"), created=NOW - timedelta(hours=1),
    ))
    doc2 = store.save(Document(
        id="doc_2", title="Document 2", content="Content 2",
        author=Author(id="2", name="Jane Doe"), created=NOW - timedelta(hours=2),
    ))
    return doc1, doc2


@pytest.fixture(name="now")
def now_fixture():
    """Reference time the two_docs fixture is built around."""
    return NOW
