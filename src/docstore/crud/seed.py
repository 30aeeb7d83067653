"""Seed files: load documents from YAML or JSON and save them into a store"""

import json
from pathlib import Path

import yaml
from pydantic import ValidationError

from docstore.core.models import Document
from docstore.crud.repo import DocumentRepo


def _read(path: Path):
    """Parse path as JSON or YAML based on its suffix."""
    text = path.read_text(encoding="utf-8")
    if path.suffix == ".json":
        return json.loads(text)
    if path.suffix in (".yaml", ".yml"):
        return yaml.safe_load(text)
    raise ValueError(f"Unsupported seed file type: {path.name} (expected .json, .yaml or .yml)")


def load_documents(path: Path) -> list[Document]:
    """Read a list of documents from path.

    The file holds either a list of document mappings or a mapping with a
    'documents' list. Raises ValueError if the file is missing, unparsable,
    or any entry fails validation.
    """
    path = Path(path)
    try:
        raw = _read(path)
    except OSError as e:
        raise ValueError(f"Cannot read {path.name}: {e}") from e
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e

    if isinstance(raw, dict):
        raw = raw.get("documents")
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ValueError(f"Invalid {path.name}: expected a list of documents")

    try:
        return [Document.model_validate(item) for item in raw]
    except ValidationError as e:
        raise ValueError(f"Invalid document in {path.name}: {e}") from e


def seed_store(store: DocumentRepo, docs: list[Document]) -> list[Document]:
    """Save docs into store in order. Returns the records as stored."""
    return [store.save(doc) for doc in docs]
