"""CLI command implementations"""

import json
from datetime import datetime
from pathlib import Path
from typing import Annotated, Optional

import typer

from docstore.config import Settings, load_config
from docstore.core.models import Document, SearchRequest
from docstore.crud.memory_repo import MemoryRepo
from docstore.crud.seed import load_documents, seed_store
from docstore.log import configure_logging


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _store(seed: Path, settings: Settings) -> MemoryRepo:
    """Build a MemoryRepo and load the seed file into it."""
    configure_logging(settings.log_level)
    try:
        docs = load_documents(seed)
    except ValueError as e:
        _fail(f"Cannot load seed file {seed}", e)
    store = MemoryRepo(id_prefix=settings.id_prefix)
    seed_store(store, docs)
    return store


# %z accepts both "Z" and "+HH:MM"
_ISO_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%dT%H:%M:%S%z", "%Y-%m-%d %H:%M:%S"]


def _dump(docs: list[Document]) -> str:
    return json.dumps([d.model_dump(mode="json") for d in docs], indent=2, ensure_ascii=False)


def get_cmd(
    seed: Annotated[Path, typer.Argument(help="YAML or JSON file of documents to load")],
    doc_id: Annotated[str, typer.Argument(help="Document id")],
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="Log level for stderr")] = None,
    ):
    """Print a single document by id."""
    store = _store(seed, _settings(overrides={"log_level": log_level}))
    doc = store.find_by_id(doc_id)
    if doc is None:
        typer.echo(f"No document with id '{doc_id}'.", err=True)
        raise typer.Exit(1)
    typer.echo(doc.model_dump_json(indent=2))


def search_cmd(
    seed: Annotated[Path, typer.Argument(help="YAML or JSON file of documents to load")],
    title_prefix: Annotated[Optional[list[str]], typer.Option("--title-prefix", help="Title starts with (repeatable)")] = None,
    contains: Annotated[Optional[list[str]], typer.Option("--contains", help="Content contains (repeatable)")] = None,
    author_id: Annotated[Optional[list[str]], typer.Option("--author-id", help="Author id (repeatable)")] = None,
    created_from: Annotated[Optional[datetime], typer.Option("--created-from", formats=_ISO_FORMATS, help="Created at or after (ISO 8601)")] = None,
    created_to: Annotated[Optional[datetime], typer.Option("--created-to", formats=_ISO_FORMATS, help="Created at or before (ISO 8601)")] = None,
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="Log level for stderr")] = None,
    ):
    """Print documents matching all given filters as a JSON array."""
    store = _store(seed, _settings(overrides={"log_level": log_level}))
    filters = {
        "title_prefixes": title_prefix, "contains_contents": contains, "author_ids": author_id,
        "created_from": created_from, "created_to": created_to,
    }
    request = SearchRequest(**filters) if any(filters.values()) else None
    typer.echo(_dump(store.search(request)))
