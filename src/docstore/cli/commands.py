"""CLI command implementations"""

import json
from datetime import datetime
from typing import Annotated, Optional

import typer
from pydantic import TypeAdapter, ValidationError

from docstore.config import Settings, load_config
from docstore.core.loader import load_documents
from docstore.core.models import Document, SearchRequest
from docstore.core.utils.logging import configure_logging
from docstore.crud.memory_repo import DocumentStore


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then set up logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    configure_logging(settings.log_level)
    return settings


_TIMESTAMP = TypeAdapter(datetime)


def _parse_time(value: Optional[str], option: str) -> Optional[datetime]:
    if value is None:
        return None
    try:
        return _TIMESTAMP.validate_python(value)
    except ValidationError:
        _fail(f"{option} expects an ISO 8601 timestamp, got '{value}'")


def _load_store(settings: Settings) -> DocumentStore:
    """Fill a fresh store from settings.data_file."""
    try:
        docs = load_documents(settings.data_file)
    except FileNotFoundError:
        _fail(f"Data file not found: {settings.data_file}")
    except ValueError as e:
        _fail("Could not load documents", e)
    store = DocumentStore()
    for doc in docs:
        store.save(doc)
    return store


def _echo_docs(docs: list[Document], indent: int) -> None:
    payload = [d.model_dump(mode="json") for d in docs]
    typer.echo(json.dumps(payload, indent=indent or None, ensure_ascii=False))


def search_cmd(
    file: Annotated[Optional[str], typer.Argument(help="YAML/JSON file of documents")] = None,
    title_prefix: Annotated[Optional[list[str]], typer.Option("--title-prefix", "-t", help="Title must start with one of these")] = None,
    contains: Annotated[Optional[list[str]], typer.Option("--contains", "-c", help="Content must contain one of these")] = None,
    author: Annotated[Optional[list[str]], typer.Option("--author", "-a", help="Author id must be one of these")] = None,
    created_from: Annotated[Optional[str], typer.Option("--from", help="Inclusive lower bound on created (ISO 8601)")] = None,
    created_to: Annotated[Optional[str], typer.Option("--to", help="Inclusive upper bound on created (ISO 8601)")] = None,
    ):
    """Load documents and print those matching every given criterion as JSON."""
    settings = _settings(overrides={"data_file": file})
    request = SearchRequest(
        title_prefixes=title_prefix or None,
        contains_contents=contains or None,
        author_ids=author or None,
        created_from=_parse_time(created_from, "--from"),
        created_to=_parse_time(created_to, "--to"),
    )
    store = _load_store(settings)
    results = store.search(request)
    _echo_docs(results, settings.json_indent)
    typer.echo(f"{len(results)} of {len(store)} document(s) matched", err=True)


def show_cmd(
    doc_id: Annotated[str, typer.Argument(help="Document id")],
    file: Annotated[Optional[str], typer.Option("--file", "-f", help="YAML/JSON file of documents")] = None,
    ):
    """Print a single document by id."""
    settings = _settings(overrides={"data_file": file})
    store = _load_store(settings)
    doc = store.find_by_id(doc_id)
    if doc is None:
        typer.echo(f"No document with id '{doc_id}'.", err=True)
        raise typer.Exit(1)
    typer.echo(json.dumps(doc.model_dump(mode="json"), indent=settings.json_indent or None, ensure_ascii=False))
