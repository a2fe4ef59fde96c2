"""CLI command implementations"""

import json
from datetime import datetime
from typing import Annotated, List, Optional

import typer

from docstore.config import Settings, load_config
from docstore.core.loader import load_documents
from docstore.crud.memory_repo import MemoryRepo, make_repo
from docstore.log import setup_logging
from docstore.models import Document, SearchRequest


DATETIME_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%dT%H:%M:%S%z", "%Y-%m-%d %H:%M:%S"]

FileArg = Annotated[Optional[str], typer.Argument(help="YAML/JSON document file (default: data_file setting)")]
LogLevelOpt = Annotated[Optional[str], typer.Option("--log-level", help="DEBUG, INFO, WARNING, ERROR or CRITICAL")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config and configure logging, with standard CLI error handling."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    setup_logging(settings.log_level)
    return settings


def _load_repo(settings: Settings, file: Optional[str]) -> MemoryRepo:
    """Fresh in-memory store populated from file or the configured data_file."""
    path = file or settings.data_file
    if not path:
        _fail("No document file given and no data_file configured")
    try:
        docs = load_documents(path)
    except ValueError as e:
        _fail(str(e))
    repo = make_repo(settings)
    for doc in docs:
        repo.save(doc)
    return repo


def _dump(doc: Document) -> dict:
    return doc.model_dump(mode="json", by_alias=True)


def list_cmd(file: FileArg = None, log_level: LogLevelOpt = None):
    """List stored documents as id, title and author id."""
    settings = _settings(overrides={"log_level": log_level})
    repo = _load_repo(settings, file)
    docs = repo.all()
    if not docs:
        typer.echo("No documents found.")
        raise typer.Exit(1)
    for doc in docs:
        typer.echo(f"{doc.id}\t{doc.title}\t{doc.author.id}")


def show_cmd(
    doc_id: Annotated[str, typer.Argument(help="Document id")],
    file: FileArg = None,
    log_level: LogLevelOpt = None,
    ):
    """Print a single document as JSON."""
    settings = _settings(overrides={"log_level": log_level})
    repo = _load_repo(settings, file)
    doc = repo.find_by_id(doc_id)
    if doc is None:
        _fail(f"Document {doc_id} not found")
    typer.echo(json.dumps(_dump(doc), indent=2, ensure_ascii=False))


def search_cmd(
    file: FileArg = None,
    title_prefixes: Annotated[Optional[List[str]], typer.Option("--title-prefix", "-t", help="Title starts with (repeatable)")] = None,
    contains: Annotated[Optional[List[str]], typer.Option("--contains", "-c", help="Content contains (repeatable)")] = None,
    authors: Annotated[Optional[List[str]], typer.Option("--author", "-a", help="Author id (repeatable)")] = None,
    created_from: Annotated[Optional[datetime], typer.Option("--created-from", formats=DATETIME_FORMATS, help="Created at or after")] = None,
    created_to: Annotated[Optional[datetime], typer.Option("--created-to", formats=DATETIME_FORMATS, help="Created at or before")] = None,
    log_level: LogLevelOpt = None,
    ):
    """Print documents matching every given filter as a JSON array."""
    settings = _settings(overrides={"log_level": log_level})
    repo = _load_repo(settings, file)
    request = SearchRequest(
        title_prefixes=title_prefixes or None,
        contains_contents=contains or None,
        author_ids=set(authors) if authors else None,
        created_from=created_from,
        created_to=created_to,
    )
    results = repo.search(request)
    typer.echo(json.dumps([_dump(d) for d in results], indent=2, ensure_ascii=False))
