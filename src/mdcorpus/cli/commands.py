"""CLI command implementations"""

import json
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdcorpus.config import Settings, load_config
from mdcorpus.core.export import build_index, write_index
from mdcorpus.core.models import Document, Status
from mdcorpus.core.repository import DocumentCollection, load_dir
from mdcorpus.errors import ContentError


RootArg = Annotated[Optional[str], typer.Argument(help="Corpus root directory or single file")]


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


def _load(settings: Settings, strict: bool = None) -> DocumentCollection:
    """Load the configured corpus, reporting load errors as CLI failures."""
    root = Path(settings.content_dir)
    if not root.exists():
        _fail(f"Content path not found: {root}")
    try:
        return load_dir(
            root,
            strict=settings.strict if strict is None else strict,
            default_layout=settings.default_layout,
        )
    except ContentError as e:
        _fail(str(e))
    except OSError as e:
        _fail("Cannot read corpus", e)


def _format(doc: Document) -> str:
    date = doc.date.isoformat() if doc.date else "-" * 10
    return f"{doc.status.value:<9}  {date}  {doc.path}  {doc.title}"


def main_callback(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ):
    """Query a static-site content corpus of posts and drafts."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def list_cmd(
    root: RootArg = None,
    status: Annotated[Optional[Status], typer.Option("--status", help="Only documents with this status")] = None,
    tag: Annotated[Optional[str], typer.Option("--tag", help="Only documents with this tag")] = None,
    category: Annotated[Optional[str], typer.Option("--category", help="Only documents in this category")] = None,
    sort_date: Annotated[bool, typer.Option("--sort-date", help="Newest first; omits undated drafts")] = False,
    ):
    """List documents, optionally filtered by status, tag, and category."""
    settings = _settings(overrides={"content_dir": root})
    collection = _load(settings)

    docs = collection.sorted_by_date() if sort_date else list(collection)
    filters = []
    if status:
        filters.append(collection.by_status(status))
    if tag:
        filters.append(collection.by_tag(tag))
    if category:
        filters.append(collection.by_category(category))
    for matches in filters:
        keep = {d.path for d in matches}
        docs = [d for d in docs if d.path in keep]

    if not docs:
        typer.echo("No documents found.")
        raise typer.Exit(1)
    for doc in docs:
        typer.echo(_format(doc))


def check_cmd(root: RootArg = None):
    """Validate every document in the corpus and report the ones that fail."""
    settings = _settings(overrides={"content_dir": root})
    collection = _load(settings, strict=False)

    for path, error in collection.rejected:
        typer.echo(f"  rejected: {path}: {error.message}")
    if collection.rejected:
        typer.echo(f"Check failed - {len(collection.rejected)} rejected, {len(collection)} valid", err=True)
        raise typer.Exit(1)

    drafts = sum(1 for _ in collection.by_status(Status.draft))
    typer.echo(
        f"Check passed - {len(collection)} document(s), "
        f"{len(collection) - drafts} published, {drafts} draft(s)"
    )


def index_cmd(
    root: RootArg = None,
    out: Annotated[Optional[str], typer.Option("--out", "-o", help="Write the index to this file")] = None,
    ):
    """Write a JSON index of document metadata, tags and categories."""
    settings = _settings(overrides={"content_dir": root, "index_file": out})
    collection = _load(settings)

    if settings.index_file is None:
        typer.echo(json.dumps(build_index(collection), indent=2, ensure_ascii=False))
        return
    try:
        path = write_index(collection, Path(settings.index_file))
    except OSError as e:
        _fail("Index export failed", e)
    typer.echo(f"Indexed {len(collection)} document(s) to {path}")
