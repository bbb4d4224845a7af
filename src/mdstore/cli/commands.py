"""CLI command implementations"""

from typing import Annotated, NoReturn, Optional

import typer

from mdstore.config import Settings, load_config
from mdstore.core.models import Document
from mdstore.errors import FrontMatterError, NotFound, UnreadableDocument
from mdstore.logs import setup_logging
from mdstore.store.filesystem import open_store


def _fail(msg: str, cause: Exception = None) -> NoReturn:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(ctx: typer.Context, overrides: dict = None) -> Settings:
    """Load config with the global --root/--verbose options applied, and configure logging."""
    opts = ctx.obj or {}
    merged = {
        "content_dir": opts.get("root"),
        "log_level": "DEBUG" if opts.get("verbose") else None,
        **(overrides or {}),
    }
    try:
        settings = load_config(overrides=merged)
    except ValueError as e:
        _fail(str(e))
    setup_logging(settings.log_level)
    return settings


def _read(ctx: typer.Context, path: str) -> tuple[Settings, Document]:
    """Open the configured store and read one document, failing cleanly on store errors."""
    settings = _settings(ctx)
    try:
        return settings, open_store(settings).read(path)
    except NotFound as e:
        _fail(str(e))
    except FrontMatterError as e:
        _fail("Invalid front matter", e)
    except UnreadableDocument as e:
        _fail(str(e))


def list_cmd(
    ctx: typer.Context,
    drafts: Annotated[Optional[bool], typer.Option("--drafts/--no-drafts", help="Include _drafts/ documents")] = None,
    ):
    """List document paths in the store."""
    settings = _settings(ctx, overrides={"include_drafts": drafts})
    paths = open_store(settings).list()
    if not paths:
        typer.echo(f"No documents found under {settings.content_dir}.")
        raise typer.Exit(1)
    for p in paths:
        typer.echo(p)


def show_cmd(
    ctx: typer.Context,
    path: Annotated[str, typer.Argument(help="Store-relative document path")],
    as_json: Annotated[bool, typer.Option("--json", help="Print the document summary as JSON")] = False,
    ):
    """Show title, date, categories, and slug of a document."""
    settings, doc = _read(ctx, path)
    if as_json:
        typer.echo(doc.info(settings.parser_config).model_dump_json(indent=2))
        return
    typer.echo(doc.title or "(untitled)")
    typer.echo(f"  path:       {doc.path}")
    typer.echo(f"  slug:       {doc.slug}")
    typer.echo(f"  date:       {doc.date or '-'}")
    typer.echo(f"  categories: {', '.join(doc.categories) or '-'}")
    typer.echo(f"  draft:      {'yes' if doc.is_draft else 'no'}")


def front_matter_cmd(
    ctx: typer.Context,
    path: Annotated[str, typer.Argument(help="Store-relative document path")],
    ):
    """Print the front-matter block exactly as stored."""
    _, doc = _read(ctx, path)
    if not doc.front_matter.has_block:
        _fail(f"{doc.path} has no front matter")
    typer.echo(doc.front_matter.dump(), nl=False)


def samples_cmd(
    ctx: typer.Context,
    path: Annotated[str, typer.Argument(help="Store-relative document path")],
    language: Annotated[Optional[str], typer.Option("--language", "-l", help="Only samples tagged with this language")] = None,
    ):
    """List fenced code samples with their line and language tag."""
    settings, doc = _read(ctx, path)
    samples = [
        s for s in doc.code_samples(settings.parser_config)
        if language is None or s.language == language
    ]
    for s in samples:
        typer.echo(f"  {s.line:>4}  {s.language or '-'}")
    typer.echo(f"{len(samples)} code sample(s) in {doc.path}")
