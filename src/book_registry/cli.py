"""Command-line interface for Book Registry."""

import json
import logging
from functools import wraps
from pathlib import Path

import click
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from book_registry import __version__
from book_registry.config import get_settings
from book_registry.errors import BookRegistryError
from book_registry.models import BookKey

console = Console()


def handle_registry_errors(func):
    """Report registry and catalog errors in red and exit with status 1."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except BookRegistryError as e:
            console.print(f"[red]✗[/red] [bold]{e.code.value}[/bold]: {escape(str(e))}")
            raise SystemExit(1)
        except (ValidationError, json.JSONDecodeError) as e:
            console.print(f"[red]✗ Invalid catalog file[/red]: {escape(str(e))}")
            raise SystemExit(1)

    return wrapper


def _load(ctx: click.Context):
    from book_registry.catalog import load_catalog

    return load_catalog(ctx.obj["catalog"])


def _save(ctx: click.Context, registry) -> None:
    from book_registry.catalog import save_catalog

    save_catalog(registry, ctx.obj["catalog"])
    console.print(f"[dim]Saved to {ctx.obj['catalog']}[/dim]")


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--catalog",
    "-c",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Catalog file (defaults to the configured catalog path)",
)
@click.pass_context
def main(ctx: click.Context, catalog: Path | None) -> None:
    """Book Registry - track editions, translations and revisions of books."""
    try:
        settings = get_settings()
    except ValidationError as e:
        console.print(f"[red]✗ Invalid settings[/red]: {escape(str(e))}")
        raise SystemExit(1)
    logging.basicConfig(
        level=settings.log_level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )
    ctx.ensure_object(dict)
    ctx.obj["catalog"] = catalog or settings.catalog_path


@main.command()
@click.pass_context
@handle_registry_errors
def status(ctx: click.Context) -> None:
    """Show configuration and catalog size."""
    settings = get_settings()

    console.print("[bold]Book Registry Status[/bold]\n")
    console.print(f"Catalog: {ctx.obj['catalog']}")
    console.print(f"Enforce revision year: {settings.enforce_revision_year}")

    catalog_path = Path(ctx.obj["catalog"])
    if catalog_path.exists():
        registry = _load(ctx)
        console.print(f"[green]✓[/green] {len(registry):,} books registered")
    else:
        console.print("[yellow]Catalog file does not exist yet[/yellow]")


@main.command(name="list")
@click.pass_context
@handle_registry_errors
def list_books(ctx: click.Context) -> None:
    """List every registered book."""
    registry = _load(ctx)
    if not len(registry):
        console.print("[yellow]No books registered[/yellow]")
        return

    table = Table(title="Registered Books")
    table.add_column("Title", style="cyan")
    table.add_column("Edition", justify="right", no_wrap=True)
    table.add_column("Language", no_wrap=True)
    table.add_column("Year", justify="right", no_wrap=True)
    table.add_column("Kind", no_wrap=True)
    table.add_column("Source", style="dim")

    for key, record in sorted(registry.records()):
        source = str(record.derived_from) if record.derived_from else ""
        table.add_row(
            key.title,
            str(key.edition),
            record.language,
            str(record.publication_year),
            record.kind.value,
            source,
        )

    console.print(table)


@main.command()
@click.argument("title")
@click.option("--edition", "-e", type=int, default=1, show_default=True)
@click.pass_context
@handle_registry_errors
def show(ctx: click.Context, title: str, edition: int) -> None:
    """Show details of a single book."""
    registry = _load(ctx)
    key = BookKey(title, edition)
    record = registry.get_book(key)

    console.print(f"[bold]{key}[/bold]")
    console.print(f"  Language: {record.language}")
    console.print(f"  Published: {record.publication_year}")
    console.print(f"  Authors: {', '.join(record.authors)}")
    console.print(f"  Kind: {record.kind.value}")
    if record.derived_from:
        console.print(f"  Derived from: {record.derived_from}")


@main.command()
@click.argument("title")
@click.pass_context
@handle_registry_errors
def editions(ctx: click.Context, title: str) -> None:
    """List all editions registered under a title."""
    registry = _load(ctx)
    for key in registry.find_book_editions(title):
        console.print(f"  {key}")


@main.command()
@click.argument("title")
@click.pass_context
@handle_registry_errors
def latest(ctx: click.Context, title: str) -> None:
    """Show the latest edition number of a title."""
    registry = _load(ctx)
    console.print(registry.get_book_latest_edition(title))


@main.command()
@click.argument("title")
@click.option("--edition", "-e", type=int, default=1, show_default=True)
@click.pass_context
@handle_registry_errors
def translations(ctx: click.Context, title: str, edition: int) -> None:
    """List translations made from a book."""
    registry = _load(ctx)
    found = registry.find_book_translations(BookKey(title, edition))
    if not found:
        console.print("[yellow]No translations found[/yellow]")
        return
    for key in found:
        console.print(f"  {key} [dim]({registry.get_book_language(key)})[/dim]")


@main.command()
@click.argument("title")
@click.option("--edition", "-e", type=int, default=1, show_default=True)
@click.pass_context
@handle_registry_errors
def original(ctx: click.Context, title: str, edition: int) -> None:
    """Show the book a translation or revision was made from."""
    registry = _load(ctx)
    console.print(str(registry.get_original_book(BookKey(title, edition))))


@main.command()
@click.argument("title")
@click.option("--edition", "-e", type=int, default=1, show_default=True)
@click.pass_context
@handle_registry_errors
def lineage(ctx: click.Context, title: str, edition: int) -> None:
    """Show the derivation chain of a book back to its original."""
    registry = _load(ctx)
    chain = registry.get_lineage(BookKey(title, edition))
    console.print(" -> ".join(str(key) for key in chain))


# ============================================================================
# Registration Commands
# ============================================================================

@main.command(name="add-original")
@click.argument("title")
@click.option("--edition", "-e", type=int, default=1, show_default=True)
@click.option("--author", "-a", "authors", multiple=True, help="Author (repeat for several)")
@click.option("--language", "-l", required=True, help="Two-letter language code")
@click.option("--year", "-y", type=int, required=True, help="Publication year")
@click.pass_context
@handle_registry_errors
def add_original(
    ctx: click.Context, title: str, edition: int, authors: tuple[str, ...], language: str, year: int
) -> None:
    """Register an original book."""
    registry = _load(ctx)
    key = BookKey(title, edition)
    registry.add_original_book(key, authors, language, year)
    console.print(f"[green]✓[/green] Added original {key}")
    _save(ctx, registry)


@main.command(name="add-translation")
@click.argument("title")
@click.option("--source", "-s", required=True, help="Title of the translated book")
@click.option("--edition", "-e", type=int, default=1, show_default=True, help="Source edition")
@click.option("--language", "-l", required=True, help="Two-letter language code")
@click.option("--year", "-y", type=int, required=True, help="Translation year")
@click.pass_context
@handle_registry_errors
def add_translation(
    ctx: click.Context, title: str, source: str, edition: int, language: str, year: int
) -> None:
    """Register a translation of an existing book."""
    registry = _load(ctx)
    registry.add_translation(title, BookKey(source, edition), language, year)
    console.print(f"[green]✓[/green] Added translation {BookKey(title, edition)}")
    _save(ctx, registry)


@main.command(name="add-revision")
@click.argument("title")
@click.option("--edition", "-e", type=int, required=True, help="Revised edition number")
@click.option("--source", "-s", required=True, help="Title of the revised book")
@click.option("--source-edition", type=int, default=1, show_default=True)
@click.option("--year", "-y", type=int, required=True, help="Revision year")
@click.pass_context
@handle_registry_errors
def add_revision(
    ctx: click.Context, title: str, edition: int, source: str, source_edition: int, year: int
) -> None:
    """Register a revised edition of an existing book."""
    registry = _load(ctx)
    key = BookKey(title, edition)
    registry.add_revised(key, BookKey(source, source_edition), year)
    console.print(f"[green]✓[/green] Added revision {key}")
    _save(ctx, registry)


if __name__ == "__main__":
    main()
