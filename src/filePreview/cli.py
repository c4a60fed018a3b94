"""Typer-based CLI entry point."""

from __future__ import annotations

import functools
import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich import print
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from filePreview.appctx import AppContext
from filePreview.application.services.gallery_state import GalleryState
from filePreview.domain.services.attribute_deriver import format_bytes
from filePreview.errors import FilePreviewError, FixtureLoadError, SettingsError
from filePreview.infrastructure.services.in_memory_query_service import (
    InMemoryAttachmentQueryService,
)
from filePreview.settings.manager import SettingsManager

app = typer.Typer(help="Paginated, sortable, filterable attachment gallery")


def _handle_errors(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (FixtureLoadError, SettingsError) as exc:
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(1) from exc
        except FilePreviewError as exc:
            typer.echo(f"Unexpected error: {exc}", err=True)
            raise typer.Exit(1) from exc

    return wrapper


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Log fetches and commits.")) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


def _render(state: GalleryState, sort_label: str) -> Table:
    table = Table(title=state.title, caption=sort_label)
    table.add_column("Id")
    table.add_column("Title")
    table.add_column("Icon")
    table.add_column("Size", justify="right")
    table.add_column("Thumbnail")
    for item in state.items:
        table.add_row(item.id, item.title, item.icon, item.formatted_size, item.thumbnail_url)
    return table


@app.command()
@_handle_errors
def show(
    fixture: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON attachment fixture."),
    parent_id: str = typer.Argument(..., help="Record whose attachments are listed."),
    page_size: Optional[int] = typer.Option(None, "--page-size", min=1),
    sort: List[str] = typer.Option([], "--sort", help="Sort field to select; repeat to flip direction."),
    exclude: List[str] = typer.Option([], "--exclude", "-x", help="Size filter to switch off."),
    load_more: int = typer.Option(0, "--load-more", min=0, help="Number of extra pages to load."),
    upload: List[str] = typer.Option([], "--upload", help="Simulate an upload of this id."),
    settings: Optional[Path] = typer.Option(None, "--settings", dir_okay=False),
) -> None:
    """Render the gallery of PARENT_ID from a fixture file."""

    manager = SettingsManager(settings)
    if settings is not None:
        manager.load()
    if page_size is not None:
        manager.set("gallery.page_size", page_size, persist=False)

    context = AppContext(settings=manager)
    service = InMemoryAttachmentQueryService.from_fixture(fixture)
    gallery = context.build_gallery(parent_id, service)
    gallery.notification_requested.connect(
        lambda note: print(f"[red]{note.message}")
    )

    gallery.mount()
    for filter_id in exclude:
        gallery.toggle_filter(filter_id)
    for field in sort:
        gallery.select_sort(field)
    for _ in range(load_more):
        if not gallery.load_more():
            break
    if upload:
        gallery.handle_upload_finished(upload)

    direction = "ascending" if gallery.sort.direction.value == "ASC" else "descending"
    Console().print(_render(gallery.state.value, f"sorted by {gallery.sort.field.alias}, {direction}"))
    state = gallery.state.value
    print(f"offset={state.offset} total={state.total_count} more={state.more_available}")


@app.command("format-size")
def format_size(
    size: int = typer.Argument(..., min=0),
    decimals: int = typer.Option(2, "--decimals", min=0),
) -> None:
    """Print SIZE bytes in human-readable form."""

    typer.echo(format_bytes(size, decimals))


if __name__ == "__main__":  # pragma: no cover
    app()
