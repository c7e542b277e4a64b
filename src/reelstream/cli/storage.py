"""Storage root maintenance commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from reelstream.config import Settings, ensure_storage, load_settings
from reelstream.core.errors import ConfigurationError, ReelstreamError
from reelstream.core.path_guard import PathGuard

storage_app = typer.Typer(help="Inspect and prepare the storage root.")
console = Console()

StorageRootOption = Annotated[Path | None, typer.Option(help="Override REELSTREAM_STORAGE_ROOT.")]


def _settings(storage_root: Path | None) -> Settings:
    try:
        return load_settings().with_overrides(storage_root=storage_root)
    except ConfigurationError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1) from exc


@storage_app.command("init")
def init(storage_root: StorageRootOption = None) -> None:
    """Create the storage root with its videos/ and posters/ directories."""
    settings = _settings(storage_root)
    created = ensure_storage(settings)
    if not created:
        console.print(f"Storage at {settings.storage_root} is already initialized.")
        return
    for directory in created:
        console.print(f"[green]Created {directory}[/green]")


@storage_app.command("check")
def check(
    path: Annotated[str, typer.Argument(help="Path as a client would request it.")],
    storage_root: StorageRootOption = None,
) -> None:
    """Show whether PATH would be served, and with which size and MIME type."""
    settings = _settings(storage_root)
    guard = PathGuard(
        settings.storage_root,
        case_insensitive=settings.case_insensitive,
        resolve_symlinks=settings.resolve_symlinks,
    )
    try:
        resolved = guard.resolve(path)
    except ReelstreamError as exc:
        console.print(f"[red]{exc.status_code} {type(exc).__name__}:[/red] {exc}")
        if exc.recovery_hint:
            console.print(exc.recovery_hint)
        raise typer.Exit(1) from exc

    table = Table(show_header=False)
    table.add_row("Path", str(resolved.absolute_path))
    table.add_row("Size", f"{resolved.size_bytes} bytes")
    table.add_row("MIME type", resolved.mime_type)
    console.print(table)
