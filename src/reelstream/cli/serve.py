from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from reelstream.config import load_settings
from reelstream.core.errors import ConfigurationError

console = Console()


def serve(
    host: str = "127.0.0.1",
    port: int = 8080,
    storage_root: Annotated[Path | None, typer.Option(help="Directory all served files must live under.")] = None,
    database_url: Annotated[str | None, typer.Option(help="SQLAlchemy URL of the catalog database.")] = None,
    log_level: Annotated[str, typer.Option(help="Uvicorn log level.")] = "info",
) -> None:
    """Start the streaming API server."""
    import uvicorn

    from reelstream.api.app import create_app

    try:
        settings = load_settings().with_overrides(storage_root=storage_root, database_url=database_url)
    except ConfigurationError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1) from exc

    app = create_app(settings)
    console.print(f"[green]Starting API server on {host}:{port}[/green]")
    console.print(f"  Storage root: {settings.storage_root}")
    console.print(f"  Streams:      http://{host}:{port}{settings.stream_prefix}")
    uvicorn.run(app, host=host, port=port, log_level=log_level)
