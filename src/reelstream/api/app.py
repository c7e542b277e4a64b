from __future__ import annotations

from collections.abc import Mapping

from fastapi import FastAPI

from reelstream.api.errors import install_error_handlers
from reelstream.api.lifespan import lifespan
from reelstream.api.routes.health import router as health_router
from reelstream.api.routes.root import router as root_router
from reelstream.api.routes.stream import router as stream_router
from reelstream.catalog import SqliteMediaCatalog, get_engine
from reelstream.config import Settings, load_settings
from reelstream.core.path_guard import PathGuard
from reelstream.core.ports.catalog import MediaCatalog
from reelstream.core.streamer import RangeStreamer


def create_app(
    settings: Settings | None = None,
    catalog: MediaCatalog | None = None,
    mime_types: Mapping[str, str] | None = None,
) -> FastAPI:
    settings = settings or load_settings()

    app = FastAPI(
        title="Reelstream API",
        description="Byte-range streaming of catalog media files.",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.path_guard = PathGuard(
        settings.storage_root,
        case_insensitive=settings.case_insensitive,
        resolve_symlinks=settings.resolve_symlinks,
        mime_types=mime_types,
    )
    app.state.streamer = RangeStreamer(chunk_size=settings.chunk_size)
    app.state.catalog = catalog if catalog is not None else SqliteMediaCatalog(get_engine(settings.database_url))

    install_error_handlers(app)

    app.include_router(root_router, include_in_schema=False)
    app.include_router(health_router, include_in_schema=False)
    app.include_router(stream_router, prefix=settings.stream_prefix)

    return app
