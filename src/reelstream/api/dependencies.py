from __future__ import annotations

from starlette.requests import Request

from reelstream.config import Settings
from reelstream.core.path_guard import PathGuard
from reelstream.core.ports.catalog import MediaCatalog
from reelstream.core.streamer import RangeStreamer


def get_settings(request: Request) -> Settings:
    settings: Settings = request.app.state.settings
    return settings


def get_path_guard(request: Request) -> PathGuard:
    guard: PathGuard = request.app.state.path_guard
    return guard


def get_streamer(request: Request) -> RangeStreamer:
    streamer: RangeStreamer = request.app.state.streamer
    return streamer


def get_catalog(request: Request) -> MediaCatalog:
    catalog: MediaCatalog = request.app.state.catalog
    return catalog
