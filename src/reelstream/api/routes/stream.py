from __future__ import annotations

import asyncio

from fastapi import APIRouter, Depends, HTTPException, Query
from starlette.requests import Request
from starlette.responses import Response, StreamingResponse

from reelstream.api.dependencies import get_catalog, get_path_guard, get_streamer
from reelstream.core.models import StreamRequest
from reelstream.core.path_guard import PathGuard
from reelstream.core.ports.catalog import MediaCatalog, MediaKind
from reelstream.core.streamer import RangeStreamer, prepare_stream

router = APIRouter(tags=["stream"])

_POSTER_CACHE_CONTROL = "public, max-age=31536000"


async def serve_path(
    request: Request,
    requested_path: str | None,
    guard: PathGuard,
    streamer: RangeStreamer,
    extra_headers: dict[str, str] | None = None,
) -> Response:
    """Validate ``requested_path`` and answer with a full, partial or empty body."""
    stream_request = StreamRequest(requested_path, request.headers.get("range"))
    resolved, plan = await asyncio.to_thread(prepare_stream, guard, streamer, stream_request)
    headers = {**plan.headers, **(extra_headers or {})}

    if request.method == "HEAD" or not plan.has_body:
        return Response(status_code=plan.status_code, headers=headers)

    return StreamingResponse(
        streamer.iter_bytes(resolved, plan.byte_range),
        status_code=plan.status_code,
        headers=headers,
    )


async def _serve_catalog_entry(
    kind: MediaKind,
    media_id: int,
    request: Request,
    catalog: MediaCatalog,
    guard: PathGuard,
    streamer: RangeStreamer,
) -> Response:
    video_path = await catalog.video_path(kind, media_id)
    if video_path is None:
        raise HTTPException(status_code=404, detail="Not found")
    return await serve_path(request, video_path, guard, streamer)


@router.api_route("/movie/{media_id}", methods=["GET", "HEAD"])
async def stream_movie(
    media_id: int,
    request: Request,
    catalog: MediaCatalog = Depends(get_catalog),
    guard: PathGuard = Depends(get_path_guard),
    streamer: RangeStreamer = Depends(get_streamer),
) -> Response:
    return await _serve_catalog_entry("movie", media_id, request, catalog, guard, streamer)


@router.api_route("/episode/{media_id}", methods=["GET", "HEAD"])
async def stream_episode(
    media_id: int,
    request: Request,
    catalog: MediaCatalog = Depends(get_catalog),
    guard: PathGuard = Depends(get_path_guard),
    streamer: RangeStreamer = Depends(get_streamer),
) -> Response:
    return await _serve_catalog_entry("episode", media_id, request, catalog, guard, streamer)


@router.api_route("/part/{media_id}", methods=["GET", "HEAD"])
async def stream_part(
    media_id: int,
    request: Request,
    catalog: MediaCatalog = Depends(get_catalog),
    guard: PathGuard = Depends(get_path_guard),
    streamer: RangeStreamer = Depends(get_streamer),
) -> Response:
    return await _serve_catalog_entry("part", media_id, request, catalog, guard, streamer)


@router.api_route("/file", methods=["GET", "HEAD"])
async def stream_file(
    request: Request,
    path: str | None = Query(default=None),
    guard: PathGuard = Depends(get_path_guard),
    streamer: RangeStreamer = Depends(get_streamer),
) -> Response:
    """Serve a stored file (usually a poster) by its absolute path."""
    return await serve_path(request, path, guard, streamer, {"Cache-Control": _POSTER_CACHE_CONTROL})
