from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from reelstream.api.dependencies import get_settings
from reelstream.config import Settings

router = APIRouter()


@router.get("/")
async def root(settings: Settings = Depends(get_settings)) -> dict[str, Any]:
    """Root discovery endpoint: lists the streaming routes."""
    prefix = settings.stream_prefix
    return {
        "meta": {
            "title": "Reelstream",
            "description": "Byte-range streaming of catalog media files.",
            "version": "0.1.0",
        },
        "links": {
            "self": "/",
            "movie": f"{prefix}/movie/{{id}}",
            "episode": f"{prefix}/episode/{{id}}",
            "part": f"{prefix}/part/{{id}}",
            "file": f"{prefix}/file?path={{path}}",
            "health": "/health",
            "openapi": "/openapi.json",
            "docs": "/docs",
        },
    }
