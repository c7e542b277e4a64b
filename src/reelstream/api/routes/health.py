import asyncio

from fastapi import APIRouter, Depends, Response, status

from reelstream.api.dependencies import get_catalog, get_path_guard
from reelstream.api.schemas import HealthResponse, ReadinessResponse
from reelstream.core.path_guard import PathGuard
from reelstream.core.ports.catalog import MediaCatalog

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse()


@router.get("/healthz/live", response_model=HealthResponse)
async def liveness() -> HealthResponse:
    """Liveness probe: is the process alive?"""
    return HealthResponse()


@router.get("/healthz/ready", response_model=ReadinessResponse)
async def readiness(
    response: Response,
    catalog: MediaCatalog = Depends(get_catalog),
    guard: PathGuard = Depends(get_path_guard),
) -> ReadinessResponse:
    """Readiness probe: checks the catalog database and the storage root."""
    catalog_up = await catalog.ping()
    storage_up = await asyncio.to_thread(guard.root.is_dir)
    if catalog_up and storage_up:
        return ReadinessResponse()
    response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return ReadinessResponse(
        status="degraded",
        catalog="up" if catalog_up else "down",
        storage="up" if storage_up else "down",
    )
