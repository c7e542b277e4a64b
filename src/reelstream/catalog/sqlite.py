import logging

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from reelstream.core.ports.catalog import MediaKind

logger = logging.getLogger(__name__)

# Table names are fixed; only the id is bound.
_VIDEO_PATH_QUERIES: dict[MediaKind, str] = {
    "movie": "SELECT videoPath FROM movies WHERE id = :id",
    "episode": "SELECT videoPath FROM episodes WHERE id = :id",
    "part": "SELECT videoPath FROM movie_parts WHERE id = :id",
}


class SqliteMediaCatalog:
    """Read-only view of the catalog database written by the admin layer."""

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine

    async def video_path(self, kind: MediaKind, media_id: int) -> str | None:
        query = _VIDEO_PATH_QUERIES[kind]
        async with self._engine.connect() as conn:
            result = await conn.execute(text(query), {"id": media_id})
            row = result.first()
        if row is None:
            return None
        value = row[0]
        return str(value) if value else None

    async def ping(self) -> bool:
        try:
            async with self._engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except SQLAlchemyError:
            logger.warning("Catalog database is unreachable", exc_info=True)
            return False
        return True

    async def dispose(self) -> None:
        await self._engine.dispose()
