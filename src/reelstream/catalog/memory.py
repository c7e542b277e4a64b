from __future__ import annotations

from reelstream.core.ports.catalog import MediaKind


class InMemoryMediaCatalog:
    def __init__(self, entries: dict[tuple[MediaKind, int], str | None] | None = None) -> None:
        self.entries: dict[tuple[MediaKind, int], str | None] = dict(entries or {})

    def add(self, kind: MediaKind, media_id: int, video_path: str | None) -> None:
        self.entries[(kind, media_id)] = video_path

    async def video_path(self, kind: MediaKind, media_id: int) -> str | None:
        return self.entries.get((kind, media_id)) or None

    async def ping(self) -> bool:
        return True

    async def dispose(self) -> None:
        return None
