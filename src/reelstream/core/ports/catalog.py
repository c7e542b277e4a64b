from typing import Literal, Protocol

MediaKind = Literal["movie", "episode", "part"]

MEDIA_KINDS: tuple[MediaKind, ...] = ("movie", "episode", "part")


class MediaCatalog(Protocol):
    async def video_path(self, kind: MediaKind, media_id: int) -> str | None: ...

    async def ping(self) -> bool: ...

    async def dispose(self) -> None: ...
