"""Full and partial-content streaming of files that passed the path guard."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator
from pathlib import Path
from typing import BinaryIO

from reelstream.core.errors import RangeNotSatisfiableError, StreamAbortedError
from reelstream.core.models import ByteRange, ResolvedFile, StreamPlan, StreamRequest
from reelstream.core.path_guard import PathGuard
from reelstream.core.ranges import content_range, parse_range

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 1024 * 1024


def _open(path: Path) -> BinaryIO:
    return path.open("rb")


def _read_at(handle: BinaryIO, offset: int, size: int) -> bytes:
    # Seek and read together so the cursor only moves on the worker thread.
    handle.seek(offset)
    return handle.read(size)


class RangeStreamer:
    """Compute response heads and read bodies with bounded, chunked reads.

    Each call to ``iter_bytes`` owns its file handle and cursor, so any
    number of requests may stream the same file concurrently.
    """

    def __init__(self, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self._chunk_size = chunk_size

    @property
    def chunk_size(self) -> int:
        return self._chunk_size

    def plan(self, resolved: ResolvedFile, range_header: str | None = None) -> StreamPlan:
        size = resolved.size_bytes
        try:
            byte_range = parse_range(range_header, size)
        except RangeNotSatisfiableError:
            logger.debug("Unsatisfiable range %r for %s (%d bytes)", range_header, resolved.absolute_path, size)
            return StreamPlan(
                status_code=416,
                headers={
                    "Content-Range": f"bytes */{size}",
                    "Accept-Ranges": "bytes",
                    "Content-Type": resolved.mime_type,
                },
            )

        if byte_range is None:
            if range_header:
                logger.debug("Ignoring malformed range %r, serving full body", range_header)
            return StreamPlan(
                status_code=200,
                headers={
                    "Content-Length": str(size),
                    "Content-Type": resolved.mime_type,
                    "Accept-Ranges": "bytes",
                },
            )

        return StreamPlan(
            status_code=206,
            headers={
                "Content-Range": content_range(byte_range, size),
                "Accept-Ranges": "bytes",
                "Content-Length": str(byte_range.length),
                "Content-Type": resolved.mime_type,
            },
            byte_range=byte_range,
        )

    async def iter_bytes(self, resolved: ResolvedFile, byte_range: ByteRange | None = None) -> AsyncIterator[bytes]:
        """Yield exactly the bytes of ``byte_range`` (or the whole file) in offset order.

        Raises ``StreamAbortedError`` when the file cannot deliver the declared
        number of bytes, so a short body is never passed off as complete.
        """
        path = resolved.absolute_path
        start = byte_range.start if byte_range is not None else 0
        length = byte_range.length if byte_range is not None else resolved.size_bytes
        sent = 0

        try:
            handle = await asyncio.to_thread(_open, path)
        except OSError as exc:
            logger.exception("Could not open %s for streaming", path)
            raise StreamAbortedError(str(path), sent, length, exc) from exc

        try:
            while sent < length:
                try:
                    chunk = await asyncio.to_thread(
                        _read_at, handle, start + sent, min(self._chunk_size, length - sent)
                    )
                except OSError as exc:
                    logger.exception("Read failed on %s at offset %d", path, start + sent)
                    raise StreamAbortedError(str(path), sent, length, exc) from exc
                if not chunk:
                    logger.error("%s ended early at offset %d, expected %d more bytes", path, start + sent, length - sent)
                    raise StreamAbortedError(str(path), sent, length)
                sent += len(chunk)
                yield chunk
            logger.debug("Completed %s: %d bytes from offset %d", path, sent, start)
        except (asyncio.CancelledError, GeneratorExit):
            logger.debug("Aborted %s after %d/%d bytes: client went away", path, sent, length)
            raise
        finally:
            # A cancelled read may still hold the reader lock; wait for it off the loop.
            await asyncio.to_thread(handle.close)


def prepare_stream(
    guard: PathGuard,
    streamer: RangeStreamer,
    request: StreamRequest,
) -> tuple[ResolvedFile, StreamPlan]:
    """Validate the path, stat the file and plan the response head.

    Raises the guard's ``BadRequestError``, ``ForbiddenError`` or
    ``NotFoundError`` before anything is sent.
    """
    resolved = guard.resolve(request.requested_path)
    return resolved, streamer.plan(resolved, request.range_header)
