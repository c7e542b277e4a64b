"""Single-range ``Range`` header parsing.

Parsing is deliberately permissive: anything that is not exactly one
``bytes=<start>-[<end>]`` range is reported as ``None`` and the caller falls
back to a full-body response. Suffix ranges (``bytes=-500``) and range lists
are not supported and fall back the same way.
"""

from __future__ import annotations

import re

from reelstream.core.errors import RangeNotSatisfiableError
from reelstream.core.models import ByteRange

_RANGE_PATTERN = re.compile(r"\s*bytes\s*=\s*(\d+)\s*-\s*(\d*)\s*", re.IGNORECASE)


def parse_range(header: str | None, size: int) -> ByteRange | None:
    """Parse ``header`` against a resource of ``size`` bytes.

    Returns ``None`` for an absent or malformed header. An ``end`` past the
    last byte is clamped to ``size - 1``. Raises ``RangeNotSatisfiableError``
    when ``start`` is at or beyond ``size``.
    """
    if not header:
        return None

    match = _RANGE_PATTERN.fullmatch(header)
    if match is None:
        return None

    start = int(match.group(1))
    end = int(match.group(2)) if match.group(2) else None
    if end is not None and end < start:
        return None

    if start >= size:
        raise RangeNotSatisfiableError(header, size)

    last = size - 1
    return ByteRange(start=start, end=last if end is None else min(end, last))


def content_range(byte_range: ByteRange, size: int) -> str:
    return f"bytes {byte_range.start}-{byte_range.end}/{size}"
