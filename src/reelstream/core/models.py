from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class StreamRequest:
    """Untrusted input of one stream request."""

    requested_path: str | None
    range_header: str | None = None


@dataclass(frozen=True)
class ResolvedFile:
    absolute_path: Path
    size_bytes: int
    mime_type: str


@dataclass(frozen=True)
class ByteRange:
    """Inclusive byte range ``[start, end]``."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid byte range {self.start}-{self.end}")

    @property
    def length(self) -> int:
        return self.end - self.start + 1


@dataclass(frozen=True)
class StreamPlan:
    """Everything needed to send the response head, computed before any I/O on the body."""

    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    byte_range: ByteRange | None = None

    @property
    def has_body(self) -> bool:
        return self.status_code in (200, 206)
