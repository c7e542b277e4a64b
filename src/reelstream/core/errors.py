"""Domain exceptions for reelstream.

Validation errors carry the HTTP status they map to so the API layer can turn
them into a response before any byte of the body is sent. Each exception
provides a ``recovery_hint`` with guidance for operators reading the logs.
"""

from __future__ import annotations


class ReelstreamError(Exception):
    """Base class for all reelstream exceptions."""

    status_code: int = 500

    @property
    def recovery_hint(self) -> str | None:
        """Optional guidance on how to resolve this error."""
        return None


class BadRequestError(ReelstreamError):
    """Raised when the requested path is missing or unusable."""

    status_code = 400


class ForbiddenError(ReelstreamError):
    """Raised when a path resolves outside the storage root.

    Attributes:
        path: The normalized path that was rejected.
        root: The storage root it was compared against.
    """

    status_code = 403

    def __init__(self, path: str, root: str) -> None:
        self.path = path
        self.root = root
        super().__init__(f"'{path}' is not within '{root}'")

    @property
    def recovery_hint(self) -> str:
        return f"Only files below {self.root} can be served"


class NotFoundError(ReelstreamError):
    """Raised when no regular file exists at the resolved path."""

    status_code = 404

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"File not found: {path}")

    @property
    def recovery_hint(self) -> str:
        return f"Verify the file exists and is not a directory: {self.path}"


class RangeNotSatisfiableError(ReelstreamError):
    """Raised when a well-formed range starts at or beyond the end of the file."""

    status_code = 416

    def __init__(self, header: str, size: int) -> None:
        self.header = header
        self.size = size
        super().__init__(f"Range '{header}' cannot be satisfied for {size} bytes")


class StreamAbortedError(ReelstreamError):
    """Raised when a transfer fails after the response head was committed.

    The status code can no longer change at this point; the connection is
    dropped instead.

    Attributes:
        path: The file being streamed.
        sent: Number of body bytes already handed to the server.
        expected: Number of body bytes declared in ``Content-Length``.
        cause: The underlying exception, if any.
    """

    def __init__(
        self,
        path: str,
        sent: int,
        expected: int,
        cause: Exception | None = None,
    ) -> None:
        self.path = path
        self.sent = sent
        self.expected = expected
        self.cause = cause
        super().__init__(f"Stream of {path} aborted after {sent}/{expected} bytes")

    @property
    def recovery_hint(self) -> str:
        return "Clients may resume with a fresh range request"


class ConfigurationError(ReelstreamError):
    """Raised for invalid startup configuration."""

    pass
