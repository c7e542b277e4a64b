"""Containment check for caller-supplied file paths.

Paths handed to the streamer come from the catalog or straight from a query
string, so they are treated as untrusted. A path is servable only when its
normalized form is the storage root itself or lies below it.
"""

from __future__ import annotations

import logging
import os
import stat
import sys
from collections.abc import Mapping
from pathlib import Path

from reelstream.core.errors import BadRequestError, ForbiddenError, NotFoundError
from reelstream.core.mime import detect_mime_type
from reelstream.core.models import ResolvedFile

logger = logging.getLogger(__name__)

_CASE_INSENSITIVE_PLATFORMS = frozenset({"win32", "cygwin", "darwin"})


def platform_is_case_insensitive() -> bool:
    return sys.platform in _CASE_INSENSITIVE_PLATFORMS


class PathGuard:
    """Approve or reject paths against a fixed storage root.

    The check is lexical: ``..`` segments and redundant separators are
    collapsed, but symlinks are followed only when ``resolve_symlinks`` is
    set. Case folding, when enabled, applies to the comparison only; the
    approved path keeps the caller's spelling.
    """

    def __init__(
        self,
        storage_root: str | Path,
        *,
        case_insensitive: bool | None = None,
        resolve_symlinks: bool = False,
        mime_types: Mapping[str, str] | None = None,
    ) -> None:
        root = os.path.abspath(os.fspath(storage_root))
        if resolve_symlinks:
            root = os.path.realpath(root)
        self._root = root
        self._case_insensitive = platform_is_case_insensitive() if case_insensitive is None else case_insensitive
        self._resolve_symlinks = resolve_symlinks
        self._mime_types = mime_types

    @property
    def root(self) -> Path:
        return Path(self._root)

    @property
    def case_insensitive(self) -> bool:
        return self._case_insensitive

    def check(self, requested_path: object) -> Path:
        """Return the normalized absolute path, or raise if it escapes the root.

        Relative inputs are taken relative to the storage root.
        """
        if not isinstance(requested_path, str) or not requested_path.strip():
            raise BadRequestError("Missing path")
        if "\x00" in requested_path:
            raise BadRequestError("Invalid path")

        candidate = os.path.normpath(os.path.join(self._root, requested_path))
        if self._resolve_symlinks:
            candidate = os.path.realpath(candidate)

        if not self._contains(candidate):
            logger.warning("Forbidden: %r is not within %r", candidate, self._root)
            raise ForbiddenError(candidate, self._root)
        return Path(candidate)

    def resolve(self, requested_path: object) -> ResolvedFile:
        """Check containment, then stat the file once to learn its size."""
        path = self.check(requested_path)
        try:
            st = path.stat()
        except (FileNotFoundError, NotADirectoryError):
            logger.warning("Not found: %s", path)
            raise NotFoundError(str(path)) from None
        except PermissionError as exc:
            logger.warning("Permission denied on stat: %s", path)
            raise ForbiddenError(str(path), self._root) from exc

        # Directories (the root included) and device files are never served.
        if not stat.S_ISREG(st.st_mode):
            logger.warning("Not a regular file: %s", path)
            raise NotFoundError(str(path))

        return ResolvedFile(
            absolute_path=path,
            size_bytes=st.st_size,
            mime_type=detect_mime_type(path, self._mime_types),
        )

    def _fold(self, path: str) -> str:
        return path.casefold() if self._case_insensitive else path

    def _contains(self, candidate: str) -> bool:
        root = self._fold(self._root)
        target = self._fold(candidate)
        if target == root:
            return True
        prefix = root if root.endswith(os.sep) else root + os.sep
        return target.startswith(prefix)
