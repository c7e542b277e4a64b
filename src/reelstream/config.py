"""Startup configuration.

Settings are read once from the environment (optionally overridden by CLI
options) and then passed explicitly to the path guard, the streamer and the
catalog. Nothing here touches the filesystem at import time.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from reelstream.catalog.engine import DEFAULT_DATABASE_URL
from reelstream.core.errors import ConfigurationError
from reelstream.core.streamer import DEFAULT_CHUNK_SIZE

DEFAULT_STORAGE_ROOT = "storage"
DEFAULT_STREAM_PREFIX = "/api/stream"
STORAGE_SUBDIRS = ("videos", "posters")

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    storage_root: Path
    database_url: str = DEFAULT_DATABASE_URL
    chunk_size: int = DEFAULT_CHUNK_SIZE
    case_insensitive: bool | None = None
    resolve_symlinks: bool = False
    stream_prefix: str = DEFAULT_STREAM_PREFIX

    def with_overrides(self, **overrides: Any) -> Settings:
        """Return a copy with every non-``None`` override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        if "storage_root" in changes:
            changes["storage_root"] = _absolute_root(changes["storage_root"])
        return replace(self, **changes)


def _absolute_root(raw: str | Path) -> Path:
    # Lexical only: a symlinked root must keep its configured spelling.
    return Path(os.path.abspath(Path(raw).expanduser()))


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {raw!r}")


def _parse_tristate(name: str, raw: str) -> bool | None:
    if raw.strip().lower() in ("", "auto"):
        return None
    return _parse_bool(name, raw)


def _parse_chunk_size(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"REELSTREAM_CHUNK_SIZE must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ConfigurationError("REELSTREAM_CHUNK_SIZE must be positive")
    return value


def _normalize_prefix(raw: str) -> str:
    prefix = "/" + raw.strip().strip("/")
    return "" if prefix == "/" else prefix


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ
    root = _absolute_root(env.get("REELSTREAM_STORAGE_ROOT", DEFAULT_STORAGE_ROOT))
    return Settings(
        storage_root=root,
        database_url=env.get("DATABASE_URL", DEFAULT_DATABASE_URL),
        chunk_size=_parse_chunk_size(env.get("REELSTREAM_CHUNK_SIZE", str(DEFAULT_CHUNK_SIZE))),
        case_insensitive=_parse_tristate("REELSTREAM_CASE_INSENSITIVE", env.get("REELSTREAM_CASE_INSENSITIVE", "auto")),
        resolve_symlinks=_parse_bool("REELSTREAM_RESOLVE_SYMLINKS", env.get("REELSTREAM_RESOLVE_SYMLINKS", "false")),
        stream_prefix=_normalize_prefix(env.get("REELSTREAM_STREAM_PREFIX", DEFAULT_STREAM_PREFIX)),
    )


def ensure_storage(settings: Settings) -> list[Path]:
    """Create the storage root and its upload directories. Returns the created paths."""
    created: list[Path] = []
    for sub in STORAGE_SUBDIRS:
        directory = settings.storage_root / sub
        if not directory.is_dir():
            directory.mkdir(parents=True, exist_ok=True)
            created.append(directory)
    return created
