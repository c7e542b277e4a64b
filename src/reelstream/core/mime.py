from collections.abc import Mapping
from pathlib import Path

DEFAULT_MIME_TYPE = "application/octet-stream"

_EXTENSION_MIME_MAP: dict[str, str] = {
    # video
    ".avi": "video/x-msvideo",
    ".m4v": "video/x-m4v",
    ".mkv": "video/x-matroska",
    ".mov": "video/quicktime",
    ".mp4": "video/mp4",
    ".ogv": "video/ogg",
    ".ts": "video/mp2t",
    ".webm": "video/webm",
    # audio
    ".aac": "audio/aac",
    ".flac": "audio/flac",
    ".m4a": "audio/mp4",
    ".m4b": "audio/mp4",
    ".mp3": "audio/mpeg",
    ".oga": "audio/ogg",
    ".ogg": "audio/ogg",
    ".opus": "audio/opus",
    ".wav": "audio/wav",
    # images
    ".avif": "image/avif",
    ".bmp": "image/bmp",
    ".gif": "image/gif",
    ".ico": "image/vnd.microsoft.icon",
    ".jpeg": "image/jpeg",
    ".jpg": "image/jpeg",
    ".png": "image/png",
    ".svg": "image/svg+xml",
    ".webp": "image/webp",
    # subtitles
    ".srt": "application/x-subrip",
    ".vtt": "text/vtt",
    # documents
    ".epub": "application/epub+zip",
    ".htm": "text/html",
    ".html": "text/html",
    ".json": "application/json",
    ".pdf": "application/pdf",
    ".txt": "text/plain",
}


def default_mime_table() -> dict[str, str]:
    """Return a copy of the built-in extension table, safe to extend."""
    return dict(_EXTENSION_MIME_MAP)


def detect_mime_type(path: str | Path, table: Mapping[str, str] | None = None) -> str:
    lookup = _EXTENSION_MIME_MAP if table is None else table
    suffix = Path(path).suffix.lower()
    return lookup.get(suffix, DEFAULT_MIME_TYPE)
