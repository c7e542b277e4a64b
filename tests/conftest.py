"""Shared fixtures and helpers for tests."""

from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from reelstream.api.app import create_app
from reelstream.catalog import InMemoryMediaCatalog
from reelstream.config import Settings

_REPO_ROOT = Path(__file__).parent.parent

MEDIA_SIZE = 10_000


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        if rel.parts and rel.parts[0] == "unit":
            item.add_marker(pytest.mark.unit)


def media_bytes(size: int = MEDIA_SIZE) -> bytes:
    """Deterministic, non-repeating-looking content so offset mistakes show up."""
    return bytes((i * 31 + i // 256) % 256 for i in range(size))


# ---------------------------------------------------------------------------
# Shared fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def storage_root(tmp_path: Path) -> Path:
    root = tmp_path / "storage"
    (root / "videos").mkdir(parents=True)
    (root / "posters").mkdir()
    return root


@pytest.fixture
def video_bytes() -> bytes:
    return media_bytes()


@pytest.fixture
def video_file(storage_root: Path, video_bytes: bytes) -> Path:
    path = storage_root / "videos" / "movie.mp4"
    path.write_bytes(video_bytes)
    return path


@pytest.fixture
def poster_file(storage_root: Path) -> Path:
    path = storage_root / "posters" / "poster.jpg"
    path.write_bytes(b"\xff\xd8\xff\xe0" + bytes(200))
    return path


@pytest.fixture
def outside_file(tmp_path: Path) -> Path:
    path = tmp_path / "secret.txt"
    path.write_text("top secret\n")
    return path


@pytest.fixture
def settings(storage_root: Path) -> Settings:
    return Settings(storage_root=storage_root, chunk_size=1024, case_insensitive=False)


@pytest.fixture
def catalog() -> InMemoryMediaCatalog:
    return InMemoryMediaCatalog()


@pytest.fixture
def app(settings: Settings, catalog: InMemoryMediaCatalog) -> FastAPI:
    return create_app(settings, catalog=catalog)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
