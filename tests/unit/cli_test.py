"""Tests for the reelstream CLI."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from reelstream.cli.app import app

runner = CliRunner()


@pytest.mark.parametrize(
    "args",
    [[], ["serve"], ["storage"], ["storage", "init"], ["storage", "check"]],
    ids=["root", "serve", "storage", "storage-init", "storage-check"],
)
def test_short_help_flag(args: list[str]) -> None:
    result = runner.invoke(app, [*args, "-h"])
    assert result.exit_code == 0
    assert "Usage" in result.output


def test_storage_init_creates_directories(tmp_path: Path) -> None:
    root = tmp_path / "storage"
    result = runner.invoke(app, ["storage", "init", "--storage-root", str(root)])
    assert result.exit_code == 0
    assert (root / "videos").is_dir()
    assert (root / "posters").is_dir()

    again = runner.invoke(app, ["storage", "init", "--storage-root", str(root)])
    assert again.exit_code == 0
    assert "already initialized" in again.output


def test_storage_check_accepts_file(storage_root: Path, video_file: Path) -> None:
    result = runner.invoke(app, ["storage", "check", str(video_file), "--storage-root", str(storage_root)])
    assert result.exit_code == 0
    assert "video/mp4" in result.output


def test_storage_check_rejects_traversal(storage_root: Path) -> None:
    result = runner.invoke(app, ["storage", "check", "../../etc/passwd", "--storage-root", str(storage_root)])
    assert result.exit_code == 1
    assert "403" in result.output


def test_storage_check_reports_missing(storage_root: Path) -> None:
    result = runner.invoke(app, ["storage", "check", "videos/none.mp4", "--storage-root", str(storage_root)])
    assert result.exit_code == 1
    assert "404" in result.output


def test_serve_builds_app_with_overrides(storage_root: Path) -> None:
    with patch("uvicorn.run") as mock_run:
        result = runner.invoke(
            app,
            ["serve", "--storage-root", str(storage_root), "--port", "9000", "--log-level", "warning"],
        )

    assert result.exit_code == 0, result.output
    mock_run.assert_called_once()
    served_app = mock_run.call_args.args[0]
    assert served_app.state.settings.storage_root == storage_root
    assert mock_run.call_args.kwargs == {"host": "127.0.0.1", "port": 9000, "log_level": "warning"}


def test_serve_reports_bad_configuration(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REELSTREAM_CHUNK_SIZE", "nope")
    with patch("uvicorn.run") as mock_run:
        result = runner.invoke(app, ["serve"])
    assert result.exit_code == 1
    mock_run.assert_not_called()
