"""
Test configuration and shared fixtures for contact_sheet.

This module defines reusable pytest fixtures for creating image files and
small media trees on disk and for building configuration objects. These
fixtures support all test modules in the test suite.

Note:
    This file is automatically loaded by pytest and should not be
    renamed.

"""
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from PIL import Image

from contact_sheet.config import ContactSheetConfig
from contact_sheet.constants import COLOR_MODE_RGB
from contact_sheet.logging_utils import logger

ImageFactory = Callable[..., Path]


@pytest.fixture
def make_image_file(tmp_path: Path) -> ImageFactory:
    """
    Factory that saves a solid-colour image and returns its path.

    Paths are relative to ``tmp_path``; parent directories are created.
    The Pillow format follows the file extension unless ``fmt`` is given.
    """

    def _make(
        rel_path: str,
        size: tuple[int, int] = (32, 32),
        color: str | tuple[int, ...] = "red",
        mode: str = COLOR_MODE_RGB,
        fmt: str | None = None,
    ) -> Path:
        path = tmp_path / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        Image.new(mode, size, color).save(path, format=fmt)
        return path

    return _make


@pytest.fixture
def make_corrupt_file(tmp_path: Path) -> Callable[[str], Path]:
    """Factory that writes bytes that no image decoder accepts."""

    def _make(rel_path: str) -> Path:
        path = tmp_path / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"definitely not an image")
        return path

    return _make


@pytest.fixture
def media_root(tmp_path: Path, make_image_file: ImageFactory) -> Path:
    """
    Build a small mixed tree under ``tmp_path / "media"``.

    Layout (lexical order)::

        media/a.png
        media/b_clip.mp4
        media/notes.txt
        media/sub/c.jpg
    """
    root = tmp_path / "media"
    make_image_file("media/a.png", color="red")
    (root / "b_clip.mp4").write_bytes(b"\x00\x00\x00\x18ftypmp42")
    (root / "notes.txt").write_text("not media", encoding="utf-8")
    make_image_file("media/sub/c.jpg", color="blue")
    return root


@pytest.fixture
def make_config(tmp_path: Path) -> Callable[..., ContactSheetConfig]:
    """
    Build ContactSheetConfig instances with optional section overrides.

    Output defaults to ``tmp_path / "sheet.png"`` and the progress bar is
    disabled to keep test output quiet.
    """
    default_output = tmp_path / "sheet.png"

    def _build(
        *,
        scan: dict[str, Any] | None = None,
        grid: dict[str, Any] | None = None,
        output: dict[str, Any] | None = None,
        processing: dict[str, Any] | None = None,
    ) -> ContactSheetConfig:
        data: dict[str, Any] = {}
        if scan:
            data["scan"] = dict(scan)
        if grid:
            data["grid"] = dict(grid)
        effective_output = dict(output or {})
        effective_output["output"] = str(
            effective_output.get("output", default_output),
        )
        data["output"] = effective_output
        effective_processing = {"show_progress": False}
        effective_processing.update(processing or {})
        data["processing"] = effective_processing
        return ContactSheetConfig.model_validate(data)

    return _build


@pytest.fixture(autouse=True)
def enable_logger_propagation(monkeypatch: pytest.MonkeyPatch) -> None:
    """Enable propagation for the contact_sheet logger so caplog works."""
    monkeypatch.setattr(logger, "propagate", True)
