"""Tests for runtime.output helpers."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from contact_sheet.errors import PersistError
from contact_sheet.grid import Canvas, compute_geometry
from contact_sheet.runtime import output as runtime_output


def test_resolve_output_path_default() -> None:
    assert runtime_output.resolve_output_path(None) == Path("result.png")
    assert runtime_output.resolve_output_path("") == Path("result.png")


def test_resolve_output_path_directory(tmp_path: Path) -> None:
    assert runtime_output.resolve_output_path(tmp_path) == (
        tmp_path / "result.png"
    )


def test_resolve_output_path_adds_png_suffix(tmp_path: Path) -> None:
    assert runtime_output.resolve_output_path(tmp_path / "sheet") == (
        tmp_path / "sheet.png"
    )


def test_resolve_output_path_keeps_explicit_format(tmp_path: Path) -> None:
    target = tmp_path / "sheet.jpg"
    assert runtime_output.resolve_output_path(str(target)) == target


def test_save_canvas_happy_path(
    tmp_path: Path,
    caplog: pytest.LogCaptureFixture,
) -> None:
    caplog.set_level(logging.INFO)
    canvas = Canvas(compute_geometry(4, (8, 8)))

    saved = runtime_output.save_canvas(canvas, tmp_path / "out" / "s.jpg")

    assert saved == tmp_path / "out" / "s.jpg"
    assert saved.is_file()
    assert "Contact sheet (16x16) saved to" in caplog.text


def test_save_canvas_failure_propagates(tmp_path: Path) -> None:
    canvas = Canvas(compute_geometry(1, (8, 8)))
    with pytest.raises(PersistError):
        runtime_output.save_canvas(canvas, tmp_path / "s.bogus")
    assert not (tmp_path / "s.bogus").exists()
