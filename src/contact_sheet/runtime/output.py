"""Helpers for resolving the output location and persisting the sheet."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from contact_sheet.config_defaults import DEFAULT_OUTPUT_PATH
from contact_sheet.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from contact_sheet.grid.canvas import Canvas

_DEFAULT_SUFFIX = Path(DEFAULT_OUTPUT_PATH).suffix


def resolve_output_path(output: str | Path | None) -> Path:
    """
    Determine where the contact sheet is written.

    ``None`` or an empty value falls back to the default file name in the
    working directory. An existing directory receives the default file
    name inside it, and a path without an extension gets ``.png`` so
    Pillow can infer a format.
    """
    if not output:
        return Path(DEFAULT_OUTPUT_PATH)
    path = Path(output)
    if path.is_dir():
        return path / DEFAULT_OUTPUT_PATH
    if not path.suffix:
        return path.with_suffix(_DEFAULT_SUFFIX)
    return path


def save_canvas(canvas: Canvas, output: str | Path | None) -> Path:
    """
    Persist ``canvas`` at the resolved output path.

    Creates missing parent directories. Failures surface as PersistError
    from the canvas; nothing is written to an alternative location.
    """
    out_path = resolve_output_path(output)
    saved = canvas.save(out_path)
    width, height = canvas.size
    logger.info("Contact sheet (%dx%d) saved to: %s", width, height, saved)
    return saved
