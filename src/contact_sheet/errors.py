"""
Exception hierarchy for the contact sheet pipeline.

Structural failures (an unreadable input tree, an unwritable output) are
fatal and abort the run. Per-image failures derive from ``DecodeError`` and
only cost the affected grid cell.
"""

from __future__ import annotations

from pathlib import Path


class ContactSheetError(Exception):
    """Base class for every error raised by the contact sheet builder."""


class DirectoryUnreadableError(ContactSheetError):
    """A root or nested directory could not be listed."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"Cannot list directory '{path}': {reason}")


class DecodeError(ContactSheetError):
    """An image file could not be decoded; the entry is skipped."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"Cannot decode image '{path}': {reason}")


class UnsupportedPixelFormatError(DecodeError):
    """A decoded image could not be coerced to 8-bit RGB."""

    def __init__(self, path: str | Path, mode: str) -> None:
        self.mode = mode
        super().__init__(path, f"pixel mode {mode!r} cannot be converted "
                               "to RGB")


class PersistError(ContactSheetError):
    """The finished canvas could not be written to its output path."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"Cannot write contact sheet to '{path}': {reason}")
