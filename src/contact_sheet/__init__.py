"""Public package exports for the contact sheet builder."""

from __future__ import annotations

from .config import ContactSheetConfig
from .errors import (
    ContactSheetError,
    DecodeError,
    DirectoryUnreadableError,
    PersistError,
    UnsupportedPixelFormatError,
)
from .pipeline import build_contact_sheet
from .type_defs import GridGeometry, MediaEntry, MediaKind, RunSummary

__all__ = [
    "ContactSheetConfig",
    "ContactSheetError",
    "DecodeError",
    "DirectoryUnreadableError",
    "GridGeometry",
    "MediaEntry",
    "MediaKind",
    "PersistError",
    "RunSummary",
    "UnsupportedPixelFormatError",
    "build_contact_sheet",
]
