"""
Defines shared types for the contact sheet builder.

Centralizes the catalog and geometry value objects along with reusable
type aliases so every pipeline stage speaks the same vocabulary.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Literal

MatchMode = Literal["substring", "suffix"]
RowRounding = Literal["round", "half_even", "floor"]
RGB = tuple[int, int, int]


class MediaKind(Enum):
    """Kinds of media the catalog recognises."""

    IMAGE = "image"
    VIDEO = "video"


@dataclass(frozen=True, slots=True)
class MediaEntry:
    """One classified file in the catalog."""

    path: str
    kind: MediaKind

    @property
    def is_image(self) -> bool:
        """Return True when the entry takes part in compositing."""
        return self.kind is MediaKind.IMAGE


@dataclass(frozen=True, slots=True)
class GridGeometry:
    """
    Square grid dimensions derived from a catalog size.

    ``side`` cells per row and column, each ``cell_width`` by
    ``cell_height`` pixels. The canvas is exactly ``side`` cells wide
    and tall.
    """

    side: int
    cell_width: int
    cell_height: int
    canvas_width: int
    canvas_height: int

    @property
    def cell_count(self) -> int:
        """Return the number of addressable cells (``side ** 2``)."""
        return self.side * self.side

    @property
    def cell_size(self) -> tuple[int, int]:
        return self.cell_width, self.cell_height

    @property
    def canvas_size(self) -> tuple[int, int]:
        return self.canvas_width, self.canvas_height

    @property
    def is_empty(self) -> bool:
        """Return True for the degenerate zero-entry grid."""
        return self.side == 0


@dataclass(slots=True)
class RunSummary:
    """Outcome of one contact sheet run."""

    catalog_size: int
    image_count: int
    video_count: int
    geometry: GridGeometry
    painted: int = 0
    clipped: int = 0
    skipped: list[str] | None = None
    output_path: Path | None = None

    @property
    def skipped_count(self) -> int:
        return len(self.skipped or [])
