"""Square grid geometry and catalog-index to cell mapping."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from contact_sheet.type_defs import GridGeometry

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterator

    from contact_sheet.type_defs import RowRounding


def grid_side(entry_count: int) -> int:
    """Return ``ceil(sqrt(entry_count))`` using exact integer math."""
    if entry_count < 0:
        msg = f"entry_count must be non-negative, got {entry_count}"
        raise ValueError(msg)
    side = math.isqrt(entry_count)
    return side if side * side == entry_count else side + 1


def compute_geometry(
    entry_count: int,
    cell_size: tuple[int, int],
) -> GridGeometry:
    """
    Derive the grid for ``entry_count`` cells of ``cell_size`` pixels.

    Zero entries give the degenerate ``side == 0`` grid with an empty
    canvas; callers decide whether that is worth persisting.
    """
    cell_width, cell_height = cell_size
    if cell_width <= 0 or cell_height <= 0:
        msg = f"cell size must be positive, got {cell_width}x{cell_height}"
        raise ValueError(msg)
    side = grid_side(entry_count)
    return GridGeometry(
        side=side,
        cell_width=cell_width,
        cell_height=cell_height,
        canvas_width=side * cell_width,
        canvas_height=side * cell_height,
    )


def cell_position(
    index: int,
    side: int,
    rounding: RowRounding = "round",
) -> tuple[int, int]:
    """
    Map a catalog index to its ``(row, col)`` cell.

    The column is ``index % side``. The row depends on ``rounding``:

    - ``"round"``: ``index / side`` rounded half away from zero, the
      historical placement. Late indices can land on row ``side``,
      below the canvas.
    - ``"half_even"``: ``round(index / side)`` with Python's ties-to-even
      rule.
    - ``"floor"``: ``index // side``, plain row-major order that always
      stays inside a grid holding ``index + 1`` or more cells.
    """
    if side <= 0:
        msg = f"side must be positive, got {side}"
        raise ValueError(msg)
    if index < 0:
        msg = f"index must be non-negative, got {index}"
        raise ValueError(msg)
    col = index % side
    if rounding == "round":
        # floor(index / side + 1/2) in exact integer arithmetic
        row = (2 * index + side) // (2 * side)
    elif rounding == "half_even":
        row = round(index / side)
    elif rounding == "floor":
        row = index // side
    else:
        msg = f"unknown row rounding: {rounding!r}"
        raise ValueError(msg)
    return row, col


def iter_cells(
    entry_count: int,
    side: int,
    rounding: RowRounding = "round",
) -> Iterator[tuple[int, int, int]]:
    """Yield ``(index, row, col)`` for every catalog index."""
    for index in range(entry_count):
        row, col = cell_position(index, side, rounding)
        yield index, row, col
