"""Canvas ownership and cell compositing."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from PIL import Image

from contact_sheet.constants import COLOR_BLACK, COLOR_MODE_RGB
from contact_sheet.errors import PersistError
from contact_sheet.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from contact_sheet.type_defs import RGB, GridGeometry


def cell_origin(
    row: int,
    col: int,
    cell_width: int,
    cell_height: int,
) -> tuple[int, int]:
    """Return the top-left pixel of cell ``(row, col)``."""
    return col * cell_width, row * cell_height


def cell_in_bounds(  # noqa: PLR0913
    row: int,
    col: int,
    cell_width: int,
    cell_height: int,
    canvas_width: int,
    canvas_height: int,
) -> bool:
    """Return True when the whole cell lies inside the canvas."""
    x, y = cell_origin(row, col, cell_width, cell_height)
    return (
        x >= 0 and y >= 0
        and x + cell_width <= canvas_width
        and y + cell_height <= canvas_height
    )


def cell_overlaps(  # noqa: PLR0913
    row: int,
    col: int,
    cell_width: int,
    cell_height: int,
    canvas_width: int,
    canvas_height: int,
) -> bool:
    """Return True when any pixel of the cell lands on the canvas."""
    x, y = cell_origin(row, col, cell_width, cell_height)
    return (
        x < canvas_width and y < canvas_height
        and x + cell_width > 0 and y + cell_height > 0
    )


def paste(  # noqa: PLR0913
    canvas: Image.Image,
    image: Image.Image,
    row: int,
    col: int,
    cell_width: int,
    cell_height: int,
) -> None:
    """
    Overlay ``image`` onto ``canvas`` at cell ``(row, col)``.

    Pixels are replaced, not blended. Anything falling outside the canvas
    is clipped by Pillow without error.
    """
    canvas.paste(image, cell_origin(row, col, cell_width, cell_height))


class Canvas:
    """
    Output buffer for one run, sized to the full grid.

    The buffer starts filled with ``background``; each paste replaces one
    cell. Only this object writes to the buffer and it is saved once.
    """

    def __init__(
        self,
        geometry: GridGeometry,
        background: RGB = COLOR_BLACK,
    ) -> None:
        self.geometry = geometry
        self.background = background
        self.painted = 0
        self.clipped = 0
        self._saved = False
        self._image = Image.new(COLOR_MODE_RGB, geometry.canvas_size,
                                background)

    @property
    def image(self) -> Image.Image:
        """Return the underlying buffer; callers must not draw on it."""
        return self._image

    @property
    def size(self) -> tuple[int, int]:
        return self._image.size

    def paste(self, image: Image.Image, row: int, col: int) -> bool:
        """
        Paste a normalized image into its cell.

        Returns False (and logs a warning) when the cell is partly or
        wholly outside the canvas. The visible part, if any, is still
        written. ``painted`` only counts pastes that left pixels on the
        canvas.
        """
        geo = self.geometry
        bounds = (geo.cell_width, geo.cell_height,
                  geo.canvas_width, geo.canvas_height)
        inside = cell_in_bounds(row, col, *bounds)
        if not inside:
            self.clipped += 1
            logger.warning(
                "Cell (%d, %d) falls outside the %dx%d canvas; clipped",
                row, col, geo.canvas_width, geo.canvas_height,
            )
        if cell_overlaps(row, col, *bounds):
            paste(self._image, image, row, col,
                  geo.cell_width, geo.cell_height)
            self.painted += 1
        return inside

    def save(self, path: str | Path) -> Path:
        """
        Persist the canvas; the format follows the file extension.

        Raises PersistError if the canvas was already saved, the
        extension is unknown to Pillow, or the write fails.
        """
        out_path = Path(path)
        if self._saved:
            msg = "canvas has already been saved"
            raise PersistError(out_path, msg)
        try:
            out_path.parent.mkdir(parents=True, exist_ok=True)
            self._image.save(out_path)
        except (OSError, ValueError, KeyError) as exc:
            raise PersistError(out_path, str(exc)) from exc
        self._saved = True
        return out_path
