"""Top-level orchestration of the contact sheet pipeline."""

from __future__ import annotations

from collections import deque
from concurrent.futures import Future, ThreadPoolExecutor
from typing import TYPE_CHECKING

from tqdm import tqdm

import contact_sheet.image_io as cs_image_io
import contact_sheet.runtime as cs_runtime
from contact_sheet.catalog import build_catalog, summarize_catalog
from contact_sheet.config import ContactSheetConfig, GridConfig
from contact_sheet.errors import DecodeError
from contact_sheet.grid import Canvas, cell_position, compute_geometry
from contact_sheet.logging_utils import logger
from contact_sheet.type_defs import MediaEntry, MediaKind, RunSummary

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterator, Sequence
    from pathlib import Path

    from PIL import Image

# (catalog index, entry, normalized image or the error that skipped it)
_Outcome = tuple[int, MediaEntry, "Image.Image | DecodeError"]

# Decodes kept in flight per worker when running a pool
_BUFFER_PER_WORKER = 2


def _normalize_entry(
    job: tuple[int, MediaEntry],
    grid: GridConfig,
) -> _Outcome:
    """Normalize one catalog image, capturing recoverable failures."""
    index, entry = job
    logger.debug("Start for %s", entry.path)
    try:
        image = cs_image_io.normalize(
            entry.path,
            grid.cell_width,
            grid.cell_height,
            background=grid.background,
        )
    except DecodeError as exc:
        return index, entry, exc
    return index, entry, image


def _iter_outcomes(
    jobs: list[tuple[int, MediaEntry]],
    grid: GridConfig,
    workers: int,
) -> Iterator[_Outcome]:
    """
    Yield normalization outcomes in catalog order.

    With more than one worker, decodes run on a thread pool with a bounded
    number in flight; results are still handed out in submission order so
    the single compositing loop sees the same sequence either way.
    """
    if workers <= 1:
        for job in jobs:
            yield _normalize_entry(job, grid)
        return

    buffer_ahead = workers * _BUFFER_PER_WORKER
    with ThreadPoolExecutor(max_workers=workers) as pool:
        pending: deque[Future[_Outcome]] = deque()
        remaining = iter(jobs)
        for job in remaining:
            pending.append(pool.submit(_normalize_entry, job, grid))
            if len(pending) >= buffer_ahead:
                break
        while pending:
            outcome = pending.popleft().result()
            next_job = next(remaining, None)
            if next_job is not None:
                pending.append(pool.submit(_normalize_entry, next_job, grid))
            yield outcome


def composite_catalog(
    canvas: Canvas,
    catalog: Sequence[MediaEntry],
    config: ContactSheetConfig,
) -> list[str]:
    """
    Paint every image entry of ``catalog`` into its cell on ``canvas``.

    The cell comes from the entry's index in the whole catalog, so videos
    still take up a cell that is left as background. Entries that fail
    to decode are logged and skipped. Returns the skipped paths.
    """
    grid = config.grid
    side = canvas.geometry.side
    jobs = [(i, entry) for i, entry in enumerate(catalog) if entry.is_image]
    skipped: list[str] = []

    outcomes = _iter_outcomes(jobs, grid, config.processing.workers)
    for index, entry, result in tqdm(
        outcomes,
        total=len(jobs),
        desc="Contact Sheet",
        unit="img",
        disable=not config.processing.show_progress,
    ):
        if isinstance(result, DecodeError):
            logger.warning("Skipping %s: %s", entry.path, result)
            skipped.append(entry.path)
            continue
        row, col = cell_position(index, side, grid.row_rounding)
        canvas.paste(result, row, col)

    return skipped


def build_contact_sheet(
    root_paths: Sequence[str | Path],
    config: ContactSheetConfig | None = None,
) -> RunSummary:
    """
    Scan ``root_paths`` and write one contact sheet image.

    Runs the whole pipeline: catalog, geometry, compositing, persistence.
    An empty catalog is a no-op and writes no file. Raises
    DirectoryUnreadableError or PersistError on fatal failures.
    """
    cfg = config if config is not None else ContactSheetConfig()
    roots = cs_runtime.validate_root_paths(root_paths)

    catalog = build_catalog(roots, cfg.scan)
    counts = summarize_catalog(catalog)
    geometry = compute_geometry(len(catalog), cfg.grid.cell_size)
    summary = RunSummary(
        catalog_size=len(catalog),
        image_count=counts[MediaKind.IMAGE],
        video_count=counts[MediaKind.VIDEO],
        geometry=geometry,
    )
    logger.info(
        "Cataloged %d entries (%d images, %d videos) from %d root(s)",
        summary.catalog_size, summary.image_count, summary.video_count,
        len(roots),
    )

    if geometry.is_empty:
        logger.warning("No media files found; no contact sheet written")
        return summary

    logger.info("Grid: %dx%d cells of %dx%d px",
                geometry.side, geometry.side,
                geometry.cell_width, geometry.cell_height)

    canvas = Canvas(geometry, cfg.grid.background)
    summary.skipped = composite_catalog(canvas, catalog, cfg)
    summary.painted = canvas.painted
    summary.clipped = canvas.clipped
    summary.output_path = cs_runtime.save_canvas(canvas, cfg.output.output)

    logger.info("Painted %d image(s) (%d clipped), skipped %d",
                summary.painted, summary.clipped, summary.skipped_count)
    return summary
