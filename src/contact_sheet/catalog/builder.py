"""Build the ordered media catalog from a list of root directories."""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

from contact_sheet.catalog.classifier import classify
from contact_sheet.catalog.walker import iter_files
from contact_sheet.config import ScanConfig
from contact_sheet.logging_utils import logger
from contact_sheet.type_defs import MediaEntry, MediaKind

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterable, Sequence
    from pathlib import Path

_DEFAULT_SCAN = ScanConfig()


def build_catalog(
    root_paths: Sequence[str | Path],
    config: ScanConfig = _DEFAULT_SCAN,
) -> list[MediaEntry]:
    """
    Walk each root in order and classify every file found.

    The result is the concatenation of per-root results in the order the
    roots were given, and within a root in walk order. A file produces
    one entry per matching kind. Catalog position decides grid placement,
    so this order must stay stable.
    """
    catalog: list[MediaEntry] = []
    for root in root_paths:
        before = len(catalog)
        for path in iter_files(root, config.retries):
            for kind in classify(path.name, config):
                catalog.append(MediaEntry(path=str(path), kind=kind))
        logger.debug("Cataloged %d entries under %s",
                     len(catalog) - before, root)
    return catalog


def summarize_catalog(catalog: Iterable[MediaEntry]) -> dict[MediaKind, int]:
    """Count catalog entries per kind, including kinds with no entries."""
    counts = Counter(entry.kind for entry in catalog)
    return {kind: counts.get(kind, 0) for kind in MediaKind}
