"""Recursive, deterministic enumeration of files under a directory."""

from __future__ import annotations

import os
import time
from pathlib import Path
from typing import TYPE_CHECKING

from contact_sheet.constants import LISTING_RETRY_DELAY
from contact_sheet.errors import DirectoryUnreadableError
from contact_sheet.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterator


def _list_directory(directory: Path) -> list[os.DirEntry[str]]:
    """Return the entries of ``directory`` sorted by name."""
    with os.scandir(directory) as it:
        return sorted(it, key=lambda entry: entry.name)


def _list_with_retry(
    directory: Path,
    retries: int,
) -> list[os.DirEntry[str]]:
    attempt = 0
    while True:
        try:
            return _list_directory(directory)
        except (FileNotFoundError, NotADirectoryError) as exc:
            raise DirectoryUnreadableError(directory, exc.strerror
                                           or str(exc)) from exc
        except OSError as exc:
            if attempt >= retries:
                raise DirectoryUnreadableError(directory, exc.strerror
                                               or str(exc)) from exc
            attempt += 1
            logger.warning(
                "Listing %s failed (%s); retry %d of %d",
                directory, exc, attempt, retries,
            )
            time.sleep(LISTING_RETRY_DELAY)


def iter_files(root: str | Path, retries: int = 0) -> Iterator[Path]:
    """
    Yield every regular file below ``root`` in lexical order per level.

    Directories are descended depth-first in the position they sort to.
    Symlinked directories are not followed, and entries that are neither
    files nor directories are ignored. Raises DirectoryUnreadableError
    for any directory that cannot be listed.
    """
    directory = Path(root)
    for entry in _list_with_retry(directory, retries):
        path = directory / entry.name
        if entry.is_file():
            yield path
        elif entry.is_dir(follow_symlinks=False):
            yield from iter_files(path, retries)
        else:
            logger.debug("Ignoring non-regular entry: %s", path)


def walk(root: str | Path, retries: int = 0) -> list[Path]:
    """Return all regular files below ``root`` as a flat list."""
    return list(iter_files(root, retries))
