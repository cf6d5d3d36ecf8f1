"""Input validation helpers for runtime configuration."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from contact_sheet.errors import DirectoryUnreadableError

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence


def validate_root_paths(root_paths: Sequence[str | Path]) -> list[Path]:
    """
    Ensure at least one root is given and every root is a directory.

    Returns the roots as paths in the order supplied.
    """
    if not root_paths:
        msg = "At least one root directory is required"
        raise ValueError(msg)
    roots = [Path(p) for p in root_paths]
    for root in roots:
        if not root.exists():
            raise DirectoryUnreadableError(root, "no such directory")
        if not root.is_dir():
            raise DirectoryUnreadableError(root, "not a directory")
    return roots
