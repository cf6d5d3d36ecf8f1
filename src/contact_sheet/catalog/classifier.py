"""Extension-based classification of file names into media kinds."""

from __future__ import annotations

from contact_sheet.config import ScanConfig
from contact_sheet.type_defs import MediaKind

_DEFAULT_SCAN = ScanConfig()


def extensions_for(kind: MediaKind, config: ScanConfig) -> tuple[str, ...]:
    """Return the configured extension set for ``kind``."""
    if kind is MediaKind.IMAGE:
        return config.image_extensions
    return config.video_extensions


def _matches(name: str, extension: str, config: ScanConfig) -> bool:
    if not config.case_sensitive:
        name = name.casefold()
        extension = extension.casefold()
    if config.match_mode == "suffix":
        return name.endswith(extension)
    return extension in name


def classify(
    file_name: str,
    config: ScanConfig = _DEFAULT_SCAN,
) -> tuple[MediaKind, ...]:
    """
    Return every media kind whose extensions match ``file_name``.

    With the default configuration an extension matches anywhere in the
    name and case is significant, so ``backup.jpgold.txt`` is an image
    while ``photo.JPG`` is not. A name matching several kinds is reported
    once per kind, images first. An empty tuple means no match.
    """
    return tuple(
        kind
        for kind in MediaKind
        if any(_matches(file_name, ext, config)
               for ext in extensions_for(kind, config))
    )


def classify_one(
    file_name: str,
    config: ScanConfig = _DEFAULT_SCAN,
) -> MediaKind | None:
    """Return the first matching kind for ``file_name``, if any."""
    kinds = classify(file_name, config)
    return kinds[0] if kinds else None
