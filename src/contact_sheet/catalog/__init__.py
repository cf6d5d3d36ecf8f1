"""
Media discovery split into walking, classification, and catalog building.

The package re-exports the entry points so callers can import them from
``contact_sheet.catalog`` directly.
"""

from __future__ import annotations

from . import builder, classifier, walker
from .builder import build_catalog, summarize_catalog
from .classifier import classify, classify_one, extensions_for
from .walker import iter_files, walk

__all__ = [
    "build_catalog",
    "builder",
    "classifier",
    "classify",
    "classify_one",
    "extensions_for",
    "iter_files",
    "summarize_catalog",
    "walk",
    "walker",
]
