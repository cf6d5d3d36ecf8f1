"""Runtime utilities for input validation and output persistence."""

from .output import resolve_output_path, save_canvas
from .validation import validate_root_paths

__all__ = [
    "resolve_output_path",
    "save_canvas",
    "validate_root_paths",
]
