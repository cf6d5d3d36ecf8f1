"""Shared default values for user-facing configuration settings."""
from contact_sheet.type_defs import MatchMode, RowRounding

# Scan
DEFAULT_IMAGE_EXTENSIONS: tuple[str, ...] = (".jpg", ".jpeg", ".png")
DEFAULT_VIDEO_EXTENSIONS: tuple[str, ...] = (".mp4", ".mov")
DEFAULT_MATCH_MODE: MatchMode = "substring"
DEFAULT_CASE_SENSITIVE = True
DEFAULT_LISTING_RETRIES = 0

# Grid
DEFAULT_CELL_WIDTH = 256
DEFAULT_CELL_HEIGHT = 256
DEFAULT_ROW_ROUNDING: RowRounding = "round"
DEFAULT_BACKGROUND: tuple[int, int, int] = (0, 0, 0)

# Output
DEFAULT_OUTPUT_PATH = "result.png"

# Processing
DEFAULT_WORKERS = 1
DEFAULT_SHOW_PROGRESS = True
