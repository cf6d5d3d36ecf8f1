"""
Constants used internally by the contact sheet builder.

These are implementation-level values that are not exposed through config
files or CLI arguments.
"""

# Internal color constants
COLOR_MODE_RGB = "RGB"
COLOR_BLACK = (0, 0, 0)

# Modes Pillow composites against a background before dropping alpha
ALPHA_MODES = ("RGBA", "LA", "PA")

# Directory listing retry pause (seconds)
LISTING_RETRY_DELAY = 0.1

# Parsing helpers
SIZE_2D_PARTS = 2
HEX_RGB_LENGTH = 6
