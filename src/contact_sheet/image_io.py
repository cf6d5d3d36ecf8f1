"""Image decoding, resizing, and pixel-format normalization."""
from __future__ import annotations

from pathlib import Path

from PIL import Image, UnidentifiedImageError

from contact_sheet.constants import ALPHA_MODES, COLOR_BLACK, COLOR_MODE_RGB
from contact_sheet.errors import DecodeError, UnsupportedPixelFormatError
from contact_sheet.type_defs import RGB


def load_image(path: str | Path) -> Image.Image:
    """
    Open and fully decode an image file.

    Pillow opens files lazily, so the pixel data is loaded here to surface
    truncated or corrupt files as a DecodeError instead of later during
    resizing.

    Args:
        path: Path to the image file

    Returns:
        The decoded PIL Image in its native mode

    Raises:
        DecodeError: If the file is missing, unreadable, or not an image

    """
    try:
        with Image.open(path) as img:
            img.load()
            return img.copy()
    except FileNotFoundError as e:
        raise DecodeError(path, "file not found") from e
    except UnidentifiedImageError as e:
        raise DecodeError(path, "unrecognized image format") from e
    except Image.DecompressionBombError as e:
        raise DecodeError(path, str(e)) from e
    except (OSError, SyntaxError, ValueError) as e:
        raise DecodeError(path, f"{e!s}") from e


def to_rgb(
    img: Image.Image,
    *,
    bg_color: RGB = COLOR_BLACK,
    path: str | Path = "<memory>",
) -> Image.Image:
    """Convert PIL image to RGB, alpha compositing if needed."""
    if img.mode == COLOR_MODE_RGB:
        return img
    try:
        if img.mode in ALPHA_MODES:
            bg = Image.new("RGBA", img.size, (*bg_color, 255))
            comp = Image.alpha_composite(bg, img.convert("RGBA"))
            return comp.convert(COLOR_MODE_RGB)
        return img.convert(COLOR_MODE_RGB)
    except (ValueError, OSError) as e:
        raise UnsupportedPixelFormatError(path, img.mode) from e


def resize_exact(
    img: Image.Image,
    target_width: int,
    target_height: int,
) -> Image.Image:
    """Stretch ``img`` to exactly the target size with a triangle filter."""
    return img.resize((target_width, target_height),
                      Image.Resampling.BILINEAR)


def normalize(
    path: str | Path,
    target_width: int,
    target_height: int,
    background: RGB = COLOR_BLACK,
) -> Image.Image:
    """
    Decode ``path`` and produce an RGB cell image of the target size.

    The source aspect ratio is ignored: the image is stretched, never
    letterboxed. Transparent pixels are flattened onto ``background``.
    The function is stateless, so it is safe to call from several worker
    threads at once.

    Raises:
        DecodeError: If the file cannot be decoded
        UnsupportedPixelFormatError: If the pixels cannot become RGB

    """
    if target_width <= 0 or target_height <= 0:
        msg = (f"Target size must be positive, got "
               f"{target_width}x{target_height}")
        raise ValueError(msg)
    # Convert first: Pillow resizes palette images with NEAREST only.
    rgb = to_rgb(load_image(path), bg_color=background, path=path)
    return resize_exact(rgb, target_width, target_height)
