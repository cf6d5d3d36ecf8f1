"""CLI argument parsing and main entry point."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import TYPE_CHECKING, TypeVar

import contact_sheet.config as cs_config
import contact_sheet.pipeline as cs_pipeline
from contact_sheet.config_defaults import (
    DEFAULT_CELL_HEIGHT,
    DEFAULT_CELL_WIDTH,
    DEFAULT_OUTPUT_PATH,
)
from contact_sheet.constants import HEX_RGB_LENGTH, SIZE_2D_PARTS
from contact_sheet.errors import ContactSheetError
from contact_sheet.logging_utils import logger, set_verbosity

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Callable, Sequence

T = TypeVar("T")

EXIT_OK = 0
EXIT_FAILURE = 1


def positive_int(text: str) -> int:
    """Argparse-style validator that enforces a strictly positive integer."""
    try:
        value = int(text)
    except ValueError as exc:
        msg = "must be an integer"
        raise ValueError(msg) from exc
    if value <= 0:
        msg = "must be positive"
        raise ValueError(msg)
    return value


def non_negative_int(text: str) -> int:
    """Argparse-style validator for integers that may be zero."""
    try:
        value = int(text)
    except ValueError as exc:
        msg = "must be an integer"
        raise ValueError(msg) from exc
    if value < 0:
        msg = "must not be negative"
        raise ValueError(msg)
    return value


def size_2d(text: str) -> tuple[int, int]:
    """Parse ``WxH`` strings into integer tuples and validate positivity."""
    parts = text.lower().split("x")
    if len(parts) != SIZE_2D_PARTS:
        msg = "must look like WxH, e.g., 256x256"
        raise ValueError(msg)
    try:
        width, height = int(parts[0]), int(parts[1])
    except ValueError as exc:
        msg = "width and height must be integers"
        raise ValueError(msg) from exc
    if width <= 0 or height <= 0:
        msg = "width and height must be positive"
        raise ValueError(msg)
    return width, height


def parse_hex_color(text: str) -> tuple[int, int, int]:
    """Parse ``#rrggbb`` strings into RGB triples."""
    stripped = text.strip().lstrip("#")
    if len(stripped) != HEX_RGB_LENGTH:
        msg = "color must look like #rrggbb"
        raise ValueError(msg)
    try:
        red = int(stripped[0:2], 16)
        green = int(stripped[2:4], 16)
        blue = int(stripped[4:6], 16)
    except ValueError as exc:
        msg = "color contains invalid hex digits"
        raise ValueError(msg) from exc
    return red, green, blue


def _wrap_validator[T](
    validator: Callable[[str], T],
    error_cls: type[argparse.ArgumentTypeError] = argparse.ArgumentTypeError,
) -> Callable[[str], T]:
    """Convert ``ValueError`` from a validator into ``ArgumentTypeError``."""

    def wrapper(text: str) -> T:
        try:
            return validator(text)
        except ValueError as exc:
            raise error_cls(str(exc)) from exc

    return wrapper


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct the argument parser for the command-line interface."""
    p = argparse.ArgumentParser(
        prog="contact-sheet",
        description=(
            "Scan directories for images and videos and composite every "
            "image into one square contact sheet."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "contact-sheet ~/Pictures ~/Downloads\n"
            "contact-sheet photos --output sheet.jpg --cell-size 128x128\n"
            "contact-sheet photos --match-mode suffix --ignore-case "
            "--workers 4\n"
        ),
    )

    p.add_argument(
        "roots", nargs="*", type=Path, metavar="ROOT",
        help="Directories to scan, in placement order")

    output = p.add_argument_group("output")
    output.add_argument(
        "-o", "--output", type=str, default=None,
        help=f"Output image path (default: {DEFAULT_OUTPUT_PATH})")

    grid = p.add_argument_group("grid")
    grid.add_argument(
        "--cell-size", type=_wrap_validator(size_2d), default=None,
        help=("Cell size as WxH (default: "
              f"{DEFAULT_CELL_WIDTH}x{DEFAULT_CELL_HEIGHT})"))
    grid.add_argument(
        "--background", type=_wrap_validator(parse_hex_color),
        default=None, help="Background fill as #rrggbb (default: black)")
    grid.add_argument(
        "--row-rounding", choices=["round", "half_even", "floor"],
        default=None,
        help=("How a catalog index maps to a row (default: round, "
              "half away from zero)"))

    scan = p.add_argument_group("scan")
    scan.add_argument(
        "--match-mode", choices=["substring", "suffix"], default=None,
        help="Match extensions anywhere in the name or only at the end")
    scan.add_argument(
        "--ignore-case", action="store_true",
        help="Match extensions case-insensitively")
    scan.add_argument(
        "--retries", type=_wrap_validator(non_negative_int), default=None,
        help="Retry a failed directory listing this many times")

    proc = p.add_argument_group("processing")
    proc.add_argument(
        "--workers", type=_wrap_validator(positive_int), default=None,
        help="Decode images on this many threads (default: 1)")
    proc.add_argument(
        "--no-progress", action="store_true",
        help="Disable the progress bar")
    proc.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log every processed file")

    cfg = p.add_argument_group("config")
    cfg.add_argument(
        "--config", type=str,
        help="Path to config.toml file")
    cfg.add_argument(
        "--validate-config-only", action="store_true",
        help="Validate config file and exit without scanning")

    return p


def log_parameters(
    roots: Sequence[Path],
    cfg: cs_config.ContactSheetConfig,
    args: argparse.Namespace,
) -> None:
    """Log the effective run parameters."""
    if getattr(args, "config", None):
        logger.info("Loaded config from: %s", args.config)
    logger.info("Roots: %s", ", ".join(str(r) for r in roots))
    logger.info("Output: %s", cfg.output.output)
    logger.info("Cell Size: %dx%d", cfg.grid.cell_width, cfg.grid.cell_height)
    logger.info("Row Rounding: %s", cfg.grid.row_rounding)
    logger.info("Match Mode: %s (%s)", cfg.scan.match_mode,
                "case-sensitive" if cfg.scan.case_sensitive
                else "case-insensitive")
    logger.info("Workers: %d", cfg.processing.workers)


def run_from_args(args: argparse.Namespace) -> int:
    """Run the pipeline from parsed arguments and return an exit code."""
    set_verbosity(verbose=getattr(args, "verbose", False))

    base_cfg: cs_config.ContactSheetConfig | None = None
    if args.config:
        base_cfg = cs_config.ConfigLoader.load(args.config)
        if args.validate_config_only:
            logger.info("Config %s validated successfully.", args.config)
            return EXIT_OK

    cfg = cs_config.build_config_from_cli(vars(args), base_config=base_cfg)
    log_parameters(args.roots, cfg, args)

    try:
        cs_pipeline.build_contact_sheet(args.roots, cfg)
    except ContactSheetError as exc:
        logger.error("%s", exc)
        return EXIT_FAILURE
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    """Parse command-line arguments and build the contact sheet."""
    arg_parser = build_arg_parser()
    args = arg_parser.parse_args(argv)
    if args.validate_config_only and not args.config:
        arg_parser.error("--validate-config-only requires --config")
    if not args.validate_config_only and not args.roots:
        arg_parser.error("the following arguments are required: ROOT")

    try:
        return run_from_args(args)
    except (FileNotFoundError, ValueError) as exc:
        arg_parser.error(str(exc))


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
