"""
Configuration schema and loader for the contact sheet builder.

Defines Pydantic models representing structured configuration sections,
a TOML-based config loader with validation support, and the merge of
command-line overrides on top of a loaded file.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

import tomlkit
from pydantic import BaseModel, ConfigDict, Field, field_validator

from contact_sheet.config_defaults import (
    DEFAULT_BACKGROUND,
    DEFAULT_CASE_SENSITIVE,
    DEFAULT_CELL_HEIGHT,
    DEFAULT_CELL_WIDTH,
    DEFAULT_IMAGE_EXTENSIONS,
    DEFAULT_LISTING_RETRIES,
    DEFAULT_MATCH_MODE,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_ROW_ROUNDING,
    DEFAULT_SHOW_PROGRESS,
    DEFAULT_VIDEO_EXTENSIONS,
    DEFAULT_WORKERS,
)
from contact_sheet.type_defs import MatchMode, RowRounding

_MAX_CHANNEL = 255


class ScanConfig(BaseModel):
    """
    Control how files are discovered and classified.

    Frozen so a single instance can be shared by the catalog builder and
    every classifier call of a run.
    """

    model_config = ConfigDict(frozen=True)

    image_extensions: tuple[str, ...] = Field(DEFAULT_IMAGE_EXTENSIONS,
                                              min_length=1)
    video_extensions: tuple[str, ...] = Field(DEFAULT_VIDEO_EXTENSIONS)
    match_mode: MatchMode = Field(DEFAULT_MATCH_MODE)
    case_sensitive: bool = DEFAULT_CASE_SENSITIVE
    retries: int = Field(DEFAULT_LISTING_RETRIES, ge=0, le=10)

    @field_validator("image_extensions", "video_extensions")
    @classmethod
    def _non_blank(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if any(not ext for ext in value):
            msg = "extensions must be non-empty strings"
            raise ValueError(msg)
        return value


class GridConfig(BaseModel):
    """Control cell size, row placement, and background fill."""

    model_config = ConfigDict(frozen=True)

    cell_width: int = Field(DEFAULT_CELL_WIDTH, ge=1)
    cell_height: int = Field(DEFAULT_CELL_HEIGHT, ge=1)
    row_rounding: RowRounding = Field(DEFAULT_ROW_ROUNDING)
    background: tuple[int, int, int] = Field(DEFAULT_BACKGROUND)

    @field_validator("background")
    @classmethod
    def _channel_range(
        cls,
        value: tuple[int, int, int],
    ) -> tuple[int, int, int]:
        if any(c < 0 or c > _MAX_CHANNEL for c in value):
            msg = "background channels must be within 0-255"
            raise ValueError(msg)
        return value

    @property
    def cell_size(self) -> tuple[int, int]:
        return self.cell_width, self.cell_height


class OutputConfig(BaseModel):
    """Configure where the finished sheet is written."""

    output: str = Field(DEFAULT_OUTPUT_PATH, min_length=1)


class ProcessingConfig(BaseModel):
    """Control decode parallelism and progress reporting."""

    workers: int = Field(DEFAULT_WORKERS, ge=1, le=64)
    show_progress: bool = DEFAULT_SHOW_PROGRESS


class ContactSheetConfig(BaseModel):
    """
    Root configuration object combining all supported sections.

    Mirrors the structure of config.toml, grouping related parameters
    under logical categories.
    """

    scan: ScanConfig = Field(
        default_factory=lambda: ScanConfig.model_validate({}),
    )
    grid: GridConfig = Field(
        default_factory=lambda: GridConfig.model_validate({}),
    )
    output: OutputConfig = Field(
        default_factory=lambda: OutputConfig.model_validate({}),
    )
    processing: ProcessingConfig = Field(
        default_factory=lambda: ProcessingConfig.model_validate({}),
    )


class ConfigLoader:
    """
    Loads and parses a TOML configuration file into a typed config object.

    Falls back to defaults for any missing subsections or fields.
    """

    @staticmethod
    def load(path: str) -> ContactSheetConfig:
        """
        Load a contact sheet configuration from a TOML file.

        Returns a validated ContactSheetConfig instance based on the file
        contents.
        """
        config_path = Path(path)
        if not config_path.is_file():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)

        with config_path.open("r", encoding="utf-8") as f:
            doc = tomlkit.load(f)

        return ContactSheetConfig.model_validate(doc.unwrap())


# CLI argument name -> (config section, field name)
_CLI_OVERRIDES: dict[str, tuple[str, str]] = {
    "output": ("output", "output"),
    "match_mode": ("scan", "match_mode"),
    "retries": ("scan", "retries"),
    "row_rounding": ("grid", "row_rounding"),
    "background": ("grid", "background"),
    "workers": ("processing", "workers"),
}


def build_config_from_cli(
    args: Mapping[str, Any],
    base_config: ContactSheetConfig | None = None,
    loader: Callable[[str], ContactSheetConfig] = ConfigLoader.load,
) -> ContactSheetConfig:
    """
    Merge command-line values on top of a base configuration.

    ``args`` is typically ``vars(argparse.Namespace)``. Keys that are
    missing or ``None`` leave the base value untouched. When no base is
    given and ``args["config"]`` is set, the file is loaded first.
    """
    if base_config is None:
        config_path = args.get("config")
        base_config = (
            loader(config_path) if config_path
            else ContactSheetConfig.model_validate({})
        )

    data = base_config.model_dump()
    for arg_name, (section, field) in _CLI_OVERRIDES.items():
        value = args.get(arg_name)
        if value is not None:
            data[section][field] = value

    cell_size = args.get("cell_size")
    if cell_size is not None:
        data["grid"]["cell_width"], data["grid"]["cell_height"] = cell_size
    if args.get("ignore_case"):
        data["scan"]["case_sensitive"] = False
    if args.get("no_progress"):
        data["processing"]["show_progress"] = False

    return ContactSheetConfig.model_validate(data)
