"""User-configurable settings loaded from a YAML config file."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import ClassVar, Literal

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from wallprep.common.enums import ResampleFilter, VerticalAlign
from wallprep.constants import CONFIG_ENV_VAR, DEFAULT_BACKGROUND, DEFAULT_OUTPUT_DIR

# Load environment variables from .env file(s)
load_dotenv()


def _interpolate_env(content: str) -> str:
    return re.sub(r"\$\{(\w+)\}", lambda m: os.getenv(m.group(1), ""), content)


class WallpaperSettings(BaseModel):
    """Settings for how wallpapers are composited and written.

    Every field has a default, so an empty or missing config file gives the
    plain behaviour: no margin, square corners, black background.
    """

    # Default search paths for configuration
    DEFAULT_CONFIG_PATHS: ClassVar[list[Path]] = [
        Path("wallprep.yaml"),
        Path("~/.config/wallprep/config.yaml").expanduser(),
        Path("/etc/wallprep/config.yaml"),
    ]

    # Composition
    margin_top: int = Field(0, ge=0, description="Pixels reserved at the top (e.g. menu bar)")
    border_radius: int | None = Field(
        None, ge=0, description="Corner radius of the visible image; null for square corners"
    )
    background: tuple[int, int, int, int] = Field(
        DEFAULT_BACKGROUND, description="RGBA colour of the margin band and uncovered areas"
    )
    vertical_align: Literal["bottom", "top"] = Field(
        "bottom", description="Anchor the image to the bottom of the display or below the margin"
    )
    resample: Literal["lanczos", "bicubic", "bilinear", "nearest"] = "lanczos"

    # Output
    compress_level: int = Field(6, ge=0, le=9, description="PNG zlib compression level")
    output_dir: Path = Field(DEFAULT_OUTPUT_DIR, description="Directory for generated wallpapers")

    # ---- validators ----
    @field_validator("background")
    @classmethod
    def validate_background(cls, v: tuple[int, int, int, int]) -> tuple[int, int, int, int]:
        if any(not 0 <= channel <= 255 for channel in v):
            raise ValueError("background channels must be between 0 and 255")
        return v

    @field_validator("output_dir")
    @classmethod
    def expand_output_dir(cls, v: Path) -> Path:
        return v.expanduser()

    # ---- convenience properties ----
    @property
    def alignment(self) -> VerticalAlign:
        """Configured vertical alignment as an enum."""
        return VerticalAlign(self.vertical_align)

    @property
    def resample_filter(self) -> ResampleFilter:
        """Configured resampling filter as an enum."""
        return ResampleFilter(self.resample)

    @classmethod
    def load(cls, path: Path | None = None) -> WallpaperSettings:
        """Load configuration from a YAML file.

        Args:
            path: Path to config file (optional, searches default locations if None)

        Returns:
            Validated WallpaperSettings object; defaults if no file is found

        Raises:
            FileNotFoundError: If the file named by WALLPREP_CONFIG is missing
            RuntimeError: If the config file cannot be parsed or is invalid
        """
        # Try to find config file
        if path is None:
            # Check environment variable first
            env_path = os.environ.get(CONFIG_ENV_VAR)
            if env_path:
                path = Path(env_path)
                if not path.exists():
                    raise FileNotFoundError(f"Config file from {CONFIG_ENV_VAR} not found: {path}")
            else:
                # Try default paths
                for default_path in cls.DEFAULT_CONFIG_PATHS:
                    if default_path.exists():
                        path = default_path
                        break
                else:
                    return cls()

        # Load and parse config
        try:
            raw = _interpolate_env(path.read_text())
            data = yaml.safe_load(raw) or {}
        except Exception as exc:
            raise RuntimeError(f"Unable to read config YAML: {exc}") from exc

        try:
            return cls.model_validate(data)
        except ValidationError as err:
            raise RuntimeError(f"Invalid configuration:\n{err}") from err
