"""Wallpaper preparation pipeline: decode, scale, composite, encode."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final

from wallprep.image.compositor import Compositor
from wallprep.image.decoder import load_image
from wallprep.image.dimension import Dimension
from wallprep.image.encoder import PngEncoder
from wallprep.image.errors import WallpaperImageError
from wallprep.image.protocols import CanvasEncoder
from wallprep.image.scaling import available_height, describe_scaling
from wallprep.settings.user import WallpaperSettings
from wallprep.utils.file import wallpaper_output_path

logger: Final = logging.getLogger(__name__)


def _safe_tag(name: str) -> str:
    return re.sub(r"[^\w.-]+", "_", name).strip("_") or "display"


@dataclass
class BatchResult:
    """Outcome of preparing one source image for several displays."""

    outputs: dict[str, Path] = field(default_factory=dict)
    failures: dict[str, Exception] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """True when every display was prepared."""
        return not self.failures


class WallpaperPipeline:
    """Turns a source image into a display-sized PNG wallpaper.

    Each call to prepare() is self-contained: it owns its canvas and writes
    to its own output path, so calls for different displays are independent.
    """

    def __init__(
        self,
        settings: WallpaperSettings | None = None,
        compositor: Compositor | None = None,
        encoder: CanvasEncoder | None = None,
    ) -> None:
        """Initialize the pipeline.

        Args:
            settings: Wallpaper settings (default: built-in defaults)
            compositor: Optional custom compositor
            encoder: Optional custom canvas encoder
        """
        self.settings = settings or WallpaperSettings()
        self.compositor = compositor or Compositor(
            background=self.settings.background,
            vertical_align=self.settings.alignment,
            resample=self.settings.resample_filter,
        )
        self.encoder: CanvasEncoder = encoder or PngEncoder(self.settings.compress_level)

    def prepare(
        self,
        source_path: Path,
        display: Dimension,
        margin_top: int | None = None,
        border_radius: int | None = None,
        output_path: Path | None = None,
    ) -> Path:
        """Prepare a wallpaper for one display.

        Args:
            source_path: Image to use as wallpaper
            display: Target display size in pixels
            margin_top: Reserved top band (default: from settings)
            border_radius: Corner radius (default: from settings)
            output_path: Destination PNG (default: timestamped file in output_dir)

        Returns:
            Path of the written PNG, or ``source_path`` itself when neither a
            margin nor a corner radius is requested

        Raises:
            ValueError: If margin_top or border_radius is out of range
            DecodeError: If the source image cannot be read
            AllocationError: If the canvas cannot be allocated
            CompositionError: If the image cannot be drawn
            EncodeError: If the PNG cannot be encoded
            ImageWriteError: If the output file cannot be written
        """
        source_path = Path(source_path)
        margin = self.settings.margin_top if margin_top is None else margin_top
        radius = self.settings.border_radius if border_radius is None else border_radius

        if radius is not None and radius < 0:
            raise ValueError(f"border_radius must be non-negative, got {radius}")
        available_height(display, margin)

        if margin == 0 and not radius:
            logger.info("No margin or border radius requested, using %s as is", source_path)
            return source_path

        image = load_image(source_path)
        image_dimension = Dimension.of(image)
        report = describe_scaling(image_dimension, display, margin)
        logger.info(
            "Fitting %s (%s) to %s display: %s",
            source_path.name,
            image_dimension,
            display,
            report.describe(),
        )

        canvas = self.compositor.composite(image, report.scaled, display, margin, radius)

        if output_path is None:
            output_path = wallpaper_output_path(self.settings.output_dir)
        output_path = Path(output_path)
        self.encoder.encode(canvas, output_path)

        logger.info("Wallpaper for %s display written to %s", display, output_path)
        return output_path

    def prepare_all(
        self,
        source_path: Path,
        displays: Mapping[str, Dimension],
        margin_top: int | None = None,
        border_radius: int | None = None,
        output_dir: Path | None = None,
    ) -> BatchResult:
        """Prepare a wallpaper for each display, continuing past failures.

        Args:
            source_path: Image to use as wallpaper
            displays: Display name to display size
            margin_top: Reserved top band (default: from settings)
            border_radius: Corner radius (default: from settings)
            output_dir: Directory for the PNGs (default: from settings)

        Returns:
            BatchResult with the written paths and per-display errors
        """
        result = BatchResult()
        directory = output_dir or self.settings.output_dir

        for name, display in displays.items():
            try:
                output_path = wallpaper_output_path(directory, suffix=_safe_tag(name))
                result.outputs[name] = self.prepare(
                    source_path,
                    display,
                    margin_top=margin_top,
                    border_radius=border_radius,
                    output_path=output_path,
                )
            except (WallpaperImageError, OSError, ValueError) as exc:
                logger.error("Failed to prepare wallpaper for %s (%s): %s", name, display, exc)
                result.failures[name] = exc

        return result


def prepare(
    source_path: Path,
    display: Dimension,
    margin_top: int | None = None,
    border_radius: int | None = None,
    output_path: Path | None = None,
    settings: WallpaperSettings | None = None,
) -> Path:
    """Prepare a wallpaper for one display (see WallpaperPipeline.prepare)."""
    return WallpaperPipeline(settings).prepare(
        source_path,
        display,
        margin_top=margin_top,
        border_radius=border_radius,
        output_path=output_path,
    )
