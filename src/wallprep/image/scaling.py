"""Scale computation for filling a display while preserving aspect ratio."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final

from wallprep.common.enums import CropAxis, Orientation, ScaleDirection
from wallprep.image.dimension import Dimension

logger: Final = logging.getLogger(__name__)


def available_height(display: Dimension, margin_top: int) -> int:
    """Height of the display area below the reserved top margin.

    Raises:
        ValueError: If margin_top is negative or leaves no room for the image
    """
    if not 0 <= margin_top < display.height:
        raise ValueError(
            f"margin_top must be in [0, {display.height}), got {margin_top}"
        )
    return display.height - margin_top


def _fills_height(image: Dimension, display: Dimension, usable_height: int) -> bool:
    # Ties scale to height; both branches agree there.
    return image.aspect_ratio >= display.width / usable_height


def compute_scaled_dimension(
    image: Dimension, display: Dimension, margin_top: int = 0
) -> Dimension:
    """Calculate the size the image must be scaled to so it fills the display.

    The image exactly fills the available area (display minus top margin) in
    one axis and overflows in the other. The overflow is cropped later by the
    compositor.

    Args:
        image: Source image dimensions
        display: Target display dimensions
        margin_top: Pixels reserved at the top of the display

    Returns:
        Scaled dimensions, truncated to whole pixels and never below 1
    """
    usable_height = available_height(display, margin_top)

    if _fills_height(image, display, usable_height):
        width = int(image.width * (usable_height / image.height))
        height = usable_height
    else:
        width = display.width
        height = int(image.height * (display.width / image.width))

    scaled = Dimension(max(width, 1), max(height, 1))
    logger.debug("Scaling %s to %s for %s display (margin %d)", image, scaled, display, margin_top)
    return scaled


@dataclass(frozen=True)
class ScalingReport:
    """Human-oriented summary of how an image will be fitted to a display."""

    orientation: Orientation
    scale_factor: float
    direction: ScaleDirection
    scaled: Dimension
    crop_axis: CropAxis
    crop_pixels: int

    def describe(self) -> str:
        """Return a one-line description suitable for logs."""
        return (
            f"{self.orientation.value} image scaled {self.direction.value} "
            f"by {self.scale_factor:.2f}x to {self.scaled}, "
            f"cropping {self.crop_pixels}px {self.crop_axis.value}"
        )


def describe_scaling(
    image: Dimension, display: Dimension, margin_top: int = 0
) -> ScalingReport:
    """Explain the scaling that compute_scaled_dimension will apply.

    Args:
        image: Source image dimensions
        display: Target display dimensions
        margin_top: Pixels reserved at the top of the display

    Returns:
        ScalingReport with orientation, factor, direction and crop amount
    """
    usable_height = available_height(display, margin_top)
    scaled = compute_scaled_dimension(image, display, margin_top)

    if image.aspect_ratio > 1.0:
        orientation = Orientation.LANDSCAPE
    elif image.aspect_ratio < 1.0:
        orientation = Orientation.PORTRAIT
    else:
        orientation = Orientation.SQUARE

    if _fills_height(image, display, usable_height):
        factor = usable_height / image.height
        crop_axis = CropAxis.HORIZONTAL
        crop_pixels = max(0, scaled.width - display.width)
    else:
        factor = display.width / image.width
        crop_axis = CropAxis.VERTICAL
        crop_pixels = max(0, scaled.height - usable_height)

    if factor > 1.0:
        direction = ScaleDirection.UP
    elif factor < 1.0:
        direction = ScaleDirection.DOWN
    else:
        direction = ScaleDirection.NONE

    return ScalingReport(
        orientation=orientation,
        scale_factor=factor,
        direction=direction,
        scaled=scaled,
        crop_axis=crop_axis,
        crop_pixels=crop_pixels,
    )
