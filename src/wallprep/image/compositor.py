"""Canvas compositing: background fill, margin band, rounded clipping."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final, Optional

from PIL import Image, ImageChops, ImageDraw

from wallprep.common.enums import ResampleFilter, VerticalAlign
from wallprep.constants import ARC_STEPS, DEFAULT_BACKGROUND
from wallprep.image.dimension import Dimension
from wallprep.image.errors import AllocationError, CompositionError
from wallprep.image.geometry import Rect, rounded_rect_path
from wallprep.image.scaling import available_height

logger: Final = logging.getLogger(__name__)


@dataclass
class Canvas:
    """Full-display RGBA raster being composited."""

    image: Image.Image

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    @property
    def dimension(self) -> Dimension:
        return Dimension.of(self.image)

    @property
    def pixels(self) -> bytes:
        """Raw RGBA8 buffer, row-major from the top-left corner."""
        return self.image.tobytes()

    def getpixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        return self.image.getpixel((x, y))  # type: ignore[return-value]


# Pillow modes holding 16-bit samples; values span 0-65535.
HIGH_BIT_DEPTH_MODES: Final = frozenset({"I", "I;16", "I;16B", "I;16L", "I;16N"})


def to_rgba(image: Image.Image) -> Image.Image:
    """Convert an image to 8-bit RGBA, scaling 16-bit samples down first."""
    if image.mode in HIGH_BIT_DEPTH_MODES:
        image = image.convert("I").point(lambda v: v * (1 / 256)).convert("L")
    return image.convert("RGBA")


def _centered_offset(outer: int, inner: int) -> int:
    # Truncates toward zero so negative offsets crop evenly on both sides.
    return int((outer - inner) / 2)


class Compositor:
    """Places a scaled image on a display-sized canvas.

    The canvas is filled with the background colour first, then the clip is
    established, then the image is drawn. Anything outside the clip (the
    margin band, rounded corners, uncovered areas) keeps the background.
    """

    def __init__(
        self,
        background: tuple[int, int, int, int] = DEFAULT_BACKGROUND,
        vertical_align: VerticalAlign = VerticalAlign.BOTTOM,
        resample: ResampleFilter = ResampleFilter.LANCZOS,
        arc_steps: int = ARC_STEPS,
    ) -> None:
        """Initialize the compositor.

        Args:
            background: RGBA colour of the margin band and uncovered areas
            vertical_align: Where the scaled image is anchored vertically
            resample: Filter used when scaling the source image
            arc_steps: Straight pieces used to rasterize each rounded corner
        """
        self.background = background
        self.vertical_align = vertical_align
        self.resample = resample
        self.arc_steps = arc_steps

    def allocate(self, display: Dimension) -> Canvas:
        """Create a display-sized canvas filled with the background colour."""
        try:
            image = Image.new("RGBA", display.size, self.background)
        except (MemoryError, ValueError) as exc:
            raise AllocationError(f"Unable to allocate {display} canvas", exc) from exc
        return Canvas(image)

    def placement(self, scaled: Dimension, display: Dimension, margin_top: int) -> Rect:
        """Rectangle the scaled image occupies on the canvas.

        Horizontally centred. Vertically the image is bottom-aligned with the
        canvas, or top-aligned with the available area under VerticalAlign.TOP.
        """
        left = _centered_offset(display.width, scaled.width)
        if self.vertical_align is VerticalAlign.TOP:
            top = margin_top
        else:
            top = display.height - scaled.height
        return Rect(left, top, scaled.width, scaled.height)

    def clip_mask(self, clip: Rect, border_radius: Optional[int]) -> Image.Image:
        """Build an "L" mask covering ``clip``, rounded when a radius is set.

        The mask has the clip's own size, so nothing outside the clip
        rectangle can ever be drawn.
        """
        if not border_radius or border_radius <= 0:
            return Image.new("L", (clip.width, clip.height), 255)

        local = clip.translated(-clip.left, -clip.top)
        path = rounded_rect_path(local, border_radius)
        mask = Image.new("L", (clip.width, clip.height), 0)
        ImageDraw.Draw(mask).polygon(path.to_polygon(self.arc_steps), fill=255)
        logger.debug("Rounded clip %s with radius %.1f", clip, path.radius)
        return mask

    def composite(
        self,
        source: Image.Image,
        scaled: Dimension,
        display: Dimension,
        margin_top: int = 0,
        border_radius: Optional[int] = None,
    ) -> Canvas:
        """Composite the source image onto a new canvas.

        Args:
            source: Decoded source image
            scaled: Size the source is scaled to (see compute_scaled_dimension)
            display: Canvas size
            margin_top: Height of the background band reserved at the top
            border_radius: Corner radius of the clip; None or <= 0 for square

        Returns:
            Canvas exactly the size of the display

        Raises:
            AllocationError: If the canvas cannot be allocated
            CompositionError: If the image cannot be drawn onto the canvas
        """
        usable_height = available_height(display, margin_top)
        canvas = self.allocate(display)

        available = Rect(0, margin_top, display.width, usable_height)
        placement = self.placement(scaled, display, margin_top)
        clip = placement.intersection(available)
        if clip.is_empty:
            logger.warning("Image placement %s misses the available area %s", placement, available)
            return canvas

        try:
            mask = self.clip_mask(clip, border_radius)
            rgba = to_rgba(source)
            # Resample only the visible part; the full scaled image can be huge.
            left, top, right, bottom = clip.translated(-placement.left, -placement.top).box
            x_ratio = rgba.width / scaled.width
            y_ratio = rgba.height / scaled.height
            region = rgba.resize(
                (clip.width, clip.height),
                self.resample.pil_filter,
                box=(left * x_ratio, top * y_ratio, right * x_ratio, bottom * y_ratio),
            )
            region.putalpha(ImageChops.multiply(region.getchannel("A"), mask))
            canvas.image.alpha_composite(region, dest=(clip.left, clip.top))
        except (MemoryError, OSError, ValueError) as exc:
            raise CompositionError(f"Unable to draw image onto {display} canvas", exc) from exc

        return canvas
