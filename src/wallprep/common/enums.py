from enum import Enum

from PIL import Image


class Orientation(Enum):
    """Shape of the source image relative to a square."""

    LANDSCAPE = "landscape"
    PORTRAIT = "portrait"
    SQUARE = "square"


class ScaleDirection(Enum):
    """Whether the source is enlarged or shrunk to fill the display."""

    UP = "up"
    DOWN = "down"
    NONE = "none"


class CropAxis(Enum):
    """Axis along which the scaled image overflows and gets cropped."""

    HORIZONTAL = "horizontally"
    VERTICAL = "vertically"


class VerticalAlign(Enum):
    """Vertical anchoring of the scaled image inside the canvas.

    BOTTOM keeps the image's bottom edge on the canvas' bottom edge, so the
    top of the image is what the margin cuts away. TOP anchors the image to
    the top of the available area instead.
    """

    BOTTOM = "bottom"
    TOP = "top"


class ResampleFilter(Enum):
    """Resampling filters offered for the scale step."""

    LANCZOS = "lanczos"
    BICUBIC = "bicubic"
    BILINEAR = "bilinear"
    NEAREST = "nearest"

    @property
    def pil_filter(self) -> Image.Resampling:
        """Matching Pillow resampling constant."""
        return Image.Resampling[self.name]
