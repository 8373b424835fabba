"""Image package - scaling, compositing and encoding of wallpaper images."""

from wallprep.image.compositor import Canvas, Compositor
from wallprep.image.decoder import load_image
from wallprep.image.dimension import Dimension
from wallprep.image.encoder import PngEncoder, encode_png
from wallprep.image.errors import (
    AllocationError,
    CompositionError,
    DecodeError,
    EncodeError,
    ImageWriteError,
    WallpaperImageError,
)
from wallprep.image.geometry import Rect, RoundedRectPath, rounded_rect_path
from wallprep.image.scaling import ScalingReport, compute_scaled_dimension, describe_scaling

__all__ = [
    "AllocationError",
    "Canvas",
    "Compositor",
    "CompositionError",
    "DecodeError",
    "Dimension",
    "EncodeError",
    "ImageWriteError",
    "PngEncoder",
    "Rect",
    "RoundedRectPath",
    "ScalingReport",
    "WallpaperImageError",
    "compute_scaled_dimension",
    "describe_scaling",
    "encode_png",
    "load_image",
    "rounded_rect_path",
]
