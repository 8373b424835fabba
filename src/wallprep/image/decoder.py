"""Source image decoding."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final

from PIL import Image, UnidentifiedImageError

from wallprep.image.errors import DecodeError

logger: Final = logging.getLogger(__name__)


def load_image(source_path: Path) -> Image.Image:
    """Decode the first frame of an image file.

    Args:
        source_path: Path to a PNG, JPEG or any other format Pillow reads

    Returns:
        Fully loaded image, detached from the file handle

    Raises:
        DecodeError: If the file is missing, unreadable or not an image
    """
    try:
        with Image.open(source_path) as image:
            image.load()
            logger.debug("Decoded %s (%s, %dx%d)", source_path, image.format, *image.size)
            return image.copy()
    except (OSError, UnidentifiedImageError, Image.DecompressionBombError) as exc:
        raise DecodeError(f"Failed to load image {source_path}", exc) from exc
