"""PNG encoding of composited canvases."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Final

from wallprep.image.compositor import Canvas
from wallprep.image.errors import EncodeError, ImageWriteError

logger: Final = logging.getLogger(__name__)


class PngEncoder:
    """Writes canvases as 8-bit RGBA, non-interlaced PNG files.

    The PNG is written to a temporary file next to the destination and
    renamed into place, so a failed write never leaves a partial file at
    the output path.
    """

    def __init__(self, compress_level: int = 6) -> None:
        """Initialize the encoder.

        Args:
            compress_level: zlib compression level, 0 (none) to 9 (smallest)
        """
        if not 0 <= compress_level <= 9:
            raise ValueError(f"compress_level must be 0-9, got {compress_level}")
        self.compress_level = compress_level

    def encode(self, canvas: Canvas, output_path: Path) -> None:
        """Encode the canvas to ``output_path``, replacing any existing file.

        Args:
            canvas: Composited canvas
            output_path: Destination PNG path

        Raises:
            EncodeError: If the pixels cannot be converted to RGBA or encoded
            ImageWriteError: If the destination cannot be opened or written
        """
        try:
            image = canvas.image if canvas.image.mode == "RGBA" else canvas.image.convert("RGBA")
        except ValueError as exc:
            raise EncodeError(f"Cannot convert {canvas.image.mode} canvas to RGBA", exc) from exc

        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{output_path.name}.", suffix=".tmp", dir=output_path.parent
            )
        except OSError as exc:
            raise ImageWriteError(f"Cannot write to {output_path.parent}", exc) from exc

        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "wb") as fh:
                image.save(fh, format="PNG", compress_level=self.compress_level)
            os.replace(tmp_path, output_path)
        except (KeyError, ValueError) as exc:
            tmp_path.unlink(missing_ok=True)
            raise EncodeError(f"Failed to encode PNG for {output_path}", exc) from exc
        except OSError as exc:
            tmp_path.unlink(missing_ok=True)
            raise ImageWriteError(f"Failed to save image to {output_path}", exc) from exc

        logger.debug("Wrote %dx%d PNG to %s", canvas.width, canvas.height, output_path)


def encode_png(canvas: Canvas, output_path: Path, compress_level: int = 6) -> None:
    """Write ``canvas`` to ``output_path`` as PNG (see PngEncoder.encode)."""
    PngEncoder(compress_level).encode(canvas, Path(output_path))
