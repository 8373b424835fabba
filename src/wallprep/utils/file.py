"""File utility functions."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Final

from wallprep.constants import DEFAULT_OUTPUT_DIR, OUTPUT_NAME_TEMPLATE

logger: Final = logging.getLogger(__name__)


def ensure_directory_exists(directory: Path) -> None:
    """Create directory if it doesn't exist.

    Args:
        directory: Path to create
    """
    if not directory.exists():
        directory.mkdir(parents=True, exist_ok=True)
        logger.debug("Created directory: %s", directory)


def wallpaper_output_path(directory: Path | None = None, suffix: str = "") -> Path:
    """Return a fresh, timestamped PNG path for a generated wallpaper.

    Args:
        directory: Output directory (default: ~/.local/share/wallpaper)
        suffix: Extra tag inserted before the extension, e.g. a display name

    Returns:
        Path like ``<directory>/wallpaper-1760000000.123456.png``
    """
    directory = directory or DEFAULT_OUTPUT_DIR
    ensure_directory_exists(directory)
    name = OUTPUT_NAME_TEMPLATE.format(timestamp=f"{time.time():.6f}")
    if suffix:
        name = name.replace(".png", f"-{suffix}.png")
    return directory / name
