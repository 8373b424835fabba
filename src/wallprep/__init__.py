"""Prepare images as per-display desktop wallpaper."""

from wallprep.image.dimension import Dimension
from wallprep.pipeline import BatchResult, WallpaperPipeline, prepare

__all__ = ["BatchResult", "Dimension", "WallpaperPipeline", "prepare"]
