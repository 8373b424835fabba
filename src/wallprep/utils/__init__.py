"""Common utility functions and helpers for the wallprep package."""

from wallprep.utils.file import ensure_directory_exists, wallpaper_output_path

__all__ = ["ensure_directory_exists", "wallpaper_output_path"]
