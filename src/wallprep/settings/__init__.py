"""Settings management.

This package provides:
- WallpaperSettings: User settings loaded from a YAML config file
"""

from wallprep.settings.user import WallpaperSettings

__all__ = ["WallpaperSettings"]
