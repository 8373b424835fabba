"""Exception classes for wallpaper image processing.

Every failure in the decode, composite and encode steps is reported as a
subclass of WallpaperImageError. Errors are scoped to a single request:
when several displays are prepared in one run, the caller catches them per
display and carries on with the rest.
"""

from __future__ import annotations

from typing import Optional


class WallpaperImageError(Exception):
    """Base error for a failed wallpaper preparation step."""

    def __init__(self, message: str, original_error: Optional[Exception] = None) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            original_error: The exception that caused this one, if any
        """
        super().__init__(message)
        self.message: str = message
        self.original_error: Optional[Exception] = original_error

    def __str__(self) -> str:
        if self.original_error is not None:
            return f"{self.message}: {self.original_error}"
        return self.message


class DecodeError(WallpaperImageError):
    """Raised when the source image is unreadable or in an unsupported format."""

    pass


class AllocationError(WallpaperImageError):
    """Raised when the canvas buffer cannot be allocated."""

    pass


class CompositionError(WallpaperImageError):
    """Raised when the clipped image cannot be drawn onto the canvas."""

    pass


class EncodeError(WallpaperImageError):
    """Raised when the canvas cannot be converted or encoded as PNG."""

    pass


class ImageWriteError(WallpaperImageError, OSError):
    """Raised when the PNG destination cannot be opened or written.

    Also an OSError, so callers handling ordinary I/O failures (permissions,
    missing directories, full disks) catch it too.
    """

    pass
