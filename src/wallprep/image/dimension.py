"""Pixel extent value type."""

from __future__ import annotations

from dataclasses import dataclass

from PIL import Image


@dataclass(frozen=True)
class Dimension:
    """Width/height pair in pixels. Both sides are strictly positive."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Dimension must be positive, got {self.width}x{self.height}")

    @property
    def aspect_ratio(self) -> float:
        """Width divided by height."""
        return self.width / self.height

    @property
    def size(self) -> tuple[int, int]:
        """The (width, height) tuple Pillow expects."""
        return (self.width, self.height)

    @classmethod
    def of(cls, image: Image.Image) -> Dimension:
        """Create a Dimension from a decoded image."""
        return cls(image.width, image.height)

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"
