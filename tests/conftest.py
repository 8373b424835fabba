import pytest
from pathlib import Path
from PIL import Image

RED = (255, 0, 0, 255)


def make_image(path: Path, size: tuple[int, int], color=RED, fmt: str = "PNG") -> Path:
    mode = "RGB" if fmt == "JPEG" else "RGBA"
    fill = color[:3] if mode == "RGB" else color
    Image.new(mode, size, fill).save(path, format=fmt)
    return path


@pytest.fixture
def wide_png(tmp_path: Path) -> Path:
    """3000x1500 (2:1) solid red PNG."""
    return make_image(tmp_path / "wide.png", (3000, 1500))


@pytest.fixture
def small_png(tmp_path: Path) -> Path:
    """800x500 (1.6:1) solid red PNG."""
    return make_image(tmp_path / "small.png", (800, 500))


@pytest.fixture
def red_image() -> Image.Image:
    return Image.new("RGBA", (800, 500), RED)


@pytest.fixture
def image_factory(tmp_path: Path):
    """Write a solid-colour image under tmp_path and return its path."""

    def _factory(name: str, size: tuple[int, int], color=RED, fmt: str = "PNG") -> Path:
        return make_image(tmp_path / name, size, color, fmt)

    return _factory
