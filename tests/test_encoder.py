from pathlib import Path
from unittest.mock import Mock

import pytest
from PIL import Image

from wallprep.image.compositor import Canvas
from wallprep.image.encoder import PngEncoder, encode_png
from wallprep.image.errors import EncodeError, ImageWriteError


@pytest.fixture
def canvas() -> Canvas:
    image = Image.new("RGBA", (64, 48), (0, 0, 0, 255))
    image.paste((255, 0, 0, 255), (8, 8, 56, 40))
    return Canvas(image)


def test_writes_rgba_png(tmp_path: Path, canvas: Canvas) -> None:
    output = tmp_path / "out.png"
    PngEncoder().encode(canvas, output)

    with Image.open(output) as written:
        assert written.format == "PNG"
        assert written.mode == "RGBA"
        assert written.size == (64, 48)
        assert written.getpixel((10, 10)) == (255, 0, 0, 255)
        assert not written.info.get("interlace")


def test_same_canvas_encodes_identically(tmp_path: Path, canvas: Canvas) -> None:
    first, second = tmp_path / "a.png", tmp_path / "b.png"
    encoder = PngEncoder(compress_level=9)
    encoder.encode(canvas, first)
    encoder.encode(canvas, second)
    assert first.read_bytes() == second.read_bytes()


def test_overwrites_existing_file(tmp_path: Path, canvas: Canvas) -> None:
    output = tmp_path / "out.png"
    output.write_bytes(b"stale")
    encode_png(canvas, output)
    assert output.read_bytes().startswith(b"\x89PNG")
    assert [p.name for p in tmp_path.iterdir()] == ["out.png"]


def test_rgb_canvas_is_converted(tmp_path: Path) -> None:
    output = tmp_path / "rgb.png"
    encode_png(Canvas(Image.new("RGB", (4, 4), (1, 2, 3))), output)
    with Image.open(output) as written:
        assert written.mode == "RGBA"
        assert written.getpixel((0, 0)) == (1, 2, 3, 255)


def test_missing_directory_raises_write_error(tmp_path: Path, canvas: Canvas) -> None:
    output = tmp_path / "missing" / "out.png"
    with pytest.raises(ImageWriteError) as excinfo:
        PngEncoder().encode(canvas, output)
    assert isinstance(excinfo.value, OSError)
    assert not output.exists()


def test_encode_failure_leaves_no_partial_file(tmp_path: Path) -> None:
    output = tmp_path / "out.png"
    output.write_bytes(b"previous wallpaper")
    broken = Mock(mode="RGBA", width=4, height=4)
    broken.save.side_effect = ValueError("encoder error")

    with pytest.raises(EncodeError):
        PngEncoder().encode(Canvas(broken), output)

    assert output.read_bytes() == b"previous wallpaper"
    assert [p.name for p in tmp_path.iterdir()] == ["out.png"]


def test_write_failure_removes_temporary_file(tmp_path: Path) -> None:
    output = tmp_path / "out.png"
    broken = Mock(mode="RGBA", width=4, height=4)
    broken.save.side_effect = OSError(28, "No space left on device")

    with pytest.raises(ImageWriteError):
        PngEncoder().encode(Canvas(broken), output)

    assert list(tmp_path.iterdir()) == []


@pytest.mark.parametrize("level", [-1, 10])
def test_compress_level_validated(level: int) -> None:
    with pytest.raises(ValueError):
        PngEncoder(compress_level=level)
