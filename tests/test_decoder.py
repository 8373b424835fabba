from pathlib import Path

import pytest

from wallprep.image.decoder import load_image
from wallprep.image.errors import DecodeError


def test_loads_png(small_png: Path) -> None:
    image = load_image(small_png)
    assert image.size == (800, 500)


def test_loads_jpeg(image_factory) -> None:
    path = image_factory("photo.jpg", (320, 200), fmt="JPEG")
    image = load_image(path)
    assert image.size == (320, 200)
    assert image.mode == "RGB"


def test_missing_file_raises_decode_error(tmp_path: Path) -> None:
    with pytest.raises(DecodeError) as excinfo:
        load_image(tmp_path / "nope.png")
    assert isinstance(excinfo.value.original_error, FileNotFoundError)


def test_non_image_raises_decode_error(tmp_path: Path) -> None:
    path = tmp_path / "notes.png"
    path.write_text("definitely not a png")
    with pytest.raises(DecodeError):
        load_image(path)
