from pathlib import Path

import pytest
from PIL import Image

from wallprep.common.enums import ResampleFilter
from wallprep.image.compositor import Canvas
from wallprep.image.encoder import PngEncoder
from wallprep.image.errors import EncodeError, ImageWriteError
from wallprep.image.protocols import (
    CanvasEncoder,
    MockEncoder,
    create_error_simulating_encoder,
    create_mock_encoder,
)


@pytest.fixture
def canvas() -> Canvas:
    return Canvas(Image.new("RGBA", (8, 6)))


def test_encoders_satisfy_protocol() -> None:
    assert isinstance(PngEncoder(), CanvasEncoder)
    assert isinstance(create_mock_encoder(), CanvasEncoder)
    assert isinstance(create_error_simulating_encoder(), CanvasEncoder)


def test_mock_encoder_records_and_resets(tmp_path: Path, canvas: Canvas) -> None:
    encoder = MockEncoder(create_file=True)
    encoder.encode(canvas, tmp_path / "x.png")
    assert encoder.encode_calls == [{"size": (8, 6), "output_path": tmp_path / "x.png"}]
    assert (tmp_path / "x.png").exists()
    encoder.reset_call_history()
    assert encoder.encode_calls == []


def test_error_simulating_encoder(tmp_path: Path, canvas: Canvas) -> None:
    failing_write = create_error_simulating_encoder(["left"])
    with pytest.raises(ImageWriteError):
        failing_write.encode(canvas, tmp_path / "wallpaper-1-left.png")
    failing_write.encode(canvas, tmp_path / "wallpaper-1-right.png")
    assert len(failing_write.encode_calls) == 1

    failing_encode = create_error_simulating_encoder(["left"], write_error=False)
    with pytest.raises(EncodeError):
        failing_encode.encode(canvas, tmp_path / "wallpaper-2-left.png")


@pytest.mark.parametrize(
    "name, expected",
    [
        ("lanczos", Image.Resampling.LANCZOS),
        ("bicubic", Image.Resampling.BICUBIC),
        ("bilinear", Image.Resampling.BILINEAR),
        ("nearest", Image.Resampling.NEAREST),
    ],
)
def test_resample_filter_maps_to_pillow(name: str, expected: Image.Resampling) -> None:
    assert ResampleFilter(name).pil_filter is expected
