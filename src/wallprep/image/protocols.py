# src/wallprep/image/protocols.py
from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from wallprep.image.compositor import Canvas
from wallprep.image.errors import EncodeError, ImageWriteError


@runtime_checkable
class CanvasEncoder(Protocol):
    """Protocol defining the interface for canvas encoders.

    The pipeline only needs something that can turn a composited canvas
    into a file, which lets tests swap in recording or failing encoders.
    """

    def encode(self, canvas: Canvas, output_path: Path) -> None:
        """Write the canvas to a file.

        Args:
            canvas: Composited canvas
            output_path: Destination path
        """
        ...


class MockEncoder:
    """Mock implementation of CanvasEncoder for testing."""

    def __init__(self, create_file: bool = False):
        self.encode_calls: list[dict[str, object]] = []
        self.create_file = create_file

    def encode(self, canvas: Canvas, output_path: Path) -> None:
        """Record the call, optionally touching the output file."""
        self.encode_calls.append(
            {"size": (canvas.width, canvas.height), "output_path": output_path}
        )
        if self.create_file:
            output_path.touch()

    def reset_call_history(self) -> None:
        """Reset the call history for testing."""
        self.encode_calls = []


class ErrorSimulatingEncoder(MockEncoder):
    """Encoder mock that fails for selected output files."""

    def __init__(self, fail_on_names: list[str] | None = None, write_error: bool = True):
        """Initialize with the output names that should fail.

        Args:
            fail_on_names: Fragments; output file names containing one raise
            write_error: Raise ImageWriteError if True, EncodeError otherwise
        """
        super().__init__()
        self.fail_on_names = fail_on_names or []
        self.write_error = write_error

    def encode(self, canvas: Canvas, output_path: Path) -> None:
        """Either record the call or raise based on configuration."""
        if any(name in output_path.name for name in self.fail_on_names):
            if self.write_error:
                raise ImageWriteError(f"Simulated write failure for {output_path}")
            raise EncodeError(f"Simulated encode failure for {output_path}")
        super().encode(canvas, output_path)


def create_mock_encoder(create_file: bool = False) -> MockEncoder:
    """Create and return a mock encoder for testing."""
    return MockEncoder(create_file)


def create_error_simulating_encoder(
    fail_on_names: list[str] | None = None,
    write_error: bool = True,
) -> ErrorSimulatingEncoder:
    """Create an encoder that will fail for the given output names."""
    return ErrorSimulatingEncoder(fail_on_names, write_error)
