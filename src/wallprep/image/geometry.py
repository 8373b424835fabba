"""Clip-region geometry for the compositor.

Coordinates use a top-left origin with y growing downwards, matching
Pillow. Rectangles are half-open: a rect covers the pixels from ``left`` up
to but not including ``right``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

from wallprep.constants import ARC_STEPS

Point = tuple[float, float]


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in canvas pixels."""

    left: int
    top: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.left + self.width

    @property
    def bottom(self) -> int:
        return self.top + self.height

    @property
    def box(self) -> tuple[int, int, int, int]:
        """The (left, top, right, bottom) box Pillow uses for crops and pastes."""
        return (self.left, self.top, self.right, self.bottom)

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def intersection(self, other: Rect) -> Rect:
        """Return the overlap of two rectangles (empty if they do not meet)."""
        left = max(self.left, other.left)
        top = max(self.top, other.top)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        return Rect(left, top, max(0, right - left), max(0, bottom - top))

    def translated(self, dx: int, dy: int) -> Rect:
        return Rect(self.left + dx, self.top + dy, self.width, self.height)


@dataclass(frozen=True)
class LineSegment:
    """Straight edge of a path."""

    start: Point
    end: Point

    def points(self, steps: int = ARC_STEPS) -> list[Point]:
        return [self.start, self.end]


@dataclass(frozen=True)
class ArcSegment:
    """Circular arc swept clockwise (on screen) from start_angle to end_angle.

    Angles are in degrees, measured from the positive x axis towards the
    positive (downward) y axis.
    """

    center: Point
    radius: float
    start_angle: float
    end_angle: float

    def point_at(self, angle: float) -> Point:
        theta = math.radians(angle)
        cx, cy = self.center
        return (cx + self.radius * math.cos(theta), cy + self.radius * math.sin(theta))

    @property
    def start(self) -> Point:
        return self.point_at(self.start_angle)

    @property
    def end(self) -> Point:
        return self.point_at(self.end_angle)

    def points(self, steps: int = ARC_STEPS) -> list[Point]:
        """Approximate the arc with ``steps`` straight pieces."""
        sweep = self.end_angle - self.start_angle
        return [self.point_at(self.start_angle + sweep * i / steps) for i in range(steps + 1)]


Segment = Union[LineSegment, ArcSegment]


@dataclass(frozen=True)
class RoundedRectPath:
    """Closed contour of a rectangle with quarter-circle corners.

    ``segments`` alternates edges and corners, clockwise, beginning with the
    top edge just right of the top-left corner.
    """

    rect: Rect
    radius: float
    segments: tuple[Segment, ...]

    @property
    def is_closed(self) -> bool:
        return math.dist(self.segments[-1].end, self.segments[0].start) < 1e-9

    def to_polygon(self, steps: int = ARC_STEPS) -> list[Point]:
        """Flatten the contour into polygon vertices for rasterization.

        Args:
            steps: Number of straight pieces per corner arc

        Returns:
            Vertices in traversal order, without consecutive duplicates
        """
        polygon: list[Point] = []
        for segment in self.segments:
            for point in segment.points(steps):
                if polygon and math.dist(polygon[-1], point) < 1e-9:
                    continue
                polygon.append(point)
        if len(polygon) > 1 and math.dist(polygon[0], polygon[-1]) < 1e-9:
            polygon.pop()
        return polygon


def clamp_radius(rect: Rect, radius: float) -> float:
    """Limit a corner radius to half the rectangle's shorter side."""
    return max(0.0, min(float(radius), min(rect.width, rect.height) / 2))


def rounded_rect_path(rect: Rect, radius: float) -> RoundedRectPath:
    """Build the rounded-rectangle contour for a clip region.

    Args:
        rect: Rectangle to round
        radius: Requested corner radius; clamped to half the shorter side

    Returns:
        RoundedRectPath with eight segments (four edges, four corner arcs)
    """
    r = clamp_radius(rect, radius)
    left, top, right, bottom = rect.left, rect.top, rect.right, rect.bottom

    segments: tuple[Segment, ...] = (
        LineSegment((left + r, top), (right - r, top)),
        ArcSegment((right - r, top + r), r, -90.0, 0.0),
        LineSegment((right, top + r), (right, bottom - r)),
        ArcSegment((right - r, bottom - r), r, 0.0, 90.0),
        LineSegment((right - r, bottom), (left + r, bottom)),
        ArcSegment((left + r, bottom - r), r, 90.0, 180.0),
        LineSegment((left, bottom - r), (left, top + r)),
        ArcSegment((left + r, top + r), r, 180.0, 270.0),
    )
    return RoundedRectPath(rect=rect, radius=r, segments=segments)
