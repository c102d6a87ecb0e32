"""Axis-aligned rectangle primitives used by the wall model.

All rectangles live in wall-pixel units at scale 1 unless a method says otherwise.
`right`/`bottom` are exclusive (x + width, y + height), so two rectangles are flush
when one's `right` equals the other's `left`.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

# Smallest side length (in display pixels) a scaled rectangle may have.
# Below this, hit-testing and outline drawing stop being usable.
MIN_SCALED_PX = 2


def round_int(x: float) -> int:
    """
    Round a float to the nearest int using Python's round() semantics.

    Used when converting display coordinates back into wall pixels, to avoid
    systematic bias from truncation.
    """
    return int(round(x))


def clamp_int(v: int, lo: int, hi: int) -> int:
    """Clamp an integer value to an inclusive range [lo, hi]."""
    return max(lo, min(hi, v))


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Geometry:
    """
    Rectangle expressed as (width, height, x_offset, y_offset).

    Immutable: every "move" helper returns a new Geometry. Width and height are
    never negative; offsets may be, transiently, while the snapping pass is still
    adjusting a candidate position.
    """
    width: int
    height: int
    x_offset: int = 0
    y_offset: int = 0

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Geometry size must be non-negative, got {self.width}x{self.height}")

    @property
    def left(self) -> int:
        return self.x_offset

    @property
    def top(self) -> int:
        return self.y_offset

    @property
    def right(self) -> int:
        return self.x_offset + self.width

    @property
    def bottom(self) -> int:
        return self.y_offset + self.height

    @property
    def top_left(self) -> Point:
        return Point(self.left, self.top)

    @property
    def bottom_right(self) -> Point:
        return Point(self.right, self.bottom)

    @classmethod
    def from_corners(cls, top_left: Point, bottom_right: Point) -> Geometry:
        return cls(
            width=max(0, bottom_right.x - top_left.x),
            height=max(0, bottom_right.y - top_left.y),
            x_offset=top_left.x,
            y_offset=top_left.y,
        )

    def scaled(self, scale: float) -> Geometry:
        """
        Project this rectangle into display space.

        Offsets and sizes are multiplied by `scale` and truncated like the widget
        coordinates they are compared against. Each side is kept at least
        MIN_SCALED_PX long so thin border bands stay clickable and visible.
        """
        return Geometry(
            width=max(MIN_SCALED_PX, int(self.width * scale)),
            height=max(MIN_SCALED_PX, int(self.height * scale)),
            x_offset=int(self.x_offset * scale),
            y_offset=int(self.y_offset * scale),
        )

    def contains(self, p: Point) -> bool:
        return self.left <= p.x < self.right and self.top <= p.y < self.bottom

    def intersects(self, other: Geometry) -> bool:
        return (
            self.left < other.right
            and other.left < self.right
            and self.top < other.bottom
            and other.top < self.bottom
        )

    def intersected(self, other: Geometry) -> Geometry:
        """Overlap of both rectangles; zero-sized when they do not intersect."""
        if not self.intersects(other):
            return Geometry(0, 0, max(self.left, other.left), max(self.top, other.top))
        return Geometry.from_corners(
            Point(max(self.left, other.left), max(self.top, other.top)),
            Point(min(self.right, other.right), min(self.bottom, other.bottom)),
        )

    def adjusted(self, dl: int, dt: int, dr: int, db: int) -> Geometry:
        """Move each side independently (QRect.adjusted semantics, exclusive edges)."""
        return Geometry.from_corners(
            Point(self.left + dl, self.top + dt),
            Point(self.right + dr, self.bottom + db),
        )

    def translated(self, delta: Point) -> Geometry:
        return replace(self, x_offset=self.x_offset + delta.x, y_offset=self.y_offset + delta.y)

    def moved_to(self, top_left: Point) -> Geometry:
        return replace(self, x_offset=top_left.x, y_offset=top_left.y)

    # Size-preserving moves that pin one side to a coordinate.
    def with_left(self, x: int) -> Geometry:
        return replace(self, x_offset=x)

    def with_top(self, y: int) -> Geometry:
        return replace(self, y_offset=y)

    def with_right(self, x: int) -> Geometry:
        return replace(self, x_offset=x - self.width)

    def with_bottom(self, y: int) -> Geometry:
        return replace(self, y_offset=y - self.height)

    def as_dict(self) -> dict[str, int]:
        return {
            "width": int(self.width),
            "height": int(self.height),
            "x": int(self.x_offset),
            "y": int(self.y_offset),
        }
