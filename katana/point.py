"""Integer points in 2D space."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Point"]


@dataclass
class Point:
    """A mutable point with integer coordinates."""

    x: int = 0
    y: int = 0

    def set(self, x: int | Point, y: int | None = None) -> None:
        """Set both coordinates, either from two integers or from another point."""
        if isinstance(x, Point):
            if y is not None:
                raise TypeError("set() takes a point or two coordinates, not both")
            self.x, self.y = x.x, x.y
            return
        if y is None:
            raise TypeError("set() needs a y coordinate")
        self.x, self.y = x, y

    def is_origin(self) -> bool:
        """Tell whether both coordinates are zero."""
        return self.x == 0 and self.y == 0

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __iadd__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        return self

    def __iter__(self):
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"{{ {self.x}, {self.y} }}"