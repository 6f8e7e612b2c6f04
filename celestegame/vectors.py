"""Small two-component vector types."""

from __future__ import annotations

from dataclasses import dataclass


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


@dataclass(frozen=True)
class Vec2:
    """A float 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __truediv__(self, scalar: float) -> Vec2:
        return Vec2(self.x / scalar, self.y / scalar)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __bool__(self) -> bool:
        return self.x != 0.0 and self.y != 0.0

    def __iter__(self):
        yield self.x
        yield self.y


@dataclass(frozen=True)
class IVec2:
    """An integer 2D vector."""

    x: int = 0
    y: int = 0

    def __sub__(self, other: IVec2 | int) -> IVec2:
        if isinstance(other, IVec2):
            return IVec2(self.x - other.x, self.y - other.y)
        if isinstance(other, int):
            return IVec2(self.x - other, self.y - other)
        return NotImplemented

    def __add__(self, other: IVec2 | int) -> IVec2:
        if isinstance(other, IVec2):
            return IVec2(self.x + other.x, self.y + other.y)
        if isinstance(other, int):
            return IVec2(self.x + other, self.y + other)
        return NotImplemented

    def __truediv__(self, scalar: int) -> IVec2:
        """Divide both components, truncating toward zero."""
        return IVec2(_trunc_div(self.x, scalar), _trunc_div(self.y, scalar))

    def __iter__(self):
        yield self.x
        yield self.y