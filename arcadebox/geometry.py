"""Plane vectors, wall segments and holes."""

from __future__ import annotations

import math
from dataclasses import dataclass

from arcadebox.engine import Canvas


@dataclass(frozen=True)
class Vector2:
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector2:
        return Vector2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def mag(self) -> float:
        return math.hypot(self.x, self.y)

    def normalize(self) -> Vector2:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.mag()
        if length == 0:
            return self
        return self / length

    def dot(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector2) -> float:
        return self.x * other.y - self.y * other.x


class Line:
    """A wall segment from sp to ep with a unit normal."""

    def __init__(self, sp: Vector2, ep: Vector2, stroke_weight: float = 2.0) -> None:
        self.sp = sp
        self.ep = ep
        self.v = ep - sp
        self.n = Vector2(-self.v.y, self.v.x).normalize()
        self.stroke_weight = stroke_weight

    def closest(self, p: Vector2) -> Vector2:
        """Point of the segment nearest to p."""
        c1 = self.n.cross(p - self.sp)
        c2 = self.n.cross(p - self.ep)
        if c1 < 0 and c2 > 0:
            return self.sp + self.v.normalize() * -c1
        if c1 > 0:
            return self.sp
        return self.ep

    def draw(self, canvas: Canvas) -> None:
        canvas.draw("strokeWeight", self.stroke_weight)
        canvas.draw("stroke", 255, 0, 0)
        canvas.draw("line", self.sp.x, self.sp.y, self.ep.x, self.ep.y)


@dataclass(frozen=True)
class Hole:
    pos: Vector2

    def draw(self, canvas: Canvas) -> None:
        canvas.draw("stroke", 255, 0, 0)
        canvas.draw("strokeWeight", 5)
        canvas.draw("point", self.pos.x, self.pos.y)