"""A rolling coin: rigid disc with impulses, wall contacts with friction, and holes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from arcadebox.engine import Canvas
from arcadebox.geometry import Hole, Line, Vector2


@dataclass
class CoinConfig:
    img: str = "coin"
    img_size: float = 1.0
    start_pos: Vector2 = Vector2()
    start_v: Vector2 = Vector2()
    radius: float = 1.0
    friction: float = 0.0
    limit_v: float = 0.0
    sw: float = 1.0


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


class Coin:
    """Position, velocity, angle and spin of a coin of unit mass."""

    def __init__(self, config: CoinConfig) -> None:
        self.config = config
        self.pos = config.start_pos
        self.v = config.start_v
        self.radius = config.radius
        self.theta = 0.0
        self.omega = 0.0
        self.mass = 1.0
        self.inertia = 0.0
        self.active = True
        self.init()

    def init(self) -> None:
        """Put the coin back at its start with its initial velocity."""
        cfg = self.config
        self.pos = cfg.start_pos
        self.radius = cfg.radius
        self.v = cfg.start_v
        self.theta = 0.0
        self.omega = 0.0
        self.mass = 1.0
        self.inertia = 0.5 * self.mass * self.radius * self.radius
        self.active = True

    def update(self, delta: float, height: float) -> None:
        self.pos = self.pos + self.v * delta
        self.theta += self.omega * delta
        if self.pos.y > height:
            self.init()

    def draw(self, canvas: Canvas) -> None:
        if not self.active:
            return
        cfg = self.config
        canvas.draw("angleMode", "RADIANS")
        canvas.draw("rectMode", "CENTER")
        canvas.draw("strokeWeight", cfg.sw)
        canvas.draw("stroke", 0)
        canvas.draw("fill", 0, 0, 0, 0)
        canvas.draw("circle", self.pos.x, self.pos.y, self.radius * 2)
        canvas.draw("image", cfg.img, self.pos.x, self.pos.y, self.theta, cfg.img_size)

    def add_impulse_local(self, impulse: Vector2, local_pos: Vector2) -> None:
        """Apply an impulse at a point given relative to the centre."""
        self.v = self.v + impulse / self.mass
        self.omega += local_pos.cross(impulse) / self.inertia

    def add_impulse(self, impulse: Vector2, pos: Vector2) -> None:
        self.add_impulse_local(impulse, pos - self.pos)

    def apply_force(self, force: Vector2) -> None:
        self.v = self.v + force

    def collision_walls(self, walls: Iterable[Line]) -> None:
        """Push the coin out of every wall it overlaps and bounce it with friction."""
        cfg = self.config
        for wall in walls:
            sub = self.pos - wall.closest(self.pos)
            overlap = self.radius - sub.mag()
            if overlap < 0:
                continue
            nv = sub.normalize()
            self.pos = self.pos + nv * overlap
            dot_v = -self.v.dot(nv)
            if dot_v < 0:
                continue
            tangent = Vector2(-nv.y, nv.x)
            f_dir = tangent * -_sign(self.v.dot(tangent) - self.radius * self.omega)
            impulse = (nv + f_dir * cfg.friction) * min(dot_v, cfg.limit_v) * self.mass
            self.add_impulse_local(impulse, -nv * self.radius)

    def collision_holes(self, holes: Iterable[Hole], win_hole: Hole) -> int:
        """-1 if the coin fell into a losing hole, 1 for the winning hole, else 0.

        The coin is reset whenever it falls into a hole.
        """
        for hole in holes:
            if (self.pos - hole.pos).mag() < self.radius:
                self.init()
                return -1
        if (self.pos - win_hole.pos).mag() < self.radius:
            self.init()
            return 1
        return 0