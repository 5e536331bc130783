"""Coin physics for the pusher field: gravity, walls, holes and the side push."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from typing import Union

from arcadebox.coin import Coin, CoinConfig
from arcadebox.engine import Canvas
from arcadebox.geometry import Hole, Line, Vector2

_Path = Union[str, "PathLike[str]"]


@dataclass
class PhysicsConfig:
    gravity: Vector2 = Vector2(0.0, 1000.0)
    wall_data_file_name: str = "walls.csv"
    hole_data_file_name: str = "holes.csv"
    distance_wall: float = 0.0
    coin_size: float = 0.0
    tolerance: float = 0.0
    power_diameter: float = 1.0
    win_hole_pos: Vector2 = Vector2()


def _read_numbers(path: _Path, per_line: int) -> list[float]:
    """Read per_line comma-separated numbers from each line.

    When a line runs out of commas, its last field is read again; extra fields are ignored.
    """
    numbers: list[float] = []
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            rest = line.rstrip("\n")
            for _ in range(per_line):
                head, comma, tail = rest.partition(",")
                numbers.append(float(head))
                if comma:
                    rest = tail
    return numbers


def load_walls(path: _Path) -> list[Line]:
    """Wall segments, one per line as x1,y1,x2,y2."""
    values = _read_numbers(path, 4)
    return [
        Line(Vector2(values[i], values[i + 1]), Vector2(values[i + 2], values[i + 3]))
        for i in range(0, len(values) - len(values) % 4, 4)
    ]


def load_holes(path: _Path) -> list[Hole]:
    """Losing holes, one per line as x,y."""
    values = _read_numbers(path, 2)
    return [
        Hole(Vector2(values[i], values[i + 1]))
        for i in range(0, len(values) - len(values) % 2, 2)
    ]


class PhysicsEngine:
    """Moves the coin and counts how often it lands in the winning and losing holes."""

    def __init__(self, config: PhysicsConfig, coin_config: CoinConfig) -> None:
        self.config = config
        self.coin = Coin(coin_config)
        self.win_hole = Hole(config.win_hole_pos)
        self.walls = load_walls(config.wall_data_file_name)
        self.holes = load_holes(config.hole_data_file_name)
        self.gravity = Vector2(0.0, 1000.0)
        self.win = 0
        self.lose = 0

    def init(self) -> None:
        self.gravity = self.config.gravity
        self.coin.init()
        self.win = 0
        self.lose = 0

    def update(self, delta: float, height: float) -> None:
        self.coin.apply_force(self.gravity * delta)
        self.coin.update(delta, height)
        self.coin.collision_walls(self.walls)
        result = self.coin.collision_holes(self.holes, self.win_hole)
        if result == 1:
            self.win += 1
        elif result == -1:
            self.lose += 1

    def draw(self, canvas: Canvas) -> None:
        self.coin.draw(canvas)

    def add_force_to_coin(self, power: float, width: float) -> None:
        """Push the coin towards the centre when it rests against a side wall."""
        cfg = self.config
        offset = self.coin.pos.x - width / 2
        reach = cfg.distance_wall - cfg.coin_size - cfg.tolerance
        if offset > reach:
            self.coin.apply_force(Vector2(-power * cfg.power_diameter, 0))
        elif offset < -reach:
            self.coin.apply_force(Vector2(power * cfg.power_diameter, 0))