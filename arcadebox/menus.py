"""Game selection grid, back button and background of the arcade hub."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from arcadebox.engine import Canvas, Frame, Scene
from arcadebox.geometry import Vector2


@dataclass
class SelectConfig:
    col: int = 1
    row: int = 1
    img_size: Vector2 = Vector2()
    img_ofst: Vector2 = Vector2()
    select_ofst: Vector2 = Vector2()
    select_text: str = ""
    text_pos: Vector2 = Vector2()
    text_color: tuple[float, ...] = (255, 255, 255, 255)
    text_size: float = 50.0
    text_stroke: tuple[float, ...] = (0, 0, 0, 255)
    text_stroke_weight: float = 2.0


class SelectGrid(Scene):
    """Grid of game tiles; mouseover is the index of the tile under the mouse, or None."""

    def __init__(self, config: SelectConfig, game: Any = None) -> None:
        super().__init__(game)
        self.config = config
        self.mouseover: Optional[int] = None

    def init(self) -> None:
        self.mouseover = None

    def _tiles(self, width: float, height: float):
        cfg = self.config
        for y in range(cfg.row):
            for x in range(cfg.col):
                px = (width - cfg.select_ofst.x * 2) / cfg.col * x + cfg.select_ofst.x + cfg.img_ofst.x
                py = (height - cfg.select_ofst.y) / cfg.row * y + cfg.select_ofst.y + cfg.img_ofst.y
                yield cfg.col * y + x, px, py

    def update(self, frame: Frame) -> None:
        size = self.config.img_size
        mx, my = frame.input.mouse_x, frame.input.mouse_y
        self.mouseover = None
        for index, px, py in self._tiles(frame.width, frame.height):
            if px < mx < px + size.x and py < my < py + size.y:
                self.mouseover = index

    def draw(self, frame: Frame) -> None:
        cfg = self.config
        canvas = frame.canvas
        canvas.draw("rectMode", "CORNER")
        canvas.draw("textMode", "BOTTOM")
        canvas.draw("textSize", cfg.text_size)
        canvas.draw("fill", *cfg.text_stroke)
        w = cfg.text_stroke_weight
        for dx, dy in ((w, w), (-w, w), (w, -w), (-w, -w)):
            canvas.draw("text", cfg.select_text, cfg.text_pos.x + dx, cfg.text_pos.y + dy)
        canvas.draw("fill", *cfg.text_color)
        canvas.draw("text", cfg.select_text, cfg.text_pos.x, cfg.text_pos.y)
        canvas.draw("stroke", 0)
        canvas.draw("strokeWeight", 2)
        for index, px, py in self._tiles(frame.width, frame.height):
            canvas.draw("fill", 180 if index == self.mouseover else 255)
            canvas.draw("rect", px, py, cfg.img_size.x, cfg.img_size.y)


@dataclass
class BackButtonConfig:
    img: str = "back"
    img_size: float = 1.0
    pos: Vector2 = Vector2()
    colli_ofst: Vector2 = Vector2()
    colli_size: Vector2 = Vector2()


class BackButton:
    def __init__(self, config: BackButtonConfig) -> None:
        self.config = config

    def proc(self, canvas: Canvas) -> None:
        cfg = self.config
        canvas.draw("rectMode", "CENTER")
        canvas.draw("image", cfg.img, cfg.pos.x, cfg.pos.y, 0, cfg.img_size)

    def collision_mouse(self, mouse_x: float, mouse_y: float) -> bool:
        """True when the mouse lies strictly inside the button's hit box."""
        cfg = self.config
        return (
            abs(cfg.pos.x + cfg.colli_ofst.x - mouse_x) < cfg.colli_size.x
            and abs(cfg.pos.y + cfg.colli_ofst.y - mouse_y) < cfg.colli_size.y
        )


@dataclass
class BackgroundConfig:
    img: str = "background"
    img_size: float = 1.0
    pos: Vector2 = Vector2()


class Background:
    def __init__(self, config: BackgroundConfig) -> None:
        self.config = config

    def proc(self, canvas: Canvas) -> None:
        cfg = self.config
        canvas.draw("rectMode", "CORNER")
        canvas.draw("image", cfg.img, cfg.pos.x, cfg.pos.y, 0, cfg.img_size)