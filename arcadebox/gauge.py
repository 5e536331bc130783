"""Power gauge: hold the button to make the power swing between its limits, release to fire."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from arcadebox.engine import Canvas, Frame, Key
from arcadebox.geometry import Vector2


@dataclass
class GaugeConfig:
    button_img: str = "button"
    frame_img: str = "frame"
    button_pos: Vector2 = Vector2()
    frame_pos: Vector2 = Vector2()
    button_size: float = 1.0
    frame_size: float = 1.0
    gauge_size: Vector2 = Vector2(1.0, 1.0)
    button_radius: float = 1.0
    hue_min: int = 0
    hue_max: int = 0
    power_speed: int = 1
    power_max: int = 1
    power_min: int = 0


class GaugeState(Enum):
    UP = auto()
    DOWN = auto()
    STOP = auto()


def _map(value: float, low1: float, high1: float, low2: float, high2: float) -> float:
    return low2 + (value - low1) * (high2 - low2) / (high1 - low1)


class Gauge:
    """released_power holds the power on the frame the button is let go, else 0."""

    def __init__(self, config: GaugeConfig) -> None:
        self.config = config
        self.power = float(config.power_min)
        self.state = GaugeState.STOP
        self.released_power = 0.0

    def init(self) -> None:
        self.power = float(self.config.power_min)
        self.state = GaugeState.STOP

    def _hit(self, mouse_x: float, mouse_y: float) -> bool:
        to_button = self.config.button_pos - Vector2(mouse_x, mouse_y)
        return to_button.mag() < self.config.button_radius / 2.0

    def update(self, frame: Frame) -> None:
        cfg = self.config
        inp = frame.input
        self.released_power = 0.0
        if self.state is GaugeState.STOP:
            if inp.is_trigger(Key.LBUTTON) and self._hit(inp.mouse_x, inp.mouse_y):
                self.power = float(cfg.power_min)
                self.state = GaugeState.UP
            return
        if not inp.is_press(Key.LBUTTON):
            self.released_power = self.power
            self.state = GaugeState.STOP
            return
        if self.state is GaugeState.UP:
            self.power += cfg.power_speed * frame.delta
            if self.power > cfg.power_max:
                self.power = float(cfg.power_max)
                self.state = GaugeState.DOWN
        else:
            self.power -= cfg.power_speed * frame.delta
            if self.power < cfg.power_min:
                self.power = float(cfg.power_min)
                self.state = GaugeState.UP

    def draw(self, canvas: Canvas) -> None:
        cfg = self.config
        canvas.draw("rectMode", "CORNER")
        canvas.draw("colorMode", "HSV")
        canvas.draw("angleMode", "DEGREES")
        canvas.draw("noStroke")
        lower_y = cfg.frame_pos.y + cfg.gauge_size.y / 2.0
        step = cfg.gauge_size.y / cfg.power_max
        left = cfg.frame_pos.x - cfg.gauge_size.x / 2.0
        for i in range(int(self.power)):
            hue = int(_map(i, cfg.power_min, cfg.power_max, cfg.hue_min, cfg.hue_max))
            canvas.draw("fill", hue, 255, 255)
            canvas.draw("rect", left, lower_y - step * (i + 1), cfg.gauge_size.x, step)
        canvas.draw("rectMode", "CENTER")
        canvas.draw("colorMode", "RGB")
        canvas.draw("image", cfg.frame_img, cfg.frame_pos.x, cfg.frame_pos.y, 0, cfg.frame_size)
        canvas.draw("image", cfg.button_img, cfg.button_pos.x, cfg.button_pos.y, 0, cfg.button_size)