"""The coin game scene and the bingo placeholder scene of the arcade hub."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from arcadebox.coin import CoinConfig
from arcadebox.engine import Frame, Key, Scene
from arcadebox.gauge import Gauge, GaugeConfig
from arcadebox.geometry import Vector2
from arcadebox.menus import BackButton
from arcadebox.physics import PhysicsConfig, PhysicsEngine

TITLE_SCENE = "title"
SELECT_SCENE = "select"


class _Fader(Protocol):
    def out_start(self) -> None: ...

    def out_end_flag(self) -> bool: ...


class _Host(Protocol):
    button: BackButton
    fade: _Fader

    def change_scene(self, scene_id: str) -> None: ...


def _leave_on_back(game: _Host, frame: Frame, target: str) -> None:
    inp = frame.input
    if inp.is_trigger(Key.LBUTTON) and game.button.collision_mouse(inp.mouse_x, inp.mouse_y):
        game.fade.out_start()
    if game.fade.out_end_flag():
        game.change_scene(target)


@dataclass
class AroundJapanConfig:
    field_img: str = "field"
    field_frame_img: str = "field_frame"
    inlet_img: str = "inlet"
    img_size: float = 1.0
    img_pos: Vector2 = Vector2()
    win_text_pos: Vector2 = Vector2()
    lose_text_pos: Vector2 = Vector2()
    text_size: float = 50.0


class AroundJapan(Scene):
    """Charge the gauge to push the coin around the field into the winning hole."""

    def __init__(
        self,
        game: _Host,
        config: AroundJapanConfig,
        physics_config: PhysicsConfig,
        coin_config: CoinConfig,
        gauge_config: GaugeConfig,
    ) -> None:
        super().__init__(game)
        self.config = config
        self.physics = PhysicsEngine(physics_config, coin_config)
        self.gauge = Gauge(gauge_config)

    def init(self) -> None:
        self.physics.init()
        self.gauge.init()

    def update(self, frame: Frame) -> None:
        self.gauge.update(frame)
        self.physics.add_force_to_coin(self.gauge.released_power, frame.width)
        self.physics.update(frame.delta, frame.height)

    def draw(self, frame: Frame) -> None:
        cfg = self.config
        canvas = frame.canvas
        x, y = cfg.img_pos.x, cfg.img_pos.y
        canvas.draw("rectMode", "CENTER")
        canvas.draw("image", cfg.field_img, x, y, 0, cfg.img_size)
        self.physics.draw(canvas)
        canvas.draw("image", cfg.field_frame_img, x, y, 0, cfg.img_size)
        canvas.draw("image", cfg.inlet_img, x, y, 0, cfg.img_size)
        self.gauge.draw(canvas)
        canvas.draw("fill", 0)
        canvas.draw("textMode", "BOTTOM")
        canvas.draw("textSize", cfg.text_size)
        canvas.draw("text", f"成功回数：{self.physics.win}", cfg.win_text_pos.x, cfg.win_text_pos.y)
        canvas.draw("text", f"失敗回数：{self.physics.lose}", cfg.lose_text_pos.x, cfg.lose_text_pos.y)

    def next_scene(self, frame: Frame) -> None:
        _leave_on_back(self.game, frame, TITLE_SCENE)


class Bingo(Scene):
    """Title card of the bingo game."""

    def __init__(self, game: _Host, img: str = "bingo") -> None:
        super().__init__(game)
        self.img = img

    def draw(self, frame: Frame) -> None:
        canvas = frame.canvas
        canvas.draw("rectMode", "CORNER")
        canvas.draw("fill", 255)
        canvas.draw("textSize", 100)
        canvas.draw("text", "スマートビンゴ", 10, 110)

    def next_scene(self, frame: Frame) -> None:
        _leave_on_back(self.game, frame, SELECT_SCENE)