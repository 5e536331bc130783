"""Tuna cutting: dodge up and down to slice the fish before the stamina runs out."""

from __future__ import annotations

from enum import Enum, auto
from typing import Iterable, Optional

from arcadebox.engine import Canvas, Frame, GameBase, Key, MenuCallback


class TunaScene(Enum):
    TITLE = auto()
    PLAY = auto()
    CLEAR = auto()
    OVER = auto()


_SEA = (0, 0, 128)
_TITLE_LINES = ("Title:マグロを切るゲーム", " クリックでゲームスタート", " Enterでメニューに戻る")
_PLAY_LINES = ("マグロを切れ", "wで上に移動", "sで下に移動")
_CLEAR_LINES = ("Game Over", " クリックでタイトルに戻る")


def _print_lines(canvas: Canvas, lines: Iterable[str], size: Optional[int] = None) -> None:
    canvas.draw("fill", 255, 255, 255)
    if size is not None:
        canvas.draw("textSize", size)
    for line in lines:
        canvas.draw("print", line)


class TunaGame(GameBase):
    """The samurai stays at the left while tuna swim in from the right."""

    def __init__(self, on_back_to_menu: MenuCallback = None) -> None:
        super().__init__(on_back_to_menu)
        self.state = TunaScene.TITLE
        self.fish_x = self.fish_y = self.fish_w = self.fish_h = 0.0
        self.player_x = self.player_y = self.player_w = self.player_h = 0.0
        self.speed = 0.0
        self.sashimi_x = self.sashimi_y = 0.0
        self.fish_life = 0.0
        self.player_life = 0.0
        self.clear_flag = False

    def init(self) -> None:
        self.fish_x, self.fish_y = 1920.0, 540.0
        self.fish_w, self.fish_h = 450.0, 220.0
        self.player_x, self.player_y = 100.0, 540.0
        self.player_w, self.player_h = 150.0, 200.0
        self.speed = 45.0
        self.sashimi_x, self.sashimi_y = 650.0, 400.0
        self.fish_life = 1.0
        self.player_life = 250.0
        self.clear_flag = False

    def proc(self, frame: Frame) -> None:
        handlers = {
            TunaScene.TITLE: self._title,
            TunaScene.PLAY: self._play,
            TunaScene.CLEAR: self._clear,
        }
        handler = handlers.get(self.state)
        if handler is not None:
            handler(frame)

    def collision(self) -> bool:
        if self.fish_life <= 0:
            return False
        return not (
            self.player_x + self.player_w < self.fish_x
            or self.fish_x + self.fish_w < self.player_x
            or self.player_y + self.player_h < self.fish_y
            or self.fish_y + self.fish_h < self.player_y
        )

    def _title(self, frame: Frame) -> None:
        frame.canvas.draw("clear", *_SEA)
        _print_lines(frame.canvas, _TITLE_LINES, size=80)
        if frame.input.is_trigger(Key.LBUTTON):
            self.init()
            self.state = TunaScene.PLAY
            return
        if frame.input.is_trigger(Key.ENTER):
            self.back_to_menu()

    def _respawn_fish(self, frame: Frame) -> None:
        self.fish_x = 1920.0
        self.fish_y = frame.rng.randrange(750) + 200.0

    def _play(self, frame: Frame) -> None:
        self.fish_x -= self.speed
        if self.fish_x < -360:
            self._respawn_fish(frame)
            self.player_life -= 20
        if self.player_life < 0:
            self.state = TunaScene.CLEAR

        bottom_limit, top_limit = 900, 0
        if frame.input.is_press(Key.W):
            if self.player_y > top_limit:
                self.player_y -= 20
        elif frame.input.is_press(Key.S):
            if self.player_y < bottom_limit:
                self.player_y += 20

        if self.collision():
            self._respawn_fish(frame)

        self._draw(frame.canvas)
        _print_lines(frame.canvas, _PLAY_LINES)

    def _draw(self, canvas: Canvas) -> None:
        commands = (
            ("clear", *_SEA),
            ("rectMode", "CORNER"),
            ("image", "umi", 0, 0),
            ("fill", 128, 128, 128),
            ("rect", self.fish_x, self.fish_y, self.fish_w, self.fish_h),
            ("rect", self.player_x, self.player_y, self.player_w, self.player_h),
            ("image", "sakana", self.fish_x, self.fish_y),
            ("image", "ningen", self.player_x, self.player_y),
        )
        for command in commands:
            canvas.draw(*command)
        self._life_gauge(canvas)

    def _life_gauge(self, canvas: Canvas) -> None:
        canvas.draw("strokeWeight", 0)
        colour = (0, 255, 0) if self.player_life > 40 else (255, 0, 0)
        canvas.draw("fill", *colour)
        canvas.draw("rect", self.player_x, self.player_y - 60, self.player_life, 5)

    def _clear(self, frame: Frame) -> None:
        frame.canvas.draw("clear", *_SEA)
        frame.canvas.draw("image", "sasimi", self.sashimi_x, self.sashimi_y)
        _print_lines(frame.canvas, _CLEAR_LINES)
        if frame.input.is_trigger(Key.LBUTTON):
            self.state = TunaScene.TITLE