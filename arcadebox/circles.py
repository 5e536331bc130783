"""Two placeholder games that draw a single circle."""

from __future__ import annotations

from typing import Any

from arcadebox.engine import Frame, GameBase, Key, MenuCallback

_BACK_TEXT = "Enterでメニューに戻る"


class _CircleGame(GameBase):
    """A circle in the middle of the screen with a way back to the menu."""

    label = 0

    def __init__(
        self,
        on_back_to_menu: MenuCallback = None,
        width: float = 1920.0,
        height: float = 1080.0,
    ) -> None:
        super().__init__(on_back_to_menu)
        self.x = width / 2
        self.y = height / 2
        self.radius = 200.0

    def _render(
        self,
        frame: Frame,
        background: tuple[float, ...],
        colour: tuple[float, ...],
        prelude: tuple[tuple[Any, ...], ...] = (),
    ) -> None:
        commands = (
            *prelude,
            ("clear", *background),
            ("strokeWeight", 50),
            ("stroke", 0),
            ("fill", *colour),
            ("circle", self.x, self.y, self.radius * 2),
            ("fill", 0),
            ("textSize", 100),
            ("text", _BACK_TEXT, 0, frame.height),
            ("print", self.label),
        )
        for command in commands:
            frame.canvas.draw(*command)
        if frame.input.is_trigger(Key.ENTER):
            self.back_to_menu()


class HueCircleGame(_CircleGame):
    """A circle whose hue cycles over time."""

    label = 1

    def __init__(
        self,
        on_back_to_menu: MenuCallback = None,
        width: float = 1920.0,
        height: float = 1080.0,
    ) -> None:
        super().__init__(on_back_to_menu, width, height)
        self.hue = 0.0
        self.hue_speed = 60.0

    def proc(self, frame: Frame) -> None:
        self.hue += self.hue_speed * frame.delta
        self._render(
            frame,
            background=(255, 0, 255),
            colour=(self.hue, 255, 255),
            prelude=(("colorMode", "HSV"), ("angleMode", "DEGREES")),
        )


class RedCircleGame(_CircleGame):
    """A red circle on white."""

    label = 6

    def proc(self, frame: Frame) -> None:
        self._render(frame, background=(255, 255, 255), colour=(255, 0, 0))