"""Pop-up messages that show, fade out and disappear."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from arcadebox.engine import Frame
from arcadebox.geometry import Vector2


@dataclass
class MessageStyle:
    show_time: float
    fade_time: float
    str_size: float
    str_color: tuple[float, float, float, float] = (255.0, 255.0, 255.0, 255.0)
    rect_size: Vector2 = field(default_factory=Vector2)
    rect_color: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 255.0)


class MessagePhase(Enum):
    SHOW = auto()
    FADE = auto()
    END = auto()


@dataclass
class _Message:
    text: str
    time: float = 0.0
    phase: MessagePhase = MessagePhase.SHOW


class MessageBoard:
    """Queue of centred messages drawn over the current scene."""

    def __init__(self, style: MessageStyle) -> None:
        self.style = style
        self.messages: list[_Message] = []

    def upper_message(self, text: str) -> None:
        self.messages.append(_Message(text))

    def reset_message(self) -> None:
        self.messages.clear()

    def proc(self, frame: Frame) -> None:
        style = self.style
        kept = []
        for message in self.messages:
            message.time += frame.delta
            if message.phase is MessagePhase.SHOW:
                if message.time > style.show_time:
                    message.phase = MessagePhase.FADE
                    message.time -= style.show_time
                kept.append(message)
            elif message.phase is MessagePhase.FADE:
                if message.time > style.fade_time:
                    message.phase = MessagePhase.END
                kept.append(message)
        self.messages = kept

        canvas = frame.canvas
        canvas.draw("rectMode", "CENTER")
        canvas.draw("textMode", "BOTTOM")
        canvas.draw("noStroke")
        cx, cy = frame.width / 2, frame.height / 2
        for message in self.messages:
            if message.phase is MessagePhase.SHOW:
                ratio = 1.0
            elif message.phase is MessagePhase.FADE:
                ratio = 1.0 - message.time / style.fade_time
            else:
                continue
            r, g, b, a = style.rect_color
            canvas.draw("fill", r, g, b, a * ratio)
            canvas.draw("rect", cx, cy, style.rect_size.x, style.rect_size.y)
            r, g, b, a = style.str_color
            canvas.draw("fill", r, g, b, a * ratio)
            width = len(message.text.encode("utf-8")) / 3.6
            canvas.draw(
                "text",
                message.text,
                cx - style.str_size * width,
                cy + style.str_size / 2,
            )