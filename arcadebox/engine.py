"""Frame-driven runtime shared by the games: input state, a recording canvas and scene bases."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable, Optional

MenuCallback = Optional[Callable[[], None]]


class Key(Enum):
    """Keyboard keys and mouse buttons the games react to."""

    A = auto()
    B = auto()
    C = auto()
    D = auto()
    E = auto()
    F = auto()
    G = auto()
    H = auto()
    I = auto()  # noqa: E741
    J = auto()
    K = auto()
    L = auto()
    M = auto()
    N = auto()
    O = auto()  # noqa: E741
    P = auto()
    Q = auto()
    R = auto()
    S = auto()
    T = auto()
    U = auto()
    V = auto()
    W = auto()
    X = auto()
    Y = auto()
    Z = auto()
    ENTER = auto()
    SPACE = auto()
    LBUTTON = auto()
    RBUTTON = auto()


class Input:
    """Held keys and mouse position, with edge detection between frames."""

    def __init__(self) -> None:
        self._held: set[Key] = set()
        self._previous: set[Key] = set()
        self.mouse_x = 0.0
        self.mouse_y = 0.0

    def press(self, *args: Key) -> None:
        self._held.update(args)

    def release(self, *args: Key) -> None:
        self._held.difference_update(args)

    def move_mouse(self, x: float, y: float) -> None:
        self.mouse_x = float(x)
        self.mouse_y = float(y)

    def next_frame(self) -> None:
        """Remember the current keys so that triggers fire only once."""
        self._previous = set(self._held)

    def is_press(self, key: Key) -> bool:
        return key in self._held

    def is_trigger(self, key: Key) -> bool:
        """True on the first frame a key is held."""
        return key in self._held and key not in self._previous


class Canvas:
    """Records drawing commands in the order they are issued."""

    def __init__(self) -> None:
        self.commands: list[tuple[str, tuple[Any, ...]]] = []

    def draw(self, name: str, *args: Any) -> None:
        self.commands.append((name, args))

    def names(self) -> list[str]:
        return [name for name, _ in self.commands]

    def texts(self) -> list[str]:
        """Strings passed to text and print commands."""
        return [
            str(args[0])
            for name, args in self.commands
            if name in ("text", "print") and args
        ]

    def reset(self) -> None:
        self.commands.clear()


@dataclass
class Frame:
    """Everything a game sees during one tick of the main loop."""

    input: Input = field(default_factory=Input)
    canvas: Canvas = field(default_factory=Canvas)
    delta: float = 1 / 60
    width: float = 1920.0
    height: float = 1080.0
    rng: random.Random = field(default_factory=random.Random)


class GameBase:
    """A game hosted by the menu; it can ask to return there."""

    def __init__(self, on_back_to_menu: MenuCallback = None) -> None:
        self.on_back_to_menu = on_back_to_menu
        self.menu_requests = 0

    def back_to_menu(self) -> None:
        self.menu_requests += 1
        if self.on_back_to_menu is not None:
            self.on_back_to_menu()


class Scene:
    """A screen of a game: update, draw, then decide what comes next."""

    def __init__(self, game: Any = None) -> None:
        self.game = game
        self.created = False
        self.elapsed = 0.0

    def create(self) -> None:
        """Load resources once."""
        self.created = True

    def init(self) -> None:
        """Reset state whenever the scene becomes current."""
        self.elapsed = 0.0

    def proc(self, frame: Frame) -> None:
        self.update(frame)
        self.draw(frame)
        self.next_scene(frame)

    def update(self, frame: Frame) -> None:
        """Advance the scene's clock."""
        self.elapsed += frame.delta

    def draw(self, frame: Frame) -> None:
        """Render the scene."""

    def next_scene(self, frame: Frame) -> None:
        """Switch to another scene if needed."""

    def game_name(self) -> str:
        return "???"