"""Pachislot machine with three reels, paylines, payouts and a bonus lamp."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum, IntEnum, auto
from itertools import product
from typing import Callable, Optional

from arcadebox.engine import Canvas, Frame, GameBase, Key


class Symbol(IntEnum):
    """Reel symbols, numbered as on the reel strips."""

    SEVEN = 0
    BAR = 1
    REPLAY = 2
    CHERRY = 3
    ORANGE = 4
    BELL = 5


def _strip(*values: int) -> tuple[Symbol, ...]:
    return tuple(Symbol(value) for value in values)


STRIPS = (
    _strip(2, 4, 0, 3, 1, 5, 2, 4, 5, 2, 4, 0, 3, 1, 5, 2, 4, 5, 1, 4, 5),
    _strip(4, 2, 0, 4, 3, 1, 2, 3, 4, 2, 1, 4, 5, 0, 2, 1, 4, 5, 1, 2, 3),
    _strip(5, 4, 0, 2, 5, 4, 3, 0, 2, 5, 4, 3, 2, 0, 5, 4, 3, 2, 1, 3, 2),
)
REEL_LENGTH = 21
SYMBOL_SPACING = 182.4
REEL_SPEED = 45.6
WRAP_Y = 2538.0
TOLERANCE = 20.0
ACCEPTANCE_FRAMES = 60
START_MEDALS = 46
SPIN_COST = 3
CHERRY_PAY = 2
SETTINGS = (127, 128, 142, 148, 161, 168)
SETTING_LABELS = ("設定６", "設定５", "設定４", "設定３", "設定２", "設定１")
LINES = ((0, 0, 0), (1, 1, 1), (2, 2, 2), (0, 1, 2), (2, 1, 0))
STOP_KEYS = (Key.G, Key.H, Key.J)
STOP_WINDOWS = (182.4, 182.4, 364.8)
REEL_OFFSETS = (-334.0, 0.0, 334.0)
FANFARES = ("god", "bb_kakutei", "symphogear")

_PAYOUTS = {Symbol.BAR: 96, Symbol.REPLAY: 3, Symbol.ORANGE: 7, Symbol.BELL: 14}


def payout(symbol: Symbol, peka: int) -> int:
    """Medals paid for three of a symbol on a line; sevens pay double while the lamp is unlit."""
    if symbol is Symbol.SEVEN:
        return 480 if peka == 0 else 240
    return _PAYOUTS.get(symbol, 0)


@dataclass
class Reel:
    strip: list[Symbol]
    x: float = 0.0
    positions: list[float] = field(default_factory=list)
    rotating: bool = False

    def indices_near(self, row_y: float) -> list[int]:
        """Indices of the symbols lying on the row at row_y."""
        return [
            index
            for index, y in enumerate(self.positions)
            if row_y - TOLERANCE <= y <= row_y + TOLERANCE
        ]


class _Scene(Enum):
    TITLE = auto()
    PLAY = auto()


class SlotMachine(GameBase):
    """Spin with R, stop the reels with G, H and J."""

    def __init__(
        self,
        on_back_to_menu: Optional[Callable[[], None]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__(on_back_to_menu)
        self.rng = rng if rng is not None else random.Random()
        self.state = _Scene.TITLE
        self.reels = [Reel(list(strip)) for strip in STRIPS]
        self.check_rows = [0.0, 0.0, 0.0]
        self.initialized = False
        self.checked = False
        self.paying_out = False
        self.game_count = 0
        self.acceptance_time = 0
        self.medal = 0
        self.medal_count = 0
        self.peka = 1
        self.option_seed = 0
        self.option = 0
        self.reel_speed = 0.0
        self.stop_y = 0.0
        self.reset_y = 0.0

    def init(self, width: float, height: float) -> None:
        self.initialized = True
        top = height / 2 - 1824
        for reel, offset in zip(self.reels, REEL_OFFSETS):
            reel.x = width / 2 + offset
            reel.positions = [top + i * SYMBOL_SPACING for i in range(REEL_LENGTH)]
        self.check_rows = [
            (height / 2 - SYMBOL_SPACING) + row * SYMBOL_SPACING for row in range(3)
        ]
        self.reel_speed = REEL_SPEED
        self.stop_y = height / 2
        self.reset_y = top
        self.acceptance_time = ACCEPTANCE_FRAMES
        self.medal = START_MEDALS
        self.option_seed = self.rng.randrange(len(SETTINGS))
        self.option = SETTINGS[self.option_seed]

    def reel_check(self) -> int:
        """Add the medals won by the visible symbols to the pending payout and return them."""
        rows = [[reel.indices_near(y) for y in self.check_rows] for reel in self.reels]
        first, second, third = (reel.strip for reel in self.reels)
        won = 0
        for line in LINES:
            for x, y, z in product(rows[0][line[0]], rows[1][line[1]], rows[2][line[2]]):
                if first[x] == second[y] == third[z]:
                    won += payout(first[x], self.peka)
        for picks in product(*rows[0]):
            won += CHERRY_PAY * sum(first[i] is Symbol.CHERRY for i in picks)
        self.medal_count += won
        return won

    def proc(self, frame: Frame) -> None:
        if self.state is _Scene.TITLE:
            self._title(frame)
        elif self.state is _Scene.PLAY:
            self._play(frame)
        canvas = frame.canvas
        canvas.draw("textSize", 50)
        canvas.draw("text", "Enterでメニューに戻る", 0, frame.height)
        if frame.input.is_trigger(Key.ENTER):
            self.back_to_menu()

    def _title(self, frame: Frame) -> None:
        canvas = frame.canvas
        canvas.draw("clear", 128, 128, 128)
        if frame.input.is_trigger(Key.P):
            self.state = _Scene.PLAY
        canvas.draw("fill", 0, 0, 0)
        canvas.draw("textSize", 200)
        canvas.draw("text", "SDOT", frame.width / 2 - 220, frame.height / 2)
        canvas.draw("textSize", 100)
        canvas.draw("text", "Pキーでプレイ", frame.width / 2 - 330, frame.height / 2 + 200)

    def _all_stopped(self) -> bool:
        return not any(reel.rotating for reel in self.reels)

    def _play(self, frame: Frame) -> None:
        if not self.initialized:
            self.init(frame.width, frame.height)
        if not self.checked:
            self.reel_check()
            self.checked = True

        canvas = frame.canvas
        inp = frame.input
        canvas.draw("rectMode", "CENTER")
        canvas.draw("clear", 128, 128, 128)

        for i in range(REEL_LENGTH):
            for reel in self.reels:
                canvas.draw("image", reel.strip[i].name.lower(), reel.x, reel.positions[i], 1, 0.3)
                if reel.positions[i] >= WRAP_Y:
                    reel.positions[i] = self.reset_y
                if reel.rotating:
                    reel.positions[i] += self.reel_speed

        if self._all_stopped():
            if inp.is_trigger(Key.R) and self.medal_count <= 0:
                canvas.draw("playSound", "kaiten_kaisi")
                for reel in self.reels:
                    reel.rotating = True
                self.game_count += 1
                self.paying_out = False
                self.medal -= SPIN_COST
        else:
            self.acceptance_time -= 1

        if self.acceptance_time < 0:
            self._try_stop(frame)

        if self.medal_count > 0:
            self._pay_one(canvas)

        self._draw_cabinet(frame)

    def _try_stop(self, frame: Frame) -> None:
        inp = frame.input
        for i in range(REEL_LENGTH):
            for key, reel, window in zip(STOP_KEYS, self.reels, STOP_WINDOWS):
                if not (inp.is_press(key) and reel.rotating):
                    continue
                y = reel.positions[i]
                if self.stop_y - window <= y <= self.stop_y:
                    # The reel halts only when less than one step is left to the stop line.
                    if (self.stop_y - y) / REEL_SPEED < 1:
                        self._stop(reel, frame.canvas)
                break

    def _stop(self, reel: Reel, canvas: Canvas) -> None:
        reel.rotating = False
        if self._all_stopped():
            self.checked = False
            self.acceptance_time = ACCEPTANCE_FRAMES
            if self.peka != 0:
                self.peka = self.rng.randrange(self.option)
        canvas.draw("playSound", "kaiten_teisi")

    def _pay_one(self, canvas: Canvas) -> None:
        fanfare = self.rng.randrange(len(FANFARES))
        if not self.paying_out:
            if self.medal_count < 96:
                canvas.draw("playSound", "haraidasi")
            elif self.medal_count < 240:
                canvas.draw("playSound", "bar_haraidasi")
            else:
                canvas.draw("playSound", FANFARES[fanfare])
                self.peka = 1
            self.paying_out = True
        self.medal += 1
        self.medal_count -= 1

    def _draw_cabinet(self, frame: Frame) -> None:
        canvas = frame.canvas
        width, height = frame.width, frame.height
        canvas.draw("fill", 128, 128, 128)
        canvas.draw("rect", width / 2, height / 2 - 547.2, width, height / 2)
        canvas.draw("rect", width / 2, height / 2 + 547.2, width, height / 2)

        for i in range(self.medal // 500):
            canvas.draw("image", "dollar_box", width - 100, height - 55.2 - i * 50, 1, 0.3)

        if self.peka == 0:
            canvas.draw("image", "gogo_r", 300, height - 200, 1, 0.5)
        else:
            canvas.draw("playSound", "gako")
            canvas.draw("image", "gogo", 300, height - 200, 1, 0.5)

        canvas.draw("fill", 0)
        inp = frame.input
        if inp.is_press(Key.Z) and inp.is_press(Key.O):
            canvas.draw("text", SETTING_LABELS[self.option_seed], 100, 100)
        canvas.draw("fill", 0)
        canvas.draw("textSize", 50)
        canvas.draw("text", "Rで回転", 200, height / 2)
        for label, reel in zip("GHJ", self.reels):
            canvas.draw("text", label, reel.x, height - 200)
        canvas.draw("text", f"回転数{self.game_count}", 200, height / 2 - 200)
        canvas.draw("text", f"メダル{self.medal}", 100, height / 2 + 200)