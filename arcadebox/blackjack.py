"""Blackjack table: shuffles a deck and deals the opening cards."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from arcadebox.engine import Frame, GameBase, Key, MenuCallback

CARD_NUMBER = 13
SUM = 52


class Suit(Enum):
    HEART = "heart"
    DIAMOND = "diamond"
    SPADE = "spade"
    CLUB = "club"


@dataclass(frozen=True)
class Card:
    suit: Suit
    rank: int

    @property
    def image(self) -> str:
        return f"{self.suit.value}_{self.rank}"


Deck = list[Optional[Card]]

_SUIT_ORDER = (Suit.HEART, Suit.DIAMOND, Suit.SPADE, Suit.CLUB)

_TITLE_SCREEN = (
    ("clear", 0),
    ("image", "title", 0, 0, "full"),
    ("fill", 255),
    ("textSize", 150),
    ("text", "BLACKJACK", 640, 400),
    ("textSize", 75),
    ("text", "クリックでゲームスタート", 520, 900),
    ("text", "enterでメニューに戻る", 580, 1000),
)

_Scene = Enum("_Scene", "TITLE PLAY CLEAR OVER")


def build_deck() -> Deck:
    """Table of SUM + 1 slots: slot 0 is the face-down card and the last slot is empty.

    Slots 1 to 12 hold hearts 1 to 12, then diamonds, spades and clubs 1 to 13.
    """
    deck: Deck = [None]
    rank = 1
    for slot in range(1, SUM):
        if slot % CARD_NUMBER == 0:
            rank = 1
        deck.append(Card(_SUIT_ORDER[slot // CARD_NUMBER], rank))
        rank += 1
    deck.append(None)
    return deck


def shuffle_deck(deck: Deck, rng: random.Random) -> None:
    """Shuffle in place, leaving slot 0 where it is."""
    for k in range(len(deck) - 1, 0, -1):
        chosen = rng.randrange(k)
        if chosen:
            deck[chosen], deck[k] = deck[k], deck[chosen]


def _card_image(card: Optional[Card]) -> str:
    return card.image if card is not None else "back_card"


class BlackjackGame(GameBase):
    """Title screen, then a table showing the first four cards."""

    def __init__(
        self,
        on_back_to_menu: MenuCallback = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__(on_back_to_menu)
        self.rng = rng if rng is not None else random.Random()
        self.state = _Scene.TITLE
        self.button_x = self.button_y = 0.0
        self.button_width = self.button_height = 0.0
        self.card_x = self.card_y = 0.0
        self.card_angle = 0.0
        self.card_rate = 0.0
        self.card_dx = self.card_dy = 0.0
        self.deck: Deck = []

    def init(self) -> None:
        self.button_x, self.button_y = 355.0, 895.0
        self.button_width, self.button_height = 250.0, 100.0
        self.card_x, self.card_y = 680.0, 100.0
        self.card_rate = 0.3
        self.card_dx, self.card_dy = 350.0, 570.0
        self.deck = build_deck()
        shuffle_deck(self.deck, self.rng)

    def proc(self, frame: Frame) -> None:
        if self.state is _Scene.TITLE:
            self._title(frame)
        elif self.state is _Scene.PLAY:
            self._play(frame)

    def _title(self, frame: Frame) -> None:
        for command in _TITLE_SCREEN:
            frame.canvas.draw(*command)
        if frame.input.is_trigger(Key.LBUTTON):
            self.init()
            self.state = _Scene.PLAY
            return
        if frame.input.is_trigger(Key.ENTER):
            self.back_to_menu()

    def _play(self, frame: Frame) -> None:
        canvas = frame.canvas
        canvas.draw("image", "play", 0, 0)
        for i, card in enumerate(self.deck[:4]):
            rate = 0.42 if i == 0 else self.card_rate
            canvas.draw(
                "image",
                _card_image(card),
                self.card_x + self.card_dx * (i % 2),
                self.card_y + self.card_dy * (i // 2),
                self.card_angle,
                rate,
            )
        if frame.input.is_trigger(Key.ENTER):
            self.back_to_menu()