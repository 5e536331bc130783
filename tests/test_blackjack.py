import random
from collections import Counter

from arcadebox.blackjack import (
    SUM,
    BlackjackGame,
    Card,
    Suit,
    build_deck,
    shuffle_deck,
)
from arcadebox.engine import Frame, Input, Key


class _ZeroRng:
    def randrange(self, stop):
        return 0


def frame_with(*keys):
    inp = Input()
    inp.press(*keys)
    return Frame(input=inp)


def card_images(frame):
    return [args for name, args in frame.canvas.commands if name == "image" and args[0] != "play"]


def test_deck_layout():
    deck = build_deck()
    assert len(deck) == SUM + 1
    assert deck[0] is None
    assert deck[-1] is None
    assert deck[1] == Card(Suit.HEART, 1)
    assert deck[13] == Card(Suit.DIAMOND, 1)
    assert deck[51] == Card(Suit.CLUB, 13)


def test_deck_suits():
    cards = [card for card in build_deck() if card is not None]
    counts = Counter(card.suit for card in cards)
    assert counts[Suit.DIAMOND] == 13
    assert counts[Suit.SPADE] == 13
    assert counts[Suit.CLUB] == 13
    assert counts[Suit.HEART] == 12
    assert Card(Suit.HEART, 13) not in cards
    assert len(set(cards)) == len(cards)


def test_card_image_name():
    assert Card(Suit.HEART, 1).image == "heart_1"
    assert Card(Suit.CLUB, 12).image == "club_12"


def test_shuffle_keeps_cards_and_first_slot():
    deck = build_deck()
    shuffled = list(deck)
    shuffle_deck(shuffled, random.Random(5))
    assert Counter(shuffled) == Counter(deck)
    assert shuffled[0] is None
    assert len(shuffled) == len(deck)


def test_shuffle_is_deterministic_for_a_seed():
    first, second = build_deck(), build_deck()
    shuffle_deck(first, random.Random(42))
    shuffle_deck(second, random.Random(42))
    assert first == second


def test_shuffle_without_swaps_keeps_order():
    deck = build_deck()
    shuffle_deck(deck, _ZeroRng())
    assert deck == build_deck()


def test_enter_on_title_returns_to_menu():
    calls = []
    game = BlackjackGame(on_back_to_menu=lambda: calls.append(1))
    game.proc(frame_with(Key.ENTER))
    assert calls == [1]
    assert game.state.name == "TITLE"


def test_enter_during_play_returns_to_menu():
    game = BlackjackGame(rng=random.Random(2))
    game.proc(frame_with(Key.LBUTTON))
    game.proc(frame_with(Key.ENTER))
    assert game.menu_requests == 1


def test_title_draws_heading():
    game = BlackjackGame()
    frame = Frame()
    game.proc(frame)
    assert "BLACKJACK" in frame.canvas.texts()