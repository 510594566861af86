"""Shared fixtures for Wizard Extreme tests."""

import pytest

from wizard_extreme.game import Game
from wizard_extreme.models import Color, PlayingPhase, get_card


def card_id(color: Color, value: int) -> int:
    """Card id of a color/value pair."""
    return int(color) * 9 + (value - 1)


def play(card: int) -> int:
    """Action index that plays a card id."""
    return 16 + card


def rig_hands(game: Game, hands: list[list[int]]) -> None:
    """Replace every seat's hand with the given card ids."""
    for player, ids in zip(game.players, hands, strict=True):
        player.hand = sorted((get_card(i) for i in ids), key=lambda c: c.id)


def start_playing(game: Game, leader: int = 0) -> None:
    """Skip bidding and hand the lead to a seat."""
    for player in game.players:
        player.has_passed_bidding = True
    game.state = PlayingPhase()
    game.current_player_idx = leader


@pytest.fixture
def game() -> Game:
    """A freshly dealt game with seat 0 opening."""
    g = Game(seed=1234)
    g.reset(0)
    return g
