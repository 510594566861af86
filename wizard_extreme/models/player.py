"""Player model."""

from dataclasses import dataclass, field

import numpy as np

from wizard_extreme.constants import (
    BLACK_SEAL_COST,
    JOKER_SEAL_COST,
    LEFTOVER_SEAL_COST,
    NUM_COLORS,
    TOTAL_CARDS,
)
from wizard_extreme.models.card import Card
from wizard_extreme.models.enums import Color


def _empty_seals() -> dict[Color, int]:
    return {Color(c): 0 for c in range(NUM_COLORS)}


def _empty_mask() -> np.ndarray:
    return np.zeros(TOTAL_CARDS, dtype=np.bool_)


@dataclass
class Player:
    """Represents one seat at the table.

    Attributes:
        index: Seat number (0-2)
        hand: Cards currently held, sorted by id
        seals: Seals currently held, per color
        initial_seals: Seals ever acquired this round, per color (never decremented)
        joker_seals: Joker seals held
        black_seals: Penalty seals collected this round
        has_passed_bidding: Whether the player has passed in this round's bidding
        played_cards_mask: Cards this player has played this round

    """

    index: int
    hand: list[Card] = field(default_factory=list)
    seals: dict[Color, int] = field(default_factory=_empty_seals)
    initial_seals: dict[Color, int] = field(default_factory=_empty_seals)
    joker_seals: int = 0
    black_seals: int = 0
    has_passed_bidding: bool = False
    played_cards_mask: np.ndarray = field(default_factory=_empty_mask)

    def reset_round(self) -> None:
        """Reset player state for a new round."""
        self.hand = []
        self.seals = _empty_seals()
        self.initial_seals = _empty_seals()
        self.joker_seals = 0
        self.black_seals = 0
        self.has_passed_bidding = False
        self.played_cards_mask = _empty_mask()

    def remove_card(self, card_id: int) -> Card | None:
        """Remove a card from player's hand and return it."""
        for i, card in enumerate(self.hand):
            if card.id == card_id:
                return self.hand.pop(i)
        return None

    def gain_seal(self, color: Color) -> None:
        """Acquire one seal by taking or stealing it."""
        self.seals[color] += 1
        self.initial_seals[color] += 1

    def total_seals(self) -> int:
        """Count seals held across all colors."""
        return sum(self.seals.values())

    def round_score(self) -> int:
        """Score for the round: every leftover, black and joker seal costs points."""
        return -(
            self.total_seals() * LEFTOVER_SEAL_COST
            + self.black_seals * BLACK_SEAL_COST
            + self.joker_seals * JOKER_SEAL_COST
        )

    def __str__(self) -> str:
        """Return string representation."""
        seals = " ".join(f"{color.label}:{count}" for color, count in self.seals.items() if count)
        return f"Seat {self.index} - Seals [{seals}] Jokers {self.joker_seals} Black {self.black_seals}"
