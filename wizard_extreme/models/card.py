"""Card model and trick-winner logic."""

from dataclasses import dataclass

from wizard_extreme.constants import CARDS_PER_COLOR, NUM_COLORS, TOTAL_CARDS
from wizard_extreme.models.enums import Color


@dataclass(frozen=True)
class Card:
    """Represents a card in Wizard Extreme.

    Attributes:
        color: Card color (RED is trump)
        value: Card value, 1-9

    """

    color: Color
    value: int

    @property
    def id(self) -> int:
        """Unique card identifier, 0-44."""
        return int(self.color) * CARDS_PER_COLOR + (self.value - 1)

    def is_trump(self) -> bool:
        """Check if card is of the trump color."""
        return self.color.is_trump

    def __str__(self) -> str:
        """Return string representation of card."""
        return f"{self.color.label}{self.value}"


# All cards in the deck, indexed by id
_CARDS: tuple[Card, ...] = tuple(
    Card(Color(color), value)
    for color in range(NUM_COLORS)
    for value in range(1, CARDS_PER_COLOR + 1)
)


def get_card(card_id: int) -> Card:
    """Get card by ID."""
    if not 0 <= card_id < TOTAL_CARDS:
        msg = f"Card id {card_id} out of range"
        raise ValueError(msg)
    return _CARDS[card_id]


def get_all_cards() -> list[Card]:
    """Get all cards in the deck, ordered by id."""
    return list(_CARDS)


def beats(candidate: Card, best: Card, lead_color: Color) -> bool:
    """Check if candidate takes the lead from the current best card.

    Trump beats any non-trump and higher trump beats lower trump. A card of the
    lead color beats a lower lead-color card unless a trump is already winning.
    Off-color cards never win.
    """
    if candidate.is_trump():
        return not best.is_trump() or candidate.value > best.value
    if candidate.color == lead_color and not best.is_trump():
        return candidate.value > best.value
    return False


def determine_winner(cards: list[Card]) -> int:
    """Determine the position of the winning card in a trick.

    Args:
        cards: Cards in play order; the first card sets the lead color

    Returns:
        Index into ``cards`` of the winning card

    """
    if not cards:
        msg = "Cannot determine the winner of an empty trick"
        raise ValueError(msg)

    lead_color = cards[0].color
    best_index = 0
    for index, card in enumerate(cards[1:], start=1):
        if beats(card, cards[best_index], lead_color):
            best_index = index
    return best_index
