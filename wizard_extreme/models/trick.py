"""Trick model for a single trick within a round."""

from dataclasses import dataclass, field

from wizard_extreme.constants import NUM_PLAYERS
from wizard_extreme.models.card import Card, determine_winner
from wizard_extreme.models.enums import Color


@dataclass(frozen=True)
class PlayedCard:
    """Represents a card played by a seat in a trick."""

    player_index: int
    card: Card


@dataclass
class Trick:
    """Represents the trick currently being played.

    Attributes:
        played_cards: Cards played so far, in order

    """

    played_cards: list[PlayedCard] = field(default_factory=list)

    @property
    def lead_color(self) -> Color | None:
        """Color of the first card played, if any."""
        if not self.played_cards:
            return None
        return self.played_cards[0].card.color

    def add_card(self, player_index: int, card: Card) -> None:
        """Add a played card to this trick."""
        self.played_cards.append(PlayedCard(player_index, card))

    def is_empty(self) -> bool:
        """Check if no card has been played yet."""
        return not self.played_cards

    def is_complete(self, num_players: int = NUM_PLAYERS) -> bool:
        """Check if all players have played a card."""
        return len(self.played_cards) == num_players

    def determine_winner(self) -> PlayedCard:
        """Determine the winning play of this trick."""
        winner = determine_winner([pc.card for pc in self.played_cards])
        return self.played_cards[winner]

    def get_valid_cards(self, hand: list[Card]) -> list[Card]:
        """Get cards from a hand that may legally be played.

        The lead color must be followed when held; otherwise any card is
        allowed, trump included.
        """
        lead_color = self.lead_color
        if lead_color is None:
            return list(hand)

        following = [card for card in hand if card.color == lead_color]
        return following or list(hand)

    def clear(self) -> None:
        """Remove all played cards."""
        self.played_cards = []

    def __len__(self) -> int:
        return len(self.played_cards)

    def __str__(self) -> str:
        """Return string representation of the trick."""
        plays = ", ".join(f"{pc.player_index}:{pc.card}" for pc in self.played_cards)
        return f"Trick [{plays}]"
