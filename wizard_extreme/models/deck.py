"""Deck model for shuffling and dealing cards."""

import numpy as np

from wizard_extreme.models.card import Card, get_all_cards


class Deck:
    """Represents the 45-card Wizard Extreme deck.

    Five colors of nine cards each; Red is trump. Shuffling draws from a
    ``numpy.random.Generator`` so a seeded generator reproduces the deal.
    """

    def __init__(self, rng: np.random.Generator | None = None) -> None:
        """Initialize an empty deck."""
        self.cards: list[Card] = []
        self.rng = rng if rng is not None else np.random.default_rng()

    def fill(self) -> None:
        """Fill the deck with all 45 cards."""
        self.cards = get_all_cards()

    def shuffle(self) -> None:
        """Fill and shuffle the deck."""
        self.fill()
        order = self.rng.permutation(len(self.cards))
        self.cards = [self.cards[i] for i in order]

    def deal(self, num_players: int, cards_per_player: int) -> list[list[Card]]:
        """
        Deal cards to players.

        Args:
            num_players: Number of players to deal to
            cards_per_player: Number of cards per player

        Returns:
            List of hands, each sorted by card id
        """
        if not self.cards:
            self.shuffle()

        hands: list[list[Card]] = []
        index = 0

        for _ in range(num_players):
            hand = sorted(self.cards[index : index + cards_per_player], key=lambda c: c.id)
            hands.append(hand)
            index += cards_per_player

        return hands
