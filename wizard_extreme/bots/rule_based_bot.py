"""Rule-based bot with a heuristic strategy for Wizard Extreme."""

import numpy as np

from wizard_extreme.bots.base_bot import BaseBot, BotDifficulty, legal_indices
from wizard_extreme.constants import (
    DISCARD_OFFSET,
    NUM_COLORS,
    NUM_PLAYERS,
    PASS_ACTION,
    PLAY_CARD_OFFSET,
    SEAL_NORMALIZATION,
    STEAL_OFFSET,
    TAKE_SEAL_OFFSET,
    TOTAL_CARDS,
    USE_JOKER_ACTION,
)
from wizard_extreme.encoding.observation import observation_slices
from wizard_extreme.models.card import Card, beats, get_card
from wizard_extreme.models.enums import TRUMP, Color

# Card value thresholds for bidding strategy
HIGH_CARD_THRESHOLD = 7
HIGH_TRUMP_THRESHOLD = 5

# Strategy thresholds
EASY_MISTAKE_PROBABILITY = 0.3

_SLICES = observation_slices()


class RuleBasedBot(BaseBot):
    """Bot that uses heuristics and game rules to make decisions.

    Bidding Strategy:
    - Count likely trick winners per color (high cards, mid-to-high trumps)
    - Take one seal per likely winner, then pass
    - On HARD, steal a needed color once its pool runs dry

    Playing Strategy:
    - Try to win a trick only when holding a seal that winning would discard
    - Otherwise duck with the lowest card that cannot win
    - When paying for a trick, spend a joker first (leftover jokers cost more)
    """

    def choose_action(self, observation: np.ndarray, legal_mask: np.ndarray) -> int:
        """Pick an action for the phase encoded in the observation."""
        legal = legal_indices(legal_mask)
        phase = observation[_SLICES["phase"]]

        if self.difficulty == BotDifficulty.EASY and self.rng.random() < EASY_MISTAKE_PROBABILITY:
            return int(self.rng.choice(legal))

        if phase[0]:
            return self._bid(observation, legal_mask)
        if phase[1]:
            return self._play(observation, legal)
        return self._discard(legal)

    # -------------------------------------------------------------------------
    # Bidding
    # -------------------------------------------------------------------------

    def _bid(self, observation: np.ndarray, legal_mask: np.ndarray) -> int:
        wanted = self._wanted_seals(self._hand(observation))
        held = np.rint(observation[_SLICES["seals"]][:NUM_COLORS] * SEAL_NORMALIZATION)

        for color in np.argsort(-wanted, kind="stable"):
            if held[color] >= wanted[color]:
                continue
            take = TAKE_SEAL_OFFSET + int(color)
            if legal_mask[take]:
                return take
            if self.difficulty == BotDifficulty.HARD:
                for rel in (1, 2):
                    steal = STEAL_OFFSET + int(color) * 2 + (rel - 1)
                    if legal_mask[steal]:
                        return steal
        return PASS_ACTION

    def _wanted_seals(self, hand: list[Card]) -> np.ndarray:
        """Estimate how many tricks each color of the hand should win."""
        wanted = np.zeros(NUM_COLORS, dtype=np.int64)
        for card in hand:
            threshold = HIGH_TRUMP_THRESHOLD if card.is_trump() else HIGH_CARD_THRESHOLD
            if card.value >= threshold:
                wanted[card.color] += 1
        return wanted

    # -------------------------------------------------------------------------
    # Playing
    # -------------------------------------------------------------------------

    def _play(self, observation: np.ndarray, legal: np.ndarray) -> int:
        cards = sorted((get_card(int(a) - PLAY_CARD_OFFSET) for a in legal), key=lambda c: c.value)
        seals = np.rint(observation[_SLICES["seals"]][:NUM_COLORS] * SEAL_NORMALIZATION)
        trick = self._trick_in_order(observation)

        if not trick:
            # Lead the strongest card we can cash a seal with, else the weakest non-trump
            cashable = [c for c in cards if seals[c.color] > 0]
            if cashable:
                return PLAY_CARD_OFFSET + cashable[-1].id
            plain = [c for c in cards if not c.is_trump()] or cards
            return PLAY_CARD_OFFSET + plain[0].id

        lead_color = trick[0].color
        best = trick[0]
        for card in trick[1:]:
            if beats(card, best, lead_color):
                best = card

        winners = [c for c in cards if beats(c, best, lead_color)]
        payable = [c for c in winners if self._can_pay(c, lead_color, seals)]
        if payable:
            return PLAY_CARD_OFFSET + payable[0].id

        losers = [c for c in cards if not beats(c, best, lead_color)]
        return PLAY_CARD_OFFSET + (losers or cards)[0].id

    @staticmethod
    def _can_pay(card: Card, lead_color: Color, seals: np.ndarray) -> bool:
        """Check if winning with ``card`` would let us discard a held seal."""
        if card.is_trump():
            return seals[lead_color] > 0 or seals[TRUMP] > 0
        return seals[card.color] > 0

    # -------------------------------------------------------------------------
    # Discarding
    # -------------------------------------------------------------------------

    def _discard(self, legal: np.ndarray) -> int:
        if USE_JOKER_ACTION in legal:
            return USE_JOKER_ACTION
        discards = [int(a) for a in legal if a >= DISCARD_OFFSET]
        return discards[0] if discards else int(legal[0])

    # -------------------------------------------------------------------------
    # Observation helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _hand(observation: np.ndarray) -> list[Card]:
        return [get_card(int(i)) for i in np.flatnonzero(observation[_SLICES["hand"]] > 0.5)]

    @staticmethod
    def _trick_in_order(observation: np.ndarray) -> list[Card]:
        """Cards of the current trick in play order.

        Rows are relative seats; with ``n`` cards down, the leader sits ``n``
        seats before the viewer.
        """
        matrix = observation[_SLICES["current_trick"]].reshape(NUM_PLAYERS, TOTAL_CARDS)
        played = int(sum(matrix[row].any() for row in range(NUM_PLAYERS)))
        cards = []
        for step in range(played):
            row = (step - played) % NUM_PLAYERS
            ids = np.flatnonzero(matrix[row] > 0.5)
            if len(ids):
                cards.append(get_card(int(ids[0])))
        return cards
