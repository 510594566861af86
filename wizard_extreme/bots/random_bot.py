"""Random bot that makes random legal moves."""

import numpy as np

from wizard_extreme.bots.base_bot import BaseBot, BotDifficulty


class RandomBot(BaseBot):
    """Bot that makes completely random decisions.

    This serves as a baseline for evaluating other bot strategies
    and provides a simple opponent for testing.
    """

    def __init__(
        self,
        seat: int,
        _difficulty: BotDifficulty = BotDifficulty.RANDOM,
        rng: np.random.Generator | None = None,
    ) -> None:
        """Initialize random bot."""
        # Random bot ignores difficulty but accepts it for API compatibility
        super().__init__(seat, BotDifficulty.RANDOM, rng)

    def choose_action(self, _observation: np.ndarray, legal_mask: np.ndarray) -> int:
        """Pick a uniformly random legal action."""
        return self.random_action(legal_mask)
