"""Reinforcement Learning bot interface.

This bot wraps an already-loaded policy. Two model shapes are supported:

- MaskablePPO-style models exposing ``predict(obs, deterministic, action_masks)``
- Raw policies exposing ``action_logits(obs)``; the logits are masked and an
  action is sampled from the resulting softmax

Loading models from disk is left to the caller.
"""

import logging
from typing import Any

import numpy as np

from wizard_extreme.bots.base_bot import BaseBot, BotDifficulty, legal_indices
from wizard_extreme.constants import ACTION_SIZE
from wizard_extreme.exceptions import DimensionMismatchError

logger = logging.getLogger(__name__)

MASKED_LOGIT = -1e15


def masked_softmax(logits: np.ndarray, legal_mask: np.ndarray) -> np.ndarray:
    """Softmax over the legal actions; illegal actions get zero probability."""
    logits = np.asarray(logits, dtype=np.float64)
    if len(logits) != ACTION_SIZE:
        raise DimensionMismatchError("logits", ACTION_SIZE, len(logits))

    mask = np.asarray(legal_mask, dtype=np.bool_)
    masked = np.where(mask, logits, MASKED_LOGIT)
    exp = np.exp(masked - masked.max())
    exp[~mask] = 0.0
    return exp / exp.sum()


class RLBot(BaseBot):
    """Bot that asks a trained policy for its action.

    Failures inside the model are handled by ``BaseBot.act``, which falls back
    to a random legal action.
    """

    def __init__(
        self,
        seat: int,
        model: Any | None = None,
        difficulty: BotDifficulty = BotDifficulty.HARD,
        deterministic: bool = False,
        rng: np.random.Generator | None = None,
    ) -> None:
        """Initialize RL bot.

        Args:
            seat: Seat this bot plays
            model: Loaded policy (or None to play randomly)
            difficulty: Difficulty label
            deterministic: Take the most likely action instead of sampling
            rng: Generator used for sampling

        """
        super().__init__(seat, difficulty, rng)
        self.model = model
        self.deterministic = deterministic

        if model is None:
            logger.warning("RLBot initialized without model, using random fallback")

    def choose_action(self, observation: np.ndarray, legal_mask: np.ndarray) -> int:
        """Query the model for an action."""
        if self.model is None:
            return self.random_action(legal_mask)

        if hasattr(self.model, "predict"):
            action, _ = self.model.predict(
                observation, deterministic=self.deterministic, action_masks=legal_mask
            )
            return int(action.item() if hasattr(action, "item") else action)

        probs = masked_softmax(self.model.action_logits(observation), legal_mask)
        if self.deterministic:
            return int(np.argmax(probs))

        legal = legal_indices(legal_mask)
        if len(legal) == 1:
            return int(legal[0])
        return int(self.rng.choice(ACTION_SIZE, p=probs))
