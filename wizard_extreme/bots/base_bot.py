"""Base class for all bot strategies."""

import logging
from abc import ABC, abstractmethod
from enum import Enum

import numpy as np

from wizard_extreme.constants import ACTION_SIZE, OBSERVATION_SIZE
from wizard_extreme.exceptions import DimensionMismatchError

logger = logging.getLogger(__name__)


class BotDifficulty(str, Enum):
    """Bot difficulty levels."""

    RANDOM = "random"
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


def check_dimensions(observation: np.ndarray, legal_mask: np.ndarray) -> None:
    """Verify vectors handed to a decision-maker have the engine's lengths.

    Raises:
        DimensionMismatchError: If either vector has the wrong length

    """
    if len(observation) != OBSERVATION_SIZE:
        raise DimensionMismatchError("observation", OBSERVATION_SIZE, len(observation))
    if len(legal_mask) != ACTION_SIZE:
        raise DimensionMismatchError("legal_mask", ACTION_SIZE, len(legal_mask))


def legal_indices(legal_mask: np.ndarray) -> np.ndarray:
    """Indices of the legal actions in a mask."""
    return np.flatnonzero(np.asarray(legal_mask, dtype=np.bool_))


class BaseBot(ABC):
    """Abstract base class for decision-makers seated at the table.

    Implementations only see what any decision-maker sees: the observation
    vector and the legal-action mask of their seat.
    """

    def __init__(
        self,
        seat: int,
        difficulty: BotDifficulty = BotDifficulty.MEDIUM,
        rng: np.random.Generator | None = None,
    ) -> None:
        """Initialize the bot.

        Args:
            seat: Seat this bot plays
            difficulty: Bot difficulty level
            rng: Generator used for random choices and the fallback

        """
        self.seat = seat
        self.difficulty = difficulty
        self.rng = rng if rng is not None else np.random.default_rng()

    @abstractmethod
    def choose_action(self, observation: np.ndarray, legal_mask: np.ndarray) -> int:
        """Choose an action.

        Args:
            observation: 373-dim observation for this bot's seat
            legal_mask: 67-wide legal-action mask for this bot's seat

        Returns:
            Action index with ``legal_mask[index]`` set

        """

    def act(self, observation: np.ndarray, legal_mask: np.ndarray) -> int:
        """Choose an action, falling back to a random legal one if the strategy fails.

        Wrong-sized inputs are not recoverable and propagate to the caller; any
        error raised while choosing is logged and replaced by a random legal action.
        """
        check_dimensions(observation, legal_mask)

        try:
            action = int(self.choose_action(observation, legal_mask))
        except Exception as e:  # noqa: BLE001
            logger.warning("%s failed: %s, using random fallback", self, e)
            return self.random_action(legal_mask)

        if not 0 <= action < len(legal_mask) or not legal_mask[action]:
            logger.warning("%s chose illegal action %d, using random fallback", self, action)
            return self.random_action(legal_mask)
        return action

    def random_action(self, legal_mask: np.ndarray) -> int:
        """Sample uniformly among the legal actions."""
        legal = legal_indices(legal_mask)
        if len(legal) == 0:
            msg = "No legal actions available"
            raise ValueError(msg)
        return int(self.rng.choice(legal))

    def __str__(self) -> str:
        """Return string representation."""
        return f"{self.__class__.__name__} seat {self.seat} ({self.difficulty.value})"
