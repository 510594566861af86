"""Match driver: plays rounds between three decision-makers.

A match is a fixed number of rounds. Round ``k`` is opened by seat
``k mod 3``; round scores are summed into match totals and the seat with the
highest total wins.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np

from wizard_extreme.bots.base_bot import BaseBot
from wizard_extreme.config import Settings, settings
from wizard_extreme.constants import NUM_PLAYERS
from wizard_extreme.game import Game
from wizard_extreme.services.log_service import LogService


@dataclass
class MatchResult:
    """Scores of a finished (or running) match.

    Attributes:
        round_scores: Scores per seat for every completed round
        total_scores: Sum of round scores per seat

    """

    round_scores: list[list[float]] = field(default_factory=list)
    total_scores: list[float] = field(default_factory=lambda: [0.0] * NUM_PLAYERS)

    @property
    def winner(self) -> int | None:
        """Seat with the highest total, or None before any round finished."""
        if not self.round_scores:
            return None
        return int(np.argmax(self.total_scores))

    def add_round(self, scores: Sequence[float]) -> None:
        """Record one round's scores."""
        self.round_scores.append(list(scores))
        self.total_scores = [t + s for t, s in zip(self.total_scores, scores, strict=True)]


class MatchService:
    """Plays rounds of Wizard Extreme between three bots."""

    def __init__(
        self,
        bots: Sequence[BaseBot],
        config: Settings | None = None,
        game: Game | None = None,
        log_service: LogService | None = None,
    ) -> None:
        """Initialize the match.

        Args:
            bots: One decision-maker per seat, in seat order
            config: Settings (match length, shuffle seed)
            game: Game to drive; created from ``config.seed`` when None
            log_service: Structured logger

        """
        if len(bots) != NUM_PLAYERS:
            msg = f"Need exactly {NUM_PLAYERS} bots, got {len(bots)}"
            raise ValueError(msg)

        self.bots = list(bots)
        self.config = config or settings
        self.game = game or Game(seed=self.config.seed)
        self.log = log_service or LogService()
        self.result = MatchResult()
        self.illegal_actions = 0

    @property
    def rounds_played(self) -> int:
        """Number of completed rounds."""
        return len(self.result.round_scores)

    def is_complete(self) -> bool:
        """Check if every round of the match has been played."""
        return self.rounds_played >= self.config.match_rounds

    def play_round(self) -> list[float]:
        """Play one full round and record its scores.

        Returns:
            Scores per seat for the round

        """
        starter = self.rounds_played % NUM_PLAYERS
        self.game.reset(starter)
        self.log.info({"event": "round_start", "round": self.rounds_played + 1, "starter": starter})

        while True:
            seat = self.game.current_player_idx
            observation = self.game.get_state(seat)
            legal_mask = self.game.get_legal_actions(seat)
            action = self.bots[seat].act(observation, legal_mask)

            self.log.debug(
                {"event": "action", "round": self.rounds_played + 1, "seat": seat, "action": action}
            )

            result = self.game.step(action)
            if result.info.get("illegal_action"):
                self.illegal_actions += 1
                self.log.warning(
                    {
                        "event": "illegal_action",
                        "seat": seat,
                        "action": action,
                        "phase": self.game.phase.value,
                    }
                )
            if result.done:
                break

        scores = result.info["scores"]
        self.result.add_round(scores)
        self.log.info(
            {
                "event": "round_end",
                "round": self.rounds_played,
                "scores": scores,
                "totals": self.result.total_scores,
            }
        )
        return scores

    def play_match(self) -> MatchResult:
        """Play the remaining rounds of the match."""
        while not self.is_complete():
            self.play_round()

        self.log.info(
            {"event": "match_end", "totals": self.result.total_scores, "winner": self.result.winner}
        )
        return self.result
