"""Gymnasium environment for Wizard Extreme.

The agent controls one seat; the other two are played by bots. Each call to
``step`` applies the agent's action, then lets the bots act until the agent
is due again or the round ends.
"""

import logging
from typing import Any

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from wizard_extreme.bots import BaseBot, BotDifficulty, create_bot
from wizard_extreme.config import Settings, settings
from wizard_extreme.constants import (
    ACTION_SIZE,
    NUM_PLAYERS,
    OBSERVATION_SIZE,
    SEAL_NORMALIZATION,
    TRICKS_PER_ROUND,
)
from wizard_extreme.game import Game, StepResult
from wizard_extreme.models.actions import describe_action

logger = logging.getLogger(__name__)


class WizardExtremeEnv(gym.Env["np.ndarray", int]):
    """Masked action environment for a single Wizard Extreme round."""

    # Override as dict literal - gymnasium expects this pattern
    metadata = {"render_modes": ["ansi"], "render_fps": 4}  # noqa: RUF012

    INVALID_MOVE_PENALTY = -1.0
    TRUNCATION_PENALTY = -10.0
    # Black seals can reach one per trick
    OBSERVATION_HIGH = TRICKS_PER_ROUND / SEAL_NORMALIZATION

    def __init__(
        self,
        agent_seat: int | None = None,
        opponent_bot_type: str | None = None,
        opponent_difficulty: str = "medium",
        max_invalid_moves: int | None = None,
        render_mode: str | None = None,
        config: Settings | None = None,
    ) -> None:
        """Initialize the environment.

        Args:
            agent_seat: Seat controlled by the agent (default from settings)
            opponent_bot_type: "random" or "rule_based" (default from settings)
            opponent_difficulty: Bot difficulty level ("easy", "medium", or "hard")
            max_invalid_moves: Invalid moves before the episode is truncated
            render_mode: Rendering mode (only "ansi" is supported)
            config: Settings providing the defaults

        """
        super().__init__()
        config = config or settings
        self.agent_seat = config.agent_seat if agent_seat is None else agent_seat
        self.opponent_bot_type = opponent_bot_type or config.opponent_bot_type
        self.opponent_difficulty = BotDifficulty(opponent_difficulty.lower())
        self.max_invalid_moves = max_invalid_moves or config.max_invalid_moves
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=0.0, high=self.OBSERVATION_HIGH, shape=(OBSERVATION_SIZE,), dtype=np.float32
        )
        self.action_space = spaces.Discrete(ACTION_SIZE)

        self.game: Game | None = None
        self.bots: dict[int, BaseBot] = {}
        self.invalid_move_count = 0

    @property
    def _game(self) -> Game:
        """Get the game, asserting it exists.

        Use this in methods that should only be called after reset().
        """
        assert self.game is not None, "Game not initialized. Call reset() first."
        return self.game

    def action_masks(self) -> np.ndarray:
        """Return boolean mask of the agent's legal actions.

        This enables MaskablePPO to only sample from valid actions.
        """
        return self._game.get_legal_actions(self.agent_seat)

    def reset(
        self,
        *,
        seed: int | None = None,
        options: dict[str, Any] | None = None,
    ) -> tuple[np.ndarray, dict[str, Any]]:
        """Deal a new round.

        Args:
            seed: Random seed
            options: ``starting_player_offset`` selects the opening seat (default 0)

        Returns:
            Tuple of (observation, info)

        """
        super().reset(seed=seed)
        starter = (options or {}).get("starting_player_offset", 0)

        self.game = Game(starting_player_offset=starter, rng=self.np_random)
        self.game.reset()
        self.bots = {
            seat: create_bot(self.opponent_bot_type, seat, self.opponent_difficulty, self.np_random)
            for seat in range(NUM_PLAYERS)
            if seat != self.agent_seat
        }
        self.invalid_move_count = 0

        # Bidding never finishes without the agent, so no trick reward is possible here
        self._play_opponents()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> tuple[np.ndarray, float, bool, bool, dict[str, Any]]:
        """Take a step in the environment.

        Args:
            action: Action index for the agent's seat

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)

        """
        if self.game is None:
            msg = "Must call reset() before step()"
            raise RuntimeError(msg)
        if self.game.is_round_over():
            msg = "Round is over, call reset()"
            raise RuntimeError(msg)

        result = self.game.step(int(action))
        if result.info.get("illegal_action"):
            self.invalid_move_count += 1
            logger.warning(
                "Agent attempted invalid action %d (count: %d)", int(action), self.invalid_move_count
            )
            truncated = self.invalid_move_count >= self.max_invalid_moves
            reward = self.TRUNCATION_PENALTY if truncated else self.INVALID_MOVE_PENALTY
            return self._get_observation(), reward, False, truncated, self._get_info()

        reward = result.info["rewards"][self.agent_seat]
        if not result.done:
            bot_reward, last = self._play_opponents()
            reward += bot_reward
            result = last or result

        terminated = result.done
        if terminated:
            reward += result.info["scores"][self.agent_seat]

        return self._get_observation(), float(reward), terminated, False, self._get_info()

    def _play_opponents(self) -> tuple[float, StepResult | None]:
        """Let bots act until the agent is due or the round ends.

        Returns:
            Reward the agent collected meanwhile and the last step result

        """
        game = self._game
        reward = 0.0
        last: StepResult | None = None

        while not game.is_round_over() and game.current_player_idx != self.agent_seat:
            seat = game.current_player_idx
            action = self.bots[seat].act(game.get_state(seat), game.get_legal_actions(seat))
            last = game.step(action)
            reward += last.info["rewards"][self.agent_seat]

        return reward, last

    def _get_observation(self) -> np.ndarray:
        return self._game.get_state(self.agent_seat)

    def _get_info(self) -> dict[str, Any]:
        """Get additional info about current state."""
        game = self._game
        agent = game.players[self.agent_seat]
        info: dict[str, Any] = {
            "phase": game.phase.value,
            "tricks_played": game.tricks_played,
            "invalid_moves": self.invalid_move_count,
            "agent_seals": agent.total_seals(),
            "agent_black_seals": agent.black_seals,
        }
        if game.is_round_over():
            info["scores"] = game.calculate_scores()
        return info

    def render(self) -> Any:
        """Render the environment."""
        if self.render_mode is None:
            return None
        if not self.game:
            return "No game in progress"
        return self._render_ansi()

    def _render_ansi(self) -> str:
        game = self._game
        output = [f"\n{'=' * 60}", f"Wizard Extreme - {game}", f"{'=' * 60}"]

        pool = " ".join(f"{c.label}:{n}" for c, n in game.pool_seals.items())
        output.append(f"Pool: {pool} | Jokers: {game.joker_pool}")

        for player in game.players:
            tag = " [AGENT]" if player.index == self.agent_seat else " [BOT]"
            output.append(f"  {player}{tag}")

        if not game.current_trick.is_empty():
            output.append(f"\n{game.current_trick}")

        agent = game.players[self.agent_seat]
        output.append("\nAgent's Hand: " + " ".join(str(card) for card in agent.hand))
        legal = np.flatnonzero(self.action_masks())
        output.append("Legal: " + ", ".join(describe_action(int(a)) for a in legal))
        output.append(f"{'=' * 60}\n")
        return "\n".join(output)

    def close(self) -> None:
        """Clean up resources."""
        self.game = None
        self.bots = {}

