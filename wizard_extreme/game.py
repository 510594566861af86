"""Game aggregate and phase state machine for a round of Wizard Extreme.

A ``Game`` owns everything that changes during a round: three seats, the seal
and joker pools, the trick in progress and the phase. ``step`` is the only
entry point that mutates it; every rule is checked through ``legal_actions``
so the mask handed to a decision-maker and the moves ``step`` accepts can
never disagree.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from wizard_extreme.constants import (
    CARDS_PER_PLAYER,
    COLOR_POOL_SIZE,
    DISCARD_REWARD,
    JOKER_POOL_SIZE,
    NUM_PLAYERS,
    PENALTY_REWARD,
    TOTAL_CARDS,
    TRICKS_PER_ROUND,
    TRUMP_POOL_SIZE,
)
from wizard_extreme.encoding import encode_observation, legal_action_mask
from wizard_extreme.exceptions import InvalidActionError
from wizard_extreme.models import (
    TRUMP,
    Action,
    BiddingPhase,
    Color,
    Deck,
    Discard,
    DiscardingPhase,
    Pass,
    Phase,
    PhaseState,
    PlayCard,
    Player,
    PlayingPhase,
    Steal,
    TakeSeal,
    Trick,
    UseJoker,
    decode_action,
)

logger = logging.getLogger(__name__)


def initial_pool() -> dict[Color, int]:
    """Seal supply at the start of a round: five trump seals, three of every other color."""
    return {color: TRUMP_POOL_SIZE if color.is_trump else COLOR_POOL_SIZE for color in Color}


@dataclass
class StepResult:
    """Outcome of one ``Game.step`` call.

    Attributes:
        observation: Observation for the seat due to act next
        reward: Reward earned by the seat that acted
        done: Whether the round is over
        info: ``rewards`` per seat, ``scores`` once done, ``illegal_action`` on a rejected move

    """

    observation: np.ndarray
    reward: float
    done: bool
    info: dict[str, Any] = field(default_factory=dict)


class Game:
    """One table of three seats, re-dealt by ``reset`` for every round.

    Args:
        starting_player_offset: Seat that opens bidding and leads the first trick
        seed: Seed for the shuffle generator, ignored when ``rng`` is given
        rng: Generator used for shuffling

    """

    def __init__(
        self,
        starting_player_offset: int = 0,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.deck = Deck(self.rng)
        self.players: tuple[Player, ...] = tuple(Player(index=i) for i in range(NUM_PLAYERS))
        self.starting_player_offset = starting_player_offset % NUM_PLAYERS
        self._clear_round()

    def _clear_round(self) -> None:
        self.pool_seals = initial_pool()
        self.joker_pool = JOKER_POOL_SIZE
        self.discarded_seals: dict[Color, int] = {color: 0 for color in Color}
        self.discarded_jokers = 0
        self.round_history_mask = np.zeros(TOTAL_CARDS, dtype=np.bool_)
        self.current_trick = Trick()
        self.state: PhaseState = BiddingPhase()
        self.tricks_played = 0
        self.current_player_idx = self.starting_player_offset

    # -------------------------------------------------------------------------
    # Read access
    # -------------------------------------------------------------------------

    @property
    def phase(self) -> Phase:
        """Current phase name."""
        return self.state.phase

    @property
    def pending_discard(self) -> DiscardingPhase | None:
        """Outcome of the trick awaiting a discard decision, if any."""
        if isinstance(self.state, DiscardingPhase):
            return self.state
        return None

    def is_round_over(self) -> bool:
        """Check if all fifteen tricks have been finalized."""
        return self.tricks_played == TRICKS_PER_ROUND and self.current_trick.is_empty()

    def calculate_scores(self) -> list[float]:
        """Round scores per seat."""
        return [float(player.round_score()) for player in self.players]

    def get_state(self, seat: int) -> np.ndarray:
        """Observation vector for a seat."""
        return encode_observation(self, seat)

    def get_legal_actions(self, seat: int) -> np.ndarray:
        """Legal-action mask for a seat."""
        return legal_action_mask(self, seat)

    def legal_actions(self, seat: int) -> list[Action]:  # noqa: C901
        """List the actions a seat may take in the current phase."""
        if self.is_round_over():
            return []

        player = self.players[seat]
        state = self.state

        if isinstance(state, BiddingPhase):
            actions: list[Action] = [TakeSeal(c) for c in Color if self.pool_seals[c] > 0]
            actions.append(Pass())
            for color in Color:
                if self.pool_seals[color] > 0:
                    continue
                for rel in (1, 2):
                    target = self.players[(seat - rel) % NUM_PLAYERS]
                    if target.seals[color] > 0:
                        actions.append(Steal(color, rel))
            return actions

        if isinstance(state, PlayingPhase):
            return [PlayCard(card.id) for card in self.current_trick.get_valid_cards(player.hand)]

        if seat != state.winner:
            return []
        actions = [Discard(c) for c in state.allowed_colors() if player.seals[c] > 0]
        if player.joker_seals > 0:
            actions.append(UseJoker())
        return actions

    # -------------------------------------------------------------------------
    # Driver contract
    # -------------------------------------------------------------------------

    def reset(self, starting_player_offset: int | None = None) -> np.ndarray:
        """Shuffle, deal and open the bidding of a new round.

        Args:
            starting_player_offset: New opening seat; keeps the previous one when None

        Returns:
            Observation for the opening seat

        """
        if starting_player_offset is not None:
            self.starting_player_offset = starting_player_offset % NUM_PLAYERS

        self.deck.shuffle()
        hands = self.deck.deal(NUM_PLAYERS, CARDS_PER_PLAYER)
        for player, hand in zip(self.players, hands, strict=True):
            player.reset_round()
            player.hand = hand
        self._clear_round()

        logger.debug("New round, seat %d opens", self.starting_player_offset)
        return self.get_state(self.current_player_idx)

    def step(self, action_index: int) -> StepResult:
        """Apply one action for the current seat.

        Illegal or malformed actions leave the game untouched; they are
        reported through ``info["illegal_action"]`` and earn no reward. Only the
        step that finalizes the fifteenth trick reports ``done``; rejected steps
        after it do not.
        """
        seat = self.current_player_idx
        rewards = {i: 0.0 for i in range(NUM_PLAYERS)}
        info: dict[str, Any] = {"rewards": rewards}

        try:
            action: Action | None = decode_action(action_index)
        except InvalidActionError as e:
            logger.warning("Rejected action from seat %d: %s", seat, e)
            action = None

        if action is None or action not in self.legal_actions(seat):
            if action is not None:
                logger.warning(
                    "Illegal action %s from seat %d during %s", action, seat, self.phase.value
                )
            info["illegal_action"] = True
            return StepResult(self.get_state(seat), 0.0, False, info)

        self._apply(seat, action, rewards)

        done = self.is_round_over()
        if done:
            info["scores"] = self.calculate_scores()
            logger.info("Round over, scores: %s", info["scores"])

        return StepResult(self.get_state(self.current_player_idx), rewards[seat], done, info)

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def _apply(self, seat: int, action: Action, rewards: dict[int, float]) -> None:
        player = self.players[seat]

        if isinstance(action, TakeSeal):
            self.pool_seals[action.color] -= 1
            player.gain_seal(action.color)
        elif isinstance(action, Pass):
            self._pass_bidding(player)
        elif isinstance(action, Steal):
            self._steal(player, action)
        elif isinstance(action, PlayCard):
            self._play_card(player, action.card_id, rewards)
        elif isinstance(action, Discard):
            rewards[seat] = self._discard_seal(player, action.color)
            self._finish_trick(seat)
        elif isinstance(action, UseJoker):
            player.joker_seals -= 1
            self.discarded_jokers += 1
            rewards[seat] = DISCARD_REWARD
            self._finish_trick(seat)

    def _pass_bidding(self, player: Player) -> None:
        player.has_passed_bidding = True

        if all(p.has_passed_bidding for p in self.players):
            self.state = PlayingPhase()
            self.current_player_idx = self.starting_player_offset
            logger.debug("Bidding closed, pool left: %s", self.pool_seals)
            return

        next_idx = (player.index + 1) % NUM_PLAYERS
        while self.players[next_idx].has_passed_bidding:
            next_idx = (next_idx + 1) % NUM_PLAYERS
        self.current_player_idx = next_idx

    def _steal(self, thief: Player, action: Steal) -> None:
        victim = self.players[(thief.index - action.target_rel) % NUM_PLAYERS]
        victim.seals[action.color] -= 1
        thief.gain_seal(action.color)

        # The victim is compensated with a joker while any remain
        if self.joker_pool > 0:
            victim.joker_seals += 1
            self.joker_pool -= 1

    def _play_card(self, player: Player, card_id: int, rewards: dict[int, float]) -> None:
        card = player.remove_card(card_id)
        player.played_cards_mask[card.id] = True
        self.round_history_mask[card.id] = True
        self.current_trick.add_card(player.index, card)

        if not self.current_trick.is_complete():
            self.current_player_idx = (player.index + 1) % NUM_PLAYERS
            return

        winning = self.current_trick.determine_winner()
        pending = DiscardingPhase(
            winner=winning.player_index,
            lead_color=self.current_trick.lead_color,
            win_card=winning.card,
        )

        if self._needs_decision(pending):
            self.state = pending
            self.current_player_idx = pending.winner
            if self.legal_actions(pending.winner):
                return
            # No seal or joker can pay for the trick
            rewards[pending.winner] = self._penalize(self.players[pending.winner])
        else:
            rewards[pending.winner] = self._auto_resolve(pending)
        self._finish_trick(pending.winner)

    def _needs_decision(self, pending: DiscardingPhase) -> bool:
        """Check if the trick winner has a real choice of how to pay."""
        winner = self.players[pending.winner]
        if winner.joker_seals > 0:
            return True
        held = [c for c in pending.allowed_colors() if winner.seals[c] > 0]
        return len(held) > 1

    def _auto_resolve(self, pending: DiscardingPhase) -> float:
        winner = self.players[pending.winner]
        if pending.win_card.is_trump():
            preference = (pending.lead_color, TRUMP)
        else:
            preference = (pending.win_card.color,)

        for color in preference:
            if winner.seals[color] > 0:
                return self._discard_seal(winner, color)
        return self._penalize(winner)

    def _discard_seal(self, player: Player, color: Color) -> float:
        player.seals[color] -= 1
        self.discarded_seals[color] += 1
        return DISCARD_REWARD

    def _penalize(self, player: Player) -> float:
        player.black_seals += 1
        logger.debug("Seat %d takes a black seal", player.index)
        return PENALTY_REWARD

    def _finish_trick(self, winner: int) -> None:
        logger.debug("Trick %d won by seat %d: %s", self.tricks_played + 1, winner, self.current_trick)
        self.current_trick.clear()
        self.tricks_played += 1
        self.current_player_idx = winner
        self.state = PlayingPhase()

    def __str__(self) -> str:
        """Return string representation."""
        return (
            f"Game: {self.phase.value}, trick {self.tricks_played}/{TRICKS_PER_ROUND}, "
            f"seat {self.current_player_idx} to act"
        )
