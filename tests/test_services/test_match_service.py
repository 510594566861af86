"""Tests for the match driver."""

import logging

import numpy as np
import pytest

from wizard_extreme.bots import BotDifficulty, RandomBot, RuleBasedBot
from wizard_extreme.config import Settings
from wizard_extreme.game import Game
from wizard_extreme.services.match_service import MatchResult, MatchService


class OneSlipBot(RandomBot):
    """Random bot that answers its first decision with an illegal action."""

    def __init__(self, seat, rng=None):
        super().__init__(seat, rng=rng)
        self.slipped = False

    def act(self, observation, legal_mask):
        if not self.slipped:
            self.slipped = True
            return 60 if not legal_mask[60] else 61
        return super().act(observation, legal_mask)


def random_bots(seed: int = 0):
    rng = np.random.default_rng(seed)
    return [RandomBot(seat, rng=rng) for seat in range(3)]


class TestMatchResult:
    """Test MatchResult bookkeeping."""

    def test_empty(self):
        """No winner before the first round."""
        result = MatchResult()
        assert result.winner is None
        assert result.total_scores == [0.0, 0.0, 0.0]

    def test_totals_and_winner(self):
        """Totals accumulate and the highest total wins."""
        result = MatchResult()
        result.add_round([-9.0, -3.0, -6.0])
        result.add_round([0.0, -6.0, -3.0])

        assert result.total_scores == [-9.0, -9.0, -9.0]
        assert result.winner == 0

        result.add_round([-3.0, 0.0, -3.0])
        assert result.winner == 1
        assert len(result.round_scores) == 3


class TestMatchService:
    """Test MatchService."""

    def test_requires_three_bots(self):
        """A match needs a bot for every seat."""
        with pytest.raises(ValueError, match="exactly 3"):
            MatchService(random_bots()[:2])

    def test_round_rotation(self):
        """Round k is opened by seat k mod 3."""
        service = MatchService(random_bots(), Settings(seed=1, match_rounds=3))
        starters = []
        for _ in range(3):
            service.play_round()
            starters.append(service.game.starting_player_offset)

        assert starters == [0, 1, 2]
        assert service.is_complete()

    def test_play_match(self):
        """A full match records every round and sums the scores."""
        config = Settings(seed=3, match_rounds=4)
        service = MatchService(random_bots(3), config)

        result = service.play_match()

        assert len(result.round_scores) == 4
        for seat in range(3):
            assert result.total_scores[seat] == pytest.approx(
                sum(scores[seat] for scores in result.round_scores)
            )
        assert result.winner in (0, 1, 2)
        assert service.illegal_actions == 0

    def test_rule_based_match(self):
        """Heuristic bots only play legal moves."""
        rng = np.random.default_rng(8)
        bots = [RuleBasedBot(seat, BotDifficulty.HARD, rng) for seat in range(3)]
        service = MatchService(bots, Settings(match_rounds=2), game=Game(seed=8))

        result = service.play_match()

        assert service.rounds_played == 2
        assert service.illegal_actions == 0
        assert all(score <= 0 for scores in result.round_scores for score in scores)

    def test_logs_round_events(self, caplog):
        """Round boundaries are logged as key=value lines."""
        service = MatchService(random_bots(), Settings(seed=5, match_rounds=1))
        with caplog.at_level(logging.INFO, logger="wizard_extreme.services.log_service"):
            service.play_match()

        assert "event=round_start" in caplog.text
        assert "event=match_end" in caplog.text

    def test_illegal_action_counted_and_logged(self, caplog):
        """A rejected move is counted, logged as a warning and the round goes on."""
        rng = np.random.default_rng(2)
        bots = [OneSlipBot(0, rng), RandomBot(1, rng=rng), RandomBot(2, rng=rng)]
        service = MatchService(bots, Settings(seed=2, match_rounds=1))

        with caplog.at_level(logging.WARNING, logger="wizard_extreme.services.log_service"):
            service.play_match()

        assert service.illegal_actions == 1
        assert service.rounds_played == 1
        assert "event=illegal_action | seat=0" in caplog.text

    def test_actions_logged_at_debug(self, caplog):
        """Every action is traced at DEBUG level."""
        service = MatchService(random_bots(4), Settings(seed=4, match_rounds=1))
        with caplog.at_level(logging.DEBUG, logger="wizard_extreme.services.log_service"):
            service.play_round()

        actions = [r for r in caplog.records if "event=action" in r.getMessage()]
        assert actions
        assert all(r.levelname == "DEBUG" for r in actions)
