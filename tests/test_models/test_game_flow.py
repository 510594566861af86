"""Tests for the round state machine."""

import numpy as np
import pytest
from conftest import card_id, play, rig_hands, start_playing

from wizard_extreme.game import Game, initial_pool
from wizard_extreme.models import Color, Phase, get_card

RED, BLUE, YELLOW, GREEN = Color.RED, Color.BLUE, Color.YELLOW, Color.GREEN


class TestReset:
    """Test round setup."""

    def test_deal(self, game):
        """Each seat gets fifteen distinct cards covering the deck."""
        ids = [card.id for player in game.players for card in player.hand]
        assert all(len(player.hand) == 15 for player in game.players)
        assert sorted(ids) == list(range(45))

    def test_pools(self, game):
        """Five trump seals, three of each other color, four jokers."""
        assert game.pool_seals == {RED: 5, BLUE: 3, YELLOW: 3, GREEN: 3, Color.PURPLE: 3}
        assert game.pool_seals == initial_pool()
        assert game.joker_pool == 4

    def test_opening_seat(self):
        """The opening seat starts the bidding."""
        game = Game(seed=7)
        game.reset(2)
        assert game.phase == Phase.BIDDING
        assert game.current_player_idx == 2
        assert game.starting_player_offset == 2

    def test_same_seed_same_deal(self):
        """Seeded games deal identically."""
        first, second = Game(seed=42), Game(seed=42)
        first.reset(0)
        second.reset(0)
        for a, b in zip(first.players, second.players, strict=True):
            assert a.hand == b.hand

    def test_reset_clears_previous_round(self, game):
        """A new round starts from empty seats and full pools."""
        game.step(0)
        game.players[1].black_seals = 2
        game.reset(1)

        assert game.pool_seals[RED] == 5
        assert all(p.total_seals() == 0 for p in game.players)
        assert game.players[1].black_seals == 0
        assert not game.round_history_mask.any()


class TestBidding:
    """Test the bidding phase."""

    def test_take_trump_seal(self, game):
        """Taking a seal moves it from the pool and keeps the turn."""
        result = game.step(0)

        assert game.pool_seals[RED] == 4
        assert game.players[0].seals[RED] == 1
        assert game.players[0].initial_seals[RED] == 1
        assert game.current_player_idx == 0
        assert result.reward == 0.0
        assert not result.done

    def test_cannot_take_from_empty_pool(self, game):
        """An exhausted color can no longer be taken."""
        game.pool_seals[BLUE] = 0
        result = game.step(1)

        assert result.info["illegal_action"]
        assert game.players[0].seals[BLUE] == 0

    def test_steal_from_seat_two_places_right(self, game):
        """Seat 1 steals trump from seat 2 with action 7."""
        game.pool_seals[RED] = 0
        game.players[2].seals[RED] = 1
        game.current_player_idx = 1

        result = game.step(7)

        assert "illegal_action" not in result.info
        assert game.players[2].seals[RED] == 0
        assert game.players[1].seals[RED] == 1
        assert game.players[1].initial_seals[RED] == 1
        assert game.players[2].joker_seals == 1
        assert game.joker_pool == 3
        assert game.current_player_idx == 1

    def test_steal_from_seat_one_place_right(self, game):
        """Relative target 1 from seat 0 is seat 2."""
        game.pool_seals[GREEN] = 0
        game.players[2].seals[GREEN] = 2

        game.step(6 + int(GREEN) * 2)

        assert game.players[2].seals[GREEN] == 1
        assert game.players[0].seals[GREEN] == 1

    def test_steal_without_jokers_left(self, game):
        """No joker is handed out once the joker pool is empty."""
        game.pool_seals[RED] = 0
        game.joker_pool = 0
        game.players[2].seals[RED] = 1
        game.current_player_idx = 1

        game.step(7)

        assert game.players[2].joker_seals == 0
        assert game.joker_pool == 0

    def test_steal_requires_empty_pool(self, game):
        """Stealing is illegal while the pool still has that color."""
        game.players[2].seals[RED] = 1
        result = game.step(6)

        assert result.info["illegal_action"]
        assert game.players[2].seals[RED] == 1

    def test_steal_requires_victim_seal(self, game):
        """A seat holding no seal of the color cannot be robbed."""
        game.pool_seals[RED] = 0
        result = game.step(6)
        assert result.info["illegal_action"]

    def test_pass_order(self, game):
        """Passing hands the turn on; the last pass opens play at the opening seat."""
        game.step(5)
        assert game.current_player_idx == 1
        game.step(5)
        assert game.current_player_idx == 2

        game.step(1)
        assert game.current_player_idx == 2
        assert game.phase == Phase.BIDDING

        game.step(5)
        assert game.phase == Phase.PLAYING
        assert game.current_player_idx == 0

    def test_pass_skips_passed_seats(self, game):
        """Seats that already passed are skipped."""
        game.players[1].has_passed_bidding = True
        game.step(5)
        assert game.current_player_idx == 2

    def test_pass_opens_play_at_opening_seat(self):
        """Play starts with the opening seat, not the last to pass."""
        game = Game(seed=3)
        game.reset(1)
        for _ in range(3):
            game.step(5)
        assert game.phase == Phase.PLAYING
        assert game.current_player_idx == 1


class TestPlaying:
    """Test trick play and discard resolution."""

    def _one_card_each(self, game, cards):
        rig_hands(game, [[c] for c in cards])
        start_playing(game, leader=0)

    def test_turn_moves_clockwise(self, game):
        """After a card the next seat plays."""
        self._one_card_each(game, [card_id(BLUE, 5), card_id(BLUE, 9), card_id(GREEN, 1)])
        game.step(play(card_id(BLUE, 5)))

        assert game.current_player_idx == 1
        assert len(game.current_trick) == 1
        assert game.round_history_mask[card_id(BLUE, 5)]
        assert game.players[0].played_cards_mask[card_id(BLUE, 5)]

    def test_auto_discard(self, game):
        """A single payable seal is discarded automatically for +2."""
        self._one_card_each(game, [card_id(BLUE, 5), card_id(BLUE, 9), card_id(GREEN, 1)])
        game.players[1].seals[BLUE] = 1

        game.step(play(card_id(BLUE, 5)))
        game.step(play(card_id(BLUE, 9)))
        result = game.step(play(card_id(GREEN, 1)))

        assert result.info["rewards"][1] == 2.0
        assert result.reward == 0.0
        assert game.players[1].seals[BLUE] == 0
        assert game.discarded_seals[BLUE] == 1
        assert game.tricks_played == 1
        assert game.current_trick.is_empty()
        assert game.current_player_idx == 1
        assert game.phase == Phase.PLAYING

    def test_penalty_without_matching_seal(self, game):
        """Winning without a payable seal earns a black seal and -3."""
        self._one_card_each(game, [card_id(BLUE, 5), card_id(BLUE, 9), card_id(GREEN, 1)])
        game.players[1].seals[GREEN] = 1

        game.step(play(card_id(BLUE, 5)))
        game.step(play(card_id(BLUE, 9)))
        result = game.step(play(card_id(GREEN, 1)))

        assert result.info["rewards"][1] == -3.0
        assert game.players[1].black_seals == 1
        assert game.players[1].seals[GREEN] == 1

    def test_winner_rewarded_when_acting(self, game):
        """The step reward belongs to the seat that played the closing card."""
        self._one_card_each(game, [card_id(BLUE, 5), card_id(GREEN, 1), card_id(BLUE, 9)])
        game.players[2].seals[BLUE] = 1

        game.step(play(card_id(BLUE, 5)))
        game.step(play(card_id(GREEN, 1)))
        result = game.step(play(card_id(BLUE, 9)))

        assert result.reward == 2.0

    def test_trump_win_prefers_lead_color(self, game):
        """A trump winner holding only the lead color pays with it."""
        self._one_card_each(game, [card_id(BLUE, 5), card_id(RED, 3), card_id(BLUE, 1)])
        game.players[1].seals[BLUE] = 1

        game.step(play(card_id(BLUE, 5)))
        game.step(play(card_id(RED, 3)))
        result = game.step(play(card_id(BLUE, 1)))

        assert result.info["rewards"][1] == 2.0
        assert game.players[1].seals[BLUE] == 0

    def test_trump_win_with_both_colors_asks_winner(self, game):
        """Holding both trump and lead seals lets the winner choose."""
        self._one_card_each(game, [card_id(BLUE, 5), card_id(RED, 3), card_id(BLUE, 1)])
        game.players[1].seals[RED] = 1
        game.players[1].seals[BLUE] = 1

        game.step(play(card_id(BLUE, 5)))
        game.step(play(card_id(RED, 3)))
        result = game.step(play(card_id(BLUE, 1)))

        assert game.phase == Phase.DISCARDING
        assert game.pending_discard.winner == 1
        assert game.pending_discard.lead_color == BLUE
        assert game.pending_discard.win_card.id == card_id(RED, 3)
        assert game.current_player_idx == 1
        assert result.info["rewards"][1] == 0.0
        assert game.tricks_played == 0

        mask = game.get_legal_actions(1)
        assert np.flatnonzero(mask).tolist() == [61, 62]
        assert not game.get_legal_actions(0).any()

        result = game.step(62)
        assert result.reward == 2.0
        assert game.players[1].seals[BLUE] == 0
        assert game.players[1].seals[RED] == 1
        assert game.tricks_played == 1
        assert game.phase == Phase.PLAYING
        assert game.pending_discard is None

    def test_discard_of_disallowed_color_is_illegal(self, game):
        """Only the allowed colors can be discarded."""
        self._one_card_each(game, [card_id(BLUE, 5), card_id(RED, 3), card_id(BLUE, 1)])
        game.players[1].seals[RED] = 1
        game.players[1].seals[BLUE] = 1
        game.players[1].seals[GREEN] = 1

        for card in (card_id(BLUE, 5), card_id(RED, 3), card_id(BLUE, 1)):
            game.step(play(card))
        result = game.step(61 + int(GREEN))

        assert result.info["illegal_action"]
        assert game.phase == Phase.DISCARDING

    def test_joker_forces_decision(self, game):
        """A winner holding a joker always chooses and may spend it."""
        self._one_card_each(game, [card_id(BLUE, 5), card_id(BLUE, 9), card_id(GREEN, 1)])
        game.players[1].seals[BLUE] = 1
        game.players[1].joker_seals = 1

        for card in (card_id(BLUE, 5), card_id(BLUE, 9), card_id(GREEN, 1)):
            game.step(play(card))

        assert game.phase == Phase.DISCARDING
        assert np.flatnonzero(game.get_legal_actions(1)).tolist() == [62, 66]

        result = game.step(66)
        assert result.reward == 2.0
        assert game.players[1].joker_seals == 0
        assert game.players[1].seals[BLUE] == 1
        assert game.discarded_jokers == 1
        assert game.tricks_played == 1

    def test_joker_only_winner(self, game):
        """A joker pays for a trick even without a matching seal."""
        self._one_card_each(game, [card_id(BLUE, 5), card_id(BLUE, 9), card_id(GREEN, 1)])
        game.players[1].joker_seals = 1

        for card in (card_id(BLUE, 5), card_id(BLUE, 9), card_id(GREEN, 1)):
            game.step(play(card))

        assert np.flatnonzero(game.get_legal_actions(1)).tolist() == [66]

    def test_trump_lead_trump_win(self, game):
        """When trump is led and wins, only a trump seal pays."""
        self._one_card_each(game, [card_id(RED, 2), card_id(RED, 8), card_id(RED, 1)])
        game.players[1].seals[RED] = 1
        game.players[1].seals[BLUE] = 1

        for card in (card_id(RED, 2), card_id(RED, 8), card_id(RED, 1)):
            game.step(play(card))

        assert game.players[1].seals[RED] == 0
        assert game.players[1].seals[BLUE] == 1
        assert game.phase == Phase.PLAYING

    def test_must_follow_suit(self, game):
        """Playing off-color while holding the lead color is rejected."""
        rig_hands(
            game,
            [[card_id(BLUE, 5)], [card_id(BLUE, 9), card_id(GREEN, 2)], [card_id(GREEN, 1)]],
        )
        start_playing(game)
        game.step(play(card_id(BLUE, 5)))

        result = game.step(play(card_id(GREEN, 2)))

        assert result.info["illegal_action"]
        assert get_card(card_id(GREEN, 2)) in game.players[1].hand
        assert game.current_player_idx == 1

    def test_cannot_play_card_not_in_hand(self, game):
        """Only held cards can be played."""
        self._one_card_each(game, [card_id(BLUE, 5), card_id(BLUE, 9), card_id(GREEN, 1)])
        result = game.step(play(card_id(YELLOW, 3)))
        assert result.info["illegal_action"]


class TestIllegalActions:
    """Test rejected actions leave the game untouched."""

    def test_play_during_bidding(self, game):
        """Card plays are illegal while bidding."""
        card = game.players[0].hand[0]
        result = game.step(play(card.id))

        assert result.info["illegal_action"]
        assert result.reward == 0.0
        assert not result.done
        assert card in game.players[0].hand
        assert game.phase == Phase.BIDDING

    @pytest.mark.parametrize("index", [-1, 67, 99])
    def test_out_of_range(self, game, index):
        """Indices outside the action space are rejected, not raised."""
        result = game.step(index)

        assert result.info["illegal_action"]
        assert game.current_player_idx == 0
        assert game.pool_seals == initial_pool()

    def test_discard_outside_discarding(self, game):
        """Discard and joker actions are illegal outside DISCARDING."""
        game.players[0].joker_seals = 1
        assert game.step(66).info["illegal_action"]
        assert game.players[0].joker_seals == 1


class TestRoundEnd:
    """Test scoring and termination."""

    def test_round_score(self, game):
        """Two leftover seals and a black seal cost nine points."""
        player = game.players[0]
        player.seals[BLUE] = 2
        player.black_seals = 1
        assert player.round_score() == -9

    def test_joker_cost(self, game):
        """Jokers cost four points each."""
        game.players[2].joker_seals = 2
        assert game.calculate_scores() == [0.0, 0.0, -8.0]

    def test_done_after_fifteenth_trick(self, game):
        """The round ends exactly when the fifteenth trick is finalized."""
        rig_hands(game, [[card_id(BLUE, 5)], [card_id(BLUE, 9)], [card_id(GREEN, 1)]])
        start_playing(game)
        game.tricks_played = 14
        game.players[1].seals[YELLOW] = 2
        game.players[1].black_seals = 1

        assert not game.step(play(card_id(BLUE, 5))).done
        assert not game.step(play(card_id(BLUE, 9))).done
        result = game.step(play(card_id(GREEN, 1)))

        assert result.done
        assert game.is_round_over()
        assert result.info["scores"] == [0.0, -12.0, 0.0]

        again = game.step(play(card_id(GREEN, 1)))
        assert not again.done
        assert again.info["illegal_action"]
        assert game.is_round_over()

    def test_steps_after_done_are_rejected(self, game):
        """No action is legal once the round is over."""
        rig_hands(game, [[], [], []])
        start_playing(game)
        game.tricks_played = 15

        assert not game.legal_actions(0)
        result = game.step(5)
        assert not result.done
        assert result.info["illegal_action"]
        assert "scores" not in result.info
        assert game.is_round_over()
