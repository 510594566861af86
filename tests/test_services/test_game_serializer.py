"""Tests for game snapshots."""

import json

from conftest import card_id, play, rig_hands, start_playing

from wizard_extreme.models import Color, get_card
from wizard_extreme.services.game_serializer import serialize_card, serialize_game

RED, BLUE = Color.RED, Color.BLUE


class TestGameSerializer:
    """Test serialize_game."""

    def test_card(self):
        """Cards carry id, color, value and label."""
        assert serialize_card(get_card(card_id(BLUE, 5))) == {
            "id": 13,
            "color": 1,
            "value": 5,
            "label": "Blue5",
        }

    def test_fresh_round(self, game):
        """A new round snapshot shows full pools and no pending discard."""
        data = serialize_game(game)

        assert data["phase"] == "BIDDING"
        assert data["pool_seals"] == {"Red": 5, "Blue": 3, "Yellow": 3, "Green": 3, "Purple": 3}
        assert data["joker_pool"] == 4
        assert data["pending_discard"] is None
        assert not data["round_over"]
        assert [len(p["hand"]) for p in data["players"]] == [15, 15, 15]

    def test_snapshot_is_json_safe(self, game):
        """Snapshots only contain plain values."""
        json.dumps(serialize_game(game))

    def test_pending_discard(self, game):
        """The pending trick outcome is included while discarding."""
        rig_hands(game, [[card_id(BLUE, 5)], [card_id(RED, 3)], [card_id(BLUE, 1)]])
        start_playing(game)
        game.players[1].seals[RED] = 1
        game.players[1].seals[BLUE] = 1
        for card in (card_id(BLUE, 5), card_id(RED, 3), card_id(BLUE, 1)):
            game.step(play(card))

        data = serialize_game(game)
        assert data["phase"] == "DISCARDING"
        assert data["pending_discard"]["winner"] == 1
        assert data["pending_discard"]["lead_color"] == "Blue"
        assert data["pending_discard"]["win_card"]["label"] == "Red3"
        assert [p["player_index"] for p in data["current_trick"]] == [0, 1, 2]
        assert data["players"][1]["seals"]["Red"] == 1
