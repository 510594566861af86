"""Game snapshots for presentation layers.

Converts a Game into plain dictionaries a renderer can consume. Snapshots are
read-only views; nothing here mutates or restores a game.
"""

from typing import Any

from wizard_extreme.game import Game
from wizard_extreme.models.card import Card
from wizard_extreme.models.enums import Color
from wizard_extreme.models.player import Player
from wizard_extreme.models.trick import Trick


def serialize_card(card: Card) -> dict[str, Any]:
    """Serialize a Card to a dictionary."""
    return {"id": card.id, "color": int(card.color), "value": card.value, "label": str(card)}


def serialize_seals(seals: dict[Color, int]) -> dict[str, int]:
    """Serialize per-color seal counts keyed by color name."""
    return {color.label: count for color, count in seals.items()}


def serialize_player(player: Player) -> dict[str, Any]:
    """Serialize a Player to a dictionary."""
    return {
        "index": player.index,
        "hand": [serialize_card(card) for card in player.hand],
        "seals": serialize_seals(player.seals),
        "initial_seals": serialize_seals(player.initial_seals),
        "joker_seals": player.joker_seals,
        "black_seals": player.black_seals,
        "has_passed_bidding": player.has_passed_bidding,
    }


def serialize_trick(trick: Trick) -> list[dict[str, Any]]:
    """Serialize the cards of a trick in play order."""
    return [
        {"player_index": pc.player_index, "card": serialize_card(pc.card)} for pc in trick.played_cards
    ]


def serialize_game(game: Game) -> dict[str, Any]:
    """Serialize a Game to a dictionary."""
    pending = game.pending_discard
    return {
        "phase": game.phase.value,
        "current_player_idx": game.current_player_idx,
        "starting_player_offset": game.starting_player_offset,
        "tricks_played": game.tricks_played,
        "pool_seals": serialize_seals(game.pool_seals),
        "joker_pool": game.joker_pool,
        "current_trick": serialize_trick(game.current_trick),
        "players": [serialize_player(player) for player in game.players],
        "pending_discard": (
            {
                "winner": pending.winner,
                "lead_color": pending.lead_color.label,
                "win_card": serialize_card(pending.win_card),
            }
            if pending
            else None
        ),
        "round_over": game.is_round_over(),
    }
