"""Ego-centric observation encoding.

The 373-dim vector is laid out as follows (all seat-indexed blocks start with
the viewer, then the next seat, then the one after):

- Own hand (45): card presence by id
- Pool (5): seals left per color / 5
- Held seals (18): per seat, 5 colors / 5 then jokers / 5
- Acquired seals (18): per seat, 5 colors / 5 then black seals / 5
- Round history (45): every card played this round
- Current trick (135): 3 relative seats x 45 card ids
- Phase (3): one-hot BIDDING / PLAYING / DISCARDING
- Trick position (3): one-hot of cards already in the trick (0, 1 or 2)
- Hand colors (5): cards per color / 15
- Progress (1): tricks played / 15
- Pending win color (5): one-hot color of the winning card while DISCARDING
- Opponent memory (90): cards played by the next and next-next seat

The normalization constants are part of the format; models trained against
it depend on them.
"""

from typing import TYPE_CHECKING

import numpy as np

from wizard_extreme.constants import (
    HAND_COLOR_NORMALIZATION,
    NUM_COLORS,
    NUM_PLAYERS,
    SEAL_NORMALIZATION,
    TOTAL_CARDS,
    TRICKS_NORMALIZATION,
)
from wizard_extreme.models.enums import Color, Phase

if TYPE_CHECKING:
    from wizard_extreme.game import Game

_PHASES = (Phase.BIDDING, Phase.PLAYING, Phase.DISCARDING)

# (name, width) in encoding order
OBSERVATION_LAYOUT: tuple[tuple[str, int], ...] = (
    ("hand", TOTAL_CARDS),
    ("pool", NUM_COLORS),
    ("seals", NUM_PLAYERS * (NUM_COLORS + 1)),
    ("initial_seals", NUM_PLAYERS * (NUM_COLORS + 1)),
    ("round_history", TOTAL_CARDS),
    ("current_trick", NUM_PLAYERS * TOTAL_CARDS),
    ("phase", len(_PHASES)),
    ("trick_position", NUM_PLAYERS),
    ("hand_colors", NUM_COLORS),
    ("progress", 1),
    ("pending_color", NUM_COLORS),
    ("opponent_played", (NUM_PLAYERS - 1) * TOTAL_CARDS),
)


def observation_slices() -> dict[str, slice]:
    """Map each block name to its slice of the observation vector."""
    slices: dict[str, slice] = {}
    start = 0
    for name, width in OBSERVATION_LAYOUT:
        slices[name] = slice(start, start + width)
        start += width
    return slices


def relative_seats(seat: int) -> list[int]:
    """Seats in viewing order: the viewer, then the next two clockwise."""
    return [(seat + offset) % NUM_PLAYERS for offset in range(NUM_PLAYERS)]


def encode_observation(game: "Game", seat: int) -> np.ndarray:
    """Encode the game as seen from ``seat`` into a float32 vector of length 373."""
    seats = relative_seats(seat)
    me = game.players[seat]
    obs = []

    obs.append(_encode_hand(game, seat))
    obs.append(np.array([game.pool_seals[c] for c in Color], dtype=np.float32) / SEAL_NORMALIZATION)
    obs.append(_encode_held_seals(game, seats))
    obs.append(_encode_initial_seals(game, seats))
    obs.append(game.round_history_mask.astype(np.float32))
    obs.append(_encode_current_trick(game, seat))
    obs.append(np.array([game.phase == p for p in _PHASES], dtype=np.float32))

    position = np.zeros(NUM_PLAYERS, dtype=np.float32)
    if len(game.current_trick) < NUM_PLAYERS:
        position[len(game.current_trick)] = 1.0
    obs.append(position)

    hand_colors = np.zeros(NUM_COLORS, dtype=np.float32)
    for card in me.hand:
        hand_colors[card.color] += 1
    obs.append(hand_colors / HAND_COLOR_NORMALIZATION)

    obs.append(np.array([game.tricks_played / TRICKS_NORMALIZATION], dtype=np.float32))

    pending_color = np.zeros(NUM_COLORS, dtype=np.float32)
    pending = game.pending_discard
    if pending is not None:
        pending_color[pending.win_card.color] = 1.0
    obs.append(pending_color)

    for other in seats[1:]:
        obs.append(game.players[other].played_cards_mask.astype(np.float32))

    return np.concatenate(obs).astype(np.float32)


def _encode_hand(game: "Game", seat: int) -> np.ndarray:
    hand = np.zeros(TOTAL_CARDS, dtype=np.float32)
    for card in game.players[seat].hand:
        hand[card.id] = 1.0
    return hand


def _encode_held_seals(game: "Game", seats: list[int]) -> np.ndarray:
    rows = []
    for idx in seats:
        player = game.players[idx]
        rows.extend(player.seals[c] for c in Color)
        rows.append(player.joker_seals)
    return np.array(rows, dtype=np.float32) / SEAL_NORMALIZATION


def _encode_initial_seals(game: "Game", seats: list[int]) -> np.ndarray:
    rows = []
    for idx in seats:
        player = game.players[idx]
        rows.extend(player.initial_seals[c] for c in Color)
        rows.append(player.black_seals)
    return np.array(rows, dtype=np.float32) / SEAL_NORMALIZATION


def _encode_current_trick(game: "Game", seat: int) -> np.ndarray:
    trick = np.zeros((NUM_PLAYERS, TOTAL_CARDS), dtype=np.float32)
    for played in game.current_trick.played_cards:
        rel = (played.player_index - seat) % NUM_PLAYERS
        trick[rel, played.card.id] = 1.0
    return trick.flatten()
