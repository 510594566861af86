"""Typed actions and their integer encoding.

The engine works with the action variants below; integers in ``0..66`` only
appear at the external boundary:

    0-4    TakeSeal(color)
    5      Pass
    6-15   Steal(color, target_rel)   index = 6 + color * 2 + (target_rel - 1)
    16-60  PlayCard(card_id)          index = 16 + card_id
    61-65  Discard(color)             index = 61 + color
    66     UseJoker
"""

from dataclasses import dataclass
from typing import Union

from wizard_extreme.constants import (
    ACTION_SIZE,
    DISCARD_OFFSET,
    NUM_COLORS,
    PASS_ACTION,
    PLAY_CARD_OFFSET,
    STEAL_OFFSET,
    TAKE_SEAL_OFFSET,
    USE_JOKER_ACTION,
)
from wizard_extreme.exceptions import InvalidActionError
from wizard_extreme.models.card import get_card
from wizard_extreme.models.enums import Color


@dataclass(frozen=True)
class TakeSeal:
    """Take one seal of a color from the pool."""

    color: Color


@dataclass(frozen=True)
class Pass:
    """Stop bidding for the rest of the round."""


@dataclass(frozen=True)
class Steal:
    """Steal one seal of a color from the seat ``target_rel`` places to the right.

    Seats to the right sit against turn order: from seat ``s`` the target is
    ``(s - target_rel) % 3``.
    """

    color: Color
    target_rel: int


@dataclass(frozen=True)
class PlayCard:
    """Play a card from hand."""

    card_id: int


@dataclass(frozen=True)
class Discard:
    """Discard one held seal of a color after winning a trick."""

    color: Color


@dataclass(frozen=True)
class UseJoker:
    """Spend a joker seal after winning a trick."""


Action = Union[TakeSeal, Pass, Steal, PlayCard, Discard, UseJoker]


def encode_action(action: Action) -> int:
    """Convert an action into its index in the 67-wide action space."""
    if isinstance(action, TakeSeal):
        return TAKE_SEAL_OFFSET + int(action.color)
    if isinstance(action, Pass):
        return PASS_ACTION
    if isinstance(action, Steal):
        return STEAL_OFFSET + int(action.color) * 2 + (action.target_rel - 1)
    if isinstance(action, PlayCard):
        return PLAY_CARD_OFFSET + action.card_id
    if isinstance(action, Discard):
        return DISCARD_OFFSET + int(action.color)
    if isinstance(action, UseJoker):
        return USE_JOKER_ACTION
    msg = f"Unknown action {action!r}"
    raise TypeError(msg)


def decode_action(index: int) -> Action:
    """Convert an action index into a typed action.

    Raises:
        InvalidActionError: If ``index`` is outside ``0..66``

    """
    index = int(index)
    if not 0 <= index < ACTION_SIZE:
        raise InvalidActionError(index)

    if index < PASS_ACTION:
        return TakeSeal(Color(index - TAKE_SEAL_OFFSET))
    if index == PASS_ACTION:
        return Pass()
    if index < PLAY_CARD_OFFSET:
        color, rel = divmod(index - STEAL_OFFSET, 2)
        return Steal(Color(color), rel + 1)
    if index < DISCARD_OFFSET:
        return PlayCard(index - PLAY_CARD_OFFSET)
    if index < DISCARD_OFFSET + NUM_COLORS:
        return Discard(Color(index - DISCARD_OFFSET))
    return UseJoker()


def describe_action(index: int) -> str:
    """Human readable label for an action index, for logs and the CLI."""
    action = decode_action(index)
    if isinstance(action, TakeSeal):
        return f"take {action.color.label}"
    if isinstance(action, Pass):
        return "pass"
    if isinstance(action, Steal):
        return f"steal {action.color.label} from +{action.target_rel}"
    if isinstance(action, PlayCard):
        return f"play {get_card(action.card_id)}"
    if isinstance(action, Discard):
        return f"discard {action.color.label}"
    return "use joker"
