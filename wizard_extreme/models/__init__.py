"""Game domain models."""

from wizard_extreme.models.actions import (
    Action,
    Discard,
    Pass,
    PlayCard,
    Steal,
    TakeSeal,
    UseJoker,
    decode_action,
    encode_action,
)
from wizard_extreme.models.card import Card, determine_winner, get_card
from wizard_extreme.models.deck import Deck
from wizard_extreme.models.enums import TRUMP, Color, Phase
from wizard_extreme.models.phase import BiddingPhase, DiscardingPhase, PhaseState, PlayingPhase
from wizard_extreme.models.player import Player
from wizard_extreme.models.trick import PlayedCard, Trick

__all__ = [
    "TRUMP",
    "Action",
    "BiddingPhase",
    "Card",
    "Color",
    "Deck",
    "Discard",
    "DiscardingPhase",
    "Pass",
    "Phase",
    "PhaseState",
    "PlayCard",
    "PlayedCard",
    "Player",
    "PlayingPhase",
    "Steal",
    "TakeSeal",
    "Trick",
    "UseJoker",
    "decode_action",
    "determine_winner",
    "encode_action",
    "get_card",
]
