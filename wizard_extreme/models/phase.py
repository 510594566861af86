"""Phase variants of a round.

Each variant names its ``Phase``; only ``DiscardingPhase`` carries data, the
outcome of the trick whose winner still has to pick which seal to give up.
"""

from dataclasses import dataclass
from typing import ClassVar, Union

from wizard_extreme.models.card import Card
from wizard_extreme.models.enums import Color, Phase


@dataclass(frozen=True)
class BiddingPhase:
    """Seats take, steal or pass on seals."""

    phase: ClassVar[Phase] = Phase.BIDDING


@dataclass(frozen=True)
class PlayingPhase:
    """Seats play cards into tricks."""

    phase: ClassVar[Phase] = Phase.PLAYING


@dataclass(frozen=True)
class DiscardingPhase:
    """The winner of a full trick chooses how to pay for it.

    Attributes:
        winner: Seat that won the trick
        lead_color: Color of the trick's first card
        win_card: Card that won the trick

    """

    winner: int
    lead_color: Color
    win_card: Card

    phase: ClassVar[Phase] = Phase.DISCARDING

    def allowed_colors(self) -> tuple[Color, ...]:
        """Seal colors the winner may discard, before checking holdings."""
        if self.win_card.is_trump():
            if self.lead_color == self.win_card.color:
                return (self.win_card.color,)
            return (self.win_card.color, self.lead_color)
        return (self.win_card.color,)


PhaseState = Union[BiddingPhase, PlayingPhase, DiscardingPhase]
