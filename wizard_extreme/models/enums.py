"""Enums for the game."""

from enum import Enum, IntEnum


class Color(IntEnum):
    """Card and seal colors. RED is the trump color."""

    RED = 0
    BLUE = 1
    YELLOW = 2
    GREEN = 3
    PURPLE = 4

    @property
    def is_trump(self) -> bool:
        """Check if this is the trump color."""
        return self is Color.RED

    @property
    def label(self) -> str:
        """Human readable color name."""
        return self.name.title()


TRUMP = Color.RED


class Phase(str, Enum):
    """Phases of a round."""

    BIDDING = "BIDDING"
    PLAYING = "PLAYING"
    DISCARDING = "DISCARDING"
