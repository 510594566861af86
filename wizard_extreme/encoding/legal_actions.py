"""Legal-action mask encoding."""

from typing import TYPE_CHECKING

import numpy as np

from wizard_extreme.constants import ACTION_SIZE
from wizard_extreme.models.actions import encode_action

if TYPE_CHECKING:
    from wizard_extreme.game import Game


def legal_action_mask(game: "Game", seat: int) -> np.ndarray:
    """Return a 67-wide boolean mask of the actions a seat may take.

    The mask is the boundary encoding of ``Game.legal_actions`` and carries no
    rules of its own.
    """
    mask = np.zeros(ACTION_SIZE, dtype=np.bool_)
    for action in game.legal_actions(seat):
        mask[encode_action(action)] = True
    return mask
