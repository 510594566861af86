"""Vector encodings of the game state for decision-makers."""

from wizard_extreme.encoding.legal_actions import legal_action_mask
from wizard_extreme.encoding.observation import OBSERVATION_LAYOUT, encode_observation

__all__ = ["OBSERVATION_LAYOUT", "encode_observation", "legal_action_mask"]
