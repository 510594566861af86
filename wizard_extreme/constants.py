"""Game constants for Wizard Extreme."""

# Table
NUM_PLAYERS = 3
NUM_COLORS = 5
CARDS_PER_COLOR = 9
TOTAL_CARDS = NUM_COLORS * CARDS_PER_COLOR
CARDS_PER_PLAYER = TOTAL_CARDS // NUM_PLAYERS
TRICKS_PER_ROUND = 15

# Seal supply at the start of every round
TRUMP_POOL_SIZE = 5
COLOR_POOL_SIZE = 3
JOKER_POOL_SIZE = 4

# Trick rewards
DISCARD_REWARD = 2.0
PENALTY_REWARD = -3.0

# Round scoring multipliers
LEFTOVER_SEAL_COST = 3
BLACK_SEAL_COST = 3
JOKER_SEAL_COST = 4

# Action space layout
TAKE_SEAL_OFFSET = 0
PASS_ACTION = 5
STEAL_OFFSET = 6
PLAY_CARD_OFFSET = 16
DISCARD_OFFSET = 61
USE_JOKER_ACTION = 66
ACTION_SIZE = 67

# Observation layout
OBSERVATION_SIZE = 373
SEAL_NORMALIZATION = 5.0
HAND_COLOR_NORMALIZATION = 15.0
TRICKS_NORMALIZATION = float(TRICKS_PER_ROUND)

# Match
DEFAULT_MATCH_ROUNDS = 3
