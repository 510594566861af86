"""Bot decision-makers for Wizard Extreme.

Available bots:
- RandomBot: Plays random legal actions
- RuleBasedBot: Heuristic play with difficulty levels (easy/medium/hard)
- RLBot: Wraps a trained policy
"""

from wizard_extreme.bots.base_bot import BaseBot, BotDifficulty
from wizard_extreme.bots.random_bot import RandomBot
from wizard_extreme.bots.rl_bot import RLBot
from wizard_extreme.bots.rule_based_bot import RuleBasedBot

__all__ = ["BaseBot", "BotDifficulty", "RLBot", "RandomBot", "RuleBasedBot", "create_bot"]


def create_bot(
    bot_type: str,
    seat: int,
    difficulty: BotDifficulty = BotDifficulty.MEDIUM,
    rng=None,
) -> BaseBot:
    """Create a bot by strategy name ("random" or "rule_based")."""
    if bot_type == "random":
        return RandomBot(seat, rng=rng)
    if bot_type == "rule_based":
        return RuleBasedBot(seat, difficulty, rng)
    msg = f"Unknown bot type: {bot_type}"
    raise ValueError(msg)
