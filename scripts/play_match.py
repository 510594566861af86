#!/usr/bin/env python3
"""
CLI script to watch bots play a Wizard Extreme match.

Seats three bots at the table, plays every round of a match and prints the
per-round and total scores.
"""

import argparse

import numpy as np
from rich.console import Console
from rich.table import Table

from wizard_extreme.bots import BotDifficulty, create_bot
from wizard_extreme.config import settings
from wizard_extreme.constants import NUM_PLAYERS
from wizard_extreme.services.log_service import configure_logging
from wizard_extreme.services.match_service import MatchResult, MatchService

console = Console()


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Play a Wizard Extreme bot match")
    parser.add_argument(
        "--bots",
        nargs=NUM_PLAYERS,
        default=["rule_based", "rule_based", "random"],
        choices=["random", "rule_based"],
        help="Bot type for each seat",
    )
    parser.add_argument(
        "--difficulty",
        default="medium",
        choices=[d.value for d in BotDifficulty if d != BotDifficulty.RANDOM],
        help="Difficulty of rule-based bots",
    )
    parser.add_argument("--rounds", type=int, default=settings.match_rounds, help="Rounds to play")
    parser.add_argument("--seed", type=int, default=settings.seed, help="Shuffle seed")
    parser.add_argument("--log-level", default=settings.log_level, help="Log level")
    return parser.parse_args()


def print_results(result: MatchResult, bot_names: list[str]) -> None:
    """Print a score table for the match."""
    table = Table(title="Match Results")
    table.add_column("Seat")
    table.add_column("Bot")
    for number in range(1, len(result.round_scores) + 1):
        table.add_column(f"Round {number}", justify="right")
    table.add_column("Total", justify="right", style="bold")

    for seat in range(NUM_PLAYERS):
        marker = " 👑" if seat == result.winner else ""
        row = [str(seat), bot_names[seat] + marker]
        row.extend(f"{scores[seat]:+.0f}" for scores in result.round_scores)
        row.append(f"{result.total_scores[seat]:+.0f}")
        table.add_row(*row)

    console.print(table)


def main() -> None:
    """Run a match from the command line."""
    args = parse_args()
    configure_logging(args.log_level)

    rng = np.random.default_rng(args.seed)
    difficulty = BotDifficulty(args.difficulty)
    bots = [create_bot(bot_type, seat, difficulty, rng) for seat, bot_type in enumerate(args.bots)]

    config = settings.model_copy(update={"match_rounds": args.rounds, "seed": args.seed})
    service = MatchService(bots, config=config)

    console.print(f"[bold]Wizard Extreme[/bold] - {args.rounds} rounds, seed {args.seed}")
    result = service.play_match()
    print_results(result, [str(bot) for bot in bots])


if __name__ == "__main__":
    main()
