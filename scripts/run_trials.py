"""Run many matches of one matchup (or one deck against all others).

Usage:
    uv run python scripts/run_trials.py goblin_rush archer_control [--games 1000] [--parallel]
    uv run python scripts/run_trials.py goblin_rush --vs-field [--games 100]
"""

from __future__ import annotations

import argparse
import logging
import sys
import time

from autobattle.balance.report import generate_field_report, generate_text_report
from autobattle.balance.trials import run_deck_vs_field, run_trials
from autobattle.sim.content.registry import CardRegistry
from autobattle.sim.runner import TieBreak


def main() -> None:
    parser = argparse.ArgumentParser(description="Run repeated matches and report win rates")
    parser.add_argument("deck_a", help="Deck key under test (side 1)")
    parser.add_argument("deck_b", nargs="?", default=None, help="Opponent deck key (side 2)")
    parser.add_argument("--vs-field", action="store_true", help="Play deck_a against every other deck")
    parser.add_argument("--games", type=int, default=10, help="Games per matchup")
    parser.add_argument("--seed", type=int, default=None, help="Base seed for a reproducible batch")
    parser.add_argument("--decks", type=str, default=None, help="Deck JSON file")
    parser.add_argument("--cards", type=str, default=None, help="Card catalog JSON file")
    parser.add_argument(
        "--tie-break", choices=[t.value for t in TieBreak], default=TieBreak.RANDOM.value,
    )
    parser.add_argument("--parallel", action="store_true", help="Use a process pool")
    parser.add_argument("--verbose", action="store_true", help="Enable info logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    registry = CardRegistry()
    registry.load_cards(args.cards)
    registry.load_decks(args.decks)

    deck_a = registry.get_deck(args.deck_a)
    if deck_a is None:
        sys.exit(f"Unknown deck {args.deck_a!r}; choose from: {', '.join(sorted(registry.decks))}")

    t0 = time.perf_counter()
    if args.vs_field:
        opponents = [d for key, d in sorted(registry.decks.items()) if key != args.deck_a]
        stats = run_deck_vs_field(
            deck_a, opponents, games_per_matchup=args.games,
            registry=registry, base_seed=args.seed,
            tie_break=args.tie_break, parallel=args.parallel,
        )
        report = generate_field_report(stats)
    else:
        if args.deck_b is None:
            sys.exit("deck_b is required unless --vs-field is given")
        deck_b = registry.get_deck(args.deck_b)
        if deck_b is None:
            sys.exit(f"Unknown deck {args.deck_b!r}; choose from: {', '.join(sorted(registry.decks))}")
        stats = run_trials(
            deck_a, deck_b, args.games,
            registry=registry, base_seed=args.seed,
            tie_break=args.tie_break, parallel=args.parallel,
        )
        report = generate_text_report(stats)
    elapsed = time.perf_counter() - t0

    print(report)
    print(f"Done in {elapsed:.2f}s")


if __name__ == "__main__":
    main()
