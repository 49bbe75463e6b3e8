"""Play one match between two named decks and print it turn by turn.

Usage:
    uv run python scripts/run_match.py [goblin_rush] [archer_control] [--seed N]
"""

from __future__ import annotations

import argparse
import logging
import sys

from autobattle.ir.decks import DeckConfig
from autobattle.sim.content.registry import CardRegistry
from autobattle.sim.core.game_state import MatchResult, ResultReason
from autobattle.sim.runner import MatchSimulator, TieBreak
from autobattle.sim.telemetry import TurnSnapshot

_REASON_TEXT = {
    ResultReason.PLAYER_HP: "Lethal damage",
    ResultReason.DECK_OUT: "Deck out",
    ResultReason.TIMEOUT: "Timeout",
}


def print_turn(snapshot: TurnSnapshot, labels: tuple[str, str], field_size: int) -> None:
    print(f"\n--- Turn {snapshot.turn} ({snapshot.mana} mana) ---")
    for label, side in zip(labels, snapshot.sides):
        units = ", ".join(f"{name}({hp})" for name, hp in side.units)
        print(
            f"{label}: {side.field_size}/{field_size} field, {side.hp} HP,"
            f" {side.cards_remaining} in deck  [{units}]"
        )


def print_result(result: MatchResult, labels: tuple[str, str]) -> None:
    if result.reason is ResultReason.TIMEOUT:
        print(f"\nGame timeout at turn {result.turn} (HP {result.final_hp[0]} vs {result.final_hp[1]})")
    print(
        f"\n{labels[result.winner - 1]} WINS! ({_REASON_TEXT[result.reason]})"
        f"  turn={result.turn} seed={result.seed}"
    )


def _get_deck(registry: CardRegistry, key: str) -> DeckConfig:
    deck = registry.get_deck(key)
    if deck is None:
        sys.exit(f"Unknown deck {key!r}; choose from: {', '.join(sorted(registry.decks))}")
    return deck


def main() -> None:
    parser = argparse.ArgumentParser(description="Run one verbose match")
    parser.add_argument("deck_a", nargs="?", default="goblin_rush", help="Side 1 deck key")
    parser.add_argument("deck_b", nargs="?", default="archer_control", help="Side 2 deck key")
    parser.add_argument("--decks", type=str, default=None, help="Deck JSON file")
    parser.add_argument("--cards", type=str, default=None, help="Card catalog JSON file")
    parser.add_argument("--seed", type=int, default=None, help="Tie-break seed")
    parser.add_argument(
        "--tie-break", choices=[t.value for t in TieBreak], default=TieBreak.RANDOM.value,
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    registry = CardRegistry()
    registry.load_cards(args.cards)
    registry.load_decks(args.decks)
    deck_a = _get_deck(registry, args.deck_a)
    deck_b = _get_deck(registry, args.deck_b)
    labels = (deck_a.label(1), deck_b.label(2))

    simulator = MatchSimulator(registry, tie_break=args.tie_break)
    field_size = simulator.config.max_field_size
    result = simulator.simulate(
        deck_a, deck_b, seed=args.seed,
        observer=lambda snap: print_turn(snap, labels, field_size),
    )
    print_result(result, labels)


if __name__ == "__main__":
    main()
