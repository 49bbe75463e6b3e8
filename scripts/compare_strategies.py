"""Compare every flavor x strategy variant of a deck against one opponent.

Usage:
    uv run python scripts/compare_strategies.py [--deck mixed_midrange] [--opponent archer_control] [--games N]
"""

from __future__ import annotations

import argparse
import sys
import time

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from autobattle.balance.trials import run_trials
from autobattle.ir.cards import Flavor, Strategy
from autobattle.sim.content.registry import CardRegistry

FLAVORS = list(Flavor)
STRATEGIES = list(Strategy)


def run_comparison(deck_key: str, opponent_key: str, n_games: int, base_seed: int) -> None:
    registry = CardRegistry.default()
    deck = registry.get_deck(deck_key)
    opponent = registry.get_deck(opponent_key)
    if deck is None or opponent is None:
        sys.exit(f"Unknown deck; choose from: {', '.join(sorted(registry.decks))}")

    win_rates = np.zeros((len(FLAVORS), len(STRATEGIES)))
    avg_turns = np.zeros((len(FLAVORS), len(STRATEGIES)))

    t0 = time.time()
    for i, flavor in enumerate(FLAVORS):
        for j, strategy in enumerate(STRATEGIES):
            variant = deck.model_copy(update={
                "flavor": flavor.value,
                "strategy": strategy.value,
                "name": f"{deck.label(1)} [{flavor.value}/{strategy.value}]",
            })
            stats = run_trials(
                variant, opponent, n_games,
                registry=registry, base_seed=base_seed,
            )
            win_rates[i, j] = stats.win_rate_a
            avg_turns[i, j] = stats.avg_turns
            print(
                f"  {flavor.value:7s} {strategy.value:16s}"
                f"  wr={stats.win_rate_a:5.1f}%  turns={stats.avg_turns:.1f}"
            )
    elapsed = time.time() - t0

    print(f"\nTime: {elapsed:.1f}s")
    best = np.unravel_index(np.argmax(win_rates), win_rates.shape)
    print(
        f"Best variant: {FLAVORS[best[0]].value}/{STRATEGIES[best[1]].value}"
        f" ({win_rates[best]:.1f}%)"
    )
    print(f"Mean win rate across variants: {np.mean(win_rates):.1f}%")

    generate_charts(win_rates, avg_turns, deck.label(1), opponent.label(2), n_games)


def generate_charts(
    win_rates: np.ndarray,
    avg_turns: np.ndarray,
    deck_label: str,
    opponent_label: str,
    n_games: int,
) -> None:
    fig, axes = plt.subplots(1, 2, figsize=(14, 6))
    fig.suptitle(
        f"{deck_label} vs {opponent_label}: {n_games} games per variant",
        fontsize=16, fontweight="bold",
    )

    for ax, data, title, fmt, cmap in (
        (axes[0], win_rates, "Win Rate (%)", "{:.1f}", "RdYlGn"),
        (axes[1], avg_turns, "Avg Game Length (turns)", "{:.1f}", "Blues"),
    ):
        im = ax.imshow(data, cmap=cmap, aspect="auto")
        ax.set_xticks(np.arange(len(STRATEGIES)))
        ax.set_xticklabels([s.value for s in STRATEGIES])
        ax.set_yticks(np.arange(len(FLAVORS)))
        ax.set_yticklabels([f.value for f in FLAVORS])
        ax.set_title(title)
        for (i, j), value in np.ndenumerate(data):
            ax.text(j, i, fmt.format(value), ha="center", va="center", fontsize=11)
        fig.colorbar(im, ax=ax)

    plt.tight_layout()
    out_path = "strategy_comparison.png"
    plt.savefig(out_path, dpi=150, bbox_inches="tight")
    print(f"\nChart saved to {out_path}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--deck", type=str, default="mixed_midrange", help="Deck key to vary")
    parser.add_argument("--opponent", type=str, default="archer_control", help="Fixed opponent deck key")
    parser.add_argument("--games", type=int, default=200, help="Games per variant")
    parser.add_argument("--seed", type=int, default=0, help="Base seed")
    args = parser.parse_args()
    run_comparison(args.deck, args.opponent, args.games, args.seed)
