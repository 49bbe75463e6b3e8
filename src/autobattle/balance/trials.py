"""Trial orchestration: run batches of matches and aggregate them.

Orchestrates BatchRunner -> metric computation -> MatchupStats / FieldStats.
"""

from __future__ import annotations

from typing import Callable, TYPE_CHECKING

from autobattle.balance.metrics import compute_field_stats, compute_matchup_stats
from autobattle.balance.models import FieldStats, MatchupStats
from autobattle.errors import InvalidConfiguration
from autobattle.sim.content.registry import CardRegistry
from autobattle.sim.runner import BatchRunner, TieBreak

if TYPE_CHECKING:
    from autobattle.ir.decks import DeckConfig
    from autobattle.sim.core.game_state import EngineConfig


def run_trials(
    deck_a: DeckConfig,
    deck_b: DeckConfig,
    count: int,
    registry: CardRegistry | None = None,
    base_seed: int | None = None,
    config: EngineConfig | None = None,
    tie_break: TieBreak | str = TieBreak.RANDOM,
    parallel: bool = False,
    should_stop: Callable[[], bool] | None = None,
) -> MatchupStats:
    """Play *count* matches of ``deck_a`` vs ``deck_b`` and aggregate them.

    Parameters
    ----------
    deck_a, deck_b:
        Deck configurations for side 1 and side 2.  Never modified.
    count:
        Number of matches; must be positive.
    registry:
        Card catalog to build decks from.  Defaults to the stock catalog.
    base_seed:
        Starting seed for a reproducible batch.
    parallel:
        Spread matches over a process pool.
    should_stop:
        Polled between matches; stats cover only the matches played.
    """
    registry = registry if registry is not None else CardRegistry.default()
    runner = BatchRunner(registry, config=config, tie_break=tie_break)
    results = runner.run_batch(
        deck_a, deck_b, count,
        base_seed=base_seed, parallel=parallel, should_stop=should_stop,
    )
    return compute_matchup_stats(results, deck_a.label(1), deck_b.label(2))


def run_deck_vs_field(
    deck: DeckConfig,
    opponents: list[DeckConfig],
    games_per_matchup: int = 5,
    registry: CardRegistry | None = None,
    base_seed: int | None = None,
    config: EngineConfig | None = None,
    tie_break: TieBreak | str = TieBreak.RANDOM,
    parallel: bool = False,
    should_stop: Callable[[], bool] | None = None,
) -> FieldStats:
    """Play *deck* (always side 1) against every opponent the same number of times.

    *should_stop* is polled between every match of every matchup; matchups
    cut short report only the games actually played.
    """
    if not opponents:
        raise InvalidConfiguration("run_deck_vs_field needs at least one opponent")

    registry = registry if registry is not None else CardRegistry.default()
    matchups: list[MatchupStats] = []
    for i, opponent in enumerate(opponents):
        seed = base_seed + i * games_per_matchup if base_seed is not None else None
        matchups.append(run_trials(
            deck, opponent, games_per_matchup,
            registry=registry, base_seed=seed, config=config,
            tie_break=tie_break, parallel=parallel,
            should_stop=should_stop,
        ))
    return compute_field_stats(deck.label(1), matchups)
