"""Match simulation runner -- ties deployment, combat, win checks, and telemetry together.

Provides two key classes:

- **MatchSimulator**: Runs a single match to completion.
- **BatchRunner**: Orchestrates many matches (optionally in parallel).
"""

from __future__ import annotations

import logging
import multiprocessing
from enum import Enum
from typing import Callable, TYPE_CHECKING

from autobattle.errors import InvalidConfiguration
from autobattle.sim.core.game_state import (
    EngineConfig,
    MatchResult,
    MatchState,
    ResultReason,
    SideState,
)
from autobattle.sim.core.rng import GameRNG
from autobattle.sim.mechanics.combat import remove_dead, resolve_combat
from autobattle.sim.mechanics.deployment import deploy_side
from autobattle.sim.mechanics.targeting import resolve_strategy
from autobattle.sim.telemetry import MatchTelemetry, TurnSnapshot

if TYPE_CHECKING:
    from autobattle.ir.decks import DeckConfig
    from autobattle.sim.content.registry import CardRegistry

logger = logging.getLogger(__name__)

TurnObserver = Callable[[TurnSnapshot], None]


class TieBreak(str, Enum):
    """How units with equal speed are ordered in the combat pass."""

    RANDOM = "random"
    """Shuffled by a seeded RNG; reproducible from ``MatchResult.seed``."""

    FIELD_ORDER = "field-order"
    """Side 1 before side 2, each in field order.  Fully deterministic."""


# =====================================================================
# MatchSimulator
# =====================================================================

class MatchSimulator:
    """Runs a single match between two decks to completion."""

    def __init__(
        self,
        registry: CardRegistry,
        config: EngineConfig | None = None,
        tie_break: TieBreak | str = TieBreak.RANDOM,
    ) -> None:
        self.registry = registry
        self.config = config if config is not None else EngineConfig()
        self.config.check()
        self.tie_break = TieBreak(tie_break)

    # -- setup ---------------------------------------------------------------

    def new_match(
        self,
        deck_a: DeckConfig,
        deck_b: DeckConfig,
        seed: int | None = None,
    ) -> tuple[MatchState, int | None]:
        """Validate both decks and build the initial match state.

        Returns the state and the seed actually used (drawn from the OS when
        *seed* is ``None`` and ties are random).  Raises
        ``InvalidCardReference`` / ``InvalidConfiguration`` before anything
        is simulated.
        """
        sides = [
            SideState(
                side=n,
                hp=self.config.starting_hp,
                strategy=resolve_strategy(deck.strategy),
                deck=self.registry.build_deck_pool(deck),
            )
            for n, deck in ((1, deck_a), (2, deck_b))
        ]

        rng = None
        if self.tie_break is TieBreak.RANDOM:
            master = GameRNG(seed) if seed is not None else GameRNG.from_entropy()
            rng = master.fork("tie_break")
            seed = master.seed

        return MatchState(
            sides=sides,
            mana=self.config.starting_mana,
            rng=rng,
        ), seed

    # -- running -------------------------------------------------------------

    def simulate(
        self,
        deck_a: DeckConfig,
        deck_b: DeckConfig,
        seed: int | None = None,
        observer: TurnObserver | None = None,
    ) -> MatchResult:
        """Play one match and return its result."""
        return self.run_match(deck_a, deck_b, seed=seed, observer=observer).result

    def run_match(
        self,
        deck_a: DeckConfig,
        deck_b: DeckConfig,
        seed: int | None = None,
        observer: TurnObserver | None = None,
    ) -> MatchTelemetry:
        """Play one match, returning the result with per-turn telemetry."""
        state, seed = self.new_match(deck_a, deck_b, seed)
        telemetry = MatchTelemetry()
        cfg = self.config

        for turn in range(1, cfg.max_turns + 1):
            state.turn = turn

            # Deploy
            deployed = tuple(
                len(deploy_side(state, side, cfg.max_field_size))
                for side in state.sides
            )
            for i, count in enumerate(deployed):
                telemetry.units_deployed[i] += count

            snapshot = TurnSnapshot.capture(state, deployed)
            telemetry.snapshots.append(snapshot)
            if observer is not None:
                observer(snapshot)
            logger.debug(
                "Turn %d (%d mana): fields %d/%d, hp %d/%d",
                turn, state.mana,
                snapshot.sides[0].field_size, snapshot.sides[1].field_size,
                snapshot.sides[0].hp, snapshot.sides[1].hp,
            )

            # Combat
            report = resolve_combat(state)
            for i in range(2):
                telemetry.unit_damage[i] += report.unit_damage[i]
                telemetry.player_damage[i] += report.player_damage[i]

            # Cleanup
            for unit in remove_dead(state):
                telemetry.units_lost[unit.side - 1] += 1

            # Win check
            result = self._check_winner(state, seed)
            if result is not None:
                telemetry.result = result
                logger.debug(
                    "Side %d wins on turn %d (%s)",
                    result.winner, result.turn, result.reason.value,
                )
                return telemetry

            state.mana += cfg.mana_per_turn

        telemetry.result = self._timeout_result(state, seed)
        logger.debug("Timeout at turn %d, side %d wins", cfg.max_turns, telemetry.result.winner)
        return telemetry

    # -- win conditions ------------------------------------------------------

    def _check_winner(self, state: MatchState, seed: int | None) -> MatchResult | None:
        p1, p2 = state.side(1), state.side(2)

        winner: int | None = None
        reason = ResultReason.PLAYER_HP
        if p2.hp <= 0:
            winner = 1
        elif p1.hp <= 0:
            winner = 2
        elif p2.is_decked_out:
            winner, reason = 1, ResultReason.DECK_OUT
        elif p1.is_decked_out:
            winner, reason = 2, ResultReason.DECK_OUT

        if winner is None:
            return None
        return MatchResult(
            winner=winner,
            turn=state.turn,
            reason=reason,
            final_hp=(p1.hp, p2.hp),
            seed=seed,
        )

    def _timeout_result(self, state: MatchState, seed: int | None) -> MatchResult:
        hp1, hp2 = state.side(1).hp, state.side(2).hp
        if hp1 > hp2:
            winner = 1
        elif hp2 > hp1:
            winner = 2
        else:
            winner = self.config.timeout_tie_winner
        return MatchResult(
            winner=winner,
            turn=self.config.max_turns,
            reason=ResultReason.TIMEOUT,
            final_hp=(hp1, hp2),
            seed=seed,
        )


def simulate_game(
    registry: CardRegistry,
    deck_a: DeckConfig,
    deck_b: DeckConfig,
    seed: int | None = None,
    config: EngineConfig | None = None,
    tie_break: TieBreak | str = TieBreak.RANDOM,
    observer: TurnObserver | None = None,
) -> MatchResult:
    """Convenience wrapper: build a :class:`MatchSimulator` and play one match."""
    simulator = MatchSimulator(registry, config=config, tie_break=tie_break)
    return simulator.simulate(deck_a, deck_b, seed=seed, observer=observer)


# =====================================================================
# BatchRunner
# =====================================================================

_worker_simulator: MatchSimulator | None = None


def _init_worker(cards: list, config: EngineConfig, tie_break: TieBreak) -> None:
    """Build one registry and simulator per worker process."""
    global _worker_simulator

    from autobattle.sim.content.registry import CardRegistry

    registry = CardRegistry()
    for card in cards:
        registry.add_card(card)
    _worker_simulator = MatchSimulator(registry, config=config, tie_break=tie_break)


def _worker_run_single(args: tuple) -> MatchResult:
    """Top-level worker function for multiprocessing (must be picklable)."""
    deck_a, deck_b, seed = args
    return _worker_simulator.simulate(deck_a, deck_b, seed=seed)


class BatchRunner:
    """Runs many independent matches of one matchup, optionally in parallel."""

    def __init__(
        self,
        registry: CardRegistry,
        config: EngineConfig | None = None,
        tie_break: TieBreak | str = TieBreak.RANDOM,
    ) -> None:
        self.registry = registry
        self.simulator = MatchSimulator(registry, config=config, tie_break=tie_break)

    def run_batch(
        self,
        deck_a: DeckConfig,
        deck_b: DeckConfig,
        n_runs: int,
        base_seed: int | None = None,
        parallel: bool = False,
        should_stop: Callable[[], bool] | None = None,
    ) -> list[MatchResult]:
        """Play *n_runs* matches of ``deck_a`` (side 1) vs ``deck_b`` (side 2).

        With a *base_seed*, run ``i`` uses seed ``base_seed + i`` and the
        whole batch is reproducible.  *should_stop* is polled between
        matches; once it returns ``True`` the results so far are returned.
        """
        if n_runs <= 0:
            raise InvalidConfiguration(f"n_runs must be positive, got {n_runs}")

        # Fail fast on bad decks before any match runs.
        self.registry.validate_deck(deck_a)
        self.registry.validate_deck(deck_b)

        seeds: list[int | None] = (
            [base_seed + i for i in range(n_runs)]
            if base_seed is not None
            else [None] * n_runs
        )

        logger.info(
            "Running %d matches: %s vs %s",
            n_runs, deck_a.label(1), deck_b.label(2),
        )
        if parallel and n_runs > 1:
            results = self._run_parallel(deck_a, deck_b, seeds, should_stop)
        else:
            results = self._run_sequential(deck_a, deck_b, seeds, should_stop)
        logger.info("Finished %d/%d matches", len(results), n_runs)
        return results

    def _run_sequential(
        self,
        deck_a: DeckConfig,
        deck_b: DeckConfig,
        seeds: list[int | None],
        should_stop: Callable[[], bool] | None,
    ) -> list[MatchResult]:
        results: list[MatchResult] = []
        for seed in seeds:
            if should_stop is not None and should_stop():
                logger.info("Batch cancelled after %d matches", len(results))
                break
            results.append(self.simulator.simulate(deck_a, deck_b, seed=seed))
        return results

    def _run_parallel(
        self,
        deck_a: DeckConfig,
        deck_b: DeckConfig,
        seeds: list[int | None],
        should_stop: Callable[[], bool] | None,
    ) -> list[MatchResult]:
        """Run matches in parallel using multiprocessing.

        Card templates and config go to each worker once, through the pool
        initializer; work items carry only the decks and a seed.
        *should_stop* is polled before each result is collected, so a
        cancelled batch returns the same matches as a sequential one.
        """
        sim = self.simulator
        cards = list(self.registry.cards.values())
        work_items = [(deck_a, deck_b, seed) for seed in seeds]

        n_workers = min(len(seeds), multiprocessing.cpu_count() or 1)

        results: list[MatchResult] = []
        with multiprocessing.Pool(
            processes=n_workers,
            initializer=_init_worker,
            initargs=(cards, sim.config, sim.tie_break),
        ) as pool:
            pending = pool.imap(_worker_run_single, work_items)
            for _ in work_items:
                if should_stop is not None and should_stop():
                    logger.info("Batch cancelled after %d matches", len(results))
                    pool.terminate()
                    break
                results.append(next(pending))
        return results
