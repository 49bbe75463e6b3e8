"""Target selection -- pick which enemy unit an attacker hits.

Each strategy is a pure function over a non-empty candidate sequence.
Ties always go to the earliest candidate (field order), which is why
every comparison below is strict.
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from autobattle.ir.cards import Strategy
from autobattle.sim.core.entities import UnitInstance

logger = logging.getLogger(__name__)

DEFAULT_STRATEGY = Strategy.OPTIMIZE_DAMAGE


def _first_max(
    candidates: Sequence[UnitInstance],
    key: Callable[[UnitInstance], int],
) -> UnitInstance:
    best = candidates[0]
    best_key = key(best)
    for unit in candidates[1:]:
        k = key(unit)
        if k > best_key:
            best, best_key = unit, k
    return best


def _first_min(
    candidates: Sequence[UnitInstance],
    key: Callable[[UnitInstance], int],
) -> UnitInstance:
    best = candidates[0]
    best_key = key(best)
    for unit in candidates[1:]:
        k = key(unit)
        if k < best_key:
            best, best_key = unit, k
    return best


def target_mana(attacker: UnitInstance, candidates: Sequence[UnitInstance]) -> UnitInstance:
    """Hit the most expensive enemy."""
    return _first_max(candidates, lambda u: u.cost)


def kill_shot(attacker: UnitInstance, candidates: Sequence[UnitInstance]) -> UnitInstance:
    """Kill the biggest enemy this hit can kill; otherwise hit the biggest enemy."""
    killable = [u for u in candidates if u.current_hp <= attacker.attack]
    return _first_max(killable or candidates, lambda u: u.current_hp)


def optimize_damage(attacker: UnitInstance, candidates: Sequence[UnitInstance]) -> UnitInstance:
    """Waste as little damage as possible.

    Prefer the enemy left with the least HP among those with at least
    ``attack`` HP; if every enemy would be overkilled, pick the one whose
    HP is closest to ``attack``.
    """
    no_waste = [u for u in candidates if u.current_hp >= attacker.attack]
    if no_waste:
        return _first_min(no_waste, lambda u: u.current_hp - attacker.attack)
    return _first_min(candidates, lambda u: abs(u.current_hp - attacker.attack))


_STRATEGIES: dict[Strategy, Callable[[UnitInstance, Sequence[UnitInstance]], UnitInstance]] = {
    Strategy.TARGET_MANA: target_mana,
    Strategy.KILL_SHOT: kill_shot,
    Strategy.OPTIMIZE_DAMAGE: optimize_damage,
}


def resolve_strategy(tag: str | Strategy) -> Strategy:
    """Map a raw strategy tag to a :class:`Strategy`.

    Unknown tags fall back to :data:`DEFAULT_STRATEGY`.
    """
    if isinstance(tag, Strategy):
        return tag
    try:
        return Strategy(tag)
    except ValueError:
        logger.warning("Unknown strategy %r, using %r", tag, DEFAULT_STRATEGY.value)
        return DEFAULT_STRATEGY


def select_target(
    attacker: UnitInstance,
    candidates: Sequence[UnitInstance],
    strategy: str | Strategy,
) -> UnitInstance | None:
    """Choose one of *candidates* for *attacker* to hit.

    Returns ``None`` only when *candidates* is empty, which callers treat
    as "attack the player directly".
    """
    if not candidates:
        return None
    return _STRATEGIES[resolve_strategy(strategy)](attacker, candidates)
