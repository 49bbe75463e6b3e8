"""Deck flavors -- one-off stat modifiers applied when a deck pool is built.

    speedy  -> speed + 15
    hardy   -> hp * 1.25 (rounded half up)
    angry   -> attack * 1.25 (rounded half up)
    base    -> unchanged

Cost and name are always carried through untouched.
"""

from __future__ import annotations

import logging
import math
from typing import Callable

from autobattle.ir.cards import CardTemplate, Flavor
from autobattle.sim.core.entities import ModifiedCard

logger = logging.getLogger(__name__)

SPEEDY_BONUS = 15
HARDY_MULTIPLIER = 1.25
ANGRY_MULTIPLIER = 1.25


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 going up (``round`` would go to even)."""
    return int(math.floor(value + 0.5))


def _base(stats: dict[str, int]) -> None:
    pass


def _speedy(stats: dict[str, int]) -> None:
    stats["speed"] += SPEEDY_BONUS


def _hardy(stats: dict[str, int]) -> None:
    stats["hp"] = round_half_up(stats["hp"] * HARDY_MULTIPLIER)


def _angry(stats: dict[str, int]) -> None:
    stats["attack"] = round_half_up(stats["attack"] * ANGRY_MULTIPLIER)


_FLAVOR_EFFECTS: dict[Flavor, Callable[[dict[str, int]], None]] = {
    Flavor.BASE: _base,
    Flavor.SPEEDY: _speedy,
    Flavor.HARDY: _hardy,
    Flavor.ANGRY: _angry,
}


def resolve_flavor(tag: str | Flavor) -> Flavor:
    """Map a raw flavor tag to a :class:`Flavor`.

    Unknown tags fall back to ``Flavor.BASE`` (no modification).
    """
    if isinstance(tag, Flavor):
        return tag
    try:
        return Flavor(tag)
    except ValueError:
        logger.warning("Unknown flavor %r, using %r", tag, Flavor.BASE.value)
        return Flavor.BASE


def apply_flavor(card: CardTemplate | ModifiedCard, flavor: str | Flavor) -> ModifiedCard:
    """Return the flavored version of *card*.  Does not modify *card*."""
    stats = {"hp": card.hp, "attack": card.attack, "speed": card.speed}
    _FLAVOR_EFFECTS[resolve_flavor(flavor)](stats)
    name = card.id if isinstance(card, CardTemplate) else card.name
    return ModifiedCard(name=name, cost=card.cost, **stats)
