"""Shared fixtures and helpers for simulation tests."""

from __future__ import annotations

import pytest

from autobattle.ir.cards import CardTemplate, Strategy
from autobattle.ir.decks import DeckConfig
from autobattle.sim.content.registry import CardRegistry
from autobattle.sim.core.entities import UnitInstance
from autobattle.sim.core.game_state import MatchState, SideState


@pytest.fixture(scope="module")
def registry() -> CardRegistry:
    """Stock catalog plus two test-only cards.

    - ``Pebble``: cheap, weak, tough enough to outlast a match.
    - ``Giant``: costs more mana than the default ruleset ever provides.
    """
    reg = CardRegistry.default()
    reg.add_card(CardTemplate(id="Pebble", hp=10, attack=1, speed=10, cost=1))
    reg.add_card(CardTemplate(id="Giant", hp=500, attack=50, speed=5, cost=30))
    return reg


def make_deck(
    cards: list[str],
    flavor: str = "base",
    strategy: str = "optimize-damage",
    name: str | None = None,
) -> DeckConfig:
    return DeckConfig(cards=cards, flavor=flavor, strategy=strategy, name=name)


def make_unit(
    name: str = "Unit",
    hp: int = 50,
    attack: int = 10,
    speed: int = 10,
    cost: int = 1,
    side: int = 1,
    uid: int = 0,
) -> UnitInstance:
    return UnitInstance(
        uid=uid, side=side, name=name, attack=attack, speed=speed,
        cost=cost, max_hp=hp, current_hp=hp,
    )


def make_state(
    field_1: list[UnitInstance] | None = None,
    field_2: list[UnitInstance] | None = None,
    strategy_1: Strategy = Strategy.OPTIMIZE_DAMAGE,
    strategy_2: Strategy = Strategy.OPTIMIZE_DAMAGE,
    mana: int = 4,
    hp: int = 100,
) -> MatchState:
    return MatchState(
        sides=[
            SideState(side=1, hp=hp, strategy=strategy_1, deck=[], field=field_1 or []),
            SideState(side=2, hp=hp, strategy=strategy_2, deck=[], field=field_2 or []),
        ],
        mana=mana,
    )
