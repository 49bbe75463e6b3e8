"""Tests for target selection strategies."""

from __future__ import annotations

import logging

import pytest

from autobattle.ir.cards import Strategy
from autobattle.sim.mechanics.targeting import (
    kill_shot,
    optimize_damage,
    resolve_strategy,
    select_target,
    target_mana,
)
from tests.sim.conftest import make_unit


def _field(*hps: int, costs: list[int] | None = None) -> list:
    costs = costs or [1] * len(hps)
    return [
        make_unit(name=f"u{i}", hp=hp, cost=cost, side=2, uid=i)
        for i, (hp, cost) in enumerate(zip(hps, costs))
    ]


class TestSelectTarget:
    def test_empty_candidates(self) -> None:
        attacker = make_unit(attack=10)
        for strategy in Strategy:
            assert select_target(attacker, [], strategy) is None

    def test_single_candidate(self) -> None:
        attacker = make_unit(attack=10)
        field = _field(40)
        for strategy in Strategy:
            assert select_target(attacker, field, strategy) is field[0]

    def test_dispatches_by_tag(self) -> None:
        attacker = make_unit(attack=50)
        field = _field(30, 50, 90, costs=[8, 1, 1])
        assert select_target(attacker, field, "target-mana") is field[0]
        assert select_target(attacker, field, "kill-shot") is field[1]
        assert select_target(attacker, field, "optimize-damage") is field[1]

    def test_unknown_strategy_uses_optimize_damage(self, caplog: pytest.LogCaptureFixture) -> None:
        attacker = make_unit(attack=30)
        field = _field(100, 35, 20)
        with caplog.at_level(logging.WARNING):
            assert select_target(attacker, field, "berserk") is field[1]
        assert resolve_strategy("berserk") is Strategy.OPTIMIZE_DAMAGE
        assert "berserk" in caplog.text

    def test_does_not_damage(self) -> None:
        attacker = make_unit(attack=30)
        field = _field(40, 20)
        for strategy in Strategy:
            select_target(attacker, field, strategy)
        assert [u.current_hp for u in field] == [40, 20]


class TestTargetMana:
    def test_highest_cost(self) -> None:
        field = _field(10, 10, 10, costs=[2, 6, 4])
        assert target_mana(make_unit(), field) is field[1]

    def test_tie_goes_to_first(self) -> None:
        field = _field(10, 10, 10, costs=[2, 8, 8])
        assert target_mana(make_unit(), field) is field[1]


class TestKillShot:
    def test_biggest_killable(self) -> None:
        field = _field(30, 50, 90)
        assert kill_shot(make_unit(attack=50), field) is field[1]

    def test_no_killable_picks_highest_hp(self) -> None:
        field = _field(30, 90, 90)
        assert kill_shot(make_unit(attack=10), field) is field[1]

    def test_prefers_killable_over_bigger_unkillable(self) -> None:
        field = _field(200, 15)
        assert kill_shot(make_unit(attack=15), field) is field[1]

    def test_uses_current_hp(self) -> None:
        field = _field(100, 60)
        field[0].current_hp = 20
        assert kill_shot(make_unit(attack=25), field) is field[0]

    @pytest.mark.parametrize("attack", [5, 15, 30, 45, 60, 100])
    def test_never_skips_a_killable_target(self, attack: int) -> None:
        field = _field(40, 12, 75, 30, 55)
        target = kill_shot(make_unit(attack=attack), field)
        killable = [u for u in field if u.current_hp <= attack]
        if killable:
            assert target.current_hp <= attack
            assert target.current_hp == max(u.current_hp for u in killable)


class TestOptimizeDamage:
    def test_least_leftover_among_survivors(self) -> None:
        field = _field(100, 40, 35, 20)
        assert optimize_damage(make_unit(attack=30), field) is field[2]

    def test_exact_lethal_counts_as_no_waste(self) -> None:
        field = _field(50, 30)
        assert optimize_damage(make_unit(attack=30), field) is field[1]

    def test_all_overkilled_picks_closest(self) -> None:
        field = _field(20, 90, 60)
        assert optimize_damage(make_unit(attack=100), field) is field[1]

    def test_tie_goes_to_first(self) -> None:
        field = _field(45, 45, 45)
        assert optimize_damage(make_unit(attack=30), field) is field[0]

    @pytest.mark.parametrize("attack", [5, 15, 30, 45, 60, 100])
    def test_no_better_survivor_exists(self, attack: int) -> None:
        field = _field(40, 12, 75, 30, 55)
        target = optimize_damage(make_unit(attack=attack), field)
        survivors = [u for u in field if u.current_hp >= attack]
        if survivors:
            assert target.current_hp >= attack
            leftover = target.current_hp - attack
            assert all(leftover <= u.current_hp - attack for u in survivors)
