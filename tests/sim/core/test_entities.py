"""Tests for ModifiedCard and UnitInstance models."""

import pytest
from pydantic import ValidationError

from autobattle.sim.core.entities import ModifiedCard, UnitInstance

GOBLIN = ModifiedCard(name="Goblin", hp=30, attack=19, speed=35, cost=1)


class TestModifiedCard:
    def test_frozen(self) -> None:
        with pytest.raises(ValidationError):
            GOBLIN.hp = 99


class TestUnitInstanceDeploy:
    def test_copies_card_stats(self) -> None:
        unit = UnitInstance.deploy(GOBLIN, side=2, uid=7)

        assert unit.uid == 7
        assert unit.side == 2
        assert unit.name == "Goblin"
        assert unit.attack == 19
        assert unit.speed == 35
        assert unit.cost == 1
        assert unit.max_hp == 30
        assert unit.current_hp == 30
        assert not unit.is_dead


class TestUnitInstanceTakeDamage:
    def test_direct_damage(self) -> None:
        unit = UnitInstance.deploy(GOBLIN, side=1, uid=1)
        unit.take_damage(10)
        assert unit.current_hp == 20

    def test_exact_lethal(self) -> None:
        unit = UnitInstance.deploy(GOBLIN, side=1, uid=1)
        unit.take_damage(30)
        assert unit.current_hp == 0
        assert unit.is_dead

    def test_overkill_goes_negative(self) -> None:
        unit = UnitInstance.deploy(GOBLIN, side=1, uid=1)
        unit.take_damage(50)
        assert unit.current_hp == -20
        assert unit.is_dead

    def test_zero_and_negative_damage_ignored(self) -> None:
        unit = UnitInstance.deploy(GOBLIN, side=1, uid=1)
        unit.take_damage(0)
        unit.take_damage(-5)
        assert unit.current_hp == 30
        assert unit.current_hp <= unit.max_hp
