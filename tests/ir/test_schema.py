"""Tests for the input models -- CardTemplate, DeckConfig, and the tag enums."""

import json

import pytest
from pydantic import ValidationError

from autobattle.ir import CardTemplate, DeckConfig, Flavor, Strategy


# ---------------------------------------------------------------------------
# CardTemplate
# ---------------------------------------------------------------------------

class TestCardTemplate:
    def test_roundtrip_json(self) -> None:
        card = CardTemplate(id="Wizard", hp=120, attack=75, speed=25, cost=6)
        restored = CardTemplate.model_validate_json(card.model_dump_json())
        assert restored == card

    @pytest.mark.parametrize("stat", ["hp", "attack", "speed", "cost"])
    def test_stats_must_be_positive(self, stat) -> None:
        raw = {"id": "Bad", "hp": 10, "attack": 10, "speed": 10, "cost": 1}
        raw[stat] = 0
        with pytest.raises(ValidationError):
            CardTemplate.model_validate(raw)

    def test_frozen(self) -> None:
        card = CardTemplate(id="Goblin", hp=30, attack=15, speed=35, cost=1)
        with pytest.raises(ValidationError):
            card.attack = 99


# ---------------------------------------------------------------------------
# DeckConfig
# ---------------------------------------------------------------------------

class TestDeckConfig:
    def test_defaults(self) -> None:
        deck = DeckConfig(cards=["Goblin"])
        assert deck.cards == ("Goblin",)
        assert deck.flavor == "base"
        assert deck.strategy == "optimize-damage"
        assert deck.name is None

    def test_legacy_keys(self) -> None:
        deck = DeckConfig.model_validate_json(json.dumps({
            "cards": ["Archer"],
            "type": "angry",
            "targetStrategy": "kill-shot",
        }))
        assert deck.flavor == "angry"
        assert deck.strategy == "kill-shot"

    def test_unknown_tags_kept_raw(self) -> None:
        deck = DeckConfig(cards=["Archer"], flavor="spicy", strategy="chaos")
        assert deck.flavor == "spicy"
        assert deck.strategy == "chaos"

    def test_label(self) -> None:
        assert DeckConfig(cards=["Goblin"]).label(2) == "Player 2"
        assert DeckConfig(cards=["Goblin"], name="Rush").label(2) == "Rush"


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class TestTags:
    def test_flavor_values(self) -> None:
        assert {f.value for f in Flavor} == {"base", "speedy", "hardy", "angry"}

    def test_strategy_values(self) -> None:
        assert Strategy("target-mana") is Strategy.TARGET_MANA
        assert {s.value for s in Strategy} == {"target-mana", "kill-shot", "optimize-damage"}
