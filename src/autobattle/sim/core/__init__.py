"""Core simulation primitives for the auto-battler simulator."""

from autobattle.sim.core.entities import ModifiedCard, UnitInstance
from autobattle.sim.core.game_state import (
    EngineConfig,
    MatchResult,
    MatchState,
    ResultReason,
    SideState,
)
from autobattle.sim.core.rng import GameRNG

__all__ = [
    # rng
    "GameRNG",
    # entities
    "ModifiedCard",
    "UnitInstance",
    # game_state
    "EngineConfig",
    "MatchResult",
    "MatchState",
    "ResultReason",
    "SideState",
]
