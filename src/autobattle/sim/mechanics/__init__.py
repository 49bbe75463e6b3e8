"""Match mechanics for the auto-battler simulator.

Re-exports the primary functions from each mechanics module for convenience.

Usage::

    from autobattle.sim.mechanics import (
        apply_flavor, resolve_flavor,
        select_target, resolve_strategy,
        deploy_side,
        action_order, resolve_combat, remove_dead,
    )
"""

# -- flavors -----------------------------------------------------------------
from .flavors import apply_flavor, resolve_flavor, round_half_up

# -- targeting ---------------------------------------------------------------
from .targeting import (
    kill_shot,
    optimize_damage,
    resolve_strategy,
    select_target,
    target_mana,
)

# -- deployment --------------------------------------------------------------
from .deployment import deploy_side

# -- combat ------------------------------------------------------------------
from .combat import CombatReport, action_order, remove_dead, resolve_combat

__all__ = [
    # flavors
    "apply_flavor",
    "resolve_flavor",
    "round_half_up",
    # targeting
    "select_target",
    "resolve_strategy",
    "target_mana",
    "kill_shot",
    "optimize_damage",
    # deployment
    "deploy_side",
    # combat
    "CombatReport",
    "action_order",
    "resolve_combat",
    "remove_dead",
]
