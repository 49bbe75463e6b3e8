"""Seeded random number generator for reproducible match simulation.

Wraps Python's random.Random.  The only randomness in a match is the
ordering of equal-speed units in the combat pass; routing it through a
seeded ``GameRNG`` means any match can be replayed exactly from the seed
stored on its result.
"""

from __future__ import annotations

import hashlib
import random
import secrets
from typing import TypeVar

T = TypeVar("T")


class GameRNG:
    """Deterministic RNG that can be forked into independent sub-streams.

    Parameters
    ----------
    seed:
        Integer seed for the underlying Mersenne Twister.
    """

    def __init__(self, seed: int) -> None:
        self._seed = seed
        self._rng = random.Random(seed)

    @classmethod
    def from_entropy(cls) -> GameRNG:
        """Create an RNG with a fresh OS-provided seed (still recorded)."""
        return cls(secrets.randbits(63))

    # -- public properties ---------------------------------------------------

    @property
    def seed(self) -> int:
        """Return the seed this RNG was initialised with."""
        return self._seed

    # -- core random methods -------------------------------------------------

    def shuffle(self, lst: list[T]) -> None:
        """Shuffle *lst* in-place."""
        self._rng.shuffle(lst)

    # -- forking -------------------------------------------------------------

    def fork(self, name: str) -> GameRNG:
        """Create a child RNG whose seed is derived from this RNG's seed and
        *name*.

        Forking with the same *name* always produces the same child seed,
        so each match in a batch can get its own stream from one base seed.
        """
        digest = hashlib.sha256(f"{self._seed}:{name}".encode()).digest()
        child_seed = int.from_bytes(digest[:8], "big")
        return GameRNG(child_seed)

    # -- dunder helpers ------------------------------------------------------

    def __repr__(self) -> str:
        return f"GameRNG(seed={self._seed})"
