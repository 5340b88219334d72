"""Deterministic random source for candidate synthesis.

A 32-bit linear congruential generator. The same seed yields the same
sequence in every process, which keeps generated pools stable across runs.
"""

from collections.abc import Callable

_MULTIPLIER = 1664525
_INCREMENT = 1013904223
_MODULUS = 2**32

SEED_OFFSET = 42

Rng = Callable[[], float]


def seeded_rng(seed: int) -> Rng:
    """Return a generator yielding floats in [0, 1) for ``seed``."""
    state = seed % _MODULUS

    def next_float() -> float:
        nonlocal state
        state = (state * _MULTIPLIER + _INCREMENT) % _MODULUS
        return state / _MODULUS

    return next_float


def seed_for(job_id: str) -> int:
    """Derive a seed from a job id: sum of character codes plus a fixed offset."""
    return sum(ord(ch) for ch in job_id) + SEED_OFFSET
