"""Categorical sampling over outcome tokens in lexicographic order."""

from __future__ import annotations

import random
from collections.abc import Mapping
from typing import Any

from txn_synth.errors import SamplingExhaustionError

SUM_TOLERANCE = 1e-9


def sample(distribution: Mapping[str, float] | None, draw: float, key: Any = None) -> str:
    """
    Return the first outcome (sorted by token) whose cumulative probability is >= draw.
    A draw above a total that is 1 within SUM_TOLERANCE (float round-off) yields the
    last outcome. Raises SamplingExhaustionError if the distribution is empty/None or
    its total falls short of 1; `key` is only carried into the error for diagnostics.
    """
    if not 0.0 <= draw < 1.0:
        raise ValueError(f"draw must be in [0, 1), got {draw!r}")
    if not distribution:
        raise SamplingExhaustionError(key, draw)
    cumulative = 0.0
    outcome = ""
    for outcome in sorted(distribution):
        cumulative += distribution[outcome]
        if draw <= cumulative:
            return outcome
    if abs(cumulative - 1.0) <= SUM_TOLERANCE:
        return outcome
    raise SamplingExhaustionError(key, draw)


def sample_with(
    distribution: Mapping[str, float] | None, rng: random.Random, key: Any = None
) -> str:
    """Consume exactly one rng.random() draw and sample from distribution."""
    return sample(distribution, rng.random(), key=key)
