"""Random source helpers.

Every selection accepts an explicit generator. When none is given the
package-level generator from ``default_rng`` is used, which is separate from
the state of the ``random`` module.
"""

from __future__ import annotations

import random
from typing import Optional

from .config import SelectionConfig
from .types import RandomSource

_DEFAULT_RNG = random.Random()


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Create a generator, deterministic when ``seed`` is given."""

    if seed is not None and seed < 0:
        raise ValueError("seed must be >= 0")
    return random.Random(seed)


def rng_from_config(config: SelectionConfig) -> random.Random:
    return make_rng(config.seed)


def default_rng() -> random.Random:
    """Return the shared generator used when callers pass no ``rng``."""

    return _DEFAULT_RNG


def resolve_rng(rng: Optional[RandomSource]) -> RandomSource:
    return rng if rng is not None else _DEFAULT_RNG


__all__ = ["default_rng", "make_rng", "resolve_rng", "rng_from_config"]
