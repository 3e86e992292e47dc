"""Public package interface for wrand."""

from .config import PoolConfig, SelectionConfig
from .errors import (
    EmptyPoolError,
    EmptySelectionError,
    PreconditionError,
    UnknownItemError,
    WrandError,
    ZeroWeightError,
)
from .pool import WeightedPool
from .rng import default_rng, make_rng, rng_from_config
from .selection import select, select_index
from .types import (
    PoolEntry,
    PoolItem,
    RandomSource,
    Selectable,
    WeightedItem,
    WeightedValue,
)
from .weights import cumulative_weights, effective_weights, search

__all__ = [
    "EmptyPoolError",
    "EmptySelectionError",
    "PoolConfig",
    "PoolEntry",
    "PoolItem",
    "PreconditionError",
    "RandomSource",
    "Selectable",
    "SelectionConfig",
    "UnknownItemError",
    "WeightedItem",
    "WeightedPool",
    "WeightedValue",
    "WrandError",
    "ZeroWeightError",
    "cumulative_weights",
    "default_rng",
    "effective_weights",
    "make_rng",
    "rng_from_config",
    "search",
    "select",
    "select_index",
]
