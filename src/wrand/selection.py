"""Stateless weighted selection over ad-hoc sequences."""

from __future__ import annotations

import logging
from typing import Optional, Sequence, TypeVar

from .errors import EmptySelectionError, ZeroWeightError
from .rng import resolve_rng
from .types import RandomSource, Selectable
from .weights import cumulative_weights, search

LOGGER = logging.getLogger(__name__)

S = TypeVar("S", bound=Selectable)


def select(items: Sequence[S], *, rng: Optional[RandomSource] = None) -> S:
    """Choose a single item based on its ``weight``.

    Each item's weight is read exactly once. The total weight must be
    positive; there is no uniform fallback here.
    """

    if not items:
        raise EmptySelectionError("items must be non-empty")
    cumulative = cumulative_weights([float(item.weight) for item in items])
    total = cumulative[-1]
    if total <= 0.0:
        raise ZeroWeightError(f"total weight must be > 0, got {total}")
    draw = resolve_rng(rng).random() * total
    return items[_clamp_index(search(cumulative, draw), len(items))]


def select_index(weights: Sequence[float], *, rng: Optional[RandomSource] = None) -> int:
    """Choose an index into ``weights``.

    When every weight is zero each index is equally likely. Negative weights
    are accepted but give unspecified results.
    """

    if not weights:
        raise EmptySelectionError("weights must be non-empty")
    source = resolve_rng(rng)
    cumulative = cumulative_weights([float(weight) for weight in weights])
    total = cumulative[-1]
    if total == 0.0:
        LOGGER.debug("All %d weights are zero; selecting uniformly", len(weights))
        return source.randrange(len(weights))
    draw = source.random() * total
    return _clamp_index(search(cumulative, draw), len(weights))


def _clamp_index(index: int, size: int) -> int:
    # draw can round up to the total, and negative weights break ordering
    return min(index, size - 1)


__all__ = ["select", "select_index"]
