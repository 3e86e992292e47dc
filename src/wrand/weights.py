"""Weight arithmetic shared by the pool and the stateless selectors."""

from __future__ import annotations

from bisect import bisect_right
from itertools import accumulate
from typing import Sequence, TypeVar

from .types import Weight

W = TypeVar("W", int, float)


def effective_weights(weights: Sequence[int], inverse: bool) -> list[int]:
    """Map raw weights to the weights actually used for selection.

    Inverse mode is a linear inversion: the heaviest item gets 1 and lighter
    items get ``max_weight - weight + 1``. Changing any weight can therefore
    change every other effective weight.
    """

    if not inverse:
        return list(weights)
    max_weight = max(weights, default=0)
    max_weight = max(max_weight, 0)
    return [max_weight - weight + 1 for weight in weights]


def cumulative_weights(weights: Sequence[W]) -> list[W]:
    """Running sums of ``weights`` in the given order."""

    return list(accumulate(weights))


def search(cumulative: Sequence[Weight], draw: float) -> int:
    """Return the first index whose cumulative weight is strictly above ``draw``."""

    return bisect_right(cumulative, draw)


__all__ = ["cumulative_weights", "effective_weights", "search"]
