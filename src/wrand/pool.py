"""Mutable pool of weighted items with precomputed cumulative weights."""

from __future__ import annotations

import logging
from typing import Generic, Iterator, Optional, TypeVar

from .config import PoolConfig
from .errors import EmptyPoolError, UnknownItemError, ZeroWeightError
from .rng import make_rng
from .types import PoolEntry, RandomSource, WeightedItem
from .weights import cumulative_weights, effective_weights, search

LOGGER = logging.getLogger(__name__)

T = TypeVar("T", bound=WeightedItem)


class WeightedPool(Generic[T]):
    """Pick items at random with probability proportional to their weight.

    Items are kept sorted by cumulative weight. Cumulative weights are owned by
    the pool and live in a list parallel to the items, so user objects only
    need a ``weight`` attribute. Every ``add`` and ``set_weight`` is O(n);
    ``pick_random`` is O(log n).
    """

    def __init__(
        self,
        config: Optional[PoolConfig] = None,
        *,
        inverse: Optional[bool] = None,
        rng: Optional[RandomSource] = None,
    ) -> None:
        self.config = config or PoolConfig()
        if inverse is not None:
            self.config = self.config.model_copy(update={"inverse": inverse})
        self._inverse = self.config.inverse
        self._rng = rng if rng is not None else make_rng(self.config.seed)
        self._items: list[T] = []
        self._effective: list[int] = []
        self._cumulative: list[int] = []
        self._total_weight = 0

    @classmethod
    def create(cls, inverse: bool = False, *, rng: Optional[RandomSource] = None) -> "WeightedPool[T]":
        """Return an empty pool; ``inverse`` cannot change afterwards."""

        return cls(PoolConfig(inverse=inverse), rng=rng)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    @property
    def inverse(self) -> bool:
        return self._inverse

    @property
    def total_weight(self) -> int:
        return self._total_weight

    def add(self, item: T) -> None:
        """Append ``item`` and recompute all cumulative weights."""

        self._items.append(item)
        self._recompute()

    def set_weight(self, item: T, weight: int) -> None:
        """Change the weight of an item already in the pool.

        Use this instead of assigning ``item.weight`` directly, otherwise the
        cumulative weights go stale.
        """

        if self.config.check_membership and self._index_of(item) is None:
            raise UnknownItemError(f"{item!r} is not in the pool")
        item.weight = weight
        self._recompute()

    def pick_random(self) -> T:
        """Return a random item, weighted by effective weight."""

        if not self._items:
            raise EmptyPoolError("cannot pick from an empty pool")
        if self._total_weight <= 0:
            raise ZeroWeightError(f"total weight must be > 0, got {self._total_weight}")
        draw = self._rng.random() * self._total_weight
        index = search(self._cumulative, draw)
        # Numeric edge-case
        if index >= len(self._items):
            index = len(self._items) - 1
        return self._items[index]

    def items(self) -> list[T]:
        """Items in selection order (ascending cumulative weight)."""

        return list(self._items)

    def cumulative_weight(self, item: T) -> int:
        return self._cumulative[self._require_index(item)]

    def effective_weight(self, item: T) -> int:
        return self._effective[self._require_index(item)]

    def entries(self) -> list[PoolEntry]:
        """Snapshot of every slot as computed by the last recomputation."""

        return [
            PoolEntry(
                item=item,
                weight=item.weight,
                effective_weight=effective,
                cumulative_weight=cumulative,
            )
            for item, effective, cumulative in zip(self._items, self._effective, self._cumulative)
        ]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __contains__(self, item: object) -> bool:
        return self._index_of(item) is not None

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(items={len(self._items)}, "
            f"total_weight={self._total_weight}, inverse={self._inverse})"
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _recompute(self) -> None:
        effective = effective_weights([item.weight for item in self._items], self._inverse)
        cumulative = cumulative_weights(effective)
        self._total_weight = cumulative[-1] if cumulative else 0

        order = sorted(range(len(self._items)), key=cumulative.__getitem__)
        self._items = [self._items[i] for i in order]
        self._effective = [effective[i] for i in order]
        self._cumulative = [cumulative[i] for i in order]
        LOGGER.debug(
            "Recomputed pool of %d items: total_weight=%d inverse=%s",
            len(self._items),
            self._total_weight,
            self._inverse,
        )

    def _index_of(self, item: object) -> Optional[int]:
        for index, candidate in enumerate(self._items):
            if candidate is item:
                return index
        return None

    def _require_index(self, item: T) -> int:
        index = self._index_of(item)
        if index is None:
            raise UnknownItemError(f"{item!r} is not in the pool")
        return index


__all__ = ["WeightedPool"]
