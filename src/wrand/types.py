"""Common data types used across the wrand package."""

from __future__ import annotations

from typing import Any, Protocol, Union

from pydantic import BaseModel, ConfigDict, Field

Weight = Union[int, float]


class WeightedItem(Protocol):
    """Anything with a mutable integer weight can live in a pool."""

    weight: int


class Selectable(Protocol):
    """Anything exposing a float weight can be passed to ``select``."""

    @property
    def weight(self) -> float:  # pragma: no cover - protocol definition
        ...


class RandomSource(Protocol):
    """Uniform generators required by the selection algorithms.

    ``random.Random`` instances satisfy this protocol.
    """

    def random(self) -> float:  # pragma: no cover - protocol definition
        ...

    def randrange(self, stop: int) -> int:  # pragma: no cover - protocol definition
        ...


class PoolItem(BaseModel):
    """Ready-made pool item wrapping an arbitrary value."""

    model_config = ConfigDict(validate_assignment=True, arbitrary_types_allowed=True)

    value: Any = None
    weight: int = Field(default=1, ge=0, description="Relative likelihood of selection.")


class WeightedValue(BaseModel):
    """Ready-made selectable wrapping an arbitrary value."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: Any = None
    weight: float = Field(default=1.0, ge=0.0)


class PoolEntry(BaseModel):
    """Snapshot of one pool slot after the last recomputation."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    item: Any
    weight: Weight
    effective_weight: Weight
    cumulative_weight: Weight


__all__ = [
    "PoolEntry",
    "PoolItem",
    "RandomSource",
    "Selectable",
    "Weight",
    "WeightedItem",
    "WeightedValue",
]
