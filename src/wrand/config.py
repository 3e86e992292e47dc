"""Configuration models for wrand."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class PoolConfig(BaseModel):
    """Settings fixed when a ``WeightedPool`` is created."""

    inverse: bool = Field(
        default=False,
        description="Favour smaller weights: effective weight is max_weight - weight + 1.",
    )
    seed: Optional[int] = Field(
        default=None,
        ge=0,
        description="Seed for the pool's private generator; None uses OS entropy.",
    )
    check_membership: bool = Field(
        default=True,
        description="Reject weight updates for items that were never added.",
    )


class SelectionConfig(BaseModel):
    """Settings for the stateless selection helpers."""

    seed: Optional[int] = Field(
        default=None,
        ge=0,
        description="Seed for the generator returned by make_rng.",
    )


__all__ = ["PoolConfig", "SelectionConfig"]
