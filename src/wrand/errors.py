"""Exceptions raised when a selection precondition is not met."""

from __future__ import annotations


class WrandError(Exception):
    """Base class for all wrand errors."""


class PreconditionError(WrandError, ValueError):
    """The caller broke the contract of a selection operation."""


class EmptyPoolError(PreconditionError):
    """A random item was requested from a pool with no items."""


class EmptySelectionError(PreconditionError):
    """A stateless selection was called with an empty sequence."""


class ZeroWeightError(PreconditionError):
    """The total weight is not positive, so no draw can be mapped to an item."""


class UnknownItemError(PreconditionError):
    """A weight update targeted an item that was never added to the pool."""


__all__ = [
    "EmptyPoolError",
    "EmptySelectionError",
    "PreconditionError",
    "UnknownItemError",
    "WrandError",
    "ZeroWeightError",
]
