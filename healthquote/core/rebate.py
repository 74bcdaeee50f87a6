"""
Contracts for the Australian Government Rebate (AGR) tier lookup.

The tier table itself is owned by the host; the quote model only needs
to ask it for a tier by income band and ask the tier for a percentage
at a given age.
"""
from __future__ import annotations

from typing import Any, Callable, Optional, Protocol, runtime_checkable


@runtime_checkable
class RebateTier(Protocol):
    """A single income band of the rebate table."""

    def get_percentage(self, age: Optional[int]) -> float:
        ...


@runtime_checkable
class RebateTierLookup(Protocol):
    """Resolves an income tier key to its `RebateTier`."""

    def get_tier(self, income_tier: Any) -> RebateTier:
        ...


RebateTierFactory = Callable[[Any], RebateTierLookup]


def build_rebate_lookup(agr: Any, factory: Optional[RebateTierFactory] = None) -> RebateTierLookup:
    """
    Turn the `agr` construction option into a tier lookup.

    Args:
        agr: Raw rebate data, or an object that is already a lookup.
        factory: Host-supplied constructor called with the raw data.

    Raises:
        TypeError: If no factory is given and `agr` is not a lookup.
    """
    if factory is not None:
        return factory(agr)
    if not isinstance(agr, RebateTierLookup):
        raise TypeError(
            "agr must provide get_tier() or an agr_factory must be supplied"
        )
    return agr


__all__ = [
    "RebateTier",
    "RebateTierLookup",
    "RebateTierFactory",
    "build_rebate_lookup",
]
