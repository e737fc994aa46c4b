"""Best time to buy and sell stock."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from a single buy followed by a single sell."""
    best = 0
    lowest = None
    for price in prices:
        lowest = price if lowest is None else min(lowest, price)
        best = max(best, price - lowest)
    return best


def max_profit_many_trades(prices: Sequence[int]) -> int:
    """Return the best profit when any number of non-overlapping trades is allowed."""
    return sum(max(0, b - a) for a, b in pairwise(prices))