"""Product of all elements except the one at each position."""

from __future__ import annotations

import operator
from collections.abc import Sequence
from itertools import accumulate


def product_except_self(nums: Sequence[int]) -> list[int]:
    """Return a list whose i-th item is the product of all items but ``nums[i]``.

    Computed from prefix and suffix products, without division.
    """
    prefix = list(accumulate(nums[:-1], operator.mul, initial=1)) if nums else []
    suffix = list(accumulate(reversed(nums[1:]), operator.mul, initial=1))[::-1] if nums else []
    return [p * s for p, s in zip(prefix, suffix)]