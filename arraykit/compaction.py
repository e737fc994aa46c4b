"""In-place compaction of lists."""

from __future__ import annotations

from collections.abc import Hashable
from itertools import groupby


def remove_duplicates(nums: list) -> int:
    """Compact a sorted list so its first k items are the distinct values; return k.

    Items past position k are left as they were.
    """
    unique = [key for key, _ in groupby(nums)]
    nums[: len(unique)] = unique
    return len(unique)


def remove_element(nums: list, val: Hashable) -> int:
    """Move every item not equal to ``val`` to the front, in order; return their count.

    Items past the returned count are left as they were.
    """
    kept = [x for x in nums if x != val]
    nums[: len(kept)] = kept
    return len(kept)