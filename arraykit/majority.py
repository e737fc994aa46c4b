"""Majority element by Boyer-Moore voting."""

from __future__ import annotations

from collections.abc import Iterable


def majority_element(nums: Iterable[int]) -> int:
    """Return the element occurring more than half the time.

    A majority element is assumed to exist; an empty input yields 0.
    """
    count = 0
    candidate = 0
    for num in nums:
        if count == 0:
            candidate = num
        count += 1 if num == candidate else -1
    return candidate