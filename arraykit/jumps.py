"""Jump game: reachability and minimum jump count."""

from __future__ import annotations

from collections.abc import Sequence


def can_jump(nums: Sequence[int]) -> bool:
    """Return whether the last index is reachable from index 0.

    Each element is the maximum jump length from that position.
    An empty sequence is not reachable.
    """
    if not nums:
        return False
    last = len(nums) - 1
    reach = 0
    for i, step in enumerate(nums):
        if i > reach:
            return False
        reach = max(reach, i + step)
        if reach >= last:
            return True
    return False


def min_jumps(nums: Sequence[int]) -> int:
    """Return the minimum number of jumps to reach the last index.

    Uses the greedy window scan; the last index is assumed reachable.
    """
    jumps = 0
    current_end = 0
    farthest = 0
    for i, step in enumerate(nums[:-1]):
        farthest = max(farthest, i + step)
        if i == current_end:
            jumps += 1
            current_end = farthest
    return jumps