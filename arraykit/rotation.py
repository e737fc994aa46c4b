"""In-place rotation of a list to the right."""

from __future__ import annotations


def rotate(nums: list, k: int) -> None:
    """Rotate ``nums`` right by ``k`` steps, in place."""
    n = len(nums)
    if n == 0:
        return
    k %= n
    if k:
        nums[:] = nums[-k:] + nums[:-k]