"""Researcher h-index."""

from __future__ import annotations

from collections.abc import Iterable


def h_index(citations: Iterable[int]) -> int:
    """Return the largest h such that h papers each have at least h citations."""
    ordered = sorted(citations, reverse=True)
    return next((i for i, c in enumerate(ordered) if c <= i), len(ordered))