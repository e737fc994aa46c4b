"""Classic array algorithms: jumps, rotations, profits, h-index, compaction and a randomized set."""

__version__ = "0.1.0"