"""Core utilities shared by the model and naming layers.

By isolating these utilities here, we maintain a clean dependency graph:

    core <- model <- naming

Exports:
    Counter: Monotonic integer generator for name disambiguation
    LoadingCache: Memoizing store with one loader call per key
    DepthGuard: Context manager for recursion depth limiting
    DepthLimitExceededError: Exception raised when depth limit exceeded

Python 3.13+.
"""

from .counter import Counter
from .depth_guard import DepthGuard, DepthLimitExceededError
from .loading_cache import LoadingCache

__all__ = ["Counter", "DepthGuard", "DepthLimitExceededError", "LoadingCache"]
