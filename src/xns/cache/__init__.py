"""In-memory caching layer."""

from .keys import CacheKeys
from .memory import CacheEntry, MemoryCache

__all__ = [
    "CacheEntry",
    "CacheKeys",
    "MemoryCache",
]
