"""Bounded cache of rendered placeholder data URIs.

Eviction is strictly first-in first-out: a lookup never moves an entry, so
the entry dropped at capacity is always the oldest one inserted.

Usage:
    cache = DataUriCache(max_items=10)
    uri = cache.get_or_render(width=400, height=300)
"""

from collections import OrderedDict

from semantic_placeholder.cli.defaults import defaults
from semantic_placeholder.markup import svg_markup


class DataUriCache:
    """FIFO cache mapping ``(width, height)`` to its data URI.

    Thread Safety:
        Not thread-safe. Use external synchronization if needed.

    Attributes:
        max_items: Maximum cache entries before eviction
        hits: Number of successful cache lookups
        misses: Number of lookups that had to render
        evictions: Number of entries dropped at capacity
    """

    def __init__(self, max_items: int = defaults.CACHE_MAX_ITEMS):
        if max_items < 1:
            raise ValueError(f"max_items must be >= 1, got {max_items}")

        self._cache: OrderedDict[tuple[int, int], str] = OrderedDict()
        self.max_items = max_items
        self.hits = 0
        self.misses = 0
        self.evictions = 0

    def __len__(self) -> int:
        return len(self._cache)

    def __contains__(self, key: tuple[int, int]) -> bool:
        return key in self._cache

    def keys(self) -> list[tuple[int, int]]:
        """Cached keys, oldest first."""
        return list(self._cache.keys())

    def get(self, width: int, height: int) -> str | None:
        return self._cache.get((width, height))

    def get_or_render(self, width: int, height: int) -> str:
        key = (width, height)
        cached = self._cache.get(key)
        if cached is not None:
            self.hits += 1
            return cached

        self.misses += 1
        uri = svg_markup.render_to_uri(width, height)
        if len(self._cache) >= self.max_items:
            self._cache.popitem(last=False)
            self.evictions += 1
        self._cache[key] = uri
        return uri

    def clear(self) -> None:
        self._cache.clear()
        self.hits = 0
        self.misses = 0
        self.evictions = 0

    def stats(self) -> dict[str, int]:
        return {
            "size": len(self._cache),
            "max_items": self.max_items,
            "hits": self.hits,
            "misses": self.misses,
            "evictions": self.evictions,
        }
