"""
Caching navigator for NavTreeLib.

Provides a transparent caching layer that can wrap any tree navigator.
Path construction asks for a child index once per ancestor and the inverse
traversal asks for a child count once per descent; both can be expensive
for navigators that have to search a parent's children.
"""

import logging
from typing import Any, Dict, Optional

from cachetools import TTLCache

from ..core.navigator import TreeNavigator

logger = logging.getLogger(__name__)


class CachingNavigator(TreeNavigator):
    """
    Optional caching layer for any tree navigator.

    Caches the answers of ``child_index_of`` and ``child_count_of``, keyed by
    node identity. Parent and child lookups are delegated unchanged. The
    cached answers become stale if the tree is modified; call clear_cache()
    after changing the structure.

    Cached entries keep a reference to their node, so a cached identity key
    can not be reused by a different object while the entry is alive.

    Example:
        navigator = CachingNavigator(TreeNodeNavigator(), max_size=50000)

        for node in dfs(root, navigator):
            process(node)
    """

    def __init__(
        self,
        base_navigator: TreeNavigator,
        max_size: int = 10000,
        ttl: float = 300.0  # 5 minutes
    ):
        """
        Initialize caching navigator.

        Args:
            base_navigator: The underlying tree navigator to wrap
            max_size: Maximum number of entries per cache
            ttl: Time-to-live for cache entries in seconds
        """
        if base_navigator is None:
            raise ValueError("The argument 'base_navigator' must not be None.")

        self._navigator = base_navigator
        self._index_cache = TTLCache(maxsize=max_size, ttl=ttl)
        self._count_cache = TTLCache(maxsize=max_size, ttl=ttl)

        # Statistics
        self.cache_hits = 0
        self.cache_misses = 0

    @property
    def base_navigator(self) -> TreeNavigator:
        return self._navigator

    def _lookup(self, cache: TTLCache, node: Any, compute) -> Any:
        key = id(node)
        entry = cache.get(key)
        if entry is not None and entry[0] is node:
            self.cache_hits += 1
            return entry[1]

        self.cache_misses += 1
        value = compute(node)
        cache[key] = (node, value)
        return value

    def parent_of(self, node: Any) -> Optional[Any]:
        return self._navigator.parent_of(node)

    def child_index_of(self, node: Any) -> Optional[int]:
        return self._lookup(self._index_cache, node, self._navigator.child_index_of)

    def child_count_of(self, node: Any) -> int:
        return self._lookup(self._count_cache, node, self._navigator.child_count_of)

    def child_at(self, node: Any, index: int) -> Optional[Any]:
        return self._navigator.child_at(node, index)

    def same_node(self, first: Any, second: Any) -> bool:
        return self._navigator.same_node(first, second)

    def get_depth(self, node: Any) -> int:
        return self._navigator.get_depth(node)

    def get_cache_stats(self) -> Dict[str, Any]:
        """
        Get cache statistics for monitoring and debugging.
        """
        total_requests = self.cache_hits + self.cache_misses
        hit_rate = self.cache_hits / total_requests if total_requests > 0 else 0

        return {
            'cache_hits': self.cache_hits,
            'cache_misses': self.cache_misses,
            'hit_rate': hit_rate,
            'index_cache_size': len(self._index_cache),
            'count_cache_size': len(self._count_cache),
            'max_size': self._index_cache.maxsize,
            'ttl': self._index_cache.ttl
        }

    def clear_cache(self) -> None:
        """
        Clear all cached entries and reset statistics.
        """
        logger.debug(
            "Clearing navigator cache (%d index entries, %d count entries)",
            len(self._index_cache), len(self._count_cache)
        )
        self._index_cache.clear()
        self._count_cache.clear()
        self.cache_hits = 0
        self.cache_misses = 0
