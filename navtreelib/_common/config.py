"""Configuration system for NavTreeLib.

This module defines how users specify their traversal requirements:
which direction to walk, which nodes to report, how deep to go and
whether navigator answers should be cached.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Optional


class TraversalDirection(Enum):
    """Which way to walk the pre-order sequence."""
    FORWARD = "dfs"          # Parent before children, children in index order
    INVERSE = "inverse_dfs"  # Exact reverse of FORWARD


class CacheStrategy(Enum):
    """How to handle caching of navigator answers during traversal."""
    NONE = "none"       # Ask the navigator every time
    MEMORY = "memory"   # In-memory TTL cache around the navigator


@dataclass
class FilterConfig:
    """Configuration for filtering reported nodes.

    Filters only decide what is reported. Excluded nodes are still walked
    through, so their descendants can be reported.
    """

    include_filter: Optional[Callable[[Any], bool]] = None  # Include predicate
    exclude_filter: Optional[Callable[[Any], bool]] = None  # Exclude predicate

    def should_include(self, node) -> bool:
        """Check if a node should be included based on filters.

        Args:
            node: Node to check

        Returns:
            True if node passes all filters
        """
        # Exclusion takes precedence
        if self.exclude_filter and self.exclude_filter(node):
            return False

        if self.include_filter:
            return self.include_filter(node)

        return True


@dataclass
class DepthConfig:
    """Configuration for depth-based filtering."""

    min_depth: int = 0               # Minimum depth to yield
    max_depth: Optional[int] = None  # Maximum depth to traverse

    def should_yield(self, depth: int) -> bool:
        """Check if nodes at this depth should be yielded."""
        if depth < self.min_depth:
            return False
        if self.max_depth is not None and depth > self.max_depth:
            return False
        return True


@dataclass
class CacheConfig:
    """Sizing of the navigator cache used with CacheStrategy.MEMORY."""

    max_size: int = 10000  # Entries per cached question
    ttl: float = 300.0     # Seconds


@dataclass
class TraversalConfig:
    """Complete configuration for a tree traversal.

    This is the primary way users specify what they want from a traversal.
    The ExecutionPlan validates it before any navigator call is made.
    """

    direction: TraversalDirection = TraversalDirection.FORWARD

    depth: DepthConfig = field(default_factory=DepthConfig)

    filter: FilterConfig = field(default_factory=FilterConfig)

    cache_strategy: CacheStrategy = CacheStrategy.NONE
    cache: CacheConfig = field(default_factory=CacheConfig)

    # Forward traversal from a start node stays inside the start's subtree
    subtree_only: bool = True

    max_nodes: Optional[int] = None  # Stop after reporting this many nodes

    @classmethod
    def reverse_scan(cls) -> 'TraversalConfig':
        """Create config that walks the pre-order sequence backwards."""
        return cls(direction=TraversalDirection.INVERSE)

    @classmethod
    def shallow_scan(cls, max_depth: int = 1) -> 'TraversalConfig':
        """Create config for shallow scanning.

        Args:
            max_depth: How deep to scan (default 1 = immediate children only)
        """
        return cls(depth=DepthConfig(max_depth=max_depth))

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.direction, TraversalDirection):
            errors.append(f"unknown direction: {self.direction!r}")

        if self.depth.min_depth < 0:
            errors.append("min_depth cannot be negative")

        if self.depth.max_depth is not None:
            if self.depth.max_depth < 0:
                errors.append("max_depth cannot be negative")
            if self.depth.max_depth < self.depth.min_depth:
                errors.append("max_depth cannot be less than min_depth")

        if self.max_nodes is not None and self.max_nodes <= 0:
            errors.append("max_nodes must be positive")

        if not isinstance(self.cache_strategy, CacheStrategy):
            errors.append(f"unknown cache strategy: {self.cache_strategy!r}")
        elif self.cache_strategy == CacheStrategy.MEMORY:
            if self.cache.max_size <= 0:
                errors.append("cache max_size must be positive")
            if self.cache.ttl <= 0:
                errors.append("cache ttl must be positive")

        return errors
