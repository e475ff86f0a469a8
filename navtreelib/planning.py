"""Execution planning for NavTreeLib.

The ExecutionPlan validates that a TraversalConfig is consistent, prepares
the navigator the configuration asks for and coordinates the actual
traversal execution.
"""

import logging
from typing import Any, Iterator, List, Optional, Tuple

from .config import CacheStrategy, TraversalConfig
from .core.errors import CapabilityMismatchError
from .core.navigator import TreeNavigator
from .core.traverser import PathTraverser
from .navigators.caching import CachingNavigator

logger = logging.getLogger(__name__)


class ExecutionPlan:
    """Validated execution plan for tree traversal.

    The ExecutionPlan is the bridge between user intent (TraversalConfig)
    and execution. Validation happens before any navigator call is made,
    so a bad configuration fails without touching the tree.

    The plan can be executed any number of times; every execution builds a
    fresh PathTraverser.
    """

    def __init__(self, config: TraversalConfig, navigator: TreeNavigator):
        """Create and validate an execution plan.

        Args:
            config: User's traversal configuration
            navigator: Navigator for the specific tree type

        Raises:
            ValueError: If navigator is None
            CapabilityMismatchError: If the configuration is invalid
        """
        if navigator is None:
            raise ValueError("The argument 'navigator' must not be None.")

        config_errors = config.validate()
        if config_errors:
            raise CapabilityMismatchError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.config = config
        self.navigator = self._setup_navigator(navigator)

        # Track execution state
        self.nodes_processed = 0
        self.nodes_reported = 0

    def _setup_navigator(self, navigator: TreeNavigator) -> TreeNavigator:
        """Wrap the navigator according to the cache strategy."""
        if self.config.cache_strategy == CacheStrategy.MEMORY:
            logger.debug(
                "Wrapping %s in CachingNavigator (max_size=%d, ttl=%s)",
                type(navigator).__name__, self.config.cache.max_size, self.config.cache.ttl
            )
            return CachingNavigator(
                navigator,
                max_size=self.config.cache.max_size,
                ttl=self.config.cache.ttl
            )
        return navigator

    def create_traverser(self, root: Any, start: Optional[Any] = None) -> PathTraverser:
        """Build a traverser for one execution of this plan."""
        return PathTraverser(
            root,
            self.navigator,
            start=start,
            direction=self.config.direction,
            max_depth=self.config.depth.max_depth,
            subtree_only=self.config.subtree_only,
        )

    def execute(self, root: Any, start: Optional[Any] = None) -> Iterator[Tuple[Any, int]]:
        """Execute the traversal plan.

        The traverser is created eagerly, so an invalid start node raises
        InvalidStartError from this call rather than on first iteration.

        Args:
            root: Declared root of the traversal
            start: Optional start node below root

        Returns:
            Iterator of (node, depth) tuples for the reported nodes
        """
        traverser = self.create_traverser(root, start)
        logger.debug(
            "Executing %s traversal from %r (start=%r)",
            self.config.direction.name, root, start
        )
        return self._run(traverser)

    def _run(self, traverser: PathTraverser) -> Iterator[Tuple[Any, int]]:
        max_nodes = self.config.max_nodes
        reported = 0
        for node, depth in traverser.iter_with_depth():
            self.nodes_processed += 1

            if not self.config.depth.should_yield(depth):
                continue
            if not self.config.filter.should_include(node):
                continue

            reported += 1
            self.nodes_reported += 1
            yield node, depth

            if max_nodes is not None and reported >= max_nodes:
                logger.debug("Stopping traversal after max_nodes=%d", max_nodes)
                return

    def summary(self) -> List[str]:
        """Describe the plan in human-readable lines.

        Useful for debugging and logging.
        """
        lines = [
            f"direction: {self.config.direction.name}",
            f"navigator: {type(self.navigator).__name__}",
            f"depth: {self.config.depth.min_depth}..{self.config.depth.max_depth}",
            f"subtree_only: {self.config.subtree_only}",
        ]
        if self.config.max_nodes is not None:
            lines.append(f"max_nodes: {self.config.max_nodes}")
        return lines
