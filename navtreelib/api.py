"""High-level API for NavTreeLib.

This module provides simple, functional interfaces for common tree traversal
operations. These functions wrap the object-oriented API (PathTraverser,
ExecutionPlan) for ease of use in simple cases.

Every function returning an iterator returns a lazy, single-use one; it
composes with map, filter, itertools and comprehensions.
"""

from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple, Union

from .config import (
    CacheStrategy,
    TraversalConfig,
    TraversalDirection,
    DepthConfig,
    FilterConfig,
)
from .core.navigator import TreeNavigator
from .core.traverser import PathTraverser
from .planning import ExecutionPlan


# Sequence constructors

def dfs(root: Any,
        navigator: TreeNavigator,
        start: Optional[Any] = None,
        subtree_only: bool = True) -> PathTraverser:
    """Pre-order depth-first traversal bounded by ``root``.

    Args:
        root: Declared root of the traversal
        navigator: Navigator for the specific tree type
        start: Optional node below root to start at
        subtree_only: With a start node, stop after its subtree

    Returns:
        Lazy iterator over the nodes

    Example:
        >>> [node.content for node in dfs(root, TreeNodeNavigator())]
        [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15]
    """
    return PathTraverser(root, navigator, start=start,
                         direction=TraversalDirection.FORWARD,
                         subtree_only=subtree_only)


def dfs_from_within(navigator: TreeNavigator,
                    start: Any,
                    subtree_only: bool = False) -> PathTraverser:
    """Pre-order traversal from ``start`` through the rest of its whole tree.

    The declared root is the true root above ``start``, so every node that
    follows ``start`` in the pre-order of the entire structure is yielded.
    """
    if start is None:
        raise ValueError("The argument 'start' must not be None.")
    return dfs(navigator.root_of(start), navigator, start=start,
               subtree_only=subtree_only)


def inverse_dfs(root: Any,
                navigator: TreeNavigator,
                start: Optional[Any] = None) -> PathTraverser:
    """Reverse pre-order traversal bounded by ``root``.

    Without a start node this is the exact reverse of ``dfs(root, navigator)``.
    With one, it yields ``start`` and every node before it, ending at ``root``.

    Example:
        >>> [node.content for node in inverse_dfs(root, navigator, start=fifteen)]
        [15, 14, 13, 12, 11, 10, 9, 8, 7, 6, 5, 4, 3, 2, 1]
    """
    return PathTraverser(root, navigator, start=start,
                         direction=TraversalDirection.INVERSE)


def inverse_dfs_to_root(navigator: TreeNavigator, start: Any) -> PathTraverser:
    """Reverse pre-order traversal from ``start`` back to its true root."""
    if start is None:
        raise ValueError("The argument 'start' must not be None.")
    return inverse_dfs(navigator.root_of(start), navigator, start=start)


def create_traverser(strategy: Union[TraversalDirection, str],
                     root: Any,
                     navigator: TreeNavigator,
                     start: Optional[Any] = None,
                     **kwargs) -> PathTraverser:
    """Create a traverser by strategy name.

    Args:
        strategy: Direction enum or name (dfs, dfs_pre, inverse_dfs, reverse, ...)
        root: Declared root of the traversal
        navigator: Navigator for the specific tree type
        start: Optional start node
        **kwargs: Passed to PathTraverser (max_depth, subtree_only)

    Raises:
        ValueError: If strategy name is not recognized
    """
    return PathTraverser(root, navigator, start=start,
                         direction=_parse_direction(strategy), **kwargs)


# Configured traversal

def traverse_tree(
    root: Any,
    navigator: TreeNavigator,
    direction: Union[TraversalDirection, str] = TraversalDirection.FORWARD,
    start: Optional[Any] = None,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
    include_filter: Optional[Callable[[Any], bool]] = None,
    exclude_filter: Optional[Callable[[Any], bool]] = None,
    **kwargs
) -> Iterator[Any]:
    """Simple interface for configured tree traversal.

    This is the primary high-level function for traversing trees when
    filtering or depth limits are needed. Arguments are validated and the
    start path is built before this function returns.

    Args:
        root: Declared root of the traversal
        navigator: Navigator for the specific tree type
        direction: FORWARD / INVERSE or a strategy name
        start: Optional start node below root
        max_depth: Maximum depth to traverse
        min_depth: Minimum depth before yielding nodes
        include_filter: Function to determine if node should be included
        exclude_filter: Function to determine if node should be excluded
        **kwargs: Additional TraversalConfig fields (subtree_only, max_nodes, ...)

    Returns:
        Iterator over the nodes that match the criteria

    Example:
        >>> navigator = TreeNodeNavigator()
        >>> for node in traverse_tree(root, navigator, max_depth=2):
        ...     print(node.content)
    """
    config = _build_config(
        direction=direction,
        max_depth=max_depth,
        min_depth=min_depth,
        include_filter=include_filter,
        exclude_filter=exclude_filter,
        **kwargs
    )
    plan = ExecutionPlan(config, navigator)
    return (node for node, _ in plan.execute(root, start))


def collect_with_depth(root: Any, navigator: TreeNavigator,
                       **kwargs) -> Iterator[Tuple[Any, int]]:
    """Like traverse_tree, but yields ``(node, depth)`` tuples."""
    start = kwargs.pop('start', None)
    plan = ExecutionPlan(_build_config(**kwargs), navigator)
    return plan.execute(root, start)


def count_nodes(root: Any, navigator: TreeNavigator, **kwargs) -> int:
    """Count nodes in a tree that match criteria.

    Args:
        root: Declared root of the traversal
        navigator: Navigator for the specific tree type
        **kwargs: Traversal options (see traverse_tree)
    """
    count = 0
    for _ in traverse_tree(root, navigator, **kwargs):
        count += 1
    return count


def find_nodes(root: Any,
               navigator: TreeNavigator,
               predicate: Callable[[Any], bool],
               **kwargs) -> Iterator[Any]:
    """Find nodes that match a predicate, in traversal order."""
    kwargs['include_filter'] = predicate
    return traverse_tree(root, navigator, **kwargs)


def get_leaf_nodes(root: Any, navigator: TreeNavigator, **kwargs) -> Iterator[Any]:
    """Get all leaf nodes in a tree, in traversal order."""
    return find_nodes(root, navigator, navigator.is_leaf, **kwargs)


def get_tree_paths(root: Any, navigator: TreeNavigator,
                   start: Optional[Any] = None,
                   direction: Union[TraversalDirection, str] = TraversalDirection.FORWARD,
                   ) -> Iterator[Tuple[Any, ...]]:
    """Get the path from the declared root to each node.

    Yields:
        Tuples of nodes, declared root first, visited node last
    """
    traverser = create_traverser(direction, root, navigator, start=start)
    for _ in traverser:
        yield traverser.current_path()


def get_tree_stats(root: Any, navigator: TreeNavigator, **kwargs) -> Dict[str, Any]:
    """Get statistics about a tree.

    Returns:
        Dictionary with total_nodes, leaf_nodes, internal_nodes, max_depth,
        a per-depth node count and the average branching factor
    """
    stats: Dict[str, Any] = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'max_depth': 0,
        'depths': {}
    }

    for node, depth in collect_with_depth(root, navigator, **kwargs):
        stats['total_nodes'] += 1

        if navigator.is_leaf(node):
            stats['leaf_nodes'] += 1

        stats['max_depth'] = max(stats['max_depth'], depth)
        stats['depths'][depth] = stats['depths'].get(depth, 0) + 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    stats['average_branching'] = (
        (stats['total_nodes'] - 1) / stats['internal_nodes']
        if stats['internal_nodes'] > 0 else 0
    )

    return stats


# Helper functions

_DIRECTION_NAMES = {
    'dfs': TraversalDirection.FORWARD,
    'dfs_pre': TraversalDirection.FORWARD,
    'depth_first_pre': TraversalDirection.FORWARD,
    'forward': TraversalDirection.FORWARD,
    'pre_order': TraversalDirection.FORWARD,
    'inverse_dfs': TraversalDirection.INVERSE,
    'backward_dfs': TraversalDirection.INVERSE,
    'inverse': TraversalDirection.INVERSE,
    'reverse': TraversalDirection.INVERSE,
}


def _parse_direction(direction: Union[TraversalDirection, str]) -> TraversalDirection:
    """Parse direction from string or enum."""
    if isinstance(direction, TraversalDirection):
        return direction

    direction_lower = direction.lower() if isinstance(direction, str) else str(direction)
    if direction_lower in _DIRECTION_NAMES:
        return _DIRECTION_NAMES[direction_lower]

    raise ValueError(
        f"Unknown traversal strategy: {direction}. "
        f"Choose from: {', '.join(_DIRECTION_NAMES.keys())}"
    )


def _parse_cache_strategy(strategy: Union[CacheStrategy, str]) -> CacheStrategy:
    """Parse cache strategy from string or enum."""
    if isinstance(strategy, CacheStrategy):
        return strategy

    for member in CacheStrategy:
        if isinstance(strategy, str) and strategy.lower() in (member.value, member.name.lower()):
            return member

    raise ValueError(
        f"Unknown cache strategy: {strategy}. "
        f"Choose from: {', '.join(member.value for member in CacheStrategy)}"
    )


def _build_config(direction: Union[TraversalDirection, str] = TraversalDirection.FORWARD,
                  max_depth: Optional[int] = None,
                  min_depth: int = 0,
                  include_filter: Optional[Callable[[Any], bool]] = None,
                  exclude_filter: Optional[Callable[[Any], bool]] = None,
                  **kwargs) -> TraversalConfig:
    """Build TraversalConfig from keyword arguments.

    Unknown keyword arguments raise TypeError instead of being ignored.
    """
    config = TraversalConfig(
        direction=_parse_direction(direction),
        depth=DepthConfig(min_depth=min_depth, max_depth=max_depth),
        filter=FilterConfig(
            include_filter=include_filter,
            exclude_filter=exclude_filter
        ),
    )

    for key, value in kwargs.items():
        if key in ('depth', 'filter') or not hasattr(config, key):
            raise TypeError(f"Unexpected traversal option: {key!r}")
        if key == 'cache_strategy':
            value = _parse_cache_strategy(value)
        setattr(config, key, value)

    return config
