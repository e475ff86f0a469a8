"""NavTreeLib - Navigator-driven Tree Traversal Library.

NavTreeLib walks any indexable tree structure depth-first without recursion.
You describe the structure once with a TreeNavigator (parent, own index,
child count, child by index); NavTreeLib turns it into lazy pre-order and
reverse pre-order iterators.

    from navtreelib import dfs, inverse_dfs
    from navtreelib.navigators import TreeNodeNavigator

    for node in dfs(root, TreeNodeNavigator()):
        ...
"""

import logging

__version__ = "0.1.0"

from .core import (
    TreeNavigator,
    TreePath,
    RootEntry,
    ChildEntry,
    PathTraverser,
    TraversalError,
    InvalidStartError,
    TraversalExhaustedError,
    NavigatorContractError,
    CapabilityMismatchError,
)
from .config import (
    TraversalConfig,
    TraversalDirection,
    CacheStrategy,
    CacheConfig,
    FilterConfig,
    DepthConfig,
)
from .planning import ExecutionPlan
from .api import (
    dfs,
    dfs_from_within,
    inverse_dfs,
    inverse_dfs_to_root,
    create_traverser,
    traverse_tree,
    collect_with_depth,
    count_nodes,
    find_nodes,
    get_leaf_nodes,
    get_tree_paths,
    get_tree_stats,
)
from . import navigators
from . import build

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Core
    "TreeNavigator",
    "TreePath",
    "RootEntry",
    "ChildEntry",
    "PathTraverser",
    # Errors
    "TraversalError",
    "InvalidStartError",
    "TraversalExhaustedError",
    "NavigatorContractError",
    "CapabilityMismatchError",
    # Config
    "TraversalConfig",
    "TraversalDirection",
    "CacheStrategy",
    "CacheConfig",
    "FilterConfig",
    "DepthConfig",
    "ExecutionPlan",
    # API
    "dfs",
    "dfs_from_within",
    "inverse_dfs",
    "inverse_dfs_to_root",
    "create_traverser",
    "traverse_tree",
    "collect_with_depth",
    "count_nodes",
    "find_nodes",
    "get_leaf_nodes",
    "get_tree_paths",
    "get_tree_stats",
    # Subpackages
    "navigators",
    "build",
]
