"""Core abstractions for NavTreeLib.

This module contains the navigator contract, the path stack and the
traversal state machine built on top of them.
"""

from .navigator import TreeNavigator
from .path import TreePath, RootEntry, ChildEntry, PathEntry
from .traverser import PathTraverser
from .errors import (
    TraversalError,
    InvalidStartError,
    TraversalExhaustedError,
    NavigatorContractError,
    CapabilityMismatchError,
)

__all__ = [
    "TreeNavigator",
    "TreePath",
    "RootEntry",
    "ChildEntry",
    "PathEntry",
    "PathTraverser",
    "TraversalError",
    "InvalidStartError",
    "TraversalExhaustedError",
    "NavigatorContractError",
    "CapabilityMismatchError",
]
