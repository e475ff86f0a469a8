"""Navigators for common tree shapes."""

from .tree_node import MutableTreeNode, TreeNodeNavigator
from .function import FunctionNavigator
from .caching import CachingNavigator

__all__ = [
    'MutableTreeNode',
    'TreeNodeNavigator',
    'FunctionNavigator',
    'CachingNavigator',
]
