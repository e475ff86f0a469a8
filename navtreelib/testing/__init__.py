"""Testing utilities for NavTreeLib consumers."""

from .fixtures import (
    CountingNavigator,
    build_tree,
    contents,
    create_deep_binary_tree,
    create_deep_chain,
    create_simple_binary_tree,
    create_singleton_tree,
    create_uneven_tree,
    find_by_content,
)

__all__ = [
    'CountingNavigator',
    'build_tree',
    'contents',
    'create_deep_binary_tree',
    'create_deep_chain',
    'create_simple_binary_tree',
    'create_singleton_tree',
    'create_uneven_tree',
    'find_by_content',
]
