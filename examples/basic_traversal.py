#!/usr/bin/env python3
"""Demo script for navigator-driven traversal in NavTreeLib.

Builds a small package hierarchy from dotted names and walks it forwards,
backwards and from a node in the middle.
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from navtreelib import dfs, get_tree_stats, inverse_dfs, inverse_dfs_to_root
from navtreelib.build import TypeNameTreeFactory
from navtreelib.navigators import TreeNodeNavigator


TYPE_NAMES = [
    "shop.catalog.Product",
    "shop.catalog.Category",
    "shop.orders.Order",
    "shop.orders.LineItem",
    "shop.orders.returns.Refund",
    "shop.Customer",
]


def demo_forward(root, navigator):
    """Show pre-order traversal with indentation by depth."""
    print("\n=== Forward Traversal ===")
    traverser = dfs(root, navigator)
    for node, depth in traverser.iter_with_depth():
        print(f"{'  ' * depth}{node.content}")


def demo_inverse(root, navigator):
    """Show that inverse traversal is the exact reverse."""
    print("\n=== Inverse Traversal ===")
    print(" <- ".join(node.content for node in inverse_dfs(root, navigator)))


def demo_from_within(root, navigator):
    """Start in the middle of the tree and walk back to the root."""
    print("\n=== Walking Back From 'Refund' ===")
    refund = next(node for node in dfs(root, navigator) if node.content == "Refund")
    for node in inverse_dfs_to_root(navigator, refund):
        print(f"  {node.content}")


def demo_stats(root, navigator):
    print("\n=== Tree Statistics ===")
    stats = get_tree_stats(root, navigator)
    for key in ("total_nodes", "leaf_nodes", "max_depth", "average_branching"):
        print(f"  {key}: {stats[key]}")


def main():
    factory = TypeNameTreeFactory(TypeNameTreeFactory.name_elements_as_content())
    root = factory.create_forest(TYPE_NAMES)[0]
    navigator = TreeNodeNavigator()

    demo_forward(root, navigator)
    demo_inverse(root, navigator)
    demo_from_within(root, navigator)
    demo_stats(root, navigator)


if __name__ == "__main__":
    main()
