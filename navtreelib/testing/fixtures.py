"""Test fixtures for NavTreeLib consumers.

These helpers build small, well-known trees and wrap navigators to observe
how the traversal engine uses them. They are meant for test suites of
NavTreeLib itself and of projects that write their own navigators.
"""

from collections import Counter
from typing import Any, Dict, Iterable, List, Optional

from ..core.navigator import TreeNavigator
from ..navigators.tree_node import MutableTreeNode


def build_tree(spec: Any) -> MutableTreeNode:
    """Build a MutableTreeNode tree from a nested ``(content, [children])`` spec.

    A bare value is a leaf.

    Example:
        >>> root = build_tree((1, [(2, [3, 4]), 5]))
        >>> [child.content for child in root.children]
        [2, 5]
    """
    if isinstance(spec, tuple):
        content, children = spec
    else:
        content, children = spec, []

    node = MutableTreeNode(content)
    stack = [(node, list(children))]
    while stack:
        parent, pending = stack.pop()
        for child_spec in pending:
            if isinstance(child_spec, tuple):
                child_content, grandchildren = child_spec
            else:
                child_content, grandchildren = child_spec, []
            child = MutableTreeNode(child_content)
            parent.add_child(child)
            if grandchildren:
                stack.append((child, list(grandchildren)))
    return node


def create_singleton_tree() -> MutableTreeNode:
    return MutableTreeNode("singleton")


def create_simple_binary_tree() -> MutableTreeNode:
    """
    root
    ├── leftLeaf
    └── rightLeaf
    """
    return build_tree(("root", ["leftLeaf", "rightLeaf"]))


def create_deep_binary_tree() -> MutableTreeNode:
    """Complete binary tree of depth 3, contents 1-15 in pre-order.

    1
    ├── 2
    │   ├── 3 (4, 5)
    │   └── 6 (7, 8)
    └── 9
        ├── 10 (11, 12)
        └── 13 (14, 15)
    """
    return build_tree(
        (1, [
            (2, [(3, [4, 5]), (6, [7, 8])]),
            (9, [(10, [11, 12]), (13, [14, 15])]),
        ])
    )


def create_uneven_tree() -> MutableTreeNode:
    """Tree with non-uniform branching, contents 'a'-'k' in pre-order.

    a
    ├── b
    │   └── c
    │       ├── d
    │       ├── e
    │       └── f
    ├── g
    └── h
        ├── i
        │   └── j
        └── k
    """
    return build_tree(
        ("a", [
            ("b", [("c", ["d", "e", "f"])]),
            "g",
            ("h", [("i", ["j"]), "k"]),
        ])
    )


def create_deep_chain(length: int) -> MutableTreeNode:
    """Degenerate tree where every node has exactly one child."""
    root = MutableTreeNode(0)
    current = root
    for content in range(1, length):
        child = MutableTreeNode(content)
        current.add_child(child)
        current = child
    return root


def find_by_content(root: MutableTreeNode, content: Any) -> Optional[MutableTreeNode]:
    """Locate the first node (pre-order) holding the given content."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.content == content:
            return node
        stack.extend(reversed(node.children))
    return None


def contents(nodes: Iterable[MutableTreeNode]) -> List[Any]:
    """Map nodes to their contents, preserving order."""
    return [node.content for node in nodes]


class CountingNavigator(TreeNavigator):
    """Navigator wrapper that counts calls to each navigator method.

    Example:
        navigator = CountingNavigator(TreeNodeNavigator())
        list(dfs(root, navigator))
        assert navigator.calls['parent_of'] == 0
    """

    def __init__(self, base_navigator: TreeNavigator):
        self._navigator = base_navigator
        self.calls: Counter = Counter()

    def parent_of(self, node: Any) -> Optional[Any]:
        self.calls['parent_of'] += 1
        return self._navigator.parent_of(node)

    def child_index_of(self, node: Any) -> Optional[int]:
        self.calls['child_index_of'] += 1
        return self._navigator.child_index_of(node)

    def child_count_of(self, node: Any) -> int:
        self.calls['child_count_of'] += 1
        return self._navigator.child_count_of(node)

    def child_at(self, node: Any, index: int) -> Optional[Any]:
        self.calls['child_at'] += 1
        return self._navigator.child_at(node, index)

    def same_node(self, first: Any, second: Any) -> bool:
        return self._navigator.same_node(first, second)

    def get_summary(self) -> Dict[str, int]:
        return dict(self.calls)

    def reset(self) -> None:
        self.calls.clear()
