"""Navigator assembled from plain functions.

Useful for structures that can name a node's parent and list its children
but have no notion of child indices, such as dictionaries of children
keyed by parent, or wrappers around third-party objects.
"""

from typing import Any, Callable, Optional, Sequence

from ..core.errors import NavigatorContractError
from ..core.navigator import TreeNavigator


class FunctionNavigator(TreeNavigator):
    """TreeNavigator driven by a parent function and a children function.

    Example:
        >>> parents = {'b': 'a', 'c': 'a'}
        >>> children = {'a': ['b', 'c']}
        >>> navigator = FunctionNavigator(
        ...     parent_of=parents.get,
        ...     children_of=lambda n: children.get(n, []),
        ...     same_node=lambda x, y: x == y,
        ... )
    """

    def __init__(self,
                 parent_of: Callable[[Any], Optional[Any]],
                 children_of: Callable[[Any], Sequence[Any]],
                 same_node: Optional[Callable[[Any, Any], bool]] = None):
        """Initialize navigator.

        Args:
            parent_of: Returns the parent of a node, or None for the root
            children_of: Returns the children of a node as an indexable sequence
            same_node: Node comparison used for locating children and for
                start path validation (default: identity)
        """
        if parent_of is None:
            raise ValueError("The argument 'parent_of' must not be None.")
        if children_of is None:
            raise ValueError("The argument 'children_of' must not be None.")

        self._parent_of = parent_of
        self._children_of = children_of
        self._same_node = same_node

    def parent_of(self, node: Any) -> Optional[Any]:
        return self._parent_of(node)

    def child_index_of(self, node: Any) -> Optional[int]:
        parent = self._parent_of(node)
        if parent is None:
            return None

        for index, child in enumerate(self._children_of(parent)):
            if self.same_node(child, node):
                return index
        raise NavigatorContractError(
            f"The specified child {node!r} is not a child of its parent {parent!r}."
        )

    def child_count_of(self, node: Any) -> int:
        return len(self._children_of(node))

    def child_at(self, node: Any, index: int) -> Optional[Any]:
        if index < 0:
            return None
        children = self._children_of(node)
        if index < len(children):
            return children[index]
        return None

    def same_node(self, first: Any, second: Any) -> bool:
        if self._same_node is None:
            return first is second
        return self._same_node(first, second)
