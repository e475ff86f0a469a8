"""Navigator for parent-linked node objects.

Provides MutableTreeNode, a minimal content-holding node, and
TreeNodeNavigator, which navigates any object exposing ``parent`` and
``children`` attributes.
"""

from typing import Any, Generic, List, Optional, Sequence, Tuple, TypeVar

from ..core.errors import NavigatorContractError
from ..core.navigator import TreeNavigator

C = TypeVar('C')


class MutableTreeNode(Generic[C]):
    """Tree node holding a piece of content, its parent and its children.

    The children list is only changed through add_child and remove_child,
    which keep the parent links consistent. Readers get a cached tuple.
    """

    def __init__(self, content: C):
        if content is None:
            raise ValueError("The argument 'content' must not be None.")
        self._content = content
        self._parent: Optional['MutableTreeNode[C]'] = None
        self._children: List['MutableTreeNode[C]'] = []
        self._children_view: Optional[Tuple['MutableTreeNode[C]', ...]] = None

    @property
    def content(self) -> C:
        return self._content

    @content.setter
    def content(self, content: C) -> None:
        if content is None:
            raise ValueError("The argument 'content' must not be None.")
        self._content = content

    @property
    def parent(self) -> Optional['MutableTreeNode[C]']:
        return self._parent

    @property
    def children(self) -> Sequence['MutableTreeNode[C]']:
        """Read-only view of the children."""
        if self._children_view is None:
            self._children_view = tuple(self._children)
        return self._children_view

    def add_child(self, child: 'MutableTreeNode[C]') -> bool:
        """Append a child to this node.

        Returns:
            True if the child was added, False if it already was a child
            of this node

        Raises:
            ValueError: If the child already has another parent
        """
        if child is None:
            raise ValueError("The argument 'child' must not be None.")
        if child._parent is not None:
            if child._parent is self:
                return False
            raise ValueError(
                f"Can not add the specified new child {child!r} to this {self!r} "
                f"because it already has another parent {child._parent!r}."
            )

        child._parent = self
        self._children.append(child)
        self._children_view = None
        return True

    def remove_child(self, child: 'MutableTreeNode[C]') -> bool:
        """Detach a child from this node.

        Returns:
            True if the child was removed, False if it was not a child of
            this node
        """
        if child is None:
            raise ValueError("The argument 'child' must not be None.")
        if child._parent is not self:
            return False

        child._parent = None
        self._children = [c for c in self._children if c is not child]
        self._children_view = None
        return True

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._content!r})"


class TreeNodeNavigator(TreeNavigator):
    """Navigator for objects with ``parent`` and ``children`` attributes.

    Works with MutableTreeNode and with any other class following the same
    shape: ``parent`` is the parent node or None, ``children`` is an indexable
    sequence. Children are located by identity, so nodes with value-based
    equality are handled correctly.
    """

    def parent_of(self, node: Any) -> Optional[Any]:
        return node.parent

    def child_index_of(self, node: Any) -> Optional[int]:
        if node is None:
            raise ValueError("The argument 'node' must not be None.")
        parent = node.parent
        if parent is None:
            return None

        for index, child in enumerate(parent.children):
            if child is node:
                return index
        raise NavigatorContractError(
            f"The specified child {node!r} is not a child of its parent {parent!r}."
        )

    def child_count_of(self, node: Any) -> int:
        return len(node.children)

    def child_at(self, node: Any, index: int) -> Optional[Any]:
        if node is None:
            raise ValueError("The argument 'node' must not be None.")
        if index < 0:
            return None

        children = node.children
        if index < len(children):
            return children[index]
        return None
