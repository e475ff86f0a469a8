"""TreeNavigator abstraction for NavTreeLib.

The TreeNavigator is what makes NavTreeLib universal. It answers the four
structural questions the traversal engine needs (parent, own index, child
count, child by index) for one specific kind of tree, decoupling the node
representation from the traversal mechanism.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterator, Optional


class TreeNavigator(ABC):
    """Abstract navigator for indexable tree structures.

    Nodes are opaque to the engine: any Python object can be a node as long
    as a navigator can answer the questions below about it. The four
    abstract methods must describe one finite, cycle-free tree:

    - ``parent_of(n)`` is None only for the true root
    - ``child_index_of(n)`` is None exactly when ``parent_of(n)`` is None
    - ``child_at(parent_of(n), child_index_of(n))`` is ``n``
    - ``child_at(n, i)`` is None for any ``i`` outside ``[0, child_count_of(n))``

    The engine does not verify any of this. A navigator that violates the
    contract (for example by describing a cycle) makes traversal order
    undefined and can make it run forever.
    """

    @abstractmethod
    def parent_of(self, node: Any) -> Optional[Any]:
        """Get the parent of the given node.

        Args:
            node: The child node

        Returns:
            Parent node or None if node is the true root
        """
        pass

    @abstractmethod
    def child_index_of(self, node: Any) -> Optional[int]:
        """Get the 0-based position of a node among its parent's children.

        Args:
            node: The node to locate

        Returns:
            Child index, or None if node has no parent
        """
        pass

    @abstractmethod
    def child_count_of(self, node: Any) -> int:
        """Get the number of children of the given node."""
        pass

    @abstractmethod
    def child_at(self, node: Any, index: int) -> Optional[Any]:
        """Get the child of a node at the given index.

        Negative indices must not wrap around: anything outside
        ``[0, child_count_of(node))`` returns None.

        Args:
            node: The parent node
            index: 0-based child index

        Returns:
            The child node or None if there is no child at ``index``
        """
        pass

    def same_node(self, first: Any, second: Any) -> bool:
        """Check whether two references denote the same node.

        Used when validating that a parent walk reaches the declared root.
        The default is reference identity. Navigators whose ``parent_of``
        returns fresh wrapper objects should override this with their own
        equality.
        """
        return first is second

    def children_of(self, node: Any) -> Iterator[Any]:
        """Lazily iterate over the children of a node in index order."""
        index = 0
        child = self.child_at(node, index)
        while child is not None:
            yield child
            index += 1
            child = self.child_at(node, index)

    def is_leaf(self, node: Any) -> bool:
        return self.child_count_of(node) == 0

    def root_of(self, node: Any) -> Any:
        """Get the true root above a node (the node itself if it has no parent)."""
        current = node
        parent = self.parent_of(current)
        while parent is not None:
            current = parent
            parent = self.parent_of(current)
        return current

    def get_depth(self, node: Any) -> int:
        """Calculate the depth of a node below the true root.

        Default implementation walks up to the root.
        Navigators can override for more efficient implementations.

        Returns:
            Depth where root = 0
        """
        depth = 0
        parent = self.parent_of(node)
        while parent is not None:
            depth += 1
            parent = self.parent_of(parent)
        return depth
