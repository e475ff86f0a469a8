"""Forest construction from flat, keyed elements.

HierarchicalTreeFactory folds a sequence of elements into a forest of
MutableTreeNodes. Each element describes a path of hierarchy keys (for
example the segments of a dotted name); elements sharing a key prefix share
the nodes along that prefix.
"""

import logging
from typing import Any, Callable, Dict, Generic, Iterable, List, Optional, Sequence, TypeVar

from ..core.errors import NavigatorContractError
from ..navigators.tree_node import MutableTreeNode

logger = logging.getLogger(__name__)

E = TypeVar('E')
H = TypeVar('H')
C = TypeVar('C')

# (element, depth, existing content or None) -> new content
ToContent = Callable[[Any, int, Optional[Any]], Any]


class _Construction(Generic[H, C]):
    """State of one create_forest call."""

    def __init__(self):
        self.roots: List[MutableTreeNode[C]] = []
        # Keyed by node identity; MutableTreeNode does not define equality
        self.key_of: Dict[int, H] = {}

    def select_node(self, nodes: Sequence[MutableTreeNode[C]],
                    key: H) -> Optional[MutableTreeNode[C]]:
        matches = [node for node in nodes if self.key_of[id(node)] == key]
        if len(matches) > 1:
            raise NavigatorContractError(
                "No two nodes on the same level must contain the same hierarchy element."
            )
        return matches[0] if matches else None

    def register(self, node: MutableTreeNode[C], key: H) -> None:
        self.key_of[id(node)] = key


class HierarchicalTreeFactory(Generic[E, H, C]):
    """Builds forests of MutableTreeNodes from flat elements.

    Args:
        to_hierarchy: Maps an element to its list of hierarchy keys,
            outermost first
        to_content: Computes a node's content from the element, the depth
            of the node and the node's existing content (None for new nodes)

    Example:
        >>> factory = HierarchicalTreeFactory(
        ...     to_hierarchy=lambda path: path.split('/'),
        ...     to_content=lambda path, depth, existing: existing or path.split('/')[depth],
        ... )
        >>> [root.content for root in factory.create_forest(['a/b', 'a/c', 'd'])]
        ['a', 'd']
    """

    def __init__(self, to_hierarchy: Callable[[E], Sequence[H]], to_content: ToContent):
        if to_hierarchy is None:
            raise ValueError("The argument 'to_hierarchy' must not be None.")
        if to_content is None:
            raise ValueError("The argument 'to_content' must not be None.")
        self._to_hierarchy = to_hierarchy
        self._to_content = to_content

    def create_forest(self, elements: Iterable[E]) -> List[MutableTreeNode[C]]:
        """Fold the elements into a forest.

        Returns:
            Root nodes in order of first appearance
        """
        if elements is None:
            raise ValueError("The argument 'elements' must not be None.")

        construction: _Construction[H, C] = _Construction()
        count = 0
        for element in elements:
            self._create_nodes_along_hierarchy(construction, element)
            count += 1

        logger.debug("Built forest of %d roots from %d elements",
                     len(construction.roots), count)
        return construction.roots

    def _create_nodes_along_hierarchy(self, construction: _Construction[H, C],
                                      element: E) -> None:
        hierarchy = self._to_hierarchy(element)

        parent: Optional[MutableTreeNode[C]] = None
        current_nodes: Sequence[MutableTreeNode[C]] = construction.roots
        for depth, key in enumerate(hierarchy):
            existing = construction.select_node(current_nodes, key)
            if existing is not None:
                existing.content = self._to_content(element, depth, existing.content)
                node = existing
            else:
                node = MutableTreeNode(self._to_content(element, depth, None))
                construction.register(node, key)
                if parent is None:
                    construction.roots.append(node)
                else:
                    parent.add_child(node)

            parent = node
            current_nodes = node.children


class TypeNameTreeFactory(Generic[C]):
    """Builds forests from dotted names such as fully qualified type names.

    ``"pkg.mod.Class"`` becomes the path ``pkg -> mod -> Class``.
    """

    def __init__(self, to_content: ToContent):
        if to_content is None:
            raise ValueError("The argument 'to_content' must not be None.")
        self._factory: HierarchicalTreeFactory[str, str, C] = HierarchicalTreeFactory(
            self.split_type_name, to_content
        )

    @staticmethod
    def split_type_name(type_name: str) -> List[str]:
        return type_name.split('.')

    @staticmethod
    def name_elements_as_content() -> ToContent:
        """Content function that keeps each node's name segment."""
        def to_content(type_name: str, depth: int, existing: Optional[str]) -> str:
            if existing is not None:
                return existing
            return type_name.split('.')[depth]
        return to_content

    def create_forest(self, type_names: Iterable[str]) -> List[MutableTreeNode[C]]:
        return self._factory.create_forest(type_names)
