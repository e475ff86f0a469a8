"""Path stack used by the traversal engine.

A TreePath holds the walk from the declared root (bottom) to the current
node (top). Each entry pairs a node with its index among its siblings; the
bottom entry is a RootEntry and carries no index, because the declared root
is the boundary of the traversal even if the structure continues above it.
"""

from dataclasses import dataclass
from typing import Any, Iterator, List, Optional, Tuple, Union

from .errors import InvalidStartError, NavigatorContractError
from .navigator import TreeNavigator


@dataclass(frozen=True)
class RootEntry:
    """Bottom entry of a path: the declared root, no child index."""

    node: Any

    def __post_init__(self):
        if self.node is None:
            raise ValueError("The argument 'node' must not be None.")

    @property
    def index(self) -> Optional[int]:
        return None


@dataclass(frozen=True)
class ChildEntry:
    """Any entry above the bottom: a node and its index under the entry below."""

    node: Any
    index: int

    def __post_init__(self):
        if self.node is None:
            raise ValueError("The argument 'node' must not be None.")
        if not isinstance(self.index, int) or self.index < 0:
            raise NavigatorContractError(
                f"Node {self.node!r} has a parent but reported child index {self.index!r}."
            )


PathEntry = Union[RootEntry, ChildEntry]


class TreePath:
    """Mutable stack of path entries, declared root at the bottom.

    Invariants kept by the traversal engine:

    - an empty path means the traversal is exhausted
    - the node of every ChildEntry is the child, at its recorded index,
      of the node in the entry directly below it
    - ``len(path)`` is the depth of the top node below the declared root, plus one
    """

    def __init__(self, entries: Optional[List[PathEntry]] = None):
        self._entries: List[PathEntry] = list(entries) if entries else []

    # Construction

    @classmethod
    def with_root(cls, root: Any) -> 'TreePath':
        """Create a path holding only the declared root."""
        if root is None:
            raise ValueError("The argument 'root' must not be None.")
        return cls([RootEntry(root)])

    @classmethod
    def from_root_to(cls, navigator: TreeNavigator, root: Any, start: Any) -> 'TreePath':
        """Create the path from ``root`` down to ``start``.

        Walks ``parent_of`` upward from ``start`` until the declared root is
        reached, recording each node's child index on the way.

        Args:
            navigator: Navigator for the tree
            root: Declared root of the traversal
            start: Node to start at; ``root`` itself or one of its descendants

        Returns:
            TreePath with ``root`` at the bottom and ``start`` on top

        Raises:
            ValueError: If an argument is None
            InvalidStartError: If the parent walk from ``start`` runs out of
                ancestors without meeting ``root``
        """
        if navigator is None:
            raise ValueError("The argument 'navigator' must not be None.")
        if root is None:
            raise ValueError("The argument 'root' must not be None.")
        if start is None:
            raise ValueError("The argument 'start' must not be None.")

        if navigator.same_node(start, root):
            return cls.with_root(root)

        start_to_before_root = [start]
        parent = navigator.parent_of(start)
        while parent is not None and not navigator.same_node(parent, root):
            start_to_before_root.append(parent)
            parent = navigator.parent_of(parent)

        if parent is None:
            raise InvalidStartError(root, start)

        return cls._from_upward_chain(navigator, root, start_to_before_root)

    @classmethod
    def _from_upward_chain(cls, navigator: TreeNavigator, root: Any,
                           chain: List[Any]) -> 'TreePath':
        entries: List[PathEntry] = [RootEntry(root)]
        for node in reversed(chain):
            entries.append(ChildEntry(node, navigator.child_index_of(node)))
        return cls(entries)

    # Stack operations

    def push(self, entry: ChildEntry) -> None:
        self._entries.append(entry)

    def pop(self) -> PathEntry:
        return self._entries.pop()

    def peek(self) -> PathEntry:
        return self._entries[-1]

    def clear(self) -> None:
        self._entries.clear()

    def is_empty(self) -> bool:
        return not self._entries

    @property
    def depth(self) -> int:
        """Depth of the top node below the declared root (-1 when empty)."""
        return len(self._entries) - 1

    def nodes(self) -> Tuple[Any, ...]:
        """Nodes from the declared root to the top."""
        return tuple(entry.node for entry in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[PathEntry]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"TreePath({self._entries!r})"
