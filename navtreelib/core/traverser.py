"""Iterative depth-first traversal for NavTreeLib.

PathTraverser walks any tree a TreeNavigator can describe without native
recursion. Its whole state is an explicit path stack plus one flag, so the
walk can be suspended between two pulls for as long as the caller likes.

Forward and inverse traversal share construction and the pull protocol;
they differ only in the single-step transition selected by the
TraversalDirection.
"""

from typing import Any, Callable, Dict, Iterator, Optional, Tuple

from .._common.config import TraversalDirection
from .errors import TraversalExhaustedError
from .navigator import TreeNavigator
from .path import ChildEntry, TreePath


Transition = Callable[[TreePath, TreeNavigator, Optional[int], int], None]


def _may_descend(path: TreePath, max_depth: Optional[int]) -> bool:
    return max_depth is None or path.depth < max_depth


def _forward_step(path: TreePath, navigator: TreeNavigator,
                  max_depth: Optional[int], floor: int) -> None:
    """Move the path to the next node in pre-order.

    Descends to the leftmost child if there is one. Otherwise pops until an
    entry with a right sibling is found and moves to that sibling. Popping
    below ``floor`` entries ends the traversal.
    """
    if _may_descend(path, max_depth):
        leftmost_child = navigator.child_at(path.peek().node, 0)
        if leftmost_child is not None:
            path.push(ChildEntry(leftmost_child, 0))
            return

    while True:
        current = path.pop()
        if len(path) < floor:
            path.clear()
            return

        right_sibling_index = current.index + 1
        right_sibling = navigator.child_at(path.peek().node, right_sibling_index)
        if right_sibling is not None:
            path.push(ChildEntry(right_sibling, right_sibling_index))
            return


def _descend_to_rightmost(path: TreePath, navigator: TreeNavigator,
                          max_depth: Optional[int]) -> None:
    """Push rightmost children until reaching a leaf or the depth limit."""
    while _may_descend(path, max_depth):
        node = path.peek().node
        rightmost_index = navigator.child_count_of(node) - 1
        if rightmost_index < 0:
            return
        rightmost_child = navigator.child_at(node, rightmost_index)
        if rightmost_child is None:
            return
        path.push(ChildEntry(rightmost_child, rightmost_index))


def _inverse_step(path: TreePath, navigator: TreeNavigator,
                  max_depth: Optional[int], floor: int) -> None:
    """Move the path to the previous node in pre-order.

    The predecessor of a node is the rightmost-deepest descendant of its
    left sibling if it has one, otherwise its parent.
    """
    current = path.pop()
    if path.is_empty():
        return

    left_sibling_index = current.index - 1
    if left_sibling_index < 0:
        return

    left_sibling = navigator.child_at(path.peek().node, left_sibling_index)
    if left_sibling is not None:
        path.push(ChildEntry(left_sibling, left_sibling_index))
        _descend_to_rightmost(path, navigator, max_depth)


_TRANSITIONS: Dict[TraversalDirection, Transition] = {
    TraversalDirection.FORWARD: _forward_step,
    TraversalDirection.INVERSE: _inverse_step,
}


class PathTraverser:
    """Lazy depth-first iterator over a navigated tree.

    FORWARD yields the pre-order sequence: parent before children, children
    in ascending index order. INVERSE yields exactly the reverse of that.

    With a ``start`` node the path from ``root`` to ``start`` is rebuilt
    first, which fails immediately with InvalidStartError if ``start`` is not
    ``root`` or one of its descendants. A forward traversal then yields
    ``start`` and its subtree (or, with ``subtree_only=False``, everything
    after ``start`` under ``root``); an inverse traversal yields ``start`` and
    every node before it, ending with ``root``.

    The traverser is single-use and not thread-safe. It never modifies the
    tree, but the tree must not change while it is being walked.

    Example:
        >>> traverser = PathTraverser(root, TreeNodeNavigator())
        >>> while traverser.has_next():
        ...     print(next(traverser))
    """

    def __init__(self,
                 root: Any,
                 navigator: TreeNavigator,
                 start: Optional[Any] = None,
                 direction: TraversalDirection = TraversalDirection.FORWARD,
                 max_depth: Optional[int] = None,
                 subtree_only: bool = True):
        """Initialize traverser and build its starting path.

        Args:
            root: Declared root; the traversal never leaves its subtree
            navigator: TreeNavigator for the tree
            start: Node to start at (default: the natural first node)
            direction: FORWARD or INVERSE
            max_depth: Do not descend below this depth (root = 0)
            subtree_only: Stop a forward traversal after the start's subtree

        Raises:
            ValueError: If root or navigator is None, max_depth is negative,
                or start lies deeper than max_depth
            InvalidStartError: If start is not root or a descendant of root
        """
        if root is None:
            raise ValueError("The argument 'root' must not be None.")
        if navigator is None:
            raise ValueError("The argument 'navigator' must not be None.")
        if direction not in _TRANSITIONS:
            raise ValueError(f"Unknown traversal direction: {direction!r}")
        if max_depth is not None and max_depth < 0:
            raise ValueError("The argument 'max_depth' cannot be negative.")

        self.navigator = navigator
        self.direction = direction
        self.max_depth = max_depth
        self._step = _TRANSITIONS[direction]

        starts_at_root = start is None or navigator.same_node(start, root)
        if starts_at_root:
            self._path = TreePath.with_root(root)
        else:
            self._path = TreePath.from_root_to(navigator, root, start)
            if max_depth is not None and self._path.depth > max_depth:
                raise ValueError(
                    f"Start node {start!r} lies at depth {self._path.depth}, "
                    f"below max_depth {max_depth}."
                )

        if direction is TraversalDirection.INVERSE and starts_at_root:
            _descend_to_rightmost(self._path, navigator, max_depth)

        if direction is TraversalDirection.FORWARD and subtree_only:
            self._floor = len(self._path)
        else:
            self._floor = 1

        self._returned_current = False

    # Go to next node & return

    def _go_to_next_if_necessary(self) -> None:
        if self._returned_current:
            self._step(self._path, self.navigator, self.max_depth, self._floor)
            self._returned_current = False

    def has_next(self) -> bool:
        """Check whether another node can be pulled.

        Performs the pending advance, if any. Returns False forever once the
        traversal is exhausted.
        """
        self._go_to_next_if_necessary()
        return not self._path.is_empty()

    def __next__(self) -> Any:
        self._go_to_next_if_necessary()
        if self._path.is_empty():
            raise TraversalExhaustedError()

        self._returned_current = True
        return self._path.peek().node

    def __iter__(self) -> 'PathTraverser':
        return self

    # Introspection

    @property
    def depth(self) -> int:
        """Depth below the declared root of the node on top of the path.

        Right after ``next()`` that is the node just returned; right after
        ``has_next()`` it is the node about to be returned. -1 once exhausted.
        """
        return self._path.depth

    def current_path(self) -> Tuple[Any, ...]:
        """Nodes from the declared root to the node on top of the path.

        Follows the same timing rules as ``depth``.
        """
        return self._path.nodes()

    def iter_with_depth(self) -> Iterator[Tuple[Any, int]]:
        """Yield ``(node, depth)`` tuples for the remaining nodes."""
        for node in self:
            yield node, self._path.depth

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(direction={self.direction.name}, "
                f"depth={self._path.depth})")
