"""Exceptions raised by NavTreeLib.

Errors are raised synchronously at the point of the violating call. The
traversal engine never catches, logs or retries them.
"""


class TraversalError(Exception):
    """Base class for all NavTreeLib errors."""
    pass


class InvalidStartError(TraversalError, ValueError):
    """Raised when a start node is neither the declared root nor below it.

    This is a precondition violation detected while the traverser is being
    constructed, before any node has been produced.
    """

    def __init__(self, root, start):
        self.root = root
        self.start = start
        super().__init__(
            f"There must be a path from 'start' {start!r} to 'root' {root!r}."
        )


class TraversalExhaustedError(TraversalError, StopIteration):
    """Raised when pulling a node after every node has been visited.

    Subclasses StopIteration so that ``for`` loops, ``list()`` and ``next(it,
    default)`` treat it as the regular end of iteration.
    """

    def __init__(self, message: str = "All nodes in the tree have been visited."):
        super().__init__(message)


class NavigatorContractError(TraversalError, RuntimeError):
    """Raised by bundled navigators when the structure is inconsistent.

    Example: a node whose parent does not list it among its children.
    """
    pass


class CapabilityMismatchError(TraversalError):
    """Raised when a traversal configuration can't be executed."""
    pass
