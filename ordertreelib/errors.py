"""Exception types for OrderTreeLib.

Every structural check runs before any linkage is touched, so when one of
these is raised the tree is exactly as it was before the call.
"""

from typing import Any, Optional


class TreeError(Exception):
    """Base class for all errors raised by OrderTreeLib."""
    pass


class OutOfRangeError(TreeError, IndexError):
    """Raised when a child index or index-path component is out of bounds.

    Attributes:
        index: The offending index
        size: Number of children at the point of access
        path: Full index path being resolved, if any
    """

    def __init__(self, index: Any, size: int, path: Optional[tuple] = None):
        self.index = index
        self.size = size
        self.path = path
        if path is not None:
            message = (
                f"Index {index!r} in path {path!r} is out of range "
                f"for a node with {size} children"
            )
        else:
            message = f"Index {index!r} is out of range for a node with {size} children"
        super().__init__(message)


class CycleViolationError(TreeError, ValueError):
    """Raised when an insertion would make a node its own ancestor."""

    def __init__(self, parent: Any, child: Any):
        self.parent = parent
        self.child = child
        if parent is child:
            message = f"Cannot insert {child!r} into itself"
        else:
            message = f"Cannot insert {child!r} into its own descendant {parent!r}"
        super().__init__(message)


class InvalidTraversalError(TreeError, ValueError):
    """Raised when traversal options or configuration are malformed."""
    pass


class NotBinaryTreeError(TreeError):
    """Raised by strict in-order traversal on a node with more than two children."""

    def __init__(self, node: Any, child_count: int):
        self.node = node
        self.child_count = child_count
        super().__init__(
            f"Binary in-order traversal reached {node!r} "
            f"with {child_count} children"
        )
