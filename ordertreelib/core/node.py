"""TreeNode for OrderTreeLib.

A TreeNode holds a payload and an ordered list of child nodes, and keeps a
weak reference to its parent. There is no separate tree object: a tree is
whatever is reachable from a node with no parent. Ownership flows downward,
so a subtree stays alive as long as its root (or any ancestor) is referenced.

Mutating a tree while one of its traversals is in progress is undefined
behavior. No locking is done; confine each tree to a single thread.
"""

import logging
import weakref
from typing import Any, Callable, Iterator, List, Optional, Sequence, Tuple, Union

from ..config import TraversalConfig, TraversalOptions, TraversalOrder
from ..errors import CycleViolationError, OutOfRangeError
from ..planning import TraversalPlan

logger = logging.getLogger(__name__)

TraversalOptionsLike = Union[TraversalConfig, TraversalOrder, TraversalOptions, int]
Visitor = Callable[['TreeNode'], Any]


def _check_index(index: Any, size: int, path: Optional[tuple] = None,
                 allow_end: bool = False) -> None:
    """Raise unless ``index`` is an int in ``[0, size)`` (``[0, size]`` with allow_end)."""
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError(f"Child indices must be integers, not {type(index).__name__}")
    limit = size + 1 if allow_end else size
    if not 0 <= index < limit:
        raise OutOfRangeError(index, size, path)


class TreeNode:
    """A node in an ordered N-ary tree.

    Two TreeNode handles are equal only if they are the same node; payloads
    are never compared. Nodes are hashable by identity and can be used in
    sets and as dict keys regardless of what they store.

    Example:
        >>> root = TreeNode("A")
        >>> b = root.append_child_payload("B")
        >>> c = root.append_child_payload("C")
        >>> d = b.append_child_payload("D")
        >>> e = b.append_child_payload("E")
        >>> [n.payload for n in root.iter_descendants(TraversalOrder.BREADTH_FIRST)]
        ['A', 'B', 'C', 'D', 'E']
    """

    def __init__(self, payload: Any = None):
        """Create a standalone root node.

        Args:
            payload: Value stored at the node (any type, may be None)
        """
        self.payload = payload
        self._children: List['TreeNode'] = []
        self._parent_ref: Optional[weakref.ReferenceType] = None

    # ------------------------------------------------------------------
    # Structure

    @property
    def parent(self) -> Optional['TreeNode']:
        """The node's immediate parent, or None for a root."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def children(self) -> Tuple['TreeNode', ...]:
        """Snapshot of the direct children in order."""
        return tuple(self._children)

    def is_leaf(self) -> bool:
        return not self._children

    def is_root(self) -> bool:
        return self.parent is None

    def number_of_children(self) -> int:
        return len(self._children)

    def child_at_index(self, index: int) -> 'TreeNode':
        """Return the direct child at ``index``.

        Raises:
            OutOfRangeError: If ``index`` is not in ``[0, number_of_children())``
        """
        _check_index(index, len(self._children))
        return self._children[index]

    def index_in_parent(self) -> Optional[int]:
        """Position of this node among its parent's children, None for a root."""
        parent = self.parent
        if parent is None:
            return None
        return parent._position_of(self)

    def _position_of(self, child: 'TreeNode') -> int:
        # Identity scan; no sibling pointers are stored
        for position, candidate in enumerate(self._children):
            if candidate is child:
                return position
        raise LookupError(f"{child!r} is not a child of {self!r}")

    def ancestors(self) -> Iterator['TreeNode']:
        """Yield the parent, grandparent, ... up to and including the root."""
        current = self.parent
        while current is not None:
            yield current
            current = current.parent

    def depth(self) -> int:
        """Number of ancestors; 0 for a root."""
        return sum(1 for _ in self.ancestors())

    def is_ancestor_of(self, node: 'TreeNode') -> bool:
        """Check whether this node is a strict ancestor of ``node``."""
        return any(ancestor is self for ancestor in node.ancestors())

    def index_path(self) -> Tuple[int, ...]:
        """Calculate the index path of this node relative to its root.

        Walks upward, finding each node's position in its parent's children.
        Cost is proportional to depth times the average fan-out.

        Returns:
            Tuple of child positions from the root down to this node;
            empty for a root
        """
        indices: List[int] = []
        current = self
        parent = current.parent
        while parent is not None:
            indices.append(parent._position_of(current))
            current, parent = parent, parent.parent
        indices.reverse()
        return tuple(indices)

    # ------------------------------------------------------------------
    # Navigation

    def root(self) -> 'TreeNode':
        """Find the ancestor with no parent (the node itself for a root)."""
        current = self
        parent = current.parent
        while parent is not None:
            current, parent = parent, parent.parent
        return current

    def first_child(self) -> Optional['TreeNode']:
        return self._children[0] if self._children else None

    def last_child(self) -> Optional['TreeNode']:
        return self._children[-1] if self._children else None

    def previous_sibling(self) -> Optional['TreeNode']:
        """Return the adjacent sibling before this node, or None.

        Requires scanning the parent's children to find this node's index.
        """
        parent = self.parent
        if parent is None:
            return None
        position = parent._position_of(self)
        if position == 0:
            return None
        return parent._children[position - 1]

    def next_sibling(self) -> Optional['TreeNode']:
        """Return the adjacent sibling after this node, or None."""
        parent = self.parent
        if parent is None:
            return None
        position = parent._position_of(self)
        if position + 1 >= len(parent._children):
            return None
        return parent._children[position + 1]

    def descendant_at_index_path(self, path: Sequence[int]) -> 'TreeNode':
        """Find a descendant by walking down the given index path.

        Args:
            path: Child positions, applied from this node downward. The
                empty path addresses this node.

        Returns:
            The node at ``path``

        Raises:
            OutOfRangeError: At the first component that is out of bounds
        """
        path = tuple(path)
        node = self
        for index in path:
            _check_index(index, len(node._children), path)
            node = node._children[index]
        return node

    # ------------------------------------------------------------------
    # Payload accessors

    def parent_payload(self) -> Any:
        parent = self.parent
        return parent.payload if parent is not None else None

    def child_payload_at_index(self, index: int) -> Any:
        return self.child_at_index(index).payload

    def root_payload(self) -> Any:
        return self.root().payload

    def first_child_payload(self) -> Any:
        child = self.first_child()
        return child.payload if child is not None else None

    def last_child_payload(self) -> Any:
        child = self.last_child()
        return child.payload if child is not None else None

    def previous_sibling_payload(self) -> Any:
        sibling = self.previous_sibling()
        return sibling.payload if sibling is not None else None

    def next_sibling_payload(self) -> Any:
        sibling = self.next_sibling()
        return sibling.payload if sibling is not None else None

    def descendant_payload_at_index_path(self, path: Sequence[int]) -> Any:
        return self.descendant_at_index_path(path).payload

    # ------------------------------------------------------------------
    # Traversal

    def iter_descendants(self,
                         options: TraversalOptionsLike = TraversalOrder.DEPTH_FIRST_PRE_ORDER,
                         reverse: Optional[bool] = None) -> Iterator['TreeNode']:
        """Return a lazy, single-pass iterator over nodes in traversal order.

        Options are validated immediately; nodes are produced on demand.
        Reversed orders are computed in full before the first node is
        produced, since reversal applies to the whole sequence.

        Args:
            options: TraversalOrder, TraversalOptions bitmask or TraversalConfig
            reverse: Override the reverse flag carried by ``options``

        Returns:
            Iterator of TreeNode instances

        Raises:
            InvalidTraversalError: If ``options`` is malformed
        """
        plan = TraversalPlan(options, reverse=reverse)
        return (node for node, _ in plan.execute(self))

    def enumerate_descendants(self, options: TraversalOptionsLike, visitor: Visitor) -> bool:
        """Traverse in the specified manner and call ``visitor`` for each node.

        The visitor stops the traversal by returning ``TraversalSignal.STOP``
        (or ``True``); any other return value continues it. Once a stop is
        seen no further nodes are visited. Exceptions raised by the visitor
        propagate unchanged.

        Note: mutating the tree during traversal results in undefined behavior.

        Args:
            options: TraversalOrder, TraversalOptions bitmask or TraversalConfig
            visitor: Callable taking the visited node

        Returns:
            True if the visitor stopped the traversal early
        """
        return TraversalPlan(options).enumerate(self, visitor)

    def __iter__(self) -> Iterator['TreeNode']:
        """Iterate over direct children."""
        return iter(tuple(self._children))

    # ------------------------------------------------------------------
    # Manipulation

    def insert_child(self, child: 'TreeNode', index: int) -> None:
        """Add ``child`` to this node's children at ``index``.

        If ``child`` already has a parent it is removed from it first, so a
        node is never linked under two parents. When ``child`` is already a
        child of this node it is detached and then reinserted, and ``index``
        refers to the positions remaining after the detach.

        Args:
            child: Node to insert
            index: Position to insert at, ``0 <= index <= number_of_children()``

        Raises:
            CycleViolationError: If ``child`` is this node or one of its ancestors
            OutOfRangeError: If ``index`` is outside the valid range
        """
        if not isinstance(child, TreeNode):
            raise TypeError(f"Children must be TreeNode instances, not {type(child).__name__}")

        # A leaf can't be an ancestor, so skip the upward walk for it
        if child is self or (child._children and child.is_ancestor_of(self)):
            logger.debug("Rejected insertion of %r into %r: would create a cycle", child, self)
            raise CycleViolationError(self, child)

        old_parent = child.parent
        size = len(self._children)
        if old_parent is self:
            size -= 1
        _check_index(index, size, allow_end=True)

        if old_parent is not None:
            logger.debug("Moving %r from %r to %r at index %d", child, old_parent, self, index)
            child.remove_from_parent()

        self._children.insert(index, child)
        child._parent_ref = weakref.ref(self)

    def insert_child_payload(self, payload: Any, index: int) -> 'TreeNode':
        """Wrap ``payload`` in a new node and insert it at ``index``.

        Returns:
            The newly created child node
        """
        child = TreeNode(payload)
        self.insert_child(child, index)
        return child

    def append_child(self, child: 'TreeNode') -> None:
        """Insert ``child`` after the current last child."""
        size = len(self._children)
        if child.parent is self:
            size -= 1
        self.insert_child(child, size)

    def append_child_payload(self, payload: Any) -> 'TreeNode':
        return self.insert_child_payload(payload, len(self._children))

    def remove_child_at_index(self, index: int) -> 'TreeNode':
        """Detach and return the child at ``index``.

        The returned node becomes the root of its own tree.

        Raises:
            OutOfRangeError: If ``index`` is not in ``[0, number_of_children())``
        """
        _check_index(index, len(self._children))
        child = self._children.pop(index)
        child._parent_ref = None
        logger.debug("Detached %r from %r", child, self)
        return child

    def remove_all_children(self) -> List['TreeNode']:
        """Detach every child, leaving this node a leaf.

        Returns:
            The former children, each now a standalone root
        """
        detached, self._children = self._children, []
        for child in detached:
            child._parent_ref = None
        if detached:
            logger.debug("Detached %d children from %r", len(detached), self)
        return detached

    def remove_from_parent(self) -> None:
        """Remove this node from its parent; does nothing for a root."""
        parent = self.parent
        if parent is None:
            # Also drops a reference to a parent that has been collected
            self._parent_ref = None
            return
        parent.remove_child_at_index(parent._position_of(self))

    # ------------------------------------------------------------------
    # Python protocol

    def __len__(self) -> int:
        return len(self._children)

    def __bool__(self) -> bool:
        # A leaf is still a node
        return True

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(payload={self.payload!r}, children={len(self._children)})"
