"""Configuration system for OrderTreeLib.

This module defines how users specify a traversal: which order to walk the
tree in, whether to reverse it, what to do with non-binary nodes during an
in-order walk, and what data to collect from each visited node.
"""

from dataclasses import dataclass
from enum import Enum, IntFlag
from typing import List, Union

from .errors import InvalidTraversalError


class TraversalOrder(Enum):
    """Which nodes to visit, and in what order.

    Orders are mutually exclusive. Given the tree

          A
         / \\
        B   C
       / \\
      D   E

    walking from A yields:

        CHILDREN_ONLY:          B C
        BREADTH_FIRST:          A B C D E
        DEPTH_FIRST_PRE_ORDER:  A B D E C
        DEPTH_FIRST_POST_ORDER: D E B C A
        BINARY_IN_ORDER:        D B E A C
    """
    CHILDREN_ONLY = "children"          # Direct children, receiver excluded
    BREADTH_FIRST = "bfs"               # Level by level
    DEPTH_FIRST_PRE_ORDER = "dfs_pre"   # Parent before children
    DEPTH_FIRST_POST_ORDER = "dfs_post" # Children before parent
    BINARY_IN_ORDER = "in_order"        # Left subtree, node, right subtree


class TraversalOptions(IntFlag):
    """Bitmask form of traversal options.

    Combine exactly one order bit with an optional REVERSE bit, e.g.
    ``TraversalOptions.BREADTH_FIRST | TraversalOptions.REVERSE``.
    """
    REVERSE = 1 << 0
    CHILDREN_ONLY = 1 << 1
    BREADTH_FIRST = 1 << 2
    DEPTH_FIRST_PRE_ORDER = 1 << 3
    DEPTH_FIRST_POST_ORDER = 1 << 4
    BINARY_IN_ORDER = 1 << 5
    ORDER_MASK = (CHILDREN_ONLY
                  | BREADTH_FIRST
                  | DEPTH_FIRST_PRE_ORDER
                  | DEPTH_FIRST_POST_ORDER
                  | BINARY_IN_ORDER)


_OPTION_TO_ORDER = {
    TraversalOptions.CHILDREN_ONLY: TraversalOrder.CHILDREN_ONLY,
    TraversalOptions.BREADTH_FIRST: TraversalOrder.BREADTH_FIRST,
    TraversalOptions.DEPTH_FIRST_PRE_ORDER: TraversalOrder.DEPTH_FIRST_PRE_ORDER,
    TraversalOptions.DEPTH_FIRST_POST_ORDER: TraversalOrder.DEPTH_FIRST_POST_ORDER,
    TraversalOptions.BINARY_IN_ORDER: TraversalOrder.BINARY_IN_ORDER,
}


class InOrderPolicy(Enum):
    """How BINARY_IN_ORDER treats a node with more than two children."""
    GENERALIZED = "generalized"  # First child, node, then every other child
    STRICT = "strict"            # Raise NotBinaryTreeError


class TraversalSignal(Enum):
    """Value a visitor returns to steer enumeration."""
    CONTINUE = "continue"
    STOP = "stop"


class DataRequirement(Enum):
    """Specifies what data is collected from each visited node."""
    NODE = "node"                # The node itself
    PAYLOAD = "payload"          # The stored payload
    INDEX_PATH = "index_path"    # Position relative to the tree root
    CHILD_COUNT = "child_count"  # Number of direct children
    CUSTOM = "custom"            # User-defined collection


@dataclass
class TraversalConfig:
    """Complete configuration for a traversal.

    This is the primary way users specify what they want from a walk.
    The TraversalPlan validates it before any node is visited.
    """

    order: TraversalOrder = TraversalOrder.DEPTH_FIRST_PRE_ORDER
    reverse: bool = False
    in_order_policy: InOrderPolicy = InOrderPolicy.GENERALIZED

    @classmethod
    def from_options(cls, options: Union['TraversalConfig', TraversalOrder,
                                         TraversalOptions, int]) -> 'TraversalConfig':
        """Build a config from any of the accepted option forms.

        Args:
            options: A TraversalConfig (returned as-is), a TraversalOrder,
                or a TraversalOptions bitmask

        Returns:
            TraversalConfig equivalent to ``options``

        Raises:
            InvalidTraversalError: If the bitmask does not name exactly one order
        """
        if isinstance(options, TraversalConfig):
            return options
        if isinstance(options, TraversalOrder):
            return cls(order=options)
        if isinstance(options, bool) or not isinstance(options, int):
            raise InvalidTraversalError(
                f"Unsupported traversal options: {options!r}"
            )

        value = int(options)
        known = int(TraversalOptions.REVERSE | TraversalOptions.ORDER_MASK)
        if value < 0 or value & ~known:
            raise InvalidTraversalError(f"Unknown traversal option bits in {value:#x}")

        matches = [order for bit, order in _OPTION_TO_ORDER.items() if value & int(bit)]
        if len(matches) != 1:
            raise InvalidTraversalError(
                f"Traversal options must name exactly one order, got {len(matches)}"
            )

        return cls(order=matches[0], reverse=bool(value & int(TraversalOptions.REVERSE)))

    # Convenience constructors for common configurations

    @classmethod
    def children_only(cls, reverse: bool = False) -> 'TraversalConfig':
        return cls(order=TraversalOrder.CHILDREN_ONLY, reverse=reverse)

    @classmethod
    def breadth_first(cls, reverse: bool = False) -> 'TraversalConfig':
        return cls(order=TraversalOrder.BREADTH_FIRST, reverse=reverse)

    @classmethod
    def pre_order(cls, reverse: bool = False) -> 'TraversalConfig':
        return cls(order=TraversalOrder.DEPTH_FIRST_PRE_ORDER, reverse=reverse)

    @classmethod
    def post_order(cls, reverse: bool = False) -> 'TraversalConfig':
        return cls(order=TraversalOrder.DEPTH_FIRST_POST_ORDER, reverse=reverse)

    @classmethod
    def in_order(cls, reverse: bool = False, strict: bool = False) -> 'TraversalConfig':
        """Create config for a binary in-order walk.

        Args:
            reverse: Reverse the resulting sequence
            strict: Fail on nodes with more than two children instead of
                visiting the extra children after the node

        Returns:
            TraversalConfig for in-order traversal
        """
        return cls(
            order=TraversalOrder.BINARY_IN_ORDER,
            reverse=reverse,
            in_order_policy=InOrderPolicy.STRICT if strict else InOrderPolicy.GENERALIZED,
        )

    def to_options(self) -> TraversalOptions:
        """Return the bitmask equivalent of this config (policy is not encoded)."""
        for bit, order in _OPTION_TO_ORDER.items():
            if order is self.order:
                return bit | TraversalOptions.REVERSE if self.reverse else bit
        raise ValueError(f"No option bit for order {self.order!r}")

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.order, TraversalOrder):
            errors.append(f"order must be a TraversalOrder, got {self.order!r}")

        if not isinstance(self.reverse, bool):
            errors.append(f"reverse must be a bool, got {self.reverse!r}")

        if not isinstance(self.in_order_policy, InOrderPolicy):
            errors.append(
                f"in_order_policy must be an InOrderPolicy, got {self.in_order_policy!r}"
            )

        return errors
