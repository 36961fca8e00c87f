"""Traversal planning for OrderTreeLib.

The TraversalPlan validates a TraversalConfig, selects the traverser for its
order and coordinates the actual walk: applying the reverse flag and driving
visitors that may ask to stop early.
"""

import logging
from typing import TYPE_CHECKING, Any, Callable, Iterator, Optional, Tuple

from .config import TraversalConfig, TraversalSignal
from .core.traverser import TreeTraverser, create_traverser
from .errors import InvalidTraversalError

if TYPE_CHECKING:
    from .core.node import TreeNode

logger = logging.getLogger(__name__)


class TraversalPlan:
    """Validated execution plan for a traversal.

    The plan is the bridge between user intent (options or a config) and
    execution. Validation happens in the constructor, before any node is
    visited, so malformed options never produce a partial walk.
    """

    def __init__(self, options: Any, reverse: Optional[bool] = None):
        """Create and validate a plan.

        Args:
            options: TraversalConfig, TraversalOrder or TraversalOptions bitmask
            reverse: If given, overrides the reverse flag from ``options``

        Raises:
            InvalidTraversalError: If the options can't be turned into a valid config
        """
        config = TraversalConfig.from_options(options)
        if reverse is not None and reverse != config.reverse:
            config = TraversalConfig(
                order=config.order,
                reverse=reverse,
                in_order_policy=config.in_order_policy,
            )

        config_errors = config.validate()
        if config_errors:
            raise InvalidTraversalError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.config = config
        self.traverser: TreeTraverser = create_traverser(
            config.order, config.in_order_policy
        )

    def execute(self, root: 'TreeNode') -> Iterator[Tuple['TreeNode', int]]:
        """Execute the traversal.

        Forward orders are lazy. A reversed order is the exact reversal of
        the forward sequence, so it is materialized before the first yield.

        Args:
            root: Node to start from

        Yields:
            Tuples of (node, depth)
        """
        sequence = self.traverser.traverse(root)
        if self.config.reverse:
            sequence = reversed(list(sequence))
        yield from sequence

    def enumerate(self, root: 'TreeNode', visitor: Callable[['TreeNode'], Any]) -> bool:
        """Call ``visitor`` on each node until it returns a stop signal.

        Args:
            root: Node to start from
            visitor: Callable returning ``TraversalSignal.STOP`` or ``True``
                to end the walk

        Returns:
            True if the visitor stopped the traversal early
        """
        for node, _ in self.execute(root):
            signal = visitor(node)
            if signal is TraversalSignal.STOP or signal is True:
                logger.debug("Traversal from %r stopped by visitor at %r", root, node)
                return True
        return False

    def describe(self) -> str:
        """Human-readable summary of the plan, useful for debugging."""
        direction = "reversed" if self.config.reverse else "forward"
        return (
            f"{self.config.order.name} ({direction}, "
            f"in-order policy {self.config.in_order_policy.name})"
        )

    def __repr__(self) -> str:
        return f"TraversalPlan({self.describe()})"
