#!/usr/bin/env python3
"""
Document outline example for OrderTreeLib.

This example demonstrates:
- Building a tree from nested tuples
- Index-path addressing
- Moving sections between chapters
- Walking the outline in different orders
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from ordertreelib import (
    TraversalOrder,
    TraversalSignal,
    build_tree,
    get_tree_stats,
)
from ordertreelib.testing import TreeStructureHelper


def main():
    """Build an outline, reorganize it and print it."""
    if "--debug" in sys.argv:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    book = build_tree(("Book", [
        ("Intro", ["Motivation", "Scope"]),
        ("Design", ["Nodes", "Traversal", "History"]),
        ("Appendix", []),
    ]))
    helper = TreeStructureHelper(book)

    print("Original outline:")
    print(helper.outline())

    # Move "History" from Design into Appendix
    history = book.descendant_at_index_path((1, 2))
    book.last_child().insert_child(history, 0)
    print(f"\nMoved {history.payload!r}; it now lives at {history.index_path()}")

    # Bring the last section of Design to the front
    design = book.child_at_index(1)
    design.insert_child(design.last_child(), 0)

    print("\nReorganized outline:")
    print(helper.outline())

    print("\nLevel by level:")
    print("  " + ", ".join(n.payload for n in book.iter_descendants(TraversalOrder.BREADTH_FIRST)))

    print("\nFirst leaf in post-order:")

    def stop_at_leaf(node):
        if node.is_leaf():
            print(f"  {node.payload} at {node.index_path()}")
            return TraversalSignal.STOP
        return TraversalSignal.CONTINUE

    book.enumerate_descendants(TraversalOrder.DEPTH_FIRST_POST_ORDER, stop_at_leaf)

    stats = get_tree_stats(book)
    print(f"\nTotal nodes: {stats['total_nodes']}, leaves: {stats['leaf_nodes']}, "
          f"max depth: {stats['max_depth']}")

    helper.assert_consistent()


if __name__ == "__main__":
    main()
