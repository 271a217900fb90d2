#!/usr/bin/env python3
"""
Side-by-side comparison of the five traversal orders.

This example demonstrates:
- Building a tree with create_tree
- Running each strategy through traverse_tree
- Tree statistics
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from walktreelib import TraversalStrategy, create_tree, get_tree_stats, traverse_tree


def main():
    """Print every traversal order for a small tree."""
    depth = int(sys.argv[1]) if len(sys.argv) > 1 else 2
    branching = int(sys.argv[2]) if len(sys.argv) > 2 else 2

    root = create_tree(depth, branching)
    stats = get_tree_stats(root)

    print(f"Tree: depth={depth} branching={branching} nodes={stats['total_nodes']}")
    print("-" * 50)

    for strategy in TraversalStrategy:
        values = " ".join(str(v) for v in traverse_tree(root, strategy))
        print(f"{strategy.label:<40} {values}")

    if not stats['is_binary']:
        print("\nNote: in-order only handles nodes with up to two children")


if __name__ == "__main__":
    main()
