"""High-level API for walktreelib.

This module provides simple, functional interfaces for common operations.
These functions wrap the traverser classes and ExecutionPlan for ease of
use in simple cases.
"""

import sys
from typing import Any, Dict, Iterator, List, Optional, TextIO, Union

from .config import SessionConfig, TraversalStrategy
from .core.collector import SectionWriter, ValueCollector
from .core.node import Node
from .core.traverser import QueueTraverser, create_traverser
from .planning import ExecutionPlan


def traverse_tree(
    root: Node,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.PRE_ORDER,
) -> Iterator[Union[int, str]]:
    """Simple interface for tree traversal.

    Args:
        root: Starting node for traversal
        strategy: Traversal strategy (pre, post, in, stack, queue)

    Yields:
        Node values in strategy order; the in-order strategy may yield the
        ``NOT_A_BINARY_TREE`` sentinel string instead of a value

    Example:
        >>> root = create_tree(1, 2)
        >>> list(traverse_tree(root, "post"))
        [0, 0, 1]
    """
    collector = ValueCollector()
    for visit in create_traverser(strategy).traverse(root):
        yield collector.collect(visit)


def collect_values(
    root: Node,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.PRE_ORDER,
) -> List[Union[int, str]]:
    """Traverse a tree and return the visited values as a list."""
    return list(traverse_tree(root, strategy))


def count_nodes(root: Node) -> int:
    """Count the nodes of a tree.

    Uses the queue traverser, so it works for trees of any depth.
    """
    count = 0
    for _ in QueueTraverser().traverse(root):
        count += 1
    return count


def get_tree_stats(root: Node) -> Dict[str, Any]:
    """Get statistics about a tree.

    Returns:
        Dictionary with ``total_nodes``, ``leaf_nodes``, ``internal_nodes``,
        ``max_branching``, ``height`` (edges on the longest root-to-leaf
        path) and ``is_binary``
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'internal_nodes': 0,
        'max_branching': 0,
        'height': 0,
    }

    # Walk level by level so the height falls out of the level count
    level = [root]
    depth = 0
    while level:
        next_level = []
        for node in level:
            stats['total_nodes'] += 1
            if node.is_leaf():
                stats['leaf_nodes'] += 1
            else:
                stats['internal_nodes'] += 1
            stats['max_branching'] = max(stats['max_branching'], len(node.children))
            next_level.extend(node.children)
        stats['height'] = depth
        level = next_level
        depth += 1

    stats['is_binary'] = stats['max_branching'] <= 2
    return stats


def run_session(
    config: Optional[SessionConfig] = None,
    stream: Optional[TextIO] = None,
) -> Dict[TraversalStrategy, List[Any]]:
    """Build the configured trees, run every strategy and write the results.

    Args:
        config: Session configuration (defaults to the stock session:
            general tree 2x3, binary tree 3x2, all five strategies)
        stream: Where to write sections (defaults to ``sys.stdout``)

    Returns:
        Mapping of strategy to the values it produced

    Raises:
        CapabilityMismatchError: If the configuration is invalid or too
            large to run
    """
    plan = ExecutionPlan(config)
    writer = SectionWriter(stream if stream is not None else sys.stdout)

    results = {}
    for strategy, values in plan.execute():
        writer.write_values(strategy.label, values)
        results[strategy] = values
    return results
