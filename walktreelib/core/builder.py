"""Synthetic tree construction.

Trees are materialized eagerly in one pass. The node count grows as
``num_child ** num_row``, so callers should bound both parameters (see
``walktreelib.planning.ExecutionPlan``).
"""

import logging
from typing import List, Tuple

from .node import Node

logger = logging.getLogger(__name__)


def _check_count(name: str, value: int) -> None:
    # bool is an int subclass but never a meaningful count
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} cannot be negative (got {value})")


def _build(num_row: int, num_child: int) -> Node:
    # Explicit stack of (value, children built so far); the top entry is
    # finished once it holds num_child children or reaches value 0
    stack: List[Tuple[int, List[Node]]] = [(num_row, [])]

    while True:
        row, children = stack[-1]
        if row > 0 and len(children) < num_child:
            stack.append((row - 1, []))
            continue

        stack.pop()
        node = Node(row, children) if row > 0 else Node(0)
        if not stack:
            return node
        stack[-1][1].append(node)


def create_tree(num_row: int, num_child: int) -> Node:
    """Build a tree of the given depth and branching factor.

    A depth of 0 gives a single leaf with value 0. Otherwise the root holds
    ``num_row`` and has exactly ``num_child`` children, each built with
    ``num_row - 1``. With ``num_child == 0`` the result is a lone root whose
    value is ``num_row``.

    Args:
        num_row: Depth of the tree (number of levels below the root)
        num_child: Number of children per internal node

    Returns:
        Root node owning the whole tree

    Raises:
        TypeError: If either argument is not an int
        ValueError: If either argument is negative

    Example:
        >>> root = create_tree(2, 3)
        >>> [child.value for child in root.children]
        [1, 1, 1]
    """
    _check_count("num_row", num_row)
    _check_count("num_child", num_child)

    logger.debug("Building tree with num_row=%d num_child=%d", num_row, num_child)
    return _build(num_row, num_child)
