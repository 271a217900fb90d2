"""Execution planning for walktreelib.

The ExecutionPlan validates that a SessionConfig can be run within the
interpreter's limits and coordinates tree construction and traversal.
"""

import logging
import sys
from typing import Any, Dict, Iterator, List, Optional, Tuple

from .config import SessionConfig, TraversalStrategy, TreeShape
from .core.builder import create_tree
from .core.collector import DataCollector, ValueCollector
from .core.node import Node
from .core.traverser import create_traverser

logger = logging.getLogger(__name__)

# Frames kept free for the caller (test runners included) and logging
RECURSION_HEADROOM = 200


class CapabilityMismatchError(Exception):
    """Raised when a configuration can't be run within the current limits."""
    pass


def recursion_budget() -> int:
    """Deepest tree the recursive traversers can handle.

    Each level costs one generator frame. The builder and the stack and
    queue traversers are iterative and have no depth limit.
    """
    return max(sys.getrecursionlimit() - RECURSION_HEADROOM, 0)


def tree_height(shape: TreeShape) -> int:
    """Number of edges on the longest root-to-leaf path of ``shape``."""
    return shape.depth if shape.branching > 0 else 0


class ExecutionPlan:
    """Validated execution plan for a traversal session.

    All checks happen in the constructor, before any tree is built:
    configuration consistency, the node budget for each tree, and the
    call-stack depth needed by the recursive traversers.
    """

    def __init__(self, config: Optional[SessionConfig] = None,
                 collector: Optional[DataCollector] = None):
        """Create and validate an execution plan.

        Args:
            config: Session configuration (defaults to the stock session)
            collector: Turns visits into results (defaults to node values)

        Raises:
            CapabilityMismatchError: If the config can't be satisfied
        """
        self.config = config or SessionConfig.default()
        self.collector = collector or ValueCollector()

        config_errors = self.config.validate()
        if config_errors:
            raise CapabilityMismatchError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        limit_issues = self._validate_limits()
        if limit_issues:
            raise CapabilityMismatchError(
                f"Resource limits exceeded: {'; '.join(limit_issues)}"
            )

        self._trees: Dict[TreeShape, Node] = {}

    def _shapes(self) -> List[Tuple[str, TreeShape, bool]]:
        """Return (name, shape, walked recursively) for every tree needed."""
        strategies = self.config.strategies
        shapes = []
        if self.config.needs_general_tree():
            recursive = any(
                s.is_recursive and s is not TraversalStrategy.IN_ORDER for s in strategies
            )
            shapes.append(("general tree", self.config.general, recursive))
        if self.config.needs_binary_tree():
            shapes.append(("binary tree", self.config.binary, True))
        return shapes

    def _validate_limits(self) -> List[str]:
        issues = []
        budget = recursion_budget()

        for name, shape, recursive in self._shapes():
            count = shape.node_count()
            if not self.config.performance.check_node_limit(count):
                issues.append(
                    f"{name} would have {count} nodes "
                    f"(max_nodes={self.config.performance.max_nodes})"
                )
            height = tree_height(shape)
            if recursive and height > budget:
                issues.append(
                    f"{name} depth {height} exceeds the recursion budget of {budget}"
                )

        return issues

    def tree_for(self, strategy: TraversalStrategy) -> Node:
        """Return the tree a strategy runs against, building it on first use."""
        shape = self.config.shape_for(strategy)
        if shape not in self._trees:
            self._trees[shape] = create_tree(shape.depth, shape.branching)
        return self._trees[shape]

    def execute(self) -> Iterator[Tuple[TraversalStrategy, List[Any]]]:
        """Run every configured strategy in order.

        Yields:
            Tuples of (strategy, collected values)
        """
        for strategy in self.config.strategies:
            root = self.tree_for(strategy)
            traverser = create_traverser(strategy)
            values = [self.collector.collect(visit) for visit in traverser.traverse(root)]
            logger.debug("%s visited %d items", strategy.label, len(values))
            yield strategy, values

    def explain(self) -> str:
        """Return a human-readable description of the plan.

        Useful for debugging and logging.
        """
        lines = ["Execution Plan:"]
        for name, shape, _ in self._shapes():
            lines.append(
                f"  {name}: depth={shape.depth} branching={shape.branching} "
                f"nodes={shape.node_count()}"
            )
        lines.append(
            "  Strategies: " + ", ".join(s.value for s in self.config.strategies)
        )
        lines.append(f"  Recursion budget: {recursion_budget()}")
        return "\n".join(lines)
