"""Configuration system for walktreelib.

This module defines how users specify a traversal session: the shapes of
the trees to build, which strategies to run, and resource limits.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


class TraversalStrategy(Enum):
    """How to traverse the tree."""
    PRE_ORDER = "pre"       # Parent before children (recursive)
    POST_ORDER = "post"     # Children before parent (recursive)
    IN_ORDER = "in"         # Left, parent, right (recursive, binary only)
    STACK_DFS = "stack"     # Explicit stack, rightmost sibling first
    QUEUE_BFS = "queue"     # Explicit queue, level by level

    @property
    def label(self) -> str:
        """Section header used when writing results."""
        return _LABELS[self]

    @property
    def is_recursive(self) -> bool:
        """True if the strategy walks the tree on the call stack."""
        return self in (
            TraversalStrategy.PRE_ORDER,
            TraversalStrategy.POST_ORDER,
            TraversalStrategy.IN_ORDER,
        )


_LABELS = {
    TraversalStrategy.PRE_ORDER: "Recursive DFS",
    TraversalStrategy.POST_ORDER: "Recursive Postorder DFS",
    TraversalStrategy.STACK_DFS: "Stack-based DFS",
    TraversalStrategy.QUEUE_BFS: "Queue-based BFS",
    TraversalStrategy.IN_ORDER: "Recursive Inorder DFS for Binary Tree",
}

# Order in which a default session runs the strategies
DEFAULT_STRATEGIES: Tuple[TraversalStrategy, ...] = (
    TraversalStrategy.PRE_ORDER,
    TraversalStrategy.POST_ORDER,
    TraversalStrategy.STACK_DFS,
    TraversalStrategy.QUEUE_BFS,
    TraversalStrategy.IN_ORDER,
)


@dataclass(frozen=True)
class TreeShape:
    """Construction parameters for one synthetic tree."""

    depth: int = 2
    branching: int = 3

    def node_count(self) -> int:
        """Number of nodes ``create_tree(depth, branching)`` will allocate."""
        if self.branching == 0:
            return 1
        if self.branching == 1:
            return self.depth + 1
        return (self.branching ** (self.depth + 1) - 1) // (self.branching - 1)

    def validate(self, name: str = "tree") -> List[str]:
        """Validate the shape.

        Args:
            name: Prefix used in error messages

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []
        for attr in ("depth", "branching"):
            value = getattr(self, attr)
            if isinstance(value, bool) or not isinstance(value, int):
                errors.append(f"{name} {attr} must be an integer")
            elif value < 0:
                errors.append(f"{name} {attr} cannot be negative")
        return errors


@dataclass
class PerformanceConfig:
    """Configuration for resource limits."""

    max_nodes: Optional[int] = 1_000_000  # Largest tree we agree to build

    def check_node_limit(self, node_count: int) -> bool:
        """Check if a tree of ``node_count`` nodes is within limits.

        Returns:
            True if within limits or no limit set
        """
        if self.max_nodes is None:
            return True
        return node_count <= self.max_nodes


@dataclass
class SessionConfig:
    """Complete configuration for a traversal session.

    The general tree is walked by every strategy except in-order, which
    gets a separately built binary tree.
    """

    general: TreeShape = field(default_factory=TreeShape)
    binary: TreeShape = field(default_factory=lambda: TreeShape(depth=3, branching=2))
    strategies: Tuple[TraversalStrategy, ...] = DEFAULT_STRATEGIES
    performance: PerformanceConfig = field(default_factory=PerformanceConfig)

    def __post_init__(self):
        # Accept strategy names anywhere an enum member is accepted; names
        # that don't parse are left for validate() to report
        self.strategies = tuple(_coerce_strategy(s) for s in self.strategies)

    @classmethod
    def default(cls) -> 'SessionConfig':
        """Create the config reproducing the stock session."""
        return cls()

    def shape_for(self, strategy: TraversalStrategy) -> TreeShape:
        """Return the tree shape a strategy runs against."""
        if strategy is TraversalStrategy.IN_ORDER:
            return self.binary
        return self.general

    def needs_general_tree(self) -> bool:
        return any(s is not TraversalStrategy.IN_ORDER for s in self.strategies)

    def needs_binary_tree(self) -> bool:
        return TraversalStrategy.IN_ORDER in self.strategies

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not self.strategies:
            errors.append("at least one strategy is required")
        for strategy in self.strategies:
            if not isinstance(strategy, TraversalStrategy):
                errors.append(f"unknown strategy: {strategy!r}")

        errors.extend(self.general.validate("general tree"))
        errors.extend(self.binary.validate("binary tree"))

        if self.performance.max_nodes is not None and self.performance.max_nodes <= 0:
            errors.append("max_nodes must be positive")

        return errors


def parse_strategy(strategy) -> TraversalStrategy:
    """Convert a strategy name or enum member to ``TraversalStrategy``.

    Accepts enum values ("pre", "stack", ...), member names
    ("PRE_ORDER", "queue_bfs", ...) and a few common aliases.

    Raises:
        ValueError: If the name is not recognized
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    aliases = {
        'preorder': TraversalStrategy.PRE_ORDER,
        'dfs_pre': TraversalStrategy.PRE_ORDER,
        'postorder': TraversalStrategy.POST_ORDER,
        'dfs_post': TraversalStrategy.POST_ORDER,
        'inorder': TraversalStrategy.IN_ORDER,
        'dfs_in': TraversalStrategy.IN_ORDER,
        'dfs': TraversalStrategy.STACK_DFS,
        'bfs': TraversalStrategy.QUEUE_BFS,
    }

    name = str(strategy).strip().lower()
    for member in TraversalStrategy:
        if name in (member.value, member.name.lower()):
            return member
    if name in aliases:
        return aliases[name]

    choices = [m.value for m in TraversalStrategy] + list(aliases)
    raise ValueError(
        f"Unknown traversal strategy: {strategy}. "
        f"Choose from: {', '.join(choices)}"
    )


def _coerce_strategy(strategy):
    try:
        return parse_strategy(strategy)
    except ValueError:
        return strategy
