"""walktreelib - synthetic tree construction and traversal.

Build a tree of a given depth and branching factor, then walk it with one
of five strategies:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Recursive:
    pre-order, post-order, in-order (binary trees only)

Iterative:
    stack-based depth-first, queue-based breadth-first
━━━━━━━━━━━━━━━━━━━━━━━━━━

    from walktreelib import create_tree, traverse_tree
    root = create_tree(2, 3)
    print(list(traverse_tree(root, "queue")))
"""

__version__ = "0.1.0"

# Core components
from .core.node import Node
from .core.builder import create_tree
from .core.traverser import (
    NOT_A_BINARY_TREE,
    TreeTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    InOrderTraverser,
    StackTraverser,
    QueueTraverser,
    create_traverser,
)
from .core.collector import (
    DataCollector,
    ValueCollector,
    MetadataCollector,
    SectionWriter,
    format_section,
)

# Configuration and planning
from .config import (
    TraversalStrategy,
    TreeShape,
    PerformanceConfig,
    SessionConfig,
    DEFAULT_STRATEGIES,
    parse_strategy,
)
from .planning import ExecutionPlan, CapabilityMismatchError

# High-level API
from .api import (
    traverse_tree,
    collect_values,
    count_nodes,
    get_tree_stats,
    run_session,
)

__all__ = [
    "__version__",
    # Core
    'Node',
    'create_tree',
    'NOT_A_BINARY_TREE',
    'TreeTraverser',
    'PreOrderTraverser',
    'PostOrderTraverser',
    'InOrderTraverser',
    'StackTraverser',
    'QueueTraverser',
    'create_traverser',
    'DataCollector',
    'ValueCollector',
    'MetadataCollector',
    'SectionWriter',
    'format_section',
    # Config
    'TraversalStrategy',
    'TreeShape',
    'PerformanceConfig',
    'SessionConfig',
    'DEFAULT_STRATEGIES',
    'parse_strategy',
    'ExecutionPlan',
    'CapabilityMismatchError',
    # API
    'traverse_tree',
    'collect_values',
    'count_nodes',
    'get_tree_stats',
    'run_session',
]
