"""Core components: the node type, tree builder, traversers and collectors."""

from .node import Node
from .builder import create_tree
from .traverser import (
    NOT_A_BINARY_TREE,
    TreeTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    InOrderTraverser,
    StackTraverser,
    QueueTraverser,
    create_traverser,
)
from .collector import (
    DataCollector,
    ValueCollector,
    MetadataCollector,
    SectionWriter,
    format_section,
)

__all__ = [
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
]
