"""Testing utilities for walktreelib."""

from .fixtures import TreeTestHelper, expected_node_count, make_tree

__all__ = ['TreeTestHelper', 'expected_node_count', 'make_tree']
