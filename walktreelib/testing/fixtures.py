"""Test fixtures for walktreelib consumers.

These helpers make it easy to describe small irregular trees by hand and
to check traversal orders against the tree structure.
"""

from typing import Dict, Iterable, List, Sequence, Set, Union

from ..core.node import Node

TreeSpec = Union[int, Sequence]


def expected_node_count(depth: int, branching: int) -> int:
    """Closed-form node count of ``create_tree(depth, branching)``."""
    if branching == 0:
        return 1
    if branching == 1:
        return depth + 1
    return (branching ** (depth + 1) - 1) // (branching - 1)


def make_tree(spec: TreeSpec) -> Node:
    """Build a tree from a nested description.

    An int is a leaf with that value; a ``(value, [children...])`` pair is
    an internal node.

    Example:
        >>> root = make_tree((5, [1, (2, [0, 0, 0]), 3]))
        >>> [c.value for c in root.children]
        [1, 2, 3]
    """
    if isinstance(spec, int):
        return Node(spec)
    value, children = spec
    return Node(value, [make_tree(child) for child in children])


class TreeTestHelper:
    """Structural queries over a built tree for use in assertions.

    Nodes are tracked by identity, so trees with repeated values (such as
    the ones ``create_tree`` produces) are handled correctly.

    Example:
        helper = TreeTestHelper(create_tree(2, 3))
        visits = list(PreOrderTraverser().traverse(helper.root))
        assert helper.visits_each_node_once(visits)
    """

    def __init__(self, root: Node):
        self.root = root
        self._depth: Dict[int, int] = {}
        self._nodes: List[Node] = []

        stack = [(root, 0)]
        while stack:
            node, depth = stack.pop()
            self._depth[id(node)] = depth
            self._nodes.append(node)
            for child in node.children:
                stack.append((child, depth + 1))

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    def depth_of(self, node: Node) -> int:
        """Depth of ``node`` below the root (root = 0)."""
        return self._depth[id(node)]

    def descendants(self, node: Node) -> Set[int]:
        """Identities of every node strictly below ``node``."""
        found: Set[int] = set()
        stack = list(node.children)
        while stack:
            current = stack.pop()
            found.add(id(current))
            stack.extend(current.children)
        return found

    def value_multiset(self) -> List[int]:
        """Sorted list of every node value in the tree."""
        return sorted(node.value for node in self._nodes)

    def visits_each_node_once(self, visits: Iterable[Node]) -> bool:
        """True if ``visits`` contains every node of the tree exactly once."""
        seen = [id(node) for node in visits]
        return len(seen) == len(set(seen)) and set(seen) == {id(n) for n in self._nodes}

    def positions(self, visits: Iterable[Node]) -> Dict[int, int]:
        """Map node identity to its index in ``visits``."""
        return {id(node): index for index, node in enumerate(visits)}
