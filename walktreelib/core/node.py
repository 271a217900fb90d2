"""Node type for walktreelib.

The Node is intentionally kept simple - it's a data container holding a
value and the children it owns. Traversal logic lives in the traversers.
"""

from typing import Any, Dict, Iterable, Tuple


class Node:
    """A single element of a synthetic tree.

    Nodes are immutable once built: ``value`` and ``children`` are read-only
    and children are stored as a tuple. Every child is owned by exactly one
    parent; there are no back references.
    """

    __slots__ = ("_value", "_children", "_hash")

    def __init__(self, value: int, children: Iterable["Node"] = ()):
        """Create a node.

        Args:
            value: Depth remaining when the node was created (0 for leaves)
            children: Child nodes in left-to-right order
        """
        self._value = value
        self._children: Tuple["Node", ...] = tuple(children)
        # Children are immutable, so the subtree hash never changes
        self._hash = hash((value, tuple(child._hash for child in self._children)))

    @property
    def value(self) -> int:
        return self._value

    @property
    def children(self) -> Tuple["Node", ...]:
        return self._children

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return not self._children

    def metadata(self) -> Dict[str, Any]:
        """Return lightweight information about this node.

        Returns:
            Dict with ``value``, ``child_count`` and ``is_leaf``
        """
        return {
            'value': self._value,
            'child_count': len(self._children),
            'is_leaf': self.is_leaf(),
        }

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}(value={self._value!r}, children={len(self._children)})"

    def __eq__(self, other: object) -> bool:
        """Nodes are equal if their whole subtrees are structurally equal."""
        if not isinstance(other, Node):
            return NotImplemented
        if self is other:
            return True

        pairs = [(self, other)]
        while pairs:
            left, right = pairs.pop()
            if left is right:
                continue
            if (left._hash != right._hash
                    or left._value != right._value
                    or len(left._children) != len(right._children)):
                return False
            pairs.extend(zip(left._children, right._children))
        return True

    def __hash__(self) -> int:
        return self._hash
