"""Tree traversal strategies for walktreelib.

Traversers implement different algorithms for walking through a tree.
Each ``traverse`` call owns its own working state, so one traverser
instance can be reused and several can run against the same tree.

Recursive traversers walk the tree on the Python call stack. Every level
costs interpreter frames, so they are limited by ``sys.getrecursionlimit()``;
``ExecutionPlan`` checks this before running them. The stack and queue
traversers keep their state on the heap and are bounded only by memory.
"""

import logging
from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, Union

from .node import Node
from ..config import TraversalStrategy, parse_strategy

logger = logging.getLogger(__name__)

# Emitted by the in-order traversal in place of a node with 3+ children
NOT_A_BINARY_TREE = "This is not a binary tree."

Visit = Union[Node, str]


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    ``traverse`` yields visited nodes in strategy order. Only the in-order
    traverser ever yields something else (the ``NOT_A_BINARY_TREE``
    sentinel).
    """

    strategy: TraversalStrategy

    @abstractmethod
    def traverse(self, root: Node) -> Iterator[Visit]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal

        Yields:
            Visited nodes, in the order of this strategy
        """
        pass


class PreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal.

    Visits parent before children, children left to right.
    """

    strategy = TraversalStrategy.PRE_ORDER

    def traverse(self, root: Node) -> Iterator[Visit]:
        yield root
        for child in root.children:
            yield from self.traverse(child)


class PostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal.

    Visits children left to right, then the parent. Good for aggregating
    values bottom-up.
    """

    strategy = TraversalStrategy.POST_ORDER

    def traverse(self, root: Node) -> Iterator[Visit]:
        for child in root.children:
            yield from self.traverse(child)
        yield root


class InOrderTraverser(TreeTraverser):
    """In-order traversal for binary trees.

    Dispatches on the number of children:

    - two: left subtree, self, right subtree
    - one: the lone child's subtree, then self
    - none: self
    - three or more: the ``NOT_A_BINARY_TREE`` sentinel is yielded instead
      of the node, and its subtree is skipped. Traversal continues with
      the rest of the tree.
    """

    strategy = TraversalStrategy.IN_ORDER

    def traverse(self, root: Node) -> Iterator[Visit]:
        children = root.children

        if len(children) == 2:
            left, right = children
            yield from self.traverse(left)
            yield root
            yield from self.traverse(right)
        elif len(children) == 1:
            yield from self.traverse(children[0])
            yield root
        elif not children:
            yield root
        else:
            logger.warning(
                "In-order traversal skipped a node with %d children (value=%d)",
                len(children), root.value
            )
            yield NOT_A_BINARY_TREE


class StackTraverser(TreeTraverser):
    """Iterative depth-first traversal with an explicit stack.

    Children are pushed left to right, so they are popped right to left:
    among siblings the rightmost subtree is visited first.
    """

    strategy = TraversalStrategy.STACK_DFS

    def traverse(self, root: Node) -> Iterator[Visit]:
        stack: List[Node] = [root]

        while stack:
            current = stack.pop()
            yield current
            stack.extend(current.children)


class QueueTraverser(TreeTraverser):
    """Iterative breadth-first traversal with an explicit queue.

    Visits all nodes at depth N before visiting nodes at depth N+1,
    left to right within a level.
    """

    strategy = TraversalStrategy.QUEUE_BFS

    def traverse(self, root: Node) -> Iterator[Visit]:
        queue: Deque[Node] = deque([root])

        while queue:
            current = queue.popleft()
            yield current
            queue.extend(current.children)


_TRAVERSERS = {
    TraversalStrategy.PRE_ORDER: PreOrderTraverser,
    TraversalStrategy.POST_ORDER: PostOrderTraverser,
    TraversalStrategy.IN_ORDER: InOrderTraverser,
    TraversalStrategy.STACK_DFS: StackTraverser,
    TraversalStrategy.QUEUE_BFS: QueueTraverser,
}


# Factory function for creating traversers by name
def create_traverser(strategy: Union[TraversalStrategy, str]) -> TreeTraverser:
    """Create a traverser instance by strategy.

    Args:
        strategy: ``TraversalStrategy`` member or name (pre, post, in,
            stack, queue and their aliases)

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    return _TRAVERSERS[parse_strategy(strategy)]()
