"""Tree traversal strategies for BalanceTreeLib.

Traversers implement the four classic walks of a binary tree. They work
through a BinaryTreeAdapter and yield nodes lazily, so every traversal is
fresh and restartable.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, Optional, Tuple, Union

from ..config import TraversalOrder
from .adapter import BinaryTreeAdapter
from .node import Node


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies."""

    def __init__(self, adapter: BinaryTreeAdapter):
        """Initialize traverser with an adapter.

        Args:
            adapter: BinaryTreeAdapter for navigating the tree
        """
        self.adapter = adapter

    @abstractmethod
    def traverse(self,
                 root: Optional[Node],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal (None yields nothing)
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        """Check if a node at given depth should be yielded.

        Args:
            depth: Current depth
            min_depth: Minimum depth for yielding
            max_depth: Maximum depth for yielding

        Returns:
            True if node should be yielded
        """
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        """Check if children of a node at given depth should be explored.

        Args:
            depth: Current depth
            max_depth: Maximum depth limit

        Returns:
            True if children should be explored
        """
        if max_depth is None:
            return True
        return depth < max_depth


class LevelOrderTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal.

    Uses a FIFO queue seeded with the root; each dequeued node enqueues
    its left then right child.
    """

    def traverse(self,
                 root: Optional[Node],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        if root is None:
            return

        queue: Deque[Tuple[Node, int]] = deque([(root, 0)])

        while queue:
            node, depth = queue.popleft()

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                for child in self.adapter.get_children(node):
                    queue.append((child, depth + 1))


class PreOrderTraverser(TreeTraverser):
    """Depth-first pre-order: node, then left subtree, then right subtree."""

    def traverse(self,
                 root: Optional[Node],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:

        def _traverse_recursive(node: Optional[Node], depth: int) -> Iterator[Tuple[Node, int]]:
            if node is None:
                return

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                yield from _traverse_recursive(self.adapter.get_left(node), depth + 1)
                yield from _traverse_recursive(self.adapter.get_right(node), depth + 1)

        yield from _traverse_recursive(root, 0)


class InOrderTraverser(TreeTraverser):
    """Depth-first in-order: left subtree, node, right subtree.

    On a search tree this yields values in ascending order.
    """

    def traverse(self,
                 root: Optional[Node],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:

        def _traverse_recursive(node: Optional[Node], depth: int) -> Iterator[Tuple[Node, int]]:
            if node is None:
                return

            explore = self._should_explore(depth, max_depth)
            if explore:
                yield from _traverse_recursive(self.adapter.get_left(node), depth + 1)

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if explore:
                yield from _traverse_recursive(self.adapter.get_right(node), depth + 1)

        yield from _traverse_recursive(root, 0)


class PostOrderTraverser(TreeTraverser):
    """Depth-first post-order: left subtree, right subtree, then node.

    Good for aggregations that need both subtrees first (like heights).
    """

    def traverse(self,
                 root: Optional[Node],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:

        def _traverse_recursive(node: Optional[Node], depth: int) -> Iterator[Tuple[Node, int]]:
            if node is None:
                return

            if self._should_explore(depth, max_depth):
                yield from _traverse_recursive(self.adapter.get_left(node), depth + 1)
                yield from _traverse_recursive(self.adapter.get_right(node), depth + 1)

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

        yield from _traverse_recursive(root, 0)


_TRAVERSERS = {
    TraversalOrder.LEVEL_ORDER: LevelOrderTraverser,
    TraversalOrder.PREORDER: PreOrderTraverser,
    TraversalOrder.INORDER: InOrderTraverser,
    TraversalOrder.POSTORDER: PostOrderTraverser,
}


def create_traverser(order: Union[TraversalOrder, str],
                     adapter: BinaryTreeAdapter) -> TreeTraverser:
    """Create a traverser instance by order.

    Args:
        order: TraversalOrder or one of its names (level, bfs, pre, dfs_pre,
            in, inorder, post, dfs_post, ...)
        adapter: BinaryTreeAdapter for the tree

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If the order name is not recognized
    """
    return _TRAVERSERS[TraversalOrder.parse(order)](adapter)
