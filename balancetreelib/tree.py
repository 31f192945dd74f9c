"""The binary search tree at the heart of BalanceTreeLib.

The Tree owns its root node and implements every structural algorithm:
building a height-balanced tree from a sorted sequence, recursive insert
and delete, lookup, the four traversals, height/depth queries, the balance
check and full rebalancing by rebuild.

Balance is never restored implicitly. Inserts and deletes may leave the
tree lopsided until ``rebalance()`` is called.
"""

import logging
from itertools import groupby
from typing import Any, Callable, Iterable, Iterator, List, Optional, Sequence, Union

from .config import TraversalOrder
from .core.adapter import BinaryTreeAdapter, _value_of
from .core.node import Node
from .core.traverser import create_traverser
from .errors import EmptyTreeError, ValueNotFoundError

logger = logging.getLogger(__name__)

Visitor = Callable[[Node], Any]

# Distinguishes "no argument" (measure the root) from an explicit None
_ROOT = object()


class Tree:
    """A binary search tree over totally-ordered values.

    Values are deduplicated and sorted at construction and the tree is
    built balanced in one pass. For every node, values in the left subtree
    compare less and values in the right subtree compare greater.

    Example:
        >>> tree = Tree([5, 3, 8, 1, 4, 7, 9])
        >>> tree.inorder()
        [1, 3, 4, 5, 7, 8, 9]
        >>> tree.is_balanced()
        True
    """

    def __init__(self, values: Iterable[Any] = ()):
        """Build a tree from an arbitrary collection.

        Args:
            values: Any iterable of mutually comparable values; duplicates
                are dropped by equality, so values need not be hashable
        """
        unique = [value for value, _ in groupby(sorted(values))]
        self.adapter = BinaryTreeAdapter(self)
        self.root: Optional[Node] = self.build(unique)
        logger.debug("Built tree from %d unique values", len(unique))

    @classmethod
    def build(cls, values: Sequence[Any]) -> Optional[Node]:
        """Build a balanced subtree from an already sorted, unique sequence.

        The middle element (``len // 2``) becomes the subtree root, so for
        an even count the left half gets one fewer element than the right.

        Args:
            values: Sorted sequence without duplicates

        Returns:
            Root node of the new subtree, or None for an empty sequence
        """
        if not values:
            return None

        mid = len(values) // 2
        node = Node(values[mid])
        node.left = cls.build(values[:mid])
        node.right = cls.build(values[mid + 1:])
        return node

    # Mutation

    def insert(self, value: Any) -> None:
        """Insert a value as a new leaf.

        Inserting a value that is already present leaves the tree unchanged.
        Does not rebalance.
        """
        self.root = self._insert(self.root, value)

    def _insert(self, node: Optional[Node], value: Any) -> Node:
        if node is None:
            return Node(value)
        if value == node.data:
            logger.debug("Ignoring duplicate insert of %r", value)
            return node

        if value < node.data:
            node.left = self._insert(node.left, value)
        else:
            node.right = self._insert(node.right, value)
        return node

    def delete(self, value: Any) -> None:
        """Remove a value from the tree.

        A node with two children takes over the value of its in-order
        successor, which is then deleted from the right subtree. Deleting a
        missing value is a no-op. Does not rebalance.
        """
        self.root = self._delete(self.root, value)

    def _delete(self, node: Optional[Node], value: Any) -> Optional[Node]:
        if node is None:
            logger.debug("Delete of missing value %r ignored", value)
            return None

        if value < node.data:
            node.left = self._delete(node.left, value)
        elif value > node.data:
            node.right = self._delete(node.right, value)
        else:
            if node.left is None:
                return node.right
            if node.right is None:
                return node.left

            successor = self._leftmost(node.right)
            node.data = successor.data
            node.right = self._delete(node.right, successor.data)

        return node

    @staticmethod
    def _leftmost(node: Node) -> Node:
        current = node
        while current.left is not None:
            current = current.left
        return current

    @staticmethod
    def _rightmost(node: Node) -> Node:
        current = node
        while current.right is not None:
            current = current.right
        return current

    def rebalance(self) -> None:
        """Rebuild the whole tree from its sorted values.

        Every existing node is discarded and a fresh balanced tree takes
        the root's place.
        """
        before = self.height()
        values = self.inorder()
        self.root = self.build(values)
        logger.debug("Rebalanced %d nodes, height %d -> %d",
                     len(values), before, self.height())

    # Lookup

    def find(self, value: Any) -> Optional[Node]:
        """Return the node holding ``value``, or None if it is absent."""
        return self._find(self.root, value)

    def _find(self, node: Optional[Node], value: Any) -> Optional[Node]:
        if node is None:
            return None
        if value == node.data:
            return node
        if value < node.data:
            return self._find(node.left, value)
        return self._find(node.right, value)

    def min(self) -> Any:
        """Return the smallest value.

        Raises:
            EmptyTreeError: If the tree has no nodes
        """
        if self.root is None:
            raise EmptyTreeError("min() of an empty tree")
        return self._leftmost(self.root).data

    def max(self) -> Any:
        """Return the largest value.

        Raises:
            EmptyTreeError: If the tree has no nodes
        """
        if self.root is None:
            raise EmptyTreeError("max() of an empty tree")
        return self._rightmost(self.root).data

    def is_empty(self) -> bool:
        return self.root is None

    # Traversal

    def traverse(self,
                 order: Union[TraversalOrder, str] = TraversalOrder.INORDER,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Node]:
        """Return a lazy iterator over nodes in the given order.

        The order is resolved immediately, so an unknown name fails here
        rather than on the first ``next()``.

        Args:
            order: TraversalOrder or alias ("level", "pre", "in", "post", ...)
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Returns:
            Iterator of nodes in traversal order

        Raises:
            ValueError: If the order name is not recognized
        """
        traverser = create_traverser(order, self.adapter)
        walk = traverser.traverse(self.root, max_depth, min_depth)
        return (node for node, _ in walk)

    def _values(self, order: TraversalOrder) -> List[Any]:
        return [node.data for node in self.traverse(order)]

    def _visit(self, order: TraversalOrder, visitor: Visitor) -> None:
        for node in self.traverse(order):
            visitor(node)

    def level_order(self) -> List[Any]:
        """Return values breadth-first, left to right within each level."""
        return self._values(TraversalOrder.LEVEL_ORDER)

    def preorder(self) -> List[Any]:
        """Return values node-left-right."""
        return self._values(TraversalOrder.PREORDER)

    def inorder(self) -> List[Any]:
        """Return values left-node-right, i.e. in ascending order."""
        return self._values(TraversalOrder.INORDER)

    def postorder(self) -> List[Any]:
        """Return values left-right-node."""
        return self._values(TraversalOrder.POSTORDER)

    def each_level_order(self, visitor: Visitor) -> None:
        """Call ``visitor(node)`` for every node in level order."""
        self._visit(TraversalOrder.LEVEL_ORDER, visitor)

    def each_preorder(self, visitor: Visitor) -> None:
        """Call ``visitor(node)`` for every node in pre-order."""
        self._visit(TraversalOrder.PREORDER, visitor)

    def each_inorder(self, visitor: Visitor) -> None:
        """Call ``visitor(node)`` for every node in in-order."""
        self._visit(TraversalOrder.INORDER, visitor)

    def each_postorder(self, visitor: Visitor) -> None:
        """Call ``visitor(node)`` for every node in post-order."""
        self._visit(TraversalOrder.POSTORDER, visitor)

    # Shape queries

    def height(self, node: Optional[Node] = _ROOT) -> int:
        """Return the height of a subtree in edges.

        An empty subtree has height -1, so a single leaf has height 0.

        Args:
            node: Subtree root; omitted means the tree's root, an explicit
                None means the empty subtree

        Returns:
            Integer >= -1
        """
        if node is _ROOT:
            node = self.root
        if node is None:
            return -1
        return max(self.height(node.left), self.height(node.right)) + 1

    def depth(self, node: Any) -> int:
        """Return the number of edges from the root to a node.

        Args:
            node: A Node of this tree or a bare value present in it

        Returns:
            Integer >= 0

        Raises:
            ValueNotFoundError: If the value is not in the tree
        """
        if self.root is None:
            raise ValueNotFoundError(_value_of(node))
        if node is self.root:
            return 0

        value = _value_of(node)
        current = self.root
        depth = 0

        while value != current.data:
            current = current.left if value < current.data else current.right
            if current is None:
                raise ValueNotFoundError(value)
            depth += 1

        return depth

    def is_balanced(self) -> bool:
        """Check that every node's subtree heights differ by at most one."""
        return self._is_balanced(self.root)

    def _is_balanced(self, node: Optional[Node]) -> bool:
        if node is None:
            return True

        if abs(self.height(node.left) - self.height(node.right)) > 1:
            return False

        return self._is_balanced(node.left) and self._is_balanced(node.right)

    # Container protocol

    def __len__(self) -> int:
        return self.adapter.estimated_size(self.root)

    def __bool__(self) -> bool:
        return self.root is not None

    def __contains__(self, value: Any) -> bool:
        return self.find(value) is not None

    def __iter__(self) -> Iterator[Any]:
        for node in self.traverse(TraversalOrder.INORDER):
            yield node.data

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.inorder()!r})"
