"""Node entity for BalanceTreeLib.

A Node is intentionally kept simple - it holds one value and two owned
child slots. All structural algorithms live on the Tree, and read-only
navigation for consumers is provided by the BinaryTreeAdapter.
"""

from functools import total_ordering
from typing import Any, Iterator, Optional


@total_ordering
class Node:
    """A single node of a binary search tree.

    Each node exclusively owns its ``left`` and ``right`` children. There
    is no parent back-reference; ancestry is always recomputed top-down
    from the root.

    Nodes compare by their ``data`` so that they order the same way the
    values they hold do.
    """

    __slots__ = ("data", "left", "right")

    def __init__(self, data: Any,
                 left: Optional["Node"] = None,
                 right: Optional["Node"] = None):
        """Create a node.

        Args:
            data: The value stored in this node (must be totally ordered)
            left: Optional left child (all values less than ``data``)
            right: Optional right child (all values greater than ``data``)
        """
        self.data = data
        self.left = left
        self.right = right

    def identifier(self) -> str:
        """Return a string identifier for this node.

        Values are unique within a tree, so the value's string form is a
        stable identifier for as long as the node keeps its value.
        """
        return str(self.data)

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return self.left is None and self.right is None

    def children(self) -> Iterator["Node"]:
        """Yield the children that are present, left then right."""
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    def __str__(self) -> str:
        return self.identifier()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(data={self.data!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.data == other.data

    def __lt__(self, other: "Node") -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.data < other.data

    # data is overwritten in place during deletes, so nodes are unhashable
    __hash__ = None
