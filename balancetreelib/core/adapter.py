"""Read-only navigation for BalanceTreeLib trees.

The BinaryTreeAdapter gives traversers and presentation code a way to walk
a tree without touching its structure. Since nodes carry no parent
references, every upward query is answered by a top-down walk from the
root that follows the search-tree ordering.
"""

from typing import TYPE_CHECKING, Any, Iterator, List, Optional

from ..errors import ValueNotFoundError
from .node import Node

if TYPE_CHECKING:
    from ..tree import Tree


def _value_of(target: Any) -> Any:
    """Accept either a Node or a bare value and return the value."""
    return target.data if isinstance(target, Node) else target


class BinaryTreeAdapter:
    """Navigation logic for a binary search tree.

    The adapter never mutates the tree. It holds a reference to the Tree
    rather than to its root, so it stays valid across inserts, deletes and
    rebalances.
    """

    def __init__(self, tree: "Tree"):
        """Initialize adapter for a tree.

        Args:
            tree: The Tree to navigate
        """
        self.tree = tree

    @property
    def root(self) -> Optional[Node]:
        """Current root of the underlying tree."""
        return self.tree.root

    def get_children(self, node: Node) -> Iterator[Node]:
        """Get an iterator of present children, left then right.

        Args:
            node: The parent node

        Returns:
            Iterator yielding child nodes
        """
        return node.children()

    def get_left(self, node: Node) -> Optional[Node]:
        """Return the left child or None."""
        return node.left

    def get_right(self, node: Node) -> Optional[Node]:
        """Return the right child or None."""
        return node.right

    def get_path(self, target: Any) -> List[Node]:
        """Return the nodes from the root down to the node holding a value.

        Args:
            target: A Node or a bare value present in the tree

        Returns:
            List of nodes, root first, target last

        Raises:
            ValueNotFoundError: If the value is not in the tree
        """
        value = _value_of(target)
        path: List[Node] = []
        current = self.root

        while current is not None:
            path.append(current)
            if value == current.data:
                return path
            current = current.left if value < current.data else current.right

        raise ValueNotFoundError(value)

    def get_parent(self, node: Any) -> Optional[Node]:
        """Get the parent of a node.

        Args:
            node: A Node or a bare value present in the tree

        Returns:
            Parent node or None if node is the root

        Raises:
            ValueNotFoundError: If the value is not in the tree
        """
        path = self.get_path(node)
        return path[-2] if len(path) > 1 else None

    def get_depth(self, node: Any) -> int:
        """Calculate the depth of a node where root = 0.

        Raises:
            ValueNotFoundError: If the value is not in the tree
        """
        return len(self.get_path(node)) - 1

    def get_siblings(self, node: Any) -> Iterator[Node]:
        """Get the sibling of a node (a binary node has at most one).

        Args:
            node: A Node or a bare value present in the tree

        Returns:
            Iterator yielding sibling nodes
        """
        parent = self.get_parent(node)
        if parent is None:
            return iter([])  # Root has no siblings

        value = _value_of(node)
        return (child for child in parent.children() if child.data != value)

    def estimated_size(self, node: Optional[Node]) -> int:
        """Count the nodes in the subtree rooted at ``node``.

        Exact rather than estimated; the walk is O(subtree size).
        """
        if node is None:
            return 0
        return 1 + self.estimated_size(node.left) + self.estimated_size(node.right)
