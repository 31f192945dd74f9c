"""High-level API for BalanceTreeLib.

This module provides simple, functional interfaces for common tree
operations. These functions wrap the Tree class for ease of use in simple
cases.
"""

from typing import Any, Dict, Iterable, Iterator, List, Optional, Union

from .config import TraversalOrder
from .core.node import Node
from .core.traverser import create_traverser
from .tree import Tree


def build_tree(values: Iterable[Any]) -> Tree:
    """Build a balanced search tree from any collection of values.

    Example:
        >>> tree = build_tree([3, 1, 2, 3])
        >>> tree.inorder()
        [1, 2, 3]
    """
    return Tree(values)


def traverse_tree(
    tree: Tree,
    order: Union[TraversalOrder, str] = TraversalOrder.LEVEL_ORDER,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
) -> Iterator[Node]:
    """Simple interface for tree traversal.

    Args:
        tree: Tree to walk
        order: Traversal order (level, pre, in, post)
        max_depth: Maximum depth to traverse
        min_depth: Minimum depth before yielding nodes

    Returns:
        Iterator of nodes in traversal order

    Raises:
        ValueError: If the order name is not recognized

    Example:
        >>> tree = build_tree(range(7))
        >>> [node.data for node in traverse_tree(tree, max_depth=1)]
        [3, 1, 5]
    """
    return tree.traverse(order, max_depth=max_depth, min_depth=min_depth)


def collect_values(
    tree: Tree,
    order: Union[TraversalOrder, str] = TraversalOrder.INORDER,
) -> List[Any]:
    """Return the tree's values in the given order."""
    return [node.data for node in tree.traverse(order)]


def get_leaf_values(
    tree: Tree,
    order: Union[TraversalOrder, str] = TraversalOrder.INORDER,
) -> List[Any]:
    """Return the values of all leaf nodes in the given order."""
    return [node.data for node in tree.traverse(order) if node.is_leaf()]


def get_tree_stats(tree: Tree) -> Dict[str, Any]:
    """Get statistics about a tree.

    Args:
        tree: Tree to inspect

    Returns:
        Dictionary with tree statistics

    Example:
        >>> stats = get_tree_stats(build_tree([1, 2, 3]))
        >>> stats['total_nodes'], stats['height'], stats['balanced']
        (3, 1, True)
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'max_depth': 0,
        'depths': {}
    }

    traverser = create_traverser(TraversalOrder.LEVEL_ORDER, tree.adapter)
    for node, depth in traverser.traverse(tree.root):
        stats['total_nodes'] += 1

        if node.is_leaf():
            stats['leaf_nodes'] += 1

        stats['max_depth'] = max(stats['max_depth'], depth)

        if depth not in stats['depths']:
            stats['depths'][depth] = 0
        stats['depths'][depth] += 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    stats['height'] = tree.height()
    stats['balanced'] = tree.is_balanced()
    stats['min'] = tree.min() if tree else None
    stats['max'] = tree.max() if tree else None

    return stats
