"""Core abstractions for BalanceTreeLib.

This package contains the node entity, the read-only navigation adapter
and the traversal strategies the Tree is built on.
"""

from .node import Node
from .adapter import BinaryTreeAdapter
from .traverser import (
    TreeTraverser,
    LevelOrderTraverser,
    PreOrderTraverser,
    InOrderTraverser,
    PostOrderTraverser,
    create_traverser,
)

__all__ = [
    "Node",
    "BinaryTreeAdapter",
    "TreeTraverser",
    "LevelOrderTraverser",
    "PreOrderTraverser",
    "InOrderTraverser",
    "PostOrderTraverser",
    "create_traverser",
]
