"""BalanceTreeLib - Binary Search Trees with On-Demand Rebalancing.

BalanceTreeLib builds height-balanced binary search trees from arbitrary
collections, supports insert, delete, lookup and the four classic
traversals, and restores balance by full rebuild when asked to.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from balancetreelib import Tree

    tree = Tree([5, 3, 8, 1, 4, 7, 9])
    tree.insert(10)
    if not tree.is_balanced():
        tree.rebalance()
━━━━━━━━━━━━━━━━━━━━━━━━━━

Inserts and deletes never rebalance on their own.
"""

__version__ = "0.1.0"

from .core.node import Node
from .core.adapter import BinaryTreeAdapter
from .core.traverser import (
    TreeTraverser,
    LevelOrderTraverser,
    PreOrderTraverser,
    InOrderTraverser,
    PostOrderTraverser,
    create_traverser,
)
from .tree import Tree
from .config import TraversalOrder, RenderConfig, DemoConfig
from .errors import (
    BalanceTreeError,
    ValueNotFoundError,
    EmptyTreeError,
    ConfigError,
)
from .api import (
    build_tree,
    traverse_tree,
    collect_values,
    get_leaf_values,
    get_tree_stats,
)
from .display import pretty_lines, pretty_format, pretty_print

__all__ = [
    "__version__",
    # Core
    "Node",
    "BinaryTreeAdapter",
    "TreeTraverser",
    "LevelOrderTraverser",
    "PreOrderTraverser",
    "InOrderTraverser",
    "PostOrderTraverser",
    "create_traverser",
    "Tree",
    # Config
    "TraversalOrder",
    "RenderConfig",
    "DemoConfig",
    # Errors
    "BalanceTreeError",
    "ValueNotFoundError",
    "EmptyTreeError",
    "ConfigError",
    # API
    "build_tree",
    "traverse_tree",
    "collect_values",
    "get_leaf_values",
    "get_tree_stats",
    "pretty_lines",
    "pretty_format",
    "pretty_print",
]
