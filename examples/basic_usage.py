#!/usr/bin/env python3
"""
Basic BalanceTreeLib usage.

This example demonstrates:
- Building a tree from unsorted values with duplicates
- The four traversals, as value lists and with a visitor
- Unbalancing with inserts and restoring balance on demand
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from balancetreelib import Tree, get_tree_stats, pretty_print


def main():
    tree = Tree([5, 3, 8, 1, 4, 7, 9, 3, 8])
    pretty_print(tree)

    print(f"\nLevel order: {tree.level_order()}")
    print(f"Preorder:    {tree.preorder()}")
    print(f"Inorder:     {tree.inorder()}")
    print(f"Postorder:   {tree.postorder()}")

    print("\nDepth of each node (inorder):")
    tree.each_inorder(lambda node: print(f"  {node.data}: depth {tree.depth(node)}"))

    for value in (10, 11, 12):
        tree.insert(value)
    print(f"\nAfter inserting 10, 11, 12 balanced={tree.is_balanced()}")
    pretty_print(tree)

    tree.rebalance()
    print(f"\nAfter rebalance balanced={tree.is_balanced()}")
    pretty_print(tree)

    stats = get_tree_stats(tree)
    print(f"\n{stats['total_nodes']} nodes, height {stats['height']}, "
          f"{stats['leaf_nodes']} leaves")


if __name__ == "__main__":
    main()
