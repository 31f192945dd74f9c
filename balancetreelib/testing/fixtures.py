"""Test fixtures for BalanceTreeLib consumers.

These helpers check structural invariants of a tree from the outside,
using only the public node fields.
"""

from typing import Any, List, Optional

from ..core.node import Node
from ..tree import Tree


class TreeInvariantChecker:
    """Public test fixture for verifying the search-tree invariant.

    Example:
        tree = Tree(values)
        tree.delete(some_value)
        TreeInvariantChecker(tree).assert_valid()
    """

    def __init__(self, tree: Tree):
        self._tree = tree

    def violations(self) -> List[str]:
        """Return a message for every node that breaks the ordering."""
        problems: List[str] = []
        self._check(self._tree.root, None, None, problems)
        return problems

    def _check(self, node: Optional[Node], low: Any, high: Any,
               problems: List[str]) -> None:
        if node is None:
            return
        if low is not None and not low < node.data:
            problems.append(f"{node.data!r} is not greater than ancestor {low!r}")
        if high is not None and not node.data < high:
            problems.append(f"{node.data!r} is not less than ancestor {high!r}")
        self._check(node.left, low, node.data, problems)
        self._check(node.right, node.data, high, problems)

    def is_search_tree(self) -> bool:
        return not self.violations()

    def assert_valid(self) -> None:
        """Raise AssertionError listing every violation found."""
        problems = self.violations()
        if problems:
            raise AssertionError("Search-tree invariant broken: " + "; ".join(problems))

    def node_count(self) -> int:
        return sum(1 for _ in self._tree.traverse("pre"))
