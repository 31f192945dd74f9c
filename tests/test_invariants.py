"""Randomized invariant tests.

Each run applies random inserts and deletes to a tree and to a plain set
model, checking the search-tree invariant and contents after every step.
"""

import math
import random
import subprocess
import sys
from pathlib import Path

import pytest

from balancetreelib import Node, Tree
from balancetreelib.testing import TreeInvariantChecker


def _random_history(seed, steps, low=0, high=60):
    rng = random.Random(seed)
    initial = [rng.randint(low, high) for _ in range(rng.randint(0, 25))]
    ops = [(rng.choice(("insert", "delete")), rng.randint(low, high))
           for _ in range(steps)]
    return initial, ops


@pytest.mark.parametrize("seed", range(25))
def test_construction_properties(seed):
    rng = random.Random(seed)
    values = [rng.randint(-50, 50) for _ in range(rng.randint(0, 80))]
    tree = Tree(values)
    unique = sorted(set(values))

    assert tree.inorder() == unique
    assert tree.height() <= math.ceil(math.log2(len(unique) + 1)) - 1
    assert tree.is_balanced()
    TreeInvariantChecker(tree).assert_valid()


@pytest.mark.parametrize("seed", range(25))
def test_mutations_preserve_invariant(seed):
    initial, ops = _random_history(seed, steps=80)
    tree = Tree(initial)
    model = set(initial)
    checker = TreeInvariantChecker(tree)

    for op, value in ops:
        if op == "insert":
            tree.insert(value)
            model.add(value)
            assert tree.find(value) is not None
        else:
            tree.delete(value)
            model.discard(value)
            assert tree.find(value) is None

        checker.assert_valid()
        assert tree.inorder() == sorted(model)

    assert checker.node_count() == len(model)


@pytest.mark.parametrize("seed", range(25))
def test_rebalance_after_any_history(seed):
    initial, ops = _random_history(seed, steps=60)
    tree = Tree(initial)
    for op, value in ops:
        getattr(tree, op)(value)

    before = tree.inorder()
    tree.rebalance()

    assert tree.is_balanced()
    assert tree.inorder() == before
    TreeInvariantChecker(tree).assert_valid()


@pytest.mark.slow
def test_large_random_history():
    initial, ops = _random_history(1234, steps=5000, high=2000)
    tree = Tree(initial)
    model = set(initial)
    for i, (op, value) in enumerate(ops):
        getattr(tree, op)(value)
        if op == "insert":
            model.add(value)
        else:
            model.discard(value)
        if i % 500 == 0:
            tree.rebalance()
            assert tree.is_balanced()
    assert tree.inorder() == sorted(model)
    TreeInvariantChecker(tree).assert_valid()


class TestInvariantChecker:

    def test_valid_tree(self, sample_tree):
        checker = TreeInvariantChecker(sample_tree)
        assert checker.is_search_tree()
        assert checker.violations() == []
        assert checker.node_count() == 7

    def test_detects_local_violation(self, sample_tree):
        sample_tree.find(3).data = 100
        checker = TreeInvariantChecker(sample_tree)
        assert not checker.is_search_tree()
        with pytest.raises(AssertionError, match="invariant broken"):
            checker.assert_valid()

    def test_detects_deep_violation(self):
        # 6 sits in the left subtree of 5 while being greater than it
        tree = Tree()
        tree.root = Node(5, left=Node(3, right=Node(6)))
        assert TreeInvariantChecker(tree).violations() == [
            "6 is not less than ancestor 5"
        ]

    def test_assert_valid_raises_under_optimize_flag(self):
        code = (
            "from balancetreelib import Node, Tree\n"
            "from balancetreelib.testing import TreeInvariantChecker\n"
            "tree = Tree()\n"
            "tree.root = Node(5, left=Node(9))\n"
            "TreeInvariantChecker(tree).assert_valid()\n"
        )
        result = subprocess.run([sys.executable, "-O", "-c", code],
                                capture_output=True, text=True,
                                cwd=Path(__file__).parent.parent)
        assert result.returncode != 0
        assert "9 is not less than ancestor 5" in result.stderr

    def test_assert_valid_message(self):
        tree = Tree()
        tree.root = Node(5, left=Node(9))
        with pytest.raises(AssertionError, match="9 is not less than ancestor 5"):
            TreeInvariantChecker(tree).assert_valid()

    def test_empty_tree(self):
        assert TreeInvariantChecker(Tree()).is_search_tree()
