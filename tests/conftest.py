"""Shared pytest configuration and fixtures for BalanceTreeLib tests."""

import pytest

from balancetreelib import Tree


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: long-running randomized stress tests")


@pytest.fixture
def sample_tree():
    """Tree used throughout the suite.

    Structure:
              5
            /   \\
           3     8
          / \\   / \\
         1   4 7   9
    """
    return Tree([5, 3, 8, 1, 4, 7, 9])


@pytest.fixture
def seven_tree():
    """Tree over range(7): root 3, children 1 and 5, leaves 0, 2, 4, 6."""
    return Tree(range(7))
