"""Testing utilities for BalanceTreeLib consumers."""

from .fixtures import TreeInvariantChecker

__all__ = ['TreeInvariantChecker']
