"""Configuration system for BalanceTreeLib.

This module defines the traversal orders the library understands and the
settings used by the presentation layer (pretty-printer and demo driver).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Optional, Tuple, Union

from .errors import ConfigError


class TraversalOrder(Enum):
    """Order in which a traversal visits nodes."""
    LEVEL_ORDER = "level"   # Breadth-first, level by level
    PREORDER = "pre"        # Node before its subtrees
    INORDER = "in"          # Left subtree, node, right subtree (sorted)
    POSTORDER = "post"      # Subtrees before the node

    @classmethod
    def parse(cls, order: Union["TraversalOrder", str]) -> "TraversalOrder":
        """Parse an order from an enum member or a string alias.

        Args:
            order: TraversalOrder or name such as "level", "bfs", "preorder"

        Returns:
            TraversalOrder enum value

        Raises:
            ValueError: If the name is not recognized
        """
        if isinstance(order, cls):
            return order

        order_lower = order.lower() if isinstance(order, str) else str(order)
        if order_lower in _ORDER_ALIASES:
            return _ORDER_ALIASES[order_lower]

        raise ValueError(
            f"Unknown traversal order: {order}. "
            f"Choose from: {', '.join(_ORDER_ALIASES.keys())}"
        )


_ORDER_ALIASES = {
    'level': TraversalOrder.LEVEL_ORDER,
    'level_order': TraversalOrder.LEVEL_ORDER,
    'bfs': TraversalOrder.LEVEL_ORDER,
    'breadth_first': TraversalOrder.LEVEL_ORDER,
    'pre': TraversalOrder.PREORDER,
    'preorder': TraversalOrder.PREORDER,
    'dfs_pre': TraversalOrder.PREORDER,
    'in': TraversalOrder.INORDER,
    'inorder': TraversalOrder.INORDER,
    'dfs_in': TraversalOrder.INORDER,
    'post': TraversalOrder.POSTORDER,
    'postorder': TraversalOrder.POSTORDER,
    'dfs_post': TraversalOrder.POSTORDER,
}


class _Checked(ABC):
    """Base adding ``check()`` on top of a ``validate()`` error list."""

    @abstractmethod
    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        pass

    def check(self):
        """Raise ConfigError if ``validate()`` reports problems.

        Returns:
            self, so calls can be chained
        """
        errors = self.validate()
        if errors:
            raise ConfigError(errors)
        return self


@dataclass
class RenderConfig(_Checked):
    """Glyphs and formatting used by the sideways tree printer."""

    left_branch: str = "└── "    # Connector for a left child (drawn below)
    right_branch: str = "┌── "   # Connector for a right child (drawn above)
    vertical: str = "│   "       # Continuation of an open branch
    blank: str = "    "          # Padding where no branch continues
    formatter: Callable[[Any], str] = str

    @classmethod
    def ascii(cls) -> "RenderConfig":
        """Create a config that only uses ASCII characters."""
        return cls(left_branch="`-- ", right_branch=",-- ", vertical="|   ", blank="    ")

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        widths = {len(self.left_branch), len(self.right_branch),
                  len(self.vertical), len(self.blank)}
        if len(widths) != 1:
            errors.append("branch glyphs must all have the same width")

        if self.blank.strip():
            errors.append("blank must contain only whitespace")

        if not callable(self.formatter):
            errors.append("formatter must be callable")

        return errors


@dataclass
class DemoConfig(_Checked):
    """Settings for the random-sample demo driver."""

    sample_size: int = 15             # Random values drawn for the initial tree
    min_value: int = 1                # Inclusive lower bound of random values
    max_value: int = 100              # Inclusive upper bound of random values
    extra_values: int = 5             # Values above max_value inserted to unbalance
    seed: Optional[int] = None        # Random seed (None = nondeterministic)
    orders: Tuple[TraversalOrder, ...] = field(default_factory=lambda: (
        TraversalOrder.LEVEL_ORDER,
        TraversalOrder.PREORDER,
        TraversalOrder.POSTORDER,
        TraversalOrder.INORDER,
    ))

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.sample_size < 0:
            errors.append("sample_size cannot be negative")

        if self.extra_values < 0:
            errors.append("extra_values cannot be negative")

        if self.max_value < self.min_value:
            errors.append("max_value cannot be less than min_value")

        for order in self.orders:
            if not isinstance(order, TraversalOrder):
                errors.append(f"orders must be TraversalOrder members, got {order!r}")

        return errors
