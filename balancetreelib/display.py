"""Sideways pretty-printer for BalanceTreeLib trees.

The right subtree is drawn above its parent and the left subtree below,
so reading the output top to bottom lists values in descending order.
Only the read-only node fields (``data``, ``left``, ``right``) are used.
"""

import sys
from typing import List, Optional, TextIO

from .config import RenderConfig
from .core.node import Node
from .tree import Tree


def pretty_lines(tree: Tree, config: Optional[RenderConfig] = None) -> List[str]:
    """Render a tree as a list of lines (empty list for an empty tree)."""
    config = config or RenderConfig()
    lines: List[str] = []
    if tree.root is not None:
        _render(tree.root, "", True, config, lines)
    return lines


def _render(node: Node, prefix: str, is_left: bool,
            config: RenderConfig, lines: List[str]) -> None:
    if node.right is not None:
        _render(node.right, prefix + (config.vertical if is_left else config.blank),
                False, config, lines)

    branch = config.left_branch if is_left else config.right_branch
    lines.append(f"{prefix}{branch}{config.formatter(node.data)}")

    if node.left is not None:
        _render(node.left, prefix + (config.blank if is_left else config.vertical),
                True, config, lines)


def pretty_format(tree: Tree, config: Optional[RenderConfig] = None) -> str:
    """Render a tree as a single newline-joined string."""
    return "\n".join(pretty_lines(tree, config))


def pretty_print(tree: Tree, config: Optional[RenderConfig] = None,
                 file: Optional[TextIO] = None) -> None:
    """Write the rendered tree to ``file`` (stdout by default)."""
    out = file or sys.stdout
    for line in pretty_lines(tree, config):
        print(line, file=out)
