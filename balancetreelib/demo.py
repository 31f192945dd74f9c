#!/usr/bin/env python
"""
Random-sample demo for BalanceTreeLib.

Builds a tree from random numbers, prints it with its traversals, pushes
it out of balance with values above the sampled range, then rebalances.

Usage:
    balancetree-demo                  # 15 values in 1..100
    balancetree-demo --seed 42 -v     # Reproducible run with debug logging
    balancetree-demo --ascii          # ASCII-only diagram
"""

import argparse
import logging
import random
import sys
from typing import List, Optional, TextIO

from .config import DemoConfig, RenderConfig, TraversalOrder
from .display import pretty_print
from .errors import ConfigError
from .log import setup_logging
from .tree import Tree

logger = logging.getLogger(__name__)

ORDER_LABELS = {
    TraversalOrder.LEVEL_ORDER: "Level order traversal",
    TraversalOrder.PREORDER: "Preorder traversal",
    TraversalOrder.INORDER: "Inorder traversal",
    TraversalOrder.POSTORDER: "Postorder traversal",
}


def sample_values(config: DemoConfig, rng: random.Random) -> List[int]:
    """Draw ``sample_size`` values (duplicates allowed) from the configured range."""
    return [rng.randint(config.min_value, config.max_value)
            for _ in range(config.sample_size)]


def print_traversals(tree: Tree, config: DemoConfig, out: TextIO) -> None:
    for order in config.orders:
        values = [node.data for node in tree.traverse(order)]
        print(f"{ORDER_LABELS[order]}: {values}", file=out)


def run_demo(config: DemoConfig,
             render: Optional[RenderConfig] = None,
             out: Optional[TextIO] = None) -> Tree:
    """Run the full build / unbalance / rebalance walkthrough.

    Args:
        config: Demo settings (validated before anything is printed)
        render: Diagram settings
        out: Stream to write to (stdout by default)

    Returns:
        The final, rebalanced tree

    Raises:
        ConfigError: If either config fails validation
    """
    config.check()
    render = (render or RenderConfig()).check()
    out = out or sys.stdout
    rng = random.Random(config.seed)

    print("Creating a binary search tree from random numbers...", file=out)
    values = sample_values(config, rng)
    logger.info("Sampled %d values: %s", len(values), values)
    tree = Tree(values)

    print("\nInitial tree:", file=out)
    pretty_print(tree, render, out)
    print(f"\nIs the tree balanced? {tree.is_balanced()}", file=out)
    print(file=out)
    print_traversals(tree, config, out)

    extras = range(config.max_value + 1, config.max_value + 1 + config.extra_values)
    print(f"\nAdding numbers > {config.max_value} to unbalance the tree...", file=out)
    for value in extras:
        tree.insert(value)

    print("\nUnbalanced tree:", file=out)
    pretty_print(tree, render, out)
    print(f"\nIs the tree balanced? {tree.is_balanced()}", file=out)

    print("\nRebalancing tree...", file=out)
    tree.rebalance()

    print("\nRebalanced tree:", file=out)
    pretty_print(tree, render, out)
    print(f"\nIs the tree balanced? {tree.is_balanced()}", file=out)
    print(file=out)
    print_traversals(tree, config, out)

    return tree


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="balancetree-demo",
        description="Build, unbalance and rebalance a random binary search tree",
    )
    parser.add_argument("--size", type=int, default=15,
                        help="Number of random values to draw (default: 15)")
    parser.add_argument("--min", dest="min_value", type=int, default=1,
                        help="Smallest random value (default: 1)")
    parser.add_argument("--max", dest="max_value", type=int, default=100,
                        help="Largest random value (default: 100)")
    parser.add_argument("--extra", type=int, default=5,
                        help="Values above --max inserted to unbalance (default: 5)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for reproducible runs")
    parser.add_argument("--ascii", action="store_true",
                        help="Draw the tree with ASCII characters only")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose)

    config = DemoConfig(
        sample_size=args.size,
        min_value=args.min_value,
        max_value=args.max_value,
        extra_values=args.extra,
        seed=args.seed,
    )
    render = RenderConfig.ascii() if args.ascii else RenderConfig()

    try:
        run_demo(config, render)
    except ConfigError as e:
        print(f"Invalid options: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
