"""Tests for the random-sample demo driver and logging setup."""

import io
import logging
import random

import pytest

from balancetreelib import ConfigError, DemoConfig, RenderConfig
from balancetreelib.demo import build_parser, main, run_demo, sample_values
from balancetreelib.log import get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_run_demo_rebalances():
    out = io.StringIO()
    tree = run_demo(DemoConfig(seed=42), out=out)
    text = out.getvalue()

    assert tree.is_balanced()
    for value in range(101, 106):
        assert value in tree
    assert "Is the tree balanced? False" in text
    assert text.rstrip().endswith(f"Inorder traversal: {tree.inorder()}")
    assert text.count("Is the tree balanced? True") == 2


def test_run_demo_is_reproducible():
    first, second = io.StringIO(), io.StringIO()
    run_demo(DemoConfig(seed=7), out=first)
    run_demo(DemoConfig(seed=7), out=second)
    assert first.getvalue() == second.getvalue()


def test_sample_values_in_range():
    config = DemoConfig(sample_size=50, min_value=3, max_value=9)
    values = sample_values(config, random.Random(0))
    assert len(values) == 50
    assert all(3 <= v <= 9 for v in values)


def test_run_demo_empty_sample():
    out = io.StringIO()
    tree = run_demo(DemoConfig(sample_size=0, extra_values=3, seed=1), out=out)
    assert tree.inorder() == [101, 102, 103]
    assert tree.is_balanced()


def test_run_demo_validates_config():
    with pytest.raises(ConfigError):
        run_demo(DemoConfig(sample_size=-1), out=io.StringIO())
    with pytest.raises(ConfigError):
        run_demo(DemoConfig(), RenderConfig(vertical="|"), out=io.StringIO())


def test_main(capsys):
    assert main(["--seed", "3", "--size", "6", "--ascii"]) == 0
    out = capsys.readouterr().out
    assert "Creating a binary search tree from random numbers..." in out
    assert "`-- " in out
    assert "└── " not in out


def test_main_rejects_bad_range(capsys):
    assert main(["--min", "10", "--max", "1"]) == 2
    assert "max_value cannot be less than min_value" in capsys.readouterr().err


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert (args.size, args.min_value, args.max_value, args.extra) == (15, 1, 100, 5)
    assert args.seed is None and not args.verbose and not args.ascii


def test_setup_logging_levels():
    logger = setup_logging(level="debug", name="balancetreelib.test")
    assert logger.name == "balancetreelib.test"
    assert logging.getLogger().level == logging.DEBUG

    setup_logging(verbose=False)
    assert logging.getLogger().level == logging.WARNING

    setup_logging(verbose=True, format_style="compact")
    assert logging.getLogger().level == logging.DEBUG

    setup_logging(level=logging.ERROR)
    assert logging.getLogger().level == logging.ERROR


def test_get_logger():
    assert get_logger("balancetreelib.tree") is logging.getLogger("balancetreelib.tree")
