"""
Logging configuration for scripts built on BalanceTreeLib.

The library itself only creates module loggers and never installs
handlers. Applications (like the demo driver) call ``setup_logging`` once.

Usage:
    from balancetreelib.log import setup_logging

    logger = setup_logging(verbose=True)  # DEBUG level
"""

import logging
from typing import Optional, Union


def setup_logging(
    level: Optional[Union[str, int]] = None,
    verbose: bool = False,
    name: Optional[str] = None,
    format_style: str = "default",
) -> logging.Logger:
    """
    Configure logging with a consistent format.

    Args:
        level: Logging level as string ("DEBUG", "INFO", etc.) or int.
               Defaults to WARNING unless verbose=True.
        verbose: If True, sets level to DEBUG. Overridden by explicit level.
        name: Logger name. Defaults to root logger.
        format_style: Format style - "default" or "compact".

    Returns:
        Configured logger instance.
    """
    if level is not None:
        if isinstance(level, str):
            log_level = getattr(logging, level.upper(), logging.WARNING)
        else:
            log_level = level
    else:
        log_level = logging.DEBUG if verbose else logging.WARNING

    if format_style == "compact":
        fmt = "%(asctime)s | %(levelname)-8s | %(message)s"
    else:
        fmt = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

    logging.basicConfig(
        level=log_level,
        format=fmt,
        datefmt="%H:%M:%S",
        force=True,
    )

    return logging.getLogger(name)


def get_logger(name: str) -> logging.Logger:
    """Get a named logger. Call setup_logging() first to configure the format."""
    return logging.getLogger(name)
