"""Setup and configuration for console logging."""

import logging
from typing import Optional

from .handlers import ConsoleHandler


def setup_simple_logging(log_level: str = 'INFO',
                         use_colors: Optional[bool] = None,
                         show_context: bool = False,
                         stream=None) -> ConsoleHandler:
    """Setup console-only logging on the root logger.

    Args:
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        use_colors: Force color on/off (auto-detect if None)
        show_context: Whether to show call-site information
        stream: Output stream (defaults to stderr)

    Returns:
        The installed handler
    """
    root_logger = logging.getLogger()

    level = getattr(logging, log_level.upper(), logging.INFO)
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = ConsoleHandler(
        stream=stream,
        use_colors=use_colors,
        show_context=show_context
    )
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)

    return console_handler
