"""Console logging setup for hexmap entry points."""

from .formatters import HumanFormatter
from .handlers import ConsoleHandler
from .setup import setup_simple_logging

__all__ = [
    'HumanFormatter',
    'ConsoleHandler',
    'setup_simple_logging'
]
