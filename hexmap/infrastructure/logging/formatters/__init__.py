"""Log formatters for different output formats."""

from .human_formatter import HumanFormatter

__all__ = ['HumanFormatter']
