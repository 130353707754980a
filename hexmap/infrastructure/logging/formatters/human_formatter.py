"""Human-readable formatter for console output."""

import logging
from datetime import datetime


class HumanFormatter(logging.Formatter):
    """Format log records for human readability with optional colors.

    Output looks like::

        2024-05-01 12:00:00 INFO     [hexmap.cli] Resolved 12 cells
    """

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[0m',        # Default
        'WARNING': '\033[93m',    # Yellow
        'ERROR': '\033[91m',      # Red
        'CRITICAL': '\033[95m',   # Magenta
    }

    RESET = '\033[0m'
    DIM = '\033[2m'

    def __init__(self, use_colors: bool = True, show_context: bool = False):
        """Initialize formatter.

        Args:
            use_colors: Whether to use ANSI colors
            show_context: Whether to append module:line of the call site
        """
        super().__init__()
        self.use_colors = use_colors
        self.show_context = show_context

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S')

        if self.use_colors:
            level_color = self.COLORS.get(record.levelname, '')
            reset = self.RESET
            dim = self.DIM
        else:
            level_color = reset = dim = ''

        level = f"{level_color}{record.levelname:8}{reset}"
        logger_name = self._shorten_logger_name(record.name)

        parts = [
            f"{dim}{timestamp}{reset}",
            level,
            f"{dim}[{logger_name}]{reset}",
            record.getMessage()
        ]
        if self.show_context:
            parts.append(f"{dim}({record.module}:{record.lineno}){reset}")

        output = ' '.join(parts)

        if record.exc_info:
            tb = self.formatException(record.exc_info)
            if self.use_colors:
                tb = '\n'.join(f"  {level_color}{line}{reset}" for line in tb.splitlines())
            output += f"\n{tb}"

        return output

    def _shorten_logger_name(self, name: str, max_length: int = 20) -> str:
        """Shorten logger name for display.

        Keeps the last dotted component and abbreviates the rest to
        their first letter, e.g. ``hexmap.grid_systems.hexagonal_grid``
        becomes ``h.g.hexagonal_grid``.
        """
        if len(name) <= max_length:
            return name

        components = name.split('.')
        if len(components) == 1:
            return name[:max_length - 3] + '...'

        return '.'.join([c[0] for c in components[:-1]] + [components[-1]])
