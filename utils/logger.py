# utils/logger.py
# This file is part of Booltable - A Boolean Truth Table Generator
#
# Logging utility for truth table generation with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional, Sequence, TextIO


class LogLevel(Enum):
    """Log levels for truth table generation."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class BoolTableLogger:
    """Centralized logger for truth table generation with structured output."""

    def __init__(self, name: str = "booltable", level: LogLevel = LogLevel.INFO):
        """Initialize the logger.

        Args:
            name: Logger name
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)
        self.attach_console()

        # Prevent propagation to root logger
        self.logger.propagate = False

    def attach_console(self, stream: Optional[TextIO] = None):
        """Replace the console handler with one writing to ``stream``.

        Args:
            stream: Target stream; the current ``sys.stdout`` when omitted
        """
        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout if stream is None else stream)
        console_handler.setLevel(self.logger.level)
        console_handler.setFormatter(BoolTableFormatter())

        self.logger.addHandler(console_handler)

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    # Core logging methods
    def debug(self, message: str, *args, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args, **kwargs):
        """Log info message (results and progress)."""
        self.logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, *args, **kwargs)

    def error(self, message: str, *args, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, *args, **kwargs)

    # Specialized methods for evaluation events
    def expression_received(self, text: str):
        """Log the start of a new evaluation session."""
        self.debug("=== Evaluating expression: %r ===", text)

    def symbols_collected(self, symbols: Sequence[str], width: int):
        """Log the collected symbols and resulting row count."""
        self.debug("Symbols %s -> %d assignment rows", list(symbols), width)

    # Nodes are passed through unrendered; %s only formats them at DEBUG
    def column_computed(self, node, column: str):
        """Log a freshly computed sub-expression column."""
        self.debug("    column %s = %s", node, column)

    def memo_hit(self, node):
        """Log reuse of an already computed column."""
        self.debug("    memo hit for %s", node)

    def result_ready(self, node, column: str):
        """Log the final result column."""
        self.debug("Result column for %s: %s", node, column)


class BoolTableFormatter(logging.Formatter):
    """Custom formatter with clean output for results."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[BoolTableLogger] = None


def get_logger(name: str = "booltable") -> BoolTableLogger:
    """Get or create the global logger instance.

    Args:
        name: Logger name (default: "booltable")

    Returns:
        BoolTableLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = BoolTableLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(debug: bool = False):
    """Configure logging based on command line flags.

    Truth tables are reported at INFO, so INFO is the quietest level.

    Args:
        debug: Enable debug output
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    else:
        set_log_level(LogLevel.INFO)
