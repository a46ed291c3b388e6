# utils/logger.py
# This file is part of Specifications - Reusable Boolean Conditions
#
# Logging utility with configurable levels

"""Console logging for programs built on the specification packages.

Library modules only create ``logging.getLogger(__name__)`` loggers and emit
records; they never add handlers or change levels. Console output is set up
by the program that owns the process, through ``configure_logging``, which
attaches one handler with ``SpecFormatter`` to the root logger.
"""

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for specification tooling."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class SpecLogger:
    """Runner-facing logger with helpers for formula runs.

    Wraps a standard logger without touching its handlers or propagation;
    output depends on how the process configured logging.
    """

    def __init__(self, name: str = "specifications"):
        """Initialize the logger.

        Args:
            name: Logger name
        """
        self.logger = logging.getLogger(name)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for the formula runner
    def formula_loaded(self, formula: str, spec: str):
        """Log a formula compiled into a specification."""
        self.info(f"Formula: {formula}")
        self.debug(f"Compiled into {spec}")

    def assignment(self, true_names):
        """Log the names assumed to hold."""
        names = ", ".join(sorted(true_names)) if true_names else "(none)"
        self.info(f"True leaves: {names}")


class SpecFormatter(logging.Formatter):
    """Custom formatter with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[SpecLogger] = None

# Console handler installed by configure_logging
_console_handler: Optional[logging.Handler] = None


def get_logger(name: str = "specifications") -> SpecLogger:
    """Get or create the global logger instance.

    Args:
        name: Logger name, used only when the instance is first created

    Returns:
        SpecLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = SpecLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the level of the root logger and of the console handler."""
    logging.getLogger().setLevel(level.value)
    if _console_handler is not None:
        _console_handler.setLevel(level.value)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure console logging based on command line flags.

    Installs a single stdout handler on the root logger, replacing the one
    from a previous call.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    global _console_handler
    reset_logging()

    _console_handler = logging.StreamHandler(sys.stdout)
    _console_handler.setFormatter(SpecFormatter())
    logging.getLogger().addHandler(_console_handler)

    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)


def reset_logging():
    """Remove the console handler installed by configure_logging, if any."""
    global _console_handler
    if _console_handler is not None:
        logging.getLogger().removeHandler(_console_handler)
        _console_handler = None
