# utils/__init__.py
# This file is part of Specifications - Reusable Boolean Conditions
#
# Utility module exports

from .logger import (
    LogLevel,
    SpecLogger,
    get_logger,
    set_log_level,
    configure_logging,
    reset_logging,
)

__all__ = [
    "LogLevel",
    "SpecLogger",
    "get_logger",
    "set_log_level",
    "configure_logging",
    "reset_logging",
]
