"""
Logging module for the distribution library.

This module provides JSON-formatted logging functionality for the library.
"""

from dist_lib.logging.logger import (
    JsonFormatter,
    setup_logger,
    get_logger,
    log_phase,
    log_estimate,
)

__all__ = ["JsonFormatter", "setup_logger", "get_logger", "log_phase", "log_estimate"]
