"""
Utility helpers shared across ErrorMap packages.
"""

from .logging import configure_logging, get_logger, time_call

__all__ = ["configure_logging", "get_logger", "time_call"]
