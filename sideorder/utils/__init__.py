"""Utility modules"""

from sideorder.utils.durations import format_duration, parse_duration
from sideorder.utils.logging import setup_logging

__all__ = [
    "format_duration",
    "parse_duration",
    "setup_logging",
]
