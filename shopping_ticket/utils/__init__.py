"""Utility modules."""

from .logger_setup import get_logger, LoggerManager
from .money import format_money
from .text_align import Alignment, append_formatted, format_cell

__all__ = [
    # Logging utilities
    "get_logger",
    "LoggerManager",
    # Currency
    "format_money",
    # Cell alignment
    "Alignment",
    "append_formatted",
    "format_cell",
]
