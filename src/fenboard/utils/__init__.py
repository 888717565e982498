"""Utility exports for the fenboard package."""

from .logger import funclogger, get_logger, set_level
from .shorten_text import shorten_text

__all__ = [
    "funclogger",
    "get_logger",
    "set_level",
    "shorten_text",
]
