# -*- coding: utf-8 -*-
"""Shared utilities: logging and error sanitizing"""

from .logger import configure_logging, get_logger
from .error_handler import sanitize_error_message, GENERIC_ERROR_MESSAGE

__all__ = [
    "configure_logging",
    "get_logger",
    "sanitize_error_message",
    "GENERIC_ERROR_MESSAGE",
]
