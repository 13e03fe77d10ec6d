"""Structured logging primitives for grman."""

from .events import log_event, setup_logging
from .formatter import StructuredTextFormatter

__all__ = [
    "StructuredTextFormatter",
    "log_event",
    "setup_logging",
]
