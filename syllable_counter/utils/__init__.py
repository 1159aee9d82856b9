"""Utility helpers shared across the :mod:`syllable_counter` package."""

from __future__ import annotations

from .observability import (
    StructuredLoggerAdapter,
    create_counter,
    create_histogram,
    get_logger,
)

__all__ = [
    "StructuredLoggerAdapter",
    "create_counter",
    "create_histogram",
    "get_logger",
]
