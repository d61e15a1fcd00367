# src/goldwatch/adapters/formatting/__init__.py
"""
Formatting Adapters - Display Strings

This package contains formatting helpers for the ticker display.
"""

from goldwatch.adapters.formatting.formatter import (
    PresentationUpdate,
    format_change,
    format_price,
    format_timestamp,
    render,
)

__all__ = [
    "PresentationUpdate",
    "format_change",
    "format_price",
    "format_timestamp",
    "render",
]
