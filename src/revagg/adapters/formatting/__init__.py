# src/revagg/adapters/formatting/__init__.py
"""
Formatting Adapters - Console Output Formatting

This package contains number and table formatting for console output.
"""

from revagg.adapters.formatting.formatter import (
    format_currency,
    format_number,
    pagination_line,
    render_table,
)

__all__ = [
    "format_number",
    "format_currency",
    "pagination_line",
    "render_table",
]
