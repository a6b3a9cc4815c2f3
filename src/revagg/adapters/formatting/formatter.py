# src/revagg/adapters/formatting/formatter.py
"""
Revenue Formatter - Number Formatting and Table Layout

This module handles all text formatting for console output: money values
with grouped thousands and two decimals, the product revenue table with its
grand-total footer, and the pagination line.

Files that USE this module:
- revagg.app (renders the page window and total)
- tests.test_formatter (unit tests)

Files that this module USES:
- revagg.domain.models (PageWindow for the table body and navigation)
- revagg.config (settings for the thousands separator)
"""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional

from revagg.config import settings
from revagg.domain.models import PageWindow

_CENTS = Decimal("0.01")


def _group_thousands(digits: str, separator: str) -> str:
    """
    Insert separator every three digits from the right.

    Args:
        digits: Unsigned integer digits, e.g. '1234567'
        separator: Group separator

    Returns:
        Grouped string, e.g. '1,234,567'
    """
    groups = []
    while len(digits) > 3:
        groups.insert(0, digits[-3:])
        digits = digits[:-3]
    groups.insert(0, digits)
    return separator.join(groups)


def format_number(number: float, separator: Optional[str] = None) -> str:
    """
    Format a number with grouped thousands and exactly two decimals.

    Rounding is half-up on the exact value of the float, so 2.345 gives
    '2.35' only if the stored double is at or above the midpoint.

    Args:
        number: Value to format
        separator: Thousands separator (defaults to settings.thousands_separator)

    Returns:
        Formatted string like '1,234,567.50' or '0.00'
    """
    if separator is None:
        separator = settings.thousands_separator

    value = Decimal(number).quantize(_CENTS, rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    integer_part, decimal_part = f"{abs(value):f}".split(".")
    return f"{sign}{_group_thousands(integer_part, separator)}.{decimal_part or '00'}"


def format_currency(number: float, separator: Optional[str] = None) -> str:
    """Format a money value as '$1,234.50'."""
    return f"${format_number(number, separator)}"


def pagination_line(window: PageWindow) -> str:
    """
    Format the navigation bar for a page window.

    Returns:
        Line like '« Prev  1 [2] 3 4  Next »'; empty when there is nothing to navigate
    """
    parts: List[str] = []
    if window.has_prev:
        parts.append("« Prev ")
    for page in window.page_numbers:
        parts.append(f"[{page}]" if page == window.current_page else str(page))
    if window.has_next:
        parts.append(" Next »")
    return " ".join(parts)


def render_table(window: PageWindow, grand_total: float, separator: Optional[str] = None) -> str:
    """
    Render the visible products and the grand total as a plain-text table.

    Args:
        window: Visible page window
        grand_total: Total over the filtered view (not just this page)
        separator: Thousands separator (defaults to settings.thousands_separator)

    Returns:
        Multi-line table followed by the pagination line, if any
    """
    header = ("Product Name", "Total Revenue")
    rows = [(entry.name, format_currency(entry.revenue, separator)) for entry in window.items]
    footer = ("Total", format_currency(grand_total, separator))

    name_width = max(len(r[0]) for r in rows + [header, footer])
    value_width = max(len(r[1]) for r in rows + [header, footer])
    rule = "-" * (name_width + value_width + 3)

    def line(name: str, value: str) -> str:
        return f"{name:<{name_width}} | {value:>{value_width}}"

    lines = [line(*header), rule]
    if rows:
        lines.extend(line(*r) for r in rows)
    else:
        lines.append("(no products)")
    lines.append(rule)
    lines.append(line(*footer))

    nav = pagination_line(window)
    if nav:
        lines.append("")
        lines.append(nav)
    return "\n".join(lines)
