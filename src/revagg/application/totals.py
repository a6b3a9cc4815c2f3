# src/revagg/application/totals.py
"""
Totals Calculator - Grand Total over the Filtered View

Files that USE this module:
- revagg.application.view_session (grand_total)
- tests.test_totals (unit tests)

Files that this module USES:
- revagg.domain.models (RevenueEntry)
"""
from __future__ import annotations

from typing import Iterable

from revagg.domain.models import RevenueEntry


def total(view: Iterable[RevenueEntry]) -> float:
    """
    Sum revenue over every entry of the filtered view.

    Pass the whole ordered view, not a page window: the total follows the
    search filter and ignores pagination.
    """
    return sum((entry.revenue for entry in view), 0.0)
