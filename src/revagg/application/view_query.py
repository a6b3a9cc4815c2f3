# src/revagg/application/view_query.py
"""
View Query Engine - Filter and Sort the Revenue Ledger

Builds the ordered view shown to the user: a case-insensitive substring
filter on product name followed by an accent- and case-insensitive name
sort.

Files that USE this module:
- revagg.application.view_session (recomputes the view on filter/sort changes)
- tests.test_view_query (unit tests)

Files that this module USES:
- revagg.domain.models (AggregatedSet, OrderedView, RevenueEntry, SortOrder)
"""
from __future__ import annotations

import unicodedata
from typing import Tuple, Union

from revagg.domain.models import AggregatedSet, OrderedView, RevenueEntry, SortOrder


def _fold(text: str) -> str:
    """Casefold and strip combining marks, so "Émile" compares as "emile"."""
    decomposed = unicodedata.normalize("NFKD", text.casefold())
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def _name_key(entry: RevenueEntry) -> Tuple[str, str, str]:
    # Base letters first, then accents, then case
    return _fold(entry.name), entry.name.casefold(), entry.name


def matches(entry: RevenueEntry, filter_text: str) -> bool:
    """Case-insensitive substring match of filter_text within the entry name."""
    return filter_text.lower() in entry.name.lower()


def build_view(
    aggregated: AggregatedSet,
    filter_text: str = "",
    order: Union[SortOrder, str] = SortOrder.ASCENDING,
) -> OrderedView:
    """
    Filter and sort aggregated entries by product name.

    Args:
        aggregated: Revenue ledger keyed by product name
        filter_text: Substring to look for in names; empty keeps everything
        order: SortOrder or its wire value ("asc"/"desc")

    Returns:
        Ordered list of entries. Descending is exactly the reverse of ascending.

    Raises:
        ValueError: If order is not a known sort order
    """
    order = SortOrder.parse(order)
    filter_text = filter_text or ""

    retained = [entry for entry in aggregated.values() if matches(entry, filter_text)]
    retained.sort(key=_name_key)
    if order is SortOrder.DESCENDING:
        retained.reverse()
    return retained
