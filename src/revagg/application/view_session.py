# src/revagg/application/view_session.py
"""
View Session - ViewState Ownership and Recomputation

This module owns the user's view state (filter, sort order, page, view-all)
and recomputes the ordered view, page window and grand total whenever one
of their inputs changes. It also applies the page reset rules: changing the
filter or toggling view-all returns to page 1, changing the sort order does
not.

Files that USE this module:
- revagg.app (console drives one session from command-line options)
- tests.test_view_session (unit tests)

Files that this module USES:
- revagg.application.view_query (build_view)
- revagg.application.paginator (paginate)
- revagg.application.totals (total)
- revagg.domain.models (AggregatedSet, ViewState, PageWindow, SortOrder)
"""
from __future__ import annotations

import logging
from typing import Optional, Tuple, Union

from revagg.application.paginator import DEFAULT_NAV_WINDOW_SIZE, DEFAULT_PAGE_SIZE, paginate
from revagg.application.totals import total
from revagg.application.view_query import build_view
from revagg.domain.models import AggregatedSet, OrderedView, PageWindow, SortOrder, ViewState

logger = logging.getLogger(__name__)


class ViewSession:
    """Interactive view over one aggregated revenue ledger."""

    def __init__(
        self,
        aggregated: AggregatedSet,
        page_size: int = DEFAULT_PAGE_SIZE,
        nav_window_size: int = DEFAULT_NAV_WINDOW_SIZE,
        state: Optional[ViewState] = None,
    ):
        """
        Initialize a session.

        Args:
            aggregated: Revenue ledger to view
            page_size: Items per page
            nav_window_size: Maximum number of page links
            state: Optional initial state (defaults to an unfiltered first page)

        Raises:
            ValueError: If page_size or nav_window_size is below 1
        """
        if page_size < 1:
            raise ValueError(f"page_size must be > 0, got {page_size}")
        if nav_window_size < 1:
            raise ValueError(f"nav_window_size must be > 0, got {nav_window_size}")
        self._aggregated = aggregated
        self.page_size = page_size
        self.nav_window_size = nav_window_size
        self.state = state or ViewState()
        # (aggregated, filter_text, sort_order) -> ordered view
        self._view_key: Optional[Tuple[AggregatedSet, str, SortOrder]] = None
        self._view_cache: OrderedView = []

    @property
    def aggregated(self) -> AggregatedSet:
        return self._aggregated

    # -------- state mutations --------

    def set_filter(self, text: str) -> None:
        """Change the name filter and go back to the first page."""
        self.state.filter_text = text or ""
        self.state.current_page = 1
        logger.debug("Filter set to %r", self.state.filter_text)

    def set_sort_order(self, order: Union[SortOrder, str]) -> None:
        """
        Change the sort order.

        The current page is kept as is.

        Raises:
            ValueError: If order is not a known sort order
        """
        self.state.sort_order = SortOrder.parse(order)
        logger.debug("Sort order set to %s", self.state.sort_order.value)

    def toggle_view_all(self) -> bool:
        """
        Switch between paginated and view-all mode and go back to the first page.

        Returns:
            New view_all value
        """
        self.state.view_all = not self.state.view_all
        self.state.current_page = 1
        return self.state.view_all

    def go_to_page(self, page: int) -> None:
        """
        Jump to a page.

        Raises:
            ValueError: If page is below 1
        """
        if page < 1:
            raise ValueError(f"page must be >= 1, got {page}")
        self.state.current_page = page

    def next_page(self) -> bool:
        """Advance one page if possible; returns whether the page changed."""
        if not self.window().has_next:
            return False
        self.state.current_page += 1
        return True

    def prev_page(self) -> bool:
        """Go back one page if possible; returns whether the page changed."""
        if not self.window().has_prev:
            return False
        self.state.current_page -= 1
        return True

    def replace_data(self, aggregated: AggregatedSet) -> None:
        """Swap in a recomputed ledger; view state is left untouched."""
        self._aggregated = aggregated
        self._view_key = None
        self._view_cache = []

    # -------- derivations --------

    def view(self) -> OrderedView:
        """Filtered and sorted entries for the current filter and sort order."""
        key = (self._aggregated, self.state.filter_text, self.state.sort_order)
        cached = self._view_key
        if (
            cached is None
            or cached[0] is not key[0]
            or cached[1] != key[1]
            or cached[2] is not key[2]
        ):
            self._view_cache = build_view(self._aggregated, self.state.filter_text, self.state.sort_order)
            self._view_key = key
        return self._view_cache

    def window(self) -> PageWindow:
        """Visible page window for the current state."""
        return paginate(
            self.view(),
            current_page=self.state.current_page,
            page_size=self.page_size,
            view_all=self.state.view_all,
            nav_window_size=self.nav_window_size,
        )

    def grand_total(self) -> float:
        """Revenue total over the filtered view, ignoring pagination."""
        return total(self.view())
