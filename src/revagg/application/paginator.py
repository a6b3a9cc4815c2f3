# src/revagg/application/paginator.py
"""
Paginator - Page Windows over an Ordered View

Slices an ordered view into a page and computes the page numbers offered
for navigation. The requested page is never clamped; whoever owns the view
state resets it when the filter changes.

Files that USE this module:
- revagg.application.view_session (computes the visible window)
- tests.test_paginator (unit tests)

Files that this module USES:
- revagg.domain.models (OrderedView, PageWindow)
"""
from __future__ import annotations

import math
from typing import List, Sequence

from revagg.domain.models import PageWindow, RevenueEntry

DEFAULT_PAGE_SIZE = 10
DEFAULT_NAV_WINDOW_SIZE = 4


def total_pages(item_count: int, page_size: int) -> int:
    """Number of pages needed for item_count items (0 for no items)."""
    return math.ceil(item_count / page_size)


def page_range(current_page: int, pages: int, nav_window_size: int = DEFAULT_NAV_WINDOW_SIZE) -> List[int]:
    """
    Page numbers to offer for navigation around current_page.

    The window is centered on current_page, never leaves [1, pages], and
    shifts left near the last page instead of shrinking.

    Args:
        current_page: Requested page (1-based)
        pages: Total number of pages
        nav_window_size: Maximum number of page links

    Returns:
        Contiguous ascending page numbers (empty when pages == 0)
    """
    start = max(current_page - nav_window_size // 2, 1)
    end = min(start + nav_window_size - 1, pages)
    if end - start + 1 < nav_window_size:
        start = max(end - nav_window_size + 1, 1)
    return list(range(start, end + 1))


def paginate(
    view: Sequence[RevenueEntry],
    current_page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
    view_all: bool = False,
    nav_window_size: int = DEFAULT_NAV_WINDOW_SIZE,
) -> PageWindow:
    """
    Compute the visible window of an ordered view.

    Args:
        view: Ordered entries
        current_page: Requested page, >= 1; out-of-range pages give empty items
        page_size: Items per page, > 0
        view_all: Show everything as a single page
        nav_window_size: Maximum number of page links, > 0

    Returns:
        PageWindow for the requested page

    Raises:
        ValueError: If current_page, page_size or nav_window_size is below 1
    """
    if current_page < 1:
        raise ValueError(f"current_page must be >= 1, got {current_page}")
    if page_size < 1:
        raise ValueError(f"page_size must be > 0, got {page_size}")
    if nav_window_size < 1:
        raise ValueError(f"nav_window_size must be > 0, got {nav_window_size}")

    if view_all:
        return PageWindow(
            items=list(view),
            page_numbers=[1],
            has_prev=False,
            has_next=False,
            total_pages=1,
            current_page=current_page,
        )

    pages = total_pages(len(view), page_size)
    first = (current_page - 1) * page_size
    items = list(view[first:first + page_size])

    return PageWindow(
        items=items,
        page_numbers=page_range(current_page, pages, nav_window_size),
        has_prev=pages > 0 and current_page > 1,
        has_next=current_page < pages,
        total_pages=pages,
        current_page=current_page,
    )
