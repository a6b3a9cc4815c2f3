# src/revagg/application/__init__.py
"""
Application Layer - Use Cases and Services

This package contains the revenue engine (aggregate, filter/sort, paginate,
total) and the services that orchestrate it.
No direct I/O - feeds are reached through the FeedSource interface.
"""

from revagg.application.aggregator import aggregate
from revagg.application.feed_loader import FeedResults, load_feeds
from revagg.application.paginator import paginate
from revagg.application.revenue_service import InvalidRecordPolicy, RevenueService
from revagg.application.totals import total
from revagg.application.view_query import build_view
from revagg.application.view_session import ViewSession

__all__ = [
    "aggregate",
    "build_view",
    "paginate",
    "total",
    "load_feeds",
    "FeedResults",
    "RevenueService",
    "InvalidRecordPolicy",
    "ViewSession",
]
