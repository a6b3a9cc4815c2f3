# src/revagg/domain/__init__.py
"""
Domain Layer - Pure Business Objects

This package contains domain models and business rules.
No dependencies on infrastructure or external systems.
"""

from revagg.domain.models import (
    AggregatedSet,
    FeedPayload,
    LoadReport,
    OrderedView,
    PageWindow,
    RawRecord,
    RevenueEntry,
    SortOrder,
    ViewState,
)
from revagg.domain.errors import (
    DomainError,
    InvalidRecordError,
    SourceUnavailableError,
)

__all__ = [
    "AggregatedSet",
    "FeedPayload",
    "LoadReport",
    "OrderedView",
    "PageWindow",
    "RawRecord",
    "RevenueEntry",
    "SortOrder",
    "ViewState",
    "DomainError",
    "InvalidRecordError",
    "SourceUnavailableError",
]
