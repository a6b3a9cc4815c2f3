# src/revagg/domain/models.py
"""
Domain Models - Pure Business Objects

This module contains domain models representing core business concepts:
- Raw sale lines from source feeds
- Aggregated revenue entries
- View state and page windows
- Load reports

Files that USE this module:
- revagg.application.* (all services use domain models)
- revagg.adapters.* (adapters create and use domain models)
- tests.* (tests use domain models for test data)

Files that this module USES:
- revagg.domain.errors (InvalidRecordError for record validation)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import math  # Finite checks on wire numbers
import numbers  # Numeric tower for type checks on wire values
from dataclasses import dataclass, field  # Decorators for creating data classes
from enum import Enum  # Enumerations for sort order
from typing import Any, Dict, List, Mapping  # Type hints

from revagg.domain.errors import InvalidRecordError


class SortOrder(str, Enum):
    """Sort direction for the product view, valued as the selector options."""
    ASCENDING = "asc"
    DESCENDING = "desc"

    @classmethod
    def parse(cls, value: Any) -> "SortOrder":
        """
        Accept a SortOrder or its wire value ("asc"/"desc").

        Raises:
            ValueError: If the value is not a known sort order
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(f"Unknown sort order: {value!r} (expected 'asc' or 'desc')")


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _to_finite(value: Any, field_name: str) -> float:
    """Convert a wire number to a finite float or raise InvalidRecordError for field_name."""
    if not _is_number(value):
        raise InvalidRecordError(field_name, f"not a number: {value!r}")
    try:
        number = float(value)
    except OverflowError:
        raise InvalidRecordError(field_name, "number out of range") from None
    if not math.isfinite(number):
        raise InvalidRecordError(field_name, f"not a finite number: {value!r}")
    return number


@dataclass(frozen=True)
class RawRecord:
    """
    One sale line from a source feed.

    Attributes:
        name: Product name (aggregation key)
        unit_price: Price per unit, >= 0
        sold: Units sold, integer >= 0
    """
    name: str
    unit_price: float
    sold: int

    @property
    def revenue(self) -> float:
        return self.unit_price * self.sold

    @classmethod
    def from_mapping(cls, data: Any) -> "RawRecord":
        """
        Build a RawRecord from a wire mapping {"name", "unitPrice", "sold"}.

        Args:
            data: Mapping decoded from a feed

        Returns:
            Validated RawRecord

        Raises:
            InvalidRecordError: Naming the first offending field
        """
        if not isinstance(data, Mapping):
            raise InvalidRecordError("record", f"expected an object, got {type(data).__name__}")

        name = data.get("name")
        if not isinstance(name, str) or not name:
            raise InvalidRecordError("name", "missing or not a non-empty string")

        unit_price = _to_finite(data.get("unitPrice"), "unitPrice")
        if unit_price < 0:
            raise InvalidRecordError("unitPrice", f"must be >= 0, got {unit_price!r}")

        raw_sold = data.get("sold")
        sold = _to_finite(raw_sold, "sold")
        if not sold.is_integer():
            raise InvalidRecordError("sold", f"not an integer: {raw_sold!r}")
        if sold < 0:
            raise InvalidRecordError("sold", f"must be >= 0, got {raw_sold!r}")

        return cls(name=name, unit_price=unit_price, sold=int(sold))


@dataclass(frozen=True)
class RevenueEntry:
    """Cumulative revenue of one product across all merged feeds."""
    name: str
    revenue: float


# Mapping from product name to its entry; keys are unique
AggregatedSet = Dict[str, RevenueEntry]

# Filtered and sorted projection of an AggregatedSet
OrderedView = List[RevenueEntry]


@dataclass
class ViewState:
    """
    Transient session state driven by user interaction.

    Attributes:
        filter_text: Case-insensitive substring filter on product name
        sort_order: Name sort direction
        current_page: Requested page, 1-based
        view_all: Whether pagination is disabled
    """
    filter_text: str = ""
    sort_order: SortOrder = SortOrder.ASCENDING
    current_page: int = 1
    view_all: bool = False


@dataclass(frozen=True)
class PageWindow:
    """
    Visible slice of an ordered view plus navigation data.

    Attributes:
        items: Entries on the current page
        page_numbers: Contiguous ascending page numbers offered for navigation
        has_prev: Whether a previous page exists
        has_next: Whether a next page exists
        total_pages: Number of pages (1 in view-all mode, 0 for an empty view)
        current_page: Page the window was computed for
    """
    items: List[RevenueEntry]
    page_numbers: List[int]
    has_prev: bool
    has_next: bool
    total_pages: int = 0
    current_page: int = 1


@dataclass(frozen=True)
class FeedPayload:
    """Raw product records retrieved from one named feed."""
    source: str
    products: List[Any]


@dataclass
class LoadReport:
    """
    Outcome of loading and aggregating all configured feeds.

    Attributes:
        aggregated: Resulting revenue ledger
        sources_loaded: Names of feeds that contributed records
        sources_failed: Feed name -> failure reason, for excluded feeds
        invalid_records: Records rejected during validation
    """
    aggregated: AggregatedSet
    sources_loaded: List[str] = field(default_factory=list)
    sources_failed: Dict[str, str] = field(default_factory=dict)
    invalid_records: List[InvalidRecordError] = field(default_factory=list)

    @property
    def is_partial(self) -> bool:
        return bool(self.sources_failed)
