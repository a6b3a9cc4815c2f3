# src/revagg/application/aggregator.py
"""
Aggregator - Merge Sales Feeds into a Revenue Ledger

This module merges raw sale lines from every source feed into one mapping
from product name to cumulative revenue.

Files that USE this module:
- revagg.application.revenue_service (aggregates validated feed records)
- tests.test_aggregator (unit tests)

Files that this module USES:
- revagg.domain.models (RawRecord, RevenueEntry, AggregatedSet)
- revagg.domain.errors (InvalidRecordError for malformed records)
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Optional, Sequence, Union

from revagg.domain.errors import InvalidRecordError
from revagg.domain.models import AggregatedSet, RawRecord, RevenueEntry

log = logging.getLogger(__name__)

RecordLike = Union[RawRecord, Any]


def to_record(item: RecordLike, source: Optional[str] = None, index: Optional[int] = None) -> RawRecord:
    """
    Coerce a feed item to a validated RawRecord.

    Args:
        item: RawRecord or wire mapping {"name", "unitPrice", "sold"}
        source: Feed name, used in error reports
        index: Position of the item inside its feed

    Returns:
        RawRecord

    Raises:
        InvalidRecordError: If the item fails validation
    """
    if isinstance(item, RawRecord):
        return item
    try:
        return RawRecord.from_mapping(item)
    except InvalidRecordError as e:
        raise e.located(source, index) from None


def aggregate(
    sources: Iterable[Iterable[RecordLike]],
    source_names: Optional[Sequence[str]] = None,
) -> AggregatedSet:
    """
    Merge record collections into one revenue entry per product name.

    Collections are consumed in enumeration order. Revenue is accumulated in
    floating point with no rounding.

    Args:
        sources: Zero or more record collections; any may be empty
        source_names: Optional feed names aligned with sources, for error reports

    Returns:
        Mapping of product name to RevenueEntry

    Raises:
        InvalidRecordError: On the first malformed record; nothing is dropped silently
    """
    revenue: Dict[str, float] = {}
    record_count = 0

    for source_idx, records in enumerate(sources):
        source = None
        if source_names is not None and source_idx < len(source_names):
            source = source_names[source_idx]
        for idx, item in enumerate(records):
            record = to_record(item, source=source, index=idx)
            if record.name in revenue:
                revenue[record.name] += record.revenue
            else:
                revenue[record.name] = record.revenue
            record_count += 1

    log.debug("Aggregated %d records into %d products", record_count, len(revenue))
    return {name: RevenueEntry(name=name, revenue=value) for name, value in revenue.items()}
