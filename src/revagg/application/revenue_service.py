# src/revagg/application/revenue_service.py
"""
Revenue Service - Business Logic for Loading the Revenue Ledger

This module contains the use-case that turns a set of named feeds into one
revenue ledger: retrieve every feed, apply the source-failure and
invalid-record policies, then aggregate the complete set in one pass.

Files that USE this module:
- revagg.app (console loads the ledger through RevenueService)
- tests.test_revenue_service (unit tests)

Files that this module USES:
- revagg.application.feed_loader (load_feeds for concurrent retrieval)
- revagg.application.aggregator (aggregate, to_record)
- revagg.adapters.feeds (build_sources for configured feeds)
- revagg.config (settings for default policies)
- revagg.domain.models (LoadReport, FeedPayload, RawRecord)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

import asyncio  # Run the async loader from synchronous callers
import logging  # Standard library for logging messages
from enum import Enum  # Enumerations for validation policies
from typing import List, Optional, Sequence, Tuple, Union  # Type hints

from revagg.adapters.feeds import FeedSource, build_sources  # Feed adapters
from revagg.application.aggregator import aggregate, to_record  # Revenue aggregation
from revagg.application.feed_loader import load_feeds  # Concurrent feed retrieval
from revagg.config import settings  # Application configuration and settings
from revagg.domain.errors import InvalidRecordError, SourceUnavailableError
from revagg.domain.models import FeedPayload, LoadReport, RawRecord

log = logging.getLogger(__name__)


class InvalidRecordPolicy(str, Enum):
    """What to do with a record that fails validation."""
    SKIP_RECORD = "skip_record"  # exclude only the offending record
    SKIP_SOURCE = "skip_source"  # exclude the whole source
    RAISE = "raise"  # abort loading


class RevenueService:
    """
    High-level service that loads all feeds and aggregates revenue.

    Aggregation only starts once every retrieval has completed. If any feed
    fails, loading aborts unless partial aggregation is allowed, in which case
    the failed feeds are logged and listed in the report.
    """

    def __init__(
        self,
        sources: Sequence[FeedSource],
        allow_partial: bool = False,
        invalid_record_policy: Union[InvalidRecordPolicy, str] = InvalidRecordPolicy.SKIP_RECORD,
    ):
        """
        Initialize the service.

        Args:
            sources: Feeds to load, in merge order
            allow_partial: Aggregate the successful feeds when some fail
            invalid_record_policy: Policy for records failing validation
        """
        self.sources = list(sources)
        self.allow_partial = allow_partial
        self.invalid_record_policy = InvalidRecordPolicy(invalid_record_policy)

    @classmethod
    def from_settings(cls, urls: Optional[Sequence[str]] = None, feed_dir=None,
                      allow_partial: Optional[bool] = None) -> "RevenueService":
        """
        Build a service from configured feeds, with optional overrides.

        Args:
            urls: Feed URLs (defaults to settings.feed_urls)
            feed_dir: Directory of JSON feeds (defaults to settings.feed_dir)
            allow_partial: Override settings.allow_partial_aggregation
        """
        sources = build_sources(
            urls=settings.feed_urls if urls is None else urls,
            feed_dir=settings.feed_dir if feed_dir is None else feed_dir,
            timeout=settings.http_timeout_seconds,
        )
        return cls(
            sources,
            allow_partial=settings.allow_partial_aggregation if allow_partial is None else allow_partial,
            invalid_record_policy=settings.invalid_record_policy,
        )

    def _validate(self, payloads: Sequence[FeedPayload], report: LoadReport) -> Tuple[List[List[RawRecord]], List[str]]:
        """
        Validate every payload according to the invalid-record policy.

        Returns:
            (record collections, source names) for the sources that are kept

        Raises:
            InvalidRecordError: Under the RAISE policy
        """
        collections: List[List[RawRecord]] = []
        names: List[str] = []

        for payload in payloads:
            records: List[RawRecord] = []
            rejected: Optional[InvalidRecordError] = None
            for idx, item in enumerate(payload.products):
                try:
                    records.append(to_record(item, source=payload.source, index=idx))
                except InvalidRecordError as e:
                    if self.invalid_record_policy is InvalidRecordPolicy.RAISE:
                        log.error("%s", e)
                        raise
                    log.warning("Rejected record: %s", e)
                    report.invalid_records.append(e)
                    if self.invalid_record_policy is InvalidRecordPolicy.SKIP_SOURCE:
                        rejected = e
                        break

            if rejected is not None:
                report.sources_failed[payload.source] = f"invalid record: {rejected}"
                log.warning("Excluding source %s because of an invalid record", payload.source)
                continue

            collections.append(records)
            names.append(payload.source)

        return collections, names

    async def load(self) -> LoadReport:
        """
        Retrieve all feeds, then validate and aggregate them in one pass.

        Returns:
            LoadReport with the ledger and what was excluded

        Raises:
            SourceUnavailableError: If any feed failed and partial aggregation is off
            InvalidRecordError: If a record is invalid under the RAISE policy
        """
        results = await load_feeds(self.sources)

        if results.failures and not self.allow_partial:
            log.error("Aborting aggregation, unavailable sources: %s", ", ".join(sorted(results.failures)))
            raise SourceUnavailableError(failures=results.failures)

        report = LoadReport(aggregated={})
        if results.failures:
            report.sources_failed.update(results.failures)
            log.warning(
                "Partial aggregation, excluded sources: %s",
                ", ".join(sorted(results.failures)),
            )

        collections, names = self._validate(results.payloads, report)
        report.aggregated = aggregate(collections, source_names=names)
        report.sources_loaded = names

        if not report.aggregated:
            log.info("Aggregation produced no entries")
        else:
            log.info(
                "Aggregated %d products from %d sources (%d invalid records)",
                len(report.aggregated), len(names), len(report.invalid_records),
            )
        return report

    def load_sync(self) -> LoadReport:
        """Synchronous wrapper around load() for callers without an event loop."""
        return asyncio.run(self.load())
