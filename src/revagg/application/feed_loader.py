# src/revagg/application/feed_loader.py
"""
Feed Loader - Concurrent Retrieval of All Sales Feeds

Fetches every configured feed concurrently and waits for all of them to
finish before handing results back, so aggregation always sees the complete
set of successful retrievals together with the list of failed ones.

Files that USE this module:
- revagg.application.revenue_service (RevenueService.load)
- tests.test_revenue_service (load_feeds unit tests)

Files that this module USES:
- revagg.adapters.feeds.base (FeedSource interface)
- revagg.domain.models (FeedPayload)
- revagg.domain.errors (SourceUnavailableError)
"""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from revagg.adapters.feeds.base import FeedSource
from revagg.domain.errors import SourceUnavailableError
from revagg.domain.models import FeedPayload

log = logging.getLogger(__name__)


@dataclass
class FeedResults:
    """
    Outcome of one retrieval round.

    Attributes:
        payloads: Successful retrievals, in source order
        failures: Source name -> failure reason
    """
    payloads: List[FeedPayload] = field(default_factory=list)
    failures: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failures


async def _fetch_one(source: FeedSource) -> FeedPayload:
    # Feed clients are blocking; run each in the default executor
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, source.fetch)


async def load_feeds(sources: Sequence[FeedSource]) -> FeedResults:
    """
    Retrieve all feeds concurrently and wait for every one of them.

    Args:
        sources: Feeds to retrieve

    Returns:
        FeedResults with payloads in source order and per-source failures
    """
    results = FeedResults()
    if not sources:
        log.info("No feed sources configured")
        return results

    log.info("Loading %d feeds", len(sources))
    outcomes = await asyncio.gather(*(_fetch_one(s) for s in sources), return_exceptions=True)

    for source, outcome in zip(sources, outcomes):
        if isinstance(outcome, SourceUnavailableError):
            results.failures[source.name] = outcome.reason or str(outcome)
            log.warning("Feed %s unavailable: %s", source.name, results.failures[source.name])
        elif isinstance(outcome, Exception):
            results.failures[source.name] = f"{type(outcome).__name__}: {outcome}"
            log.error("Feed %s failed unexpectedly", source.name, exc_info=outcome)
        elif isinstance(outcome, BaseException):
            raise outcome
        else:
            results.payloads.append(outcome)

    log.info(
        "Feeds loaded: %d ok, %d failed",
        len(results.payloads), len(results.failures),
    )
    return results
