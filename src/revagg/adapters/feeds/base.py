# src/revagg/adapters/feeds/base.py
"""
Base Feed Interface for Sales Feeds

This module defines the abstract base class for all sales feed adapters.
It establishes the contract that all feed implementations must follow.

Files that USE this module:
- revagg.adapters.feeds.http_feed (HttpFeed implements FeedSource)
- revagg.adapters.feeds.file_feed (JsonFileFeed implements FeedSource)
- revagg.application.feed_loader (loads any FeedSource)

Files that this module USES:
- revagg.domain.models (FeedPayload)
- revagg.domain.errors (SourceUnavailableError)
"""
from abc import ABC, abstractmethod
from typing import Any

from revagg.domain.errors import SourceUnavailableError
from revagg.domain.models import FeedPayload


class FeedSource(ABC):
    """A named source of raw product records."""

    name: str

    @abstractmethod
    def fetch(self) -> FeedPayload:
        """
        Retrieve this feed's products.

        Raises:
            SourceUnavailableError: If the feed cannot be retrieved or has the wrong shape
        """
        raise NotImplementedError

    def _payload_from(self, data: Any) -> FeedPayload:
        """
        Validate a decoded body of shape {"products": [...]}.

        Raises:
            SourceUnavailableError: If the body is not a dict with a products list
        """
        if not isinstance(data, dict):
            raise SourceUnavailableError(self.name, f"expected a JSON object, got {type(data).__name__}")
        if "products" not in data:
            raise SourceUnavailableError(self.name, "response missing 'products' field")
        products = data["products"]
        if not isinstance(products, list):
            raise SourceUnavailableError(self.name, "'products' is not a list")
        return FeedPayload(source=self.name, products=products)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
