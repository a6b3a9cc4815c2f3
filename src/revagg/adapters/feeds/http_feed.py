# src/revagg/adapters/feeds/http_feed.py
"""
HTTP JSON Feed for Branch Sales Data

This module implements the HTTP client that fetches one branch's sales
records as JSON ({"products": [{"name", "unitPrice", "sold"}, ...]}) and
turns transport problems into SourceUnavailableError.

Files that USE this module:
- revagg.adapters.feeds (build_sources creates HttpFeed from FEED_URLS)
- tests.test_feeds (unit tests)

Files that this module USES:
- revagg.adapters.feeds.base (FeedSource interface)
- revagg.config (settings for HTTP timeout)
- revagg.shared.validators (feed URL validation)
"""
import logging
from typing import Optional

import requests

from revagg.adapters.feeds.base import FeedSource
from revagg.config import settings
from revagg.domain.errors import SourceUnavailableError
from revagg.domain.models import FeedPayload
from revagg.shared.validators import validate_feed_url

log = logging.getLogger(__name__)


class HttpFeed(FeedSource):
    """Sales feed served as a JSON document over HTTP(S)."""

    def __init__(self, name: str, url: str, timeout: Optional[int] = None):
        """
        Initialize an HTTP feed.

        Args:
            name: Source name used in logs and reports
            url: Feed URL
            timeout: Optional HTTP timeout in seconds (defaults to settings.http_timeout_seconds)

        Raises:
            ValueError: If the URL is not a valid http(s) URL
        """
        if not validate_feed_url(url):
            raise ValueError(f"Invalid feed URL: {url!r}")
        self.name = name
        self.url = url
        self.timeout = timeout or settings.http_timeout_seconds

    def fetch(self) -> FeedPayload:
        """
        Download and validate the feed.

        Returns:
            FeedPayload with the raw product records

        Raises:
            SourceUnavailableError: On timeout, HTTP/network error, invalid JSON or bad shape
        """
        try:
            log.info("Fetching feed %s from %s", self.name, self.url)
            resp = requests.get(self.url, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except requests.exceptions.Timeout:
            log.warning("Feed %s timeout after %d seconds", self.name, self.timeout)
            raise SourceUnavailableError(self.name, f"timeout after {self.timeout}s")
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else "?"
            log.warning("Feed %s HTTP error %s", self.name, status)
            raise SourceUnavailableError(self.name, f"HTTP {status}") from e
        except requests.exceptions.JSONDecodeError as e:
            log.error("Feed %s returned invalid JSON: %s", self.name, e)
            raise SourceUnavailableError(self.name, f"invalid JSON: {e}") from e
        except requests.exceptions.RequestException as e:
            log.warning("Feed %s request failed: %s", self.name, e)
            raise SourceUnavailableError(self.name, f"request failed: {e}") from e
        except ValueError as e:
            log.error("Feed %s returned invalid JSON: %s", self.name, e)
            raise SourceUnavailableError(self.name, f"invalid JSON: {e}") from e

        payload = self._payload_from(data)
        log.info("Feed %s returned %d records", self.name, len(payload.products))
        return payload
