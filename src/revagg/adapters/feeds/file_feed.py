# src/revagg/adapters/feeds/file_feed.py
"""
JSON File Feed for Exported Branch Sales Data

Reads one branch's sales records from a local JSON file with the same shape
as the HTTP feed.

Files that USE this module:
- revagg.adapters.feeds (build_sources creates JsonFileFeed from FEED_DIR)
- tests.test_feeds (unit tests)

Files that this module USES:
- revagg.adapters.feeds.base (FeedSource interface)
"""
import json
import logging
from pathlib import Path
from typing import Optional, Union

from revagg.adapters.feeds.base import FeedSource
from revagg.domain.errors import SourceUnavailableError
from revagg.domain.models import FeedPayload

log = logging.getLogger(__name__)


class JsonFileFeed(FeedSource):
    """Sales feed stored as a JSON file on disk."""

    def __init__(self, path: Union[str, Path], name: Optional[str] = None):
        self.path = Path(path)
        self.name = name or self.path.stem

    def fetch(self) -> FeedPayload:
        """
        Read and validate the feed file.

        Raises:
            SourceUnavailableError: If the file is missing, unreadable, not JSON or has the wrong shape
        """
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            log.warning("Feed file for %s not found: %s", self.name, self.path)
            raise SourceUnavailableError(self.name, f"file not found: {self.path}")
        except OSError as e:
            log.warning("Feed file for %s unreadable: %s", self.name, e)
            raise SourceUnavailableError(self.name, f"cannot read {self.path}: {e}") from e
        except ValueError as e:
            log.error("Feed file for %s is not valid JSON: %s", self.name, e)
            raise SourceUnavailableError(self.name, f"invalid JSON: {e}") from e

        payload = self._payload_from(data)
        log.info("Feed %s read %d records from %s", self.name, len(payload.products), self.path)
        return payload
