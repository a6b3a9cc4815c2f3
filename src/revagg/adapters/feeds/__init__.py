# src/revagg/adapters/feeds/__init__.py
"""
Feed Adapters - Sales Feed Clients

This package contains adapters that retrieve raw sales records from named
sources. All feeds implement the FeedSource interface.
"""
import logging
from pathlib import Path, PurePosixPath
from typing import Iterable, List, Optional, Set, Union
from urllib.parse import urlparse

from revagg.adapters.feeds.base import FeedSource
from revagg.adapters.feeds.file_feed import JsonFileFeed
from revagg.adapters.feeds.http_feed import HttpFeed
from revagg.shared.validators import validate_source_name

log = logging.getLogger(__name__)


def _unique_name(candidate: str, fallback: str, taken: Set[str]) -> str:
    name = candidate if validate_source_name(candidate) else fallback
    base, n = name, 2
    while name in taken:
        name = f"{base}-{n}"
        n += 1
    taken.add(name)
    return name


def source_name_for_url(url: str) -> str:
    """Derive a source name from a URL's last path segment, e.g. '/api/branch1.json' -> 'branch1'."""
    path = PurePosixPath(urlparse(url).path)
    return path.stem or urlparse(url).netloc


def build_sources(
    urls: Iterable[str] = (),
    feed_dir: Optional[Union[str, Path]] = None,
    timeout: Optional[int] = None,
) -> List[FeedSource]:
    """
    Build feed sources from URLs and from *.json files in a directory.

    HTTP feeds come first in the given order, then files sorted by name.
    Source names are unique; clashes get a numeric suffix.

    Raises:
        ValueError: If a URL is invalid or feed_dir is not a directory
    """
    sources: List[FeedSource] = []
    taken: Set[str] = set()

    for idx, url in enumerate(urls, start=1):
        name = _unique_name(source_name_for_url(url), f"feed{idx}", taken)
        sources.append(HttpFeed(name=name, url=url, timeout=timeout))

    if feed_dir is not None:
        directory = Path(feed_dir)
        if not directory.is_dir():
            raise ValueError(f"Feed directory does not exist: {directory}")
        for idx, path in enumerate(sorted(directory.glob("*.json")), start=1):
            name = _unique_name(path.stem, f"file{idx}", taken)
            sources.append(JsonFileFeed(path, name=name))

    log.info("Configured %d feed sources: %s", len(sources), ", ".join(s.name for s in sources))
    return sources


__all__ = [
    "FeedSource",
    "HttpFeed",
    "JsonFileFeed",
    "build_sources",
    "source_name_for_url",
]
