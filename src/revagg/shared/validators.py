# src/revagg/shared/validators.py
"""
Input Validation Utilities - Configuration Validation

This module provides validation functions for feed configuration and
command-line input, so that bad URLs or source names are rejected before
any retrieval starts.

Files that USE this module:
- revagg.config.settings (uses validation functions in Settings field validators)
- revagg.adapters.feeds.http_feed (validates feed URLs)

Files that this module USES:
- None (pure utility functions)
"""
import re
from urllib.parse import urlparse


def validate_feed_url(url: str) -> bool:
    """
    Validate an HTTP(S) feed URL.

    Args:
        url: URL to validate

    Returns:
        True if valid, False otherwise
    """
    if not url or url.isspace():
        return False

    parsed = urlparse(url.strip())
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def validate_source_name(name: str) -> bool:
    """
    Validate a feed source name.

    Names appear in logs and reports; letters, digits, dot, dash and
    underscore only.

    Args:
        name: Source name to validate

    Returns:
        True if valid, False otherwise
    """
    if not name:
        return False
    return bool(re.match(r'^[A-Za-z0-9_.-]{1,64}$', name))


def validate_separator(separator: str) -> bool:
    """
    Validate a thousands separator.

    A separator must be a single non-digit character.
    """
    return len(separator) == 1 and not separator.isdigit()

