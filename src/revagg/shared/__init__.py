# src/revagg/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Logging configuration
"""

from revagg.shared.validators import (
    validate_feed_url,
    validate_separator,
    validate_source_name,
)

__all__ = [
    "validate_feed_url",
    "validate_source_name",
    "validate_separator",
]
