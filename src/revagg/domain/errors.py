# src/revagg/domain/errors.py
"""
Domain Errors - Business Logic Exceptions

This module defines domain-specific exceptions raised while loading,
validating and aggregating sales feeds.

Files that USE this module:
- revagg.domain.models (RawRecord.from_mapping raises InvalidRecordError)
- revagg.adapters.feeds.* (feeds raise SourceUnavailableError)
- revagg.application.* (services raise and collect these errors)
- revagg.app (console catches DomainError)

Files that this module USES:
- None (pure domain layer)
"""

from __future__ import annotations

from typing import Dict, Optional


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class SourceUnavailableError(DomainError):
    """
    Raised when one or more named feeds could not be retrieved.

    Attributes:
        failures: Mapping of source name to failure reason
    """

    def __init__(self, source: Optional[str] = None, reason: str = "", failures: Optional[Dict[str, str]] = None):
        self.failures: Dict[str, str] = dict(failures or {})
        if source is not None:
            self.failures.setdefault(source, reason)
        self.source = source
        self.reason = reason
        if source is not None and not failures:
            message = f"Source '{source}' unavailable: {reason}"
        else:
            names = ", ".join(sorted(self.failures))
            message = f"Sources unavailable: {names}"
        super().__init__(message)


class InvalidRecordError(DomainError):
    """
    Raised when a retrieved record fails shape/type validation.

    Attributes:
        field: Name of the offending wire field (e.g. "unitPrice")
        source: Name of the feed the record came from, if known
        index: Position of the record inside its source, if known
    """

    def __init__(self, field: str, reason: str = "invalid value",
                 source: Optional[str] = None, index: Optional[int] = None):
        self.field = field
        self.reason = reason
        self.source = source
        self.index = index
        where = ""
        if source is not None:
            where = f" in source '{source}'"
            if index is not None:
                where += f" at record {index}"
        super().__init__(f"Invalid record field '{field}'{where}: {reason}")

    def located(self, source: Optional[str], index: Optional[int]) -> "InvalidRecordError":
        """Return a copy of this error tagged with its source and position."""
        return InvalidRecordError(self.field, self.reason, source=source, index=index)
