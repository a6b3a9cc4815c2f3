# src/revagg/adapters/__init__.py
"""
Adapters Layer - External Interfaces

This package contains all adapters for external systems:
- Feeds (HTTP and file sources)
- Formatting (output)
"""

__all__ = []
