# src/revagg/__init__.py
"""
RevAgg - Multi-feed Product Revenue Aggregator

Merges per-product sales lines from several branch feeds into one revenue
ledger and serves a filtered, sorted, paginated view over it with a grand
total of the filtered products.
"""

__version__ = "1.0.0"
