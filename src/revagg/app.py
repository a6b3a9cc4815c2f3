# src/revagg/app.py
"""
Application Entry Point - Console Revenue Report

This module serves as the composition root for the revenue aggregator.
It wires settings, logging, feeds and the view engine, then prints one
page of the revenue table.

Files that USE this module:
- revagg.__main__ (python -m revagg)
- the `revagg` console script

Files that this module USES:
- revagg.shared.logging_conf (setup_logging for logging configuration)
- revagg.config (settings for configuration management)
- revagg.application.revenue_service (RevenueService to load the ledger)
- revagg.application.view_session (ViewSession for filter/sort/page state)
- revagg.adapters.formatting (render_table for output)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Standard library for logging messages and errors
import sys  # System-specific parameters and functions for exit codes
from pathlib import Path  # Object-oriented filesystem paths
from typing import Optional, Tuple  # Type hints

import click  # Command-line interface

from revagg.adapters.formatting import render_table  # Table rendering
from revagg.application.revenue_service import RevenueService  # Feed loading and aggregation
from revagg.application.view_session import ViewSession  # View state and derivations
from revagg.config import settings  # Application configuration and settings
from revagg.domain.errors import DomainError
from revagg.shared.logging_conf import setup_logging  # Configure logging with file rotation


@click.command()
@click.option("--url", "urls", multiple=True, help="Feed URL (repeatable). Defaults to FEED_URLS.")
@click.option("--feed-dir", type=click.Path(file_okay=False, path_type=Path), default=None,
              help="Directory of *.json feeds. Defaults to FEED_DIR.")
@click.option("--filter", "filter_text", default="", help="Case-insensitive product name filter.")
@click.option("--sort", "sort_order", type=click.Choice(["asc", "desc"]), default="asc", show_default=True,
              help="Sort order by product name.")
@click.option("--page", type=click.IntRange(min=1), default=1, show_default=True, help="Page to show.")
@click.option("--all", "view_all", is_flag=True, help="Show all products on one page.")
@click.option("--page-size", type=click.IntRange(min=1), default=None, help="Items per page. Defaults to PAGE_SIZE.")
@click.option("--allow-partial/--no-partial", default=None,
              help="Aggregate the remaining feeds when some fail. Defaults to ALLOW_PARTIAL_AGGREGATION.")
def main(
    urls: Tuple[str, ...],
    feed_dir: Optional[Path],
    filter_text: str,
    sort_order: str,
    page: int,
    view_all: bool,
    page_size: Optional[int],
    allow_partial: Optional[bool],
) -> None:
    """
    Aggregate product revenue from sales feeds and print one page of it.

    This function:
    1. Sets up logging
    2. Loads every feed and aggregates revenue
    3. Applies filter, sort order and page
    4. Prints the table with the grand total of the filtered products
    """
    setup_logging(
        level=settings.log_level,
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
        log_to_stream=settings.log_stdout,
    )
    logger = logging.getLogger(__name__)

    try:
        service = RevenueService.from_settings(
            urls=list(urls) if urls else None,
            feed_dir=feed_dir,
            allow_partial=allow_partial,
        )
    except ValueError as e:
        raise click.BadParameter(str(e))

    if not service.sources:
        logger.warning("No feeds configured; set FEED_URLS or FEED_DIR, or pass --url/--feed-dir")

    try:
        report = service.load_sync()
    except DomainError as e:
        logger.error("Loading failed: %s", e)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    for name, reason in report.sources_failed.items():
        click.echo(f"Warning: source '{name}' excluded ({reason})", err=True)
    if report.invalid_records:
        click.echo(f"Warning: {len(report.invalid_records)} invalid record(s) skipped", err=True)

    session = ViewSession(
        report.aggregated,
        page_size=page_size or settings.page_size,
        nav_window_size=settings.nav_window_size,
    )
    session.set_filter(filter_text)
    session.set_sort_order(sort_order)
    if view_all:
        session.toggle_view_all()
    else:
        session.go_to_page(page)

    click.echo(render_table(session.window(), session.grand_total()))


if __name__ == "__main__":
    main()
