# tests/test_formatter.py
"""
Formatter Tests - Unit Tests for Number and Table Formatting

This module contains unit tests for money formatting (grouping, fixed two
decimals, rounding), the pagination line and the revenue table layout.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- revagg.adapters.formatting.formatter (all formatter functions for testing)
- revagg.application.paginator (paginate to build page windows)
- revagg.domain.models (RevenueEntry, PageWindow for test data)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from revagg.adapters.formatting.formatter import (
    format_currency,  # Format money with a dollar sign
    format_number,  # Format grouped number with two decimals
    pagination_line,  # Format navigation bar
    render_table,  # Format revenue table
    _group_thousands,  # Group digits by three
)
from revagg.application.paginator import paginate
from revagg.domain.models import PageWindow, RevenueEntry


class TestFormatNumber:
    @pytest.mark.parametrize("value, expected", [
        (0, "0.00"),
        (7, "7.00"),
        (100, "100.00"),
        (999.5, "999.50"),
        (1000, "1,000.00"),
        (123456, "123,456.00"),
        (1234567.5, "1,234,567.50"),
        (25, "25.00"),
        (0.1 * 3, "0.30"),
    ])
    def test_grouping_and_two_decimals(self, value, expected):
        assert format_number(value) == expected

    def test_rounds_up_into_next_thousand(self):
        assert format_number(999.996) == "1,000.00"

    def test_exact_half_rounds_up(self):
        assert format_number(0.125) == "0.13"

    def test_uses_stored_binary_value(self):
        # 1.005 is stored just below 1.005
        assert format_number(1.005) == "1.00"

    def test_negative(self):
        assert format_number(-1234.5) == "-1,234.50"

    def test_negative_rounding_to_zero(self):
        assert format_number(-0.001) == "0.00"

    def test_custom_separator(self):
        assert format_number(1234.5, separator=" ") == "1 234.50"

    def test_format_currency(self):
        assert format_currency(25) == "$25.00"
        assert format_currency(1500.25) == "$1,500.25"


class TestGroupThousands:
    def test_group_thousands(self):
        assert _group_thousands("1", ",") == "1"
        assert _group_thousands("123", ",") == "123"
        assert _group_thousands("1234", ",") == "1,234"
        assert _group_thousands("1234567890", ".") == "1.234.567.890"


class TestPaginationLine:
    def test_middle_page(self):
        window = PageWindow(items=[], page_numbers=[1, 2, 3, 4], has_prev=True, has_next=True,
                            total_pages=6, current_page=2)
        assert pagination_line(window) == "« Prev  1 [2] 3 4  Next »"

    def test_first_page(self):
        window = PageWindow(items=[], page_numbers=[1, 2], has_prev=False, has_next=True,
                            total_pages=2, current_page=1)
        assert pagination_line(window) == "[1] 2  Next »"

    def test_nothing_to_navigate(self):
        window = PageWindow(items=[], page_numbers=[], has_prev=False, has_next=False)
        assert pagination_line(window) == ""


class TestRenderTable:
    def test_single_product(self):
        window = paginate([RevenueEntry("A", 25.0)], current_page=1, page_size=10)

        result = render_table(window, 25.0)

        lines = result.split("\n")
        assert lines[0] == "Product Name | Total Revenue"
        assert lines[1] == "-" * 28
        assert lines[2] == "A            |        $25.00"
        assert lines[4] == "Total        |        $25.00"
        assert lines[-1] == "[1]"

    def test_total_can_exceed_page(self):
        view = [RevenueEntry(f"P{i:02d}", 1000.0) for i in range(15)]
        window = paginate(view, current_page=2, page_size=10)

        result = render_table(window, 15000.0)

        assert "P10" in result
        assert "P09" not in result
        assert "$15,000.00" in result
        assert result.endswith("« Prev  1 [2]")

    def test_empty_window(self):
        window = paginate([], current_page=1)

        result = render_table(window, 0.0)

        assert "(no products)" in result
        assert "$0.00" in result
        assert not result.endswith("\n")
