# tests/test_view_session.py
"""
View Session Tests - Unit Tests for View State and Recomputation

Covers the page reset rules (filter and view-all reset to page 1, sort does
not), page navigation and recomputation when data changes.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- revagg.application.view_session (ViewSession)
- revagg.domain.models (RevenueEntry, SortOrder, ViewState)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from unittest.mock import patch  # Patching to observe recomputation

from revagg.application.view_query import build_view
from revagg.application.view_session import ViewSession
from revagg.domain.models import RevenueEntry, SortOrder, ViewState


def _ledger(n, prefix="product"):
    return {
        f"{prefix}-{i:02d}": RevenueEntry(name=f"{prefix}-{i:02d}", revenue=float(i))
        for i in range(1, n + 1)
    }


@pytest.fixture
def session():
    ledger = _ledger(25)
    ledger.update(_ledger(5, prefix="special"))
    return ViewSession(ledger, page_size=10, nav_window_size=4)


class TestResetRules:
    def test_filter_change_resets_page(self, session):
        session.go_to_page(3)
        session.set_filter("special")
        assert session.state.current_page == 1
        assert [e.name for e in session.window().items] == [f"special-{i:02d}" for i in range(1, 6)]

    def test_sort_change_keeps_page(self, session):
        session.go_to_page(2)
        session.set_sort_order("desc")
        assert session.state.current_page == 2
        assert session.state.sort_order is SortOrder.DESCENDING

    def test_toggle_view_all_resets_page(self, session):
        session.go_to_page(3)
        assert session.toggle_view_all() is True
        assert session.state.current_page == 1
        window = session.window()
        assert len(window.items) == 30
        assert window.page_numbers == [1]

    def test_toggle_back_to_paginated(self, session):
        session.toggle_view_all()
        session.toggle_view_all()
        window = session.window()
        assert len(window.items) == 10
        assert window.page_numbers == [1, 2, 3]


class TestNavigation:
    def test_next_and_prev(self, session):
        assert session.next_page()
        assert session.state.current_page == 2
        assert session.prev_page()
        assert session.state.current_page == 1

    def test_prev_on_first_page_is_noop(self, session):
        assert not session.prev_page()
        assert session.state.current_page == 1

    def test_next_on_last_page_is_noop(self, session):
        session.go_to_page(3)
        assert not session.next_page()
        assert session.state.current_page == 3

    def test_go_to_invalid_page(self, session):
        with pytest.raises(ValueError):
            session.go_to_page(0)

    def test_next_in_view_all_is_noop(self, session):
        session.toggle_view_all()
        assert not session.next_page()


class TestDerivations:
    def test_grand_total_follows_filter_not_page(self, session):
        session.set_filter("special")
        assert session.grand_total() == 15.0
        session.set_filter("")
        session.go_to_page(2)
        assert session.grand_total() == sum(range(1, 26)) + 15.0

    def test_grand_total_ignores_view_all(self, session):
        before = session.grand_total()
        session.toggle_view_all()
        assert session.grand_total() == before

    def test_view_is_reused_until_inputs_change(self, session):
        with patch("revagg.application.view_session.build_view", wraps=build_view) as spy:
            session.view()
            session.window()
            session.grand_total()
            session.go_to_page(2)
            session.window()
            assert spy.call_count == 1
            session.set_filter("prod")
            session.view()
            assert spy.call_count == 2

    def test_replace_data_recomputes(self, session):
        session.set_filter("special")
        session.replace_data(_ledger(3, prefix="special"))
        assert session.state.filter_text == "special"
        assert session.grand_total() == 6.0

    def test_empty_ledger(self):
        session = ViewSession({})
        window = session.window()
        assert window.items == []
        assert window.total_pages == 0
        assert window.page_numbers == []
        assert session.grand_total() == 0.0

    def test_initial_state(self):
        state = ViewState(filter_text="x", sort_order=SortOrder.DESCENDING, current_page=2)
        session = ViewSession(_ledger(3), state=state)
        assert session.state is state

    def test_rejects_bad_sizes(self):
        with pytest.raises(ValueError):
            ViewSession({}, page_size=0)
        with pytest.raises(ValueError):
            ViewSession({}, nav_window_size=0)
