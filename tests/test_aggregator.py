# tests/test_aggregator.py
"""
Aggregator Tests - Unit Tests for Revenue Aggregation

This module contains unit tests for merging raw sale lines from several
feeds into one revenue ledger, including merge correctness, idempotence and
rejection of malformed records.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- revagg.application.aggregator (aggregate, to_record)
- revagg.domain.models (RawRecord, RevenueEntry)
- revagg.domain.errors (InvalidRecordError)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from revagg.application.aggregator import aggregate, to_record
from revagg.domain.errors import InvalidRecordError
from revagg.domain.models import RawRecord, RevenueEntry


BRANCH1 = [
    {"name": "Apple", "unitPrice": 1.5, "sold": 10},
    {"name": "Banana", "unitPrice": 0.25, "sold": 40},
]
BRANCH2 = [
    {"name": "Apple", "unitPrice": 2.0, "sold": 3},
    {"name": "Cherry", "unitPrice": 12.99, "sold": 7},
]
BRANCH3 = []


def _raw_total(*sources):
    return sum(r["unitPrice"] * r["sold"] for source in sources for r in source)


class TestAggregate:
    def test_same_product_across_sources(self):
        result = aggregate([
            [{"name": "A", "unitPrice": 10, "sold": 2}],
            [{"name": "A", "unitPrice": 5, "sold": 1}],
        ])
        assert result == {"A": RevenueEntry(name="A", revenue=25.0)}

    def test_same_product_within_one_source(self):
        result = aggregate([[
            RawRecord("A", 1.0, 1),
            RawRecord("A", 2.0, 2),
        ]])
        assert result["A"].revenue == 5.0

    def test_keys_are_product_names(self):
        result = aggregate([BRANCH1, BRANCH2, BRANCH3])
        assert set(result) == {"Apple", "Banana", "Cherry"}
        assert all(entry.name == name for name, entry in result.items())

    def test_total_matches_raw_records(self):
        result = aggregate([BRANCH1, BRANCH2, BRANCH3])
        assert sum(e.revenue for e in result.values()) == pytest.approx(_raw_total(BRANCH1, BRANCH2))

    def test_merge_order_does_not_change_result(self):
        forward = aggregate([BRANCH1, BRANCH2, BRANCH3])
        backward = aggregate([BRANCH3, BRANCH2, BRANCH1])
        assert set(forward) == set(backward)
        for name in forward:
            assert forward[name].revenue == pytest.approx(backward[name].revenue)

    def test_idempotent(self):
        first = aggregate([BRANCH1, BRANCH2])
        second = aggregate([BRANCH1, BRANCH2])
        assert first == second

    def test_no_sources(self):
        assert aggregate([]) == {}

    def test_only_empty_sources(self):
        assert aggregate([[], []]) == {}

    def test_zero_sold_still_creates_entry(self):
        result = aggregate([[{"name": "Unsold", "unitPrice": 9.99, "sold": 0}]])
        assert result["Unsold"].revenue == 0.0

    def test_does_not_round(self):
        result = aggregate([[{"name": "X", "unitPrice": 0.1, "sold": 3}]])
        assert result["X"].revenue == 0.1 * 3


class TestAggregateInvalidRecords:
    def test_missing_name(self):
        with pytest.raises(InvalidRecordError) as exc:
            aggregate([[{"unitPrice": 1, "sold": 1}]])
        assert exc.value.field == "name"

    def test_non_numeric_price(self):
        with pytest.raises(InvalidRecordError) as exc:
            aggregate([[{"name": "A", "unitPrice": "1.50", "sold": 1}]])
        assert exc.value.field == "unitPrice"

    def test_non_numeric_sold(self):
        with pytest.raises(InvalidRecordError) as exc:
            aggregate([[{"name": "A", "unitPrice": 1, "sold": None}]])
        assert exc.value.field == "sold"

    def test_error_names_source_and_index(self):
        with pytest.raises(InvalidRecordError) as exc:
            aggregate(
                [BRANCH1, [{"name": "ok", "unitPrice": 1, "sold": 1}, {"name": "bad", "sold": 1}]],
                source_names=["branch1", "branch2"],
            )
        assert exc.value.field == "unitPrice"
        assert exc.value.source == "branch2"
        assert exc.value.index == 1
        assert "branch2" in str(exc.value)


class TestToRecord:
    def test_passes_raw_record_through(self):
        record = RawRecord("A", 1.0, 2)
        assert to_record(record) is record

    def test_converts_mapping(self):
        assert to_record({"name": "A", "unitPrice": 3, "sold": 2}) == RawRecord("A", 3.0, 2)
