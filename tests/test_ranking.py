"""Tests for newest-first ordering and type aggregation."""

from azure_ops.core.processors.ranking import (
    count_by_type,
    newest_first,
    sort_by_creation,
    top_n,
)

from .conftest import make_record


def names(records):
    return [record.name for record in records]


class TestOrdering:
    def test_three_records_newest_first(self):
        t1 = make_record("t1", "2024-01-01T00:00:00Z")
        t2 = make_record("t2", "2024-02-01T00:00:00Z")
        t3 = make_record("t3", "2024-03-01T00:00:00Z")
        assert names(newest_first([t2, t1, t3])) == ["t3", "t2", "t1"]

    def test_is_exact_reverse_of_stable_ascending_sort(self, five_records):
        records = five_records + [
            make_record("tie-a", "2024-03-01T08:00:00Z"),
            make_record("unknown", None),
        ]
        assert newest_first(records) == list(reversed(sort_by_creation(records)))

    def test_ascending_sort_is_stable(self):
        a = make_record("a", "2024-01-01T00:00:00Z")
        b = make_record("b", "2024-01-01T00:00:00Z")
        assert names(sort_by_creation([a, b])) == ["a", "b"]
        assert names(newest_first([a, b])) == ["b", "a"]

    def test_missing_and_unparsable_times_sort_last(self):
        records = [
            make_record("none", None),
            make_record("new", "2024-06-01T00:00:00Z"),
            make_record("garbage", "yesterday"),
            make_record("old", "2020-06-01T00:00:00Z"),
        ]
        assert names(newest_first(records))[:2] == ["new", "old"]
        assert set(names(newest_first(records))[2:]) == {"none", "garbage"}

    def test_mixed_offsets_compare_by_instant(self):
        earlier = make_record("earlier", "2024-01-01T10:00:00+02:00")  # 08:00 UTC
        later = make_record("later", "2024-01-01T09:00:00Z")
        assert names(newest_first([earlier, later])) == ["later", "earlier"]

    def test_empty(self):
        assert newest_first([]) == []


class TestTopN:
    def test_limits_rows(self, five_records):
        ordered = newest_first(five_records)
        assert names(top_n(ordered, 2)) == ["st-1", "vm-3"]

    def test_limit_larger_than_total(self, five_records):
        assert len(top_n(five_records, 100)) == 5

    def test_zero_limit(self, five_records):
        assert top_n(five_records, 0) == []


class TestCountByType:
    def test_sum_equals_total(self, five_records):
        counts = count_by_type(five_records)
        assert sum(item.count for item in counts) == len(five_records)

    def test_sorted_descending_with_name_tiebreak(self, five_records):
        counts = count_by_type(five_records)
        assert [(c.type, c.count) for c in counts] == [
            ("Microsoft.Compute/virtualMachines", 3),
            ("Microsoft.Compute/disks", 1),
            ("Microsoft.Storage/storageAccounts", 1),
        ]

    def test_empty(self):
        assert count_by_type([]) == []
