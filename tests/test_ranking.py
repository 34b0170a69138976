"""Tests for ranking scanned files by change count."""

import random

import pytest

from next_refactor.exceptions import DirectoryReadError
from next_refactor.models import FileChange, ScanResult
from next_refactor.ranking import rank


def make_result(*pairs):
    result = ScanResult()
    for path, count in pairs:
        result.add(FileChange(path, count))
    return result.freeze()


class TestRank:
    """Test rank function."""

    def test_empty_input(self):
        for n in (0, 1, 10):
            report = rank(ScanResult(), n)
            assert report.entries == ()
            assert report.is_empty
            assert report.total_files == 0
            assert report.limit == 0

    def test_sorted_descending(self):
        report = rank(make_result(("a", 3), ("b", 7), ("c", 5)), 3)
        assert [e.path for e in report.entries] == ["b", "c", "a"]

    def test_truncates_to_n(self):
        report = rank(make_result(("a", 3), ("b", 7), ("c", 5)), 2)
        assert [e.count for e in report.entries] == [7, 5]
        assert report.requested == 2
        assert report.limit == 2
        assert report.total_files == 3

    def test_n_clamped(self):
        report = rank(make_result(("a", 1)), 10)
        assert len(report.entries) == 1
        assert report.requested == 10
        assert report.limit == 1

    def test_n_zero(self):
        assert rank(make_result(("a", 1)), 0).entries == ()

    def test_negative_n_rejected(self):
        with pytest.raises(ValueError):
            rank(make_result(("a", 1)), -1)

    def test_ties_keep_discovery_order(self):
        """x.txt and y.txt tie at 5; the order is the input order, every time."""
        results = make_result(("x.txt", 5), ("y.txt", 5))
        first = rank(results, 2)
        second = rank(results, 2)
        assert [e.path for e in first.entries] == ["x.txt", "y.txt"]
        assert first.entries == second.entries

    def test_accepts_plain_iterable(self):
        report = rank([FileChange("a", 1), FileChange("b", 2)], 1)
        assert report.entries == (FileChange("b", 2),)

    def test_metadata_passed_through(self):
        result = ScanResult()
        result.add(FileChange("a", 1))
        result.record_skip(DirectoryReadError("secret", "Permission denied"))
        report = rank(result.freeze(), 5, elapsed_seconds=1.5, branch="dev", root="/r")
        assert report.elapsed_seconds == 1.5
        assert report.branch == "dev"
        assert report.root == "/r"
        assert report.skipped == 1

    def test_properties_on_random_input(self):
        rng = random.Random(42)
        for _ in range(50):
            size = rng.randint(0, 30)
            pairs = [(f"f{i}", rng.randint(0, 5)) for i in range(size)]
            results = make_result(*pairs)
            n = rng.randint(0, 40)
            report = rank(results, n)

            counts = [e.count for e in report.entries]
            assert counts == sorted(counts, reverse=True)
            assert len(report.entries) == min(n, size)
