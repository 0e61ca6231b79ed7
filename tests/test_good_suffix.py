"""
Tests for the Boyer-Moore good-suffix table.

Expected tables were worked through by hand with the two-pass border method.
"""

import pytest

from src.preprocessing.good_suffix import GoodSuffixTable, build_good_suffix_table


class TestBuildGoodSuffixTable:
    """Test suite for build_good_suffix_table."""

    @pytest.mark.parametrize(
        "pattern,expected",
        [
            ("A", (1, 1)),
            ("AA", (1, 1, 2)),
            ("AB", (2, 2, 1)),
            ("AAAA", (1, 1, 2, 3, 4)),
            ("ABAB", (2, 2, 2, 4, 1)),
            ("ABABCABAB", (5, 5, 5, 5, 5, 5, 7, 2, 9, 1)),
        ],
    )
    def test_known_shift_tables(self, pattern, expected):
        """Test shifts against hand-computed tables."""
        assert build_good_suffix_table(pattern).shifts == expected

    @pytest.mark.parametrize(
        "pattern,expected",
        [
            ("AAAA", (1, 2, 3, 4, 5)),
            ("ABAB", (2, 3, 4, 4, 5)),
            ("ABABCABAB", (5, 6, 7, 8, 9, 7, 8, 9, 9, 10)),
        ],
    )
    def test_border_positions(self, pattern, expected):
        """Test the border array kept from the first pass."""
        assert build_good_suffix_table(pattern).border_positions == expected

    @pytest.mark.parametrize(
        "pattern", ["A", "AB", "ABC", "AAAB", "ABABCABAB", "mississippi", "GCAGAGAG"]
    )
    def test_length_and_positive_shifts(self, pattern):
        """Test the table has m + 1 entries, each between 1 and m."""
        shifts = build_good_suffix_table(pattern).shifts

        assert len(shifts) == len(pattern) + 1
        assert all(1 <= shift <= len(pattern) for shift in shifts)

    @pytest.mark.parametrize("pattern", ["ABAB", "ABABCABAB", "AAAA", "abcab"])
    def test_full_match_shift_is_period(self, pattern):
        """Test shifts[0] equals m minus the widest border of the pattern."""
        m = len(pattern)
        widest = max(k for k in range(m) if pattern[:k] == pattern[m - k :])

        assert build_good_suffix_table(pattern).shifts[0] == m - widest

    def test_accessors_follow_indexing(self):
        """Test after_match uses entry 0 and after_mismatch(j) uses entry j + 1."""
        table = build_good_suffix_table("ABABCABAB")

        assert isinstance(table, GoodSuffixTable)
        assert table.after_match() == table[0] == 5
        assert table.after_mismatch(8) == table[9] == 1
        assert table.after_mismatch(5) == table[6] == 7
        assert len(table) == 10
