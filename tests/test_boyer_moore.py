"""
Comprehensive tests for the Boyer-Moore tracer.

Tests cover exact step sequences, both shift rules, the minimum shift,
match lists and trace invariants.
"""

import pytest

from src.algorithms.algorithm import InvalidInputError
from src.algorithms.boyer_moore import MIN_SHIFT, BoyerMooreTables, BoyerMooreTracer
from src.algorithms.brute_force import brute_force_matches
from src.trace.steps import (
    AlignStep,
    Comparison,
    CompareStep,
    CompleteStep,
    MatchFoundStep,
    ShiftDecisionStep,
    StepKind,
    Window,
)


def _bm_compare(window, text_index, pattern_index, matched, text_char, pattern_char):
    return CompareStep(
        window,
        Comparison(text_index, pattern_index, matched),
        text_char,
        pattern_char,
        right_to_left=True,
    )


class TestBoyerMooreTracer:
    """Test suite for BoyerMooreTracer."""

    def test_init_builds_tables(self):
        tracer = BoyerMooreTracer("ABABCABAB")

        assert isinstance(tracer.tables, BoyerMooreTables)
        assert dict(tracer.tables.bad_character) == {"A": 7, "B": 8, "C": 4}
        assert tracer.tables.good_suffix.shifts == (5, 5, 5, 5, 5, 5, 7, 2, 9, 1)

    def test_classic_example(self, classic_pair):
        text, pattern = classic_pair

        assert BoyerMooreTracer(pattern).trace(text).matches == (10,)

    def test_exact_trace_bad_character_shift(self):
        """Test a mismatch on an absent character, then a full match."""
        result = BoyerMooreTracer("ABAB").trace("ABACABAB")

        assert list(result.trace) == [
            AlignStep(Window(0, 3)),
            _bm_compare(Window(0, 3), 3, 3, False, "C", "B"),
            ShiftDecisionStep(
                Window(4, 7), bad_character_shift=4, good_suffix_shift=1, shift=4
            ),
            AlignStep(Window(4, 7)),
            _bm_compare(Window(4, 7), 7, 3, True, "B", "B"),
            _bm_compare(Window(4, 7), 6, 2, True, "A", "A"),
            _bm_compare(Window(4, 7), 5, 1, True, "B", "B"),
            _bm_compare(Window(4, 7), 4, 0, True, "A", "A"),
            MatchFoundStep(Window(4, 7), position=4),
            ShiftDecisionStep(
                Window(6, 9), bad_character_shift=None, good_suffix_shift=2, shift=2
            ),
            CompleteStep(),
        ]
        assert result.matches == (4,)
        assert result.stats.total_comparisons == 5
        assert result.stats.worst_case_comparisons == 32

    def test_good_suffix_shift_wins(self):
        """Test the good-suffix rule beating the bad-character rule."""
        result = BoyerMooreTracer("ABAB").trace("CBABABAB")

        shifts = [step for step in result.trace if isinstance(step, ShiftDecisionStep)]
        first = shifts[0]
        assert first.window == Window(2, 5)
        assert first.old_start == 0
        assert first.bad_character_shift == 1
        assert first.good_suffix_shift == 2
        assert first.shift == 2
        assert result.matches == (2, 4)

    def test_bad_character_shift_clamped(self):
        """Test a bad character right of j still shifts the window by at least 1."""
        result = BoyerMooreTracer("AB").trace("BB")

        assert list(result.trace) == [
            AlignStep(Window(0, 1)),
            _bm_compare(Window(0, 1), 1, 1, True, "B", "B"),
            _bm_compare(Window(0, 1), 0, 0, False, "B", "A"),
            ShiftDecisionStep(
                Window(2, 3), bad_character_shift=1, good_suffix_shift=2, shift=2
            ),
            CompleteStep(),
        ]

    def test_single_character_pattern(self):
        result = BoyerMooreTracer("C").trace("ABC")

        assert result.matches == (2,)
        assert [step.kind for step in result.trace] == [
            StepKind.ALIGN,
            StepKind.COMPARE,
            StepKind.SHIFT_DECISION,
            StepKind.ALIGN,
            StepKind.COMPARE,
            StepKind.SHIFT_DECISION,
            StepKind.ALIGN,
            StepKind.COMPARE,
            StepKind.MATCH_FOUND,
            StepKind.SHIFT_DECISION,
            StepKind.COMPLETE,
        ]
        assert result.stats.efficiency == 0.0

    def test_overlapping_matches(self):
        assert BoyerMooreTracer("AA").trace("AAAAAA").matches == (0, 1, 2, 3, 4)

    @pytest.mark.parametrize("text", ["", "A", "AB"])
    def test_pattern_longer_than_text(self, text):
        result = BoyerMooreTracer("ABC").trace(text)

        assert list(result.trace) == [CompleteStep()]
        assert result.matches == ()

    def test_pattern_equals_text(self):
        result = BoyerMooreTracer("ABC").trace("ABC")

        assert result.matches == (0,)
        assert result.trace[-2].kind is StepKind.SHIFT_DECISION

    def test_empty_pattern_rejected(self):
        with pytest.raises(InvalidInputError):
            BoyerMooreTracer("")

    def test_shifts_always_positive(self, edge_case_pairs):
        for text, pattern in edge_case_pairs:
            for step in BoyerMooreTracer(pattern).trace(text).trace:
                if isinstance(step, ShiftDecisionStep):
                    assert step.shift >= MIN_SHIFT
                    assert step.shift >= step.good_suffix_shift
                    if step.bad_character_shift is not None:
                        assert step.shift == max(
                            step.bad_character_shift, step.good_suffix_shift
                        )

    def test_windows_follow_shift_decisions(self, edge_case_pairs):
        """Test each Align window starts where the previous shift pointed."""
        for text, pattern in edge_case_pairs:
            expected_start = 0
            for step in BoyerMooreTracer(pattern).trace(text).trace:
                if isinstance(step, AlignStep):
                    assert step.window.start == expected_start
                elif isinstance(step, ShiftDecisionStep):
                    expected_start = step.new_start

    def test_shift_step_carries_moved_window(self, edge_case_pairs):
        """Test a shift step shows the window where the next Align puts it."""
        for text, pattern in edge_case_pairs:
            m = len(pattern)
            current = None
            for step in BoyerMooreTracer(pattern).trace(text).trace:
                if isinstance(step, AlignStep):
                    current = step.window
                elif isinstance(step, ShiftDecisionStep):
                    assert step.old_start == current.start
                    assert step.window == Window.at(current.start + step.shift, m)
                    assert step.window.start == step.new_start

    def test_compare_action_reports_outcome(self):
        """Test right-to-left comparisons read as a match or a mismatch."""
        result = BoyerMooreTracer("AB").trace("BB")
        compares = [step for _, step in result.trace.compare_steps()]

        assert [step.action for step in compares] == [
            "Match at text[1] & pattern[1]",
            "Mismatch at text[0] & pattern[0]",
        ]

    def test_window_invariants(self, edge_case_pairs):
        for text, pattern in edge_case_pairs:
            for step in BoyerMooreTracer(pattern).trace(text).trace:
                if step.comparison is None:
                    continue
                c = step.comparison
                assert len(step.window) == len(pattern)
                assert c.text_index in step.window
                assert step.window.start == c.text_index - c.pattern_index
                assert c.matched == (text[c.text_index] == pattern[c.pattern_index])

    def test_matches_brute_force(self, edge_case_pairs):
        for text, pattern in edge_case_pairs:
            expected = tuple(brute_force_matches(text, pattern))
            assert BoyerMooreTracer(pattern).trace(text).matches == expected

    def test_name_and_complexity(self):
        tracer = BoyerMooreTracer("AB")

        assert tracer.get_algorithm_name() == "Boyer-Moore"
        assert tracer.get_complexity().best == "O(n/m)"
        assert tracer.worst_case_comparisons(10) == 20
