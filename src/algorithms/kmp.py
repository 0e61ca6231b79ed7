from ..preprocessing.lps import LPSTable, build_lps
from ..trace.steps import (
    Comparison,
    CompareStep,
    CompleteStep,
    FallbackStep,
    IncrementStep,
    MatchFoundStep,
    Step,
    Window,
)
from .algorithm import Complexity, TraceAlgorithm, TraceResult


class KMPTracer(TraceAlgorithm):
    """
    Knuth-Morris-Pratt search with a full step trace.

    The text cursor never moves backwards; on a mismatch the pattern cursor
    falls back along the LPS table instead.

    Time Complexity: O(n + m) - O(m) preprocessing, at most 2n comparisons
    Space Complexity: O(m) tables, O(n) trace
    """

    tables: LPSTable

    def build_tables(self) -> LPSTable:
        return build_lps(self.pattern)

    @property
    def lps(self) -> LPSTable:
        return self.tables

    def trace(self, text: str) -> TraceResult:
        self.validate_text(text)
        pattern, lps = self.pattern, self.tables
        n, m = len(text), len(pattern)

        steps: list[Step] = []
        matches: list[int] = []

        if m > n:
            # no window fits, nothing to compare
            steps.append(CompleteStep())
            return self._finish(text, steps, matches)

        i = j = 0
        while i < n:
            matched = text[i] == pattern[j]
            steps.append(
                CompareStep(
                    window=Window.at(i - j, m),
                    comparison=Comparison(i, j, matched),
                    text_char=text[i],
                    pattern_char=pattern[j],
                )
            )

            if matched:
                i += 1
                j += 1
                if j == m:
                    start = i - j
                    matches.append(start)
                    steps.append(
                        MatchFoundStep(window=Window.at(start, m), position=start)
                    )
                    j = self._reset_after_match(j)
            elif j != 0:
                old_j = j
                j = lps[j - 1]
                steps.append(
                    FallbackStep(
                        window=Window.at(i - j, m),
                        text_index=i,
                        old_pattern_index=old_j,
                        new_pattern_index=j,
                    )
                )
            else:
                steps.append(
                    IncrementStep(
                        window=Window.at(i + 1, m),
                        old_text_index=i,
                        new_text_index=i + 1,
                    )
                )
                i += 1

        steps.append(CompleteStep())
        return self._finish(text, steps, matches)

    def _reset_after_match(self, j: int) -> int:
        """
        Pattern cursor after a full match of length j.

        trace() only calls this with j == m >= 1; the j == 0 branch keeps
        lps[j - 1] from wrapping around to the last entry if that ever changes.
        """
        if j == 0:
            return 0
        return self.tables[j - 1]

    def worst_case_comparisons(self, text_length: int) -> int:
        return text_length + len(self.pattern)

    def get_complexity(self) -> Complexity:
        return Complexity(best="O(n)", average="O(n)", worst="O(n+m)")

    def get_algorithm_name(self) -> str:
        return "KMP"
