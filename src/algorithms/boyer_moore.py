from dataclasses import dataclass

from ..preprocessing.bad_character import BadCharacterTable, build_bad_character_table
from ..preprocessing.good_suffix import GoodSuffixTable, build_good_suffix_table
from ..trace.steps import (
    AlignStep,
    Comparison,
    CompareStep,
    CompleteStep,
    MatchFoundStep,
    ShiftDecisionStep,
    Step,
    Window,
)
from .algorithm import Complexity, TraceAlgorithm, TraceResult

# Every window move is at least this far, so the outer loop always terminates.
MIN_SHIFT = 1


@dataclass(frozen=True)
class BoyerMooreTables:
    bad_character: BadCharacterTable
    good_suffix: GoodSuffixTable


class BoyerMooreTracer(TraceAlgorithm):
    """
    Boyer-Moore search (bad character + good suffix rules) with a full step trace.

    Each window is scanned right to left. On a mismatch the window moves by
    the larger of the two rule shifts; after a full match it moves by the
    good-suffix shift for the whole pattern.

    Time Complexity: O(n / m) best case, O(n * m) worst case for this variant
    Space Complexity: O(m + sigma) tables, O(n * m) trace in the worst case
    """

    tables: BoyerMooreTables

    def build_tables(self) -> BoyerMooreTables:
        return BoyerMooreTables(
            bad_character=build_bad_character_table(self.pattern),
            good_suffix=build_good_suffix_table(self.pattern),
        )

    def trace(self, text: str) -> TraceResult:
        self.validate_text(text)
        pattern = self.pattern
        bad = self.tables.bad_character
        good = self.tables.good_suffix
        n, m = len(text), len(pattern)

        steps: list[Step] = []
        matches: list[int] = []

        s = 0
        while s <= n - m:
            window = Window.at(s, m)
            steps.append(AlignStep(window=window))

            j = m - 1
            while j >= 0 and pattern[j] == text[s + j]:
                steps.append(self._compare(window, text, s + j, j, matched=True))
                j -= 1

            if j < 0:
                matches.append(s)
                steps.append(MatchFoundStep(window=window, position=s))
                good_suffix_shift = good.after_match()
                shift = max(MIN_SHIFT, good_suffix_shift)
                steps.append(
                    ShiftDecisionStep(
                        window=Window.at(s + shift, m),
                        bad_character_shift=None,
                        good_suffix_shift=good_suffix_shift,
                        shift=shift,
                    )
                )
            else:
                steps.append(self._compare(window, text, s + j, j, matched=False))
                bad_character_shift = max(
                    MIN_SHIFT, j - bad.last_occurrence(text[s + j])
                )
                good_suffix_shift = good.after_mismatch(j)
                shift = max(bad_character_shift, good_suffix_shift)
                steps.append(
                    ShiftDecisionStep(
                        window=Window.at(s + shift, m),
                        bad_character_shift=bad_character_shift,
                        good_suffix_shift=good_suffix_shift,
                        shift=shift,
                    )
                )
            s += shift

        steps.append(CompleteStep())
        return self._finish(text, steps, matches)

    def _compare(
        self,
        window: Window,
        text: str,
        text_index: int,
        pattern_index: int,
        matched: bool,
    ) -> CompareStep:
        return CompareStep(
            window=window,
            comparison=Comparison(text_index, pattern_index, matched),
            text_char=text[text_index],
            pattern_char=self.pattern[pattern_index],
            right_to_left=True,
        )

    def worst_case_comparisons(self, text_length: int) -> int:
        return text_length * len(self.pattern)

    def get_complexity(self) -> Complexity:
        return Complexity(best="O(n/m)", average="O(n)", worst="O(n·m)")

    def get_algorithm_name(self) -> str:
        return "Boyer-Moore"
