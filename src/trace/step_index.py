from collections.abc import Iterable
from typing import Optional

from .trace import Trace


class StepIndex:
    """
    Reverse lookup from a compared (text_index, pattern_index) cell to trace steps.

    Built once from a finished trace. A coordinate that was never compared
    (Boyer-Moore skips most cells) is a miss, reported as None rather than
    an exception.
    """

    def __init__(self, occurrences: dict[tuple[int, int], tuple[int, ...]]):
        self._occurrences = occurrences

    @classmethod
    def from_trace(cls, trace: Trace) -> "StepIndex":
        """Index every comparison step of the trace by its coordinate."""
        positions: dict[tuple[int, int], list[int]] = {}
        for position, step in trace.compare_steps():
            positions.setdefault(step.comparison.coordinate, []).append(position)
        return cls({coord: tuple(found) for coord, found in positions.items()})

    def lookup(self, text_index: int, pattern_index: int) -> Optional[int]:
        """
        Find the first step that compared text[text_index] with pattern[pattern_index].

        Args:
            text_index: Index into the text
            pattern_index: Index into the pattern

        Returns:
            The trace position of that step, or None if the cell was never compared
        """
        found = self._occurrences.get((text_index, pattern_index))
        return found[0] if found else None

    def occurrences(self, text_index: int, pattern_index: int) -> tuple[int, ...]:
        """All trace positions that compared this cell, in trace order."""
        return self._occurrences.get((text_index, pattern_index), ())

    def coordinates(self) -> Iterable[tuple[int, int]]:
        return self._occurrences.keys()

    def __contains__(self, coordinate) -> bool:
        return coordinate in self._occurrences

    def __len__(self) -> int:
        return len(self._occurrences)

    def __eq__(self, other) -> bool:
        if not isinstance(other, StepIndex):
            return NotImplemented
        return self._occurrences == other._occurrences

    __hash__ = None  # type: ignore[assignment]
