from bisect import bisect_right
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Union

from .steps import CompareStep, CompleteStep, Step


class Trace(Sequence):
    """
    Immutable, randomly indexable record of one search run.

    The trace always ends with exactly one CompleteStep. Positions of the
    comparison steps are precomputed so comparison counts up to any step are
    answered without rescanning.
    """

    def __init__(self, steps: Iterable[Step]):
        self._steps: tuple[Step, ...] = tuple(steps)
        if not self._steps or not isinstance(self._steps[-1], CompleteStep):
            raise ValueError("Trace must end with a CompleteStep")
        if sum(isinstance(step, CompleteStep) for step in self._steps) != 1:
            raise ValueError("Trace must contain exactly one CompleteStep")

        self._compare_positions: tuple[int, ...] = tuple(
            position
            for position, step in enumerate(self._steps)
            if isinstance(step, CompareStep)
        )

    def __getitem__(self, index: Union[int, slice]):
        return self._steps[index]

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(self._steps)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Trace):
            return NotImplemented
        return self._steps == other._steps

    def __hash__(self) -> int:
        return hash(self._steps)

    def __repr__(self) -> str:
        return f"Trace({len(self._steps)} steps, {self.comparison_count} comparisons)"

    @property
    def steps(self) -> tuple[Step, ...]:
        return self._steps

    @property
    def comparison_count(self) -> int:
        """Number of character comparisons recorded in the trace."""
        return len(self._compare_positions)

    def compare_steps(self) -> Iterator[tuple[int, CompareStep]]:
        """Yield (position, step) for every comparison step, in trace order."""
        for position in self._compare_positions:
            yield position, self._steps[position]  # type: ignore[misc]

    def comparisons_until(self, position: int) -> int:
        """
        Count comparisons performed up to and including the step at position.

        Args:
            position: Step index, negative values count from the end

        Returns:
            Number of CompareSteps in trace[0..position]
        """
        if position < 0:
            position += len(self._steps)
        if not 0 <= position < len(self._steps):
            raise IndexError("trace position out of range")
        return bisect_right(self._compare_positions, position)

    def log(self) -> list[str]:
        """Numbered one-line summaries of every step."""
        return [f"#{i + 1} {step.summary}" for i, step in enumerate(self._steps)]


@dataclass(frozen=True)
class TraceStats:
    """
    Comparison statistics for a finished trace.

    Attributes:
        total_comparisons: Character comparisons the algorithm performed
        worst_case_comparisons: The algorithm's worst-case bound for this input size
        matches_found: Number of pattern occurrences
        steps: Length of the trace
    """

    total_comparisons: int
    worst_case_comparisons: int
    matches_found: int
    steps: int

    @property
    def efficiency(self) -> float:
        """Fraction of the worst case that was avoided, 0.0 when nothing was compared."""
        if self.total_comparisons == 0 or self.worst_case_comparisons == 0:
            return 0.0
        return 1 - self.total_comparisons / self.worst_case_comparisons
