from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from ..trace.steps import Step
from ..trace.trace import Trace, TraceStats


class InvalidInputError(ValueError):
    """Raised when a tracer is given input outside its domain (e.g. an empty pattern)."""


@dataclass(frozen=True)
class Complexity:
    """Asymptotic comparison counts for a search algorithm."""

    best: str
    average: str
    worst: str


@dataclass(frozen=True)
class TraceResult:
    """
    Result of tracing one search.

    Attributes:
        trace: Every step the algorithm performed, ending with a CompleteStep
        matches: Start offsets of each occurrence, in discovery order
        stats: Comparison statistics for the trace
    """

    trace: Trace
    matches: tuple[int, ...]
    stats: TraceStats

    @property
    def found(self) -> bool:
        return bool(self.matches)

    @property
    def comparisons(self) -> int:
        return self.stats.total_comparisons


class TraceAlgorithm(ABC):
    """
    Abstract base class for traced substring search algorithms.

    A tracer is bound to one pattern: its preprocessing tables are built in
    the constructor and only read afterwards, so the same tracer can trace
    any number of texts.
    """

    def __init__(self, pattern: str):
        """
        Initialize the algorithm for a pattern.

        Args:
            pattern: Non-empty pattern to search for

        Raises:
            InvalidInputError: If the pattern is not a non-empty string
        """
        self.validate_pattern(pattern)
        self.pattern = pattern
        self.tables = self.build_tables()

    @abstractmethod
    def build_tables(self) -> Any:
        """
        Build the preprocessing tables for self.pattern.

        Returns:
            The algorithm-specific tables object
        """
        pass

    @abstractmethod
    def trace(self, text: str) -> TraceResult:
        """
        Simulate the search over text, recording every step.

        Args:
            text: The text to search in (may be empty)

        Returns:
            A TraceResult with the trace, match list and statistics
        """
        pass

    @abstractmethod
    def get_algorithm_name(self) -> str:
        pass

    @abstractmethod
    def worst_case_comparisons(self, text_length: int) -> int:
        """Worst-case comparison count for a text of this length."""
        pass

    @abstractmethod
    def get_complexity(self) -> Complexity:
        pass

    @staticmethod
    def validate_pattern(pattern: str) -> None:
        if not isinstance(pattern, str):
            raise InvalidInputError(
                f"Pattern must be a string, got {type(pattern).__name__}"
            )
        if len(pattern) == 0:
            raise InvalidInputError("Pattern cannot be empty")

    @staticmethod
    def validate_text(text: str) -> None:
        if not isinstance(text, str):
            raise InvalidInputError(f"Text must be a string, got {type(text).__name__}")

    def _finish(self, text: str, steps: list[Step], matches: list[int]) -> TraceResult:
        """Freeze the collected steps and matches into a TraceResult."""
        trace = Trace(steps)
        stats = TraceStats(
            total_comparisons=trace.comparison_count,
            worst_case_comparisons=self.worst_case_comparisons(len(text)),
            matches_found=len(matches),
            steps=len(trace),
        )
        return TraceResult(trace=trace, matches=tuple(matches), stats=stats)

    def __str__(self) -> str:
        """String representation of the algorithm."""
        return f"{self.get_algorithm_name()}"
