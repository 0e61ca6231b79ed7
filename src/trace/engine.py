"""
Build operation: one call turns (text, pattern, algorithm) into a complete,
immutable SearchRun holding the tables, the trace, the matches and the
reverse step index.

Nothing is cached between calls; building again with new inputs simply
produces a new run.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from ..algorithms.algorithm import (
    Complexity,
    InvalidInputError,
    TraceAlgorithm,
    TraceResult,
)
from ..algorithms.boyer_moore import BoyerMooreTables, BoyerMooreTracer
from ..algorithms.kmp import KMPTracer
from ..preprocessing.lps import LPSTable
from .grid import comparison_grid
from .step_index import StepIndex
from .steps import Step
from .trace import Trace, TraceStats


class SearchAlgorithm(str, Enum):
    KMP = "KMP"
    BM = "BM"

    @classmethod
    def parse(cls, value: Union["SearchAlgorithm", str]) -> "SearchAlgorithm":
        """Accept a member, its value or a common spelling such as 'boyer-moore'."""
        if isinstance(value, SearchAlgorithm):
            return value
        if isinstance(value, str):
            key = value.strip().upper().replace("-", "_").replace(" ", "_")
            key = _ALIASES.get(key, key)
            if key in cls.__members__:
                return cls[key]
        raise InvalidInputError(f"Unknown algorithm: {value!r}")


_ALIASES = {
    "BOYER_MOORE": "BM",
    "BOYERMOORE": "BM",
    "KNUTH_MORRIS_PRATT": "KMP",
}

_TRACERS: dict[SearchAlgorithm, type[TraceAlgorithm]] = {
    SearchAlgorithm.KMP: KMPTracer,
    SearchAlgorithm.BM: BoyerMooreTracer,
}


@dataclass(frozen=True)
class KMPTables:
    lps: LPSTable


Tables = Union[KMPTables, BoyerMooreTables]


@dataclass(frozen=True)
class SearchRun:
    """
    Everything produced for one (text, pattern, algorithm) input.

    Attributes:
        algorithm: Which algorithm produced the run
        text: The searched text
        pattern: The pattern searched for
        tables: KMPTables or BoyerMooreTables for the pattern
        result: Trace, matches and statistics
        step_index: Reverse lookup from compared cells to trace positions
        complexity: Asymptotic bounds of the algorithm
    """

    algorithm: SearchAlgorithm
    text: str
    pattern: str
    tables: Tables
    result: TraceResult
    step_index: StepIndex
    complexity: Complexity

    @property
    def trace(self) -> Trace:
        return self.result.trace

    @property
    def matches(self) -> tuple[int, ...]:
        return self.result.matches

    @property
    def stats(self) -> TraceStats:
        return self.result.stats

    def step(self, position: int) -> Step:
        return self.result.trace[position]

    def lookup(self, text_index: int, pattern_index: int) -> Optional[int]:
        """First trace position that compared this cell, None if never compared."""
        return self.step_index.lookup(text_index, pattern_index)

    def grid(self) -> tuple[tuple[bool, ...], ...]:
        return comparison_grid(self.text, self.pattern)


def create_tracer(
    pattern: str, algorithm: Union[SearchAlgorithm, str]
) -> TraceAlgorithm:
    """Instantiate the tracer for algorithm, building its tables for pattern."""
    return _TRACERS[SearchAlgorithm.parse(algorithm)](pattern)


def build(
    text: str,
    pattern: str,
    algorithm: Union[SearchAlgorithm, str] = SearchAlgorithm.KMP,
) -> SearchRun:
    """
    Build tables, trace and step index for one search.

    Args:
        text: Text to search in (may be empty)
        pattern: Non-empty pattern to search for
        algorithm: SearchAlgorithm member or name ("KMP", "BM", "boyer-moore")

    Returns:
        A fully materialized SearchRun

    Raises:
        InvalidInputError: On an empty or non-string pattern, a non-string
            text, or an unknown algorithm
    """
    kind = SearchAlgorithm.parse(algorithm)
    tracer = create_tracer(pattern, kind)
    result = tracer.trace(text)

    if kind is SearchAlgorithm.KMP:
        tables: Tables = KMPTables(lps=tracer.tables)
    else:
        tables = tracer.tables

    return SearchRun(
        algorithm=kind,
        text=text,
        pattern=pattern,
        tables=tables,
        result=result,
        step_index=StepIndex.from_trace(result.trace),
        complexity=tracer.get_complexity(),
    )
