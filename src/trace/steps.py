"""
Step records emitted by the KMP and Boyer-Moore tracers.

Each kind of step is its own frozen dataclass so the fields that are valid
for it are known up front. All of them share the same read-only surface:
``kind``, ``window``, ``comparison``, ``action`` and ``summary``, which is
enough to render a step without looking at its neighbours.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Union


class StepKind(str, Enum):
    ALIGN = "align"
    COMPARE = "compare"
    FALLBACK = "fallback"
    INCREMENT = "increment"
    SHIFT_DECISION = "shift_decision"
    MATCH_FOUND = "match_found"
    COMPLETE = "complete"


@dataclass(frozen=True)
class Comparison:
    """One character comparison: text[text_index] against pattern[pattern_index]."""

    text_index: int
    pattern_index: int
    matched: bool

    @property
    def coordinate(self) -> tuple[int, int]:
        return (self.text_index, self.pattern_index)


@dataclass(frozen=True)
class Window:
    """Inclusive span of the text aligned against the whole pattern."""

    start: int
    end: int

    @classmethod
    def at(cls, start: int, pattern_length: int) -> "Window":
        return cls(start, start + pattern_length - 1)

    def __len__(self) -> int:
        return self.end - self.start + 1

    def __contains__(self, text_index: int) -> bool:
        return self.start <= text_index <= self.end


class _StepBase:
    kind: ClassVar[StepKind]

    @property
    def action(self) -> str:
        raise NotImplementedError

    @property
    def summary(self) -> str:
        raise NotImplementedError


class _NoComparison:
    @property
    def comparison(self) -> Optional[Comparison]:
        return None


@dataclass(frozen=True)
class AlignStep(_NoComparison, _StepBase):
    kind: ClassVar[StepKind] = StepKind.ALIGN

    window: Window

    @property
    def action(self) -> str:
        return f"Align pattern at s={self.window.start}"

    @property
    def summary(self) -> str:
        return f"Window [{self.window.start}, {self.window.end}]"


@dataclass(frozen=True)
class CompareStep(_StepBase):
    """
    One character comparison inside the current window.

    ``right_to_left`` marks a Boyer-Moore scan, whose action text reports the
    outcome directly instead of the KMP "Compare ... with ..." wording.
    """

    kind: ClassVar[StepKind] = StepKind.COMPARE

    window: Window
    comparison: Comparison
    text_char: str
    pattern_char: str
    right_to_left: bool = False

    @property
    def matched(self) -> bool:
        return self.comparison.matched

    @property
    def action(self) -> str:
        if self.right_to_left:
            return self.summary
        c = self.comparison
        return (
            f"Compare text[{c.text_index}]='{self.text_char}' "
            f"with pattern[{c.pattern_index}]='{self.pattern_char}'"
        )

    @property
    def summary(self) -> str:
        c = self.comparison
        outcome = "Match" if c.matched else "Mismatch"
        return f"{outcome} at text[{c.text_index}] & pattern[{c.pattern_index}]"


@dataclass(frozen=True)
class FallbackStep(_NoComparison, _StepBase):
    """KMP only: pattern cursor retreats along the LPS table, text cursor stays."""

    kind: ClassVar[StepKind] = StepKind.FALLBACK

    window: Window
    text_index: int
    old_pattern_index: int
    new_pattern_index: int

    @property
    def action(self) -> str:
        return (
            f"Mismatch -> fallback j from {self.old_pattern_index} "
            f"to {self.new_pattern_index}"
        )

    @property
    def summary(self) -> str:
        return f"Fallback j to {self.new_pattern_index}"


@dataclass(frozen=True)
class IncrementStep(_NoComparison, _StepBase):
    """
    KMP only: mismatch with j == 0, the text cursor advances by one.

    Like FallbackStep, ``window`` is the alignment after the move.
    """

    kind: ClassVar[StepKind] = StepKind.INCREMENT

    window: Window
    old_text_index: int
    new_text_index: int

    @property
    def action(self) -> str:
        return (
            f"Mismatch and j=0 -> i from {self.old_text_index} "
            f"to {self.new_text_index}"
        )

    @property
    def summary(self) -> str:
        return "Increment i"


@dataclass(frozen=True)
class ShiftDecisionStep(_NoComparison, _StepBase):
    """
    Boyer-Moore only: the window moves right by ``shift``.

    ``window`` is the window after the move, so a renderer shows the pattern
    in its new position at this step.

    ``bad_character_shift`` is None when the shift follows a full match,
    since only the good-suffix rule applies there.
    """

    kind: ClassVar[StepKind] = StepKind.SHIFT_DECISION

    window: Window
    bad_character_shift: Optional[int]
    good_suffix_shift: int
    shift: int

    @property
    def old_start(self) -> int:
        return self.window.start - self.shift

    @property
    def new_start(self) -> int:
        return self.window.start

    @property
    def action(self) -> str:
        if self.bad_character_shift is None:
            return f"Shift after match by {self.shift}"
        return (
            f"Bad Character shift {self.bad_character_shift}, "
            f"Good Suffix shift {self.good_suffix_shift} -> use {self.shift}"
        )

    @property
    def summary(self) -> str:
        return f"Shift from {self.old_start} to {self.new_start}"


@dataclass(frozen=True)
class MatchFoundStep(_NoComparison, _StepBase):
    kind: ClassVar[StepKind] = StepKind.MATCH_FOUND

    window: Window
    position: int

    @property
    def action(self) -> str:
        return f"Pattern found at {self.position}"

    @property
    def summary(self) -> str:
        return f"Pattern occurs at {self.position}"


@dataclass(frozen=True)
class CompleteStep(_NoComparison, _StepBase):
    kind: ClassVar[StepKind] = StepKind.COMPLETE

    @property
    def window(self) -> Optional[Window]:
        return None

    @property
    def action(self) -> str:
        return "Search complete"

    @property
    def summary(self) -> str:
        return "Search finished."


Step = Union[
    AlignStep,
    CompareStep,
    FallbackStep,
    IncrementStep,
    ShiftDecisionStep,
    MatchFoundStep,
    CompleteStep,
]
