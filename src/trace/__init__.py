"""
Step records, traces and reverse lookup for traced substring search.

The build operation lives in ``src.trace.engine``.
"""

from .grid import comparison_grid, render_grid
from .step_index import StepIndex
from .steps import (
    AlignStep,
    CompareStep,
    Comparison,
    CompleteStep,
    FallbackStep,
    IncrementStep,
    MatchFoundStep,
    ShiftDecisionStep,
    Step,
    StepKind,
    Window,
)
from .trace import Trace, TraceStats

__all__ = [
    "AlignStep",
    "CompareStep",
    "Comparison",
    "CompleteStep",
    "FallbackStep",
    "IncrementStep",
    "MatchFoundStep",
    "ShiftDecisionStep",
    "Step",
    "StepIndex",
    "StepKind",
    "Trace",
    "TraceStats",
    "Window",
    "comparison_grid",
    "render_grid",
]
