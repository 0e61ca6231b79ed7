"""
Command-line trace runner.

Usage examples:
    python -m src.trace.runner ABABDABACDABABCABAB ABABCABAB
    python -m src.trace.runner ABABDABACDABABCABAB ABABCABAB --algorithm BM --tables
    python -m src.trace.runner --random 60 --text-kind dna --pattern ACG --lookup 5,2
"""

import argparse
import sys
from typing import Optional

from corpus.generate import CorpusGenerator

from ..algorithms.algorithm import InvalidInputError
from ..algorithms.boyer_moore import BoyerMooreTables
from .engine import KMPTables, SearchRun, build
from .grid import render_grid


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Trace KMP or Boyer-Moore substring search step by step"
    )
    parser.add_argument("text", nargs="?", default=None, help="Text to search in")
    parser.add_argument(
        "pattern_arg", nargs="?", default=None, metavar="pattern", help="Pattern"
    )
    parser.add_argument("--pattern", default=None, help="Pattern (alternative form)")
    parser.add_argument(
        "--algorithm", "-a", default="KMP", help="KMP or BM (default: KMP)"
    )
    parser.add_argument(
        "--random",
        type=int,
        default=None,
        metavar="N",
        help="Generate a random text of N characters instead of passing one",
    )
    parser.add_argument(
        "--text-kind", default="words", choices=["words", "dna", "binary", "abc"]
    )
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--tables", action="store_true", help="Print the tables")
    parser.add_argument("--grid", action="store_true", help="Print the comparison grid")
    parser.add_argument("--no-steps", action="store_true", help="Skip the step log")
    parser.add_argument(
        "--step", type=int, default=None, metavar="K", help="Show step K (1-based)"
    )
    parser.add_argument(
        "--lookup",
        default=None,
        metavar="T,P",
        help="Find the step that compared text[T] with pattern[P]",
    )
    return parser


def print_tables(run: SearchRun) -> None:
    tables = run.tables
    if isinstance(tables, KMPTables):
        print("LPS table:")
        print("  " + " ".join(f"{c:>2}" for c in run.pattern))
        print("  " + " ".join(f"{v:>2}" for v in tables.lps.values))
        print("Preprocess log:")
        for i, line in enumerate(tables.lps.log, 1):
            print(f"  {i:>3}. {line}")
    elif isinstance(tables, BoyerMooreTables):
        print("Bad character table:")
        for char, index in tables.bad_character.items():
            print(f"  {char!r}: {index}")
        print("Good suffix shifts:")
        print("  " + " ".join(f"{i:>2}" for i in range(len(tables.good_suffix))))
        print("  " + " ".join(f"{v:>2}" for v in tables.good_suffix.shifts))


def print_step(run: SearchRun, position: int) -> None:
    step = run.step(position)
    print(f"Step {position + 1} / {len(run.trace)} [{step.kind.value}]")
    print(f"  {step.action}")
    if step.window is not None:
        print(f"  Window [{step.window.start}, {step.window.end}]")
    print(
        f"  Comparisons so far: {run.trace.comparisons_until(position)}"
        f" / {run.stats.total_comparisons}"
    )


def print_summary(run: SearchRun) -> None:
    stats = run.stats
    complexity = run.complexity
    print(f"Algorithm: {run.algorithm.value}")
    print(
        f"Complexity: best {complexity.best}, average {complexity.average}, "
        f"worst {complexity.worst}"
    )
    print(f"Matches: {', '.join(map(str, run.matches)) if run.matches else '-'}")
    print(
        f"Comparisons: {stats.total_comparisons} "
        f"(worst case {stats.worst_case_comparisons}, "
        f"efficiency {stats.efficiency * 100:.1f}%)"
    )
    print(f"Steps: {stats.steps}")


def parse_coordinate(value: str) -> tuple[int, int]:
    try:
        text_index, pattern_index = (int(part) for part in value.split(","))
    except ValueError:
        raise InvalidInputError(f"Expected T,P coordinate, got {value!r}") from None
    return text_index, pattern_index


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    text = args.text
    pattern = args.pattern if args.pattern is not None else args.pattern_arg

    try:
        if args.random is not None:
            generator = CorpusGenerator(seed=args.seed)
            if text is not None and pattern is None:
                # a single positional is the pattern when the text is generated
                text, pattern = None, text
            text = generator.generate_text(args.random, args.text_kind)
            if pattern is None:
                pattern = generator.generate_pattern(
                    text, min(4, max(1, len(text))), kind=args.text_kind
                )
            print(f"Text: {text!r}")
            print(f"Pattern: {pattern!r}")

        if text is None or pattern is None:
            print("Error: both a text and a pattern are required")
            return 1

        run = build(text, pattern, args.algorithm)

        print_summary(run)
        if args.tables:
            print()
            print_tables(run)
        if args.grid:
            print()
            print(render_grid(run.text, run.pattern))
        if not args.no_steps:
            print()
            print("Step log:")
            for line in run.trace.log():
                print(f"  {line}")
        if args.step is not None:
            if not 1 <= args.step <= len(run.trace):
                raise IndexError(f"Step must be between 1 and {len(run.trace)}")
            print()
            print_step(run, args.step - 1)
        if args.lookup is not None:
            text_index, pattern_index = parse_coordinate(args.lookup)
            position = run.lookup(text_index, pattern_index)
            print()
            if position is None:
                print(
                    f"No comparison step found for "
                    f"t[{text_index}] vs p[{pattern_index}]"
                )
            else:
                print_step(run, position)

    except (InvalidInputError, IndexError) as e:
        print(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
