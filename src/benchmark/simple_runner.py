"""
Simple benchmark runner for traced search algorithms.

Usage examples:
    python -m src.benchmark.simple_runner
    python -m src.benchmark.simple_runner --algorithms KMP,BM --sizes 100,1000,10000
    python -m src.benchmark.simple_runner --text-kind dna --pattern-length 12 --no-plots
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from src.benchmark import BenchmarkConfig, run_trace_benchmark
from src.trace.engine import SearchAlgorithm

ALGORITHM_NAMES = {
    "KMP": "Knuth-Morris-Pratt",
    "BM": "Boyer-Moore",
}

COLORS = ["blue", "green", "red", "orange", "purple", "brown"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Benchmark traced search algorithms")
    parser.add_argument(
        "--algorithms",
        default="KMP,BM",
        help="Comma-separated list of algorithms to test",
    )
    parser.add_argument(
        "--sizes",
        default="100,500,1000,5000,10000",
        help="Comma-separated list of text lengths",
    )
    parser.add_argument("--pattern-length", type=int, default=8)
    parser.add_argument(
        "--text-kind",
        default="words",
        choices=["words", "dna", "binary", "abc"],
        help="Kind of generated text",
    )
    parser.add_argument(
        "--absent",
        action="store_true",
        help="Use patterns drawn independently of the text",
    )
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--measure-runs", type=int, default=10)
    parser.add_argument("--warmup-runs", type=int, default=3)
    parser.add_argument(
        "--output-prefix", default="trace-benchmark", help="Prefix for output plot files"
    )
    parser.add_argument("--output-dir", default=".", help="Directory for plot files")
    parser.add_argument("--no-plots", action="store_true", help="Do not display plots")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        algorithms = [
            SearchAlgorithm.parse(alg).value for alg in args.algorithms.split(",")
        ]
        sizes = [int(size.strip()) for size in args.sizes.split(",")]
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    config = BenchmarkConfig(
        x_vals=sizes,
        line_vals=algorithms,
        line_names=[ALGORITHM_NAMES.get(alg, alg) for alg in algorithms],
        styles=[(COLORS[i % len(COLORS)], "-") for i in range(len(algorithms))],
        plot_name=f"{args.output_prefix}-{args.text_kind}",
        pattern_length=args.pattern_length,
        text_kind=args.text_kind,
        pattern_present=not args.absent,
        seed=args.seed,
        warmup_runs=args.warmup_runs,
        measure_runs=args.measure_runs,
        output_dir=Path(args.output_dir),
    )

    try:
        run_trace_benchmark(config, show_plots=not args.no_plots, print_data=True)
    except Exception as e:
        print(f"Unexpected error: {e}")
        return 1

    print(f"\nBenchmark completed! Plots saved as {config.plot_name}*.png")
    return 0


if __name__ == "__main__":
    sys.exit(main())
