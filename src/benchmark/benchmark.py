import os
import statistics
import time
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

import matplotlib.pyplot as plt
import psutil

from corpus.generate import CorpusGenerator

from ..trace.engine import create_tracer


@dataclass
class BenchmarkConfig:
    """Configuration for a benchmark run over growing text lengths"""

    x_vals: List[int]
    line_vals: List[str]
    line_names: List[str]
    styles: List[Tuple[str, str]]
    plot_name: str
    x_name: str = "Text length (n)"
    pattern_length: int = 8
    text_kind: str = "words"
    pattern_present: bool = True
    seed: Optional[int] = 42
    warmup_runs: int = 3
    measure_runs: int = 10
    min_runtime_ms: float = 10.0
    measure_memory: bool = True
    output_dir: Path = field(default_factory=Path)


@dataclass
class BenchmarkResult:
    """Result of a single benchmark measurement"""

    value: float
    std_dev: float
    measurements: List[float]
    config_name: str
    x_value: int
    comparisons: int = 0
    worst_case_comparisons: int = 0
    steps: int = 0
    memory_usage: Optional[float] = None


class BenchmarkRunner:
    """Times trace generation per algorithm and records comparison counts"""

    def __init__(self, config: BenchmarkConfig):
        self.config = config
        self.results: Dict[str, List[BenchmarkResult]] = {}
        self.inputs: Dict[int, Tuple[str, str]] = {}
        self.total_steps: int = 0
        self.current_step: int = 0

    def do_bench(
        self, fn: Callable[[], Any]
    ) -> Tuple[float, float, List[float]]:
        """Time a function call multiple times and return statistics"""
        # Warmup runs
        for _ in range(self.config.warmup_runs):
            fn()

        # Measurement runs
        times: List[float] = []
        total_runtime = 0.0

        while (
            len(times) < self.config.measure_runs
            or total_runtime < self.config.min_runtime_ms
        ):
            start = time.perf_counter()
            fn()
            end = time.perf_counter()

            runtime_ms = (end - start) * 1000
            times.append(runtime_ms)
            total_runtime += runtime_ms

        mean_time = statistics.mean(times)
        std_dev = statistics.stdev(times) if len(times) > 1 else 0.0

        return mean_time, std_dev, times

    def prepare_inputs(self) -> Dict[int, Tuple[str, str]]:
        """Generate one (text, pattern) pair per text length, shared by all algorithms"""
        generator = CorpusGenerator(seed=self.config.seed)
        self.inputs = {}
        for n in self.config.x_vals:
            text = generator.generate_text(n, self.config.text_kind)
            pattern = generator.generate_pattern(
                text,
                self.config.pattern_length,
                self.config.pattern_present,
                self.config.text_kind,
            )
            self.inputs[n] = (text, pattern)
        return self.inputs

    def run_benchmark(self) -> None:
        """Run every algorithm on every text length with progress indication"""
        if not self.inputs:
            self.prepare_inputs()

        self.total_steps = len(self.config.line_vals) * len(self.config.x_vals)
        self.current_step = 0

        print(f"\nStarting benchmark: {self.config.plot_name}")
        print(
            f"Testing {len(self.config.line_vals)} algorithms "
            f"on {len(self.config.x_vals)} sizes"
        )
        print(f"Started at {datetime.now().strftime('%H:%M:%S')}")
        print("=" * 80)

        for i, line_val in enumerate(self.config.line_vals):
            line_results = []
            algo_name = (
                self.config.line_names[i]
                if i < len(self.config.line_names)
                else line_val
            )

            print(f"\n[{i + 1}/{len(self.config.line_vals)}] Testing {algo_name}")
            print("-" * 60)

            for x_val in self.config.x_vals:
                self.current_step += 1
                progress = (self.current_step / self.total_steps) * 100
                print(
                    f"[{self.current_step:2d}/{self.total_steps}] "
                    f"N={x_val:>10,} ({progress:5.1f}%) ",
                    end="",
                    flush=True,
                )
                start_time = time.time()

                try:
                    line_results.append(self._measure(line_val, x_val))
                    result = line_results[-1]
                    elapsed = time.time() - start_time
                    print(
                        f"-> {result.value:8.3f}ms (±{result.std_dev:6.3f}) "
                        f"{result.comparisons:,} comparisons [{elapsed:4.1f}s]"
                    )
                except Exception as e:
                    elapsed = time.time() - start_time
                    print(f"-> FAILED: {str(e)[:50]}... [{elapsed:4.1f}s]")
                    line_results.append(
                        BenchmarkResult(
                            value=float("inf"),
                            std_dev=0.0,
                            measurements=[],
                            config_name=line_val,
                            x_value=x_val,
                        )
                    )

            self.results[line_val] = line_results

        print("\n" + "=" * 80)
        print(f"Benchmark completed at {datetime.now().strftime('%H:%M:%S')}")

    def _measure(self, algorithm: str, n: int) -> BenchmarkResult:
        text, pattern = self.inputs[n]
        tracer = create_tracer(pattern, algorithm)
        traced = tracer.trace(text)

        mean_time, std_dev, measurements = self.do_bench(lambda: tracer.trace(text))

        memory_usage = None
        if self.config.measure_memory:
            process = psutil.Process(os.getpid())
            memory_usage = process.memory_info().rss / 1024 / 1024  # MB

        return BenchmarkResult(
            value=mean_time,
            std_dev=std_dev,
            measurements=measurements,
            config_name=algorithm,
            x_value=n,
            comparisons=traced.stats.total_comparisons,
            worst_case_comparisons=traced.stats.worst_case_comparisons,
            steps=traced.stats.steps,
            memory_usage=memory_usage,
        )

    def generate_plot(self, show_plots: bool = True, save_plot: bool = True) -> None:
        """Generate trace-time and comparison-count plots"""
        self._generate_single_plot(
            "Trace Time",
            "Time (ms)",
            lambda r: r.value,
            lambda r: r.std_dev,
            show_plots,
            save_plot,
        )
        self._generate_single_plot(
            "Comparisons",
            "Character comparisons",
            lambda r: r.comparisons,
            lambda r: 0,
            show_plots,
            save_plot,
            suffix="-comparisons",
            worst_case=True,
        )

    def _generate_single_plot(
        self,
        title_suffix: str,
        ylabel: str,
        value_fn: Callable,
        error_fn: Callable,
        show_plots: bool,
        save_plot: bool,
        suffix: str = "",
        worst_case: bool = False,
    ) -> Optional[Path]:
        """Generate a single plot, returning the saved file path if any"""
        plt.figure(figsize=(12, 8))

        for i, line_val in enumerate(self.config.line_vals):
            if line_val not in self.results:
                continue

            results = [r for r in self.results[line_val] if r.measurements]
            if not results:
                continue

            color, style = (
                self.config.styles[i] if i < len(self.config.styles) else ("blue", "-")
            )
            label = (
                self.config.line_names[i]
                if i < len(self.config.line_names)
                else line_val
            )

            plt.errorbar(
                [r.x_value for r in results],
                [value_fn(r) for r in results],
                yerr=[error_fn(r) for r in results],
                color=color,
                linestyle=style,
                marker="o",
                label=label,
                capsize=5,
                capthick=2,
            )
            if worst_case:
                plt.plot(
                    [r.x_value for r in results],
                    [r.worst_case_comparisons for r in results],
                    color=color,
                    linestyle=":",
                    label=f"{label} worst case",
                )

        plt.xlabel(self.config.x_name)
        plt.ylabel(ylabel)
        plt.title(f"{self.config.plot_name} - {title_suffix}")
        plt.legend()
        plt.grid(True, alpha=0.3)
        plt.tight_layout()

        filename = None
        if save_plot:
            filename = Path(self.config.output_dir) / f"{self.config.plot_name}{suffix}.png"
            plt.savefig(filename, dpi=150, bbox_inches="tight")

        if show_plots:
            plt.show()
        else:
            plt.close()
        return filename

    def print_data(self) -> None:
        """Print detailed benchmark results"""
        print(f"\n{self.config.plot_name} Benchmark Results")
        print("=" * 80)

        for i, line_val in enumerate(self.config.line_vals):
            if line_val not in self.results:
                continue

            line_name = (
                self.config.line_names[i]
                if i < len(self.config.line_names)
                else line_val
            )
            print(f"\n{line_name} ({line_val}):")

            header = (
                f"{'N':<10} {'Trace (ms)':<12} {'Std Dev':<10} "
                f"{'Compares':<10} {'Worst':<12} {'Steps':<10}"
            )
            if self.config.measure_memory:
                header += f" {'Memory (MB)':<12}"
            print(header)
            print("-" * len(header))

            for result in self.results[line_val]:
                row = (
                    f"{result.x_value:<10} {result.value:<12.4f} "
                    f"{result.std_dev:<10.4f} {result.comparisons:<10} "
                    f"{result.worst_case_comparisons:<12} {result.steps:<10}"
                )
                if self.config.measure_memory and result.memory_usage is not None:
                    row += f" {result.memory_usage:<12.2f}"
                elif self.config.measure_memory:
                    row += f" {'N/A':<12}"
                print(row)


def run_trace_benchmark(
    config: BenchmarkConfig, show_plots: bool = True, print_data: bool = True
) -> BenchmarkRunner:
    """Run a benchmark end to end: inputs, measurements, report and plots"""
    runner = BenchmarkRunner(config)
    runner.prepare_inputs()
    runner.run_benchmark()

    if print_data:
        runner.print_data()
    runner.generate_plot(show_plots=show_plots, save_plot=bool(config.plot_name))

    return runner
