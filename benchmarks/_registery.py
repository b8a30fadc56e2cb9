import statistics
import timeit
from collections.abc import Callable
from dataclasses import dataclass
from functools import partial
from typing import Any, Final, NamedTuple, Self

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeRemainingColumn,
)
from rich.table import Table

import underbar as ub

type BenchFn = Callable[[], object]


WARMUP_RUNS: Final = 5
CALLS_BY_RUN: Final = 10
TARGET_BENCH_SEC: Final = 1
MIN_RUNS: Final = 20
SIZES: Final = (256, 512, 1024, 2048)

CONSOLE: Final = Console()


class Variant(NamedTuple):
    """A specific benchmark variant size."""

    size: int
    n_runs: int
    fn: BenchFn

    @classmethod
    def from_fn(cls, fn: BenchFn, size: int) -> Self:
        """Estimate number of runs needed for benchmark variant."""
        warmup_time = timeit.timeit(fn, number=WARMUP_RUNS) / WARMUP_RUNS
        est = int(TARGET_BENCH_SEC / 2 / max(warmup_time, 1e-9) / CALLS_BY_RUN)
        return cls(size, max(MIN_RUNS, est), fn)


class Benchmark(NamedTuple):
    """A benchmark with multiple data sizes."""

    category: str
    name: str
    variants: list[Variant]


@dataclass(slots=True)
class Row:
    """Median timing of one benchmark variant."""

    category: str
    name: str
    size: int
    runs: int
    median: float


BENCHMARKS: list[Benchmark] = []


def bench[P](
    *, gen: Callable[[range], P] = list
) -> Callable[[Callable[[P], object]], Callable[[P], object]]:
    """Decorator to register benchmarks with multiple data sizes."""

    def decorator(func: Callable[[P], object]) -> Callable[[P], object]:
        variants = ub.map(
            SIZES, lambda size: Variant.from_fn(partial(func, gen(range(size))), size)
        )
        BENCHMARKS.append(
            Benchmark(func.__qualname__.split(".")[0], func.__name__, variants)
        )
        return func

    return decorator


def collect_timings(benchmarks: list[Benchmark]) -> list[Row]:
    """Run every variant of every benchmark, and keep the median of each."""
    total_runs = ub.reduce(
        ub.flatten(ub.map(benchmarks, lambda b: ub.pluck(b.variants, "n_runs"))),
        lambda acc, n: acc + n,
        0,
    )
    CONSOLE.print(
        f"Found {len(benchmarks)} benchmarks, {total_runs} total runs",
        style="bold white",
    )

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TimeRemainingColumn(),
        console=CONSOLE,
    ) as progress:
        task = progress.add_task("[cyan]Running benchmarks...", total=total_runs)
        f = partial(_run_variant, progress, task)
        return ub.flatten(
            ub.map(benchmarks, lambda b: ub.map(b.variants, lambda v: f(v, b)))
        )


def _run_variant(
    progress: Progress,
    task: Any,  # noqa: ANN401
    variant: Variant,
    bench: Benchmark,
) -> Row:
    progress.update(
        task,
        description=f"[cyan]{bench.category}: {bench.name} @ {variant.size}",
    )

    def _timed_run(_: int) -> float:
        time_taken = timeit.timeit(variant.fn, number=CALLS_BY_RUN)
        progress.advance(task)
        return time_taken

    timings = ub.map(range(variant.n_runs), _timed_run)
    return Row(
        bench.category,
        bench.name,
        variant.size,
        variant.n_runs,
        statistics.median(timings),
    )


def render(rows: list[Row]) -> Table:
    """Build a table of median timings, in microseconds per call."""
    table = Table(title="underbar benchmarks")
    for column in ("category", "name", "size", "runs", "median (µs/call)"):
        table.add_column(column)
    for row in ub.sort_by(rows, lambda r: (r.category, r.name, r.size)):
        table.add_row(
            row.category,
            row.name,
            str(row.size),
            str(row.runs),
            f"{row.median / CALLS_BY_RUN * 1e6:.2f}",
        )
    return table
