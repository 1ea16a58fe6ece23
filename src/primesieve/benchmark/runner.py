"""Timed benchmark driver.

Repeats construct-and-sieve passes until a deadline on a monotonic clock is
reached, then validates the last pass and formats the report:
- One machine-parsable result line (or an error/warning line)
- Optional verbose lines with primes and timing details
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass

from primesieve.benchmark.config import SieveConfig
from primesieve.benchmark.stats import PassStats, PassTimer, format_stats
from primesieve.engine import SieveEngine
from primesieve.known import Validation, expected_count, validate_count

THREADS = 1
# Minimum seconds between progress callbacks
PROGRESS_INTERVAL = 0.1
DESCRIPTOR = "algorithm=base,faithful=yes,bits=1"


@dataclass
class BenchmarkProgress:
    """Progress callback information.

    Attributes:
        passes: Passes completed so far.
        elapsed: Seconds since the first pass started.
        time_limit: Configured budget in seconds.
    """

    passes: int
    elapsed: float
    time_limit: float


# Type for progress callbacks
ProgressCallback = Callable[[BenchmarkProgress], None]


@dataclass
class BenchmarkRun:
    """Result of one timed benchmark.

    Attributes:
        config: Configuration the run used.
        passes: Number of complete passes.
        duration: Seconds from the first pass start to the last clock reading.
        counted_primes: Primes below the sieve size in the last pass, 2 included.
        validation: Outcome of checking counted_primes against the known table.
        stats: Per-pass timing statistics.
        engine: The engine of the last pass.
    """

    config: SieveConfig
    passes: int
    duration: float
    counted_primes: int
    validation: Validation
    stats: PassStats
    engine: SieveEngine

    @property
    def valid(self) -> bool:
        return self.validation is Validation.VALID

    @property
    def passes_per_second(self) -> float:
        return self.passes / self.duration if self.duration > 0 else 0.0

    @property
    def seconds_per_pass(self) -> float:
        return self.duration / self.passes if self.passes else 0.0


def run_benchmark(
    config: SieveConfig,
    clock: Callable[[], float] = time.perf_counter,
    progress_callback: ProgressCallback | None = None,
) -> BenchmarkRun:
    """Run sieve passes until the time budget is spent.

    The deadline is computed once, before the first pass. The clock is read
    after every pass; a pass is never interrupted, and at least one pass runs.

    Args:
        config: Benchmark configuration.
        clock: Monotonic clock returning seconds.
        progress_callback: Called after a pass when at least PROGRESS_INTERVAL
            seconds have passed since the previous call.

    Returns:
        BenchmarkRun for the last pass.
    """
    sieve_size = config.sieve_size
    start = clock()
    deadline = start + config.time_limit_seconds

    passes = 0
    timer = PassTimer()
    previous = start
    last_report = start
    while True:
        engine = SieveEngine(sieve_size)
        engine.run_sieve()
        passes += 1

        now = clock()
        timer.add(now - previous)
        previous = now

        if progress_callback and now - last_report >= PROGRESS_INTERVAL:
            last_report = now
            progress_callback(
                BenchmarkProgress(
                    passes=passes,
                    elapsed=now - start,
                    time_limit=config.time_limit_seconds,
                )
            )
        if now >= deadline:
            break

    counted = engine.total_primes()
    return BenchmarkRun(
        config=config,
        passes=passes,
        duration=previous - start,
        counted_primes=counted,
        validation=validate_count(sieve_size, counted),
        stats=timer.stats(),
        engine=engine,
    )


def format_result_line(run: BenchmarkRun) -> str:
    """Format the single machine-parsable result line."""
    return f"{run.config.label};{run.passes};{run.duration};{THREADS};{DESCRIPTOR}"


def format_report(run: BenchmarkRun) -> list[str]:
    """Format the full report for a run.

    Returns:
        Output lines: the result, error or warning line, then verbose details.
    """
    config = run.config
    lines: list[str] = []

    if run.validation is Validation.VALID:
        lines.append(format_result_line(run))
    elif run.validation is Validation.MISMATCH:
        lines.append(
            f"Error: invalid result. Limit for {config.sieve_size} should be "
            f"{expected_count(config.sieve_size)} but result contains "
            f"{run.counted_primes} primes"
        )
    else:
        lines.append(
            f"Warning: cannot validate result of {run.counted_primes} primes: "
            f"limit {config.sieve_size} is not in the known list of number of primes!"
        )

    if config.verbose:
        if config.max_show_primes > 0:
            primes = ", ".join(str(p) for p in run.engine.get_primes(config.max_show_primes))
            lines.append("")
            lines.append(f"The first {config.max_show_primes} found primes are: {primes}")
        lines.append(
            f"Passes: {run.passes}, Time: {run.duration:.2f}, "
            f"Avg: {run.seconds_per_pass:.8f} (sec/pass), "
            f"Sieve size: {config.sieve_size}, Primes: {run.counted_primes}, "
            f"Valid: {run.valid}"
        )
        lines.append(f"Per pass: {format_stats(run.stats)}")

    return lines
