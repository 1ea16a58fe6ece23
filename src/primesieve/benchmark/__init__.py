"""Timed throughput benchmark for the prime sieve.

This package provides:
- Configuration from defaults, YAML files and command-line options
- A deadline-bounded pass loop on a monotonic clock
- Validation against known prime counts and result formatting
"""

from __future__ import annotations

from primesieve.benchmark.config import ConfigError, SieveConfig, load_config
from primesieve.benchmark.runner import (
    BenchmarkProgress,
    BenchmarkRun,
    format_report,
    format_result_line,
    run_benchmark,
)
from primesieve.benchmark.stats import PassStats, PassTimer, format_stats

__all__ = [
    "BenchmarkProgress",
    "BenchmarkRun",
    "ConfigError",
    "PassStats",
    "PassTimer",
    "SieveConfig",
    "format_report",
    "format_result_line",
    "format_stats",
    "load_config",
    "run_benchmark",
]
