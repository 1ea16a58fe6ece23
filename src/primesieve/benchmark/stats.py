"""Timing statistics over individual sieve passes.

The throughput figure itself is passes per elapsed second; these numbers
describe how much single passes varied within one run. Durations are folded
into running totals as they arrive (Welford's method), so memory use and the
cost of summarizing do not grow with the number of passes.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class PassStats:
    """Statistical summary of pass durations.

    Attributes:
        count: Number of passes
        mean: Arithmetic mean (in seconds)
        stddev: Sample standard deviation (0 for fewer than two passes)
        cv: Coefficient of variation (stddev/mean)
        min: Fastest pass
        max: Slowest pass
    """

    count: int
    mean: float
    stddev: float
    cv: float
    min: float
    max: float


class PassTimer:
    """Running accumulator of pass durations."""

    __slots__ = ("count", "mean", "_m2", "min", "max")

    def __init__(self) -> None:
        self.count = 0
        self.mean = 0.0
        self._m2 = 0.0
        self.min = math.inf
        self.max = -math.inf

    def add(self, seconds: float) -> None:
        """Record one pass duration."""
        self.count += 1
        delta = seconds - self.mean
        self.mean += delta / self.count
        self._m2 += delta * (seconds - self.mean)
        if seconds < self.min:
            self.min = seconds
        if seconds > self.max:
            self.max = seconds

    def stats(self) -> PassStats:
        """Summarize the durations recorded so far; all zeros when empty."""
        if not self.count:
            return PassStats(count=0, mean=0.0, stddev=0.0, cv=0.0, min=0.0, max=0.0)

        stddev = math.sqrt(self._m2 / (self.count - 1)) if self.count > 1 else 0.0
        return PassStats(
            count=self.count,
            mean=self.mean,
            stddev=stddev,
            cv=stddev / self.mean if self.mean > 0 else 0.0,
            min=self.min,
            max=self.max,
        )


def format_stats(stats: PassStats, unit: str = "ms") -> str:
    """Format pass statistics for display.

    Args:
        stats: Statistics to format.
        unit: Time unit for display ("ms" or "s").

    Returns:
        Formatted string like "48.2ms +/- 2.1ms (CV=4.36%, 104 passes)".
    """
    multiplier = 1000.0 if unit == "ms" else 1.0
    mean = stats.mean * multiplier
    stddev = stats.stddev * multiplier
    cv_pct = stats.cv * 100

    return f"{mean:.1f}{unit} +/- {stddev:.1f}{unit} (CV={cv_pct:.2f}%, {stats.count} passes)"
