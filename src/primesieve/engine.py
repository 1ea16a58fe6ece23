"""Odd-only Sieve of Eratosthenes over a `BitStore`.

Only odd candidates are stored: bit index ``k`` stands for ``2k + 1``, so
index 0 is the number 1, index 1 is 3, index 2 is 5 and so on. A clear bit
means "still believed prime", a set bit means "proven composite". The number
2 is never stored; `get_primes` adds it by hand, `count_primes` leaves it out.
"""

from __future__ import annotations

from collections.abc import Iterator
from math import isqrt

from primesieve.bitstore import BitStore

DEFAULT_SHOW_PRIMES = 20


class SieveEngine:
    """One sieve over the odd numbers below `limit`.

    Attributes:
        limit: Requested sieve size; primes strictly below it are found.
        odd_span: ``limit >> 1``, the number of odd candidates stored.
        has_run: Whether `run_sieve` has been called.
    """

    def __init__(self, limit: int) -> None:
        if limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")
        self.limit = limit
        self.odd_span = limit >> 1
        self.bits = BitStore(self.odd_span)
        self.has_run = False

    def __repr__(self) -> str:
        state = "run" if self.has_run else "unrun"
        return f"SieveEngine(limit={self.limit}, {state})"

    def run_sieve(self) -> SieveEngine:
        """Strike the odd composites. Returns self for chaining."""
        odd_span = self.odd_span
        set_true = self.bits.set_true
        test_false = self.bits.test_false

        for factor in range(1, isqrt(odd_span) + 1):
            if test_false(factor):
                # (2f+1)^2 = 2(2f^2 + 2f) + 1
                start = 2 * factor * factor + 2 * factor
                step = 2 * factor + 1
                for multiple in range(start, odd_span, step):
                    set_true(multiple)

        self.has_run = True
        return self

    def count_primes(self) -> int:
        """Count the odd primes below `limit` (2 excluded)."""
        test_false = self.bits.test_false
        return sum(1 for index in range(1, self.odd_span) if test_false(index))

    def total_primes(self) -> int:
        """Count all primes below `limit`, including 2."""
        count = self.count_primes()
        if self.limit >= 2:
            count += 1
        return count

    def primes(self) -> Iterator[int]:
        """Yield 2, then every odd prime found, in ascending order."""
        yield 2
        test_false = self.bits.test_false
        for index in range(1, self.odd_span):
            if test_false(index):
                yield 2 * index + 1

    def get_primes(self, max_count: int = DEFAULT_SHOW_PRIMES) -> list[int]:
        """Return at most `max_count` primes, starting with 2."""
        result: list[int] = []
        if max_count <= 0:
            return result
        for prime in self.primes():
            result.append(prime)
            if len(result) >= max_count:
                break
        return result
