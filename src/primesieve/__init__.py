"""primesieve: bit-packed odd-only Sieve of Eratosthenes."""

from __future__ import annotations

import sys

from primesieve.bitstore import BitStore
from primesieve.engine import SieveEngine
from primesieve.known import KNOWN_PRIME_COUNTS, Validation, validate_count


def main() -> None:
    """Entry point for primesieve CLI."""
    if len(sys.argv) < 2:
        print("Usage: primesieve <limit>")
        sys.exit(1)

    try:
        limit = int(sys.argv[1])
    except ValueError:
        print(f"Error: not an integer: {sys.argv[1]}")
        sys.exit(1)
    if limit < 0:
        print(f"Error: limit must be non-negative, got {limit}")
        sys.exit(1)

    print(SieveEngine(limit).run_sieve().total_primes())


__all__ = [
    "KNOWN_PRIME_COUNTS",
    "BitStore",
    "SieveEngine",
    "Validation",
    "main",
    "validate_count",
]
