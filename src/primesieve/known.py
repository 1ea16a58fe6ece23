"""Historical prime counts used to validate sieve results."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType

# Number of primes below each limit, e.g. 168 primes under 1000
KNOWN_PRIME_COUNTS = MappingProxyType(
    {
        10: 4,
        100: 25,
        1000: 168,
        10000: 1229,
        100000: 9592,
        1000000: 78498,
        10000000: 664579,
        100000000: 5761455,
    }
)


class Validation(Enum):
    """Outcome of checking a prime count against the known table."""

    VALID = "valid"
    MISMATCH = "mismatch"
    UNKNOWN_LIMIT = "unknown-limit"


def expected_count(limit: int) -> int | None:
    """Return the known number of primes below `limit`, if tabulated."""
    return KNOWN_PRIME_COUNTS.get(limit)


def validate_count(limit: int, counted: int) -> Validation:
    """Compare a total prime count (2 included) with the known table."""
    expected = expected_count(limit)
    if expected is None:
        return Validation.UNKNOWN_LIMIT
    if counted == expected:
        return Validation.VALID
    return Validation.MISMATCH
