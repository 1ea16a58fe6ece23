"""Densely packed bit storage for the sieve.

Bits live in 32-bit unsigned words: bit ``i`` is bit ``i & 31`` of word
``i >> 5``. All bits start out false.

The plain accessors (`set_true`, `test_false`) trust their caller: the index
is not checked against `capacity`. `SieveEngine` is the only caller and keeps
every index below its own loop bounds. The ``*_checked`` variants raise
`IndexError` instead and are meant for everything else.
"""

from __future__ import annotations

from array import array

WORD_BITS = 32
WORD_SHIFT = 5
WORD_MASK = WORD_BITS - 1


class BitStore:
    """Fixed-size array of 1-bit flags."""

    __slots__ = ("_capacity", "words")

    def __init__(self, capacity: int) -> None:
        """Allocate a zeroed store addressing bits ``0 .. capacity-1``.

        The backing holds ``1 + (capacity >> 5)`` words, one more than needed
        when ``capacity`` is a multiple of 32, so index ``capacity`` itself is
        addressable as well.

        Raises:
            ValueError: If capacity is negative.
            MemoryError: If the backing words cannot be allocated.
        """
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._capacity = capacity
        self.words = array("I", [0]) * (1 + (capacity >> WORD_SHIFT))

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return self._capacity

    def __repr__(self) -> str:
        return f"BitStore(capacity={self._capacity})"

    def set_true(self, index: int) -> None:
        """Set bit `index` (trusted index)."""
        self.words[index >> WORD_SHIFT] |= 1 << (index & WORD_MASK)

    def test_false(self, index: int) -> bool:
        """Return True if bit `index` is clear (trusted index)."""
        return not self.words[index >> WORD_SHIFT] & (1 << (index & WORD_MASK))

    def _check(self, index: int) -> None:
        if not 0 <= index < self._capacity:
            raise IndexError(
                f"bit index {index} out of range (capacity: {self._capacity})"
            )

    def set_true_checked(self, index: int) -> None:
        self._check(index)
        self.set_true(index)

    def test_false_checked(self, index: int) -> bool:
        self._check(index)
        return self.test_false(index)
