"""High-precision unsigned integers made of 64-bit digits."""

from __future__ import annotations

import random
import string
from typing import Optional

BITS_PER_DIGIT = 64
HEX_PER_DIGIT = BITS_PER_DIGIT // 4
MAX_DIGITS = 32768
ULONG_MAX = (1 << BITS_PER_DIGIT) - 1
LARGEST = (1 << (BITS_PER_DIGIT * MAX_DIGITS)) - 1

_HEX_DIGITS = frozenset(string.hexdigits)


class BigIntOverflowError(OverflowError):
    """Raised when a value does not fit in MAX_DIGITS digits."""


class BigInt:
    """An unsigned integer of at most MAX_DIGITS 64-bit digits."""

    __slots__ = ("_value",)
    __hash__ = None  # mutable

    def __init__(self, value: int = 0) -> None:
        if not 0 <= value <= ULONG_MAX:
            raise ValueError("initial value must fit in one 64-bit digit")
        self._value = value

    @property
    def length(self) -> int:
        """Number of digits in use; zero has length 0."""
        return (self._value.bit_length() + BITS_PER_DIGIT - 1) // BITS_PER_DIGIT

    def assign_hex(self, text: str) -> None:
        """Assign the value of a string of hexadecimal digits.

        Raise ValueError, leaving the value unchanged, if text is empty
        or holds anything but hexadecimal digits.
        """
        if not text or not all(ch in _HEX_DIGITS for ch in text):
            raise ValueError(f"not a string of hexadecimal digits: {text!r}")
        value = int(text, 16)
        if value > LARGEST:
            raise BigIntOverflowError("hexadecimal value too large")
        self._value = value

    def set_largest(self) -> None:
        """Assign the largest value a BigInt can hold."""
        self._value = LARGEST

    def randomize(self, rng: Optional[random.Random] = None) -> None:
        """Assign a random value with a randomly chosen number of digits."""
        rng = rng if rng is not None else random.Random()
        digits = rng.randrange(MAX_DIGITS)
        self._value = rng.getrandbits(BITS_PER_DIGIT * digits) if digits else 0

    def __add__(self, other: BigInt) -> BigInt:
        if not isinstance(other, BigInt):
            return NotImplemented
        total = self._value + other._value
        if total > LARGEST:
            raise BigIntOverflowError("addition overflow")
        result = BigInt()
        result._value = total
        return result

    def __int__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BigInt):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"BigInt(0x{self._value:x})"

    def to_hex(self) -> str:
        """Return all digits, most significant first, 16 hex chars each."""
        width = HEX_PER_DIGIT * max(self.length, 1)
        return f"{self._value:0{width}x}"

    def to_hex_abbrev(self) -> str:
        """Return the hex form, shortened to first and last digits."""
        if self.length <= 2:
            return self.to_hex()
        top = self._value >> (BITS_PER_DIGIT * (self.length - 1))
        bottom = self._value & ULONG_MAX
        return f"{top:0{HEX_PER_DIGIT}x}...{bottom:0{HEX_PER_DIGIT}x}"