"""Fibonacci numbers in hexadecimal, with boundary and stress tests of BigInt addition."""

from __future__ import annotations

import os
import random
import re
import sys
import time
from typing import List, Optional, Sequence

from sysprog.bigint import ULONG_MAX, BigInt, BigIntOverflowError

SEPARATOR = "-" * 48
OVERFLOW_TEXT = "Addition overflow"
STRESS_TEST_COUNT = 20

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def fibonacci(n: int) -> BigInt:
    """Return Fibonacci number n.

    Raise ValueError for a negative n and BigIntOverflowError if the
    number does not fit in a BigInt.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    if n < 2:
        return BigInt(n)
    second_prev, first_prev = BigInt(0), BigInt(1)
    for _ in range(2, n + 1):
        second_prev, first_prev = first_prev, first_prev + second_prev
    return first_prev


def _from_hex(text: str) -> BigInt:
    value = BigInt()
    value.assign_hex(text)
    return value


def _largest() -> BigInt:
    value = BigInt()
    value.set_largest()
    return value


def _add_text(first: BigInt, second: BigInt, abbrev: bool) -> str:
    try:
        total = first + second
    except BigIntOverflowError:
        return OVERFLOW_TEXT
    return total.to_hex_abbrev() if abbrev else total.to_hex()


def boundary_tests() -> List[str]:
    """Return the result lines of the boundary tests of BigInt addition."""
    lines: List[str] = []

    def record(label: str, first: BigInt, second: BigInt, abbrev: bool = False) -> None:
        lines.append(f"Boundary test {label}: {_add_text(first, second, abbrev)}")

    def record_both(label: str, first: BigInt, second: BigInt, abbrev: bool = False) -> None:
        record(f"{label}a", first, second, abbrev)
        record(f"{label}b", second, first, abbrev)

    zero = BigInt(0)
    one = BigInt(1)

    record("1", zero, zero)

    record("2a", zero, zero)
    record("2b", _from_hex("100000000"), zero + zero)

    record_both("3", BigInt(ULONG_MAX - 1), zero)
    record_both("4", BigInt(ULONG_MAX - 1), one)
    record_both("5", BigInt(ULONG_MAX), zero)
    record_both("6", BigInt(ULONG_MAX), one)
    record_both("7", _from_hex("ffffffffffffffff0000000000000001"), BigInt(ULONG_MAX))
    record_both("8", _largest(), zero, abbrev=True)
    record_both("9", _largest(), one, abbrev=True)
    record("10", _largest(), _largest(), abbrev=True)

    return lines


def stress_tests(rng: Optional[random.Random] = None, count: int = STRESS_TEST_COUNT) -> List[str]:
    """Return the result lines of count rounds of random additions."""
    rng = rng if rng is not None else random.Random()
    first, second, total = BigInt(), BigInt(), BigInt()
    lines: List[str] = []
    for i in range(count):
        first.randomize(rng)
        second.randomize(rng)
        total.randomize(rng)
        try:
            total = first + second
            text = total.to_hex_abbrev()
        except BigIntOverflowError:
            text = OVERFLOW_TEXT
        lines.append(f"Stress test {i}a: {text}")

        first.randomize(rng)
        second.randomize(rng)
        try:
            second = first + total
            text = second.to_hex_abbrev()
        except BigIntOverflowError:
            text = OVERFLOW_TEXT
        lines.append(f"Stress test {i}b: {text}")
    return lines


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Write Fibonacci number n, then the boundary and stress test results."""
    prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "fib"
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print(f"Usage: {prog} nonneginteger", file=sys.stderr)
        return 1
    match = _LEADING_INT.match(args[0])
    if match is None:
        print("Argument must be an integer", file=sys.stderr)
        return 1
    n = int(match.group(1))
    if n < 0:
        print("Argument must be non-negative", file=sys.stderr)
        return 1

    print(SEPARATOR)
    start = time.process_time()
    try:
        value = fibonacci(n)
    except BigIntOverflowError:
        print(OVERFLOW_TEXT, file=sys.stderr)
        return 1
    print(f"Fibonacci number {n}:")
    print(value.to_hex())
    elapsed = time.process_time() - start
    print(f"CPU time:  {elapsed:f} seconds", file=sys.stderr)
    print(SEPARATOR)

    for line in boundary_tests():
        print(line)
    print(SEPARATOR)

    for line in stress_tests():
        print(line)
    print(SEPARATOR)
    return 0


if __name__ == "__main__":
    sys.exit(main())