"""Add two hexadecimal integers given on the command line."""

from __future__ import annotations

import os
import sys
from typing import Optional, Sequence

from sysprog.bigint import BigInt, BigIntOverflowError


def _parse(text: str) -> BigInt:
    value = BigInt()
    value.assign_hex(text)
    return value


def add_hex(first: str, second: str) -> str:
    """Return the sum of two hexadecimal strings in hexadecimal.

    Raise ValueError for an invalid operand and BigIntOverflowError if
    the sum does not fit.
    """
    return (_parse(first) + _parse(second)).to_hex()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Write the sum of two hexadecimal arguments to standard output."""
    prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "addhex"
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print(f"Usage: {prog} hexint hexint", file=sys.stderr)
        return 1

    addends = []
    for index, (ordinal, text) in enumerate(zip(("first", "second"), args), start=1):
        try:
            addends.append(_parse(text))
        except (ValueError, BigIntOverflowError):
            print(f"{prog}: Failure during creation of addend{index}", file=sys.stderr)
            print(f"The {ordinal} command-line argument should not", file=sys.stderr)
            print("begin with 0x or 0X, and should consist of", file=sys.stderr)
            print("hexadecimal digits only.", file=sys.stderr)
            return 1

    try:
        total = addends[0] + addends[1]
    except BigIntOverflowError:
        print(f"{prog}: Overflow during addition", file=sys.stderr)
        return 1

    print(total.to_hex())
    return 0


if __name__ == "__main__":
    sys.exit(main())