# sysprog

A small collection of classic systems-programming components:

- `sysprog.dynarray.DynArray`: a growable array. It supports index-based
  `set`, `insert` and `remove_at`, and in-place `sort`. It also offers a
  linear `search` and a binary `bsearch`. Sorting and searching take a
  three-way compare function.
- `sysprog.wc`: counts lines, words and characters the way `wc` does.
  A word is a run of non-whitespace characters.
- `sysprog.bigint.BigInt`: a high-precision unsigned integer with a fixed
  capacity of 32768 digits of 64 bits each. It reads hexadecimal strings
  and writes zero-padded hexadecimal, 16 characters per digit. A sum that
  does not fit raises `BigIntOverflowError`.
- `sysprog.addhex`: adds two hexadecimal integers.
- `sysprog.fib`: computes Fibonacci numbers with `BigInt` and runs
  boundary and stress checks of its addition.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[tests]"
pytest
```

## Command-line tools

Count the lines, words and characters on standard input. The counts are
written as three right-aligned fields of width seven:

```
sysprog-wc < notes.txt
```

Add two hexadecimal integers. Give only the digits, with no `0x` prefix.
An invalid operand or an overflowing sum writes a message to standard
error and exits with status 1:

```
sysprog-addhex ff 1
```

Print Fibonacci number *n* in hexadecimal. The command then prints the
results of the boundary and stress checks of `BigInt` addition. The CPU
time spent on the Fibonacci number goes to standard error:

```
sysprog-fib 100
```

## Library use

```python
import random

from sysprog.bigint import BigInt, BigIntOverflowError
from sysprog.dynarray import DynArray
from sysprog.fib import boundary_tests, fibonacci, stress_tests
from sysprog.wc import count, format_counts

total = BigInt(0xFF) + BigInt(1)
print(total.to_hex())          # 0000000000000100
print(int(total))              # 256

value = BigInt()
value.assign_hex("ffffffffffffffff0000000000000001")
print(value.to_hex_abbrev())   # first and last 64-bit digits

largest = BigInt()
largest.set_largest()
try:
    largest + BigInt(1)
except BigIntOverflowError:
    print("overflow")

print(fibonacci(10).to_hex())  # 0000000000000037
print("\n".join(boundary_tests()))
print("\n".join(stress_tests(random.Random(0), count=2)))

array = DynArray()
for word in ("pear", "apple", "fig"):
    array.append(word)
compare = lambda a, b: (a > b) - (a < b)
array.sort(compare)
print(array.to_list())                 # ['apple', 'fig', 'pear']
print(array.bsearch("grape", compare)) # (False, 2)
print(array.search("fig", compare))    # 1

print(format_counts(count("hello world\n")))
```

Notes:

- `BigInt(value)` accepts only a value that fits in one 64-bit digit.
  Use `assign_hex` for larger numbers.
- `assign_hex` raises `ValueError` for an empty or non-hexadecimal string
  and leaves the value unchanged.
- `DynArray` indices must lie within the current length. Negative indices
  raise `IndexError`.

## What the package does not do

The package has no directory-tree or file-tree structure. It does not
model a hierarchy of paths, and it does not provide a checker for such a
hierarchy.