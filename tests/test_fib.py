import random

import pytest

from sysprog.bigint import ULONG_MAX, BigInt
from sysprog.fib import boundary_tests, fibonacci, main, stress_tests


def _results(lines, prefix):
    out = {}
    for line in lines:
        label, _, value = line.partition(": ")
        assert label.startswith(prefix)
        out[label[len(prefix):]] = value
    return out


def test_fibonacci_small_values():
    assert int(fibonacci(0)) == 0
    assert int(fibonacci(1)) == 1
    assert int(fibonacci(2)) == 1
    assert int(fibonacci(10)) == 55


def test_fibonacci_recurrence():
    for n in range(0, 200, 7):
        assert int(fibonacci(n)) + int(fibonacci(n + 1)) == int(fibonacci(n + 2))


def test_fibonacci_zero_hex():
    assert fibonacci(0).to_hex() == "0000000000000000"


def test_fibonacci_negative():
    with pytest.raises(ValueError):
        fibonacci(-1)


def test_boundary_labels():
    results = _results(boundary_tests(), "Boundary test ")
    assert list(results) == [
        "1", "2a", "2b", "3a", "3b", "4a", "4b", "5a", "5b",
        "6a", "6b", "7a", "7b", "8a", "8b", "9a", "9b", "10",
    ]


def test_boundary_small_sums():
    results = _results(boundary_tests(), "Boundary test ")
    assert results["1"] == "0000000000000000"
    assert results["2a"] == "0000000000000000"
    assert int(results["2b"], 16) == 0x100000000
    assert results["3a"] == results["3b"] == BigInt(ULONG_MAX - 1).to_hex()
    assert results["4a"] == results["4b"] == BigInt(ULONG_MAX).to_hex()
    assert results["5a"] == results["5b"] == BigInt(ULONG_MAX).to_hex()


def test_boundary_carries():
    results = _results(boundary_tests(), "Boundary test ")
    assert int(results["6a"], 16) == ULONG_MAX + 1
    assert results["6a"] == results["6b"]
    assert int(results["7a"], 16) == 0xFFFFFFFFFFFFFFFF0000000000000001 + ULONG_MAX
    assert results["7a"] == results["7b"]
    assert len(results["7a"]) % 16 == 0


def test_boundary_largest_and_overflow():
    results = _results(boundary_tests(), "Boundary test ")
    largest = BigInt()
    largest.set_largest()
    assert results["8a"] == results["8b"] == largest.to_hex_abbrev()
    assert results["9a"] == "Addition overflow"
    assert results["9b"] == "Addition overflow"
    assert results["10"] == "Addition overflow"


def test_stress_labels_and_count():
    lines = stress_tests(random.Random(1), 3)
    results = _results(lines, "Stress test ")
    assert list(results) == ["0a", "0b", "1a", "1b", "2a", "2b"]


def test_stress_default_count():
    assert len(stress_tests(random.Random(5))) == 40


def test_stress_deterministic_with_seed():
    first = stress_tests(random.Random(42), 4)
    second = stress_tests(random.Random(42), 4)
    assert len(first) == 8
    assert first[0].startswith("Stress test 0a: ")
    assert first[-1].startswith("Stress test 3b: ")
    assert first == second


def test_stress_values_are_hex():
    for value in _results(stress_tests(random.Random(7), 5), "Stress test ").values():
        if value == "Addition overflow":
            continue
        for part in value.split("..."):
            assert len(part) % 16 == 0
            assert int(part, 16) >= 0


def test_main_usage(capsys):
    assert main([]) == 1
    assert "Usage:" in capsys.readouterr().err


def test_main_not_integer(capsys):
    assert main(["abc"]) == 1
    assert "Argument must be an integer" in capsys.readouterr().err


def test_main_negative(capsys):
    assert main(["-3"]) == 1
    assert "Argument must be non-negative" in capsys.readouterr().err


def test_main_output(capsys):
    assert main(["10"]) == 0
    captured = capsys.readouterr()
    lines = captured.out.splitlines()
    assert lines[0] == "-" * 48
    assert lines[1] == "Fibonacci number 10:"
    assert lines[2] == "0000000000000037"
    assert lines[3] == "-" * 48
    assert lines[4:22] == boundary_tests()
    assert lines[-1] == "-" * 48
    assert sum(line.startswith("Stress test ") for line in lines) == 40
    assert "CPU time:" in captured.err


def test_main_accepts_leading_integer(capsys):
    assert main(["7xyz"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[1] == "Fibonacci number 7:"
    assert int(lines[2], 16) == 13