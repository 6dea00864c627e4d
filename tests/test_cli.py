import random

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pushswap.checker import check
from pushswap.cli import main, solve
from pushswap.validation import InputError

ARGS100 = (
    "67 29 78 77 22 80 75 89 55 3 91 72 60 64 32 86 27 50 99 88 7 15 12 2 92 "
    "94 90 38 54 66 31 21 16 42 34 9 81 56 58 14 97 4 59 11 35 18 17 83 8 47 "
    "100 84 49 62 63 73 46 25 5 13 98 96 79 28 23 71 68 69 30 6 82 65 51 10 36 "
    "20 70 61 48 76 53 74 1 39 26 57 41 37 44 43 33 52 93 87 19 85 95 45 40 24"
)


def test_sorted_input_needs_no_operations():
    assert solve(["1", "2", "3", "4"]) == []


def test_three_values_swapped_at_top():
    assert solve(["2", "1", "3"]) == ["sa"]


def test_three_values_descending():
    assert solve(["3 2 1"]) == ["sa", "rra"]


@pytest.mark.parametrize("size", [3, 4, 5, 6, 20, 49])
def test_every_permutation_sample_gets_sorted(size):
    rng = random.Random(size)
    values = [str(v) for v in rng.sample(range(-1000, 1000), size)]
    assert check(values, solve(values)) is True


def test_makefile_hundred_values_get_sorted():
    operations = solve([ARGS100])
    assert check([ARGS100], operations) is True
    assert len(operations) > 0


def test_large_input_uses_radix_and_sorts():
    values = [str(v) for v in random.Random(7).sample(range(100000), 520)]
    assert check(values, solve(values)) is True


@settings(max_examples=30, deadline=None)
@given(st.lists(st.integers(-(2**31), 2**31 - 1), min_size=3, max_size=30, unique=True))
def test_solution_sorts_any_distinct_values(values):
    args = [str(v) for v in values]
    assert check(args, solve(args)) is True


@pytest.mark.parametrize(
    "args",
    [["1", "x"], ["1", "1"], ["2147483648"], ["1 2 -"], ["--1", "2"]],
)
def test_solve_rejects_bad_input(args):
    with pytest.raises(InputError):
        solve(args)


def test_main_without_arguments_reports_error(capsys):
    assert main([]) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_main_reports_duplicates(capsys):
    assert main(["3", "1", "3"]) == 1
    assert capsys.readouterr().err == "Error\n"


def test_main_prints_one_operation_per_line(capsys):
    assert main(["3 2 1"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == solve(["3 2 1"])
    assert out.endswith("\n")


def test_main_prints_nothing_for_sorted_input(capsys):
    assert main(["1", "2", "3"]) == 0
    assert capsys.readouterr().out == ""