from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.stacks import OPERATIONS, Node, Stacks


def make(values):
    return Stacks(Node(value) for value in values)


def test_initial_state():
    values = [5, 3, 9, 1]
    stacks = make(values)
    assert stacks.values_a() == values
    assert stacks.values_b() == []
    assert stacks.max_size == len(values)
    assert stacks.size_a == len(values)
    assert stacks.size_b == 0
    assert stacks.operations == []


def test_sa_swaps_top_two():
    values = [5, 3, 9, 1]
    stacks = make(values)
    stacks.sa()
    assert stacks.values_a() == [values[1], values[0]] + values[2:]
    assert stacks.operations == ["sa"]


def test_sa_on_single_element_does_nothing():
    stacks = make([7])
    stacks.sa()
    assert stacks.values_a() == [7]
    assert stacks.operations == []


def test_pb_and_pa_move_top():
    values = [5, 3, 9, 1]
    stacks = make(values)
    stacks.pb()
    stacks.pb()
    assert stacks.values_b() == [values[1], values[0]]
    assert stacks.values_a() == values[2:]
    assert stacks.size_a == 2 and stacks.size_b == 2
    stacks.pa()
    assert stacks.values_a() == [values[1]] + values[2:]
    assert stacks.operations == ["pb", "pb", "pa"]


def test_pa_on_empty_b_does_nothing():
    stacks = make([1, 2])
    stacks.pa()
    assert stacks.values_a() == [1, 2]
    assert stacks.operations == []


def test_ra_and_rra():
    values = [5, 3, 9, 1]
    stacks = make(values)
    stacks.ra()
    assert stacks.values_a() == values[1:] + values[:1]
    stacks.rra()
    stacks.rra()
    assert stacks.values_a() == values[-1:] + values[:-1]
    assert stacks.operations == ["ra", "rra", "rra"]


def test_b_operations():
    values = [5, 3, 9]
    stacks = make(values)
    for _ in values:
        stacks.pb()
    b_before = stacks.values_b()
    stacks.sb()
    assert stacks.values_b() == [b_before[1], b_before[0], b_before[2]]
    stacks.sb()
    stacks.rb()
    assert stacks.values_b() == b_before[1:] + b_before[:1]
    stacks.rrb()
    assert stacks.values_b() == b_before


def test_combined_operations_always_recorded():
    stacks = make([1])
    stacks.ss()
    stacks.rr()
    stacks.rrr()
    assert stacks.values_a() == [1]
    assert stacks.operations == ["ss", "rr", "rrr"]


def test_rr_moves_both_stacks():
    stacks = make([1, 2, 3, 4])
    stacks.pb()
    stacks.pb()
    a_before, b_before = stacks.values_a(), stacks.values_b()
    stacks.rr()
    assert stacks.values_a() == a_before[1:] + a_before[:1]
    assert stacks.values_b() == b_before[1:] + b_before[:1]
    stacks.rrr()
    assert stacks.values_a() == a_before
    assert stacks.values_b() == b_before


def test_node_identity_kept():
    nodes = [Node(4, index=1), Node(2, index=0)]
    stacks = Stacks(nodes)
    stacks.sa()
    assert stacks.a[0] is nodes[1]
    assert stacks.a[1] is nodes[0]


def test_apply_dispatches_by_name():
    values = [5, 3, 9]
    stacks = make(values)
    stacks.apply("pb")
    stacks.apply("ra")
    assert stacks.values_b() == values[:1]
    assert stacks.values_a() == [values[2], values[1]]
    assert stacks.operations == ["pb", "ra"]


@pytest.mark.parametrize("name", ["", "sc", "pa\n", "RA", "is_sorted", "rrrr"])
def test_apply_rejects_unknown(name):
    stacks = make([1, 2])
    with pytest.raises(ValueError):
        stacks.apply(name)


def test_is_sorted():
    assert make([1, 2, 3]).is_sorted() is True
    assert make([2, 1, 3]).is_sorted() is False
    assert make([]).is_sorted() is True


@given(st.lists(st.integers(), max_size=8))
def test_double_swap_is_identity(values):
    stacks = make(values)
    stacks.sa()
    stacks.sa()
    assert stacks.values_a() == values


@given(st.lists(st.integers(), max_size=8))
def test_rotate_then_reverse_is_identity(values):
    stacks = make(values)
    stacks.ra()
    stacks.rra()
    assert stacks.values_a() == values


@given(st.lists(st.integers(), max_size=8))
def test_push_then_pull_is_identity(values):
    stacks = make(values)
    stacks.pb()
    stacks.pa()
    assert stacks.values_a() == values
    assert stacks.values_b() == []


@given(
    st.lists(st.integers(), max_size=10),
    st.lists(st.sampled_from(OPERATIONS), max_size=30),
)
def test_operations_preserve_elements(values, names):
    stacks = make(values)
    for name in names:
        stacks.apply(name)
    assert Counter(stacks.values_a() + stacks.values_b()) == Counter(values)
    assert stacks.size_a + stacks.size_b == len(values)
    assert set(stacks.operations) <= set(names)
    assert len(stacks.operations) <= len(names)