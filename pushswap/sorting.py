"""Strategies that sort stack ``a`` with the puzzle's operations."""

from __future__ import annotations

from typing import Deque, Optional

from pushswap.stacks import Node, Stacks


def find_min_node(stack: Deque[Node]) -> Optional[Node]:
    """Return the node with the smallest rank, or None for an empty stack."""
    smallest: Optional[Node] = None
    for node in stack:
        if smallest is None or node.index < smallest.index:
            smallest = node
    return smallest


def get_node_position(stack: Deque[Node], target: Optional[Node]) -> int:
    """Return how far ``target`` is from the top; the stack size if absent."""
    for position, node in enumerate(stack):
        if node is target:
            return position
    return len(stack)


def still_has_elements(stack: Deque[Node], start_index: int, end_index: int) -> bool:
    """True when some node's rank lies in ``start_index..end_index``."""
    return any(start_index <= node.index <= end_index for node in stack)


def find_cheapest_node(b: Deque[Node]) -> Optional[Node]:
    """Return the first node with the lowest total of absolute costs."""
    cheapest: Optional[Node] = None
    lowest = 0
    for node in b:
        total = abs(node.cost_a) + abs(node.cost_b)
        if cheapest is None or total < lowest:
            cheapest = node
            lowest = total
    return cheapest


def _bring_to_top(stacks: Stacks, node: Node, position: int) -> None:
    if position <= stacks.size_a // 2:
        while stacks.a[0] is not node:
            stacks.ra()
    else:
        while stacks.a[0] is not node:
            stacks.rra()


def rotate_a_to_min(stacks: Stacks) -> None:
    """Rotate ``a`` the short way until its lowest-ranked node is on top."""
    smallest = find_min_node(stacks.a)
    if smallest is None:
        return
    _bring_to_top(stacks, smallest, get_node_position(stacks.a, smallest))


def best_move_to_top_a(stacks: Stacks, node: Node) -> None:
    """Rotate ``a`` the short way until ``node`` is on top."""
    position = get_node_position(stacks.a, node)
    if position == stacks.size_a:
        raise ValueError("node is not in stack a")
    _bring_to_top(stacks, node, position)


def fast_sort(stacks: Stacks) -> None:
    """Handle a stack of two: swap when the second value is the larger."""
    first, second = stacks.a[0].value, stacks.a[1].value
    if second > first:
        stacks.sa()


def quick_sort(stacks: Stacks) -> None:
    """Sort the three values on ``a`` with at most two operations."""
    a, b, c = (node.value for node in list(stacks.a)[:3])
    if a > b and b < c and a < c:
        stacks.sa()
    elif a > b and b > c:
        stacks.sa()
        stacks.rra()
    elif a > b and b < c and a > c:
        stacks.ra()
    elif a < b and b > c and a < c:
        stacks.sa()
        stacks.ra()
    elif a < b and b > c and a > c:
        stacks.rra()


def sort_small_stack(stacks: Stacks) -> None:
    """Sort four or five values: park the smallest on ``b``, sort three, return."""
    pushed = 0
    while stacks.size_a > 3:
        smallest = find_min_node(stacks.a)
        position = get_node_position(stacks.a, smallest)
        if position <= stacks.size_a // 2:
            for _ in range(position):
                stacks.ra()
        else:
            for _ in range(stacks.size_a - position):
                stacks.rra()
        stacks.pb()
        pushed += 1
    quick_sort(stacks)
    for _ in range(pushed):
        stacks.pa()


def middle_sort(stacks: Stacks) -> None:
    """Push nodes to ``b`` in rank order, then bring them all back."""
    for next_index in range(stacks.max_size):
        target = next((node for node in stacks.a if node.index == next_index), None)
        if target is None:
            break
        best_move_to_top_a(stacks, target)
        stacks.pb()
    while stacks.size_b > 0:
        stacks.pa()


def radix_sort(stacks: Stacks) -> None:
    """Binary radix sort on the ranks, least significant bit first."""
    max_bits = max(stacks.max_size - 1, 0).bit_length()
    for bit in range(max_bits):
        for _ in range(stacks.size_a):
            if (stacks.a[0].index >> bit) & 1 == 0:
                stacks.pb()
            else:
                stacks.ra()
        while stacks.size_b > 0:
            stacks.pa()


def split_chunk(stacks: Stacks, chunk: int, chunk_size: int, chunk_count: int) -> None:
    """Push every node of rank chunk ``chunk`` onto ``b``.

    Nodes in the lower half of the chunk are rotated to the bottom of ``b``.
    """
    start_index = chunk * chunk_size
    end_index = start_index + chunk_size - 1
    if chunk == chunk_count - 1:
        end_index = stacks.max_size - 1
    middle = (start_index + end_index) // 2
    while still_has_elements(stacks.a, start_index, end_index):
        if start_index <= stacks.a[0].index <= end_index:
            stacks.pb()
            if stacks.b and stacks.b[0].index < middle:
                stacks.rb()
        else:
            stacks.ra()


def get_target_position(a: Deque[Node], index_b: int) -> int:
    """Where in ``a`` a node of rank ``index_b`` belongs.

    That is the position of the smallest rank above ``index_b``, or of the
    lowest rank when there is none.
    """
    best: Optional[Node] = None
    for node in a:
        if node.index > index_b and (best is None or node.index < best.index):
            best = node
    if best is None:
        best = find_min_node(a)
    return get_node_position(a, best)


def _signed_cost(position: int, size: int) -> int:
    return position if position <= size // 2 else position - size


def calculate_costs(stacks: Stacks) -> None:
    """Set each ``b`` node's rotation costs for moving it into place on ``a``.

    A positive cost counts forward rotations, a negative one reverse ones.
    """
    for position, node in enumerate(stacks.b):
        node.cost_b = _signed_cost(position, stacks.size_b)
        node.cost_a = _signed_cost(
            get_target_position(stacks.a, node.index), stacks.size_a
        )


def move_stacks(stacks: Stacks, cost_a: int, cost_b: int) -> None:
    """Perform the rotations given by the costs, combining them where possible."""
    while cost_a > 0 and cost_b > 0:
        stacks.rr()
        cost_a -= 1
        cost_b -= 1
    while cost_a < 0 and cost_b < 0:
        stacks.rrr()
        cost_a += 1
        cost_b += 1
    for _ in range(cost_a):
        stacks.ra()
    for _ in range(-cost_a):
        stacks.rra()
    for _ in range(cost_b):
        stacks.rb()
    for _ in range(-cost_b):
        stacks.rrb()


def return_sorted_to_a(stacks: Stacks) -> None:
    """Move every node from ``b`` to its place on ``a``, cheapest first."""
    while stacks.size_b > 0:
        calculate_costs(stacks)
        cheapest = find_cheapest_node(stacks.b)
        if cheapest is None:
            return
        move_stacks(stacks, cheapest.cost_a, cheapest.cost_b)
        stacks.pa()


def chunk_sort(stacks: Stacks) -> None:
    """Sort by pushing rank chunks to ``b`` and inserting them back cheaply."""
    chunk_count = max(int(stacks.max_size * 0.01), 1)
    chunk_size = stacks.max_size // chunk_count
    for chunk in range(chunk_count):
        split_chunk(stacks, chunk, chunk_size, chunk_count)
    return_sorted_to_a(stacks)
    rotate_a_to_min(stacks)


def sort_stacks(stacks: Stacks) -> list[str]:
    """Pick a strategy by the size of ``a``, run it and return the operations."""
    if stacks.is_sorted():
        return stacks.operations
    size = stacks.size_a
    if size == 2:
        fast_sort(stacks)
    elif size == 3:
        quick_sort(stacks)
    elif size < 6:
        sort_small_stack(stacks)
    elif size < 50:
        middle_sort(stacks)
    elif size <= 500:
        chunk_sort(stacks)
    else:
        radix_sort(stacks)
    return stacks.operations