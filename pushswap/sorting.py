"""Sorting stack ``a`` of a puzzle state with the puzzle's operations."""

from __future__ import annotations

import io
from collections.abc import Iterable, Sequence

from pushswap.parsing import rank_values
from pushswap.stacks import Element, State

_LITTLE_LIMIT = 6


def is_sorted(ranks: Sequence[int], size: int) -> bool:
    """True if ``ranks`` (top first) starts at rank 0 and climbs by one all the way round."""
    if len(ranks) <= 1:
        return True
    if ranks[0] != 0:
        return False
    successors = list(ranks[1:]) + [ranks[0]]
    return all((rank + 1) % size == following for rank, following in zip(ranks, successors))


def sort(state: State, size: int) -> None:
    """Sort stack a of ``state``, which holds ``size`` elements ranked 0 to size - 1."""
    if size < _LITTLE_LIMIT:
        little_sort(state, size)
        return
    bit = 0
    while not is_sorted(state.ranks_a(), size):
        for _ in range(size):
            if state.a and state.rank_a() & (1 << bit):
                state.ra()
            else:
                state.pb()
        while state.b:
            state.pa()
        bit += 1


def little_sort(state: State, size: int) -> None:
    """Sort a stack of at most five elements."""
    if is_sorted(state.ranks_a(), size):
        return
    if size == 2:
        state.sa()
    elif size == 3:
        sort_3(state)
    elif size > 3:
        bubble_sort(state)


def sort_3(state: State) -> None:
    """Sort a stack of exactly three elements in at most two operations."""
    if state.rank_a() == 2:
        state.ra()
    elif state.rank_a(1) == 2:
        state.rra()
    if state.rank_a(1) == 0:
        state.sa()


def bubble_sort(state: State) -> None:
    """Sort a stack of four or five elements by parking the two smallest on b."""
    while len(state.b) < 2:
        if state.rank_a() < 2:
            state.pb()
        else:
            state.ra()
    if state.rank_b() == 0:
        state.sb()
    if state.rank_a(2) != 4:
        if state.rank_a() == 4:
            state.ra()
        else:
            state.rra()
    if state.rank_a() > state.rank_a(1):
        state.sa()
    while state.b:
        state.pa()


def solve(values: Iterable[int]) -> list[str]:
    """The operations that sort ``values`` (top of the stack first).

    Raises ParseError if a value occurs twice.
    """
    numbers = list(values)
    if not numbers:
        return []
    elements = [Element(value, rank) for value, rank in zip(numbers, rank_values(numbers))]
    buffer = io.StringIO()
    state = State(elements, out=buffer)
    sort(state, len(numbers))
    return buffer.getvalue().split()