"""The two stacks of the puzzle and the operations that move elements between them."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TextIO


@dataclass
class Element:
    """A number on a stack, with its rank among all numbers of the puzzle."""

    value: int
    rank: int = 0


def _swap(stack: deque[Element]) -> None:
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def _rotate(stack: deque[Element], reverse: bool) -> None:
    if stack:
        stack.rotate(1 if reverse else -1)


def _move(source: deque[Element], target: deque[Element]) -> None:
    if source:
        target.appendleft(source.popleft())


def _rank_at(stack: deque[Element], name: str, offset: int) -> int:
    if not stack:
        raise IndexError(f"stack {name} is empty")
    return stack[offset % len(stack)].rank


def _join(items: Iterable[int]) -> str:
    return ", ".join(str(item) for item in items)


class State:
    """Stacks ``a`` and ``b``; each operation is written to ``out`` as it is done.

    Index 0 of a stack is its top. Both stacks wrap around, so offsets past
    either end continue from the other one.
    """

    def __init__(self, elements: Iterable[Element] = (), out: TextIO | None = None):
        self.a: deque[Element] = deque(elements)
        self.b: deque[Element] = deque()
        self._out = out

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def _emit(self, name: str) -> None:
        self.out.write(name + "\n")

    def sa(self) -> None:
        """Swap the two top elements of a."""
        _swap(self.a)
        self._emit("sa")

    def sb(self) -> None:
        """Swap the two top elements of b."""
        _swap(self.b)
        self._emit("sb")

    def ss(self) -> None:
        """Swap the tops of both stacks."""
        _swap(self.a)
        _swap(self.b)
        self._emit("ss")

    def pa(self) -> None:
        """Move the top of b onto a."""
        _move(self.b, self.a)
        self._emit("pa")

    def pb(self) -> None:
        """Move the top of a onto b."""
        _move(self.a, self.b)
        self._emit("pb")

    def ra(self) -> None:
        """Rotate a: its top goes to the bottom."""
        _rotate(self.a, reverse=False)
        self._emit("ra")

    def rb(self) -> None:
        """Rotate b: its top goes to the bottom."""
        _rotate(self.b, reverse=False)
        self._emit("rb")

    def rr(self) -> None:
        """Rotate both stacks."""
        _rotate(self.a, reverse=False)
        _rotate(self.b, reverse=False)
        self._emit("rr")

    def rra(self) -> None:
        """Reverse-rotate a: its bottom comes to the top."""
        _rotate(self.a, reverse=True)
        self._emit("rra")

    def rrb(self) -> None:
        """Reverse-rotate b: its bottom comes to the top."""
        _rotate(self.b, reverse=True)
        self._emit("rrb")

    def rrr(self) -> None:
        """Reverse-rotate both stacks."""
        _rotate(self.a, reverse=True)
        _rotate(self.b, reverse=True)
        self._emit("rrr")

    def rank_a(self, offset: int = 0) -> int:
        """Rank of the element ``offset`` places below the top of a (negative: above, wrapping)."""
        return _rank_at(self.a, "a", offset)

    def rank_b(self, offset: int = 0) -> int:
        """Rank of the element ``offset`` places below the top of b (negative: above, wrapping)."""
        return _rank_at(self.b, "b", offset)

    def ranks_a(self) -> list[int]:
        """Ranks of stack a from top to bottom."""
        return [element.rank for element in self.a]

    def values_a(self) -> list[int]:
        """Values of stack a from top to bottom."""
        return [element.value for element in self.a]

    def describe(self) -> str:
        """A readable dump of both stacks' values and ranks."""
        return (
            "------------------------------\n"
            f"A value: [{_join(e.value for e in self.a)}]\n"
            f"A order: [{_join(e.rank for e in self.a)}]\n"
            f"B value: [{_join(e.value for e in self.b)}]\n"
            f"B order: [{_join(e.rank for e in self.b)}]\n"
        )