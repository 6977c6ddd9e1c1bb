"""Reading the numbers of a puzzle from command-line arguments."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from pushswap.stacks import Element

_INT_MAX = 2147483647
_INT_MIN_MAGNITUDE = 2147483648
_NUMBER_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")


class ParseError(ValueError):
    """The arguments do not describe a valid puzzle."""

    def __init__(self, message: str = "Error"):
        super().__init__(message)


def is_integer_literal(text: str) -> bool:
    """True if ``text`` holds only digits, with an optional leading minus."""
    body = text[1:] if text.startswith("-") else text
    return all("0" <= char <= "9" for char in body)


def parse_int(text: str) -> int:
    """Read a 32-bit signed integer from the start of ``text``.

    Leading whitespace and one sign are accepted; reading stops at the first
    non-digit. Raises ParseError if the number does not fit in 32 bits.
    """
    match = _NUMBER_PREFIX.match(text)
    sign, digits = match.group(1), match.group(2)
    magnitude = int(digits) if digits else 0
    limit = _INT_MIN_MAGNITUDE if sign == "-" else _INT_MAX
    if magnitude > limit:
        raise ParseError()
    return -magnitude if sign == "-" else magnitude


def check_args(args: Iterable[str]) -> None:
    """Raise ParseError unless every argument is an integer literal."""
    if not all(is_integer_literal(arg) for arg in args):
        raise ParseError()


def rank_values(values: Sequence[int]) -> list[int]:
    """For each value, how many of the values are smaller. Duplicates raise ParseError."""
    if len(set(values)) != len(values):
        raise ParseError()
    position = {value: rank for rank, value in enumerate(sorted(values))}
    return [position[value] for value in values]


def parse_elements(args: Sequence[str]) -> list[Element]:
    """Turn command-line arguments into ranked elements, top of the stack first."""
    check_args(args)
    values = [parse_int(arg) for arg in args]
    return [Element(value, rank) for value, rank in zip(values, rank_values(values))]