"""Command line: print the operations that sort the given integers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.parsing import ParseError, parse_elements
from pushswap.sorting import sort
from pushswap.stacks import State

_FAILURE = 255


def main(argv: Sequence[str] | None = None) -> int:
    """Sort the integers in ``argv``, writing one operation per line to stdout."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        elements = parse_elements(args)
    except ParseError as error:
        sys.stderr.write(f"{error}\n")
        return _FAILURE
    state = State(elements, out=sys.stdout)
    sort(state, len(args))
    return 0


if __name__ == "__main__":
    sys.exit(main())