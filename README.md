# pushswap

`pushswap` sorts a list of distinct integers using two stacks, `a` and `b`.
Only a fixed set of stack operations is allowed. The program prints the operations it uses, one per line.

## Installation

```
pip install .
```

## Usage

Give the numbers as separate arguments. The first argument is the top of stack `a`:

```
pushswap 2 1 3
```

This prints the operations that leave stack `a` in ascending order from top to bottom:

```
sa
```

If no arguments are given, nothing is printed and the exit status is 0.

Each argument must consist only of the digits `0`-`9`, with an optional leading `-`.
A leading `+`, spaces or any other character are rejected.
Every value must fit in a 32-bit signed integer, and no value may appear twice.
If any of these rules is broken, the program writes `Error` to standard error, prints no operations, and exits with status 255.

## Operations

| Operation | Effect |
|-----------|--------|
| `sa` / `sb` / `ss` | swap the top two elements of `a`, `b`, or both |
| `pa` / `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra` / `rb` / `rr` | rotate `a`, `b`, or both upward, so the top goes to the bottom |
| `rra` / `rrb` / `rrr` | rotate `a`, `b`, or both downward, so the bottom goes to the top |

An operation on an empty stack, or a swap on a stack with fewer than two elements, leaves that stack as it is. The operation is still printed.

## How it sorts

Each value is first given its rank, which is the number of values smaller than it.

- Two values: one `sa` if needed.
- Three values: at most two operations.
- Four or five values: the two smallest are parked on `b`, the rest of `a` is ordered, and the two are pushed back.
- Six or more values: a binary radix sort on the ranks. Each pass sends elements whose current bit is 0 to `b` and rotates the others, then pushes everything back. Passes repeat until `a` is sorted.

Input that is already sorted produces no operations.

## Library use

```python
from pushswap.sorting import solve

operations = solve([3, 2, 1])
```

`solve` returns the operation names as a list, in order. It raises `pushswap.parsing.ParseError` if a value repeats.

The other modules:

- `pushswap.stacks` provides `Element`, which holds a value and its rank, and `State`.
  `State` holds both stacks as deques, with index 0 at the top. It has a method for each operation; each method writes the operation's name to a text stream, standard output by default.
  `rank_a` and `rank_b` read ranks at an offset that wraps around the stack. `ranks_a` and `values_a` list stack `a`. `describe` returns a text dump of both stacks.
- `pushswap.parsing` provides:
  - `parse_elements`, which turns argument strings into ranked elements;
  - `check_args`, `is_integer_literal`, `parse_int` and `rank_values`, which it uses.

  All of these raise `ParseError`, a subclass of `ValueError`.
- `pushswap.sorting` provides `sort`, `little_sort`, `sort_3`, `bubble_sort` and `is_sorted`. They run on a `State`.
- `pushswap.cli.main` is the command-line entry point.

## Limits

`pushswap` does not check a list of operations supplied from outside. It only produces the operations that sort its own input.