"""Produce the instructions that sort the numbers given on the command line."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from itertools import pairwise

from .big_sort import sort_big
from .parsing import InputError, parse_args
from .small_sort import sort_five, sort_four, sort_three, sort_two
from .stacks import Op, Stacks


def is_sorted(values: Iterable[int]) -> bool:
    """True if the values never decrease from first to last."""
    return all(left <= right for left, right in pairwise(values))


def solve(numbers: Sequence[int]) -> list[Op]:
    """Return the instructions that sort ``numbers`` onto stack ``a``."""
    stacks = Stacks(numbers, record=True)
    size = len(stacks.a)
    if is_sorted(stacks.a):
        return []
    if size == 2:
        sort_two(stacks)
    elif size == 3:
        sort_three(stacks)
    elif size == 4:
        sort_four(stacks, size)
    elif size == 5:
        sort_five(stacks, size)
    else:
        sort_big(stacks, size)
    return list(stacks.ops)


def main(argv: Sequence[str] | None = None) -> int:
    """Print one instruction per line; print Error and fail on bad input."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        numbers = parse_args(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    for op in solve(numbers):
        sys.stdout.write(f"{op}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())