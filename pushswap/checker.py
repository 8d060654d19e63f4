"""Check whether a list of instructions read from input sorts the stack."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from .lines import LineReader
from .parsing import InputError, parse_args
from .push_swap import is_sorted
from .stacks import Op, Stacks

# Tried in this order; a line matches the first template it is a prefix of.
_TEMPLATES: tuple[tuple[str, Op], ...] = (
    ("ra\n", Op.RA),
    ("rb\n", Op.RB),
    ("sa\n", Op.SA),
    ("sb\n", Op.SB),
    ("pa\n", Op.PA),
    ("pb\n", Op.PB),
    ("rra\n", Op.RRA),
    ("rrb\n", Op.RRB),
    ("rrr\n", Op.RRR),
    ("rr\n", Op.RR),
    ("ss\n", Op.SS),
)


def check_sorted(stacks: Stacks) -> bool:
    """True if ``b`` is empty and ``a`` is in ascending order."""
    return not stacks.b and is_sorted(stacks.a)


def parse_instruction(line: str) -> Op:
    """Map a line to its instruction.

    A line is accepted when it is a prefix of an instruction followed by a
    newline, so a final line without its newline still counts; the first
    matching instruction in a fixed order wins. Anything else raises
    InputError.
    """
    for template, op in _TEMPLATES:
        if template.startswith(line):
            return op
    raise InputError()


def run(numbers: Sequence[int], lines: Iterable[str]) -> bool:
    """Apply every line to a stack holding ``numbers``; report if sorted."""
    stacks = Stacks(numbers)
    for line in lines:
        stacks.apply(parse_instruction(line))
    return check_sorted(stacks)


def main(argv: Sequence[str] | None = None) -> int:
    """Read instructions from standard input and print OK or KO."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        numbers = parse_args(args)
        result = run(numbers, LineReader(sys.stdin))
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("OK\n" if result else "KO\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())