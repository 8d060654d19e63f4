"""The two stacks of the puzzle and the instructions that act on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from enum import Enum


class Op(str, Enum):
    """An instruction, named as it is written on a line."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


class Stacks:
    """Stacks ``a`` and ``b``, each a deque whose left end is the top.

    With ``record`` set, every instruction that changes a stack is appended
    to ``ops``; an instruction with nothing to act on is not recorded.
    Combined instructions are recorded as their two single halves.
    """

    def __init__(
        self,
        a: Iterable[int] = (),
        b: Iterable[int] = (),
        *,
        record: bool = False,
    ) -> None:
        self.a: deque[int] = deque(a)
        self.b: deque[int] = deque(b)
        self.record = record
        self.ops: list[Op] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def _stack(self, which: str) -> deque[int]:
        if which == "a":
            return self.a
        if which == "b":
            return self.b
        raise ValueError(f"unknown stack {which!r}")

    def _log(self, name: str) -> None:
        if self.record:
            self.ops.append(Op(name))

    def swap(self, which: str) -> bool:
        """Swap the two top elements of one stack."""
        stack = self._stack(which)
        if len(stack) < 2:
            return False
        stack[0], stack[1] = stack[1], stack[0]
        self._log("s" + which)
        return True

    def push(self, which: str) -> bool:
        """Move the top of the other stack onto the named one."""
        target = self._stack(which)
        source = self.b if target is self.a else self.a
        if not source:
            return False
        target.appendleft(source.popleft())
        self._log("p" + which)
        return True

    def rotate(self, which: str) -> bool:
        """Move the top element of one stack to its bottom."""
        stack = self._stack(which)
        if len(stack) < 2:
            return False
        stack.rotate(-1)
        self._log("r" + which)
        return True

    def reverse(self, which: str) -> bool:
        """Move the bottom element of one stack to its top."""
        stack = self._stack(which)
        if len(stack) < 2:
            return False
        stack.rotate(1)
        self._log("rr" + which)
        return True

    def swap_both(self) -> bool:
        done_a = self.swap("a")
        done_b = self.swap("b")
        return done_a or done_b

    def rotate_both(self) -> bool:
        done_a = self.rotate("a")
        done_b = self.rotate("b")
        return done_a or done_b

    def reverse_both(self) -> bool:
        done_a = self.reverse("a")
        done_b = self.reverse("b")
        return done_a or done_b

    def apply(self, op: Op | str) -> bool:
        """Carry out one instruction, given as an Op or its name."""
        op = Op(op)
        actions = {
            Op.SA: lambda: self.swap("a"),
            Op.SB: lambda: self.swap("b"),
            Op.SS: self.swap_both,
            Op.PA: lambda: self.push("a"),
            Op.PB: lambda: self.push("b"),
            Op.RA: lambda: self.rotate("a"),
            Op.RB: lambda: self.rotate("b"),
            Op.RR: self.rotate_both,
            Op.RRA: lambda: self.reverse("a"),
            Op.RRB: lambda: self.reverse("b"),
            Op.RRR: self.reverse_both,
        }
        return actions[op]()