"""Fixed strategies for stacks of two to five elements."""

from __future__ import annotations

from itertools import islice

from .stacks import Stacks


def _bring_to_top(stacks: Stacks, index: int, size: int) -> None:
    """Rotate stack ``a`` the short way until position ``index`` is on top."""
    if index == 0:
        return
    if index <= size // 2:
        for _ in range(index):
            stacks.rotate("a")
    else:
        for _ in range(size - index):
            stacks.reverse("a")


def _min_position(stacks: Stacks, size: int) -> int:
    values = list(islice(stacks.a, size))
    return values.index(min(values))


def sort_two(stacks: Stacks) -> None:
    """Order the two elements of stack ``a``."""
    a = stacks.a
    if len(a) < 2:
        return
    if a[0] > a[1]:
        stacks.swap("a")


def sort_three(stacks: Stacks) -> None:
    """Order a stack ``a`` of three elements in at most two instructions."""
    a = stacks.a
    if not a:
        return
    if a[0] > a[1] and a[0] > a[2]:
        stacks.rotate("a")
    elif a[1] > a[0] and a[1] > a[2]:
        stacks.reverse("a")
    sort_two(stacks)


def sort_four(stacks: Stacks, size: int) -> None:
    """Park the smallest of four on ``b``, order the rest, bring it back."""
    _bring_to_top(stacks, _min_position(stacks, size), size)
    stacks.push("b")
    sort_three(stacks)
    stacks.push("a")


def sort_five(stacks: Stacks, size: int) -> None:
    """Park the smallest of five on ``b``, order the rest, bring it back."""
    _bring_to_top(stacks, _min_position(stacks, size), size)
    stacks.push("b")
    sort_four(stacks, size - 1)
    stacks.push("a")