"""Chunked strategy for stacks of six or more elements."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import islice

from .stacks import Stacks


def make_offset(size: int) -> int:
    """Width of the chunk added on each side of the median per pass."""
    if size < 11:
        return 2
    if size < 151:
        return 11
    return 32


def locate(stack: Sequence[int], value: int) -> int:
    """Position of ``value`` from the top, or the length if it is absent."""
    for position, item in enumerate(stack):
        if item == value:
            return position
    return len(stack)


class _BigSort:
    def __init__(self, stacks: Stacks, size: int) -> None:
        self.stacks = stacks
        self.size = size
        self.offset = make_offset(size)
        self.ranked = sorted(islice(stacks.a, size))

    def _bound(self, index: int) -> int:
        # One slot past the end reads as zero; farther out is pinned to the ends.
        if index < 0:
            index = 0
        elif index > self.size:
            index = self.size - 1
        return self.ranked[index] if index < self.size else 0

    def _nth(self, rank: int) -> int:
        return self.ranked[rank] if 0 <= rank < self.size else 0

    def spread_to_b(self) -> None:
        stacks = self.stacks
        middle = self.size // 2 - 1
        low = middle - self.offset
        high = middle + self.offset
        remaining = self.size
        while stacks.a:
            low_value = self._bound(low)
            mid_value = self._bound(middle)
            high_value = self._bound(high)
            pushed = 0
            for _ in range(remaining):
                top = stacks.a[0]
                if low_value <= top <= mid_value:
                    stacks.push("b")
                    stacks.rotate("b")
                    pushed += 1
                elif mid_value < top <= high_value:
                    stacks.push("b")
                    pushed += 1
                else:
                    stacks.rotate("a")
            remaining -= pushed
            low -= self.offset
            high += self.offset
            if high > self.size:
                high = self.size - 1
            if low < 0:
                low = 0

    def gather_to_a(self) -> None:
        stacks = self.stacks
        rank = self.size - 1
        wanted = self._nth(rank)
        at_bottom = 0
        tail = 0
        in_b = self.size
        while stacks.b:
            if wanted in stacks.b:
                head = stacks.b[0]
                if not stacks.a or head == wanted:
                    if head == wanted:
                        rank -= 1
                        wanted = self._nth(rank)
                    else:
                        tail = head
                        at_bottom += 1
                    stacks.push("a")
                    in_b -= 1
                elif at_bottom == 0 or head > tail:
                    stacks.push("a")
                    stacks.rotate("a")
                    tail = head
                    at_bottom += 1
                    in_b -= 1
                elif locate(stacks.b, wanted) > in_b // 2:
                    stacks.reverse("b")
                else:
                    stacks.rotate("b")
            else:
                stacks.reverse("a")
                rank -= 1
                wanted = self._nth(rank)
                at_bottom = max(at_bottom - 1, 0)
        for _ in range(at_bottom):
            stacks.reverse("a")


def sort_big(stacks: Stacks, size: int) -> None:
    """Sort stack ``a`` of ``size`` elements, using ``b`` as scratch space.

    Elements are first spread onto ``b`` in widening bands around the
    median, then brought back largest first.
    """
    if size != len(stacks.a):
        raise ValueError(f"size {size} does not match stack of {len(stacks.a)}")
    if size == 0:
        return
    sorter = _BigSort(stacks, size)
    sorter.spread_to_b()
    sorter.gather_to_a()