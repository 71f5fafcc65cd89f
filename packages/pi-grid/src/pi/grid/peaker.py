"""Strategies that pick which column (or row) to resize next.

``peak(min_sizes, sizes)`` returns the index to shrink or grow by one unit,
or ``None`` when there is nothing left to pick. An empty ``min_sizes``
means there are no floors, which is how the fitter calls it when growing.
Each strategy may keep a cursor, so the fitter creates a fresh one per run.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol, Sequence

from pi.grid.errors import GridError


class Peaker(Protocol):
    def peak(self, min_sizes: Sequence[int], sizes: Sequence[int]) -> int | None: ...


def _above_floor(min_sizes: Sequence[int], sizes: Sequence[int], i: int) -> bool:
    return not min_sizes or sizes[i] > min_sizes[i]


@dataclass
class PriorityNone:
    """Round robin over the axes, skipping those of size zero."""

    cursor: int = 0

    def peak(self, min_sizes: Sequence[int], sizes: Sequence[int]) -> int | None:
        n = len(sizes)
        if n == 0:
            return None

        i = self.cursor % n
        for _ in range(n):
            if sizes[i] > 0:
                self.cursor = (i + 1) % n
                return i
            i = (i + 1) % n
        return None


@dataclass
class PriorityMax:
    """The largest axis still above its floor; ties go to the lowest index."""

    def peak(self, min_sizes: Sequence[int], sizes: Sequence[int]) -> int | None:
        best: int | None = None
        for i, size in enumerate(sizes):
            if _above_floor(min_sizes, sizes, i) and (best is None or size > sizes[best]):
                best = i
        if best is None or sizes[best] == 0:
            return None
        return best


@dataclass
class PriorityMin:
    """The smallest axis still above its floor; ties go to the lowest index."""

    def peak(self, min_sizes: Sequence[int], sizes: Sequence[int]) -> int | None:
        best: int | None = None
        for i, size in enumerate(sizes):
            if _above_floor(min_sizes, sizes, i) and (best is None or size < sizes[best]):
                best = i
        return best


@dataclass
class PriorityLeft:
    """Work on the leftmost axis until it is at its floor, then move right."""

    cursor: int = 0

    def peak(self, min_sizes: Sequence[int], sizes: Sequence[int]) -> int | None:
        while self.cursor < len(sizes):
            if _above_floor(min_sizes, sizes, self.cursor):
                return self.cursor
            self.cursor += 1
        return None


@dataclass
class PriorityRight:
    """Work on the rightmost axis until it is at its floor, then move left."""

    cursor: int | None = None

    def peak(self, min_sizes: Sequence[int], sizes: Sequence[int]) -> int | None:
        if self.cursor is None:
            self.cursor = len(sizes) - 1
        while self.cursor >= 0:
            if _above_floor(min_sizes, sizes, self.cursor):
                return self.cursor
            self.cursor -= 1
        return None


PEAKERS: dict[str, Callable[[], Peaker]] = {
    "none": PriorityNone,
    "max": PriorityMax,
    "min": PriorityMin,
    "left": PriorityLeft,
    "right": PriorityRight,
}


def get_peaker(name: str) -> Peaker:
    """Create a fresh strategy by name: none, max, min, left or right."""
    factory = PEAKERS.get(name.lower())
    if factory is None:
        raise GridError(f"unknown priority {name!r}; expected one of {', '.join(PEAKERS)}")
    return factory()
