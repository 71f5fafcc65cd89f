"""Converge per-axis sizes toward a target total, one unit at a time."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from pi.grid.peaker import Peaker

logger = logging.getLogger(__name__)


@dataclass
class FitResult:
    """Sizes after fitting and the total they add up to.

    ``total`` differs from ``target`` when every axis hit its floor (or
    ceiling) first; that is the closest achievable total, not an error.
    """

    sizes: list[int]
    total: int
    target: int

    @property
    def reached(self) -> bool:
        return self.total == self.target


def shrink(
    sizes: Sequence[int],
    min_sizes: Sequence[int],
    total: int,
    target: int,
    peaker: Peaker,
) -> FitResult:
    """Decrease *sizes* until *total* reaches *target*.

    No axis goes below its entry in *min_sizes*. Stops early once the
    peaker gives up or every axis sits at its floor.
    """
    sizes = list(sizes)
    n = len(sizes)
    at_floor = sum(1 for size, floor in zip(sizes, min_sizes) if size <= floor)
    misses = 0

    while total > target and at_floor < n:
        i = peaker.peak(min_sizes, sizes)
        if i is None:
            break
        if sizes[i] <= min_sizes[i]:
            misses += 1
            if misses > n:
                break
            continue

        misses = 0
        sizes[i] -= 1
        total -= 1
        if sizes[i] == min_sizes[i]:
            at_floor += 1

    if total != target:
        logger.debug("Could not shrink to %d, stopped at %d (sizes=%s)", target, total, sizes)
    return FitResult(sizes, total, target)


def grow(
    sizes: Sequence[int],
    total: int,
    target: int,
    peaker: Peaker,
    max_sizes: Sequence[int] | None = None,
) -> FitResult:
    """Increase *sizes* until *total* reaches *target*.

    Without *max_sizes* there is no ceiling. With it, axes at their ceiling
    are shown to the peaker as size zero with a zero floor, so every
    strategy treats them as exhausted.
    """
    sizes = list(sizes)

    while total < target:
        if max_sizes is None:
            i = peaker.peak([], sizes)
        else:
            view = [size if size < cap else 0 for size, cap in zip(sizes, max_sizes)]
            i = peaker.peak([0] * len(view), view)
        if i is None:
            break

        sizes[i] += 1
        total += 1

    if total != target:
        logger.debug("Could not grow to %d, stopped at %d (sizes=%s)", target, total, sizes)
    return FitResult(sizes, total, target)
