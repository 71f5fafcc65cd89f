"""Tests for the resize strategies."""

from __future__ import annotations

import pytest

from pi.grid import (
    GridError,
    PriorityLeft,
    PriorityMax,
    PriorityMin,
    PriorityNone,
    PriorityRight,
    get_peaker,
)


class TestPriorityNone:
    """Round robin, skipping axes of size zero."""

    def test_cycles(self) -> None:
        p = PriorityNone()
        assert [p.peak([], [1, 0, 2]) for _ in range(4)] == [0, 2, 0, 2]

    def test_all_zero(self) -> None:
        assert PriorityNone().peak([], [0, 0]) is None

    def test_empty(self) -> None:
        assert PriorityNone().peak([], []) is None


class TestPriorityMax:
    """The largest axis above its floor, lowest index on ties."""

    def test_largest(self) -> None:
        assert PriorityMax().peak([0, 0, 0], [2, 5, 3]) == 1

    def test_tie_goes_to_lowest_index(self) -> None:
        assert PriorityMax().peak([0, 0, 0], [2, 5, 5]) == 1

    def test_skips_axes_at_floor(self) -> None:
        assert PriorityMax().peak([0, 5, 0], [2, 5, 3]) == 2

    def test_all_zero(self) -> None:
        assert PriorityMax().peak([], [0, 0]) is None

    def test_without_floors(self) -> None:
        assert PriorityMax().peak([], [1, 4]) == 1


class TestPriorityMin:
    """The smallest axis above its floor."""

    def test_smallest(self) -> None:
        assert PriorityMin().peak([0, 0, 0], [3, 1, 2]) == 1

    def test_skips_axes_at_floor(self) -> None:
        assert PriorityMin().peak([0, 1, 0], [3, 1, 2]) == 2

    def test_all_at_floor(self) -> None:
        assert PriorityMin().peak([3, 1], [3, 1]) is None


class TestPriorityLeft:
    """Leftmost first, moving right once an axis is exhausted."""

    def test_first(self) -> None:
        assert PriorityLeft().peak([0, 0], [2, 2]) == 0

    def test_moves_right(self) -> None:
        p = PriorityLeft()
        assert p.peak([2, 0], [2, 2]) == 1
        assert p.peak([2, 0], [3, 2]) == 1

    def test_exhausted(self) -> None:
        assert PriorityLeft().peak([1, 1], [1, 1]) is None


class TestPriorityRight:
    """Rightmost first, moving left once an axis is exhausted."""

    def test_last(self) -> None:
        assert PriorityRight().peak([0, 0], [2, 2]) == 1

    def test_moves_left(self) -> None:
        assert PriorityRight().peak([0, 2], [2, 2]) == 0

    def test_exhausted(self) -> None:
        assert PriorityRight().peak([1, 1], [1, 1]) is None


class TestGetPeaker:
    """Strategies are looked up by name."""

    @pytest.mark.parametrize(
        ("name", "cls"),
        [
            ("none", PriorityNone),
            ("max", PriorityMax),
            ("MIN", PriorityMin),
            ("left", PriorityLeft),
            ("right", PriorityRight),
        ],
    )
    def test_names(self, name: str, cls: type) -> None:
        assert isinstance(get_peaker(name), cls)

    def test_fresh_instances(self) -> None:
        assert get_peaker("left") is not get_peaker("left")

    def test_unknown(self) -> None:
        with pytest.raises(GridError, match="unknown priority"):
            get_peaker("biggest")
