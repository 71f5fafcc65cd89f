"""Tests for the span map."""

from __future__ import annotations

import pytest

from pi.grid import GridError, InvalidPositionError, SpanMap, SpanOverlapError


class TestSpanRegistration:
    """Spans are registered per anchor and must not overlap."""

    def test_register(self) -> None:
        spans = SpanMap()
        spans.set((0, 0), 2, 3)
        assert spans.row_span((0, 0)) == 2
        assert spans.column_span((0, 0)) == 3
        assert len(spans) == 1

    def test_defaults_to_one(self) -> None:
        spans = SpanMap()
        assert spans.row_span((4, 4)) == 1
        assert spans.column_span((4, 4)) == 1
        assert spans.get((4, 4)) is None

    def test_replace_same_anchor(self) -> None:
        spans = SpanMap()
        spans.set((0, 0), 1, 3)
        spans.set((0, 0), 1, 2)
        assert spans.column_span((0, 0)) == 2
        assert spans.is_visible((0, 2))

    def test_one_by_one_removes(self) -> None:
        spans = SpanMap()
        spans.set((1, 1), 2, 2)
        spans.set((1, 1), 1, 1)
        assert spans.is_empty()
        assert spans.is_visible((2, 2))

    def test_overlap_is_rejected(self) -> None:
        spans = SpanMap()
        spans.set((0, 0), 1, 2)
        with pytest.raises(SpanOverlapError) as exc:
            spans.set((0, 1), 2, 1)
        assert exc.value.other == (0, 0)
        assert spans.get((0, 1)) is None
        assert len(spans) == 1

    def test_anchor_inside_other_span_is_rejected(self) -> None:
        spans = SpanMap()
        spans.set((0, 0), 3, 3)
        with pytest.raises(SpanOverlapError):
            spans.set((2, 2), 1, 2)

    def test_adjacent_spans_are_fine(self) -> None:
        spans = SpanMap()
        spans.set((0, 0), 1, 2)
        spans.set((0, 2), 1, 2)
        spans.set((1, 0), 2, 1)
        assert len(spans) == 3

    def test_zero_is_invalid(self) -> None:
        with pytest.raises(GridError):
            SpanMap().set((0, 0), 0, 2)

    def test_remove(self) -> None:
        spans = SpanMap()
        spans.set((0, 0), 2, 2)
        spans.remove((0, 0))
        assert spans.is_visible((1, 1))


class TestSpanCoverage:
    """Coverage queries tell the composer how to draw covered positions."""

    @pytest.fixture
    def spans(self) -> SpanMap:
        m = SpanMap()
        m.set((1, 1), 2, 3)
        return m

    def test_visibility(self, spans: SpanMap) -> None:
        assert spans.is_visible((1, 1))
        assert not spans.is_visible((1, 2))
        assert not spans.is_visible((2, 3))
        assert spans.is_visible((3, 1))

    def test_owner(self, spans: SpanMap) -> None:
        owner = spans.owner((2, 3))
        assert owner is not None
        assert owner.anchor == (1, 1)
        assert owner.end == (3, 4)

    def test_covered_by_row_span(self, spans: SpanMap) -> None:
        assert spans.is_covered_by_row_span((2, 1))
        assert not spans.is_covered_by_row_span((1, 1))
        assert not spans.is_covered_by_row_span((2, 2))

    def test_covered_by_column_span(self, spans: SpanMap) -> None:
        assert spans.is_covered_by_column_span((1, 3))
        assert not spans.is_covered_by_column_span((2, 3))

    def test_covered_by_both(self, spans: SpanMap) -> None:
        assert spans.is_covered_by_both((2, 2))
        assert not spans.is_covered_by_both((2, 1))

    def test_lists(self, spans: SpanMap) -> None:
        spans.set((4, 0), 1, 2)
        assert [s.anchor for s in spans.column_spans()] == [(1, 1), (4, 0)]
        assert [s.anchor for s in spans.row_spans()] == [(1, 1)]


class TestSpanShifting:
    """Inserting a row or column moves the spans that come after it."""

    def test_insert_row(self) -> None:
        spans = SpanMap()
        spans.set((0, 0), 1, 2)
        spans.set((1, 0), 2, 1)
        spans.insert_row(1)
        assert spans.column_span((0, 0)) == 2
        assert spans.get((1, 0)) is None
        assert spans.row_span((2, 0)) == 2
        assert not spans.is_visible((3, 0))
        assert spans.is_visible((1, 0))

    def test_insert_column(self) -> None:
        spans = SpanMap()
        spans.set((0, 1), 2, 1)
        spans.insert_column(0)
        assert spans.row_span((0, 2)) == 2
        assert spans.owner((1, 1)) is None
        assert spans.owner((1, 2)) is not None


class TestSpanValidation:
    """Spans reaching outside the grid are rejected at validation."""

    def test_valid(self) -> None:
        spans = SpanMap()
        spans.set((0, 0), 2, 2)
        spans.validate(2, 2)

    def test_too_wide(self) -> None:
        spans = SpanMap()
        spans.set((0, 1), 1, 2)
        with pytest.raises(InvalidPositionError):
            spans.validate(1, 2)

    def test_too_tall(self) -> None:
        spans = SpanMap()
        spans.set((1, 0), 3, 1)
        with pytest.raises(InvalidPositionError):
            spans.validate(3, 1)
