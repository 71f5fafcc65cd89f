"""Merged cells.

Spans are kept in a list; an index maps every position a span covers back
to its entry, so visibility checks during estimation and rendering are a
single dict lookup.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Iterator

from pi.grid.errors import GridError, InvalidPositionError, SpanOverlapError
from pi.grid.types import Position

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Span:
    anchor: Position
    row_span: int = 1
    col_span: int = 1

    def footprint(self) -> Iterator[Position]:
        row, col = self.anchor
        for r in range(row, row + self.row_span):
            for c in range(col, col + self.col_span):
                yield r, c

    @property
    def end(self) -> Position:
        """One past the last covered row and column."""
        return self.anchor[0] + self.row_span, self.anchor[1] + self.col_span


class SpanMap:
    def __init__(self) -> None:
        self._spans: list[Span] = []
        self._covered: dict[Position, int] = {}

    def __len__(self) -> int:
        return len(self._spans)

    def __iter__(self) -> Iterator[Span]:
        return iter(self._spans)

    def is_empty(self) -> bool:
        return not self._spans

    def set(self, pos: Position, row_span: int, col_span: int) -> None:
        """Register the span anchored at *pos*, replacing any previous one.

        Raises :class:`SpanOverlapError` if the footprint would intersect
        another span; the map is left unchanged in that case.
        """
        if row_span < 1 or col_span < 1:
            raise GridError(f"span at {pos} must be at least 1x1, got {row_span}x{col_span}")

        existing = self._index_of_anchor(pos)
        span = Span(pos, row_span, col_span)

        for covered in span.footprint():
            owner = self._covered.get(covered)
            if owner is not None and owner != existing:
                other = self._spans[owner].anchor
                logger.debug("Rejected span at %s: overlaps span at %s", pos, other)
                raise SpanOverlapError(pos, other)

        if existing is not None:
            del self._spans[existing]
        if row_span > 1 or col_span > 1:
            self._spans.append(span)
            logger.debug("Registered span at %s: %d rows x %d columns", pos, row_span, col_span)
        self._reindex()

    def set_row_span(self, pos: Position, n: int) -> None:
        self.set(pos, n, self.column_span(pos))

    def set_column_span(self, pos: Position, n: int) -> None:
        self.set(pos, self.row_span(pos), n)

    def remove(self, pos: Position) -> None:
        existing = self._index_of_anchor(pos)
        if existing is not None:
            del self._spans[existing]
            self._reindex()

    def clear(self) -> None:
        self._spans.clear()
        self._covered.clear()

    def insert_row(self, index: int) -> None:
        """Move spans anchored at or below row *index* one row down."""
        self._spans = [
            replace(s, anchor=(s.anchor[0] + 1, s.anchor[1])) if s.anchor[0] >= index else s
            for s in self._spans
        ]
        self._reindex()

    def insert_column(self, index: int) -> None:
        """Move spans anchored at or right of column *index* one column right."""
        self._spans = [
            replace(s, anchor=(s.anchor[0], s.anchor[1] + 1)) if s.anchor[1] >= index else s
            for s in self._spans
        ]
        self._reindex()

    def _reindex(self) -> None:
        self._covered = {}
        for i, span in enumerate(self._spans):
            for covered in span.footprint():
                self._covered[covered] = i

    def _index_of_anchor(self, pos: Position) -> int | None:
        i = self._covered.get(pos)
        if i is not None and self._spans[i].anchor == pos:
            return i
        return None

    # -- queries ----------------------------------------------------------

    def get(self, pos: Position) -> Span | None:
        """The span anchored at *pos*, if any."""
        i = self._index_of_anchor(pos)
        return self._spans[i] if i is not None else None

    def owner(self, pos: Position) -> Span | None:
        """The span covering *pos* (anchor included), if any."""
        i = self._covered.get(pos)
        return self._spans[i] if i is not None else None

    def row_span(self, pos: Position) -> int:
        span = self.get(pos)
        return span.row_span if span else 1

    def column_span(self, pos: Position) -> int:
        span = self.get(pos)
        return span.col_span if span else 1

    def is_visible(self, pos: Position) -> bool:
        i = self._covered.get(pos)
        return i is None or self._spans[i].anchor == pos

    def is_covered_by_row_span(self, pos: Position) -> bool:
        """True for positions below the anchor in the anchor's column."""
        span = self.owner(pos)
        return span is not None and pos[1] == span.anchor[1] and pos[0] > span.anchor[0]

    def is_covered_by_column_span(self, pos: Position) -> bool:
        """True for positions right of the anchor in the anchor's row."""
        span = self.owner(pos)
        return span is not None and pos[0] == span.anchor[0] and pos[1] > span.anchor[1]

    def is_covered_by_both(self, pos: Position) -> bool:
        span = self.owner(pos)
        return span is not None and pos[0] > span.anchor[0] and pos[1] > span.anchor[1]

    def column_spans(self) -> list[Span]:
        return [s for s in self._spans if s.col_span > 1]

    def row_spans(self) -> list[Span]:
        return [s for s in self._spans if s.row_span > 1]

    def validate(self, count_rows: int, count_columns: int) -> None:
        """Raise :class:`InvalidPositionError` for spans reaching outside the grid."""
        for span in self._spans:
            end_row, end_col = span.end
            if end_row > count_rows or end_col > count_columns:
                raise InvalidPositionError(span.anchor, (count_rows, count_columns), "span at")
