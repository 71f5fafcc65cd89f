"""Panels: a row or column holding a single cell that spans the table."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from pi.grid.errors import InvalidPositionError, SpanOverlapError

if TYPE_CHECKING:
    from pi.grid.table import Table

logger = logging.getLogger(__name__)


@dataclass
class Panel:
    """Insert *text* as a new row (or column) spanning the whole table.

    *index* is where the new row or column goes; ``None`` appends it.
    Spans anchored after the insertion point move along with their
    cells. A span crossing the insertion point raises
    :class:`~pi.grid.errors.SpanOverlapError`. On a table without
    records the panel becomes its only cell.

        >>> print(Table([["a", "b"]]).with_(Panel.header("title")))
        +---+---+
        | title |
        +---+---+
        | a | b |
        +---+---+
    """

    text: str
    index: int | None = None
    axis: Literal["horizontal", "vertical"] = "horizontal"

    @classmethod
    def header(cls, text: str) -> Panel:
        return cls(text, 0)

    @classmethod
    def footer(cls, text: str) -> Panel:
        return cls(text)

    @classmethod
    def horizontal(cls, row: int, text: str) -> Panel:
        return cls(text, row)

    @classmethod
    def vertical(cls, col: int, text: str) -> Panel:
        return cls(text, col, "vertical")

    def change(self, table: Table) -> None:
        if table.shape == (0, 0):
            table.records.push_row([self.text])
        elif self.axis == "horizontal":
            self._insert_row(table)
        else:
            self._insert_column(table)

    def _insert_row(self, table: Table) -> None:
        records, spans = table.records, table.config.spans
        count_rows, count_columns = records.shape
        row = count_rows if self.index is None else self.index
        if not 0 <= row <= count_rows:
            raise InvalidPositionError((row, 0), records.shape, "panel row")
        if count_columns == 0:
            logger.debug("Skipping panel: the rows have no cells")
            return

        for col in range(count_columns):
            span = spans.owner((row, col))
            if span is not None and span.anchor[0] < row:
                raise SpanOverlapError((row, 0), span.anchor)

        records.insert_row(row, [self.text])
        spans.insert_row(row)
        if count_columns > 1:
            spans.set_column_span((row, 0), count_columns)
        logger.debug("Inserted panel row %d", row)

    def _insert_column(self, table: Table) -> None:
        records, spans = table.records, table.config.spans
        count_rows, count_columns = records.shape
        col = count_columns if self.index is None else self.index
        if not 0 <= col <= count_columns:
            raise InvalidPositionError((0, col), records.shape, "panel column")
        if count_rows == 0:
            logger.debug("Skipping panel: the table has no rows")
            return

        for row in range(count_rows):
            span = spans.owner((row, col))
            if span is not None and span.anchor[1] < col:
                raise SpanOverlapError((0, col), span.anchor)

        records.insert_column(col, [self.text])
        spans.insert_column(col)
        if count_rows > 1:
            spans.set_row_span((0, col), count_rows)
        logger.debug("Inserted panel column %d", col)
