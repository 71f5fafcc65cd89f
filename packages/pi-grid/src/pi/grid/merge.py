"""Merge runs of equal neighbouring cells into spans."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, Literal

from pi.grid.types import Position

if TYPE_CHECKING:
    from pi.grid.table import Table

logger = logging.getLogger(__name__)


@dataclass
class Merge:
    """Span cells over their neighbours when the text repeats.

    ``Merge.vertical()`` merges equal cells stacked in a column,
    ``Merge.horizontal()`` equal cells side by side in a row. Cells that
    already belong to a span are left alone and end a run.
    """

    axis: Literal["horizontal", "vertical"]

    @classmethod
    def horizontal(cls) -> Merge:
        return cls("horizontal")

    @classmethod
    def vertical(cls) -> Merge:
        return cls("vertical")

    def change(self, table: Table) -> None:
        count_rows, count_columns = table.shape
        if self.axis == "vertical":
            lines = (
                [(row, col) for row in range(count_rows)] for col in range(count_columns)
            )
        else:
            lines = (
                [(row, col) for col in range(count_columns)] for row in range(count_rows)
            )

        cfg = table.config
        for line in lines:
            for start, length in self._runs(table, line):
                if self.axis == "vertical":
                    cfg.set_row_span(start, length)
                else:
                    cfg.set_column_span(start, length)
                logger.debug("Merged %d cells at %s", length, start)

    @staticmethod
    def _runs(table: Table, line: list[Position]) -> Iterator[tuple[Position, int]]:
        spans = table.config.spans
        start: Position | None = None
        text = ""
        length = 0
        for pos in line:
            if spans.owner(pos) is not None:
                if length > 1:
                    yield start, length
                start, length = None, 0
                continue

            current = table.records.get_text(pos)
            if start is not None and current == text:
                length += 1
                continue

            if length > 1:
                yield start, length
            start, text, length = pos, current, 1

        if length > 1:
            yield start, length
