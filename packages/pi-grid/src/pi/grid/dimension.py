"""Column widths and row heights.

:func:`estimate` derives both from the records in a single pass: every
visible cell contributes its widest line plus horizontal padding to its
column and its line count plus vertical padding to its row. Cells that
anchor a span are set aside and applied afterwards. When the columns a span
covers, plus the vertical borders drawn between them, are narrower than the
spanned cell, the deficit is split evenly over those columns and the
remainder goes to the first one. Row spans are treated the same way using
horizontal borders.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from pi.grid.utils import count_lines, text_width

if TYPE_CHECKING:
    from pi.grid.config import GridConfig
    from pi.grid.records import Records
    from pi.grid.types import Position

logger = logging.getLogger(__name__)


class Dimension(Protocol):
    def get_width(self, column: int) -> int: ...

    def get_height(self, row: int) -> int: ...


class ExactDimension:
    """Fixed lists of widths and heights."""

    def __init__(self, widths: list[int], heights: list[int]) -> None:
        self.widths = list(widths)
        self.heights = list(heights)

    def get_width(self, column: int) -> int:
        return self.widths[column]

    def get_height(self, row: int) -> int:
        return self.heights[row]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExactDimension):
            return NotImplemented
        return self.widths == other.widths and self.heights == other.heights

    def __repr__(self) -> str:
        return f"ExactDimension(widths={self.widths!r}, heights={self.heights!r})"


class CompleteDimension:
    """Widths and heights that may be fixed up front and estimated otherwise.

    Fixed lists survive :meth:`estimate`; anything not fixed is recomputed
    from the records on every call.
    """

    def __init__(self, widths: list[int] | None = None, heights: list[int] | None = None) -> None:
        self._fixed_widths = widths
        self._fixed_heights = heights
        self._widths: list[int] = list(widths) if widths is not None else []
        self._heights: list[int] = list(heights) if heights is not None else []

    @property
    def widths(self) -> list[int]:
        return list(self._widths)

    @property
    def heights(self) -> list[int]:
        return list(self._heights)

    def set_widths(self, widths: list[int]) -> None:
        self._fixed_widths = list(widths)
        self._widths = list(widths)

    def set_heights(self, heights: list[int]) -> None:
        self._fixed_heights = list(heights)
        self._heights = list(heights)

    def clear_widths(self) -> None:
        self._fixed_widths = None

    def clear_heights(self) -> None:
        self._fixed_heights = None

    def has_fixed(self) -> bool:
        return self._fixed_widths is not None or self._fixed_heights is not None

    def is_fixed(self) -> bool:
        return self._fixed_widths is not None and self._fixed_heights is not None

    def estimate(self, records: Records, cfg: GridConfig) -> None:
        if self.is_fixed():
            return

        if self._fixed_widths is None and self._fixed_heights is None:
            dims = estimate(records, cfg)
            self._widths, self._heights = dims.widths, dims.heights
        elif self._fixed_widths is None:
            self._widths = estimate_widths(records, cfg)
        else:
            self._heights = estimate_heights(records, cfg)

    def get_width(self, column: int) -> int:
        return self._widths[column]

    def get_height(self, row: int) -> int:
        return self._heights[row]


# ---------------------------------------------------------------------------
# Estimation
# ---------------------------------------------------------------------------

def cell_width(text: str, cfg: GridConfig, pos: Position) -> int:
    pad = cfg.get_padding(pos)
    return text_width(text, cfg.tab_width) + pad.left.size + pad.right.size


def cell_height(text: str, cfg: GridConfig, pos: Position) -> int:
    pad = cfg.get_padding(pos)
    return max(1, count_lines(text)) + pad.top.size + pad.bottom.size


def estimate(records: Records, cfg: GridConfig) -> ExactDimension:
    """Compute column widths and row heights in one pass over *records*.

    Raises :class:`~pi.grid.errors.InvalidPositionError` if a registered span
    reaches outside the records.
    """
    widths, heights = _estimate(records, cfg, want_widths=True, want_heights=True)
    return ExactDimension(widths, heights)


def estimate_widths(records: Records, cfg: GridConfig) -> list[int]:
    return _estimate(records, cfg, want_widths=True, want_heights=False)[0]


def estimate_heights(records: Records, cfg: GridConfig) -> list[int]:
    return _estimate(records, cfg, want_widths=False, want_heights=True)[1]


def _estimate(
    records: Records,
    cfg: GridConfig,
    want_widths: bool,
    want_heights: bool,
) -> tuple[list[int], list[int]]:
    count_columns = records.count_columns()
    widths = [0] * count_columns
    heights: list[int] = []

    col_spans: list[tuple[int, Position, int]] = []
    row_spans: list[tuple[Position, int]] = []

    for row, cells in enumerate(records.iter_rows()):
        row_height = 0
        for col, text in enumerate(cells):
            pos = (row, col)
            if not cfg.is_cell_visible(pos):
                continue

            if want_widths:
                width = cell_width(text, cfg, pos)
                span = cfg.get_column_span(pos)
                if span > 1:
                    col_spans.append((span, pos, width))
                else:
                    widths[col] = max(widths[col], width)

            if want_heights:
                height = cell_height(text, cfg, pos)
                if cfg.get_row_span(pos) > 1:
                    row_spans.append((pos, height))
                else:
                    row_height = max(row_height, height)

        heights.append(row_height)

    count_rows = len(heights)
    cfg.spans.validate(count_rows, count_columns)

    # Narrow spans first so wider ones see the columns they already grew.
    for span, (_, col), width in sorted(col_spans, key=lambda s: (s[0], s[1])):
        _adjust_range(widths, width, col, col + span, _vertical_borders(cfg, col, col + span, count_columns))

    for (row, col), height in sorted(row_spans):
        span = cfg.get_row_span((row, col))
        _adjust_range(heights, height, row, row + span, _horizontal_borders(cfg, row, row + span, count_rows))

    if not want_heights:
        heights = []

    logger.debug(
        "Estimated %d rows x %d columns (widths=%s, heights=%s)",
        count_rows,
        count_columns,
        widths,
        heights,
    )
    return widths, heights


def _adjust_range(sizes: list[int], required: int, start: int, end: int, borders: int) -> None:
    available = sum(sizes[start:end]) + borders
    if available >= required:
        return
    inc_range(sizes, required - available, start, end)


def inc_range(sizes: list[int], amount: int, start: int, end: int) -> None:
    """Spread *amount* over ``sizes[start:end]``, remainder to the first."""
    if not sizes or end <= start:
        return

    span = end - start
    one, rest = divmod(amount, span)
    for i in range(start, end):
        sizes[i] += one
    sizes[start] += rest


def _vertical_borders(cfg: GridConfig, start: int, end: int, count_columns: int) -> int:
    return sum(1 for col in range(start + 1, end) if cfg.has_vertical(col, count_columns))


def _horizontal_borders(cfg: GridConfig, start: int, end: int, count_rows: int) -> int:
    return sum(1 for row in range(start + 1, end) if cfg.has_horizontal(row, count_rows))


# ---------------------------------------------------------------------------
# Totals and ranges
# ---------------------------------------------------------------------------

def range_width(cfg: GridConfig, dims: Dimension, start: int, end: int, count_columns: int) -> int:
    """Width of columns ``start..end`` including the borders between them."""
    return sum(dims.get_width(col) for col in range(start, end)) + _vertical_borders(
        cfg, start, end, count_columns
    )


def range_height(cfg: GridConfig, dims: Dimension, start: int, end: int, count_rows: int) -> int:
    return sum(dims.get_height(row) for row in range(start, end)) + _horizontal_borders(
        cfg, start, end, count_rows
    )


def total_width(cfg: GridConfig, dims: Dimension, count_columns: int) -> int:
    """Width of the bordered body, margins excluded."""
    return sum(dims.get_width(col) for col in range(count_columns)) + cfg.count_vertical(count_columns)


def total_height(cfg: GridConfig, dims: Dimension, count_rows: int) -> int:
    return sum(dims.get_height(row) for row in range(count_rows)) + cfg.count_horizontal(count_rows)
