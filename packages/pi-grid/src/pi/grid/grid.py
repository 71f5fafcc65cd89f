"""The grid composer: turns records, config and dimensions into text lines.

Rows are emitted top to bottom. Each row starts with its horizontal border
line, when that boundary has one, followed by as many content lines as the
row is tall. Every content line is the left border, each visible cell's
next line separated by vertical borders, and the right border. Cells are
held in a buffer keyed by their anchor column so that a cell spanning
several rows keeps handing out lines (even across the border lines it
covers) until its span is exhausted.
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, Protocol

from pi.grid.colors import NoColors, wrap_color
from pi.grid.dimension import range_height, range_width, total_height, total_width
from pi.grid.utils import (
    count_empty_lines,
    cut_str,
    expand_tabs,
    get_lines,
    string_width,
    trim_text,
)

if TYPE_CHECKING:
    from pi.grid.colors import Color, Colors
    from pi.grid.config import GridConfig
    from pi.grid.dimension import Dimension
    from pi.grid.records import Records
    from pi.grid.types import AlignmentHorizontal, AlignmentVertical, Indent, Offset, Position, Sides


class Sink(Protocol):
    def write(self, text: str) -> object: ...


class Grid:
    def __init__(
        self,
        records: Records,
        config: GridConfig,
        dimension: Dimension,
        colors: Colors | None = None,
    ) -> None:
        self.records = records
        self.config = config
        self.dimension = dimension
        self.colors = colors if colors is not None else NoColors()

    def build(self, sink: Sink) -> None:
        """Write the rendered grid to *sink*, lines separated by ``"\\n"``.

        Errors raised by ``sink.write`` propagate and abort the render.
        """
        first = True
        for line in self.iter_lines():
            if not first:
                sink.write("\n")
            sink.write(line)
            first = False

    def to_string(self) -> str:
        buf = io.StringIO()
        self.build(buf)
        return buf.getvalue()

    def __str__(self) -> str:
        return self.to_string()

    # -----------------------------------------------------------------------
    # Composition
    # -----------------------------------------------------------------------

    def iter_lines(self) -> Iterator[str]:
        cfg = self.config
        dims = self.dimension
        count_columns = self.records.count_columns()
        if count_columns == 0:
            return

        rows = iter(self.records.iter_rows())
        next_row = next(rows, None)
        if next_row is None:
            return

        body_width = total_width(cfg, dims, count_columns)
        indents = cfg.margin.indents
        offsets = cfg.margin.offsets
        full_width = body_width + indents.left.size + indents.right.size

        hint = self.records.hint_count_rows()
        totalh = total_height(cfg, dims, hint) if hint is not None else None

        def wrap_margin(text: str, line: int) -> str:
            left = _margin_vertical(indents.left, offsets.left, line, totalh)
            right = _margin_vertical(indents.right, offsets.right, line, totalh)
            return f"{left}{text}{right}"

        yield from _margin_horizontal(indents.top, offsets.top, full_width)

        buf: dict[int, _Entry] = {}
        line = 0
        row = 0
        while next_row is not None:
            cells = next_row
            next_row = next(rows, None)

            # Until the last row is seen the grid is assumed to continue
            # past this one, so its boundaries count as interior.
            count_rows = row + 1 if next_row is None else row + 2
            shape = (count_rows, count_columns)
            height = dims.get_height(row)

            if cfg.has_horizontal(row, count_rows):
                yield wrap_margin(self._split_line(buf, row, shape), line)
                line += 1

            self._fill_buffer(buf, cells, row, height, shape)
            if height > 0:
                order = sorted(buf)
                for i in range(height):
                    text = self._content_line(buf, order, row, i, height, shape)
                    yield wrap_margin(text, line + i)

            for col in [col for col, entry in buf.items() if entry.rows_left <= 1]:
                del buf[col]
            for entry in buf.values():
                entry.rows_left -= 1

            line += height
            row += 1

        if cfg.has_horizontal(row, row):
            yield wrap_margin(self._split_line({}, row, (row, count_columns)), line)

        yield from _margin_horizontal(indents.bottom, offsets.bottom, full_width)

    def _fill_buffer(
        self,
        buf: dict[int, _Entry],
        cells: list[str],
        row: int,
        height: int,
        shape: tuple[int, int],
    ) -> None:
        cfg = self.config
        skip = 0
        for col, text in enumerate(cells):
            if skip > 0:
                skip -= 1
                continue

            held = buf.get(col)
            if held is not None:
                skip = held.col_span - 1
                continue

            pos = (row, col)
            rowspan = cfg.get_row_span(pos)
            colspan = cfg.get_column_span(pos)
            skip = colspan - 1

            # A row hidden by a zero height only contributes cells that
            # reach into the rows below it.
            if height == 0 and rowspan < 2:
                continue

            if colspan > 1:
                width = range_width(cfg, self.dimension, col, col + colspan, shape[1])
            else:
                width = self.dimension.get_width(col)

            if rowspan > 1:
                count_rows = max(shape[0], row + rowspan)
                cell_height = range_height(cfg, self.dimension, row, row + rowspan, count_rows)
            else:
                cell_height = height

            cell = _CellLines(text, width, cell_height, cfg, self.colors.get_color(pos), pos)
            buf[col] = _Entry(cell, rowspan, colspan)

    def _content_line(
        self,
        buf: dict[int, _Entry],
        order: list[int],
        row: int,
        index: int,
        height: int,
        shape: tuple[int, int],
    ) -> str:
        parts: list[str] = []
        for col in order:
            parts.append(self._vertical_char((row, col), index, height, shape))
            parts.append(buf[col].cell.next_line())
        parts.append(self._vertical_char((row, shape[1]), index, height, shape))
        return "".join(parts)

    def _vertical_char(self, pos: Position, index: int, height: int, shape: tuple[int, int]) -> str:
        cfg = self.config
        glyph = cfg.get_vertical(pos, shape[1])
        if glyph is None:
            return ""

        if cfg.borders.has_vertical_chars(pos):
            glyph = cfg.borders.lookup_vertical_char(pos, index, height) or glyph

        return wrap_color(glyph, cfg.get_vertical_color(pos, shape[1]))

    def _split_line(self, buf: dict[int, _Entry], row: int, shape: tuple[int, int]) -> str:
        cfg = self.config
        spans = cfg.spans
        count_rows, count_columns = shape
        parts: list[str] = []

        for col in range(count_columns):
            if col == 0:
                parts.append(self._intersection((row, 0), shape))

            pos = (row, col)
            if spans.is_covered_by_both(pos):
                continue

            if spans.is_covered_by_row_span(pos):
                # The border line crosses a cell spanning several rows: that
                # cell shows its next line here instead.
                parts.append(buf[col].cell.next_line())
                owner = spans.owner(pos)
                if owner is not None:
                    col += owner.col_span - 1
            else:
                width = self.dimension.get_width(col)
                if width > 0:
                    parts.append(self._horizontal_segment(pos, width, count_rows))

            parts.append(self._intersection((row, col + 1), shape))

        return "".join(parts)

    def _horizontal_segment(self, pos: Position, width: int, count_rows: int) -> str:
        cfg = self.config
        glyph = cfg.get_horizontal(pos, count_rows)
        if glyph is None:
            return " " * width

        if cfg.borders.has_horizontal_chars(pos):
            text = "".join(
                cfg.borders.lookup_horizontal_char(pos, i, width) or glyph for i in range(width)
            )
        else:
            text = glyph * width

        return wrap_color(text, cfg.get_horizontal_color(pos, count_rows))

    def _intersection(self, pos: Position, shape: tuple[int, int]) -> str:
        glyph = self.config.get_intersection(pos, shape)
        if glyph is None:
            return ""
        return wrap_color(glyph, self.config.get_intersection_color(pos, shape))


@dataclass
class _Entry:
    cell: _CellLines
    rows_left: int
    col_span: int


class _CellLines:
    """Hands out the lines of one cell box, top to bottom."""

    def __init__(
        self,
        text: str,
        width: int,
        height: int,
        cfg: GridConfig,
        color: Color | None,
        pos: Position,
    ) -> None:
        self.width = width
        self.fmt = cfg.get_formatting(pos)
        self.pad = cfg.get_padding(pos)
        self.alignh: AlignmentHorizontal = cfg.get_alignment_horizontal(pos)
        self.color = color
        self.tab_width = cfg.tab_width
        self.fill = cfg.get_justification(pos)
        self.fill_color = cfg.get_justification_color(pos)
        self.available = max(width - self.pad.left.size - self.pad.right.size, 0)

        lines = get_lines(text)
        if self.fmt.vertical_trim:
            count, top, _ = count_empty_lines(text)
            lines = lines[top : top + count]
        if self.fmt.horizontal_trim:
            lines = [trim_text(line) if line else line for line in lines]
        lines = [expand_tabs(line, self.tab_width) for line in lines]

        alignv: AlignmentVertical = cfg.get_alignment_vertical(pos)
        self.indent_top = top_indent(self.pad, alignv, len(lines), height)

        self.indent_left: int | None = None
        if not self.fmt.allow_lines_alignment:
            block_width = max((string_width(line) for line in lines), default=0)
            self.indent_left = calculate_indent(self.alignh, block_width, self.available)[0]

        self._lines = iter(lines)

    def next_line(self) -> str:
        if self.indent_top > 0:
            self.indent_top -= 1
            return self.pad.top.render(self.width)

        line = next(self._lines, None)
        if line is None:
            return self.pad.bottom.render(self.width)

        line_width = string_width(line)
        if line_width > self.available:
            line = cut_str(line, self.available)
            line_width = string_width(line)

        if self.indent_left is None:
            left, right = calculate_indent(self.alignh, line_width, self.available)
        else:
            left = min(self.indent_left, self.available - line_width)
            right = self.available - line_width - left

        return "".join(
            (
                self.pad.left.render(),
                self._justify(left),
                wrap_color(line, self.color),
                self._justify(right),
                self.pad.right.render(),
            )
        )

    def _justify(self, n: int) -> str:
        if n <= 0:
            return ""
        return wrap_color(self.fill * n, self.fill_color)


def top_indent(pad: Sides[Indent], alignment: AlignmentVertical, count_lines: int, height: int) -> int:
    """Number of lines printed above the text of a cell box."""
    inner = max(height - pad.top.size - pad.bottom.size, 0)
    return pad.top.size + indent_from_top(alignment, inner, count_lines)


def indent_from_top(alignment: AlignmentVertical, available: int, real: int) -> int:
    diff = max(available - real, 0)
    if alignment == "bottom":
        return diff
    if alignment == "center":
        return diff // 2
    return 0


def calculate_indent(alignment: AlignmentHorizontal, text_width: int, available: int) -> tuple[int, int]:
    """Split the free space around a line into ``(left, right)``."""
    diff = max(available - text_width, 0)
    if alignment == "right":
        return diff, 0
    if alignment == "center":
        left = diff // 2
        return left, diff - left
    return 0, diff


# ---------------------------------------------------------------------------
# Margins
# ---------------------------------------------------------------------------

def _margin_horizontal(indent: Indent, offset: Offset, width: int) -> Iterator[str]:
    if indent.size == 0:
        return

    if offset.kind == "begin":
        start, end = min(offset.value, width), 0
    else:
        start, end = 0, min(offset.value, width)
    filled = max(width - start - end, 0)

    for _ in range(indent.size):
        yield " " * start + indent.render(filled) + " " * end


def _margin_vertical(indent: Indent, offset: Offset, line: int, total_height: int | None) -> str:
    if indent.size == 0:
        return ""

    if offset.kind == "begin":
        start = offset.value if total_height is None else min(offset.value, total_height)
        return indent.render() if line >= start else " " * indent.size

    if total_height is None:
        return indent.render()
    blank_from = total_height - min(offset.value, total_height)
    return " " * indent.size if line >= blank_from else indent.render()
