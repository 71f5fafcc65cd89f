"""Width settings.

Each setting works on a whole table via ``table.with_(...)`` and on
selected cells via ``table.modify(entity, ...)``. Table-wide, the column
widths are fitted toward the target with a peaker and then frozen, so the
table renders at the fitted widths. Widths always include padding.

* :class:`Truncate` cuts text that does not fit, optionally adding a suffix.
* :class:`Wrap` moves text that does not fit onto more lines.
* :class:`MinWidth` pads narrow cells or widens columns.
* :class:`WidthList` sets every column width explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Union

from pi.grid.dimension import ExactDimension, estimate_widths, range_width, total_width
from pi.grid.errors import GridError
from pi.grid.fitter import grow, shrink
from pi.grid.measurement import Target, resolve_width
from pi.grid.peaker import Peaker, get_peaker
from pi.grid.records import EmptyRecords
from pi.grid.utils import (
    increase_width,
    longest_word_width,
    text_width,
    truncate_text,
    wrap_text,
)

if TYPE_CHECKING:
    from pi.grid.table import Table
    from pi.grid.types import Entity, Position

Priority = Union[str, Callable[[], Peaker]]

SuffixLimit = Union[str, tuple[str, str]]

# rewrite(text, available, tab_width) -> text
Rewrite = Callable[[str, int, int], str]


def make_peaker(priority: Priority) -> Peaker:
    if isinstance(priority, str):
        return get_peaker(priority)
    return priority()


def _horizontal_padding(table: Table, pos: Position) -> int:
    pad = table.config.get_padding(pos)
    return pad.left.size + pad.right.size


def column_floors(table: Table, keep_words: bool = False) -> list[int]:
    """The narrowest each column may become when shrinking.

    Padding plus one character for a column with content, or plus its
    widest word when words are kept whole. Spanned cells add no content.
    """
    cfg = table.config
    floors = estimate_widths(EmptyRecords(*table.shape), cfg)
    for row, cells in enumerate(table.records.iter_rows()):
        for col, text in enumerate(cells):
            pos = (row, col)
            if not cfg.is_cell_visible(pos) or cfg.get_column_span(pos) > 1:
                continue
            if text_width(text, cfg.tab_width) == 0:
                continue
            content = max(longest_word_width(text, cfg.tab_width), 1) if keep_words else 1
            floors[col] = max(floors[col], _horizontal_padding(table, pos) + content)
    return floors


def _fit_columns(
    table: Table,
    target: Target,
    floors: list[int],
    priority: Priority,
) -> list[int] | None:
    """Shrink the current widths toward *target*, or ``None`` if they fit."""
    records, cfg = table.records, table.config
    count_columns = records.count_columns()
    widths = estimate_widths(records, cfg)
    total = total_width(cfg, ExactDimension(widths, []), count_columns)
    limit = resolve_width(target, records, cfg, total)
    if total <= limit:
        return None

    borders = total - sum(widths)
    result = shrink(widths, floors, sum(widths), max(limit - borders, 0), make_peaker(priority))
    return result.sizes


def _rewrite_cells(table: Table, widths: list[int], rewrite: Rewrite) -> None:
    """Apply ``rewrite(text, available, tab_width)`` to every visible cell."""
    records, cfg = table.records, table.config
    count_rows, count_columns = records.shape
    dims = ExactDimension(widths, [])
    for row in range(count_rows):
        for col in range(count_columns):
            pos = (row, col)
            if not cfg.is_cell_visible(pos):
                continue
            span = cfg.get_column_span(pos)
            width = range_width(cfg, dims, col, col + span, count_columns)
            available = max(width - _horizontal_padding(table, pos), 0)
            text = records.get_text(pos)
            records.set(pos, rewrite(text, available, cfg.tab_width))


def _rewrite_entity(
    table: Table,
    entity: Entity,
    width: Target,
    rewrite: Rewrite,
) -> None:
    records, cfg = table.records, table.config
    count_rows, count_columns = records.shape
    for pos in entity.iter_positions(count_rows, count_columns):
        if not cfg.is_cell_visible(pos):
            continue
        text = records.get_text(pos)
        limit = resolve_width(width, records, cfg, text_width(text, cfg.tab_width))
        available = max(limit - _horizontal_padding(table, pos), 0)
        records.set(pos, rewrite(text, available, cfg.tab_width))


@dataclass
class Truncate:
    """Cut text to a width, e.g. ``Truncate(10, suffix="...")``.

    ``limit`` decides what happens when the suffix itself does not fit:
    ``"cut"`` shortens it, ``"ignore"`` drops it and ``("replace", ch)``
    fills the space with *ch*. With ``multiline`` every line is cut on its
    own; otherwise only the first line is kept.
    """

    width: Target
    suffix: str = ""
    limit: SuffixLimit = "cut"
    multiline: bool = False
    priority: Priority = "none"

    def _cut(self, text: str, available: int, tab_width: int) -> str:
        if text_width(text, tab_width) <= available:
            return text
        return truncate_text(text, available, self.suffix, self.limit, self.multiline, tab_width)

    def change(self, table: Table) -> None:
        widths = _fit_columns(table, self.width, column_floors(table), self.priority)
        if widths is None:
            return
        _rewrite_cells(table, widths, self._cut)
        table.dimension.set_widths(widths)

    def change_cell(self, table: Table, entity: Entity) -> None:
        _rewrite_entity(table, entity, self.width, self._cut)


@dataclass
class Wrap:
    """Re-flow text onto more lines so it fits a width.

    With ``keep_words`` lines break at whitespace; a word is only split
    when it is wider than the width on its own.
    """

    width: Target
    keep_words: bool = False
    priority: Priority = "none"

    def _wrap(self, text: str, available: int, tab_width: int) -> str:
        if text_width(text, tab_width) <= available:
            return text
        return wrap_text(text, available, self.keep_words, tab_width)

    def change(self, table: Table) -> None:
        floors = column_floors(table, self.keep_words)
        widths = _fit_columns(table, self.width, floors, self.priority)
        if widths is None:
            return
        _rewrite_cells(table, widths, self._wrap)
        table.dimension.set_widths(widths)
        table.dimension.clear_heights()

    def change_cell(self, table: Table, entity: Entity) -> None:
        _rewrite_entity(table, entity, self.width, self._wrap)


@dataclass
class MinWidth:
    """Make cells (or the whole table) at least this wide."""

    width: Target
    fill: str = " "
    priority: Priority = "none"

    def change(self, table: Table) -> None:
        records, cfg = table.records, table.config
        count_columns = records.count_columns()
        widths = estimate_widths(records, cfg)
        total = total_width(cfg, ExactDimension(widths, []), count_columns)
        target = resolve_width(self.width, records, cfg, total)
        if total >= target:
            return

        result = grow(widths, total, target, make_peaker(self.priority))
        table.dimension.set_widths(result.sizes)

    def change_cell(self, table: Table, entity: Entity) -> None:
        def pad(text: str, available: int, tab_width: int) -> str:
            return increase_width(text, available, self.fill, tab_width)

        _rewrite_entity(table, entity, self.width, pad)


@dataclass
class WidthList:
    """Fixed width for every column."""

    widths: list[int]

    def change(self, table: Table) -> None:
        count_columns = table.records.count_columns()
        if len(self.widths) != count_columns:
            raise GridError(
                f"expected {count_columns} column widths, got {len(self.widths)}"
            )
        table.dimension.set_widths(list(self.widths))
