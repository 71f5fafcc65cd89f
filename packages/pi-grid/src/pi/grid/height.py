"""Height settings, the row counterpart of :mod:`pi.grid.width`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pi.grid.dimension import ExactDimension, estimate_heights, range_height, total_height
from pi.grid.errors import GridError
from pi.grid.fitter import grow, shrink
from pi.grid.measurement import Target, resolve_height
from pi.grid.records import EmptyRecords
from pi.grid.utils import count_lines, get_lines
from pi.grid.width import Priority, make_peaker

if TYPE_CHECKING:
    from pi.grid.table import Table
    from pi.grid.types import Entity, Position


def _vertical_padding(table: Table, pos: Position) -> int:
    pad = table.config.get_padding(pos)
    return pad.top.size + pad.bottom.size


def _limit_lines(text: str, count: int) -> str:
    lines = get_lines(text)
    if len(lines) <= count:
        return text
    return "\n".join(lines[:count])


def _add_lines(text: str, count: int) -> str:
    missing = count - count_lines(text)
    if missing <= 0:
        return text
    return text + "\n" * missing


def row_floors(table: Table) -> list[int]:
    """Padding plus one line for every row: the heights of a table of empty cells."""
    return estimate_heights(EmptyRecords(*table.shape), table.config)


def _current_heights(table: Table) -> tuple[list[int], int]:
    records, cfg = table.records, table.config
    heights = estimate_heights(records, cfg)
    total = total_height(cfg, ExactDimension([], heights), len(heights))
    return heights, total


def _rewrite_entity(table: Table, entity: Entity, height: Target, rewrite) -> None:
    records, cfg = table.records, table.config
    count_rows, count_columns = records.shape
    for pos in entity.iter_positions(count_rows, count_columns):
        if not cfg.is_cell_visible(pos):
            continue
        text = records.get_text(pos)
        limit = resolve_height(height, records, cfg, count_lines(text))
        available = max(limit - _vertical_padding(table, pos), 0)
        records.set(pos, rewrite(text, available))


@dataclass
class HeightLimit:
    """Cut rows (or cells) down to a height; extra lines are dropped."""

    height: Target
    priority: Priority = "none"

    def change(self, table: Table) -> None:
        records, cfg = table.records, table.config
        heights, total = _current_heights(table)
        target = resolve_height(self.height, records, cfg, total)
        if total <= target:
            return

        borders = total - sum(heights)
        floors = row_floors(table)
        result = shrink(heights, floors, sum(heights), max(target - borders, 0), make_peaker(self.priority))

        count_rows, count_columns = records.shape
        dims = ExactDimension([], result.sizes)
        for row in range(count_rows):
            for col in range(count_columns):
                pos = (row, col)
                if not cfg.is_cell_visible(pos):
                    continue
                span = cfg.get_row_span(pos)
                available = range_height(cfg, dims, row, row + span, count_rows) - _vertical_padding(table, pos)
                records.set(pos, _limit_lines(records.get_text(pos), max(available, 0)))

        table.dimension.set_heights(result.sizes)

    def change_cell(self, table: Table, entity: Entity) -> None:
        _rewrite_entity(table, entity, self.height, _limit_lines)


@dataclass
class HeightIncrease:
    """Grow rows (or cells) up to a height."""

    height: Target
    priority: Priority = "none"

    def change(self, table: Table) -> None:
        records, cfg = table.records, table.config
        heights, total = _current_heights(table)
        target = resolve_height(self.height, records, cfg, total)
        if total >= target:
            return

        result = grow(heights, total, target, make_peaker(self.priority))
        table.dimension.set_heights(result.sizes)

    def change_cell(self, table: Table, entity: Entity) -> None:
        _rewrite_entity(table, entity, self.height, _add_lines)


@dataclass
class HeightList:
    """Fixed height for every row."""

    heights: list[int]

    def change(self, table: Table) -> None:
        count_rows = table.records.count_rows()
        if len(self.heights) != count_rows:
            raise GridError(f"expected {count_rows} row heights, got {len(self.heights)}")
        table.dimension.set_heights(list(self.heights))
