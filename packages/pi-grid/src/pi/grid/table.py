"""The Table facade: records, configuration and dimensions in one place."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Protocol, Sequence

from pi.grid.colors import ColorMap
from pi.grid.config import GridConfig
from pi.grid.dimension import CompleteDimension, total_height, total_width
from pi.grid.errors import InvalidPositionError
from pi.grid.grid import Grid, Sink
from pi.grid.height import HeightIncrease, HeightLimit, HeightList
from pi.grid.options import Padding
from pi.grid.records import VecRecords
from pi.grid.styles import Style
from pi.grid.types import Cell, Column, Entity, Position, Row, as_entity
from pi.grid.width import MinWidth, Truncate, WidthList, Wrap

logger = logging.getLogger(__name__)

_SIZING_OPTIONS = (Truncate, Wrap, MinWidth, WidthList, HeightLimit, HeightIncrease, HeightList)


class TableOption(Protocol):
    def change(self, table: Table) -> None: ...


class CellOption(Protocol):
    def change_cell(self, table: Table, entity: Entity) -> None: ...


class Table:
    """A renderable table.

    New tables use the ``ascii`` style with one space of padding on the
    left and right of every cell::

        >>> print(Table([["a", "bb"], ["ccc", "d"]]))
        +-----+----+
        | a   | bb |
        +-----+----+
        | ccc | d  |
        +-----+----+
    """

    def __init__(
        self,
        rows: Iterable[Iterable[Any]] = (),
        header: Sequence[Any] | None = None,
    ) -> None:
        data = [list(row) for row in rows]
        if header is not None:
            data.insert(0, list(header))

        self.records = VecRecords(data)
        self.config = GridConfig()
        self.dimension = CompleteDimension()
        self.colors = ColorMap()

        Style.ascii().change(self)
        Padding(left=1, right=1).change(self)

    @property
    def shape(self) -> tuple[int, int]:
        return self.records.shape

    def count_rows(self) -> int:
        return self.records.count_rows()

    def count_columns(self) -> int:
        return self.records.count_columns()

    def get_text(self, pos: Position) -> str:
        return self.records.get_text(pos)

    def with_(self, *options: TableOption) -> Table:
        """Apply table-wide options in order; returns the table for chaining.

        Column widths and row heights fixed by a width or height setting
        are dropped before any other option runs, so they are re-estimated
        against the changed table. Width and height settings fit against
        the records and keep each other's sizes.
        """
        for option in options:
            if not isinstance(option, _SIZING_OPTIONS):
                self._invalidate_dimension()
            option.change(self)
        return self

    def modify(self, target: Entity | Position, *options: CellOption) -> Table:
        """Apply cell options to the cells *target* selects."""
        entity = as_entity(target)
        self._check_entity(entity)
        self._invalidate_dimension()
        for option in options:
            option.change_cell(self, entity)
        return self

    def _invalidate_dimension(self) -> None:
        if self.dimension.has_fixed():
            logger.debug("Dropping fixed widths and heights")
        self.dimension.clear_widths()
        self.dimension.clear_heights()

    def _check_entity(self, entity: Entity) -> None:
        count_rows, count_columns = self.shape
        if isinstance(entity, Cell):
            if not (0 <= entity.row < count_rows and 0 <= entity.col < count_columns):
                raise InvalidPositionError(entity.position, self.shape)
        elif isinstance(entity, Row):
            if not 0 <= entity.index < count_rows:
                raise InvalidPositionError((entity.index, 0), self.shape, "row")
        elif isinstance(entity, Column):
            if not 0 <= entity.index < count_columns:
                raise InvalidPositionError((0, entity.index), self.shape, "column")

    # -- rendering ----------------------------------------------------------

    def _grid(self) -> Grid:
        self.dimension.estimate(self.records, self.config)
        colors = None if self.colors.is_empty() else self.colors
        return Grid(self.records, self.config, self.dimension, colors)

    def render(self) -> str:
        return self._grid().to_string()

    def write(self, sink: Sink) -> None:
        """Render straight into *sink* (anything with a ``write`` method)."""
        self._grid().build(sink)

    def __str__(self) -> str:
        return self.render()

    def total_width(self) -> int:
        """Width of the rendered table including margins."""
        self.dimension.estimate(self.records, self.config)
        if self.count_rows() == 0 or self.count_columns() == 0:
            return 0
        margin = self.config.margin.indents
        body = total_width(self.config, self.dimension, self.count_columns())
        return body + margin.left.size + margin.right.size

    def total_height(self) -> int:
        """Height of the rendered table including margins."""
        self.dimension.estimate(self.records, self.config)
        if self.count_rows() == 0 or self.count_columns() == 0:
            return 0
        margin = self.config.margin.indents
        body = total_height(self.config, self.dimension, self.count_rows())
        return body + margin.top.size + margin.bottom.size

    def __repr__(self) -> str:
        rows, columns = self.shape
        return f"Table(rows={rows}, columns={columns})"
