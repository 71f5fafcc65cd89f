"""Draw a border around groups of cells."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar, Union

from pi.grid.borders import Border
from pi.grid.types import Entity, Position, as_entity

if TYPE_CHECKING:
    from pi.grid.colors import Color
    from pi.grid.table import Table

logger = logging.getLogger(__name__)

T = TypeVar("T")

Target = Union[Entity, Position, list[Union[Entity, Position]]]


@dataclass
class Highlight:
    """Frame the cells *target* selects with *border*.

    Selected cells that touch each other form one segment, and each
    segment gets a single outline: edges between two selected cells are
    left as they are. Pass a list to select several entities at once::

        Highlight([Row(0), Cell(2, 1)], Border.filled("*"))
    """

    target: Target
    border: Border[str]
    colors: Border[Color] | None = None

    @classmethod
    def outline(cls, target: Target, glyph: str, color: Color | None = None) -> Highlight:
        colors = Border.filled(color) if color is not None else None
        return cls(target, Border.filled(glyph), colors)

    def change(self, table: Table) -> None:
        cfg = table.config
        shape = table.shape
        for segment in _segments(self._positions(shape)):
            logger.debug("Highlighting a segment of %d cells", len(segment))
            for pos in segment:
                border = _cell_border(segment, pos, self.border)
                if not border.is_empty():
                    cfg.insert_border(pos, border, shape)
                if self.colors is not None:
                    colors = _cell_border(segment, pos, self.colors)
                    if not colors.is_empty():
                        cfg.insert_border_color(pos, colors, shape)

    def _positions(self, shape: tuple[int, int]) -> set[Position]:
        targets = self.target if isinstance(self.target, list) else [self.target]
        positions: set[Position] = set()
        for target in targets:
            positions.update(as_entity(target).iter_positions(*shape))
        return positions


def _segments(positions: set[Position]) -> list[set[Position]]:
    """Split *positions* into groups connected through shared edges."""
    segments = []
    left = set(positions)
    while left:
        stack = [left.pop()]
        segment = set(stack)
        while stack:
            row, col = stack.pop()
            for neighbour in ((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)):
                if neighbour in left:
                    left.remove(neighbour)
                    segment.add(neighbour)
                    stack.append(neighbour)
        segments.append(segment)
    return segments


def _cell_border(segment: set[Position], pos: Position, border: Border[T]) -> Border[T]:
    """The part of *border* one cell draws so the segment gets one outline."""
    row, col = pos

    def has(dr: int, dc: int) -> bool:
        return (row + dr, col + dc) in segment

    top, bottom, left, right = has(-1, 0), has(1, 0), has(0, -1), has(0, 1)
    values: dict[str, T] = {}

    def put(name: str, value: T | None) -> None:
        if value is not None:
            values[name] = value

    # Edges on the outline; a straight edge passing a junction keeps its glyph.
    if not top:
        put("top", border.top)
        if right and not has(-1, 1):
            put("right_top_corner", border.top)
    if not bottom:
        put("bottom", border.bottom)
        if right and not has(1, 1):
            put("right_bottom_corner", border.bottom)
    if not left:
        put("left", border.left)
        if bottom and not has(1, -1):
            put("left_bottom_corner", border.left)
    if not right:
        put("right", border.right)
        if bottom and not has(1, 1):
            put("right_bottom_corner", border.right)

    # Outer corners.
    if not left and not top:
        put("left_top_corner", border.left_top_corner)
    if not left and not bottom:
        put("left_bottom_corner", border.left_bottom_corner)
    if not right and not top:
        put("right_top_corner", border.right_top_corner)
    if not right and not bottom:
        put("right_bottom_corner", border.right_bottom_corner)

    # Inner corners, where the outline turns around a cell of the segment.
    if not bottom:
        if not left and has(-1, -1):
            put("left_top_corner", border.right_top_corner)
        if left and has(1, -1):
            put("left_bottom_corner", border.left_top_corner)
        if not right and has(-1, 1):
            put("right_top_corner", border.left_top_corner)
        if right and has(1, 1):
            put("right_bottom_corner", border.right_top_corner)
    if not top:
        if not left and has(1, -1):
            put("left_bottom_corner", border.right_bottom_corner)
        if left and has(-1, -1):
            put("left_top_corner", border.left_bottom_corner)
        if not right and has(1, 1):
            put("right_bottom_corner", border.left_bottom_corner)
        if right and has(-1, 1):
            put("right_top_corner", border.right_bottom_corner)

    return Border(**values)
