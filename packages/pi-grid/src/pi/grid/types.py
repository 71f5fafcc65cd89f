"""Core type definitions for pi-grid."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic, Iterator, Literal, TypeVar, Union

if TYPE_CHECKING:
    from pi.grid.colors import Color

T = TypeVar("T")

Position = tuple[int, int]

AlignmentHorizontal = Literal["left", "center", "right"]
AlignmentVertical = Literal["top", "center", "bottom"]


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Global:
    """Targets every cell."""

    def iter_positions(self, count_rows: int, count_columns: int) -> Iterator[Position]:
        for row in range(count_rows):
            for col in range(count_columns):
                yield row, col


@dataclass(frozen=True)
class Row:
    """Targets every cell of one row."""

    index: int

    def iter_positions(self, count_rows: int, count_columns: int) -> Iterator[Position]:
        if self.index < count_rows:
            for col in range(count_columns):
                yield self.index, col


@dataclass(frozen=True)
class Column:
    """Targets every cell of one column."""

    index: int

    def iter_positions(self, count_rows: int, count_columns: int) -> Iterator[Position]:
        if self.index < count_columns:
            for row in range(count_rows):
                yield row, self.index


@dataclass(frozen=True)
class Cell:
    """Targets a single cell."""

    row: int
    col: int

    @property
    def position(self) -> Position:
        return self.row, self.col

    def iter_positions(self, count_rows: int, count_columns: int) -> Iterator[Position]:
        if self.row < count_rows and self.col < count_columns:
            yield self.row, self.col


Entity = Union[Global, Row, Column, Cell]


def as_entity(target: Entity | Position) -> Entity:
    """Accept either an entity or a bare ``(row, col)`` position."""
    if isinstance(target, tuple):
        return Cell(*target)
    return target


# ---------------------------------------------------------------------------
# Sides, indents and offsets
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Indent:
    """A run of *size* fill characters, optionally colored."""

    size: int = 0
    fill: str = " "
    color: Color | None = None

    @classmethod
    def spaced(cls, size: int) -> Indent:
        return cls(size, " ")

    def render(self, width: int | None = None) -> str:
        text = self.fill * (self.size if width is None else width)
        if self.color is not None:
            return self.color.wrap(text)
        return text


@dataclass(frozen=True)
class Sides(Generic[T]):
    top: T
    bottom: T
    left: T
    right: T

    @classmethod
    def all(cls, value: T) -> Sides[T]:
        return cls(value, value, value, value)


def zero_indents() -> Sides[Indent]:
    return Sides.all(Indent())


@dataclass(frozen=True)
class Offset:
    """A position counted from the beginning or from the end of a run."""

    kind: Literal["begin", "end"]
    value: int

    @classmethod
    def begin(cls, value: int) -> Offset:
        return cls("begin", value)

    @classmethod
    def end(cls, value: int) -> Offset:
        return cls("end", value)

    def start_in(self, length: int) -> int:
        """Translate the offset into an index from the start of *length*."""
        if self.kind == "begin":
            return self.value
        return max(length - self.value, 0)


@dataclass(frozen=True)
class Formatting:
    horizontal_trim: bool = False
    vertical_trim: bool = False
    allow_lines_alignment: bool = False


@dataclass(frozen=True)
class MarginConfig:
    """Outer indents around the rendered grid and where each one starts."""

    indents: Sides[Indent] = field(default_factory=zero_indents)
    offsets: Sides[Offset] = field(default_factory=lambda: Sides.all(Offset.begin(0)))
