"""Records: where the cell text comes from.

Access patterns:

* :class:`VecRecords` is fully buffered. It can be iterated any number of
  times and supports random access, which width and height settings need
  because they rewrite cell text.
* :class:`IterRecords` makes a single forward pass over any iterable. A
  second pass raises :class:`~pi.grid.errors.GridError`; call
  :meth:`IterRecords.buffered` first if the rows are needed twice.
* :class:`EmptyRecords` yields empty cells of a fixed shape.
"""

from __future__ import annotations

import itertools
from typing import Any, Iterable, Iterator, Protocol, Sequence

from pi.grid.errors import GridError, InvalidPositionError
from pi.grid.types import Position


class Records(Protocol):
    def count_columns(self) -> int: ...

    def hint_count_rows(self) -> int | None: ...

    def iter_rows(self) -> Iterator[list[str]]: ...


def _normalize(row: Iterable[Any], count_columns: int) -> list[str]:
    cells = [str(cell) for cell in itertools.islice(row, count_columns)]
    if len(cells) < count_columns:
        cells.extend([""] * (count_columns - len(cells)))
    return cells


class VecRecords:
    def __init__(self, rows: Iterable[Iterable[Any]] = (), count_columns: int | None = None) -> None:
        raw = [list(row) for row in rows]
        if count_columns is None:
            count_columns = max((len(row) for row in raw), default=0)
        self._count_columns = count_columns
        self._rows = [_normalize(row, count_columns) for row in raw]

    def count_columns(self) -> int:
        return self._count_columns

    def count_rows(self) -> int:
        return len(self._rows)

    def hint_count_rows(self) -> int | None:
        return len(self._rows)

    @property
    def shape(self) -> tuple[int, int]:
        return len(self._rows), self._count_columns

    def iter_rows(self) -> Iterator[list[str]]:
        return iter(self._rows)

    def get_text(self, pos: Position) -> str:
        self._check(pos)
        return self._rows[pos[0]][pos[1]]

    def set(self, pos: Position, text: str) -> None:
        self._check(pos)
        self._rows[pos[0]][pos[1]] = text

    def push_row(self, row: Sequence[Any]) -> None:
        if self._count_columns == 0 and not self._rows:
            self._count_columns = len(row)
        self._rows.append(_normalize(row, self._count_columns))

    def insert_row(self, index: int, row: Sequence[Any]) -> None:
        self._rows.insert(index, _normalize(row, self._count_columns))

    def insert_column(self, index: int, column: Sequence[Any]) -> None:
        """Insert a column before *index*; missing cells are empty."""
        cells = _normalize(column, len(self._rows))
        for row, cell in zip(self._rows, cells):
            row.insert(index, cell)
        self._count_columns += 1

    def _check(self, pos: Position) -> None:
        row, col = pos
        if not (0 <= row < len(self._rows) and 0 <= col < self._count_columns):
            raise InvalidPositionError(pos, self.shape)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VecRecords):
            return NotImplemented
        return self._rows == other._rows and self._count_columns == other._count_columns

    def __repr__(self) -> str:
        return f"VecRecords({self._rows!r})"


class IterRecords:
    """Single-pass records over an arbitrary iterable of rows."""

    def __init__(
        self,
        rows: Iterable[Iterable[Any]],
        count_columns: int | None = None,
        limit_rows: int | None = None,
        hint_count_rows: int | None = None,
    ) -> None:
        self._iter: Iterator[Iterable[Any]] = iter(rows)
        if limit_rows is not None:
            self._iter = itertools.islice(self._iter, limit_rows)
        self._count_columns = count_columns
        self._hint = hint_count_rows
        self._peeked: list[Any] | None = None
        self._consumed = False

    def count_columns(self) -> int:
        if self._count_columns is None:
            first = self._peek()
            self._count_columns = len(first) if first is not None else 0
        return self._count_columns

    def hint_count_rows(self) -> int | None:
        return self._hint

    def _peek(self) -> list[Any] | None:
        if self._peeked is None:
            first = next(self._iter, None)
            if first is not None:
                self._peeked = list(first)
        return self._peeked

    def iter_rows(self) -> Iterator[list[str]]:
        if self._consumed:
            raise GridError("IterRecords can only be iterated once; use buffered() to re-read rows")
        self._consumed = True
        count_columns = self.count_columns()
        return self._generate(count_columns)

    def _generate(self, count_columns: int) -> Iterator[list[str]]:
        if self._peeked is not None:
            yield _normalize(self._peeked, count_columns)
            self._peeked = None
        for row in self._iter:
            yield _normalize(row, count_columns)

    def buffered(self) -> VecRecords:
        """Drain the remaining rows into a :class:`VecRecords`."""
        count_columns = self.count_columns()
        return VecRecords(self.iter_rows(), count_columns)


class EmptyRecords:
    def __init__(self, count_rows: int, count_columns: int) -> None:
        self._count_rows = count_rows
        self._count_columns = count_columns

    def count_columns(self) -> int:
        return self._count_columns

    def hint_count_rows(self) -> int | None:
        return self._count_rows

    def iter_rows(self) -> Iterator[list[str]]:
        for _ in range(self._count_rows):
            yield [""] * self._count_columns
