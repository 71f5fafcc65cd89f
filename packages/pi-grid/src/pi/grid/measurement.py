"""Size targets that depend on the table they are applied to."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, Union

from pi.grid.dimension import cell_height, cell_width

if TYPE_CHECKING:
    from pi.grid.config import GridConfig
    from pi.grid.records import Records


class Measurement(Protocol):
    def measure_width(self, records: Records, cfg: GridConfig, total: int) -> int: ...

    def measure_height(self, records: Records, cfg: GridConfig, total: int) -> int: ...


Target = Union[int, Measurement]


@dataclass(frozen=True)
class Percent:
    """A percentage of the current total."""

    percent: int

    def measure_width(self, records: Records, cfg: GridConfig, total: int) -> int:
        return total * self.percent // 100

    def measure_height(self, records: Records, cfg: GridConfig, total: int) -> int:
        return total * self.percent // 100


def _cell_sizes(records: Records, cfg: GridConfig, measure) -> list[int]:
    sizes = []
    for row, cells in enumerate(records.iter_rows()):
        for col, text in enumerate(cells):
            if cfg.is_cell_visible((row, col)):
                sizes.append(measure(text, cfg, (row, col)))
    return sizes


@dataclass(frozen=True)
class Max:
    """The size of the widest (or tallest) cell."""

    def measure_width(self, records: Records, cfg: GridConfig, total: int) -> int:
        return max(_cell_sizes(records, cfg, cell_width), default=0)

    def measure_height(self, records: Records, cfg: GridConfig, total: int) -> int:
        return max(_cell_sizes(records, cfg, cell_height), default=0)


@dataclass(frozen=True)
class Min:
    """The size of the narrowest (or shortest) cell."""

    def measure_width(self, records: Records, cfg: GridConfig, total: int) -> int:
        return min(_cell_sizes(records, cfg, cell_width), default=0)

    def measure_height(self, records: Records, cfg: GridConfig, total: int) -> int:
        return min(_cell_sizes(records, cfg, cell_height), default=0)


def resolve_width(target: Target, records: Records, cfg: GridConfig, total: int) -> int:
    if isinstance(target, int):
        return target
    return target.measure_width(records, cfg, total)


def resolve_height(target: Target, records: Records, cfg: GridConfig, total: int) -> int:
    if isinstance(target, int):
        return target
    return target.measure_height(records, cfg, total)
