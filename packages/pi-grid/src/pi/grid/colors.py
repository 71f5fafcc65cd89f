"""Colors: prefix/suffix pairs wrapped around cell text and border glyphs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from pi.grid.config import EntityMap

if TYPE_CHECKING:
    from pi.grid.types import Entity, Position


@dataclass(frozen=True)
class Color:
    """A pair of strings written before and after colored text."""

    prefix: str = ""
    suffix: str = ""

    @classmethod
    def sgr(cls, *params: int | str) -> Color:
        """Build a color from SGR parameters, e.g. ``Color.sgr(1, 31)``."""
        codes = ";".join(str(p) for p in params)
        return cls(f"\x1b[{codes}m", "\x1b[0m")

    def wrap(self, text: str) -> str:
        if not text:
            return text
        return f"{self.prefix}{text}{self.suffix}"

    def __add__(self, other: Color) -> Color:
        return Color(self.prefix + other.prefix, other.suffix + self.suffix)


def wrap_color(text: str, color: Color | None) -> str:
    return color.wrap(text) if color is not None else text


class Colors(Protocol):
    """Anything that can hand out a text color per cell."""

    def get_color(self, pos: Position) -> Color | None: ...

    def is_empty(self) -> bool: ...


class NoColors:
    """The :class:`Colors` used when nothing is colored."""

    def get_color(self, pos: Position) -> Color | None:
        return None

    def is_empty(self) -> bool:
        return True


class ColorMap:
    """Per-entity text colors, resolved most specific first."""

    def __init__(self) -> None:
        self._colors: EntityMap[Color | None] = EntityMap(None)

    def set(self, entity: Entity, color: Color | None) -> None:
        self._colors.set(entity, color)

    def get_color(self, pos: Position) -> Color | None:
        return self._colors.get(pos)

    def is_empty(self) -> bool:
        return self._colors.is_empty()

    def __repr__(self) -> str:
        return f"ColorMap({self._colors!r})"
