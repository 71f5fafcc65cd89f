"""Error types raised by pi-grid.

Only configuration problems are errors. Measuring text and fitting sizes
always succeed; I/O errors from a sink propagate untouched.
"""

from __future__ import annotations


class GridError(ValueError):
    """Base class for invalid grid configuration."""


class InvalidPositionError(GridError):
    """A position, entity or span footprint lies outside the records."""

    def __init__(self, position: tuple[int, int], shape: tuple[int, int], what: str = "position") -> None:
        self.position = position
        self.shape = shape
        super().__init__(
            f"{what} {position} is out of range for a grid of {shape[0]} rows x {shape[1]} columns"
        )


class SpanOverlapError(GridError):
    """A span footprint intersects a span that is already registered."""

    def __init__(self, position: tuple[int, int], other: tuple[int, int]) -> None:
        self.position = position
        self.other = other
        super().__init__(f"span at {position} overlaps the span anchored at {other}")


class SettingsError(GridError):
    """Malformed table settings."""
