"""
Checkerboard Tiling

Computes the two-colour checkerboard drawn behind every screen, and decides
whether a change of tiling settings needs a repaint.

Both operations are pure: the widget layer calls them from paintEvent and
from its setters.
"""

import math
from dataclasses import dataclass
from typing import Any, List, NamedTuple, Optional

from .exceptions import InvalidConfigurationError

DEFAULT_CELL_SIZE = 64.0


def _check_cell_size(cell_size: float) -> None:
    # Finite positive real only; bool is an int subclass
    valid = (
        isinstance(cell_size, (int, float))
        and not isinstance(cell_size, bool)
        and math.isfinite(cell_size)
        and cell_size > 0
    )
    if not valid:
        raise InvalidConfigurationError(
            field="cell_size",
            value=str(cell_size),
            message=f"Cell size must be a finite positive number, got {cell_size!r}"
        )


@dataclass(frozen=True)
class TilingConfig:
    """Two alternating fill colours and the side length of one square."""
    color_a: str
    color_b: str
    cell_size: float = DEFAULT_CELL_SIZE

    def __post_init__(self):
        _check_cell_size(self.cell_size)


class FilledRect(NamedTuple):
    """One checkerboard square: position, size and fill colour."""
    x: float
    y: float
    width: float
    height: float
    color: str


def grid_shape(surface_width: float, surface_height: float, cell_size: float) -> tuple:
    """
    Number of (rows, columns) needed to cover the surface.

    Negative dimensions count as zero.
    """
    _check_cell_size(cell_size)
    columns = math.ceil(max(surface_width, 0) / cell_size)
    rows = math.ceil(max(surface_height, 0) / cell_size)
    return rows, columns


def render(surface_width: float, surface_height: float, config: TilingConfig) -> List[FilledRect]:
    """
    Cover a surface with checkerboard squares.

    Squares are returned in row-major order. The last row and column may
    overhang the surface; the caller clips.

    Args:
        surface_width: Width of the drawing surface
        surface_height: Height of the drawing surface
        config: Colours and cell size

    Returns:
        List of FilledRect, empty when either dimension is zero

    Raises:
        InvalidConfigurationError: If config.cell_size is not positive
    """
    size = config.cell_size
    rows, columns = grid_shape(surface_width, surface_height, size)

    rects = []
    for i in range(rows):
        for j in range(columns):
            color = config.color_a if (i + j) % 2 == 0 else config.color_b
            rects.append(FilledRect(j * size, i * size, size, size, color))
    return rects


def should_redraw(previous: Optional[Any], new: TilingConfig) -> bool:
    """
    Whether moving from `previous` to `new` requires a repaint.

    Always true when there is no previous tiling, or it is of another kind.
    """
    if not isinstance(previous, TilingConfig):
        return True
    return (
        previous.color_a != new.color_a
        or previous.color_b != new.color_b
        or previous.cell_size != new.cell_size
    )
