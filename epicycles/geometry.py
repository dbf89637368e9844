""" points, grid cells and the small geometry helpers the pipeline needs """

from __future__ import annotations

import math
from typing import NamedTuple


class GridCell(NamedTuple):
    row: int
    col: int


class Point(NamedTuple):
    x: float
    y: float


def distance(p1, p2) -> float:
    """ returns distance between two points in the x-y plane """
    return math.hypot(p1[0] - p2[0], p1[1] - p2[1])


def rasterize_line(c1: GridCell, c2: GridCell) -> list[GridCell]:
    """ returns every cell on the segment from c1 to c2 (Bresenham), both endpoints included;
        integer arithmetic only, each step moves by at most one row and one column """
    col, row = c1.col, c1.row
    dx = abs(c2.col - col)
    dy = abs(c2.row - row)
    sx = 1 if col < c2.col else -1
    sy = 1 if row < c2.row else -1
    err = dx - dy

    cells = []
    while True:
        cells.append(GridCell(row, col))
        if col == c2.col and row == c2.row:
            break
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            col += sx
        if e2 < dx:
            err += dx
            row += sy
    return cells


def cells_to_points(cells) -> list[Point]:
    """ converts grid cells to the points at their centers, measured in cell units """
    return [Point(cell.col + 0.5, cell.row + 0.5) for cell in cells]
