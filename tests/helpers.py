"""Shapes and doubles shared by the test modules."""

from __future__ import annotations

import math

from epicycles.geometry import GridCell, Point


def circle_points(n=200, radius=1.0, clockwise=False):
    sign = -1 if clockwise else 1
    return [
        Point(radius * math.cos(2 * math.pi * i / n), sign * radius * math.sin(2 * math.pi * i / n))
        for i in range(n)
    ]


# closed square outline, corners listed once and the start repeated at the end
SQUARE_POLYGON = [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10), Point(0, 0)]


def square_cells(side=20, top=10, left=10):
    """Outline of a square as drawn cell by cell, clockwise from the top-left corner."""
    cells = [GridCell(top, left + c) for c in range(side)]
    cells += [GridCell(top + r, left + side) for r in range(side)]
    cells += [GridCell(top + side, left + side - c) for c in range(side)]
    cells += [GridCell(top + side - r, left) for r in range(side + 1)]
    return cells


class RecordingRenderer:
    def __init__(self):
        self.frames = []

    def __call__(self, frame):
        self.frames.append(frame)
