""" builds the drawn path from pointer gestures on the grid """

from __future__ import annotations

import logging

from epicycles.geometry import GridCell, rasterize_line

logger = logging.getLogger(__name__)


class Sketch:
    """ ordered cells of one stroke; frozen when the stroke ends until cleared """

    def __init__(self, grid_size=156):
        self.grid_size = grid_size
        self.cells: list[GridCell] = []
        self.drawing = False
        self.finished = False
        self.last_cell = None

    def clamp(self, cell):
        """ keeps a cell inside the grid """
        limit = self.grid_size - 1
        return GridCell(min(max(cell[0], 0), limit), min(max(cell[1], 0), limit))

    def gesture_start(self, cell):
        """ begins a stroke at cell, returns the cells added """
        if self.finished:
            return []
        self.drawing = True
        self.last_cell = self.clamp(cell)
        return self._append([self.last_cell])

    def gesture_extend(self, cell):
        """ continues the stroke to cell along a rasterized line, returns the cells added """
        if not self.drawing or self.finished:
            return []
        cell = self.clamp(cell)
        if cell == self.last_cell:
            return []
        added = self._append(rasterize_line(self.last_cell, cell))
        self.last_cell = cell
        return added

    def gesture_end(self):
        """ freezes the path """
        if not self.drawing:
            return
        self.drawing = False
        self.finished = True
        self.last_cell = None
        logger.debug("Stroke finished with %d cells", len(self.cells))

    def gesture_cancel(self):
        """ stops the stroke without freezing the path; a new stroke may continue it """
        self.drawing = False
        self.last_cell = None

    def clear(self):
        """ empties the path and allows a new stroke """
        self.cells = []
        self.drawing = False
        self.finished = False
        self.last_cell = None

    def _append(self, cells):
        added = []
        for cell in cells:
            if not self.cells or self.cells[-1] != cell:
                self.cells.append(cell)
                added.append(cell)
        return added

    def __len__(self):
        return len(self.cells)
