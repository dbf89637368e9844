""" controller tying the sketch, the numerical pipeline and the player together;
    regeneration replaces all state synchronously between ticks, so a tick never sees a half-built animation """

from __future__ import annotations

import logging

import numpy as np

from epicycles.errors import DegeneratePathError, EmptyAnimationError, InsufficientInputError
from epicycles.fourier import decompose
from epicycles.geometry import Point
from epicycles.playback import Player
from epicycles.simulator import build_frames
from epicycles.sketch import Sketch

logger = logging.getLogger(__name__)


class Session:
    """ class owning everything that belongs to one drawing: the sketch, its arrows, its frames and the player """

    def __init__(
        self,
        scheduler,
        render,
        cell_size=1.0,
        origin=(0.0, 0.0),
        grid_size=156,
        sample_count=200,
        max_components=1000,
        frame_steps=200,
        playback_speed=0.3,
    ):
        sizes = {"sample_count": sample_count, "max_components": max_components, "frame_steps": frame_steps}
        for name, value in sizes.items():
            if value < 1:
                raise ValueError(f"{name} must be positive, got {value}")
        self.cell_size = cell_size
        self.origin = Point(*origin)
        self.sample_count = sample_count
        self.max_components = max_components
        self.frame_steps = frame_steps

        self.sketch = Sketch(grid_size)
        self.components = []
        self.frames = np.empty((0, 0, 2))
        self.player = Player(scheduler, render, playback_speed)

    @classmethod
    def from_settings(cls, scheduler, render, settings, origin):
        """ builds a session from a Settings instance, with origin the center of the animation panel """
        return cls(
            scheduler,
            render,
            cell_size=settings.cell_size,
            origin=origin,
            grid_size=settings.grid_size,
            sample_count=settings.sample_count,
            max_components=settings.max_components,
            frame_steps=settings.frame_steps,
            playback_speed=settings.playback_speed,
        )

    def regenerate(self) -> bool:
        """ recomputes components and frames from the current sketch; returns False if it was unusable """
        cells = list(self.sketch.cells)
        try:
            components = decompose(cells, self.sample_count, self.max_components)
        except (InsufficientInputError, DegeneratePathError) as e:
            logger.warning("Cannot generate epicycles: %s", e)
            return False

        self.components = components
        self.frames = build_frames(components, self.frame_steps, self.cell_size, self.origin)
        self.player.load(self.frames, self.origin)
        logger.info(
            "Generated %d arrows and %d frames from %d cells",
            len(self.components),
            len(self.frames),
            len(cells),
        )
        return True

    def start_playback(self) -> bool:
        """ starts playing the current frames; returns False if nothing has been generated yet """
        try:
            self.player.start()
        except EmptyAnimationError as e:
            logger.info("Playback not started: %s", e)
            return False
        return True

    def generate(self) -> bool:
        """ regenerates and starts playing, as the generate button does """
        return self.regenerate() and self.start_playback()

    def reset_all(self):
        """ forgets the drawing and everything computed from it, and stops playback """
        self.sketch.clear()
        self.components = []
        self.frames = np.empty((0, 0, 2))
        self.player.reset()
        logger.debug("Session reset")
