""" real-time playback of precomputed frames: the host drives ticks through a scheduler,
    advance is the pure step function and Player wraps it in an idle/playing state machine """

from __future__ import annotations

import enum
import logging
import math
from dataclasses import dataclass, field
from typing import Callable, Protocol

import numpy as np
from numpy.typing import NDArray

from epicycles.errors import EmptyAnimationError
from epicycles.geometry import Point

logger = logging.getLogger(__name__)


@dataclass
class PlaybackState:
    index: float = 0.0      # fractional frame position
    trail: list[Point] = field(default_factory=list)
    loops: int = 0          # completed revolutions


@dataclass(frozen=True)
class RenderFrame:
    """ everything a renderer needs for one tick """

    origin: Point
    arms: NDArray[np.float64]   # (k, 2) arrow tips, chained from origin
    trail: tuple[Point, ...]


def interpolate(frames, index: float) -> NDArray[np.float64]:
    """ blends frame floor(index) linearly into the following frame; the last frame blends into the first """
    i = int(math.floor(index))
    j = (i + 1) % len(frames)
    t = index - i
    return frames[i] * (1 - t) + frames[j] * t


def advance(state: PlaybackState, frames, speed: float, origin=(0.0, 0.0)):
    """ performs one playback tick without side effects, returns (new state, frame to render);
        the trail is cleared and loops incremented when the index wraps past the last frame """
    origin = Point(*origin)
    arms = interpolate(frames, state.index)
    tip = Point(float(arms[-1][0]), float(arms[-1][1])) if len(arms) else origin
    trail = state.trail + [tip]
    render = RenderFrame(origin, arms, tuple(trail))

    index = state.index + speed
    loops = state.loops
    if index >= len(frames):
        index = 0.0
        trail = []
        loops += 1
    return PlaybackState(index, trail, loops), render


class TickScheduler(Protocol):
    def schedule_next_tick(self, callback: Callable[[], None]) -> None: ...


class TickQueue:
    """ scheduler drained by the host once per displayed frame """

    def __init__(self):
        self._pending: list[Callable[[], None]] = []

    def schedule_next_tick(self, callback):
        """ queues callback for the next run_pending call """
        self._pending.append(callback)

    def run_pending(self) -> int:
        """ runs the callbacks scheduled so far; callbacks they schedule wait for the next call """
        pending, self._pending = self._pending, []
        for callback in pending:
            callback()
        return len(pending)

    def __len__(self):
        return len(self._pending)


class PlayerStatus(enum.Enum):
    IDLE = "idle"
    PLAYING = "playing"


class Player:
    """ loops over precomputed frames, handing an interpolated RenderFrame to render on every tick """

    def __init__(self, scheduler: TickScheduler, render: Callable[[RenderFrame], None], speed=0.3):
        if speed <= 0:
            raise ValueError(f"playback speed must be positive, got {speed}")
        self.scheduler = scheduler
        self.render = render
        self.speed = speed
        self.frames = np.empty((0, 0, 2))
        self.origin = Point(0.0, 0.0)
        self.state = PlaybackState()
        self.status = PlayerStatus.IDLE
        self._generation = 0    # bumped on start/reset so stale ticks do nothing

    def load(self, frames, origin=(0.0, 0.0)):
        """ replaces the frames to play; takes effect from the next tick """
        self.frames = np.asarray(frames, dtype=np.float64)
        self.origin = Point(*origin)
        self.state = PlaybackState()

    def start(self):
        """ plays the loaded frames from the beginning; raises EmptyAnimationError if there are none """
        if len(self.frames) == 0:
            raise EmptyAnimationError("no frames to play")
        self._generation += 1
        self.state = PlaybackState()
        self.status = PlayerStatus.PLAYING
        logger.debug("Playback started with %d frames", len(self.frames))
        self._schedule()

    def reset(self):
        """ drops the frames and returns to idle """
        self._generation += 1
        self.frames = np.empty((0, 0, 2))
        self.state = PlaybackState()
        self.status = PlayerStatus.IDLE

    def tick(self):
        """ renders the current frame and moves on by speed """
        if self.status is not PlayerStatus.PLAYING or len(self.frames) == 0:
            return
        loops = self.state.loops
        self.state, frame = advance(self.state, self.frames, self.speed, self.origin)
        if self.state.loops != loops:
            logger.debug("Playback completed revolution %d", self.state.loops)
        self.render(frame)

    def _schedule(self):
        generation = self._generation

        def run():
            if generation != self._generation:
                return
            self.tick()
            if self.status is PlayerStatus.PLAYING:
                self._schedule()

        self.scheduler.schedule_next_tick(run)
