""" precomputes the epicycle chain at evenly spaced times over one revolution """

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def build_frames(components, steps=200, scale=1.0, origin=(0.0, 0.0)) -> NDArray[np.float64]:
    """ returns an array of shape (steps, len(components), 2): for frame s at time t = 2 pi s / steps,
        entry [s, j] is the tip of arrow j when the arrows are chained tip to tail from origin in the
        given order; scale converts arrow lengths to output units (pixels per cell) """
    t = 2 * np.pi * np.arange(steps) / steps
    freq = np.array([c.freq for c in components], dtype=np.float64)
    amp = np.array([c.amp for c in components], dtype=np.float64)
    phase = np.array([c.phase for c in components], dtype=np.float64)

    angles = np.outer(t, freq) + phase     # (steps, k)
    arrows = np.stack([np.cos(angles), np.sin(angles)], axis=-1) * (amp * scale)[None, :, None]
    return np.cumsum(arrows, axis=1) + np.asarray(origin, dtype=np.float64)


def trace(frames, origin=(0.0, 0.0)) -> NDArray[np.float64]:
    """ returns the position of the last arrow tip in every frame, shape (steps, 2) """
    frames = np.asarray(frames, dtype=np.float64)
    if frames.ndim < 3 or frames.shape[1] == 0:
        return np.tile(np.asarray(origin, dtype=np.float64), (len(frames), 1))
    return frames[:, -1, :]
