""" discrete Fourier transform of a sampled 2D path into rotating arrows """

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass

import numpy as np

from epicycles.geometry import cells_to_points
from epicycles.resample import center, resample

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FourierComponent:
    """ one arrow: rotates freq times per revolution, starting at angle phase """

    freq: int
    amp: float
    phase: float
    re: float
    im: float


class Fourier:
    """ class containing functions related to the Fourier transform """

    @classmethod
    def dft(cls, path):
        """ computes the discrete Fourier transform of a list of points, returns one FourierComponent per
            index k = 0..N-1 in that order; x and y are folded together so that
            amp * e^(i * (freq * t + phase)) is the arrow rotating with frequency freq """
        pts = np.asarray(path, dtype=np.float64).reshape(-1, 2)
        n = len(pts)
        if n == 0:
            return []

        k = np.arange(n)
        theta = 2 * np.pi * np.outer(k, k) / n   # theta[k, i] = 2 pi k i / n
        cos = np.cos(theta)
        sin = np.sin(theta)
        x = pts[:, 0]
        y = pts[:, 1]
        re = (cos @ x + sin @ y) / n
        im = (-sin @ x + cos @ y) / n

        result = []
        for idx in range(n):
            freq = idx if idx <= n / 2 else idx - n
            r, i = float(re[idx]), float(im[idx])
            result.append(FourierComponent(freq, math.hypot(r, i), math.atan2(i, r), r, i))
        return result

    @classmethod
    def get_approx(cls, dft, n):
        """ returns the n components with greatest amplitude, largest first;
            the sort is stable so equal amplitudes keep their order from dft """
        sorted_dft = sorted(dft, key=lambda c: -c.amp)
        return sorted_dft[:n]


def decompose(cells, sample_count=200, max_components=1000):
    """ runs a drawn path through resampling, centering and the DFT;
        returns the top min(max_components, sample_count) components by amplitude """
    start = time.perf_counter()
    points = center(resample(cells_to_points(cells), sample_count))
    components = Fourier.get_approx(Fourier.dft(points), min(max_components, len(points)))
    logger.debug(
        "Decomposed %d cells into %d components in %.1fms",
        len(cells),
        len(components),
        (time.perf_counter() - start) * 1000,
    )
    return components
