""" arc-length resampling and centering of drawn paths """

from __future__ import annotations

import logging

from epicycles.errors import DegeneratePathError, InsufficientInputError
from epicycles.geometry import Point, distance

logger = logging.getLogger(__name__)


def path_length(path) -> float:
    """ total length of the polyline through all points of path """
    return sum(distance(path[i - 1], path[i]) for i in range(1, len(path)))


def resample(path, count: int) -> list[Point]:
    """ returns count points spaced evenly by arc length along path, starting at its first point

        Walks the polyline and emits a point every total_length / count units. Each emitted point
        becomes the start of the next measurement, so spacing stays uniform across vertices.
        The final point lies one step short of the end of the path (a closed curve wraps back to
        the first point). If rounding exhausts the input early the last point is repeated. """
    if count < 1:
        raise ValueError(f"count must be positive, got {count}")
    if len(path) < 2:
        raise InsufficientInputError(f"need at least 2 points to resample, got {len(path)}")

    total = path_length(path)
    if total == 0:
        raise DegeneratePathError(f"path of {len(path)} points has zero length")

    step = total / count
    prev = Point(*path[0])
    out = [prev]
    acc = 0.0   # distance walked since the last emitted point
    i = 1
    while i < len(path) and len(out) < count:
        d = distance(prev, path[i])
        if acc + d >= step:
            t = (step - acc) / d
            prev = Point(prev.x + t * (path[i][0] - prev.x), prev.y + t * (path[i][1] - prev.y))
            out.append(prev)
            acc = 0.0
        else:
            acc += d
            prev = Point(*path[i])
            i += 1

    if len(out) < count:
        logger.debug("Resampling ran out of input at %d/%d points, padding", len(out), count)
        out.extend([out[-1]] * (count - len(out)))
    return out


def center(path) -> list[Point]:
    """ shifts path so that the mean of its points is the origin """
    if len(path) == 0:
        return []
    cx = sum(p[0] for p in path) / len(path)
    cy = sum(p[1] for p in path) / len(path)
    return [Point(p[0] - cx, p[1] - cy) for p in path]
