"""Shared test fixtures."""

from __future__ import annotations

import pytest

from epicycles.geometry import Point
from tests.helpers import SQUARE_POLYGON, RecordingRenderer, circle_points


@pytest.fixture
def unit_circle() -> list[Point]:
    return circle_points()


@pytest.fixture
def square_polygon() -> list[Point]:
    return list(SQUARE_POLYGON)


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()
