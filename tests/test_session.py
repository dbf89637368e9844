"""Tests for the session controller."""

import logging

import pytest

from epicycles.config import Settings
from epicycles.geometry import GridCell
from epicycles.playback import PlayerStatus, TickQueue
from epicycles.session import Session

from tests.helpers import square_cells


def _draw(session, cells):
    session.sketch.gesture_start(cells[0])
    for cell in cells[1:]:
        session.sketch.gesture_extend(cell)
    session.sketch.gesture_end()


@pytest.fixture
def queue():
    return TickQueue()


def test_regenerate_needs_two_points(queue, renderer, caplog):
    session = Session(queue, renderer)
    session.sketch.gesture_start(GridCell(3, 3))
    session.sketch.gesture_end()

    with caplog.at_level(logging.WARNING):
        assert session.regenerate() is False
    assert "Cannot generate" in caplog.text
    assert session.components == []
    assert len(session.frames) == 0


def test_regenerate_absorbs_zero_length_path(queue, renderer):
    session = Session(queue, renderer)
    session.sketch.cells = [GridCell(1, 1), GridCell(1, 1)]
    assert session.regenerate() is False


def test_start_playback_without_frames_is_a_no_op(queue, renderer):
    session = Session(queue, renderer)
    assert session.start_playback() is False
    assert session.player.status is PlayerStatus.IDLE
    assert len(queue) == 0


def test_generate_and_play(queue, renderer):
    session = Session(queue, renderer, cell_size=2.0, origin=(100.0, 100.0), sample_count=80, frame_steps=40, playback_speed=1.0)
    _draw(session, square_cells())

    assert session.generate() is True
    assert len(session.components) == 80
    assert session.frames.shape == (40, 80, 2)

    for _ in range(40):
        queue.run_pending()
    assert len(renderer.frames) == 40
    assert len(renderer.frames[-1].trail) == 40
    assert renderer.frames[-1].origin == (100.0, 100.0)
    assert session.player.state.loops == 1


def test_trace_matches_drawing_in_pixels(queue, renderer):
    # with every component kept, frame 0 ends on the first resampled point: the first drawn cell
    cells = square_cells(side=20, top=10, left=10)
    session = Session(queue, renderer, cell_size=2.0, origin=(0.0, 0.0), sample_count=80, frame_steps=80)
    _draw(session, cells)
    session.regenerate()

    centroid_offset = 2.0 * (10 + 10 + 0.5)     # square center in cell units, scaled to pixels
    tip = session.frames[0, -1]
    assert tip[0] == pytest.approx(2.0 * 10.5 - centroid_offset, abs=1e-6)
    assert tip[1] == pytest.approx(2.0 * 10.5 - centroid_offset, abs=1e-6)


def test_reset_all(queue, renderer):
    session = Session(queue, renderer, sample_count=40, frame_steps=20)
    _draw(session, square_cells())
    session.generate()
    session.reset_all()

    queue.run_pending()
    assert renderer.frames == []
    assert session.components == []
    assert len(session.frames) == 0
    assert len(session.sketch) == 0
    assert session.player.status is PlayerStatus.IDLE


def test_from_settings(queue, renderer):
    settings = Settings(grid_size=100, window_size=400, sample_count=50, playback_speed=0.5)
    session = Session.from_settings(queue, renderer, settings, origin=(200.0, 200.0))
    assert session.cell_size == 4.0
    assert session.sketch.grid_size == 100
    assert session.sample_count == 50
    assert session.player.speed == 0.5


@pytest.mark.parametrize(
    "options",
    [{"playback_speed": -0.5}, {"playback_speed": 0}, {"sample_count": 0}, {"frame_steps": 0}, {"max_components": 0}],
)
def test_invalid_options_fail_at_construction(queue, renderer, options):
    with pytest.raises(ValueError):
        Session(queue, renderer, **options)
