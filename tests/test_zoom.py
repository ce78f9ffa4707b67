import itertools
import random

import pytest

from livemark.document import DocumentBuffer
from livemark.session import EditSession
from livemark.zoom import EDITOR_ZOOM, PREVIEW_ZOOM, Direction, ZoomController, ZoomRange, next_scale


def test_default_ranges():
    assert (EDITOR_ZOOM.minimum, EDITOR_ZOOM.maximum) == (10, 60)
    assert (PREVIEW_ZOOM.minimum, PREVIEW_ZOOM.maximum) == (6, 48)


def test_decrease_below_minimum_clamps():
    zoom_range = ZoomRange(default=11, minimum=10, maximum=60)
    assert next_scale(11, Direction.DECREASE, zoom_range) == 10
    assert next_scale(10, Direction.DECREASE, zoom_range) == 10


def test_increase_above_maximum_clamps():
    zoom_range = ZoomRange(default=59, minimum=10, maximum=60)
    assert next_scale(59, Direction.INCREASE, zoom_range) == 60
    assert next_scale(60, Direction.INCREASE, zoom_range) == 60


def test_random_walks_stay_in_bounds():
    rng = random.Random(7)
    for zoom_range in (EDITOR_ZOOM, PREVIEW_ZOOM, ZoomRange(default=5, minimum=3, maximum=9, step=4)):
        zoom = ZoomController(zoom_range)
        for direction in (rng.choice(list(Direction)) for _ in range(500)):
            zoom.step(direction)
            assert zoom_range.minimum <= zoom.scale <= zoom_range.maximum


def test_ten_increases_from_ten():
    zoom = ZoomController(ZoomRange(default=10, minimum=10, maximum=60, step=2))
    results = [zoom.step(Direction.INCREASE) for _ in itertools.repeat(None, 10)]
    assert all(results)
    assert zoom.scale == 30


def test_step_reports_no_change_at_bounds():
    zoom = ZoomController(EDITOR_ZOOM, scale=EDITOR_ZOOM.maximum)
    assert zoom.step(Direction.INCREASE) is False


def test_initial_scale_is_clamped():
    assert ZoomController(EDITOR_ZOOM, scale=500).scale == 60


def test_apply_to_sets_every_block_line_height():
    buffer = DocumentBuffer("a\nb\nc")
    zoom = ZoomController(EDITOR_ZOOM, scale=20)
    assert zoom.apply_to(buffer) == 30
    assert [block.line_height for block in buffer] == [30, 30, 30]


def test_invalid_ranges_are_refused():
    with pytest.raises(ValueError):
        ZoomRange(default=10, minimum=20, maximum=10)
    with pytest.raises(ValueError):
        ZoomRange(default=10, minimum=1, maximum=20, step=0)


def test_fresh_session_blocks_carry_default_line_height():
    session = EditSession()
    assert session.buffer.line_height == 21.0
    assert [block.line_height for block in session.buffer] == [21.0]
