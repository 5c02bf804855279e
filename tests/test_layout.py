from collections import Counter
from itertools import chain

import pytest

from drlsim.layout import (
    BLACK,
    LEDS_PER_ROW,
    LOOP_INDICES,
    LOOP_LEDS,
    NUM_ROWS,
    ORANGE,
    RGB,
    ROW_INDICES,
    TOTAL_ADDRESSABLE_LEDS,
    lerp_yellow_orange,
)


def test_rows_and_loop_cover_all_addressable_leds_once():
    buffer = [RGB() for _ in range(TOTAL_ADDRESSABLE_LEDS)]
    painted = Counter()
    for idx in chain(chain.from_iterable(ROW_INDICES), LOOP_INDICES):
        buffer[idx] = lerp_yellow_orange(1.0)
        painted[idx] += 1
    assert sorted(painted) == list(range(TOTAL_ADDRESSABLE_LEDS))
    assert set(painted.values()) == {1}
    assert all(color == ORANGE for color in buffer)


def test_row_shape():
    assert len(ROW_INDICES) == NUM_ROWS
    assert len(LOOP_INDICES) == LOOP_LEDS
    painted_rows = [
        [lerp_yellow_orange(pos / (LEDS_PER_ROW - 1)) for pos, _ in enumerate(row)]
        for row in ROW_INDICES
    ]
    assert len(painted_rows) == NUM_ROWS
    for row in painted_rows:
        assert len(row) == LEDS_PER_ROW
        assert row[0] == RGB(255, 200, 0)
        assert row[-1] == ORANGE


def test_lerp_endpoints():
    assert lerp_yellow_orange(0.0) == RGB(255, 200, 0)
    assert lerp_yellow_orange(1.0) == RGB(255, 120, 0)
    assert lerp_yellow_orange(1.0) == ORANGE


@pytest.mark.parametrize("t", [0.0, 0.1, 0.33, 0.5, 0.77, 0.99, 1.0])
def test_lerp_green_within_range(t):
    color = lerp_yellow_orange(t)
    assert color.r == 255
    assert color.b == 0
    assert 120 <= color.g <= 200


def test_lerp_is_monotonic():
    greens = [lerp_yellow_orange(step / 20).g for step in range(21)]
    assert greens == sorted(greens, reverse=True)


@pytest.mark.parametrize("bad", [(256, 0, 0), (0, -1, 0), (0, 0, 1.5)])
def test_rgb_rejects_out_of_range(bad):
    with pytest.raises(ValueError):
        RGB(*bad)


def test_black_is_default():
    assert RGB() == BLACK