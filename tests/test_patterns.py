from drlsim.display import LedDisplay, Side
from drlsim.layout import (
    BLACK,
    LOOP_INDICES,
    ORANGE,
    ROW_INDICES,
    lerp_yellow_orange,
)
from drlsim.patterns import PatternEngine, PatternMode


def _engine():
    display = LedDisplay()
    return display, PatternEngine(display)


def _row_colors(display, row):
    leds = display.leds(Side.LEFT)
    return [leds[idx] for idx in ROW_INDICES[row]]


def _lit_count(display):
    return sum(color == ORANGE for color in _row_colors(display, 0))


def test_initial_mode_is_normal():
    _, engine = _engine()
    assert engine.current_pattern_mode is PatternMode.NORMAL


def test_pattern_rows_same_on_every_row():
    display, engine = _engine()
    engine.pattern_rows(1234)
    assert _row_colors(display, 0) == _row_colors(display, 1) == _row_colors(display, 2)


def test_pattern_rows_colors_in_palette_and_loop_untouched():
    display, engine = _engine()
    engine.pattern_rows(777)
    for color in _row_colors(display, 1):
        assert color.r == 255 and color.b == 0
        assert 120 <= color.g <= 200
    leds = display.leds(Side.LEFT)
    assert all(leds[idx] == BLACK for idx in LOOP_INDICES)
    assert display.leds(Side.RIGHT) == (BLACK,) * len(leds)


def test_loop_end_is_yellow_and_green_rises_along_loop():
    display, engine = _engine()
    engine.pattern_loop_analog(2000)
    leds = display.leds(Side.LEFT)
    loop = [leds[idx] for idx in LOOP_INDICES]
    assert loop[-1] == lerp_yellow_orange(0.0)
    greens = [color.g for color in loop]
    assert greens == sorted(greens)


def test_loop_analog_at_midpoint_is_full_brightness():
    display, engine = _engine()
    engine.pattern_loop_analog(0)
    assert display.analog(Side.LEFT) == 255


def test_reset_patterns_turns_everything_off():
    display, engine = _engine()
    engine.pattern_rows(500)
    engine.pattern_loop_analog(500)
    engine.reset_patterns()
    assert display.leds(Side.LEFT) == (BLACK,) * len(display.leds(Side.LEFT))
    assert display.analog(Side.LEFT) == 0


def test_turn_signal_starts_dark():
    display, engine = _engine()
    engine.pattern_rows(100)
    engine.pattern_turn_signal(1000, True)
    assert all(color == BLACK for row in range(3) for color in _row_colors(display, row))


def test_turn_signal_fills_from_the_start():
    display, engine = _engine()
    engine.pattern_turn_signal(1000, True)
    engine.pattern_turn_signal(1250, True)
    row = _row_colors(display, 0)
    assert _lit_count(display) == 7
    assert all(color == ORANGE for color in row[:7])
    assert all(color == BLACK for color in row[7:])


def test_turn_signal_empties_in_second_half():
    display, engine = _engine()
    engine.pattern_turn_signal(1000, True)
    engine.pattern_turn_signal(1500, True)
    row = _row_colors(display, 0)
    assert all(color == BLACK for color in row[:5])
    assert all(color == ORANGE for color in row[5:])


def test_turn_signal_fill_is_monotonic_in_first_half():
    display, engine = _engine()
    engine.pattern_turn_signal(0, True)
    counts = []
    for t in range(0, 320, 20):
        engine.pattern_turn_signal(t, True)
        counts.append(_lit_count(display))
    assert counts == sorted(counts)


def test_turn_signal_off_clears_rows_and_restarts():
    display, engine = _engine()
    engine.pattern_turn_signal(1000, True)
    engine.pattern_turn_signal(1250, True)
    engine.pattern_turn_signal(1300, False)
    assert _lit_count(display) == 0
    engine.pattern_turn_signal(5000, True)
    assert _lit_count(display) == 0


def test_turn_signal_off_when_idle_leaves_rows_alone():
    display, engine = _engine()
    display.set_led_color(ROW_INDICES[0][0], ORANGE)
    engine.pattern_turn_signal(100, False)
    assert display.leds(Side.LEFT)[ROW_INDICES[0][0]] == ORANGE