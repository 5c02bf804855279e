"""Animated daytime-running-light patterns drawn onto the left side of a display."""

from __future__ import annotations

import math
from enum import IntEnum

from .display import LedDisplay
from .layout import (
    BLACK,
    LEDS_PER_ROW,
    LOOP_INDICES,
    LOOP_LEDS,
    ORANGE,
    ROW_INDICES,
    lerp_yellow_orange,
)

_WAVE_SPEED = 0.001
_SWEEP_SPEED = 0.003
_UINT32_MASK = 0xFFFFFFFF


class PatternMode(IntEnum):
    NORMAL = 0
    TURN_SIGNAL = 1


def _wave(time_ms: int, offset: float) -> float:
    return 0.5 * (1.0 + math.sin(_WAVE_SPEED * time_ms + offset))


class PatternEngine:
    """Draws the row wave, the loop sweep and the turn-signal sweep."""

    def __init__(self, display: LedDisplay) -> None:
        self.display = display
        self.current_pattern_mode = PatternMode.NORMAL
        self._prev_active = False
        self._last_tick = 0

    def _fill_rows(self, color) -> None:
        for row in ROW_INDICES:
            for idx in row:
                self.display.set_led_color(idx, color)

    def reset_patterns(self) -> None:
        """Turn off the rows, the loop and the analog LED."""
        self._fill_rows(BLACK)
        for idx in LOOP_INDICES:
            self.display.set_led_color(idx, BLACK)
        self.display.set_analog_led(0)

    def pattern_rows(self, time_ms: int) -> None:
        """Diagonal yellow-orange wave across the three rows."""
        for diag in range(LEDS_PER_ROW):
            color = lerp_yellow_orange(_wave(time_ms, diag))
            for row in ROW_INDICES:
                self.display.set_led_color(row[LEDS_PER_ROW - 1 - diag], color)
        for diag in range(1, LEDS_PER_ROW):
            color = lerp_yellow_orange(_wave(time_ms, diag + 0.5))
            for row in ROW_INDICES:
                self.display.set_led_color(row[LEDS_PER_ROW - diag], color)

    def pattern_loop_analog(self, time_ms: int) -> None:
        """Sweep along the loop and pulse the analog LED."""
        progress = _wave(time_ms, 0.0)
        for position, idx in enumerate(LOOP_INDICES):
            led_pos = position / (LOOP_LEDS - 1)
            t = min(max(progress - led_pos, 0.0), 1.0)
            self.display.set_led_color(idx, lerp_yellow_orange(t))
        if progress < 0.5:
            brightness = int(progress * 2.0 * 255.0)
        else:
            brightness = int((1.0 - progress) * 2.0 * 255.0)
        self.display.set_analog_led(brightness)

    def pattern_turn_signal(self, time_ms: int, active: bool) -> None:
        """Orange fill-then-empty sweep across the rows while active."""
        if not active:
            if self._prev_active:
                self._fill_rows(BLACK)
                self._prev_active = False
                self._last_tick = 0
            return
        if not self._prev_active:
            self._fill_rows(BLACK)
            self._last_tick = time_ms
        self._prev_active = True

        elapsed = (time_ms - self._last_tick) & _UINT32_MASK
        cycle = math.fmod(elapsed * _SWEEP_SPEED, 2.0)
        led_count = int(LEDS_PER_ROW * cycle)
        if cycle < 1.0:
            lit = lambda i: i < led_count  # noqa: E731
        else:
            off_count = led_count - LEDS_PER_ROW
            lit = lambda i: i >= off_count  # noqa: E731
        for row in ROW_INDICES:
            for position, idx in enumerate(row):
                self.display.set_led_color(idx, ORANGE if lit(position) else BLACK)