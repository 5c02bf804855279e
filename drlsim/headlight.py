"""Per-headlight animation state that renders into its own LED buffer."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .display import LED_BUFFER_SIZE, LedDisplay
from .layout import (
    BLACK,
    LEDS_PER_ROW,
    LOOP_INDICES,
    LOOP_LEDS,
    ORANGE,
    RGB,
    ROW_INDICES,
    lerp_yellow_orange,
)
from .patterns import PatternMode

_WAVE_SPEED = 0.001
_SWEEP_SPEED = 0.003
_UINT32_MASK = 0xFFFFFFFF


def _wave(time_ms: int, offset: float) -> float:
    return 0.5 * (1.0 + math.sin(_WAVE_SPEED * time_ms + offset))


def _blank_buffer() -> list[RGB]:
    return [BLACK] * LED_BUFFER_SIZE


@dataclass
class Headlight:
    """One side's LED buffer, analog level and animation timing."""

    led_buffer: list[RGB] = field(default_factory=_blank_buffer)
    analog_brightness: int = 0
    mode: PatternMode = PatternMode.NORMAL
    prev_mode: PatternMode = PatternMode.NORMAL
    last_tick: int = 0
    turn_signal_active: bool = False
    pattern_time_ms: int = 0

    def reset(self) -> None:
        """Blank the LED buffer and the analog level."""
        self.led_buffer = _blank_buffer()
        self.analog_brightness = 0

    def _draw_rows(self, time_ms: int) -> None:
        for diag in range(LEDS_PER_ROW):
            color = lerp_yellow_orange(_wave(time_ms, diag))
            for row in ROW_INDICES:
                self.led_buffer[row[LEDS_PER_ROW - 1 - diag]] = color
        for diag in range(1, LEDS_PER_ROW):
            color = lerp_yellow_orange(_wave(time_ms, diag + 0.5))
            for row in ROW_INDICES:
                self.led_buffer[row[LEDS_PER_ROW - diag]] = color

    def _draw_loop_analog(self, time_ms: int) -> None:
        progress = _wave(time_ms, 0.0)
        for position, idx in enumerate(LOOP_INDICES):
            t = min(max(progress - position / (LOOP_LEDS - 1), 0.0), 1.0)
            self.led_buffer[idx] = lerp_yellow_orange(t)
        if progress < 0.5:
            self.analog_brightness = int(progress * 2.0 * 255.0)
        else:
            self.analog_brightness = int((1.0 - progress) * 2.0 * 255.0)

    def _draw_turn_signal(self, time_ms: int, active: bool) -> None:
        if not active:
            self.last_tick = 0
            self.reset()
            return
        if self.last_tick == 0:
            self.last_tick = time_ms
        elapsed = (time_ms - self.last_tick) & _UINT32_MASK
        cycle = math.fmod(elapsed * _SWEEP_SPEED, 2.0)
        led_count = int(LEDS_PER_ROW * cycle)
        if cycle < 1.0:
            def lit(i: int) -> bool:
                return i < led_count
        else:
            off_count = led_count - LEDS_PER_ROW

            def lit(i: int) -> bool:
                return i >= off_count
        for row in ROW_INDICES:
            for position, idx in enumerate(row):
                self.led_buffer[idx] = ORANGE if lit(position) else BLACK

    def update(self, other: Headlight, time_ms: int, turn_signal: bool) -> None:
        """Advance the animation; a mode change clears the buffer first."""
        new_mode = PatternMode.TURN_SIGNAL if turn_signal else PatternMode.NORMAL
        if new_mode != self.mode:
            self.reset()
            self.mode = new_mode
            self.last_tick = 0
            if new_mode == PatternMode.NORMAL and other.mode == PatternMode.NORMAL:
                self.pattern_time_ms = other.pattern_time_ms
        if turn_signal:
            self._draw_turn_signal(time_ms, True)
        else:
            self._draw_rows(self.pattern_time_ms)
            self._draw_loop_analog(self.pattern_time_ms)

    def show(self, display: LedDisplay, side: int) -> None:
        """Copy this headlight's state onto one side of the display."""
        for idx, color in enumerate(self.led_buffer):
            display.set_led_color_side(side, idx, color)
        display.set_analog_led_side(side, self.analog_brightness)


def sync_pattern_time(a: Headlight, b: Headlight) -> None:
    """Bring both headlights to the later of their pattern times."""
    latest = max(a.pattern_time_ms, b.pattern_time_ms)
    a.pattern_time_ms = latest
    b.pattern_time_ms = latest