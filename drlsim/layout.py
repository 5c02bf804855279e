"""LED layout of one headlight side and the colour type used for it."""

from __future__ import annotations

from dataclasses import dataclass

NUM_ROWS = 3
LEDS_PER_ROW = 10
LOOP_LEDS = 31
ANALOG_LED_INDEX = 61  # the analog LED is not addressable; index kept for logic
TOTAL_ADDRESSABLE_LEDS = 61

ROW_INDICES: tuple[tuple[int, ...], ...] = tuple(
    tuple(range(row * LEDS_PER_ROW, (row + 1) * LEDS_PER_ROW)) for row in range(NUM_ROWS)
)

LOOP_INDICES: tuple[int, ...] = tuple(
    range(NUM_ROWS * LEDS_PER_ROW, NUM_ROWS * LEDS_PER_ROW + LOOP_LEDS)
)


@dataclass(frozen=True)
class RGB:
    """An 8-bit-per-channel colour."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"channel {name} must be an integer in 0..255, got {value!r}")


BLACK = RGB(0, 0, 0)
ORANGE = RGB(255, 120, 0)


def lerp_yellow_orange(t: float) -> RGB:
    """Blend from yellow (t=0) to orange (t=1)."""
    return RGB(255, int(200.0 * (1.0 - t) + 120.0 * t), 0)