"""Two-sided LED frame buffer and its SK6812 SPI wire encoding."""

from __future__ import annotations

from enum import IntEnum

from .layout import BLACK, RGB, TOTAL_ADDRESSABLE_LEDS

LED_BUFFER_SIZE = TOTAL_ADDRESSABLE_LEDS
RESET_BYTES = 48


class Side(IntEnum):
    LEFT = 0
    RIGHT = 1


def _check_byte(value: int, what: str) -> int:
    if not isinstance(value, int) or not 0 <= value <= 255:
        raise ValueError(f"{what} must be an integer in 0..255, got {value!r}")
    return value


def _as_side(side: int) -> Side | None:
    try:
        return Side(side)
    except ValueError:
        return None


def spi_expand_bit(bit: int) -> int:
    """Expand one LED data bit into three SPI bits: 1 -> 110, 0 -> 100."""
    return 0b110 if bit else 0b100


def encode_byte(value: int) -> bytes:
    """Encode one data byte as 24 SPI bytes, most significant bit first."""
    _check_byte(value, "value")
    return bytes(
        0xFF if (spi_expand_bit((value >> bit) & 1) >> sub) & 1 else 0x00
        for bit in range(7, -1, -1)
        for sub in range(2, -1, -1)
    )


class LedDisplay:
    """Frame buffers for both headlight sides plus their analog LED levels."""

    def __init__(self) -> None:
        self._leds: dict[Side, list[RGB]] = {side: [BLACK] * LED_BUFFER_SIZE for side in Side}
        self._analog: dict[Side, int] = {side: 0 for side in Side}

    def set_led_color(self, idx: int, color: RGB) -> None:
        """Set a left-side LED; out-of-range indices are ignored."""
        self.set_led_color_side(Side.LEFT, idx, color)

    def set_led_color_side(self, side: int, idx: int, color: RGB) -> None:
        """Set an LED on a side; unknown sides and indices are ignored."""
        which = _as_side(side)
        if which is not None and 0 <= idx < LED_BUFFER_SIZE:
            self._leds[which][idx] = color

    def set_analog_led(self, brightness: int) -> None:
        self.set_analog_led_side(Side.LEFT, brightness)

    def set_analog_led_side(self, side: int, brightness: int) -> None:
        _check_byte(brightness, "brightness")
        which = _as_side(side)
        if which is not None:
            self._analog[which] = brightness

    def leds(self, side: int) -> tuple[RGB, ...]:
        return tuple(self._leds[Side(side)])

    def analog(self, side: int) -> int:
        return self._analog[Side(side)]

    def clear(self) -> None:
        """Turn every LED and both analog outputs off."""
        for side in Side:
            self._leds[side] = [BLACK] * LED_BUFFER_SIZE
            self._analog[side] = 0

    def encode_side(self, side: int) -> bytes:
        """SPI stream for one side: GRBW per LED, then the reset gap."""
        frame = b"".join(
            encode_byte(channel)
            for led in self._leds[Side(side)]
            for channel in (led.g, led.r, led.b, 0)
        )
        return frame + bytes(RESET_BYTES)