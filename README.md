# drlsim

`drlsim` simulates a daytime running light (DRL) controller that drives two
headlights, left and right. Each headlight has:

- three rows of ten addressable LEDs (indices 0–29),
- a loop of 31 addressable LEDs (indices 30–60),
- one analog, dimmable LED (brightness 0–255).

With the turn signal off, the rows show a slow yellow-to-orange diagonal wave.
A yellow-to-orange sweep runs along the loop, and the analog LED rises and
falls with it. With the turn signal on, the rows of that side show an orange
sweep that fills and then empties. While both signals are off, the two sides
share the same pattern time, so their animations stay in step. The controller
runs in fixed ticks of 20 ms.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from drlsim.display import LedDisplay, Side
from drlsim.controller import Controller

display = LedDisplay()
controller = Controller(display)

# One 20 ms tick with the left turn signal on and the right one off.
frame = controller.step(True, False)
print(frame.time_ms, frame.left_analog, frame.right_analog)

print(display.leds(Side.LEFT)[:10])   # the first row of the left side
print(display.analog(Side.RIGHT))     # analog LED brightness, 0-255

# The bytes that would go out on the wire for one side.
stream = display.encode_side(Side.LEFT)
```

`Controller.step` returns a `Frame` holding the tick's time and the LED colours
and analog levels of both sides. `Controller.run` takes an iterable of
`(left_signal, right_signal)` pairs and yields one `Frame` per pair.
`Controller()` with no argument creates its own `LedDisplay`.

### Modules

- `drlsim.layout`: the LED index layout (`ROW_INDICES`, `LOOP_INDICES`), the
  frozen `RGB` colour type, which rejects channels outside 0–255, and
  `lerp_yellow_orange(t)`, which blends from yellow at `t=0` to orange at `t=1`.
- `drlsim.display`: `Side` (`LEFT`, `RIGHT`) and `LedDisplay`, the frame buffer
  for both sides. Setting an LED on an unknown side or index is ignored;
  brightness outside 0–255 raises `ValueError`. `encode_side` produces the
  SK6812 stream for one side: for each LED the bytes G, R, B and a zero white
  byte, each data bit expanded to three SPI bytes (`1` → `FF FF 00`,
  `0` → `FF 00 00`, see `spi_expand_bit` and `encode_byte`), followed by 48 zero
  bytes as the reset gap.
- `drlsim.patterns`: `PatternMode` and `PatternEngine`, which draws the
  single-side patterns (`pattern_rows`, `pattern_loop_analog`,
  `pattern_turn_signal`, `reset_patterns`) onto the left side of a display.
- `drlsim.headlight`: `Headlight`, which holds one side's LED buffer, analog
  level, mode and timing (`reset`, `update`, `show`), and
  `sync_pattern_time`, which brings two headlights to the later of their
  pattern times.
- `drlsim.controller`: `Controller`, `Frame` and the command-line entry point.

## Command line

```
drlsim
```

runs the simulation for 50 ticks and prints one line per tick with the time,
each side's mode (`NORMAL` or `TURN_SIGNAL`) and its analog brightness.

Options:

- `--steps N`: number of 20 ms ticks (default 50; negative values are refused).
- `--left START-END`: turn the left signal on for steps `START` up to, but not
  including, `END`. A single number `START` means that one step. May be given
  more than once.
- `--right START-END`: the same for the right signal.
- `--spi-out FILE`: after the run, write the final frame's SPI stream to
  `FILE`, left side first, then right.

For example:

```
drlsim --steps 100 --left 10-60 --spi-out frame.bin
```

## What it does not do

`drlsim` works entirely in memory. It does not read real turn-signal inputs,
drive an SPI bus or set a PWM output; the turn signals are whatever the caller
or the command-line options supply, and the LED output is only the buffered
frame and the byte stream from `LedDisplay.encode_side`.