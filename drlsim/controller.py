"""Main control loop driving both headlights from turn-signal inputs."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from .display import LedDisplay, Side
from .headlight import Headlight, sync_pattern_time
from .layout import RGB

TICK_MS = 20
_UINT32_MASK = 0xFFFFFFFF


@dataclass(frozen=True)
class Frame:
    """What both sides show after one control step."""

    time_ms: int
    left: tuple[RGB, ...]
    right: tuple[RGB, ...]
    left_analog: int
    right_analog: int


class Controller:
    """Two headlights sharing a display, advanced in fixed ticks."""

    def __init__(self, display: LedDisplay | None = None) -> None:
        self.display = display if display is not None else LedDisplay()
        self.left = Headlight()
        self.right = Headlight()
        self.time_ms = 0

    def step(self, left_signal: bool, right_signal: bool) -> Frame:
        """Run one tick of the loop and return the frame it produced."""
        if not left_signal and not right_signal:
            sync_pattern_time(self.left, self.right)
        if not left_signal:
            self.left.pattern_time_ms = (self.left.pattern_time_ms + TICK_MS) & _UINT32_MASK
        if not right_signal:
            self.right.pattern_time_ms = (self.right.pattern_time_ms + TICK_MS) & _UINT32_MASK
        self.left.update(self.right, self.time_ms, left_signal)
        self.right.update(self.left, self.time_ms, right_signal)
        self.left.show(self.display, Side.LEFT)
        self.right.show(self.display, Side.RIGHT)
        frame = Frame(
            time_ms=self.time_ms,
            left=self.display.leds(Side.LEFT),
            right=self.display.leds(Side.RIGHT),
            left_analog=self.display.analog(Side.LEFT),
            right_analog=self.display.analog(Side.RIGHT),
        )
        self.time_ms = (self.time_ms + TICK_MS) & _UINT32_MASK
        return frame

    def run(self, signals: Iterable[tuple[bool, bool]]) -> Iterator[Frame]:
        """Step once per (left, right) signal pair, yielding each frame."""
        for left_signal, right_signal in signals:
            yield self.step(bool(left_signal), bool(right_signal))


def _parse_span(text: str) -> range:
    start, sep, end = text.partition("-")
    try:
        first = int(start)
        last = int(end) if sep else first + 1
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected START-END, got {text!r}") from None
    if first < 0 or last < first:
        raise argparse.ArgumentTypeError(f"invalid step span {text!r}")
    return range(first, last)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="drlsim", description="Simulate the daytime running light controller."
    )
    parser.add_argument("--steps", type=int, default=50, help="number of 20 ms ticks")
    parser.add_argument(
        "--left", type=_parse_span, action="append", default=[],
        help="step span START-END with the left turn signal on (repeatable)",
    )
    parser.add_argument(
        "--right", type=_parse_span, action="append", default=[],
        help="step span START-END with the right turn signal on (repeatable)",
    )
    parser.add_argument(
        "--spi-out", type=Path, help="write the final frame's SPI stream (left then right)"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    if args.steps < 0:
        print("drlsim: --steps must not be negative", file=sys.stderr)
        return 2
    signals = (
        (any(step in span for span in args.left), any(step in span for span in args.right))
        for step in range(args.steps)
    )
    controller = Controller()
    for frame, (left_on, right_on) in zip(
        controller.run(signals),
        ((controller.left, controller.right) for _ in range(args.steps)),
    ):
        print(
            f"{frame.time_ms:>8} ms  "
            f"left={left_on.mode.name:<11} analog={frame.left_analog:>3}  "
            f"right={right_on.mode.name:<11} analog={frame.right_analog:>3}"
        )
    if args.spi_out is not None:
        stream = controller.display.encode_side(Side.LEFT) + controller.display.encode_side(
            Side.RIGHT
        )
        args.spi_out.write_bytes(stream)
    return 0


if __name__ == "__main__":
    sys.exit(main())