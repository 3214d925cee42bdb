"""LED strip model and the light effects run by the fountain, hallway and mirror nodes."""

from __future__ import annotations

import random
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Protocol

from ledremote.message import EffectMessage, effect_enabled

FOUNTAIN_LEDS = 800
HALLWAY_LEDS = 1533
MIRROR_LEDS = 106


class RandomSource(Protocol):
    """Anything that can pick an integer in ``range(stop)``."""

    def randrange(self, stop: int, /) -> int: ...


def _check_byte(value: int, what: str) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"{what} must be in 0..255, got {value}")


@dataclass(frozen=True)
class Color:
    """An RGB colour with 8-bit channels."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        _check_byte(self.r, "red")
        _check_byte(self.g, "green")
        _check_byte(self.b, "blue")

    def faded(self, amount: int) -> Color:
        """Return this colour dimmed toward black by ``amount`` / 256."""
        _check_byte(amount, "fade amount")
        scale = 256 - amount
        return Color(self.r * scale >> 8, self.g * scale >> 8, self.b * scale >> 8)


BLACK = Color(0x00, 0x00, 0x00)
WHITE = Color(0xFF, 0xFF, 0xFF)
RED = Color(0xFF, 0x00, 0x00)
GREEN = Color(0x00, 0x80, 0x00)
BLUE = Color(0x00, 0x00, 0xFF)
ORANGE_RED = Color(0xFF, 0x45, 0x00)
FOUNTAIN_ORANGE = Color(0xFF, 0x5E, 0x00)


class LedStrip:
    """A fixed-length strip of addressable RGB pixels, all black at first."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError(f"strip size must be positive, got {size}")
        self._pixels = [BLACK] * size

    def __len__(self) -> int:
        return len(self._pixels)

    def __iter__(self) -> Iterator[Color]:
        return iter(self._pixels)

    def __getitem__(self, index: int) -> Color:
        self._check_index(index)
        return self._pixels[index]

    def __setitem__(self, index: int, color: Color) -> None:
        self.set_pixel(index, color)

    @property
    def pixels(self) -> tuple[Color, ...]:
        """A snapshot of every pixel's colour."""
        return tuple(self._pixels)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._pixels):
            raise IndexError(f"pixel {index} outside strip of {len(self._pixels)}")

    def fade_to_black(self, index: int, amount: int) -> None:
        """Dim one pixel toward black."""
        self._check_index(index)
        self._pixels[index] = self._pixels[index].faded(amount)

    def set_pixel(self, index: int, color: Color) -> None:
        """Set one pixel's colour."""
        self._check_index(index)
        self._pixels[index] = color

    def fill(self, color: Color) -> None:
        """Set every pixel to ``color``."""
        self._pixels = [color] * len(self._pixels)

    def clear(self) -> None:
        """Turn every pixel off."""
        self.fill(BLACK)


def _resolve_rng(rng: RandomSource | None) -> RandomSource:
    return rng if rng is not None else random.Random()


def _fade_trail(
    strip: LedStrip, trail_decay: int, random_decay: bool, rng: RandomSource
) -> None:
    for index in range(len(strip)):
        if not random_decay or rng.randrange(10) > 5:
            strip.fade_to_black(index, trail_decay)


def meteor_rain_forward(
    strip: LedStrip,
    color: Color,
    meteor_size: int,
    trail_decay: int,
    random_decay: bool = False,
    rng: RandomSource | None = None,
) -> Iterator[int]:
    """Run a meteor from the first pixel to the last, yielding its head per frame."""
    source = _resolve_rng(rng)
    strip.fill(BLACK)
    size = len(strip)
    for head in range(size):
        _fade_trail(strip, trail_decay, random_decay, source)
        for position in range(head, min(head + meteor_size, size)):
            strip.set_pixel(position, color)
        yield head


def meteor_rain_reverse(
    strip: LedStrip,
    color: Color,
    meteor_size: int,
    trail_decay: int,
    random_decay: bool = False,
    step: int = 1,
    rng: RandomSource | None = None,
) -> Iterator[int]:
    """Run a meteor from the last pixel backwards, jumping ``step`` pixels per frame."""
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    return _reverse_frames(
        strip, color, meteor_size, trail_decay, random_decay, step, _resolve_rng(rng)
    )


def _reverse_frames(
    strip: LedStrip,
    color: Color,
    meteor_size: int,
    trail_decay: int,
    random_decay: bool,
    step: int,
    rng: RandomSource,
) -> Iterator[int]:
    strip.fill(BLACK)
    for head in range(len(strip) - 1, -1, -step):
        _fade_trail(strip, trail_decay, random_decay, rng)
        for position in range(max(head - meteor_size + 1, 0), head + 1):
            strip.set_pixel(position, color)
        yield head


def fountain_cycle(
    strip: LedStrip, message: EffectMessage, rng: RandomSource | None = None
) -> Iterator[int]:
    """One pass of the fountain effect: orange when switched on, white otherwise."""
    color = FOUNTAIN_ORANGE if effect_enabled(message.count_two) else WHITE
    yield from meteor_rain_forward(strip, color, 1, 84, True, rng)
    strip.clear()


def hallway_cycle(
    strip: LedStrip, message: EffectMessage, rng: RandomSource | None = None
) -> Iterator[int]:
    """One pass of the hallway effect, which only runs while switched on."""
    if effect_enabled(message.count_three):
        yield from meteor_rain_reverse(strip, WHITE, 10, 150, True, 10, rng)
    strip.clear()


def mirror_frame(strip: LedStrip, message: EffectMessage) -> None:
    """Light the mirror fully white when switched on, otherwise turn it off."""
    strip.fill(WHITE if effect_enabled(message.count_four) else BLACK)