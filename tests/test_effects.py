import random

import pytest

from ledremote.effects import (
    BLACK,
    BLUE,
    FOUNTAIN_ORANGE,
    GREEN,
    ORANGE_RED,
    WHITE,
    Color,
    LedStrip,
    fountain_cycle,
    hallway_cycle,
    meteor_rain_forward,
    meteor_rain_reverse,
    mirror_frame,
)
from ledremote.message import EffectMessage


class FixedRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, stop):
        return self.value


def test_named_colors_match_palette():
    assert FOUNTAIN_ORANGE == Color(0xFF, 0x5E, 0x00)
    assert WHITE == Color(0xFF, 0xFF, 0xFF)
    assert GREEN == Color(0x00, 0x80, 0x00)
    assert BLUE == Color(0x00, 0x00, 0xFF)
    assert ORANGE_RED == Color(0xFF, 0x45, 0x00)


@pytest.mark.parametrize("channels", [(256, 0, 0), (0, -1, 0), (0, 0, 300)])
def test_color_rejects_out_of_range(channels):
    with pytest.raises(ValueError):
        Color(*channels)


def test_faded_by_zero_keeps_color():
    assert WHITE.faded(0) == WHITE


def test_faded_by_full_amount_is_black():
    assert WHITE.faded(255) == BLACK


def test_fading_never_brightens():
    color = Color(200, 100, 50)
    for amount in (1, 40, 84, 150, 254):
        faded = color.faded(amount)
        assert faded.r <= color.r and faded.g <= color.g and faded.b <= color.b


def test_faded_rejects_bad_amount():
    with pytest.raises(ValueError):
        WHITE.faded(256)


def test_strip_starts_black():
    strip = LedStrip(5)
    assert len(strip) == 5
    assert all(pixel == BLACK for pixel in strip)


def test_strip_rejects_empty_size():
    with pytest.raises(ValueError):
        LedStrip(0)


def test_set_pixel_and_read_back():
    strip = LedStrip(4)
    strip.set_pixel(2, WHITE)
    assert strip[2] == WHITE
    assert strip.pixels == (BLACK, BLACK, WHITE, BLACK)


@pytest.mark.parametrize("index", [-1, 4])
def test_set_pixel_out_of_range(index):
    strip = LedStrip(4)
    with pytest.raises(IndexError):
        strip.set_pixel(index, WHITE)


def test_fill_and_clear():
    strip = LedStrip(3)
    strip.fill(BLUE)
    assert strip.pixels == (BLUE,) * 3
    strip.clear()
    assert strip.pixels == (BLACK,) * 3


def test_fade_to_black_matches_color_fade():
    strip = LedStrip(2)
    strip.set_pixel(0, WHITE)
    strip.fade_to_black(0, 84)
    assert strip[0] == WHITE.faded(84)
    assert strip[1] == BLACK


def test_forward_meteor_visits_every_pixel():
    strip = LedStrip(6)
    heads = list(meteor_rain_forward(strip, WHITE, 1, 84))
    assert heads == list(range(6))


def test_forward_meteor_head_lit_and_ahead_dark():
    strip = LedStrip(6)
    for head in meteor_rain_forward(strip, WHITE, 2, 84):
        assert strip[head] == WHITE
        assert all(pixel == BLACK for pixel in strip.pixels[head + 2 :])


def test_forward_meteor_trail_fades():
    strip = LedStrip(5)
    frames = meteor_rain_forward(strip, WHITE, 1, 84)
    next(frames)
    next(frames)
    assert strip[1] == WHITE
    assert strip[0] == WHITE.faded(84)


def test_random_decay_skips_fade_on_low_roll():
    strip = LedStrip(5)
    list(meteor_rain_forward(strip, WHITE, 1, 84, True, FixedRng(0)))
    assert strip.pixels == (WHITE,) * 5


def test_random_decay_fades_on_high_roll():
    strip = LedStrip(5)
    frames = meteor_rain_forward(strip, WHITE, 1, 84, True, FixedRng(9))
    next(frames)
    next(frames)
    assert strip[0] == WHITE.faded(84)


def test_forward_meteor_clears_first():
    strip = LedStrip(4)
    strip.fill(BLUE)
    frames = meteor_rain_forward(strip, WHITE, 1, 255)
    next(frames)
    assert strip.pixels[1:] == (BLACK,) * 3


def test_reverse_meteor_heads_step_backwards():
    strip = LedStrip(25)
    heads = list(meteor_rain_reverse(strip, WHITE, 10, 150, False, 10))
    assert heads == list(range(24, -1, -10))


def test_reverse_meteor_draws_behind_head():
    strip = LedStrip(25)
    frames = meteor_rain_reverse(strip, WHITE, 3, 150, False, 10)
    head = next(frames)
    assert all(strip[position] == WHITE for position in range(head - 2, head + 1))
    assert strip[head - 3] == BLACK


@pytest.mark.parametrize("step", [0, -1])
def test_reverse_meteor_rejects_bad_step(step):
    with pytest.raises(ValueError):
        meteor_rain_reverse(LedStrip(5), WHITE, 1, 10, False, step)


def test_fountain_uses_orange_when_enabled():
    strip = LedStrip(8)
    frames = fountain_cycle(strip, EffectMessage(count_two=1.0), FixedRng(0))
    next(frames)
    assert strip[0] == FOUNTAIN_ORANGE


def test_fountain_uses_white_when_disabled():
    strip = LedStrip(8)
    frames = fountain_cycle(strip, EffectMessage(count_two=2.0), FixedRng(0))
    next(frames)
    assert strip[0] == WHITE


def test_fountain_ends_cleared():
    strip = LedStrip(8)
    heads = list(fountain_cycle(strip, EffectMessage(count_two=1.0), random.Random(1)))
    assert heads == list(range(8))
    assert strip.pixels == (BLACK,) * 8


def test_hallway_runs_when_enabled():
    strip = LedStrip(30)
    heads = list(hallway_cycle(strip, EffectMessage(count_three=1.0), random.Random(2)))
    assert heads == list(range(29, -1, -10))
    assert strip.pixels == (BLACK,) * 30


def test_hallway_idle_when_disabled():
    strip = LedStrip(30)
    strip.fill(WHITE)
    heads = list(hallway_cycle(strip, EffectMessage(count_three=2.0)))
    assert heads == []
    assert strip.pixels == (BLACK,) * 30


def test_mirror_on_and_off():
    strip = LedStrip(6)
    mirror_frame(strip, EffectMessage(count_four=1.0))
    assert strip.pixels == (WHITE,) * 6
    mirror_frame(strip, EffectMessage(count_four=2.0))
    assert strip.pixels == (BLACK,) * 6