"""Tests for packed colors and gradients."""

import pytest

from sortreel.color import (
    COLOR_PALETTES,
    WHITE,
    Color,
    Gradient,
    get_palette,
    list_color_palettes,
)

BLUE = Color(0x0000FF)
GREEN = Color(0x70AF00)
RED = Color(0xFF0000)


class TestColor:
    """Channel decomposition and blending."""

    def test_to_rgb_splits_channels(self):
        assert GREEN.to_rgb() == (0x70, 0xAF, 0x00)
        assert Color(0x1F1F1F).to_rgb() == (31, 31, 31)

    def test_from_rgb_inverts_to_rgb(self):
        assert Color.from_rgb(112, 175, 0) == GREEN

    def test_hex_roundtrip(self):
        assert Color.from_hex("#70af00") == GREEN
        assert Color.from_hex("FF0000") == RED
        assert GREEN.hex == "#70af00"

    @pytest.mark.parametrize("bad", ["#fff", "#12345g", "", "0x1234", "1_2345", "+fffff", "-fffff"])
    def test_from_hex_rejects_malformed(self, bad):
        with pytest.raises(ValueError):
            Color.from_hex(bad)

    def test_lerp_endpoints(self):
        assert BLUE.lerp(RED, 0.0) == BLUE
        assert BLUE.lerp(RED, 1.0) == RED

    def test_lerp_rounds_half_up(self):
        # 255 * 0.5 = 127.5 per channel
        assert BLUE.lerp(RED, 0.5) == Color.from_rgb(128, 0, 128)

    def test_lerp_toward_white(self):
        base = Color.from_rgb(100, 0, 50)
        assert base.lerp(WHITE, 0.2).to_rgb() == (131, 51, 91)

    def test_lerp_does_not_clamp_factor(self):
        """Factors past 1.0 extrapolate rather than being clamped."""
        low = Color.from_rgb(0, 0, 100)
        high = Color.from_rgb(0, 0, 200)
        assert low.lerp(high, 1.5).to_rgb() == (0, 0, 250)


class TestGradient:
    """Gradient.sample clamping and interpolation."""

    def test_endpoints(self):
        g = Gradient((BLUE, GREEN, RED))
        assert g.sample(0.0) == BLUE
        assert g.sample(1.0) == RED

    @pytest.mark.parametrize("v", [-5.0, -0.001])
    def test_below_zero_clamps_to_first(self, v):
        assert Gradient((BLUE, GREEN, RED)).sample(v) == BLUE

    @pytest.mark.parametrize("v", [1.0, 1.5, 100.0])
    def test_at_or_above_one_clamps_to_last(self, v):
        assert Gradient((BLUE, GREEN, RED)).sample(v) == RED

    @pytest.mark.parametrize("v", [-1.0, 0.0, 0.3, 0.999, 1.0, 7.0])
    def test_single_stop_is_constant(self, v):
        assert Gradient((GREEN,)).sample(v) == GREEN

    def test_two_stop_midpoint_is_rounded_average(self):
        a = Color(0x102030)
        b = Color(0x305071)
        # (0x10+0x30)/2, (0x20+0x50)/2, (0x30+0x71)/2 = 32, 56, 80.5
        assert Gradient((a, b)).sample(0.5) == Color.from_rgb(32, 56, 81)

    def test_three_stop_quarter_blends_first_segment(self):
        # idx = 2 * 0.25 = 0.5, halfway between blue and green
        sampled = Gradient((BLUE, GREEN, RED)).sample(0.25)
        assert sampled.to_rgb() == (56, 88, 128)

    def test_exact_stop_position(self):
        assert Gradient((BLUE, GREEN, RED)).sample(0.5) == GREEN

    def test_empty_gradient_rejected(self):
        with pytest.raises(ValueError):
            Gradient(())

    def test_list_stops_are_frozen(self):
        g = Gradient([BLUE, RED])
        assert isinstance(g.stops, tuple)


class TestPalettes:
    """Named palette table."""

    def test_classic_matches_blue_green_red(self):
        assert get_palette("Classic").stops == (BLUE, GREEN, RED)

    def test_every_palette_builds(self):
        assert set(list_color_palettes()) == set(COLOR_PALETTES)
        for name in list_color_palettes():
            assert len(get_palette(name).stops) >= 1

    def test_unknown_palette(self):
        with pytest.raises(ValueError, match="Unknown palette"):
            get_palette("Nope")
