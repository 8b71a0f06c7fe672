# Copyright (c) 2026 Tonewheel
# SPDX-License-Identifier: MIT

"""Tests for tonal gradients (stepped and smooth)."""

import logging

import pytest

from tonewheel.errors import InvalidColorFormat, InvalidParameter
from tonewheel.schema import GradientKind, GradientStop
from tonewheel.generate.colorspace import hex_to_oklch
from tonewheel.generate.gamut import max_chroma
from tonewheel.generate.gradient import (
    GradientConfig,
    generate_combined_gradient,
    generate_gradient,
    generate_saturation_gradient,
    generate_value_gradient,
    gradient_sampler,
    gradient_stops,
    sample_gradient,
)


SOURCE = "#3b82f6"
SOURCES = [SOURCE, "#ff0000", "#1b4d2a", "#f5e663", "#808080", "#111111", "#fdfdfd"]

STEPPED = {
    "value": generate_value_gradient,
    "saturation": generate_saturation_gradient,
    "both": generate_combined_gradient,
}


def _hue_distance(a, b):
    d = abs(a - b) % 360.0
    return min(d, 360.0 - d)


class TestSteppedContract:

    @pytest.mark.parametrize("kind", list(STEPPED))
    @pytest.mark.parametrize("steps", [2, 3, 5, 10])
    def test_length(self, kind, steps):
        gradient = STEPPED[kind](SOURCE, steps)
        assert len(gradient) == steps
        assert all(len(h) == 7 and h.startswith("#") for h in gradient)

    @pytest.mark.parametrize("kind", list(STEPPED))
    @pytest.mark.parametrize("steps", [1, 0, -4])
    def test_too_few_steps_rejected(self, kind, steps):
        with pytest.raises(InvalidParameter):
            STEPPED[kind](SOURCE, steps)

    def test_non_integer_steps_rejected(self):
        with pytest.raises(InvalidParameter):
            generate_value_gradient(SOURCE, 3.0)

    def test_invalid_color_propagates(self):
        with pytest.raises(InvalidColorFormat):
            generate_saturation_gradient("#zzzzzz", 5)

    @pytest.mark.parametrize("kind", list(STEPPED))
    def test_gamut_containment(self, kind):
        for source in SOURCES:
            for hex_color in STEPPED[kind](source, 7):
                c = hex_to_oklch(hex_color)
                if c.H is not None:
                    assert c.C <= max_chroma(c.L, c.H) + 1e-3

    def test_dispatch_matches_named_functions(self):
        for kind, fn in STEPPED.items():
            assert generate_gradient(SOURCE, kind, 6) == fn(SOURCE, 6)


class TestValueGradient:

    @pytest.mark.parametrize("source", SOURCES)
    def test_lightness_non_decreasing(self, source):
        lightness = [hex_to_oklch(h).L for h in generate_value_gradient(source, 8)]
        for a, b in zip(lightness, lightness[1:]):
            assert b >= a - 1e-9

    def test_band_centred_on_source(self):
        base = hex_to_oklch(SOURCE)
        gradient = generate_value_gradient(SOURCE, 5)
        assert hex_to_oklch(gradient[0]).L == pytest.approx(base.L - 0.3, abs=0.01)
        assert hex_to_oklch(gradient[-1]).L == pytest.approx(base.L + 0.3, abs=0.01)
        assert hex_to_oklch(gradient[2]).L == pytest.approx(base.L, abs=0.01)

    def test_band_clamped_near_white(self):
        gradient = generate_value_gradient("#fdfdfd", 5)
        assert hex_to_oklch(gradient[-1]).L <= 0.985
        assert hex_to_oklch(gradient[0]).L >= 0.6

    def test_band_clamped_near_black(self):
        gradient = generate_value_gradient("#000000", 5)
        assert hex_to_oklch(gradient[0]).L == pytest.approx(0.1, abs=0.01)

    def test_hue_constant(self):
        base = hex_to_oklch(SOURCE)
        for hex_color in generate_value_gradient(SOURCE, 5):
            assert _hue_distance(hex_to_oklch(hex_color).H, base.H) < 3.0

    def test_midpoint_keeps_source_chroma(self):
        base = hex_to_oklch(SOURCE)
        mid = hex_to_oklch(generate_value_gradient(SOURCE, 5)[2])
        assert mid.C == pytest.approx(base.C, abs=0.005)


class TestSaturationGradient:

    def test_scenario_blue_five(self):
        base = hex_to_oklch(SOURCE)
        decoded = [hex_to_oklch(h) for h in generate_saturation_gradient(SOURCE, 5)]

        assert decoded[0].C == pytest.approx(0.1 * base.C, abs=0.005)
        assert decoded[-1].C == pytest.approx(max_chroma(base.L, base.H), abs=0.005)
        for c in decoded:
            assert c.L == pytest.approx(base.L, abs=0.01)
        for c in decoded[1:]:
            assert _hue_distance(c.H, base.H) < 3.0

    def test_chroma_non_decreasing(self):
        chroma = [hex_to_oklch(h).C for h in generate_saturation_gradient("#1b4d2a", 6)]
        for a, b in zip(chroma, chroma[1:]):
            assert b >= a - 0.003

    def test_minimum_span_for_muted_source(self):
        """A nearly gray source still sweeps at least 0.15 of chroma."""
        decoded = [hex_to_oklch(h) for h in generate_saturation_gradient("#8a8f96", 5)]
        assert decoded[-1].C - decoded[0].C >= 0.14

    def test_gray_source_stays_gray(self):
        for hex_color in generate_saturation_gradient("#808080", 5):
            assert hex_to_oklch(hex_color).C < 0.005


class TestCombinedGradient:

    def test_lightness_and_chroma_rise_together(self):
        decoded = [hex_to_oklch(h) for h in generate_combined_gradient(SOURCE, 5)]
        base = hex_to_oklch(SOURCE)
        assert decoded[0].L == pytest.approx(base.L - 0.25, abs=0.01)
        assert decoded[-1].L == pytest.approx(base.L + 0.25, abs=0.01)
        assert decoded[0].C == pytest.approx(0.2 * base.C, abs=0.005)

    def test_lightness_clamped(self):
        for hex_color in generate_combined_gradient("#fdfdfd", 5):
            assert hex_to_oklch(hex_color).L <= 0.955


class TestSmoothGradient:

    @pytest.mark.parametrize("kind", list(STEPPED))
    @pytest.mark.parametrize("steps", [2, 3, 5, 7, 10])
    def test_sampler_matches_stepper(self, kind, steps):
        for source in (SOURCE, "#ff0000", "#808080"):
            stepped = STEPPED[kind](source, steps)
            for i in range(steps):
                assert sample_gradient(source, i / (steps - 1), kind) == stepped[i]

    def test_sampler_function_is_pure(self):
        sample = gradient_sampler(SOURCE, "both")
        first = [sample(p / 10) for p in range(11)]
        second = [sample(p / 10) for p in reversed(range(11))]
        assert first == list(reversed(second))

    def test_position_clamped(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="tonewheel"):
            assert sample_gradient(SOURCE, -0.5, "value") == sample_gradient(SOURCE, 0.0, "value")
            assert sample_gradient(SOURCE, 1.5, "value") == sample_gradient(SOURCE, 1.0, "value")
        assert "clamped" in caplog.text

    def test_nan_position_rejected(self):
        with pytest.raises(InvalidParameter):
            sample_gradient(SOURCE, float("nan"), "value")

    def test_unknown_kind_rejected(self):
        with pytest.raises(InvalidParameter):
            sample_gradient(SOURCE, 0.5, "hue")

    def test_kind_enum_accepted(self):
        assert sample_gradient(SOURCE, 0.3, GradientKind.SATURATION) == \
            sample_gradient(SOURCE, 0.3, "saturation")


class TestGradientStops:

    def test_default_resolution(self):
        stops = gradient_stops(SOURCE, "value")
        assert len(stops) == 101
        assert stops[0].position == 0.0
        assert stops[-1].position == 1.0
        assert all(isinstance(s, GradientStop) for s in stops)

    def test_stops_match_sampler(self):
        sample = gradient_sampler(SOURCE, "saturation")
        for stop in gradient_stops(SOURCE, "saturation", 20):
            assert stop.hex == sample(stop.position)

    def test_config_resolution(self):
        stops = gradient_stops(SOURCE, "both", config=GradientConfig(default_resolution=4))
        assert [s.position for s in stops] == [0.0, 0.25, 0.5, 0.75, 1.0]

    def test_bad_resolution_rejected(self):
        with pytest.raises(InvalidParameter):
            gradient_stops(SOURCE, "value", 0)


class TestGradientConfig:

    def test_custom_value_band(self):
        base = hex_to_oklch(SOURCE)
        cfg = GradientConfig(value_band=0.1)
        gradient = generate_value_gradient(SOURCE, 3, config=cfg)
        assert hex_to_oklch(gradient[0]).L == pytest.approx(base.L - 0.1, abs=0.01)
        assert hex_to_oklch(gradient[-1]).L == pytest.approx(base.L + 0.1, abs=0.01)

    def test_config_is_frozen(self):
        with pytest.raises(AttributeError):
            GradientConfig().value_band = 0.5
