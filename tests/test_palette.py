"""
Tests for luminance palettes, Bayer dithering and phase color ramps.
"""

import pytest

from phosphor.palette import AsciiLuminancePalette, BayerDither, CognitiveColorRamp, clamp
from phosphor.signal import CognitivePhase


class TestClamp:

    @pytest.mark.parametrize("value, expected", [(-1.0, 0.0), (0.5, 0.5), (2.0, 1.0)])
    def test_clamp(self, value, expected):
        assert clamp(value, 0.0, 1.0) == expected


class TestBayerDither:

    def test_origin_threshold_is_zero(self):
        assert BayerDither.threshold(0, 0) == 0.0

    def test_thresholds_cover_sixteen_levels(self):
        values = {BayerDither.threshold(x, y) for x in range(4) for y in range(4)}
        assert values == {i / 16.0 for i in range(16)}

    def test_matrix_tiles(self):
        assert BayerDither.threshold(5, 6) == BayerDither.threshold(1, 2)
        assert BayerDither.threshold(12, 8) == BayerDither.threshold(0, 0)


class TestAsciiLuminancePalette:

    def test_extremes(self):
        palette = AsciiLuminancePalette.STANDARD
        assert palette.char_for_luminance(0.0) == " "
        assert palette.char_for_luminance(1.0) == "█"

    def test_out_of_range_is_clamped(self):
        palette = AsciiLuminancePalette.STANDARD
        assert palette.char_for_luminance(-3.0) == " "
        assert palette.char_for_luminance(7.0) == "█"

    def test_brighter_never_picks_darker_glyph(self):
        palette = AsciiLuminancePalette.STANDARD
        indices = [
            palette.characters.index(palette.char_for_luminance(i / 50.0))
            for i in range(51)
        ]
        assert indices == sorted(indices)

    def test_dither_rounds_up_below_fraction(self):
        """0.5 on a 14-glyph ramp lands between glyphs 6 and 7."""
        palette = AsciiLuminancePalette.STANDARD
        assert palette.char_for_luminance_dithered(0.5, 0, 0) == palette.characters[7]
        # threshold(2, 1) == 14/16, above the 0.5 fraction
        assert palette.char_for_luminance_dithered(0.5, 2, 1) == palette.characters[6]

    def test_dither_keeps_full_brightness(self):
        palette = AsciiLuminancePalette.EXECUTE
        for x in range(4):
            for y in range(4):
                assert palette.char_for_luminance_dithered(1.0, x, y) == "⚡"

    def test_single_glyph_palette(self):
        palette = AsciiLuminancePalette("#", "solid")
        assert palette.char_for_luminance(0.3) == "#"
        assert palette.char_for_luminance_dithered(0.3, 1, 1) == "#"


class TestCognitiveColorRamp:

    @pytest.mark.parametrize("phase", list(CognitivePhase))
    def test_every_phase_has_a_ramp(self, phase):
        ramp = CognitiveColorRamp.for_phase(phase)
        assert len(ramp.color_stops) >= 2

    @pytest.mark.parametrize("phase", [
        CognitivePhase.PERCEIVE,
        CognitivePhase.RECALL,
        CognitivePhase.PLAN,
        CognitivePhase.EXECUTE,
        CognitivePhase.EVALUATE,
    ])
    def test_named_phases_get_their_own_ramp(self, phase):
        assert CognitiveColorRamp.for_phase(phase).phase == phase

    def test_loop_and_none_are_neutral(self):
        assert CognitiveColorRamp.for_phase(CognitivePhase.LOOP) == CognitiveColorRamp.NEUTRAL
        assert CognitiveColorRamp.for_phase(CognitivePhase.NONE) == CognitiveColorRamp.NEUTRAL

    def test_color_extremes(self):
        ramp = CognitiveColorRamp.EXECUTE
        assert ramp.color_for_luminance(0.0) == 52
        assert ramp.color_for_luminance(1.0) == 231

    def test_dithered_color_stays_on_ramp(self):
        ramp = CognitiveColorRamp.PLAN
        for x in range(4):
            for y in range(4):
                assert ramp.color_for_luminance_dithered(0.37, x, y) in ramp.color_stops


class TestCognitivePhase:

    def test_phase_values_are_strings(self):
        assert CognitivePhase("execute") is CognitivePhase.EXECUTE
        assert CognitivePhase.LOOP == "loop"
