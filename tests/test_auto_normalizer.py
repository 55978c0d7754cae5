"""
Tests for auto-normalization (gain fit and DC centering).
"""

import math

import pytest

from fourier_synth.config import GAIN_DEFAULT, PROFILES
from fourier_synth.core import Correction, normalize
from fourier_synth.core.auto_normalizer import round_offset

classic = PROFILES['classic']


class TestNormalize:

    def test_zero_height_is_noop(self):
        assert normalize(50, -50, 0.5, 0, 0.5, 0.0, classic) is None

    def test_silence_resets(self):
        correction = normalize(0.0, 0.0, 0.5, 200, 0.9, 30.0, classic)
        assert correction == Correction(new_dc_amplitude=0.0, new_gain=GAIN_DEFAULT, silent=True)

    def test_gain_fit_capped(self):
        """p2p 50 in a 200px display wants gain 2.0; the cap is 1.0."""
        correction = normalize(50, -50, 0.5, 200, 0.5, 0.0, classic)
        assert correction.new_gain == classic.gain_max
        assert correction.new_dc_amplitude == 0.0

    def test_gain_fit(self):
        correction = normalize(100, -100, 1.0, 100, 0.8, 0.0, classic)
        # p2p 200 -> gain 0.8 * 100 / 200
        assert correction.new_gain == pytest.approx(0.4)

    def test_second_call_reports_no_gain_change(self):
        first = normalize(50, -50, 0.5, 200, 0.5, 0.0, classic)
        # Next frame at the new gain: scale_y = gain * half / R = 1.0
        second = normalize(50, -50, 1.0, 200, first.new_gain, first.new_dc_amplitude, classic)
        assert second.new_gain is None
        assert not second.changes(first.new_gain, first.new_dc_amplitude)

    @pytest.mark.parametrize("peaks", [(50, -50), (60, -20), (1, -300), (0.5, 0.0), (173.2, -41.7)])
    @pytest.mark.parametrize("gain", [0.01, 0.2, 0.5, 0.93, 1.0])
    @pytest.mark.parametrize("height", [1, 37, 150, 777])
    def test_fit_terminates_after_one_correction(self, peaks, gain, height):
        """Re-measuring at the corrected gain never asks for another gain change."""
        peak_positive, peak_negative = peaks
        half = height / 2.0

        first = normalize(peak_positive, peak_negative, gain * half / classic.control_range,
                          height, gain, 0.0, classic)
        new_gain = gain if first.new_gain is None else first.new_gain

        second = normalize(peak_positive, peak_negative, new_gain * half / classic.control_range,
                           height, new_gain, first.new_dc_amplitude, classic)
        assert second.new_gain is None

    def test_fit_exact_reports_no_change(self):
        correction = normalize(100, -100, 0.5, 100, 0.5, 0.0, classic)
        assert correction.new_gain is None

    def test_asymmetry_offset_with_pending_gain(self):
        # p2p 80 -> gain 1.0; asym 40 -> 100 * 40 / 160 = 25, scaled by 1.0 / 0.5
        correction = normalize(60, -20, 1.0, 160, 0.5, 0.0, classic)
        assert correction.new_gain == 1.0
        assert correction.new_dc_amplitude == 50.0

    def test_asymmetry_offset_without_gain_change(self):
        correction = normalize(120, -40, 1.0, 160, 1.0, 0.0, classic)
        assert correction.new_gain is None
        assert correction.new_dc_amplitude == 50.0

    def test_offset_rounded(self):
        correction = normalize(61, -20, 1.0, 162, 1.0, 0.0, classic)
        assert correction.new_dc_amplitude == round(correction.new_dc_amplitude, 1)


class TestCorrection:

    def test_changes(self):
        correction = Correction(new_dc_amplitude=10.0, new_gain=None)
        assert correction.changes(0.5, 0.0)
        assert not correction.changes(0.5, 10.0)
        assert Correction(new_dc_amplitude=0.0, new_gain=0.7).changes(0.5, 0.0)


class TestRoundOffset:

    def test_one_decimal(self):
        assert round_offset(12.345) == 12.3

    def test_negative_zero_folded(self):
        value = round_offset(-0.04)
        assert value == 0.0
        assert math.copysign(1.0, value) == 1.0
        assert str(value) == "0.0"
