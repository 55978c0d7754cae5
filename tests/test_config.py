"""
Tests for central config: profiles and value mapping.
"""

import math

import pytest

from fourier_synth.config import (
    CONTROL_RANGE,
    DEFAULT_PROFILE,
    GAIN_DEFAULT,
    PROFILES,
    format_amplitude,
    format_frequency,
    format_gain,
    gain_to_db,
    get_profile,
    map_gain,
    unmap_gain,
)


class TestProfiles:
    """Profile lookup and clamping."""

    def test_default_profile(self, monkeypatch):
        monkeypatch.delenv("FOURIER_SYNTH_PROFILE", raising=False)
        assert get_profile().name == DEFAULT_PROFILE

    def test_env_selects_profile(self, monkeypatch):
        monkeypatch.setenv("FOURIER_SYNTH_PROFILE", "wide")
        assert get_profile().name == "wide"

    def test_unknown_name_falls_back(self):
        assert get_profile("nonexistent").name == DEFAULT_PROFILE

    def test_default_gain_is_minus_6db(self):
        assert GAIN_DEFAULT == pytest.approx(0.501, abs=1e-3)
        assert PROFILES['classic'].default_gain == GAIN_DEFAULT

    def test_clamp_amplitude(self, classic):
        assert classic.clamp_amplitude(250) == CONTROL_RANGE
        assert classic.clamp_amplitude(-250) == -CONTROL_RANGE
        assert classic.clamp_amplitude(12.5) == 12.5

    def test_clamp_periods(self):
        assert PROFILES['classic'].clamp_periods(9) == 5
        assert PROFILES['wide'].clamp_periods(9) == 9
        assert PROFILES['classic'].clamp_periods(0) == 1

    def test_clamp_gain(self, classic):
        assert classic.clamp_gain(3.0) == classic.gain_max
        assert classic.clamp_gain(-1.0) == 0.0


class TestGainMapping:
    """Slider position <-> gain."""

    @pytest.mark.parametrize("name", ["classic", "wide"])
    def test_endpoints(self, name):
        profile = PROFILES[name]
        assert map_gain(0.0, profile) == 0.0
        assert map_gain(1.0, profile) == pytest.approx(profile.gain_max)

    @pytest.mark.parametrize("name", ["classic", "wide"])
    def test_unmap_is_inverse(self, name):
        profile = PROFILES[name]
        for position in (0.1, 0.25, 0.5, 0.9):
            assert unmap_gain(map_gain(position, profile), profile) == pytest.approx(position)

    def test_db_curve_is_logarithmic(self):
        wide = PROFILES['wide']
        assert gain_to_db(map_gain(0.5, wide)) == pytest.approx(-30.0)

    def test_out_of_range_input_clamped(self, classic):
        assert map_gain(2.0, classic) == pytest.approx(classic.gain_max)
        assert map_gain(-1.0, classic) == 0.0


class TestFormatting:

    def test_format_gain(self):
        assert format_gain(1.0) == "0.00 dB"
        assert format_gain(0.0) == "-inf dB"

    def test_gain_to_db_silence(self):
        assert math.isinf(gain_to_db(0.0))

    def test_format_amplitude_one_decimal(self):
        assert format_amplitude(12.345) == "12.3"
        assert format_amplitude(-5) == "-5.0"

    def test_format_frequency(self):
        assert format_frequency(440.0) == "440Hz"
        assert format_frequency(2200.0) == "2.2kHz"


class TestAppPaths:

    def test_data_dir_env_override(self, tmp_path, monkeypatch):
        from fourier_synth.utils.app_paths import get_app_data_dir, get_preset_dir
        monkeypatch.delenv("FOURIER_SYNTH_PRESET_DIR", raising=False)
        monkeypatch.setenv("FOURIER_SYNTH_DATA_DIR", str(tmp_path))
        assert get_app_data_dir() == tmp_path.resolve()
        assert get_preset_dir() == tmp_path.resolve() / "presets"
        assert (tmp_path / "presets").is_dir()
