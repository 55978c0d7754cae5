"""
Tests for the harmonic table: bounds, coupling, mutation and read views.
"""

import math

import numpy as np
import pytest

from fourier_synth.config import CONTROL_RANGE, FREQ_MAX, FREQ_MIN, GAIN_DEFAULT
from fourier_synth.core import (
    CoefficientKind,
    DisplayOptions,
    HarmonicTable,
    SynthesisConfig,
    coefficient_key,
    parse_number,
)

COS = CoefficientKind.COSINE
SIN = CoefficientKind.SINE
DC = CoefficientKind.DC


@pytest.fixture
def table():
    return HarmonicTable()


class TestParseNumber:

    @pytest.mark.parametrize("value", ["", "   ", "abc", None, "nan", "inf", float('nan'), True])
    def test_rejects(self, value):
        assert parse_number(value) is None

    @pytest.mark.parametrize("value,expected", [("12.5", 12.5), (" -3 ", -3.0), (7, 7.0)])
    def test_accepts(self, value, expected):
        assert parse_number(value) == expected


class TestConstruction:

    def test_default_table(self, table):
        assert table.harmonic_count == 8
        assert table.fundamental == 220.0
        assert table.config.gain == pytest.approx(GAIN_DEFAULT)
        assert all(c.amplitude == 0.0 for c in table)

    def test_iteration_order(self, table):
        keys = [c.key for c in table]
        assert keys[:5] == ["cos0", "cos1", "sin1", "cos2", "sin2"]
        assert len(keys) == 1 + 2 * table.harmonic_count

    def test_initial_count_respects_frequency(self):
        table = HarmonicTable(SynthesisConfig(fundamental_hz=5000, harmonic_count=10))
        assert table.harmonic_count == 4

    def test_labels(self, table):
        rows = table.rows()
        assert rows["cos0"]["label"] == "DC"
        assert rows["cos3"]["label"] == "A3"
        assert rows["sin3"]["label"] == "B3"

    def test_set_labels(self, table):
        table.set_labels(dc_label="Offset", cos_prefix="a", sin_prefix="b")
        rows = table.rows()
        assert rows["cos0"]["label"] == "Offset"
        assert rows["cos2"]["label"] == "a2"
        assert rows["sin2"]["label"] == "b2"

    def test_coefficient_key(self):
        assert coefficient_key(0, DC) == "cos0"
        assert coefficient_key(4, SIN) == "sin4"


class TestAmplitudes:

    def test_set_and_clamp(self, table):
        assert table.set_amplitude(1, COS, 250)
        assert table.amplitude(1, COS) == CONTROL_RANGE
        assert table.set_amplitude(2, SIN, -999)
        assert table.amplitude(2, SIN) == -CONTROL_RANGE

    def test_clamp_is_idempotent(self, table):
        table.set_amplitude(1, COS, 250)
        once = table.amplitude(1, COS)
        table.set_amplitude(1, COS, once)
        assert table.amplitude(1, COS) == once

    @pytest.mark.parametrize("value", ["", "abc", float('nan')])
    def test_rejected_input_leaves_value(self, table, value):
        table.set_amplitude(3, COS, 12.0)
        assert table.set_amplitude(3, COS, value) is False
        assert table.amplitude(3, COS) == 12.0

    def test_text_input(self, table):
        assert table.set_amplitude(2, COS, "33.3")
        assert table.amplitude(2, COS) == pytest.approx(33.3)

    def test_dc(self, table):
        table.set_dc(-20)
        assert table.dc == -20
        assert table.amplitude(0, DC) == -20

    def test_out_of_range_harmonic_raises(self, table):
        with pytest.raises(KeyError):
            table.coefficient(table.harmonic_count + 1, COS)
        with pytest.raises(KeyError):
            table.coefficient(0, SIN)
        with pytest.raises(KeyError):
            table.coefficient(1, DC)

    def test_reset_one(self, table):
        table.set_amplitude(1, SIN, 40)
        table.reset_one(1, SIN)
        assert table.amplitude(1, SIN) == 0.0

    def test_reset_all_restores_gain(self, table):
        table.set_amplitude(1, COS, 40)
        table.set_dc(10)
        table.set_gain(0.9)
        table.reset_all()
        assert all(c.amplitude == 0.0 for c in table)
        assert table.config.gain == pytest.approx(GAIN_DEFAULT)

    def test_arrays(self, table):
        table.set_dc(5)
        table.set_amplitude(2, COS, 20)
        table.set_amplitude(3, SIN, -10)
        cos = table.cos_amplitudes()
        sin = table.sin_amplitudes()
        assert cos.shape == sin.shape == (table.harmonic_count + 1,)
        assert cos[0] == 5 and cos[2] == 20
        assert sin[0] == 0.0 and sin[3] == -10
        assert cos.dtype == np.float64


class TestHarmonicCount:

    def test_grow_appends_zeroed_pairs(self, table):
        table.set_amplitude(1, COS, 50)
        assert table.set_harmonic_count(12) == 12
        assert table.amplitude(1, COS) == 50
        assert table.amplitude(12, SIN) == 0.0

    def test_shrink_drops_upper_pairs(self, table):
        table.set_amplitude(8, COS, 50)
        table.set_harmonic_count(4)
        with pytest.raises(KeyError):
            table.coefficient(8, COS)
        table.set_harmonic_count(8)
        assert table.amplitude(8, COS) == 0.0

    def test_clamped_to_one(self, table):
        assert table.set_harmonic_count(0) == 1
        assert table.set_harmonic_count(-5) == 1

    def test_clamped_to_max_harmonics(self, table):
        assert table.set_harmonic_count(500) == table.config.max_harmonics

    def test_rejected_input(self, table):
        assert table.set_harmonic_count("lots") == 8

    def test_max_harmonics_shrinks_table(self, table):
        table.set_max_harmonics(5)
        assert table.harmonic_count == 5
        assert table.set_harmonic_count(7) == 5


class TestFundamental:

    def test_clamped(self, table):
        assert table.set_fundamental(5) == FREQ_MIN
        assert table.set_fundamental(50000) == FREQ_MAX

    def test_rejected_input(self, table):
        assert table.set_fundamental("") == 220.0

    @pytest.mark.parametrize("hz", [20, 220, 1000, 2500, 7000, 19999])
    def test_highest_harmonic_below_ceiling(self, table, hz):
        table.set_harmonic_count(100)
        table.set_fundamental(hz)
        assert table.harmonic_count * table.fundamental <= FREQ_MAX

    def test_raising_fundamental_drops_harmonics(self, table):
        table.set_harmonic_count(20)
        table.set_fundamental(2000)
        assert table.harmonic_count == 10
        assert table.max_harmonic_count() == 10

    def test_lowering_fundamental_keeps_count(self, table):
        table.set_fundamental(100)
        assert table.harmonic_count == 8

    def test_max_count_never_below_one(self, table):
        table.set_fundamental(FREQ_MAX)
        assert table.max_harmonic_count() == 1
        assert math.floor(FREQ_MAX / table.fundamental) == 1


class TestSettings:

    def test_gain_clamped(self, table):
        assert table.set_gain(5) == table.profile.gain_max
        assert table.set_gain(-1) == 0.0
        assert table.set_gain("x") == 0.0

    def test_periods_clamped(self, table):
        assert table.set_periods(0) == 1
        assert table.set_periods(99) == table.profile.periods_max

    def test_line_width(self):
        display = DisplayOptions()
        assert display.line_width == 3
        assert display.set_line_width(9) == 5
        assert display.set_line_width(0) == 1
        assert display.set_line_width("") == 1
