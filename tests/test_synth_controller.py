"""
Tests for SynthController: update passes, auto-adjust settling, presets.
"""

import pytest

from fourier_synth.config import GAIN_DEFAULT
from fourier_synth.core import CoefficientKind
from fourier_synth.gui.controllers import SynthController
from fourier_synth.presets import ConfigState, PresetState

COS = CoefficientKind.COSINE
SIN = CoefficientKind.SINE


@pytest.fixture
def controller(qapp):
    controller = SynthController()
    controller.set_canvas_size(600, 200)
    return controller


class TestRefresh:

    def test_refresh_emits_samples(self, controller):
        received = []
        controller.waveform_ready.connect(received.append)
        controller.set_amplitude(1, COS, 50)
        assert len(received) == 1
        assert received[0] is controller.samples
        assert controller.samples.width == 600

    def test_hidden_graph_skips_sampling(self, controller):
        controller.set_display_flag('hide_graph', True)
        assert controller.refresh() is None

    def test_no_canvas_skips_sampling(self, qapp):
        assert SynthController().refresh() is None

    def test_unknown_display_flag(self, controller):
        with pytest.raises(AttributeError):
            controller.set_display_flag('line_width', True)

    def test_rejected_amplitude(self, controller):
        assert controller.set_amplitude(1, COS, "abc") is False
        assert controller.samples is None

    def test_one_pass_without_auto_adjust(self, controller):
        controller.set_amplitude(1, COS, 80)
        assert controller.sample_passes == 1


class TestAutoAdjust:

    def test_initial_draw_does_not_normalize(self, controller):
        controller.config.auto_adjust = True
        controller.table.set_amplitude(1, COS, 10)
        controller.initial_draw()
        assert controller.sample_passes == 1
        assert controller.config.gain == pytest.approx(GAIN_DEFAULT)

    def test_update_uses_at_most_two_passes(self, controller):
        controller.set_auto_adjust(True)
        for value in (10, 55, -90, 100, 3):
            controller.set_amplitude(1, COS, value)
            assert controller.sample_passes <= 2

    def test_converges_to_fixed_point(self, controller):
        controller.table.set_amplitude(1, COS, 100)
        controller.table.set_amplitude(1, SIN, 100)
        controller.set_auto_adjust(True)
        assert controller.sample_passes == 2

        s = controller.samples
        assert s.scale_y * (s.peak_positive - s.peak_negative) == pytest.approx(200, rel=1e-3)

        # Already settled: the next update measures once and stops
        gain, dc = controller.config.gain, controller.table.dc
        controller.update()
        assert controller.sample_passes == 1
        assert controller.config.gain == gain
        assert controller.table.dc == dc

    def test_asymmetric_wave_is_centered(self, controller):
        controller.table.set_amplitude(1, COS, 60)
        controller.table.set_amplitude(2, COS, 40)
        controller.set_auto_adjust(True)
        s = controller.samples
        asymmetry = s.scale_y * (s.peak_positive + s.peak_negative)
        assert controller.table.dc == pytest.approx(100 * asymmetry / 200, abs=0.1)

    def test_silence_restores_defaults(self, controller):
        controller.table.set_dc(30)
        controller.table.set_gain(0.9)
        controller.set_auto_adjust(True)
        assert controller.table.dc == 0.0
        assert controller.config.gain == pytest.approx(GAIN_DEFAULT)

    def test_correction_notifies_widgets(self, controller):
        seen = []
        controller.values_changed.connect(lambda: seen.append('values'))
        controller.table.set_amplitude(1, COS, 20)
        controller.set_auto_adjust(True)
        assert 'values' in seen


class TestEdits:

    def test_harmonic_count_change_rebuilds(self, controller):
        seen = []
        controller.structure_changed.connect(lambda: seen.append(True))
        assert controller.set_harmonic_count(12) == 12
        assert seen == [True]
        controller.set_harmonic_count(12)
        assert seen == [True]

    def test_fundamental_drops_harmonics(self, controller):
        controller.set_harmonic_count(50)
        controller.set_fundamental(1000)
        assert controller.table.harmonic_count == 20

    def test_reset_all(self, controller):
        controller.set_amplitude(2, SIN, 40)
        controller.set_gain(0.8)
        controller.reset_all()
        assert all(c.amplitude == 0.0 for c in controller.table)
        assert controller.config.gain == pytest.approx(GAIN_DEFAULT)

    def test_audio_follows_edits_when_enabled(self, controller):
        controller.set_audio_enabled(True)
        controller.set_amplitude(3, COS, 30)
        assert controller.audio.wave.real[3] == pytest.approx(0.3)
        controller.set_audio_enabled(False)
        assert controller.audio.enabled is False


class TestPresets:

    def test_apply_preset(self, controller):
        state = PresetState(
            config=ConfigState(harmonics=4, periods=2, hide_dividers=True),
            fourier_data={"cos1": 0.5, "sin10": -0.3},
        )
        controller.apply_preset(state)
        assert controller.table.harmonic_count == 10
        assert controller.table.amplitude(10, SIN) == pytest.approx(-30)
        assert controller.config.periods == 2
        assert controller.display.hide_dividers is True
        assert controller.samples is not None

    def test_preset_state_round_trip(self, controller):
        controller.set_amplitude(2, COS, 25)
        state = controller.preset_state()
        other = SynthController()
        other.apply_preset(state)
        assert other.table.amplitude(2, COS) == pytest.approx(25)


class TestResizeDebounce:

    def test_burst_coalesced_into_one_redraw(self, controller):
        from PyQt5.QtTest import QTest
        from fourier_synth.config import RESIZE_DEBOUNCE_MS

        received = []
        controller.waveform_ready.connect(received.append)
        for width in (300, 350, 420, 480):
            controller.on_resize(width, 160)
        assert received == []

        QTest.qWait(RESIZE_DEBOUNCE_MS * 3)
        assert len(received) == 1
        assert controller.width == 480
        assert received[0].width == 480


class TestAutoAdjustLogging:

    def test_flat_waveform_reset_is_logged(self, controller):
        from fourier_synth.utils.logger import logger

        seen = []
        logger.console_signal.message.connect(lambda text, level, stamp: seen.append(text))
        controller.table.set_dc(30)
        controller.set_auto_adjust(True)
        assert any("Flat waveform" in text for text in seen)
