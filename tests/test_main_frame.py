"""
Tests for MainFrame wiring.
"""

import pytest

from fourier_synth.config import LABELS
from fourier_synth.gui.main_frame import MainFrame


@pytest.fixture
def frame(qapp, preset_dir):
    return MainFrame()


class TestMainFrame:

    def test_wave_export_toggle(self, frame):
        assert frame.audio_button.text() == LABELS['audio']
        assert frame.audio_button.toolTip()
        frame.audio_button.setChecked(True)
        assert frame.controller.audio.enabled
        frame.audio_button.setChecked(False)
        assert not frame.controller.audio.enabled

    def test_console_button(self, frame):
        assert frame.console_panel.isHidden()
        frame.console_button.click()
        assert not frame.console_panel.isHidden()

    def test_harmonics_drag_value_follows_controller(self, frame):
        frame.controller.set_harmonic_count(12)
        assert frame.harmonics_value.value() == 12

    def test_file_menu(self, frame):
        titles = [action.text() for action in frame.menuBar().actions()]
        assert "File" in titles

    def test_sliders_are_vertical(self, frame):
        from PyQt5.QtCore import Qt
        from fourier_synth.gui.widgets import AmplitudeSlider

        assert frame.gain_slider.orientation() == Qt.Vertical
        sliders = frame.harmonic_panel.findChildren(AmplitudeSlider)
        assert sliders
        assert all(s.orientation() == Qt.Vertical for s in sliders)
