"""
SynthController - owns the harmonic table and drives sampling, auto-adjust
and the audio voice.

Every edit runs one update: sample the waveform, hand it to the display,
and, with auto-adjust on, correct gain/DC and sample once more. The
SettlePass token passed to refresh() decides whether a pass may normalize;
a correction pass never does, so an update costs at most two samples.
"""
from __future__ import annotations

from PyQt5.QtCore import QObject, QTimer, pyqtSignal

from fourier_synth.audio.audio_controller import AudioController
from fourier_synth.config import RESIZE_DEBOUNCE_MS, get_profile
from fourier_synth.core import (
    DisplayOptions,
    HarmonicTable,
    SettlePass,
    SynthesisConfig,
    normalize,
    sample,
)
from fourier_synth.presets import apply_state, collect_state
from fourier_synth.utils.logger import logger


class SynthController(QObject):
    """Mediates between widgets, the core, and the audio voice."""

    waveform_ready = pyqtSignal(object)     # WaveformSamples
    structure_changed = pyqtSignal()        # harmonic rows added/removed
    values_changed = pyqtSignal()           # amplitudes changed outside the panel
    settings_changed = pyqtSignal()         # gain, periods, fundamental, flags

    def __init__(self, table: HarmonicTable | None = None,
                 display: DisplayOptions | None = None,
                 audio: AudioController | None = None,
                 profile=None):
        super().__init__()
        self.profile = profile or (table.profile if table else get_profile())
        self.table = table or HarmonicTable(SynthesisConfig(gain=self.profile.default_gain),
                                            profile=self.profile)
        self.display = display or DisplayOptions()
        self.audio = audio or AudioController()

        self.width = 0
        self.height = 0
        self.samples = None
        self.sample_passes = 0      # passes in the most recent update

        self._pending_size = None
        self._resize_timer = None

    @property
    def config(self) -> SynthesisConfig:
        return self.table.config

    # === Sampling ===

    def set_canvas_size(self, width: int, height: int):
        """Set size immediately, without redrawing."""
        self.width = max(0, int(width))
        self.height = max(0, int(height))

    def initial_draw(self):
        """First paint renders as-is; auto-adjust waits for the first edit."""
        self.sample_passes = 0
        return self.refresh(SettlePass.CORRECTION)

    def refresh(self, settle: SettlePass = SettlePass.MEASURE):
        """Sample the waveform. A MEASURE pass may trigger one correction pass."""
        if self.display.hide_graph or self.width <= 0:
            return None

        self.samples = sample(self.table, self.config, self.width, self.height,
                              stroke_half_width=self.display.line_width / 2,
                              profile=self.profile)
        self.sample_passes += 1
        self.waveform_ready.emit(self.samples)

        if settle is SettlePass.MEASURE and self.config.auto_adjust:
            self._auto_adjust(self.samples)
        return self.samples

    def _auto_adjust(self, samples):
        correction = normalize(samples.peak_positive, samples.peak_negative,
                               samples.scale_y, self.height,
                               self.config.gain, self.table.dc, self.profile)
        if correction is None or not correction.changes(self.config.gain, self.table.dc):
            return

        self.table.set_dc(correction.new_dc_amplitude)
        if correction.new_gain is not None:
            self.table.set_gain(correction.new_gain)
        if correction.silent:
            logger.info("Flat waveform: gain and offset reset to defaults", component="AUTO")
        else:
            logger.debug(f"Auto-adjust: gain={self.config.gain:.3f} dc={self.table.dc:.1f}",
                         component="AUTO")

        self.refresh(SettlePass.CORRECTION)
        self.values_changed.emit()
        self.settings_changed.emit()

    def update(self):
        """Redraw and refresh the audio voice after an edit."""
        self.sample_passes = 0
        self.refresh(SettlePass.MEASURE)
        self._play()

    def _play(self):
        self.audio.update(self.table, self.config)

    # === Resize debounce ===

    def on_resize(self, width: int, height: int):
        """Coalesce resize bursts into one redraw after a quiet period."""
        self._pending_size = (width, height)
        if self._resize_timer is None:
            self._resize_timer = QTimer(self)
            self._resize_timer.setSingleShot(True)
            self._resize_timer.timeout.connect(self._on_resize_timeout)
        self._resize_timer.start(RESIZE_DEBOUNCE_MS)

    def _on_resize_timeout(self):
        if self._pending_size is None:
            return
        self.set_canvas_size(*self._pending_size)
        self._pending_size = None
        self.sample_passes = 0
        self.refresh(SettlePass.MEASURE)

    # === Edits ===

    def set_amplitude(self, harmonic, kind, value) -> bool:
        """Returns False if the input was rejected (value unchanged)."""
        if not self.table.set_amplitude(harmonic, kind, value):
            return False
        self.update()
        return True

    def reset_one(self, harmonic, kind):
        self.table.reset_one(harmonic, kind)
        self.update()
        self.values_changed.emit()

    def reset_all(self):
        self.table.reset_all()
        logger.info("Reset all harmonics", component="APP")
        self.update()
        self.values_changed.emit()
        self.settings_changed.emit()

    def set_fundamental(self, hz) -> float:
        old_count = self.table.harmonic_count
        value = self.table.set_fundamental(hz)
        if self.table.harmonic_count != old_count:
            self.structure_changed.emit()
            self.update()
        else:
            self._play()
        self.settings_changed.emit()
        return value

    def set_harmonic_count(self, count) -> int:
        old_count = self.table.harmonic_count
        value = self.table.set_harmonic_count(count)
        if value != old_count:
            self.structure_changed.emit()
            self.update()
        self.settings_changed.emit()
        return value

    def set_max_harmonics(self, count) -> int:
        old_count = self.table.harmonic_count
        value = self.table.set_max_harmonics(count)
        if self.table.harmonic_count != old_count:
            self.structure_changed.emit()
            self.update()
        self.settings_changed.emit()
        return value

    def set_periods(self, periods) -> int:
        value = self.table.set_periods(periods)
        self.update()
        self.settings_changed.emit()
        return value

    def set_gain(self, gain) -> float:
        value = self.table.set_gain(gain)
        self.update()
        self.settings_changed.emit()
        return value

    def set_auto_adjust(self, enabled: bool):
        self.config.auto_adjust = bool(enabled)
        logger.info(f"Auto-adjust {'on' if enabled else 'off'}", component="AUTO")
        if enabled:
            self.sample_passes = 0
            self.refresh(SettlePass.MEASURE)
        self._play()
        self.settings_changed.emit()

    def set_line_width(self, width) -> int:
        value = self.display.set_line_width(width)
        self.update()
        return value

    def set_display_flag(self, name: str, hidden: bool):
        """Toggle one of the DisplayOptions hide_* flags."""
        if not name.startswith('hide_') or not hasattr(self.display, name):
            raise AttributeError(name)
        setattr(self.display, name, bool(hidden))
        self.settings_changed.emit()
        self.update()

    def set_audio_enabled(self, enabled: bool):
        if enabled:
            self.audio.enable()
            self._play()
        else:
            self.audio.disable()

    # === Presets ===

    def preset_state(self):
        return collect_state(self.table, self.display)

    def apply_preset(self, state):
        apply_state(state, self.table, self.display)
        self.structure_changed.emit()
        self.values_changed.emit()
        self.settings_changed.emit()
        self.update()
