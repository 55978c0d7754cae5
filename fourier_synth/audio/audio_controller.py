"""
Audio Controller
Holds the oscillator state derived from the harmonic table.

The controller turns the table into a PeriodicWave plus gain, frequency and
DC offset, and renders blocks on demand for whatever sound sink pulls them.
Gain is applied to the oscillator only; the offset is added after it.
"""

import numpy as np
from PyQt5.QtCore import QObject, pyqtSignal

from fourier_synth.audio.periodic_wave import PeriodicWave
from fourier_synth.config import DEFAULT_FUNDAMENTAL, SAMPLE_RATE
from fourier_synth.utils.logger import logger


class AudioController(QObject):
    """Oscillator voice fed by the harmonic table."""

    wave_changed = pyqtSignal(object)   # PeriodicWave
    enabled_changed = pyqtSignal(bool)

    def __init__(self, sample_rate: int = SAMPLE_RATE):
        super().__init__()
        self.sample_rate = sample_rate

        # State
        self.enabled = False
        self.frequency = DEFAULT_FUNDAMENTAL
        self.gain = 0.0
        self.wave = None
        self._phase = 0.0  # cycles, kept in [0, 1)

    def enable(self):
        """Start producing sound."""
        if not self.enabled:
            self.enabled = True
            self.enabled_changed.emit(True)
            logger.info("Wave export enabled", component="AUDIO")

    def disable(self):
        """Suspend output. State is kept so re-enabling resumes the same wave."""
        if self.enabled:
            self.enabled = False
            self.enabled_changed.emit(False)
            logger.info("Wave export suspended", component="AUDIO")

    def update(self, table, config):
        """Rebuild the periodic wave from the table. No-op while disabled."""
        if not self.enabled:
            return
        self.wave = PeriodicWave.from_table(table)
        self.gain = config.gain
        self.frequency = config.fundamental_hz
        self.wave_changed.emit(self.wave)
        logger.audio(f"Wave updated: {self.wave.harmonic_count} harmonics @ {self.frequency:g}Hz",
                     details=f"gain={self.gain:.3f} offset={self.wave.dc_offset:.3f}")

    def render_block(self, frames: int) -> np.ndarray:
        """Render the next block of float32 samples, phase-continuous."""
        if frames <= 0:
            return np.zeros(0, dtype=np.float32)
        if not self.enabled or self.wave is None:
            return np.zeros(frames, dtype=np.float32)

        increment = self.frequency / self.sample_rate
        cycles = self._phase + np.arange(frames, dtype=np.float64) * increment
        self._phase = float((self._phase + frames * increment) % 1.0)

        block = self.gain * self.wave.evaluate(np.mod(cycles, 1.0)) + self.wave.dc_offset
        return block.astype(np.float32)
