"""
Periodic wave - coefficient export for an oscillator.

Mirrors the periodic-wave primitive of browser audio engines: two equal
length arrays (real = cosine terms, imag = sine terms) indexed by harmonic,
with normalization disabled. real[0] is not part of the oscillator output;
the DC term travels separately as a constant offset.
"""

import math
from dataclasses import dataclass

import numpy as np

from fourier_synth.core.waveform_sampler import evaluate


@dataclass(frozen=True)
class PeriodicWave:
    real: np.ndarray        # float32, cos amplitudes / control range
    imag: np.ndarray        # float32, sin amplitudes / control range, imag[0] == 0
    dc_offset: float = 0.0

    @classmethod
    def from_table(cls, table) -> "PeriodicWave":
        control_range = table.profile.control_range
        real = (table.cos_amplitudes() / control_range).astype(np.float32)
        imag = (table.sin_amplitudes() / control_range).astype(np.float32)
        imag[0] = 0.0
        return cls(real=real, imag=imag, dc_offset=table.dc / control_range)

    @property
    def harmonic_count(self) -> int:
        return len(self.real) - 1

    def evaluate(self, cycles: np.ndarray) -> np.ndarray:
        """Oscillator output at positions measured in cycles (1.0 = one period)."""
        phase = 2.0 * math.pi * np.asarray(cycles, dtype=np.float64)
        return evaluate(self.real.astype(np.float64), self.imag.astype(np.float64),
                        phase, invert=False)

    def render(self, length: int) -> np.ndarray:
        """One period as a float32 wavetable of the given length."""
        if length <= 0:
            return np.zeros(0, dtype=np.float32)
        cycles = np.arange(length, dtype=np.float64) / length
        return self.evaluate(cycles).astype(np.float32)
