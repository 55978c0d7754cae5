"""
Waveform sampler - evaluates the Fourier sum across the display width.

Pure function of (table, config, width, height). Sample x runs over
0..width inclusive; each fundamental period spans width / periods samples.
The sum is negated by default because display y grows downward.
"""

import math
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from fourier_synth.config import SynthProfile


@dataclass(frozen=True)
class WaveformSamples:
    values: np.ndarray          # display y per x, length width + 1
    peak_positive: float        # max unscaled y (>= 0)
    peak_negative: float        # min unscaled y (<= 0)
    origin_value: float         # display y at x = 0, for endpoint markers
    scale_y: float
    center: float
    wavelength: float
    endpoints: List[float] = field(default_factory=list)

    @property
    def width(self) -> int:
        return len(self.values) - 1


def evaluate(cos_amplitudes: np.ndarray, sin_amplitudes: np.ndarray,
             phase: np.ndarray, invert: bool = True) -> np.ndarray:
    """
    Unscaled Fourier sum at each phase, excluding the DC term:
        y = -sum_k (cos_k cos(k phase) + sin_k sin(k phase))
    """
    harmonics = np.arange(1, len(cos_amplitudes), dtype=np.float64)
    if harmonics.size == 0:
        return np.zeros_like(phase)

    angles = np.outer(harmonics, phase)
    y = cos_amplitudes[1:] @ np.cos(angles) + sin_amplitudes[1:] @ np.sin(angles)
    return -y if invert else y


def sample(table, config, width: int, height: float,
           stroke_half_width: Optional[float] = None,
           profile: Optional[SynthProfile] = None) -> WaveformSamples:
    """
    Sample the waveform for a width x height display.

    Peaks are measured on the unscaled sum, before gain, DC and display
    scaling. If stroke_half_width is given, display values are clamped so a
    line of that half width stays inside the display.
    """
    profile = profile or table.profile
    width = max(0, int(width))
    periods = max(1, int(config.periods))
    half_height = height / 2.0

    wavelength = width / periods
    time_base = wavelength / (2.0 * math.pi)

    # A single harmonic at full control range and gain 1 fills half the height
    scale_y = config.gain * (half_height / profile.control_range)
    center = half_height - (half_height / profile.control_range) * table.dc

    x = np.arange(width + 1, dtype=np.float64)
    if width > 0:
        phase = np.mod(x, wavelength) / time_base
        y = evaluate(table.cos_amplitudes(), table.sin_amplitudes(), phase,
                     invert=profile.invert_axis)
    else:
        y = np.zeros_like(x)

    peak_positive = max(0.0, float(np.max(y)))
    peak_negative = min(0.0, float(np.min(y)))

    values = center + scale_y * y
    if stroke_half_width is not None:
        values = np.clip(values, stroke_half_width, height - stroke_half_width)

    endpoints = [k * wavelength for k in range(periods + 1)] if width > 0 else [0.0]

    return WaveformSamples(
        values=values,
        peak_positive=peak_positive,
        peak_negative=peak_negative,
        origin_value=float(values[0]),
        scale_y=scale_y,
        center=center,
        wavelength=wavelength,
        endpoints=endpoints,
    )
