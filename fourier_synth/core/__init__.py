"""
Core - Fourier evaluation and auto-normalization. No Qt imports.
"""

from .harmonic_table import (
    CoefficientKind,
    DisplayOptions,
    HarmonicCoefficient,
    HarmonicTable,
    SynthesisConfig,
    coefficient_key,
    parse_number,
)
from .waveform_sampler import WaveformSamples, evaluate, sample
from .auto_normalizer import Correction, SettlePass, normalize

__all__ = [
    "CoefficientKind",
    "DisplayOptions",
    "HarmonicCoefficient",
    "HarmonicTable",
    "SynthesisConfig",
    "coefficient_key",
    "parse_number",
    "WaveformSamples",
    "evaluate",
    "sample",
    "Correction",
    "SettlePass",
    "normalize",
]
