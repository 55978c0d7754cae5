"""
Harmonic table - coefficient storage and synthesis settings.

The table owns one DC coefficient plus a cosine/sine pair per harmonic
1..H, stored in index-addressed lists. It also enforces the coupling between
harmonic count and fundamental: the highest harmonic never exceeds FREQ_MAX.
"""

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

import numpy as np

from fourier_synth.config import (
    DEFAULT_FUNDAMENTAL,
    DEFAULT_HARMONICS,
    FREQ_MAX,
    FREQ_MIN,
    LABELS,
    LINE_WIDTH_DEFAULT,
    LINE_WIDTH_MAX,
    LINE_WIDTH_MIN,
    MAX_HARMONICS_DEFAULT,
    PERIODS_DEFAULT,
    SynthProfile,
    get_profile,
)

log = logging.getLogger(__name__)


class CoefficientKind(Enum):
    DC = 'dc'
    COSINE = 'cos'
    SINE = 'sin'


def coefficient_key(harmonic: int, kind: CoefficientKind) -> str:
    """Legacy string id used by presets and the read view: cos0, cos3, sin3."""
    prefix = 'sin' if kind is CoefficientKind.SINE else 'cos'
    return f"{prefix}{harmonic}"


def parse_number(value) -> Optional[float]:
    """Parse user input into a finite float, or None if it can't be used."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


@dataclass
class HarmonicCoefficient:
    kind: CoefficientKind
    harmonic: int
    amplitude: float = 0.0
    label: str = ''

    @property
    def key(self) -> str:
        return coefficient_key(self.harmonic, self.kind)


@dataclass
class SynthesisConfig:
    """Global synthesis settings. Mutated by the user and by auto-adjust."""
    fundamental_hz: float = DEFAULT_FUNDAMENTAL
    harmonic_count: int = DEFAULT_HARMONICS
    max_harmonics: int = MAX_HARMONICS_DEFAULT
    periods: int = PERIODS_DEFAULT
    gain: float = field(default_factory=lambda: get_profile().default_gain)
    auto_adjust: bool = False


@dataclass
class DisplayOptions:
    """Renderer flags. Carried in presets, never read by the core math."""
    hide_dividers: bool = False
    hide_endpoints: bool = False
    hide_graph: bool = False
    hide_grid_dots: bool = False
    hide_offset: bool = False
    line_width: int = LINE_WIDTH_DEFAULT

    def set_line_width(self, value) -> int:
        number = parse_number(value)
        if number is not None:
            self.line_width = max(LINE_WIDTH_MIN, min(int(number), LINE_WIDTH_MAX))
        return self.line_width


class HarmonicTable:
    """
    DC + cosine/sine coefficients for harmonics 1..H.

    Storage is two lists indexed by harmonic number:
      _cos[0] is the DC term, _cos[h] / _sin[h] the pair for harmonic h.
      _sin[0] is a placeholder and never holds a coefficient.
    """

    def __init__(self, config: Optional[SynthesisConfig] = None,
                 profile: Optional[SynthProfile] = None,
                 dc_label: str = LABELS['dc'],
                 cos_prefix: str = LABELS['cos_prefix'],
                 sin_prefix: str = LABELS['sin_prefix']):
        self.profile = profile or get_profile()
        self.config = config or SynthesisConfig(gain=self.profile.default_gain)
        self.dc_label = dc_label
        self.cos_prefix = cos_prefix
        self.sin_prefix = sin_prefix

        self._cos: List[HarmonicCoefficient] = []
        self._sin: List[Optional[HarmonicCoefficient]] = []

        # Apply bounds to initial settings, then build the table
        self.config.fundamental_hz = max(FREQ_MIN, min(float(self.config.fundamental_hz), FREQ_MAX))
        self.config.max_harmonics = max(1, min(int(self.config.max_harmonics),
                                               self.profile.max_harmonics_limit))
        self.config.periods = self.profile.clamp_periods(self.config.periods)
        self.config.gain = self.profile.clamp_gain(self.config.gain)
        requested = self.config.harmonic_count
        self.config.harmonic_count = 0
        self.set_harmonic_count(requested)

    # === Bounds ===

    def max_harmonic_count(self) -> int:
        """Highest legal H for the current fundamental and ceiling."""
        by_frequency = int(math.floor(FREQ_MAX / self.config.fundamental_hz))
        return max(1, min(by_frequency, self.config.max_harmonics))

    @property
    def harmonic_count(self) -> int:
        return self.config.harmonic_count

    @property
    def fundamental(self) -> float:
        return self.config.fundamental_hz

    # === Mutation ===

    def set_harmonic_count(self, count) -> int:
        """
        Clamp count to [1, max legal] and resize the table.
        Shrinking deletes the upper pairs, growing appends zeroed pairs.
        Returns the count actually used.
        """
        number = parse_number(count)
        if number is None:
            return self.config.harmonic_count

        new_count = max(1, min(int(number), self.max_harmonic_count()))
        old_count = self.config.harmonic_count

        if new_count < old_count:
            del self._cos[new_count + 1:]
            del self._sin[new_count + 1:]
        elif new_count > old_count:
            self._add_harmonics(len(self._cos), new_count)

        self.config.harmonic_count = new_count
        if new_count != old_count:
            log.debug("[CORE] harmonics %d -> %d", old_count, new_count)
        return new_count

    def _add_harmonics(self, first: int, last: int):
        for harmonic in range(first, last + 1):
            if harmonic == 0:
                self._cos.append(HarmonicCoefficient(CoefficientKind.DC, 0, 0.0, self.dc_label))
                self._sin.append(None)
            else:
                self._cos.append(HarmonicCoefficient(
                    CoefficientKind.COSINE, harmonic, 0.0, self._label(self.cos_prefix, harmonic)))
                self._sin.append(HarmonicCoefficient(
                    CoefficientKind.SINE, harmonic, 0.0, self._label(self.sin_prefix, harmonic)))

    @staticmethod
    def _label(prefix: str, harmonic: int) -> str:
        return f"{prefix}{harmonic}"

    def set_fundamental(self, hz) -> float:
        """Clamp to [FREQ_MIN, FREQ_MAX] and drop harmonics above FREQ_MAX."""
        number = parse_number(hz)
        if number is None:
            log.debug("[CORE] rejected fundamental %r", hz)
            return self.config.fundamental_hz

        self.config.fundamental_hz = max(FREQ_MIN, min(number, FREQ_MAX))
        if self.max_harmonic_count() < self.config.harmonic_count:
            self.set_harmonic_count(self.max_harmonic_count())
        return self.config.fundamental_hz

    def set_max_harmonics(self, value) -> int:
        """Set the harmonic ceiling, shrinking the table if needed."""
        number = parse_number(value)
        if number is None:
            return self.config.max_harmonics

        self.config.max_harmonics = max(1, min(int(number), self.profile.max_harmonics_limit))
        if self.config.max_harmonics < self.config.harmonic_count:
            self.set_harmonic_count(self.config.max_harmonics)
        return self.config.max_harmonics

    def set_amplitude(self, harmonic: int, kind: CoefficientKind, value) -> bool:
        """
        Set one amplitude, clamped to the control range.
        Returns False (value unchanged) for empty or non-numeric input.
        """
        coefficient = self.coefficient(harmonic, kind)
        number = parse_number(value)
        if number is None:
            log.debug("[CORE] rejected amplitude %r for %s", value, coefficient.key)
            return False
        coefficient.amplitude = self.profile.clamp_amplitude(number)
        return True

    def set_dc(self, value) -> bool:
        return self.set_amplitude(0, CoefficientKind.DC, value)

    def set_gain(self, value) -> float:
        number = parse_number(value)
        if number is not None:
            self.config.gain = self.profile.clamp_gain(number)
        return self.config.gain

    def set_periods(self, value) -> int:
        number = parse_number(value)
        if number is not None:
            self.config.periods = self.profile.clamp_periods(number)
        return self.config.periods

    def reset_one(self, harmonic: int, kind: CoefficientKind):
        self.coefficient(harmonic, kind).amplitude = 0.0

    def reset_all(self):
        """Zero every amplitude and restore the default gain."""
        for coefficient in self:
            coefficient.amplitude = 0.0
        self.config.gain = self.profile.default_gain

    def set_labels(self, dc_label: Optional[str] = None,
                   cos_prefix: Optional[str] = None,
                   sin_prefix: Optional[str] = None):
        if dc_label is not None:
            self.dc_label = dc_label
        if cos_prefix is not None:
            self.cos_prefix = cos_prefix
        if sin_prefix is not None:
            self.sin_prefix = sin_prefix
        for coefficient in self:
            if coefficient.kind is CoefficientKind.DC:
                coefficient.label = self.dc_label
            elif coefficient.kind is CoefficientKind.COSINE:
                coefficient.label = self._label(self.cos_prefix, coefficient.harmonic)
            else:
                coefficient.label = self._label(self.sin_prefix, coefficient.harmonic)

    # === Access ===

    def coefficient(self, harmonic: int, kind: CoefficientKind) -> HarmonicCoefficient:
        if kind is CoefficientKind.DC:
            if harmonic != 0:
                raise KeyError(coefficient_key(harmonic, kind))
            return self._cos[0]
        if not 1 <= harmonic <= self.config.harmonic_count:
            raise KeyError(coefficient_key(harmonic, kind))
        if kind is CoefficientKind.COSINE:
            return self._cos[harmonic]
        return self._sin[harmonic]

    def amplitude(self, harmonic: int, kind: CoefficientKind) -> float:
        return self.coefficient(harmonic, kind).amplitude

    @property
    def dc(self) -> float:
        return self._cos[0].amplitude

    def __iter__(self):
        """DC first, then cos1, sin1, cos2, sin2, ..."""
        yield self._cos[0]
        for harmonic in range(1, len(self._cos)):
            yield self._cos[harmonic]
            yield self._sin[harmonic]

    def rows(self) -> Dict[str, dict]:
        """Read view for control rows: key -> {label, amplitude}."""
        return {c.key: {'label': c.label, 'amplitude': c.amplitude} for c in self}

    def cos_amplitudes(self) -> np.ndarray:
        """Cosine amplitudes indexed by harmonic; index 0 is DC."""
        return np.array([c.amplitude for c in self._cos], dtype=np.float64)

    def sin_amplitudes(self) -> np.ndarray:
        """Sine amplitudes indexed by harmonic; index 0 is always 0."""
        values = [0.0] + [s.amplitude for s in self._sin[1:]]
        return np.array(values, dtype=np.float64)
