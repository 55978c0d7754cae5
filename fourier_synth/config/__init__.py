"""
Central Configuration
All constants, profiles, and value mappings in one place
"""

import math
import os
from dataclasses import dataclass

# === HARMONIC CONTROLS ===
# Amplitude sliders run from -CONTROL_RANGE to +CONTROL_RANGE
CONTROL_RANGE = 100.0
AMPLITUDE_STEP = 0.1
AMPLITUDE_DECIMALS = 1

# === FREQUENCY ===
FREQ_MIN = 20.0
FREQ_MAX = 20000.0     # Highest harmonic may not exceed this
DEFAULT_FUNDAMENTAL = 220.0

# === HARMONICS ===
DEFAULT_HARMONICS = 8
MAX_HARMONICS_DEFAULT = 100
MAX_HARMONICS_LIMIT = 1000  # 20Hz fundamental -> 1000 harmonics below 20kHz

# === GAIN ===
GAIN_DEFAULT = math.pow(10, -6 / 20)  # -6dB ~= 0.501
GAIN_DB_FLOOR = -60.0                 # 'db' curve bottom, slider 0 = silence

# === DISPLAY ===
PERIODS_DEFAULT = 3
LINE_WIDTH_MIN = 1
LINE_WIDTH_MAX = 5
LINE_WIDTH_DEFAULT = 3
ENDPOINT_RADIUS = 3
GRID_MIN_SPACING = 10      # px between grid dots
RESIZE_DEBOUNCE_MS = 100

# === AUDIO ===
SAMPLE_RATE = 44100
WAVETABLE_SIZE = 4096

# === LABELS ===
LABELS = {
    'title': 'Fourier Synthesizer',
    'dc': 'DC',
    'cos_prefix': 'A',
    'sin_prefix': 'B',
    'cos_title': 'Cos',
    'sin_title': 'Sin',
    'audio': 'Wave export',
    'audio_tooltip': 'Keep the periodic wave (real/imag coefficients, gain, offset) in sync with the table for a sound sink',
    'auto_adjust': 'Auto-adjust',
    'fundamental': 'Fundamental',
    'harmonics': 'Harmonics',
    'periods': 'Periods',
    'gain': 'Gain',
    'line_width': 'Line width',
    'graph': 'Show graph',
    'dividers': 'Dividers',
    'endpoints': 'Endpoints',
    'grid_dots': 'Grid dots',
    'offset': 'Offset',
    'reset': 'Reset',
}


# === PROFILES ===
# The widget grew several variants over time that differ only in constants.
# They are one implementation parameterised by a profile.

@dataclass(frozen=True)
class SynthProfile:
    name: str
    control_range: float = CONTROL_RANGE
    gain_max: float = 1.0
    gain_curve: str = 'lin'     # 'lin' or 'db' (slider -> gain mapping)
    periods_min: int = 1
    periods_max: int = 5
    default_gain: float = GAIN_DEFAULT
    max_harmonics_limit: int = MAX_HARMONICS_LIMIT
    invert_axis: bool = True    # Canvas y grows downward

    def clamp_amplitude(self, value):
        return max(-self.control_range, min(value, self.control_range))

    def clamp_gain(self, value):
        return max(0.0, min(value, self.gain_max))

    def clamp_periods(self, value):
        return max(self.periods_min, min(int(value), self.periods_max))


PROFILES = {
    'classic': SynthProfile(name='classic'),
    'wide': SynthProfile(name='wide', gain_curve='db', periods_max=10),
}

DEFAULT_PROFILE = 'classic'


def get_profile(name=None):
    """Get profile by name. Falls back to FOURIER_SYNTH_PROFILE, then default."""
    if name is None:
        name = os.environ.get('FOURIER_SYNTH_PROFILE', DEFAULT_PROFILE)
    return PROFILES.get(name, PROFILES[DEFAULT_PROFILE])


# === VALUE MAPPING ===

def map_gain(normalized, profile):
    """
    Map normalized 0-1 slider value to linear gain.
    'lin' is a straight line to gain_max; 'db' spans GAIN_DB_FLOOR..0dB
    relative to gain_max with 0 mapping to silence.
    """
    normalized = max(0.0, min(1.0, normalized))

    if profile.gain_curve == 'db':
        if normalized == 0.0:
            return 0.0
        db = GAIN_DB_FLOOR * (1.0 - normalized)
        return profile.gain_max * math.pow(10, db / 20)

    return profile.gain_max * normalized


def unmap_gain(gain, profile):
    """Inverse of map_gain: convert linear gain back to normalized 0-1."""
    gain = profile.clamp_gain(gain)
    if profile.gain_max <= 0:
        return 0.0

    if profile.gain_curve == 'db':
        if gain <= 0:
            return 0.0
        db = 20 * math.log10(gain / profile.gain_max)
        normalized = 1.0 - db / GAIN_DB_FLOOR
    else:
        normalized = gain / profile.gain_max

    return max(0.0, min(1.0, normalized))


def gain_to_db(gain):
    """Linear gain -> dB. Silence is -inf."""
    if gain <= 0:
        return float('-inf')
    return 20 * math.log10(gain)


def format_gain(gain):
    """Format gain for display in dB."""
    db = gain_to_db(gain)
    if math.isinf(db):
        return "-inf dB"
    return f"{db:.2f} dB"


def format_amplitude(value):
    """Format an amplitude for a control field (one decimal)."""
    return f"{value:.{AMPLITUDE_DECIMALS}f}"


def format_frequency(value):
    """Format a harmonic frequency for display."""
    if value >= 1000:
        return f"{value/1000:.1f}kHz"
    return f"{value:g}Hz"


# === UI SIZES ===
SIZES = {
    'window_min': (900, 600),
    'window_default': (1200, 800),
    'display_min': (300, 150),
    'slider_width': 25,
    'slider_height': 90,
    'field_width': 52,
    'clear_button': (20, 18),
    'column_width': 56,
}
