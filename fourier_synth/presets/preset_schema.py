"""
Preset schema definition and validation.

File shape:
    {
        "source": "fourier-synth",
        "version": "1.2.0",
        "config": {"autoAdjust": ..., "fundamental": ..., "gain": ..., ...},
        "fourierData": {"cos0": ..., "cos1": ..., "sin1": ..., ...}
    }

fourierData values are amplitudes divided by the control range, so they
lie in [-1, 1]. Validation checks types only; out-of-range numbers are
clamped when the preset is applied to a table.
"""

import re
from dataclasses import dataclass, field
from typing import Optional

from fourier_synth import __title__, __version__
from fourier_synth.config import (
    DEFAULT_FUNDAMENTAL,
    DEFAULT_HARMONICS,
    GAIN_DEFAULT,
    LINE_WIDTH_DEFAULT,
    PERIODS_DEFAULT,
)

PRESET_SOURCE = __title__
PRESET_VERSION = __version__

COEFFICIENT_KEY = re.compile(r"^(cos|sin)(\d+)$")

# camelCase keys on disk -> field names
_CONFIG_KEYS = {
    "autoAdjust": "auto_adjust",
    "fundamental": "fundamental",
    "gain": "gain",
    "harmonics": "harmonics",
    "hideDividers": "hide_dividers",
    "hideEndpoints": "hide_endpoints",
    "hideGraph": "hide_graph",
    "hideGridDots": "hide_grid_dots",
    "hideOffset": "hide_offset",
    "lineWidth": "line_width",
    "periods": "periods",
}


@dataclass
class ConfigState:
    """User options saved with a preset."""
    auto_adjust: bool = False
    fundamental: float = DEFAULT_FUNDAMENTAL
    gain: float = GAIN_DEFAULT
    harmonics: int = DEFAULT_HARMONICS
    hide_dividers: bool = False
    hide_endpoints: bool = False
    hide_graph: bool = False
    hide_grid_dots: bool = False
    hide_offset: bool = False
    line_width: int = LINE_WIDTH_DEFAULT
    periods: int = PERIODS_DEFAULT

    def to_dict(self) -> dict:
        return {key: getattr(self, attr) for key, attr in _CONFIG_KEYS.items()}

    @classmethod
    def from_dict(cls, data: dict, base: Optional["ConfigState"] = None) -> "ConfigState":
        """Keys missing from data keep the value from base (or the default)."""
        state = base or cls()
        kwargs = {}
        for key, attr in _CONFIG_KEYS.items():
            value = data.get(key)
            kwargs[attr] = getattr(state, attr) if value is None else value
        return cls(**kwargs)


@dataclass
class PresetState:
    source: str = PRESET_SOURCE
    version: str = PRESET_VERSION
    name: str = "Untitled"
    config: ConfigState = field(default_factory=ConfigState)
    fourier_data: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "source": self.source,
            "version": self.version,
            "config": self.config.to_dict(),
            "fourierData": dict(self.fourier_data),
        }

    @classmethod
    def from_dict(cls, data: dict, name: str = "Untitled") -> "PresetState":
        return cls(
            source=data.get("source", ""),
            version=str(data.get("version", "")),
            name=name,
            config=ConfigState.from_dict(data.get("config") or {}),
            fourier_data={
                key: float(value)
                for key, value in (data.get("fourierData") or {}).items()
                if COEFFICIENT_KEY.match(key)
            },
        )

    def highest_harmonic(self) -> int:
        """Largest harmonic index present in fourier_data."""
        highest = 0
        for key in self.fourier_data:
            match = COEFFICIENT_KEY.match(key)
            if match:
                highest = max(highest, int(match.group(2)))
        return highest


_BOOL_KEYS = ("autoAdjust", "hideDividers", "hideEndpoints",
              "hideGraph", "hideGridDots", "hideOffset")


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_preset(data: dict) -> tuple:
    """
    Validate preset data.

    Returns:
        (is_valid, errors)
    """
    errors = []

    if not isinstance(data, dict):
        return False, ["preset must be a JSON object"]

    if data.get("source") != PRESET_SOURCE:
        errors.append(f"source must be '{PRESET_SOURCE}', got {data.get('source')!r}")

    fourier_data = data.get("fourierData")
    if not isinstance(fourier_data, dict) or not fourier_data:
        errors.append("fourierData must be a non-empty object")
    else:
        for key, value in fourier_data.items():
            if not COEFFICIENT_KEY.match(key):
                continue
            if key == "sin0":
                errors.append("sin0 is not a valid coefficient")
            elif not _is_number(value):
                errors.append(f"fourierData.{key} must be a number, got {value!r}")

    config = data.get("config", {})
    if not isinstance(config, dict):
        errors.append("config must be an object")
        config = {}

    for key in ("fundamental", "gain", "harmonics", "periods", "lineWidth"):
        value = config.get(key)
        if value is not None and not _is_number(value):
            errors.append(f"config.{key} must be a number, got {value!r}")

    for key in _BOOL_KEYS:
        value = config.get(key)
        if value is not None and not isinstance(value, bool):
            errors.append(f"config.{key} must be true or false, got {value!r}")

    return len(errors) == 0, errors
