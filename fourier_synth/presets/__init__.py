"""
Presets module - save/load synth state as JSON.
"""

from .preset_schema import (
    ConfigState,
    PresetState,
    validate_preset,
    PRESET_SOURCE,
    PRESET_VERSION,
)

from .preset_manager import (
    PresetManager,
    PresetError,
    collect_state,
    apply_state,
)

__all__ = [
    "ConfigState",
    "PresetState",
    "validate_preset",
    "PRESET_SOURCE",
    "PRESET_VERSION",
    "PresetManager",
    "PresetError",
    "collect_state",
    "apply_state",
]
