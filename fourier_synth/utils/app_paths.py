"""App path helpers (cross-platform).

SSOT for Fourier Synth data paths.

Environment overrides (useful for portable/dev launches):
- FOURIER_SYNTH_DATA_DIR: base data dir
- FOURIER_SYNTH_PRESET_DIR: explicit preset dir (overrides DATA_DIR/presets)
"""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_data_dir

APP_NAME = "FourierSynth"


def _env_path(name: str) -> Path | None:
    v = os.environ.get(name)
    if not v:
        return None
    return Path(os.path.expanduser(v)).resolve()


def get_app_data_dir() -> Path:
    """Base app data dir."""
    data_dir = _env_path("FOURIER_SYNTH_DATA_DIR")
    if data_dir is not None:
        return data_dir
    return Path(user_data_dir(APP_NAME, appauthor=False, roaming=True)).resolve()


def get_preset_dir() -> Path:
    """Preset dir under the app data dir."""
    preset_dir = _env_path("FOURIER_SYNTH_PRESET_DIR")
    if preset_dir is None:
        preset_dir = get_app_data_dir() / "presets"
    preset_dir.mkdir(parents=True, exist_ok=True)
    return preset_dir
