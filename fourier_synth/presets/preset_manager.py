"""
Preset manager - handles save/load operations.

Writes are atomic: the JSON goes to a temp file in the destination
directory and is committed with os.replace.
"""

import json
import os
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Optional

from fourier_synth.core.harmonic_table import CoefficientKind
from fourier_synth.utils.app_paths import get_preset_dir
from fourier_synth.utils.logger import logger

from .preset_schema import (
    COEFFICIENT_KEY,
    ConfigState,
    PresetState,
    validate_preset,
)


class PresetError(Exception):
    """Raised when preset operations fail."""
    pass


class PresetManager:
    """
    Manages preset save/load operations.

    Usage:
        manager = PresetManager()

        # Save current state
        state = collect_state(table, display_options)
        filepath = manager.save(state, "Square-ish")

        # Load preset
        state = manager.load(filepath)
        apply_state(state, table, display_options)
    """

    def __init__(self, presets_dir: Optional[Path] = None):
        self.presets_dir = Path(presets_dir) if presets_dir else get_preset_dir()
        self.presets_dir.mkdir(parents=True, exist_ok=True)

    def write_preset_file(
        self,
        dest_path: Path,
        preset_state: PresetState,
        *,
        allow_overwrite: bool = True
    ) -> None:
        """
        Write preset to file atomically.

        Args:
            dest_path: Destination file path
            preset_state: PresetState to write
            allow_overwrite: If False, raise PresetError if dest_path exists

        Raises:
            PresetError: If write fails or file exists when allow_overwrite=False
        """
        dest_path = Path(dest_path)

        if not allow_overwrite and dest_path.exists():
            raise PresetError(f"File already exists: {dest_path}")

        dest_path.parent.mkdir(parents=True, exist_ok=True)

        json_str = json.dumps(preset_state.to_dict(), indent=4)

        try:
            fd, temp_path = tempfile.mkstemp(
                suffix='.tmp',
                prefix='.preset_',
                dir=dest_path.parent
            )
            try:
                with os.fdopen(fd, 'w', encoding='utf-8') as f:
                    f.write(json_str)
                os.replace(temp_path, dest_path)
            except Exception:
                try:
                    os.unlink(temp_path)
                except OSError:
                    pass
                raise
        except OSError as e:
            raise PresetError(f"Failed to write preset: {e}")

    def save(self, state: PresetState, name: Optional[str] = None, overwrite: bool = False) -> Path:
        """
        Save preset to file.

        Args:
            state: PresetState to save
            name: Optional filename (without extension). If None, auto-generates.
            overwrite: If True, overwrite existing file. If False, add numeric suffix.

        Returns:
            Path to saved file
        """
        if name:
            state.name = name
            filename = self._sanitize_filename(name) + ".json"
        else:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            filename = f"fourier-synth_{timestamp}.json"
            state.name = Path(filename).stem

        filepath = self.presets_dir / filename

        if filepath.exists() and not overwrite:
            base = filepath.stem
            counter = 1
            while filepath.exists():
                filepath = self.presets_dir / f"{base}_{counter}.json"
                counter += 1

        self.write_preset_file(filepath, state, allow_overwrite=overwrite or not filepath.exists())
        logger.preset(f"Saved {filepath.name}")
        return filepath

    def load(self, filepath: Path) -> PresetState:
        """
        Load preset from file.

        Raises:
            PresetError: If file doesn't exist, is invalid JSON, or fails validation
        """
        filepath = Path(filepath)
        if not filepath.exists():
            raise PresetError(f"Preset file not found: {filepath}")

        try:
            with open(filepath, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise PresetError(f"Invalid JSON in preset file: {e}")
        except IOError as e:
            raise PresetError(f"Failed to read preset file: {e}")

        is_valid, errors = validate_preset(data)
        if not is_valid:
            raise PresetError(f"Invalid preset: {'; '.join(errors)}")

        logger.preset(f"Loaded {filepath.name}")
        return PresetState.from_dict(data, name=filepath.stem)

    def list_presets(self) -> list:
        """Preset files in the presets directory, newest first."""
        presets = list(self.presets_dir.glob("*.json"))
        presets.sort(key=lambda p: p.stat().st_mtime, reverse=True)
        return presets

    def delete(self, filepath: Path) -> bool:
        """Delete a preset file. False if it didn't exist."""
        filepath = Path(filepath)
        if filepath.exists():
            filepath.unlink()
            return True
        return False

    def _sanitize_filename(self, name: str) -> str:
        """Remove invalid filename characters."""
        invalid = '<>:"/\\|?*'
        result = name
        for char in invalid:
            result = result.replace(char, "_")
        return result.strip()


# Convenience functions for integration with the controller

def collect_state(table, display) -> PresetState:
    """
    Collect current state from the harmonic table and display options.

    Args:
        table: HarmonicTable (its config carries the synthesis settings)
        display: DisplayOptions
    """
    config = table.config
    control_range = table.profile.control_range
    return PresetState(
        config=ConfigState(
            auto_adjust=config.auto_adjust,
            fundamental=config.fundamental_hz,
            gain=config.gain,
            harmonics=config.harmonic_count,
            hide_dividers=display.hide_dividers,
            hide_endpoints=display.hide_endpoints,
            hide_graph=display.hide_graph,
            hide_grid_dots=display.hide_grid_dots,
            hide_offset=display.hide_offset,
            line_width=display.line_width,
            periods=config.periods,
        ),
        fourier_data={c.key: c.amplitude / control_range for c in table},
    )


def apply_state(state: PresetState, table, display):
    """
    Apply preset state to the table and display options.

    Frequency and harmonic count go first so the table has room for every
    coefficient in the preset; amplitudes follow.
    """
    config = state.config
    control_range = table.profile.control_range

    table.set_fundamental(config.fundamental)
    table.set_harmonic_count(max(int(config.harmonics), state.highest_harmonic()))

    for key, value in state.fourier_data.items():
        match = COEFFICIENT_KEY.match(key)
        if not match:
            continue
        harmonic = int(match.group(2))
        if match.group(1) == "cos":
            kind = CoefficientKind.DC if harmonic == 0 else CoefficientKind.COSINE
        else:
            kind = CoefficientKind.SINE
        if harmonic > table.harmonic_count or (kind is CoefficientKind.SINE and harmonic == 0):
            logger.debug(f"Skipping {key}: above harmonic limit", component="PRESET")
            continue
        table.set_amplitude(harmonic, kind, value * control_range)

    table.set_gain(config.gain)
    table.set_periods(config.periods)
    table.config.auto_adjust = bool(config.auto_adjust)

    display.hide_dividers = bool(config.hide_dividers)
    display.hide_endpoints = bool(config.hide_endpoints)
    display.hide_graph = bool(config.hide_graph)
    display.hide_grid_dots = bool(config.hide_grid_dots)
    display.hide_offset = bool(config.hide_offset)
    display.set_line_width(config.line_width)
