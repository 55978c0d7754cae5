"""
PresetController - Handles preset open/save dialogs.
"""
from __future__ import annotations

from pathlib import Path

from PyQt5.QtWidgets import QFileDialog, QMessageBox
from PyQt5.QtGui import QKeySequence

from fourier_synth import __title__
from fourier_synth.presets import PresetError, PresetManager
from fourier_synth.utils.logger import logger


class PresetController:
    """Handles preset save/load for the main frame."""

    def __init__(self, main_frame, synth_controller, preset_manager: PresetManager | None = None):
        self.main = main_frame
        self.synth = synth_controller
        self.preset_manager = preset_manager or PresetManager()
        self._last_path: Path | None = None

    def setup_menu(self):
        """Create File menu in menu bar."""
        menu_bar = self.main.menuBar()
        file_menu = menu_bar.addMenu("File")

        open_action = file_menu.addAction("Open...", self.open_preset)
        open_action.setShortcut(QKeySequence("Ctrl+O"))

        save_action = file_menu.addAction("Save...", self.save_preset)
        save_action.setShortcut(QKeySequence("Ctrl+S"))

        file_menu.addSeparator()

        reset_action = file_menu.addAction("Reset", self.synth.reset_all)
        reset_action.setShortcut(QKeySequence("Ctrl+N"))

    def save_preset(self):
        """Save current state; the dialog remembers the last file name."""
        default_path = self._last_path or self.preset_manager.presets_dir / f"{__title__}.json"
        filepath, _ = QFileDialog.getSaveFileName(
            self.main,
            "Save",
            str(default_path),
            "Fourier Synth Files (*.json)",
        )
        if not filepath:
            return
        if not filepath.endswith('.json'):
            filepath += '.json'
        path = Path(filepath)

        state = self.synth.preset_state()
        state.name = path.stem
        try:
            self.preset_manager.write_preset_file(path, state)
        except PresetError as e:
            logger.error("Save failed", component="PRESET", details=str(e))
            QMessageBox.warning(self.main, "Save failed", str(e))
            return
        self._last_path = path
        logger.preset(f"Saved {path.name}")

    def open_preset(self):
        filepath, _ = QFileDialog.getOpenFileName(
            self.main,
            "Open",
            str(self._last_path or self.preset_manager.presets_dir),
            "Fourier Synth Files (*.json)",
        )
        if not filepath:
            return
        self.load_path(Path(filepath))

    def load_path(self, path: Path) -> bool:
        try:
            state = self.preset_manager.load(path)
        except PresetError as e:
            logger.error("Open failed", component="PRESET", details=str(e))
            QMessageBox.warning(self.main, "Open failed", str(e))
            return False
        self.synth.apply_preset(state)
        self._last_path = path
        return True
