"""
Main Frame - Combines all components

Header (toggles and global settings), waveform graph, harmonic controls.
All state lives in SynthController; widgets only forward edits and mirror
the controller's signals.
"""

from PyQt5.QtWidgets import (QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
                             QPushButton, QLabel, QLineEdit, QSlider, QShortcut)
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QFont, QKeySequence

from fourier_synth.config import (
    FREQ_MAX, FREQ_MIN, LABELS, LINE_WIDTH_MAX, LINE_WIDTH_MIN, SIZES,
    format_gain, map_gain, unmap_gain,
)
from fourier_synth.gui.controllers import PresetController, SynthController
from fourier_synth.gui.console_panel import ConsolePanel
from fourier_synth.gui.harmonic_panel import HarmonicPanel
from fourier_synth.gui.theme import COLORS, FONT_FAMILY, FONT_SIZES, button_style, field_style, slider_style
from fourier_synth.gui.waveform_display import WaveformDisplay
from fourier_synth.gui.widgets import DragValue
from fourier_synth.utils.logger import logger

# Display toggles: (label key, DisplayOptions flag). Buttons read "shown" when checked.
DISPLAY_TOGGLES = [
    ('graph', 'hide_graph'),
    ('dividers', 'hide_dividers'),
    ('endpoints', 'hide_endpoints'),
    ('grid_dots', 'hide_grid_dots'),
    ('offset', 'hide_offset'),
]


class MainFrame(QMainWindow):
    """Main application window."""

    def __init__(self, controller: SynthController = None):
        super().__init__()

        self.setWindowTitle(LABELS['title'])
        self.setMinimumSize(*SIZES['window_min'])
        self.resize(*SIZES['window_default'])

        self.controller = controller or SynthController()
        self.preset_controller = PresetController(self, self.controller)
        self._drawn = False

        self.setup_ui()
        self.preset_controller.setup_menu()
        self._connect_controller()

    # === Layout ===

    def setup_ui(self):
        central = QWidget()
        central.setStyleSheet(f"background-color: {COLORS['background']}; color: {COLORS['text']};")
        self.setCentralWidget(central)

        layout = QVBoxLayout(central)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(6)

        title = QLabel(LABELS['title'])
        title.setFont(QFont(FONT_FAMILY, FONT_SIZES['title'], QFont.Bold))
        title.setStyleSheet(f"color: {COLORS['text_bright']};")
        layout.addWidget(title)

        layout.addWidget(self.create_header())

        content = QHBoxLayout()
        content.setSpacing(0)
        layout.addLayout(content, stretch=1)

        synth_area = QVBoxLayout()
        synth_area.setSpacing(6)
        content.addLayout(synth_area, stretch=1)

        self.display = WaveformDisplay()
        synth_area.addWidget(self.display, stretch=3)

        self.harmonic_panel = HarmonicPanel()
        self.harmonic_panel.setMinimumHeight(2 * SIZES['slider_height'] + 120)
        synth_area.addWidget(self.harmonic_panel, stretch=2)

        self.console_panel = ConsolePanel()
        content.addWidget(self.console_panel)

        console_shortcut = QShortcut(QKeySequence("Ctrl+`"), self)
        console_shortcut.activated.connect(self.console_panel.toggle_panel)

    def _labeled(self, key, widget):
        box = QWidget()
        row = QHBoxLayout(box)
        row.setContentsMargins(0, 0, 0, 0)
        row.setSpacing(4)
        label = QLabel(LABELS[key])
        label.setFont(QFont(FONT_FAMILY, FONT_SIZES['label']))
        row.addWidget(label)
        row.addWidget(widget)
        return box

    def _toggle(self, key, checked=False):
        button = QPushButton(LABELS[key])
        button.setCheckable(True)
        button.setChecked(checked)
        button.setStyleSheet(button_style(checkable=True))
        return button

    def create_header(self):
        table = self.controller.table
        config = self.controller.config
        profile = self.controller.profile

        header = QWidget()
        row = QHBoxLayout(header)
        row.setContentsMargins(0, 0, 0, 0)
        row.setSpacing(10)

        self.audio_button = self._toggle('audio')
        self.audio_button.setToolTip(LABELS['audio_tooltip'])
        self.audio_button.toggled.connect(self.controller.set_audio_enabled)
        row.addWidget(self.audio_button)

        self.auto_adjust_button = self._toggle('auto_adjust', config.auto_adjust)
        self.auto_adjust_button.toggled.connect(self._on_auto_adjust_toggled)
        row.addWidget(self.auto_adjust_button)

        self.fundamental_field = QLineEdit(f"{table.fundamental:g}")
        self.fundamental_field.setFixedWidth(70)
        self.fundamental_field.setStyleSheet(field_style())
        self.fundamental_field.setToolTip(f"{FREQ_MIN:g}-{FREQ_MAX:g} Hz")
        self.fundamental_field.editingFinished.connect(self._on_fundamental_edited)
        row.addWidget(self._labeled('fundamental', self.fundamental_field))

        self.harmonics_value = DragValue(table.harmonic_count, 1, table.max_harmonic_count())
        self.harmonics_value.value_changed.connect(self.controller.set_harmonic_count)
        row.addWidget(self._labeled('harmonics', self.harmonics_value))

        self.periods_value = DragValue(config.periods, profile.periods_min, profile.periods_max)
        self.periods_value.value_changed.connect(self.controller.set_periods)
        row.addWidget(self._labeled('periods', self.periods_value))

        self.line_width_value = DragValue(self.controller.display.line_width,
                                          LINE_WIDTH_MIN, LINE_WIDTH_MAX)
        self.line_width_value.value_changed.connect(self.controller.set_line_width)
        row.addWidget(self._labeled('line_width', self.line_width_value))

        self.gain_slider = QSlider(Qt.Vertical)
        self.gain_slider.setRange(0, 1000)
        self.gain_slider.setFixedHeight(48)
        self.gain_slider.setStyleSheet(slider_style())
        self.gain_slider.setValue(int(round(unmap_gain(config.gain, profile) * 1000)))
        self.gain_slider.valueChanged.connect(self._on_gain_slider)
        self.gain_label = QLabel(format_gain(config.gain))
        self.gain_label.setFixedWidth(70)
        gain_box = self._labeled('gain', self.gain_slider)
        gain_box.layout().addWidget(self.gain_label)
        row.addWidget(gain_box)

        self.display_buttons = {}
        for key, flag in DISPLAY_TOGGLES:
            button = self._toggle(key, not getattr(self.controller.display, flag))
            button.toggled.connect(lambda shown, f=flag: self.controller.set_display_flag(f, not shown))
            self.display_buttons[flag] = button
            row.addWidget(button)

        row.addStretch(1)

        reset_button = QPushButton(LABELS['reset'])
        reset_button.setStyleSheet(button_style())
        reset_button.clicked.connect(self.controller.reset_all)
        row.addWidget(reset_button)

        self.console_button = QPushButton(">_")
        self.console_button.setToolTip("Console (Ctrl+`)")
        self.console_button.setStyleSheet(button_style())
        self.console_button.clicked.connect(lambda: self.console_panel.toggle_panel())
        row.addWidget(self.console_button)

        return header

    # === Controller wiring ===

    def _connect_controller(self):
        c = self.controller
        c.waveform_ready.connect(lambda samples: self.display.set_samples(samples, c.table.dc))
        c.structure_changed.connect(self._on_structure_changed)
        c.values_changed.connect(lambda: self.harmonic_panel.sync(c.table))
        c.settings_changed.connect(self._sync_header)

        self.display.resized.connect(c.on_resize)
        self.harmonic_panel.amplitude_edited.connect(self._on_amplitude_edited)
        self.harmonic_panel.reset_requested.connect(c.reset_one)

        self.harmonic_panel.rebuild(c.table)
        self.display.set_layout(c.display, c.table.harmonic_count, c.config.periods)

    def showEvent(self, event):
        super().showEvent(event)
        if not self._drawn:
            self._drawn = True
            self.controller.set_canvas_size(self.display.width(), self.display.height())
            self.controller.initial_draw()
            logger.info("Window shown", component="APP")

    def _on_structure_changed(self):
        self.harmonic_panel.rebuild(self.controller.table)

    def _sync_header(self):
        """Mirror controller state into header widgets without feedback loops."""
        c = self.controller
        table, config = c.table, c.config

        self.fundamental_field.setText(f"{table.fundamental:g}")
        self.harmonics_value.set_range(1, table.max_harmonic_count())
        self.harmonics_value.set_value(table.harmonic_count)
        self.periods_value.set_value(config.periods)
        self.line_width_value.set_value(c.display.line_width)

        self.gain_slider.blockSignals(True)
        self.gain_slider.setValue(int(round(unmap_gain(config.gain, c.profile) * 1000)))
        self.gain_slider.blockSignals(False)
        self.gain_label.setText(format_gain(config.gain))

        self.auto_adjust_button.blockSignals(True)
        self.auto_adjust_button.setChecked(config.auto_adjust)
        self.auto_adjust_button.blockSignals(False)

        for flag, button in self.display_buttons.items():
            button.blockSignals(True)
            button.setChecked(not getattr(c.display, flag))
            button.blockSignals(False)

        self.display.set_layout(c.display, table.harmonic_count, config.periods)
        self.harmonic_panel.sync(table)

    # === Edits ===

    def _on_amplitude_edited(self, harmonic, kind, value):
        self.controller.set_amplitude(harmonic, kind, value)
        # Rejected or clamped input shows what the table holds
        self.harmonic_panel.sync_one(self.controller.table, harmonic, kind)

    def _on_fundamental_edited(self):
        self.controller.set_fundamental(self.fundamental_field.text())
        self.fundamental_field.setText(f"{self.controller.table.fundamental:g}")

    def _on_gain_slider(self, position):
        self.controller.set_gain(map_gain(position / 1000.0, self.controller.profile))

    def _on_auto_adjust_toggled(self, enabled):
        self.controller.set_auto_adjust(enabled)
        self.harmonic_panel.sync(self.controller.table)
