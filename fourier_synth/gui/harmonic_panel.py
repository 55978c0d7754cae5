"""
Harmonic Panel - one control column per coefficient.

Layout (columns scroll horizontally):
    Cos   DC  A1  A2  ...
              f1  f2  ...     harmonic frequency
    Sin       B1  B2  ...

Each control is a label, a vertical bipolar slider, an entry field and a
clear button. The panel holds no amplitudes of its own; it re-reads the
table after every edit so clamped or rejected input shows the stored value.
"""

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QGridLayout, QLabel, QLineEdit, QPushButton,
    QScrollArea, QFrame
)
from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QFont

from fourier_synth.config import LABELS, SIZES, format_amplitude, format_frequency
from fourier_synth.core.harmonic_table import CoefficientKind
from .theme import COLORS, FONT_FAMILY, FONT_SIZES, MONO_FONT, button_style, field_style
from .widgets import AmplitudeSlider


_ACCENTS = {
    CoefficientKind.DC: COLORS['dc'],
    CoefficientKind.COSINE: COLORS['cos'],
    CoefficientKind.SINE: COLORS['sin'],
}


class AmplitudeControl(QWidget):
    """Label + slider + field + clear button for one coefficient."""

    edited = pyqtSignal(int, object, object)    # harmonic, kind, float or raw text
    reset_requested = pyqtSignal(int, object)   # harmonic, kind

    def __init__(self, coefficient, control_range, parent=None):
        super().__init__(parent)
        self.harmonic = coefficient.harmonic
        self.kind = coefficient.kind
        self.setFixedWidth(SIZES['column_width'])

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(2)

        self.label = QLabel(coefficient.label)
        self.label.setAlignment(Qt.AlignCenter)
        self.label.setFont(QFont(FONT_FAMILY, FONT_SIZES['small'], QFont.Bold))
        self.label.setStyleSheet(f"color: {_ACCENTS[self.kind]};")
        layout.addWidget(self.label)

        self.slider = AmplitudeSlider(control_range)
        self.slider.setFixedSize(SIZES['slider_width'], SIZES['slider_height'])
        self.slider.amplitudeDragged.connect(
            lambda value: self.edited.emit(self.harmonic, self.kind, value))
        layout.addWidget(self.slider, alignment=Qt.AlignHCenter)

        self.field = QLineEdit()
        self.field.setFixedWidth(SIZES['field_width'])
        self.field.setAlignment(Qt.AlignRight)
        self.field.setFont(QFont(MONO_FONT, FONT_SIZES['tiny']))
        self.field.setStyleSheet(field_style())
        self.field.editingFinished.connect(
            lambda: self.edited.emit(self.harmonic, self.kind, self.field.text()))
        layout.addWidget(self.field, alignment=Qt.AlignHCenter)

        self.clear_button = QPushButton("X")
        self.clear_button.setFixedSize(*SIZES['clear_button'])
        self.clear_button.setStyleSheet(button_style())
        self.clear_button.clicked.connect(
            lambda: self.reset_requested.emit(self.harmonic, self.kind))
        layout.addWidget(self.clear_button, alignment=Qt.AlignHCenter)

        self.set_amplitude(coefficient.amplitude)

    def set_amplitude(self, value):
        self.slider.set_amplitude(value)
        self.field.setText(format_amplitude(value))

    def set_locked(self, locked):
        """DC is driven by auto-adjust while it is on."""
        self.slider.setEnabled(not locked)
        self.field.setReadOnly(locked)
        self.clear_button.setEnabled(not locked)


class HarmonicPanel(QScrollArea):
    """Scrollable grid of AmplitudeControls."""

    amplitude_edited = pyqtSignal(int, object, object)
    reset_requested = pyqtSignal(int, object)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWidgetResizable(True)
        self.setFrameShape(QFrame.NoFrame)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setStyleSheet(f"background-color: {COLORS['background']};")

        self._controls = {}
        self._frequency_labels = []
        self._container = None

    def rebuild(self, table):
        """Recreate all controls for the table's current harmonic count."""
        self._controls = {}
        self._frequency_labels = []

        container = QWidget()
        grid = QGridLayout(container)
        grid.setContentsMargins(6, 6, 6, 6)
        grid.setHorizontalSpacing(4)
        grid.setVerticalSpacing(6)

        for row, title in ((0, LABELS['cos_title']), (2, LABELS['sin_title'])):
            label = QLabel(title)
            label.setFont(QFont(FONT_FAMILY, FONT_SIZES['section'], QFont.Bold))
            label.setStyleSheet(f"color: {COLORS['text_bright']};")
            grid.addWidget(label, row, 0, alignment=Qt.AlignLeft | Qt.AlignVCenter)

        control_range = table.profile.control_range
        for coefficient in table:
            control = AmplitudeControl(coefficient, control_range)
            control.edited.connect(self.amplitude_edited)
            control.reset_requested.connect(self.reset_requested)
            self._controls[(coefficient.harmonic, coefficient.kind)] = control

            column = coefficient.harmonic + 1
            row = 2 if coefficient.kind is CoefficientKind.SINE else 0
            grid.addWidget(control, row, column, alignment=Qt.AlignTop)

            if coefficient.kind is CoefficientKind.COSINE:
                freq = QLabel()
                freq.setAlignment(Qt.AlignCenter)
                freq.setFont(QFont(MONO_FONT, FONT_SIZES['tiny']))
                freq.setStyleSheet(f"color: {COLORS['text_dim']};")
                grid.addWidget(freq, 1, column)
                self._frequency_labels.append((coefficient.harmonic, freq))

        grid.setColumnStretch(table.harmonic_count + 2, 1)
        self.setWidget(container)
        self._container = container
        self.sync(table)

    def sync(self, table):
        """Refresh values, frequency labels and DC lock from the table."""
        for coefficient in table:
            control = self._controls.get((coefficient.harmonic, coefficient.kind))
            if control is not None:
                control.set_amplitude(coefficient.amplitude)

        for harmonic, label in self._frequency_labels:
            label.setText(format_frequency(harmonic * table.fundamental))

        dc_control = self._controls.get((0, CoefficientKind.DC))
        if dc_control is not None:
            dc_control.set_locked(table.config.auto_adjust)

    def sync_one(self, table, harmonic, kind):
        control = self._controls.get((harmonic, kind))
        if control is not None:
            control.set_amplitude(table.amplitude(harmonic, kind))
