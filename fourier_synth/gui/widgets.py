"""
Reusable UI Widgets
Atomic components with no business logic - just behavior
"""

from PyQt5.QtWidgets import QSlider, QLabel, QApplication
from PyQt5.QtCore import Qt, pyqtSignal, QPoint
from PyQt5.QtGui import QFont

from fourier_synth.config import format_amplitude
from .theme import slider_style_center_notch, DRAG_SENSITIVITY, COLORS, MONO_FONT, FONT_SIZES


class ValuePopup(QLabel):
    """
    Floating popup that displays a value near a slider handle.
    Shows during drag, hides on release.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setFont(QFont(MONO_FONT, FONT_SIZES['small']))
        self.setStyleSheet(f"""
            QLabel {{
                background-color: {COLORS['background_highlight']};
                color: {COLORS['text_bright']};
                border: 1px solid {COLORS['border_light']};
                border-radius: 3px;
                padding: 2px 5px;
            }}
        """)
        self.setAlignment(Qt.AlignCenter)
        self.hide()
        self.setWindowFlags(Qt.ToolTip)
        self.setAttribute(Qt.WA_TransparentForMouseEvents)

    def show_value(self, text, global_pos):
        """Show popup with text at position."""
        self.setText(text)
        self.adjustSize()
        self.move(global_pos.x() + 15, global_pos.y() - self.height() // 2)
        self.show()
        self.raise_()

    def hide_value(self):
        """Hide the popup."""
        self.hide()


class AmplitudeSlider(QSlider):
    """
    Vertical bipolar slider with click+drag anywhere behavior.
    Drag up = increase, drag down = decrease. Shift = fine control.
    Double-click resets to 0.

    Integer steps of AMPLITUDE_STEP: range +/- control_range * 10.
    """

    # Emits the amplitude (not the raw slider step)
    amplitudeDragged = pyqtSignal(float)

    def __init__(self, control_range=100.0, parent=None):
        super().__init__(Qt.Vertical, parent)
        self._steps_per_unit = 10
        self.setMinimum(int(-control_range * self._steps_per_unit))
        self.setMaximum(int(control_range * self._steps_per_unit))
        self.setValue(0)
        self.setStyleSheet(slider_style_center_notch())

        self.dragging = False
        self.drag_start_y = 0
        self.drag_start_value = 0
        self._popup = None

    def amplitude(self):
        return self.value() / self._steps_per_unit

    def set_amplitude(self, amplitude):
        """Set position without emitting amplitudeDragged."""
        self.blockSignals(True)
        self.setValue(int(round(amplitude * self._steps_per_unit)))
        self.blockSignals(False)

    def _get_handle_global_pos(self):
        """Calculate global position of slider handle."""
        groove_margin = 5
        available_height = self.height() - 2 * groove_margin
        value_ratio = (self.value() - self.minimum()) / (self.maximum() - self.minimum())
        handle_y = groove_margin + (1.0 - value_ratio) * available_height
        return self.mapToGlobal(QPoint(self.width(), int(handle_y)))

    def _update_popup(self):
        if self._popup is None:
            self._popup = ValuePopup()
        self._popup.show_value(format_amplitude(self.amplitude()), self._get_handle_global_pos())

    def mousePressEvent(self, event):
        """Start drag from current value."""
        if not self.isEnabled():
            return
        if event.button() == Qt.LeftButton:
            self.dragging = True
            self.drag_start_y = event.globalPos().y()
            self.drag_start_value = self.value()
            self._update_popup()

    def mouseMoveEvent(self, event):
        """Drag distance relative to slider height; Shift = 3x finer."""
        if not self.isEnabled() or not self.dragging:
            return
        modifiers = QApplication.keyboardModifiers()
        travel = self.height() * (3.0 if modifiers & Qt.ShiftModifier else 1.0)

        delta_y = self.drag_start_y - event.globalPos().y()
        value_range = self.maximum() - self.minimum()
        new_value = self.drag_start_value + int((delta_y / travel) * value_range)
        new_value = max(self.minimum(), min(self.maximum(), new_value))

        if new_value != self.value():
            self.setValue(new_value)
            self.amplitudeDragged.emit(self.amplitude())
            self._update_popup()

    def mouseReleaseEvent(self, event):
        """End drag."""
        if event.button() == Qt.LeftButton:
            self.dragging = False
            if self._popup:
                self._popup.hide_value()

    def mouseDoubleClickEvent(self, event):
        """Reset to 0 on double-click."""
        if self.isEnabled():
            self.setValue(0)
            self.amplitudeDragged.emit(0.0)
        super().mouseDoubleClickEvent(event)


class DragValue(QLabel):
    """
    Label that supports click+drag to change integer value.
    Drag up = increase, drag down = decrease.
    Shift = fine control.

    Uses value_normal/value_fine sensitivity (pixels per unit).
    """

    value_changed = pyqtSignal(int)

    def __init__(self, initial_value=0, min_val=0, max_val=100, fmt="{}", parent=None):
        super().__init__(parent)
        self._value = initial_value
        self.min_val = min_val
        self.max_val = max_val
        self.fmt = fmt

        self.dragging = False
        self.drag_start_y = 0
        self.drag_start_value = 0

        self.setAlignment(Qt.AlignCenter)
        self.setFont(QFont(MONO_FONT, FONT_SIZES['label']))
        self.setStyleSheet(f"""
            QLabel {{
                background-color: {COLORS['background_dark']};
                color: {COLORS['text_bright']};
                border: 1px solid {COLORS['border']};
                border-radius: 2px;
                padding: 1px 4px;
            }}
        """)
        self.setCursor(Qt.SizeVerCursor)
        self._update_display()

    def _update_display(self):
        self.setText(self.fmt.format(self._value))

    def value(self):
        return self._value

    def set_value(self, value):
        """Set value programmatically (no signal)."""
        self._value = max(self.min_val, min(self.max_val, int(value)))
        self._update_display()

    def set_range(self, min_val, max_val):
        self.min_val = min_val
        self.max_val = max_val
        self.set_value(self._value)

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton:
            self.dragging = True
            self.drag_start_y = event.globalPos().y()
            self.drag_start_value = self._value

    def mouseMoveEvent(self, event):
        if self.dragging:
            modifiers = QApplication.keyboardModifiers()
            if modifiers & Qt.ShiftModifier:
                pixels_per_unit = DRAG_SENSITIVITY['value_fine']
            else:
                pixels_per_unit = DRAG_SENSITIVITY['value_normal']

            delta_y = self.drag_start_y - event.globalPos().y()
            new_value = int(self.drag_start_value + delta_y / pixels_per_unit)
            new_value = max(self.min_val, min(self.max_val, new_value))

            if new_value != self._value:
                self._value = new_value
                self._update_display()
                self.value_changed.emit(self._value)

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.LeftButton:
            self.dragging = False
