"""
Waveform Display - QPainter graph of the sampled Fourier waveform.

Draws, back to front:
- grid dots aligned to the fundamental wavelength
- x axis and period divider lines
- DC offset line
- the waveform polyline
- endpoint dots at each period boundary

The display only consumes WaveformSamples; it never evaluates the series.
"""

from PyQt5.QtWidgets import QWidget, QSizePolicy
from PyQt5.QtCore import Qt, pyqtSignal, QPointF
from PyQt5.QtGui import QPainter, QColor, QPen, QPainterPath

from fourier_synth.config import ENDPOINT_RADIUS, GRID_MIN_SPACING, SIZES
from fourier_synth.core.harmonic_table import DisplayOptions
from .theme import COLORS


def grid_spacing(wavelength, harmonics, minimum=GRID_MIN_SPACING):
    """
    Grid size aligned to the wavelength, no smaller than minimum.
    Returns None if no aligned spacing fits (wavelength below minimum).
    """
    if wavelength <= 0:
        return None
    harmonics = max(1, int(harmonics))
    spacing = wavelength / harmonics
    harmonic = min(harmonics, int(wavelength // minimum))
    while spacing < minimum and harmonic > 0:
        spacing = wavelength / harmonic
        harmonic -= 1
    if spacing < minimum:
        return None
    return spacing


class WaveformDisplay(QWidget):
    """The graph area."""

    # Emitted on every resize; the controller debounces
    resized = pyqtSignal(int, int)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setMinimumSize(*SIZES['display_min'])
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)

        self.samples = None
        self.options = DisplayOptions()
        self.harmonics = 1
        self.periods = 1
        self.dc = 0.0

        self._bg = QColor(COLORS['graph_bg'])
        self._axes = QColor(COLORS['graph_axes'])
        self._line = QColor(COLORS['graph_line'])
        self._offset = QColor(COLORS['graph_offset'])

    def set_samples(self, samples, dc=0.0):
        """Replace the plotted waveform."""
        self.samples = samples
        self.dc = dc
        self.update()

    def set_layout(self, options, harmonics, periods):
        """Update background inputs (flags, grid alignment, dividers)."""
        self.options = options
        self.harmonics = harmonics
        self.periods = periods
        self.setVisible(not options.hide_graph)
        self.update()

    def set_colors(self, axes=None, background=None, line=None, offset=None):
        if axes:
            self._axes = QColor(axes)
        if background:
            self._bg = QColor(background)
        if line:
            self._line = QColor(line)
        if offset:
            self._offset = QColor(offset)
        self.update()

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self.resized.emit(self.width(), self.height())

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)

        w = self.width()
        h = self.height()

        painter.fillRect(0, 0, w, h, self._bg)
        self._draw_background(painter, w, h)

        if self.samples is not None and self.samples.width == w:
            self._draw_offset(painter, w)
            self._draw_trace(painter)
            self._draw_endpoints(painter)

    def _draw_background(self, painter, w, h):
        half_y = h / 2
        wavelength = w / max(1, self.periods)

        if not self.options.hide_grid_dots:
            spacing = grid_spacing(wavelength, self.harmonics)
            if spacing is not None:
                painter.setPen(Qt.NoPen)
                painter.setBrush(self._axes)
                start_y = half_y % spacing
                x = spacing
                while x < w:
                    y = start_y
                    while y < h:
                        painter.drawEllipse(QPointF(x, y), 1, 1)
                        y += spacing
                    x += spacing

        pen = QPen(self._axes)
        pen.setWidth(2)
        painter.setPen(pen)
        painter.setBrush(Qt.NoBrush)
        painter.drawLine(QPointF(0, half_y), QPointF(w, half_y))

        if not self.options.hide_dividers and wavelength > 0:
            x = wavelength
            while x < w:
                painter.drawLine(QPointF(x, 0), QPointF(x, h))
                x += wavelength

    def _draw_offset(self, painter, w):
        if self.options.hide_offset or self.dc == 0:
            return
        pen = QPen(self._offset)
        pen.setWidth(1)
        painter.setPen(pen)
        y = self.samples.center
        painter.drawLine(QPointF(0, y), QPointF(w, y))

    def _draw_trace(self, painter):
        values = self.samples.values
        if len(values) < 2:
            return

        pen = QPen(self._line)
        pen.setWidth(self.options.line_width)
        painter.setPen(pen)
        painter.setBrush(Qt.NoBrush)

        path = QPainterPath()
        path.moveTo(0, float(values[0]))
        for x in range(1, len(values)):
            path.lineTo(x, float(values[x]))
        painter.drawPath(path)

    def _draw_endpoints(self, painter):
        if self.options.hide_endpoints:
            return
        painter.setPen(Qt.NoPen)
        painter.setBrush(self._offset)
        y = self.samples.origin_value
        for x in self.samples.endpoints:
            painter.drawEllipse(QPointF(x, y), ENDPOINT_RADIUS, ENDPOINT_RADIUS)
