"""
Console Panel - in-app log view docked at the right edge.

Listens to logger.console_signal, colours lines by level, keeps the last
MAX_LINES lines and filters by a minimum level chosen in the header.
Toggle with the header button or Ctrl+`.
"""

import html
import logging

from PyQt5.QtWidgets import (
    QApplication, QComboBox, QFrame, QHBoxLayout, QLabel, QPlainTextEdit,
    QPushButton, QVBoxLayout
)
from PyQt5.QtGui import QFont

from fourier_synth.utils.logger import logger
from .theme import COLORS, FONT_SIZES, MONO_FONT, button_style

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}

LEVEL_COLORS = {
    logging.DEBUG: COLORS['log_debug'],
    logging.INFO: COLORS['log_info'],
    logging.WARNING: COLORS['log_warning'],
    logging.ERROR: COLORS['log_error'],
}


class ConsolePanel(QFrame):
    """Scrolling, level-filtered view of the application log."""

    MAX_LINES = 500
    PANEL_WIDTH = 320

    def __init__(self, parent=None):
        super().__init__(parent)
        self.min_level = logging.DEBUG

        self.setFixedWidth(self.PANEL_WIDTH)
        self.setStyleSheet(f"""
            QFrame {{
                background-color: {COLORS['background_dark']};
                border-left: 1px solid {COLORS['border_light']};
            }}
        """)
        self.setup_ui()
        self.hide()

        logger.console_signal.message.connect(self.on_log_message)

    def setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(6, 6, 6, 6)
        layout.setSpacing(4)

        header = QHBoxLayout()
        title = QLabel("CONSOLE")
        title.setFont(QFont(MONO_FONT, FONT_SIZES['label']))
        title.setStyleSheet(f"color: {COLORS['text_bright']}; border: none;")
        header.addWidget(title)
        header.addStretch()

        self.level_filter = QComboBox()
        self.level_filter.addItems(list(LEVELS))
        self.level_filter.currentTextChanged.connect(self.set_min_level)
        header.addWidget(self.level_filter)
        layout.addLayout(header)

        self.log_text = QPlainTextEdit()
        self.log_text.setReadOnly(True)
        self.log_text.setLineWrapMode(QPlainTextEdit.NoWrap)
        self.log_text.setMaximumBlockCount(self.MAX_LINES)
        self.log_text.setFont(QFont(MONO_FONT, FONT_SIZES['tiny']))
        self.log_text.setStyleSheet(
            f"background-color: {COLORS['graph_bg']}; color: {COLORS['text']};")
        layout.addWidget(self.log_text)

        buttons = QHBoxLayout()
        for label, slot in (("Clear", self.clear_log), ("Copy", self.copy_log)):
            button = QPushButton(label)
            button.setStyleSheet(button_style())
            button.clicked.connect(slot)
            buttons.addWidget(button)
        buttons.addStretch()
        layout.addLayout(buttons)

    def on_log_message(self, message: str, level: int, timestamp: str):
        if level < self.min_level:
            return
        color = LEVEL_COLORS.get(level, COLORS['text'])
        name = logging.getLevelName(level)
        self.log_text.appendHtml(
            f"<span style='color: {COLORS['text_dim']}'>{timestamp}</span> "
            f"<span style='color: {color}'>[{name}] {html.escape(message)}</span>"
        )

    def set_min_level(self, name: str):
        self.min_level = LEVELS.get(name, logging.DEBUG)

    def line_count(self) -> int:
        if not self.log_text.toPlainText():
            return 0
        return self.log_text.document().blockCount()

    def clear_log(self):
        self.log_text.clear()

    def copy_log(self):
        QApplication.clipboard().setText(self.log_text.toPlainText())
        logger.info("Log copied to clipboard", component="APP")

    def toggle_panel(self):
        self.setVisible(self.isHidden())
