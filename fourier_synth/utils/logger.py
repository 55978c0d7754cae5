"""
Logger - one place where every Fourier Synth message goes.

    from fourier_synth.utils.logger import logger

    logger.info("Preset loaded", component="PRESET")
    logger.error("Save failed", component="PRESET", details=str(e))

Records fan out to three sinks: the terminal (INFO and up), the in-app
console via `logger.console_signal` (everything; the panel filters), and an
optional log file. Core modules use plain `logging.getLogger(__name__)`;
being children of "fourier_synth" their records reach the same sinks
without the core importing Qt.
"""

import logging
import sys
import time
from enum import IntEnum
from typing import Optional

from PyQt5.QtCore import QObject, pyqtSignal

LOGGER_NAME = "fourier_synth"


class LogLevel(IntEnum):
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class ConsoleSignal(QObject):
    """Carries formatted records to the console panel on the GUI thread."""
    message = pyqtSignal(str, int, str)   # text, level, HH:MM:SS


class ConsoleHandler(logging.Handler):
    """Forwards each record to a ConsoleSignal."""

    def __init__(self, signal: ConsoleSignal):
        super().__init__(logging.DEBUG)
        self.signal = signal
        self.setFormatter(logging.Formatter("%(message)s"))

    def emit(self, record):
        try:
            stamp = time.strftime("%H:%M:%S", time.localtime(record.created))
            self.signal.message.emit(self.format(record), record.levelno, stamp)
        except Exception:
            self.handleError(record)


class FourierSynthLogger:
    """Component-tagged front end to the "fourier_synth" stdlib logger."""

    def __init__(self):
        self._logger = logging.getLogger(LOGGER_NAME)
        self._logger.setLevel(logging.DEBUG)
        self._logger.propagate = False

        self._terminal = logging.StreamHandler(sys.stdout)
        self._terminal.setLevel(logging.INFO)
        self._terminal.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(message)s", datefmt="%H:%M:%S"))
        self._logger.addHandler(self._terminal)

        self.console_signal = ConsoleSignal()
        self._logger.addHandler(ConsoleHandler(self.console_signal))

        self._file: Optional[logging.FileHandler] = None

    def set_level(self, level: LogLevel):
        """Terminal threshold. The console and file always receive DEBUG."""
        self._terminal.setLevel(level)

    def enable_file_logging(self, filepath: str):
        if self._file is not None:
            self._logger.removeHandler(self._file)
            self._file.close()
        self._file = logging.FileHandler(filepath, encoding="utf-8")
        self._file.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s %(message)s"))
        self._logger.addHandler(self._file)

    def log(self, level: int, msg: str, component: Optional[str] = None,
            details: Optional[str] = None):
        if component:
            msg = f"[{component}] {msg}"
        if details:
            msg = f"{msg} - {details}"
        self._logger.log(level, msg)

    def debug(self, msg, component=None, details=None):
        self.log(logging.DEBUG, msg, component, details)

    def info(self, msg, component=None, details=None):
        self.log(logging.INFO, msg, component, details)

    def warning(self, msg, component=None, details=None):
        self.log(logging.WARNING, msg, component, details)

    def error(self, msg, component=None, details=None):
        self.log(logging.ERROR, msg, component, details)

    def audio(self, msg, details=None):
        self.debug(msg, component="AUDIO", details=details)

    def preset(self, msg, details=None):
        self.info(msg, component="PRESET", details=details)


logger = FourierSynthLogger()


def set_log_level(level: LogLevel):
    """Set the terminal log level."""
    logger.set_level(level)
