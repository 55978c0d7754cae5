"""
Main entry point for Fourier Synth.
Launches the main frame, optionally opening a preset file.
"""

import argparse
import sys
from pathlib import Path

from PyQt5.QtWidgets import QApplication


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="fourier-synth",
                                     description="Interactive Fourier synthesizer")
    parser.add_argument("preset", nargs="?", type=Path, help="preset JSON file to open")
    parser.add_argument("--profile", help="synth profile (classic, wide)")
    parser.add_argument("--log-file", help="also write the log to this file")
    parser.add_argument("--debug", action="store_true", help="show debug output in the terminal")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    # Initialize logger first
    from fourier_synth import __version__
    from fourier_synth.utils.logger import logger, LogLevel, set_log_level

    if args.debug:
        set_log_level(LogLevel.DEBUG)
    if args.log_file:
        logger.enable_file_logging(args.log_file)

    logger.info(f"Fourier Synth {__version__} starting", component="APP")

    app = QApplication(sys.argv[:1])

    from fourier_synth.config import get_profile
    from fourier_synth.gui.controllers import SynthController
    from fourier_synth.gui.main_frame import MainFrame

    controller = SynthController(profile=get_profile(args.profile))
    window = MainFrame(controller)
    if args.preset:
        window.preset_controller.load_path(args.preset)

    window.show()

    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
