"""
GUI Controllers - kept out of MainFrame for separation of concerns.

SynthController: table, sampling, auto-adjust, audio voice
PresetController: open/save dialogs
"""

from .synth_controller import SynthController
from .preset_controller import PresetController

__all__ = [
    'SynthController',
    'PresetController',
]
