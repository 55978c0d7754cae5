"""
Fourier Synth - compose a periodic waveform from a DC term plus harmonics.
"""

__title__ = "fourier-synth"
__version__ = "1.2.0"
