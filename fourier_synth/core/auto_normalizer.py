"""
Auto normalizer - fits the waveform to the display height and centers it.

Given the peak envelope from the sampler, solve for the gain that makes the
peak-to-peak excursion equal the display height (capped at the profile's
maximum gain) and the DC offset that cancels the waveform's asymmetry.

The caller re-samples once with the correction applied and must not
normalize again during that pass (see SettlePass).
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from fourier_synth.config import AMPLITUDE_DECIMALS, SynthProfile, get_profile

log = logging.getLogger(__name__)

# Relative tolerance for "gain unchanged". Recomputing the same fit from a
# corrected frame may differ from the previous gain in the last bits.
GAIN_EPSILON = 1e-9


class SettlePass(Enum):
    """Token threaded through a refresh: may this pass normalize?"""
    MEASURE = 'measure'         # sample, then normalize if auto-adjust is on
    CORRECTION = 'correction'   # already corrected once, render only


@dataclass(frozen=True)
class Correction:
    new_dc_amplitude: float
    new_gain: Optional[float] = None    # None = keep the current gain
    silent: bool = False                # flat input, reset to defaults

    def changes(self, current_gain: float, current_dc: float) -> bool:
        """True if applying this correction alters gain or DC."""
        if self.new_gain is not None and self.new_gain != current_gain:
            return True
        return self.new_dc_amplitude != current_dc


def round_offset(offset: float) -> float:
    """Round to the control precision and fold -0.0 into 0.0."""
    offset = round(offset, AMPLITUDE_DECIMALS)
    if offset == 0:
        offset = 0.0
    return offset


def normalize(peak_positive: float, peak_negative: float, scale_y: float,
              height: float, current_gain: float, current_dc: float,
              profile: Optional[SynthProfile] = None) -> Optional[Correction]:
    """
    Compute the gain/DC correction for one measured frame.

    Returns None when there is nothing to normalize against (height 0).
    """
    profile = profile or get_profile()

    if height == 0:
        return None

    peak_to_peak = scale_y * (peak_positive - peak_negative)
    asymmetry = scale_y * (peak_positive + peak_negative)

    if peak_to_peak == 0:
        log.debug("[AUTO] flat waveform, resetting gain and offset")
        return Correction(new_dc_amplitude=0.0, new_gain=profile.default_gain, silent=True)

    gain = None
    if peak_to_peak != height:
        gain = min(current_gain * height / peak_to_peak, profile.gain_max)
        if math.isclose(gain, current_gain, rel_tol=GAIN_EPSILON):
            gain = None

    offset = profile.control_range * (asymmetry / height)
    if gain is not None and current_gain > 0:
        # Anticipate the next frame's scale
        offset *= gain / current_gain
    offset = round_offset(offset)

    log.debug("[AUTO] p2p=%.3f asym=%.3f -> gain=%s dc=%.1f (was %.1f)",
              peak_to_peak, asymmetry, gain, offset, current_dc)
    return Correction(new_dc_amplitude=offset, new_gain=gain)
