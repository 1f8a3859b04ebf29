from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
import numpy as np

from .constants import CTCSS_FREQUENCIES_HZ, DTMF_FREQUENCIES_HZ, DTMF_HIGH_HZ, DTMF_LOW_HZ, dtmf_key
from .goertzel import GoertzelState, goertzel_begin, goertzel_magnitudes_with_state

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DtmfResult:
    key: str
    # Weaker of the two winning group magnitudes
    magnitude: float
    low_hz: float
    high_hz: float


@dataclass(frozen=True)
class CtcssResult:
    frequency_hz: float
    magnitude: float


@lru_cache(maxsize=32)
def dtmf_state(sample_rate_hz: float, channel: int = 0, channel_count: int = 1) -> GoertzelState:
    """Cached engine state over the eight DTMF frequencies (low group first)."""
    return goertzel_begin(sample_rate_hz, DTMF_FREQUENCIES_HZ, channel, channel_count)


@lru_cache(maxsize=32)
def ctcss_state(sample_rate_hz: float, channel: int = 0, channel_count: int = 1) -> GoertzelState:
    """Cached engine state over the 38 CTCSS tones."""
    return goertzel_begin(sample_rate_hz, CTCSS_FREQUENCIES_HZ, channel, channel_count)


def dtmf_from_magnitudes(mags: np.ndarray) -> DtmfResult:
    """
    Decide a key from the eight DTMF magnitudes.

    Row and column are independent arg-maxes over the low and high groups; ties
    go to the lower index. The reported magnitude is min(row, column) since a
    pair is only as strong as its weaker tone. No threshold is applied.
    """
    row = int(np.argmax(mags[:4]))
    col = int(np.argmax(mags[4:8]))
    magnitude = float(min(mags[row], mags[4 + col]))
    return DtmfResult(key=dtmf_key(row, col), magnitude=magnitude,
                      low_hz=DTMF_LOW_HZ[row], high_hz=DTMF_HIGH_HZ[col])


def detect_dtmf(block, sample_rate_hz: float, channel: int = 0, channel_count: int = 1) -> DtmfResult:
    """Classify one block as a DTMF key; always returns a key, gate on .magnitude."""
    mags = goertzel_magnitudes_with_state(dtmf_state(sample_rate_hz, channel, channel_count), block)
    res = dtmf_from_magnitudes(mags)
    logger.debug("dtmf %s (%g+%g Hz) magnitude %.6g", res.key, res.low_hz, res.high_hz, res.magnitude)
    return res


def detect_ctcss(block, sample_rate_hz: float, channel: int = 0, channel_count: int = 1) -> CtcssResult:
    """Strongest CTCSS tone in one block (plain arg-max, ties to the lowest tone)."""
    mags = goertzel_magnitudes_with_state(ctcss_state(sample_rate_hz, channel, channel_count), block)
    i = int(np.argmax(mags))
    res = CtcssResult(frequency_hz=CTCSS_FREQUENCIES_HZ[i], magnitude=float(mags[i]))
    logger.debug("ctcss %.1f Hz magnitude %.6g", res.frequency_hz, res.magnitude)
    return res
