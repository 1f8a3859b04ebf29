from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from scipy.signal import lfilter

from .dsp import channel_view, store
from .errors import CoefficientRangeError


def _check_coefficient(coeff: float) -> float:
    coeff = float(coeff)
    if not 0.0 <= coeff <= 1.0:
        raise CoefficientRangeError(f"filter coefficient must lie in [0, 1], got {coeff}")
    return coeff


def low_pass(block: NDArray, coeff: float, channel: int = 0, channel_count: int = 1) -> NDArray:
    """
    Exponential moving average over one channel, in place:
    state += coeff * (x - state), starting from state = 0.

    The first ~1/coeff samples are a warm-up ramp; discard them if steady-state
    output matters.
    """
    coeff = _check_coefficient(coeff)
    view = channel_view(block, channel, channel_count)
    if view.size:
        # y[n] = coeff x[n] + (1 - coeff) y[n-1]
        store(view, lfilter([coeff], [1.0, -(1.0 - coeff)], view.astype(np.float64)))
    return block


def high_pass(block: NDArray, coeff: float, channel: int = 0, channel_count: int = 1) -> NDArray:
    """
    Single-pole DC blocker over one channel, in place:
    y[n] = (1 - coeff) * (y[n-1] + x[n] - x[n-1]) with x[-1] = y[-1] = 0.
    """
    coeff = _check_coefficient(coeff)
    view = channel_view(block, channel, channel_count)
    if view.size:
        g = 1.0 - coeff
        store(view, lfilter([g, -g], [1.0, -g], view.astype(np.float64)))
    return block
