from __future__ import annotations

"""
Multi-frequency Goertzel filter bank.

Each target frequency gets a second-order resonator

    q0 = x + coeff * q1 - q2,    coeff = 2 cos(w)

run once over the selected channel. From the final (q1, q2) pair we rebuild
the DFT-bin value, its power and its phase without computing a spectrum.

Two entry points share one core:
  - goertzel(): ad hoc, coefficients derived per call;
  - goertzel_begin() + goertzel_with_state(): coefficients derived once into an
    immutable GoertzelState and reused across blocks of the same layout.
"""

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence
import numpy as np
from numpy.typing import NDArray
from scipy.signal import lfilter

from .dsp import channel_samples, check_channel, check_sample_rate
from .errors import EmptyBlockError, FrequencyRangeError, SizeMismatchError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GoertzelResult:
    frequency_hz: float
    # atan2(imag, real) of complex_value, in (-pi, pi]
    phase: float
    # (q1^2 + q2^2 - coeff q1 q2) / n
    power: float
    complex_value: complex
    # sqrt(q1^2 + q2^2 - coeff q1 q2) / n, i.e. |complex_value|
    magnitude: float


@dataclass(frozen=True, eq=False)
class GoertzelState:
    """Precomputed resonator coefficients. Arrays are read-only; share freely."""

    frequencies_hz: NDArray[np.float64]
    coeff: NDArray[np.float64]
    cos: NDArray[np.float64]
    sin: NDArray[np.float64]
    sample_rate_hz: float
    channel: int = 0
    channel_count: int = 1
    # Set only for bin-aligned states; the block length they were built for
    block_length: Optional[int] = None

    def __len__(self) -> int:
        return int(self.frequencies_hz.size)


def _readonly(a: NDArray[np.float64]) -> NDArray[np.float64]:
    a.setflags(write=False)
    return a


def _check_frequencies(frequencies_hz: Sequence[float], sample_rate_hz: float) -> NDArray[np.float64]:
    # Copy: the state marks its arrays read-only
    f = np.array(frequencies_hz, dtype=np.float64).reshape(-1)
    if f.size == 0:
        raise FrequencyRangeError("at least one target frequency is required")
    nyquist = 0.5 * sample_rate_hz
    bad = ~((f > 0.0) & (f < nyquist))
    if np.any(bad):
        raise FrequencyRangeError(
            f"target frequencies must lie in (0, {nyquist:g}) Hz, got {f[bad].tolist()}"
        )
    return f


def goertzel_begin(
    sample_rate_hz: float,
    frequencies_hz: Sequence[float],
    channel: int = 0,
    channel_count: int = 1,
    block_length: Optional[int] = None,
) -> GoertzelState:
    """
    Build a reusable engine state.

    With block_length set, each frequency is snapped to the nearest DFT bin of
    an N = block_length / channel_count sample channel (k = floor(0.5 + N f / fs),
    w = 2 pi k / N) and the state only accepts blocks of that length. Otherwise
    w = 2 pi f / fs exactly.
    """
    check_sample_rate(sample_rate_hz)
    check_channel(channel, channel_count)
    f = _check_frequencies(frequencies_hz, sample_rate_hz)
    if block_length is None:
        w = 2.0 * np.pi * f / sample_rate_hz
    else:
        if block_length < 1:
            raise EmptyBlockError(f"block_length must be >= 1, got {block_length}")
        n = block_length / float(channel_count)
        k = np.floor(0.5 + n * f / sample_rate_hz)
        # Snapped bins must stay strictly between DC and Nyquist
        outside = (k < 1) | (2.0 * k >= n)
        if np.any(outside):
            raise FrequencyRangeError(
                f"frequencies {f[outside].tolist()} snap to DC or Nyquist in a {n:g}-sample block"
            )
        w = 2.0 * np.pi * k / n
    cos = np.cos(w)
    state = GoertzelState(
        frequencies_hz=_readonly(f),
        coeff=_readonly(2.0 * cos),
        cos=_readonly(cos),
        sin=_readonly(np.sin(w)),
        sample_rate_hz=float(sample_rate_hz),
        channel=int(channel),
        channel_count=int(channel_count),
        block_length=None if block_length is None else int(block_length),
    )
    logger.debug("goertzel state: %d frequencies, fs=%g Hz, channel %d/%d%s",
                 len(state), sample_rate_hz, channel, channel_count,
                 "" if block_length is None else f", bin-aligned to {block_length}")
    return state


def _resonate(state: GoertzelState, block) -> tuple[NDArray[np.float64], NDArray[np.float64], float]:
    """Run every resonator over the channel; return final (q1, q2) per frequency and n."""
    x = channel_samples(block, state.channel, state.channel_count)
    size = int(np.asarray(block).size)
    if state.block_length is not None and size != state.block_length:
        raise SizeMismatchError(f"state built for {state.block_length} samples, block has {size}")
    q1 = np.zeros(len(state), dtype=np.float64)
    q2 = np.zeros(len(state), dtype=np.float64)
    if x.size:
        for j, coeff in enumerate(state.coeff):
            q = lfilter([1.0], [1.0, -coeff, 1.0], x)
            q1[j] = q[-1]
            q2[j] = q[-2] if q.size > 1 else 0.0
    return q1, q2, size / float(state.channel_count)


def goertzel_with_state(state: GoertzelState, block) -> List[GoertzelResult]:
    """Analyze one block with a precomputed state; results follow the state's frequency order."""
    q1, q2, n = _resonate(state, block)
    # Rounding can push this a hair below zero near w = 0 or pi
    energy = np.maximum(q1 * q1 + q2 * q2 - state.coeff * q1 * q2, 0.0)
    real = (q1 * state.cos - q2) / n
    imag = (q1 * state.sin) / n
    out: List[GoertzelResult] = []
    for j in range(len(state)):
        c = complex(float(real[j]), float(imag[j]))
        out.append(
            GoertzelResult(
                frequency_hz=float(state.frequencies_hz[j]),
                phase=math.atan2(c.imag, c.real),
                power=float(energy[j] / n),
                complex_value=c,
                magnitude=float(np.sqrt(energy[j]) / n),
            )
        )
    return out


def goertzel_magnitudes_with_state(state: GoertzelState, block) -> NDArray[np.float64]:
    """Magnitude-only variant of goertzel_with_state."""
    q1, q2, n = _resonate(state, block)
    energy = np.maximum(q1 * q1 + q2 * q2 - state.coeff * q1 * q2, 0.0)
    return np.sqrt(energy) / n


def goertzel(
    block,
    sample_rate_hz: float,
    frequencies_hz: Sequence[float],
    channel: int = 0,
    channel_count: int = 1,
    bin_aligned: bool = False,
) -> List[GoertzelResult]:
    """
    Per-frequency Goertzel results for one channel of an interleaved block.

    Accumulation is float64 whatever the input dtype. Results are identical to
    goertzel_with_state() on an equivalent state.
    """
    state = goertzel_begin(
        sample_rate_hz,
        frequencies_hz,
        channel,
        channel_count,
        block_length=int(np.asarray(block).size) if bin_aligned else None,
    )
    return goertzel_with_state(state, block)


def goertzel_magnitudes(
    block,
    sample_rate_hz: float,
    frequencies_hz: Sequence[float],
    channel: int = 0,
    channel_count: int = 1,
    bin_aligned: bool = False,
) -> NDArray[np.float64]:
    """Return magnitudes only, shape [len(frequencies_hz)]."""
    state = goertzel_begin(
        sample_rate_hz,
        frequencies_hz,
        channel,
        channel_count,
        block_length=int(np.asarray(block).size) if bin_aligned else None,
    )
    return goertzel_magnitudes_with_state(state, block)
