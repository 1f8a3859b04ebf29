from __future__ import annotations

from typing import Optional, Sequence
import numpy as np
from numpy.typing import NDArray, DTypeLike

from .dsp import channel_view, check_sample_rate, store
from .errors import SizeMismatchError


def generate_sine_wave(
    block: NDArray,
    sample_rate_hz: float,
    frequencies_hz: Sequence[float],
    amplitudes: Sequence[float],
    channel: int = 0,
    channel_count: int = 1,
    phases_rad: Optional[Sequence[float]] = None,
) -> NDArray:
    """Write a sum of sines into one channel of an interleaved block, in place.

    Amplitudes are fractions of full scale (iinfo(dtype).max) for integer
    blocks and absolute values for floating blocks. Other channels are left
    untouched.
    """
    check_sample_rate(sample_rate_hz)
    if len(frequencies_hz) != len(amplitudes):
        raise SizeMismatchError(f"{len(frequencies_hz)} frequencies but {len(amplitudes)} amplitudes")
    if phases_rad is None:
        phases_rad = [0.0] * len(frequencies_hz)
    elif len(phases_rad) != len(frequencies_hz):
        raise SizeMismatchError(f"{len(frequencies_hz)} frequencies but {len(phases_rad)} phases")

    view = channel_view(block, channel, channel_count)
    t = np.arange(view.size, dtype=np.float64) / float(sample_rate_hz)
    x = np.zeros(view.size, dtype=np.float64)
    for f, a, ph in zip(frequencies_hz, amplitudes, phases_rad):
        x += float(a) * np.sin(2.0 * np.pi * float(f) * t + float(ph))
    if np.issubdtype(block.dtype, np.integer):
        x *= np.iinfo(block.dtype).max
    store(view, x)
    return block


def tone_block(
    frequencies_hz: Sequence[float],
    amplitudes: Sequence[float],
    sample_rate_hz: float,
    num_frames: int,
    channel: int = 0,
    channel_count: int = 1,
    phases_rad: Optional[Sequence[float]] = None,
    dtype: DTypeLike = np.float64,
) -> NDArray:
    """Allocate a silent interleaved block and fill one channel with tones."""
    block = np.zeros(num_frames * channel_count, dtype=dtype)
    return generate_sine_wave(block, sample_rate_hz, frequencies_hz, amplitudes,
                              channel, channel_count, phases_rad)
