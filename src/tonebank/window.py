from __future__ import annotations

import logging
import numpy as np
from numpy.typing import NDArray

from .constants import WINDOW_COEFFICIENTS, WINDOW_SHAPES
from .dsp import channel_view, store
from .errors import UnknownWindowError

logger = logging.getLogger(__name__)


def _cosine_sum(coefficients: tuple[float, ...], x: NDArray[np.float64]) -> NDArray[np.float64]:
    out = np.zeros_like(x)
    for k, a in enumerate(coefficients):
        out += (-a if k % 2 else a) * np.cos(k * x)
    return out


def _normalization_length(size: int, periodic: bool) -> int:
    # Periodic windows tile seamlessly (n = size); symmetric ones are single-block (n = size - 1)
    n = size if periodic else size - 1
    return max(n, 1)


def _coefficients_for(shape: str) -> tuple[float, ...] | None:
    key = shape.lower()
    if key not in WINDOW_SHAPES:
        raise UnknownWindowError(f"unknown window {shape!r}; expected one of {WINDOW_SHAPES}")
    return WINDOW_COEFFICIENTS.get(key)


def window_coefficients(shape: str, length: int, periodic: bool = False) -> NDArray[np.float64]:
    """
    Mono window of the given length.

    Matches scipy.signal.get_window(shape, length, fftbins=periodic) for
    "hamming", "flattop" and "nuttall" (our "blackman-nuttall").
    """
    coefficients = _coefficients_for(shape)
    if coefficients is None:
        return np.ones(length, dtype=np.float64)
    w = 2.0 * np.pi * np.arange(length, dtype=np.float64) / _normalization_length(length, periodic)
    return _cosine_sum(coefficients, w)


def apply_window(
    block: NDArray,
    shape: str,
    channel: int = 0,
    channel_count: int = 1,
    periodic: bool = False,
) -> NDArray:
    """
    Taper one channel of an interleaved block in place and return the block.

    The window position of a sample is its index in the interleaved buffer and
    the normalization length is taken from the whole buffer, so every channel
    sees the same taper envelope. Integer blocks are truncated toward zero.
    """
    coefficients = _coefficients_for(shape)
    view = channel_view(block, channel, channel_count)
    if coefficients is None or view.size == 0:
        return block
    idx = np.arange(channel, block.size, channel_count, dtype=np.float64)
    w = 2.0 * np.pi * idx / _normalization_length(block.size, periodic)
    store(view, view.astype(np.float64) * _cosine_sum(coefficients, w))
    logger.debug("applied %s window (%s) to channel %d/%d, %d samples",
                 shape, "periodic" if periodic else "symmetric", channel, channel_count, view.size)
    return block
