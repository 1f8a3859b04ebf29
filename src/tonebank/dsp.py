from __future__ import annotations

from dataclasses import dataclass
import numpy as np
from numpy.typing import NDArray

from .errors import EmptyBlockError, InvalidChannelError, InvalidSampleRateError


@dataclass(frozen=True)
class SampleBlock:
    # Interleaved samples, frame-major: [f0c0, f0c1, ..., f1c0, ...]
    samples: NDArray
    sample_rate_hz: float
    channel_count: int = 1

    @property
    def frames(self) -> int:
        return self.samples.size // self.channel_count

    def channel(self, channel: int) -> NDArray:
        """Return a writable view of one channel."""
        return channel_view(self.samples, channel, self.channel_count)


def check_channel(channel: int, channel_count: int) -> None:
    if channel_count < 1:
        raise InvalidChannelError(f"channel_count must be >= 1, got {channel_count}")
    if not 0 <= channel < channel_count:
        raise InvalidChannelError(f"channel {channel} out of range for {channel_count} channel(s)")


def check_sample_rate(sample_rate_hz: float) -> None:
    if not np.isfinite(sample_rate_hz) or sample_rate_hz <= 0:
        raise InvalidSampleRateError(f"sample rate must be positive, got {sample_rate_hz}")


def channel_view(block: NDArray, channel: int, channel_count: int) -> NDArray:
    """
    Strided view of one interleaved channel. Writes through the view land in
    the caller's block.
    """
    check_channel(channel, channel_count)
    if block.ndim != 1:
        raise InvalidChannelError(f"sample block must be 1-D (interleaved), got shape {block.shape}")
    return block[channel::channel_count]


def channel_samples(block, channel: int, channel_count: int) -> NDArray[np.float64]:
    """Return one channel as a float64 copy; integer input is converted exactly."""
    x = np.asarray(block)
    if x.size == 0:
        raise EmptyBlockError("sample block is empty")
    return channel_view(x, channel, channel_count).astype(np.float64)


def store(view: NDArray, values: NDArray[np.float64]) -> None:
    """Write float results back into a (possibly integer) view, truncating toward zero.

    Integer results saturate at the dtype limits instead of wrapping.
    """
    if np.issubdtype(view.dtype, np.integer):
        info = np.iinfo(view.dtype)
        view[...] = np.clip(np.trunc(values), info.min, info.max).astype(view.dtype)
    else:
        view[...] = values
