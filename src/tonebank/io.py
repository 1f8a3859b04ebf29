from __future__ import annotations

import logging
from typing import IO, Union
import os
import numpy as np
import soundfile as sf

from .dsp import SampleBlock
from .errors import EmptyBlockError

logger = logging.getLogger(__name__)


def read_block(
    path_or_file: Union[str, "os.PathLike[str]", IO[bytes]],
    frames: int,
    start: int = 0,
    dtype: str = "float64",
) -> SampleBlock:
    """Read up to `frames` frames from an audio file as one interleaved block.

    dtype is passed to soundfile ("float64", "float32", "int32" or "int16");
    float data lands in [-1, 1], integer data at native full scale.
    """
    data, sample_rate_hz = sf.read(path_or_file, frames=frames, start=start, dtype=dtype, always_2d=True)
    if data.shape[0] == 0:
        raise EmptyBlockError(f"no frames at offset {start}")
    channel_count = int(data.shape[1])
    # (frames, channels) row-major flattens to interleaved order
    samples = np.ascontiguousarray(data).reshape(-1)
    logger.debug("read %d frames x %d channels at %d Hz from offset %d",
                 data.shape[0], channel_count, sample_rate_hz, start)
    return SampleBlock(samples=samples, sample_rate_hz=float(sample_rate_hz), channel_count=channel_count)
