from __future__ import annotations

from dataclasses import dataclass
from typing import IO, Optional, Union
import os

from .classify import CtcssResult, DtmfResult, detect_ctcss, detect_dtmf
from .config import AnalysisConfig
from .io import read_block
from .prefilter import high_pass, low_pass
from .window import apply_window


@dataclass(frozen=True)
class BlockReport:
    start_frame: int
    sample_rate_hz: float
    dtmf: Optional[DtmfResult]
    ctcss: Optional[CtcssResult]


def classify_wav(
    path_or_file: Union[str, "os.PathLike[str]", IO[bytes]],
    config: Optional[AnalysisConfig] = None,
) -> BlockReport:
    """
    Classify one block of an audio file as DTMF and CTCSS.

    Reads config.block_length frames from config.start_frame, conditions the
    configured channel (high-pass, low-pass, window, in that order) and runs
    both classifiers. Results weaker than config.min_magnitude come back as None.
    """
    config = (config or AnalysisConfig()).validate()
    blk = read_block(path_or_file, config.block_length, start=config.start_frame)
    config.validate(blk.channel_count)
    x, ch, cc = blk.samples, config.channel, blk.channel_count
    if config.high_pass is not None:
        high_pass(x, config.high_pass, ch, cc)
    if config.low_pass is not None:
        low_pass(x, config.low_pass, ch, cc)
    apply_window(x, config.window, ch, cc, periodic=config.periodic)

    dtmf = detect_dtmf(x, blk.sample_rate_hz, ch, cc)
    ctcss = detect_ctcss(x, blk.sample_rate_hz, ch, cc)
    return BlockReport(
        start_frame=config.start_frame,
        sample_rate_hz=blk.sample_rate_hz,
        dtmf=dtmf if dtmf.magnitude >= config.min_magnitude else None,
        ctcss=ctcss if ctcss.magnitude >= config.min_magnitude else None,
    )
