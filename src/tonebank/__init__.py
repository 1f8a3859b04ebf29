"""Goertzel filter bank with DTMF and CTCSS tone classifiers.

Public API:
- goertzel / goertzel_begin + goertzel_with_state -> per-frequency results
- detect_dtmf, detect_ctcss -> one classification per block
- apply_window, low_pass, high_pass -> in-place conditioning
- classify_wav(path) -> BlockReport
"""
from .api import BlockReport, classify_wav
from .classify import CtcssResult, DtmfResult, detect_ctcss, detect_dtmf
from .config import AnalysisConfig, load_config
from .dsp import SampleBlock
from .errors import (
    CoefficientRangeError,
    ConfigError,
    EmptyBlockError,
    FrequencyRangeError,
    InvalidChannelError,
    InvalidSampleRateError,
    SizeMismatchError,
    ToneBankError,
    UnknownWindowError,
)
from .goertzel import (
    GoertzelResult,
    GoertzelState,
    goertzel,
    goertzel_begin,
    goertzel_magnitudes,
    goertzel_magnitudes_with_state,
    goertzel_with_state,
)
from .io import read_block
from .prefilter import high_pass, low_pass
from .synth import generate_sine_wave, tone_block
from .window import apply_window, window_coefficients

__all__ = [
    "AnalysisConfig",
    "BlockReport",
    "CoefficientRangeError",
    "ConfigError",
    "CtcssResult",
    "DtmfResult",
    "EmptyBlockError",
    "FrequencyRangeError",
    "GoertzelResult",
    "GoertzelState",
    "InvalidChannelError",
    "InvalidSampleRateError",
    "SampleBlock",
    "SizeMismatchError",
    "ToneBankError",
    "UnknownWindowError",
    "apply_window",
    "classify_wav",
    "detect_ctcss",
    "detect_dtmf",
    "generate_sine_wave",
    "goertzel",
    "goertzel_begin",
    "goertzel_magnitudes",
    "goertzel_magnitudes_with_state",
    "goertzel_with_state",
    "high_pass",
    "load_config",
    "low_pass",
    "read_block",
    "tone_block",
    "window_coefficients",
]
