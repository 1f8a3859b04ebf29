from __future__ import annotations

from dataclasses import dataclass, fields, asdict
from pathlib import Path
from numbers import Real
from typing import Optional
import json

from .constants import WINDOW_SHAPES
from .dsp import check_channel
from .errors import CoefficientRangeError, ConfigError, UnknownWindowError


@dataclass(frozen=True)
class AnalysisConfig:
    # Frames per analysed block
    block_length: int = 512
    start_frame: int = 0
    channel: int = 0
    window: str = "none"
    periodic: bool = False
    # Single-pole pre-filter coefficients in [0, 1]; None disables the stage
    low_pass: Optional[float] = None
    high_pass: Optional[float] = None
    # Classifications weaker than this are reported as None by classify_wav
    min_magnitude: float = 0.0

    def validate(self, channel_count: Optional[int] = None) -> "AnalysisConfig":
        self._check_types()
        if self.block_length < 1:
            raise ConfigError(f"block_length must be >= 1, got {self.block_length}")
        if self.start_frame < 0:
            raise ConfigError(f"start_frame must be >= 0, got {self.start_frame}")
        if self.window.lower() not in WINDOW_SHAPES:
            raise UnknownWindowError(f"unknown window {self.window!r}; expected one of {WINDOW_SHAPES}")
        for name in ("low_pass", "high_pass"):
            c = getattr(self, name)
            if c is not None and not 0.0 <= c <= 1.0:
                raise CoefficientRangeError(f"{name} must lie in [0, 1], got {c}")
        if self.min_magnitude < 0:
            raise ConfigError(f"min_magnitude must be >= 0, got {self.min_magnitude}")
        if channel_count is not None:
            check_channel(self.channel, channel_count)
        return self

    def _check_types(self) -> None:
        # JSON gives bools for true/false, which are ints to isinstance
        for name in ("block_length", "start_frame", "channel"):
            v = getattr(self, name)
            if isinstance(v, bool) or not isinstance(v, int):
                raise ConfigError(f"{name} must be an integer, got {v!r}")
        if not isinstance(self.window, str):
            raise ConfigError(f"window must be a string, got {self.window!r}")
        if not isinstance(self.periodic, bool):
            raise ConfigError(f"periodic must be true or false, got {self.periodic!r}")
        for name in ("low_pass", "high_pass", "min_magnitude"):
            v = getattr(self, name)
            if v is None and name != "min_magnitude":
                continue
            if isinstance(v, bool) or not isinstance(v, Real):
                raise ConfigError(f"{name} must be a number, got {v!r}")

    def to_dict(self) -> dict:
        return asdict(self)


def default_config() -> AnalysisConfig:
    return AnalysisConfig()


def config_from_dict(data: dict) -> AnalysisConfig:
    known = {f.name for f in fields(AnalysisConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"unknown config keys: {unknown}")
    return AnalysisConfig(**data).validate()


def load_config(path: str | Path) -> AnalysisConfig:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(str(p))
    with p.open("r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ConfigError(f"{p}: expected a JSON object")
    return config_from_dict(data)
