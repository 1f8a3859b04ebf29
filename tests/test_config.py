import json

import pytest

from tonebank.config import AnalysisConfig, config_from_dict, default_config, load_config
from tonebank.errors import CoefficientRangeError, ConfigError, InvalidChannelError, UnknownWindowError


def test_defaults():
    cfg = default_config()
    assert cfg == AnalysisConfig()
    assert cfg.block_length == 512 and cfg.window == "none"
    assert cfg.validate() is cfg


def test_load_roundtrip(tmp_path):
    cfg = AnalysisConfig(block_length=1024, channel=1, window="flattop", periodic=True, high_pass=0.05, min_magnitude=0.01)
    p = tmp_path / "analysis.json"
    p.write_text(json.dumps(cfg.to_dict()), encoding="utf-8")
    assert load_config(p) == cfg


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.json")


def test_rejects_non_object(tmp_path):
    p = tmp_path / "list.json"
    p.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(p)


@pytest.mark.parametrize(
    "data, err",
    [
        ({"block_size": 512}, ConfigError),
        ({"block_length": 0}, ConfigError),
        ({"start_frame": -1}, ConfigError),
        ({"window": "hann"}, UnknownWindowError),
        ({"low_pass": 2.0}, CoefficientRangeError),
        ({"min_magnitude": -1.0}, ConfigError),
        ({"window": 5}, ConfigError),
        ({"block_length": "512"}, ConfigError),
        ({"block_length": 512.5}, ConfigError),
        ({"start_frame": True}, ConfigError),
        ({"channel": None}, ConfigError),
        ({"periodic": "yes"}, ConfigError),
        ({"high_pass": "0.1"}, ConfigError),
        ({"min_magnitude": None}, ConfigError),
    ],
)
def test_invalid(data, err):
    with pytest.raises(err):
        config_from_dict(data)


def test_channel_checked_against_file_layout():
    cfg = AnalysisConfig(channel=1)
    cfg.validate(channel_count=2)
    with pytest.raises(InvalidChannelError):
        cfg.validate(channel_count=1)
