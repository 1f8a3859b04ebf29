import numpy as np
import soundfile as sf

from tonebank import AnalysisConfig, classify_wav
from tonebank.synth import tone_block


def _write_stereo(path, sr=48000, frames=9600):
    x = np.zeros((frames, 2), dtype=np.float64)
    x[:, 0] = tone_block([770.0, 1336.0, 100.0], [0.2, 0.2, 0.2], float(sr), frames)
    sf.write(str(path), x, sr)


def test_classify_wav_tones(tmp_path):
    wav = tmp_path / "key5_pl100.wav"
    _write_stereo(wav)
    cfg = AnalysisConfig(block_length=4800, start_frame=2400, window="hamming")
    report = classify_wav(str(wav), cfg)
    assert report.sample_rate_hz == 48000.0
    assert report.start_frame == 2400
    assert report.dtmf is not None and report.dtmf.key == "5"
    assert report.ctcss is not None and report.ctcss.frequency_hz == 100.0


def test_classify_wav_gates_weak_results(tmp_path):
    wav = tmp_path / "key5_pl100.wav"
    _write_stereo(wav)
    # Channel 1 is silent
    report = classify_wav(wav, AnalysisConfig(block_length=4800, channel=1, min_magnitude=1e-3))
    assert report.dtmf is None
    assert report.ctcss is None


def test_classify_wav_with_prefilters(tmp_path):
    wav = tmp_path / "key5_pl100.wav"
    _write_stereo(wav)
    cfg = AnalysisConfig(block_length=4800, high_pass=0.001, low_pass=0.9, window="blackman-nuttall")
    report = classify_wav(wav, cfg)
    assert report.dtmf.key == "5"


def test_classify_silent_file(tmp_path):
    wav = tmp_path / "silent.wav"
    sf.write(str(wav), np.zeros(8000, dtype=np.float32), 8000)
    report = classify_wav(str(wav))
    assert report.dtmf.magnitude == 0.0
    assert report.ctcss.magnitude == 0.0
