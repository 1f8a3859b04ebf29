import numpy as np
import pytest
from scipy.signal import get_window

from tonebank.errors import InvalidChannelError, UnknownWindowError
from tonebank.window import apply_window, window_coefficients

TAPERS = ["hamming", "flattop", "blackman-nuttall"]
SCIPY_NAME = {"hamming": "hamming", "flattop": "flattop", "blackman-nuttall": "nuttall"}


@pytest.mark.parametrize("shape", TAPERS)
@pytest.mark.parametrize("periodic", [False, True])
def test_matches_scipy_reference(shape, periodic):
    ref = get_window(SCIPY_NAME[shape], 64, fftbins=periodic)
    np.testing.assert_allclose(window_coefficients(shape, 64, periodic), ref, atol=1e-9)
    x = apply_window(np.ones(64), shape, periodic=periodic)
    np.testing.assert_allclose(x, ref, atol=1e-9)


@pytest.mark.parametrize("shape", TAPERS)
def test_symmetric_and_periodic_differ(shape):
    sym = window_coefficients(shape, 32, periodic=False)
    per = window_coefficients(shape, 32, periodic=True)
    np.testing.assert_allclose(sym, sym[::-1], atol=1e-12)
    assert not np.allclose(sym, per)


@pytest.mark.parametrize("shape", TAPERS)
def test_twice_is_not_once_and_edges_attenuated(shape):
    # A window is a multiplicative taper, not a projection
    once = apply_window(np.full(101, 1000.0), shape)
    twice = apply_window(once.copy(), shape)
    assert not np.allclose(once, twice)
    mid = once.size // 2
    assert abs(once[0]) < abs(once[mid])
    assert abs(once[-1]) < abs(once[mid])
    assert abs(twice[0]) < abs(twice[mid])


def test_none_is_noop():
    x = np.arange(16, dtype=np.float64)
    apply_window(x, "none")
    np.testing.assert_array_equal(x, np.arange(16))


def test_shape_name_is_case_insensitive():
    x = apply_window(np.ones(16), "Hamming")
    np.testing.assert_allclose(x, window_coefficients("hamming", 16))


def test_only_selected_channel_is_tapered():
    stereo = np.ones(2 * 50)
    apply_window(stereo, "hamming", channel=1, channel_count=2)
    np.testing.assert_array_equal(stereo[0::2], 1.0)
    assert stereo[1] < 1.0 and stereo[-1] < 1.0
    # Position is the interleaved index over the whole buffer
    i = np.arange(1, 100, 2)
    np.testing.assert_allclose(stereo[1::2], 0.54 - 0.46 * np.cos(2 * np.pi * i / 99))


def test_integer_block_truncates_toward_zero():
    x = np.full(32, -1000, dtype=np.int16)
    expected = np.trunc(-1000 * window_coefficients("hamming", 32)).astype(np.int16)
    apply_window(x, "hamming")
    assert x.dtype == np.int16
    np.testing.assert_array_equal(x, expected)


def test_errors():
    with pytest.raises(UnknownWindowError):
        apply_window(np.ones(8), "hann")
    with pytest.raises(InvalidChannelError):
        apply_window(np.ones(8), "hamming", channel=1, channel_count=1)
