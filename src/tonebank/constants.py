from __future__ import annotations

"""
Tone tables and window coefficients.

DTMF frequencies and key layout follow ITU-T Q.23/Q.24; CTCSS tones follow the
EIA/TIA-603 table of 38 standard sub-audible tones.
"""

# DTMF: low group (rows) then high group (columns)
DTMF_LOW_HZ = (697.0, 770.0, 852.0, 941.0)
DTMF_HIGH_HZ = (1209.0, 1336.0, 1477.0, 1633.0)
DTMF_FREQUENCIES_HZ = DTMF_LOW_HZ + DTMF_HIGH_HZ

DTMF_KEYS = (
    ("1", "2", "3", "A"),
    ("4", "5", "6", "B"),
    ("7", "8", "9", "C"),
    ("*", "0", "#", "D"),
)

# CTCSS (EIA/TIA), ascending
CTCSS_FREQUENCIES_HZ = (
    67.0, 71.9, 74.4, 77.0, 79.7, 82.5, 85.4, 88.5, 91.5, 94.8,
    97.4, 100.0, 103.5, 107.2, 110.9, 114.8, 118.8, 123.0, 127.3, 131.8,
    136.5, 141.3, 146.2, 151.4, 156.7, 162.2, 167.9, 173.8, 179.9, 186.2,
    192.8, 203.5, 210.7, 218.1, 225.7, 233.6, 241.8, 250.3,
)

# Generalized cosine windows: w(x) = sum_k (-1)^k a_k cos(k x)
WINDOW_COEFFICIENTS = {
    "hamming": (0.54, 0.46),
    "flattop": (0.21557895, 0.41663158, 0.277263158, 0.083578947, 0.006947368),
    "blackman-nuttall": (0.3635819, 0.4891775, 0.1365995, 0.0106411),
}
WINDOW_SHAPES = ("none",) + tuple(WINDOW_COEFFICIENTS)


def dtmf_key(row: int, col: int) -> str:
    """Return the keypad character for a (low group, high group) index pair."""
    return DTMF_KEYS[row][col]


def dtmf_pair(key: str) -> tuple[float, float]:
    """Return (low_hz, high_hz) for a keypad character."""
    for row, keys in enumerate(DTMF_KEYS):
        if key in keys:
            return DTMF_LOW_HZ[row], DTMF_HIGH_HZ[keys.index(key)]
    raise KeyError(key)
