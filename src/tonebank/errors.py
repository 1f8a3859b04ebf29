from __future__ import annotations


class ToneBankError(ValueError):
    """Base class for rejected analysis inputs."""


class InvalidChannelError(ToneBankError):
    pass


class EmptyBlockError(ToneBankError):
    pass


class FrequencyRangeError(ToneBankError):
    pass


class InvalidSampleRateError(ToneBankError):
    pass


class SizeMismatchError(ToneBankError):
    pass


class UnknownWindowError(ToneBankError):
    pass


class CoefficientRangeError(ToneBankError):
    pass


class ConfigError(ToneBankError):
    pass
