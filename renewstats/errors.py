"""
Exceptions raised by the renewable electricity report engine.
"""


class RenewStatsError(Exception):
    """Base class for all renewstats errors."""


class DataUnavailable(RenewStatsError):
    """The dataset could not be read or parsed."""


class NotFound(RenewStatsError):
    """A query referenced a country that is not in the dataset."""


class NoSourceTypesAvailable(RenewStatsError):
    """The dataset contains no source records at all."""


class InvalidRange(RenewStatsError):
    """A percent range bound is malformed, outside 0-100, or min exceeds max."""


class SessionDecodeFailure(RenewStatsError):
    """The persisted last query could not be decoded."""
