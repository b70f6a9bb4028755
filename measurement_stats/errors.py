from __future__ import annotations


MIN_SAMPLES = 2


class MeasurementStatsError(Exception):
    """Base class for errors raised by measurement_stats."""


class InsufficientDataError(MeasurementStatsError):
    """Raised when a statistic is read before enough measurements exist.

    Reading any derived value needs at least ``MIN_SAMPLES`` measurements.
    This is a precondition violation on the caller's side, retrying without
    adding values will fail the same way.
    """

    def __init__(self, count: int, required: int = MIN_SAMPLES) -> None:
        self.count = count
        self.required = required
        super().__init__(
            f"There should be at least {required} measurement values for providing "
            f"statistical information (have {count})"
        )


class UnknownStatisticError(MeasurementStatsError, KeyError):
    """Raised when a statistic key is not present in the registry."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"Unknown statistic: {self.key!r}"
