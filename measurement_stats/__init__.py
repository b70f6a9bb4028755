"""In-memory measurement statistics.

A ``MeasurementSeries`` collects values in arrival order and derives the
average, median, population standard deviation, relative standard deviation
and a least-squares trend of value against sample index. Derived values are
computed on first read and cached until the next value is added.
"""

from .core.formulas import LinearCoefficients
from .core.methods import SeriesSummary, StatisticSpec, build_registry, summarize
from .core.series import MeasurementSeries
from .errors import InsufficientDataError, MeasurementStatsError, UnknownStatisticError

__all__ = [
    "InsufficientDataError",
    "LinearCoefficients",
    "MeasurementSeries",
    "MeasurementStatsError",
    "SeriesSummary",
    "StatisticSpec",
    "UnknownStatisticError",
    "build_registry",
    "summarize",
]
