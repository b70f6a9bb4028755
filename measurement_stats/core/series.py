from __future__ import annotations

import logging
import threading
from typing import Callable, Optional, Tuple, TypeVar

from ..errors import MIN_SAMPLES, InsufficientDataError
from . import formulas
from .buffers import MeasurementBuffer
from .formulas import LinearCoefficients
from .methods import SeriesSummary


logger = logging.getLogger(__name__)

T = TypeVar("T")


class MeasurementSeries:
    """Ordered measurement values with lazily computed, cached statistics.

    At least two values are needed before any statistic can be read;
    otherwise ``InsufficientDataError`` is raised. Each cached statistic is
    kept until the next ``add``, so repeated reads return the same object.

    Adding and reading are serialized with a re-entrant lock, which makes a
    single series safe to share between threads.
    """

    def __init__(self) -> None:
        self._buffer = MeasurementBuffer()
        self._lock = threading.RLock()
        self._average: Optional[float] = None
        self._median: Optional[float] = None
        self._sigma: Optional[float] = None
        self._linear_interpolation_coefficients: Optional[LinearCoefficients] = None

    def __len__(self) -> int:
        return self._buffer.size()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(count={len(self)})"

    @property
    def measurement_values(self) -> Tuple[float, ...]:
        return self._buffer.snapshot()

    @property
    def average(self) -> float:
        with self._lock:
            if self._average is None:
                self._average = self._compute("average", formulas.mean)
            return self._average

    @property
    def median(self) -> float:
        with self._lock:
            if self._median is None:
                self._median = self._compute("median", formulas.median)
            return self._median

    @property
    def sigma(self) -> float:
        """Population standard deviation."""
        with self._lock:
            if self._sigma is None:
                self._sigma = self._compute(
                    "sigma", lambda values: formulas.population_sigma(values, self.average)
                )
            return self._sigma

    @property
    def relative_sigma(self) -> float:
        """Standard deviation relative to the absolute average."""
        with self._lock:
            return formulas.relative_sigma(self.sigma, self.average)

    @property
    def slope(self) -> float:
        return self.linear_interpolation_coefficients.slope

    @property
    def linear_interpolation_coefficients(self) -> LinearCoefficients:
        with self._lock:
            if self._linear_interpolation_coefficients is None:
                self._linear_interpolation_coefficients = self._compute(
                    "linear_interpolation_coefficients", formulas.linear_trend
                )
            return self._linear_interpolation_coefficients

    def add(self, value: float) -> None:
        """Record a measurement. NaN and infinities are accepted as-is.

        The value is stored as ``float(value)``: ints and numeric strings are
        converted, anything ``float()`` rejects raises its ``TypeError`` or
        ``ValueError`` and leaves the series unchanged.
        """
        with self._lock:
            self._buffer.add(float(value))
            self._invalidate_statistics()

    def statistics(self) -> SeriesSummary:
        """Consistent snapshot of every statistic for the current values."""
        with self._lock:
            return SeriesSummary.from_series(self)

    def _invalidate_statistics(self) -> None:
        self._average = None
        self._median = None
        self._sigma = None
        self._linear_interpolation_coefficients = None
        logger.debug("statistics invalidated", extra={"count": self._buffer.size()})

    def _require_values(self) -> Tuple[float, ...]:
        values = self._buffer.snapshot()
        if len(values) < MIN_SAMPLES:
            raise InsufficientDataError(len(values))
        return values

    def _compute(self, name: str, func: Callable[[Tuple[float, ...]], T]) -> T:
        values = self._require_values()
        result = func(values)
        logger.debug("statistic computed", extra={"statistic": name, "count": len(values)})
        return result
