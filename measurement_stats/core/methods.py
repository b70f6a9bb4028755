from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Callable, Dict, Iterable, List, Optional, Protocol

from ..errors import UnknownStatisticError
from .formulas import LinearCoefficients


logger = logging.getLogger(__name__)


class SupportsStatistics(Protocol):
    def __len__(self) -> int: ...

    @property
    def average(self) -> float: ...

    @property
    def median(self) -> float: ...

    @property
    def sigma(self) -> float: ...

    @property
    def relative_sigma(self) -> float: ...

    @property
    def slope(self) -> float: ...

    @property
    def linear_interpolation_coefficients(self) -> LinearCoefficients: ...


StatisticFunc = Callable[[SupportsStatistics], float]


@dataclass
class StatisticSpec:
    key: str
    compute: StatisticFunc
    label: str


def build_registry() -> Dict[str, StatisticSpec]:
    specs = [
        StatisticSpec(key="count", compute=len, label="Count"),
        StatisticSpec(key="average", compute=lambda s: s.average, label="Average"),
        StatisticSpec(key="median", compute=lambda s: s.median, label="Median"),
        StatisticSpec(key="sigma", compute=lambda s: s.sigma, label="Sigma"),
        StatisticSpec(
            key="relative_sigma", compute=lambda s: s.relative_sigma, label="Relative sigma"
        ),
        StatisticSpec(key="slope", compute=lambda s: s.slope, label="Slope"),
        StatisticSpec(
            key="intercept",
            compute=lambda s: s.linear_interpolation_coefficients.intercept,
            label="Intercept",
        ),
    ]
    return {spec.key: spec for spec in specs}


STATISTIC_KEYS = tuple(build_registry())


def resolve(keys: Iterable[str], registry: Optional[Dict[str, StatisticSpec]] = None) -> List[StatisticSpec]:
    registry = registry if registry is not None else build_registry()
    resolved: List[StatisticSpec] = []
    for key in keys:
        if key not in registry:
            raise UnknownStatisticError(key)
        resolved.append(registry[key])
    return resolved


def summarize(
    series: SupportsStatistics,
    keys: Optional[Iterable[str]] = None,
    log: bool = False,
) -> Dict[str, float]:
    """Evaluate the selected statistics of ``series`` in the order given.

    All registry statistics are evaluated when ``keys`` is None. Unknown keys
    raise ``UnknownStatisticError`` before anything is computed.
    """
    specs = resolve(STATISTIC_KEYS if keys is None else keys)
    result = {spec.key: spec.compute(series) for spec in specs}
    if log:
        logger.info("series summary", extra={"summary": result})
    return result


@dataclass(frozen=True)
class SeriesSummary:
    count: int
    average: float
    median: float
    sigma: float
    relative_sigma: float
    slope: float
    intercept: float

    @classmethod
    def from_series(cls, series: SupportsStatistics) -> "SeriesSummary":
        coefficients = series.linear_interpolation_coefficients
        return cls(
            count=len(series),
            average=series.average,
            median=series.median,
            sigma=series.sigma,
            relative_sigma=series.relative_sigma,
            slope=coefficients.slope,
            intercept=coefficients.intercept,
        )

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)
