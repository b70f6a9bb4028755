from __future__ import annotations

import math
from typing import NamedTuple, Sequence, Tuple

import numpy as np


class LinearCoefficients(NamedTuple):
    """Coefficients of the trend line ``y = slope * x + intercept``.

    The slope is tangent alpha, alpha being the angle between the trend line
    and the X axis:

    - slope ~ 0: constant trend
    - slope > 0: increasing trend (durations: slow down; throughput: speed up)
    - slope < 0: decreasing trend (durations: speed up; throughput: slow down)
    """

    slope: float
    intercept: float


def ieee_divide(numerator: float, denominator: float) -> float:
    """Divide following IEEE 754 rules: x/0 gives +-inf, 0/0 gives nan."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))


def naive_sum(values: Sequence[float]) -> float:
    # Plain left-to-right accumulation; builtin sum() compensates on 3.12+.
    total = 0.0
    for v in values:
        total += v
    return total


def mean(values: Sequence[float]) -> float:
    return naive_sum(values) / len(values)


def median(values: Sequence[float]) -> float:
    """Middle value of the sorted values, or the mean of the two middle ones."""
    # NaN sorts before every number so the result does not depend on input order
    ordered = sorted(values, key=lambda v: (not math.isnan(v), v))
    count = len(ordered)
    mid = count // 2
    if count % 2 == 0:
        return (ordered[mid] + ordered[mid - 1]) / 2
    return ordered[mid]


def population_sigma(values: Sequence[float], average: float) -> float:
    """Standard deviation around ``average`` with divisor N (not N-1)."""
    diff2s = 0.0
    for v in values:
        diff2s += (v - average) * (v - average)
    return math.sqrt(diff2s / len(values))


def relative_sigma(sigma: float, average: float) -> float:
    """Coefficient of variation. A zero average yields inf or nan."""
    return ieee_divide(sigma, abs(average))


def index_points(values: Sequence[float]) -> Tuple[Tuple[float, float], ...]:
    """Pair every value with its position: ``(0.0, v0), (1.0, v1), ...``."""
    return tuple((float(idx), v) for idx, v in enumerate(values))


def least_squares(points: Sequence[Tuple[float, float]]) -> LinearCoefficients:
    """Ordinary least-squares fit of ``y = a*x + b`` in closed form.

    Returns ``(0.0, 0.0)`` when fewer than two points are given.
    """
    count = 0
    x_sum = 0.0
    y_sum = 0.0
    xx_sum = 0.0
    xy_sum = 0.0
    for x, y in points:
        count += 1
        x_sum += x
        y_sum += y
        xx_sum += x * x
        xy_sum += x * y

    if count < 2:
        return LinearCoefficients(0.0, 0.0)

    denominator = count * xx_sum - x_sum * x_sum
    b = ieee_divide(xx_sum * y_sum - x_sum * xy_sum, denominator)
    a = ieee_divide(count * xy_sum - x_sum * y_sum, denominator)
    return LinearCoefficients(slope=a, intercept=b)


def linear_trend(values: Sequence[float]) -> LinearCoefficients:
    """Least-squares trend of the values against their sample index."""
    return least_squares(index_points(values))
