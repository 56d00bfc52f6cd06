"""
Descriptive statistics over a flat dataset.

Six reductions, each a plain numpy pass over the array:

    geometric_mean   exp(mean(log(x)))
    arithmetic_mean  sum / n
    maximum          largest value
    minimum          smallest value
    total            sum of values
    variance         sample variance, divisor n - 1

Usage:
    from csvstats.stats import compute_statistics
    result = compute_statistics(np.array([1.0, 2.0, 3.0]))
    result.variance   → 1.0
"""

from dataclasses import asdict, dataclass
from typing import Dict

import numpy as np

from csvstats.errors import EmptyDatasetError


@dataclass(frozen=True)
class StatsResult:
    """The six statistics of one dataset."""
    n: int
    geometric_mean: float
    arithmetic_mean: float
    maximum: float
    minimum: float
    sum: float
    variance: float

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


def _require_values(data: np.ndarray) -> np.ndarray:
    data = np.asarray(data, dtype=np.float64).ravel()
    if data.size == 0:
        raise EmptyDatasetError("cannot compute statistics of an empty dataset")
    return data


def geometric_mean(data: np.ndarray) -> float:
    """
    n-th root of the product, via the mean of logarithms.

    Not guarded: any zero gives 0.0, any negative value gives NaN.
    """
    data = _require_values(data)
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.exp(np.mean(np.log(data))))


def arithmetic_mean(data: np.ndarray) -> float:
    data = _require_values(data)
    return float(np.sum(data) / data.size)


def maximum(data: np.ndarray) -> float:
    return float(np.max(_require_values(data)))


def minimum(data: np.ndarray) -> float:
    return float(np.min(_require_values(data)))


def total(data: np.ndarray) -> float:
    return float(np.sum(_require_values(data)))


def variance(data: np.ndarray) -> float:
    """Sample variance (divisor n - 1). A single value has variance 0.0."""
    data = _require_values(data)
    if data.size == 1:
        return 0.0
    return float(np.var(data, ddof=1))


def compute_statistics(data: np.ndarray) -> StatsResult:
    """
    All six statistics of a non-empty dataset.

    Raises:
        EmptyDatasetError: data has no values.
    """
    data = _require_values(data)
    return StatsResult(
        n=int(data.size),
        geometric_mean=geometric_mean(data),
        arithmetic_mean=arithmetic_mean(data),
        maximum=maximum(data),
        minimum=minimum(data),
        sum=total(data),
        variance=variance(data),
    )
