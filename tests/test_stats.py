"""Tests for csvstats.stats."""

import logging
import warnings

import numpy as np
import pytest
from scipy import stats as sps

from csvstats.errors import EmptyDatasetError
from csvstats.stats import (
    StatsResult,
    arithmetic_mean,
    compute_statistics,
    geometric_mean,
    maximum,
    minimum,
    total,
    variance,
)


class TestKnownDataset:
    """1..6, the values of '1,2,3\\n4,5,6'."""

    @pytest.fixture
    def result(self):
        return compute_statistics(np.arange(1.0, 7.0))

    def test_sum(self, result):
        assert result.sum == 21.0

    def test_mean(self, result):
        assert result.arithmetic_mean == 3.5

    def test_extremes(self, result):
        assert result.minimum == 1.0
        assert result.maximum == 6.0

    def test_sample_variance(self, result):
        assert result.variance == pytest.approx(3.5)

    def test_geometric_mean(self, result):
        assert result.geometric_mean == pytest.approx(2.9938, abs=1e-4)
        assert result.geometric_mean == pytest.approx(720.0 ** (1.0 / 6.0))

    def test_count(self, result):
        assert result.n == 6

    def test_to_dict_keys(self, result):
        assert set(result.to_dict()) == {
            'n', 'geometric_mean', 'arithmetic_mean',
            'maximum', 'minimum', 'sum', 'variance',
        }


class TestProperties:

    @pytest.fixture
    def samples(self):
        rng = np.random.default_rng(42)
        return [rng.uniform(0.1, 100.0, size=n) for n in (2, 3, 10, 257, 5000)]

    def test_mean_is_sum_over_count(self, samples):
        for data in samples:
            r = compute_statistics(data)
            assert r.arithmetic_mean == pytest.approx(r.sum / r.n, rel=1e-9)

    def test_mean_between_extremes(self, samples):
        for data in samples:
            r = compute_statistics(data)
            assert r.minimum <= r.arithmetic_mean <= r.maximum

    def test_geometric_mean_between_extremes(self, samples):
        for data in samples:
            r = compute_statistics(data)
            assert r.minimum <= r.geometric_mean <= r.maximum
            assert r.geometric_mean <= r.arithmetic_mean + 1e-12

    def test_geometric_mean_matches_scipy(self, samples):
        for data in samples:
            assert geometric_mean(data) == pytest.approx(sps.gmean(data), rel=1e-9)

    def test_variance_non_negative(self, samples):
        for data in samples:
            assert variance(data) >= 0.0

    def test_variance_matches_numpy_ddof1(self, samples):
        for data in samples:
            assert variance(data) == pytest.approx(np.var(data, ddof=1), rel=1e-9)

    def test_negative_values_mean_within_extremes(self):
        data = np.array([-5.0, -1.0, 0.0, 2.5, 10.0])
        r = compute_statistics(data)
        assert r.minimum <= r.arithmetic_mean <= r.maximum
        assert r.variance >= 0.0


class TestSingleValue:

    def test_variance_is_zero(self):
        assert variance(np.array([4.2])) == 0.0

    def test_all_statistics_equal_value(self):
        r = compute_statistics(np.array([4.2]))
        assert r.arithmetic_mean == pytest.approx(4.2)
        assert r.geometric_mean == pytest.approx(4.2)
        assert r.minimum == r.maximum == r.sum == 4.2


class TestNonPositiveGeometricMean:

    def test_zero_gives_zero(self):
        assert geometric_mean(np.array([0.0, 2.0, 8.0])) == 0.0

    def test_negative_gives_nan(self):
        assert np.isnan(geometric_mean(np.array([-1.0, 2.0, 8.0])))

    def test_no_numpy_runtime_warning(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            geometric_mean(np.array([-1.0, 0.0, 2.0]))

    def test_emits_no_log_records(self, caplog):
        with caplog.at_level(logging.DEBUG):
            geometric_mean(np.array([-1.0, 0.0, 2.0]))
        assert caplog.records == []


class TestEmpty:

    @pytest.mark.parametrize('fn', [
        geometric_mean, arithmetic_mean, maximum, minimum, total, variance,
        compute_statistics,
    ])
    def test_empty_raises(self, fn):
        with pytest.raises(EmptyDatasetError):
            fn(np.array([]))


class TestNaNPropagation:

    def test_nan_in_data(self):
        r = compute_statistics(np.array([1.0, np.nan, 3.0]))
        assert np.isnan(r.arithmetic_mean)
        assert np.isnan(r.maximum)
        assert np.isnan(r.minimum)
        assert np.isnan(r.sum)


def test_result_is_frozen():
    r = compute_statistics(np.array([1.0, 2.0]))
    assert isinstance(r, StatsResult)
    with pytest.raises(AttributeError):
        r.sum = 0.0
