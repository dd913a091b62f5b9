import numpy as np
import pandas as pd
import pytest

from longmemory.estimators import HAR, har_estimate


def _manual_design(x, lags):
    T, mm = len(x), max(lags)
    cols = [np.ones(T - mm)]
    for L in lags:
        cols.append(np.mean([x[mm - j : T - j] for j in range(1, L + 1)], axis=0))
    return np.column_stack(cols), x[mm:]


def test_har_matches_least_squares():
    rng = np.random.default_rng(123)
    x = 1.0 + rng.normal(scale=0.2, size=300)
    beta, sigma = har_estimate(x)

    X, y = _manual_design(x, (1, 5, 22))
    expected, *_ = np.linalg.lstsq(X, y, rcond=None)
    resid = y - X @ expected
    assert np.allclose(beta, expected)
    assert np.isclose(sigma, np.sqrt(resid @ resid / (len(x) - 22 - 3 - 1)))


def test_har_custom_lags_and_pandas_input():
    rng = np.random.default_rng(7)
    idx = pd.date_range("2023-01-01", periods=120, freq="D")
    rv = pd.Series(rng.gamma(2.0, 0.5, size=120), index=idx)
    har = HAR(lags=(10, 1)).fit(rv)
    assert har.lags == (1, 10)
    assert list(har.params_.index) == ["const", "mean_1", "mean_10"]
    assert har.nobs_ == 110
    assert har.sigma_ > 0


def test_har_validation():
    with pytest.raises(ValueError):
        HAR(lags=(0, 5))
    with pytest.raises(ValueError):
        HAR(lags=(5, 5))
    with pytest.raises(ValueError):
        har_estimate(np.ones(20))
