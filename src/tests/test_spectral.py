import numpy as np
import pytest

from longmemory.config import SpectralConfig
from longmemory.estimators import (
    GPH,
    ExactWhittle,
    Whittle,
    exact_whittle_estimate,
    exact_whittle_objective,
    gph_estimate,
    gph_variance,
    whittle_estimate,
    whittle_objective,
    whittle_variance,
)
from longmemory.models import fi_gen


@pytest.fixture(scope="module")
def fi_series():
    return fi_gen(10_000, 0.3, rng=2024)


def test_gph_recovers_memory(fi_series):
    assert abs(gph_estimate(fi_series) - 0.3) < 0.2


def test_gph_on_white_noise():
    x = np.random.default_rng(11).normal(size=10_000)
    assert abs(gph_estimate(x)) < 0.2


def test_gph_bias_reduction_runs(fi_series):
    d1 = gph_estimate(fi_series, m=0.7, bias_reduction=1)
    d2 = gph_estimate(fi_series, m=0.7, bias_reduction=2)
    assert np.isfinite(d1) and np.isfinite(d2)
    assert abs(d1 - 0.3) < 0.2


def test_gph_rejects_bad_bias_reduction(fi_series):
    with pytest.raises(ValueError):
        gph_estimate(fi_series, bias_reduction=-1)
    with pytest.raises(ValueError):
        gph_estimate(fi_series, bias_reduction=1.5)


def test_gph_variance_table():
    base = np.pi**2 / 24 / 99
    assert np.isclose(gph_variance(10_000), base)
    assert np.isclose(gph_variance(10_000, bias_reduction=1), 2.25 * base)
    assert np.isclose(gph_variance(10_000, bias_reduction=4), 6.06 * base)
    with pytest.warns(UserWarning):
        assert np.isclose(gph_variance(10_000, bias_reduction=5), 6.06 * base)


def test_whittle_variance():
    assert np.isclose(whittle_variance(10_000), 1 / (4 * 99))


def test_whittle_recovers_memory(fi_series):
    assert abs(whittle_estimate(fi_series) - 0.3) < 0.15
    assert abs(exact_whittle_estimate(fi_series) - 0.3) < 0.15


def test_whittle_variants_agree():
    x = fi_gen(4096, 0.2, rng=5)
    tol = 3 * np.sqrt(whittle_variance(x.size))
    assert abs(whittle_estimate(x) - exact_whittle_estimate(x)) < tol


def test_whittle_estimate_minimises_objective(fi_series):
    d_hat = whittle_estimate(fi_series)
    q_hat = whittle_objective(d_hat, fi_series)
    assert q_hat <= whittle_objective(d_hat - 0.1, fi_series)
    assert q_hat <= whittle_objective(d_hat + 0.1, fi_series)

    d_exact = exact_whittle_estimate(fi_series)
    q_exact = exact_whittle_objective(d_exact, fi_series)
    assert q_exact <= exact_whittle_objective(d_exact - 0.1, fi_series)
    assert q_exact <= exact_whittle_objective(d_exact + 0.1, fi_series)


def test_band_order_violation_raises_everywhere(fi_series):
    with pytest.raises(ValueError):
        gph_estimate(fi_series, m=0.3, l=0.5)
    with pytest.raises(ValueError):
        whittle_estimate(fi_series, m=0.3, l=0.5)
    with pytest.raises(ValueError):
        exact_whittle_estimate(fi_series, m=0.3, l=0.5)
    with pytest.raises(ValueError):
        gph_variance(fi_series.size, m=0.3, l=0.5)
    with pytest.raises(ValueError):
        whittle_variance(fi_series.size, m=0.3, l=0.5)
    with pytest.raises(ValueError):
        GPH(fi_series, m=0.3, l=0.5).fit()


def test_class_estimators(fi_series):
    gph = GPH(fi_series).fit()
    assert gph.result_["n_freq"] == 99
    assert np.isclose(gph.result_["d"], gph_estimate(fi_series))
    assert np.isclose(gph.result_["se"] ** 2, gph_variance(fi_series.size))

    wh = Whittle(fi_series).fit()
    assert wh.result_["converged"]
    assert np.isclose(wh.result_["d"], whittle_estimate(fi_series))

    ew = ExactWhittle(fi_series, config=SpectralConfig(m=0.6)).fit()
    assert ew.m == 0.6
    assert ew.result_["n_freq"] == 250
    assert abs(ew.result_["d"] - 0.3) < 0.1


def test_gph_exactly_identified_band():
    # n = 9 and 10 leave two Fourier frequencies for two coefficients
    for n in (9, 10):
        x = np.random.default_rng(n).normal(size=n)
        assert np.isfinite(gph_estimate(x))
    with pytest.raises(ValueError):
        gph_estimate(np.random.default_rng(1).normal(size=10), bias_reduction=1)
