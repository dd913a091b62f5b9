import numpy as np
import pytest
from scipy.special import gamma, gammaln

from longmemory.models import (
    csa_acf,
    csa_acov,
    csa_cov_matrix,
    fi_acf,
    fi_acov,
    fi_cov_matrix,
    toeplitz_covariance,
)


def test_variance_reference_values():
    assert np.allclose(fi_acov(1, 0.4), [2.070098325296286])
    assert np.allclose(fi_acov(1, 0.2), [1.0986855396043997])
    assert np.allclose(csa_acov(1, 1.4, 1.4), [2.1130846015858644])
    assert np.allclose(fi_acf(1, 0.4), [1.0])
    assert np.allclose(csa_acf(1, 1.4, 1.4), [1.0])


def test_fi_acov_matches_gamma_ratios():
    d = 0.3
    k = np.arange(20)
    expected = (
        gamma(1 - 2 * d)
        / (gamma(1 - d) * gamma(d))
        * np.exp(gammaln(k + d) - gammaln(k + 1 - d))
    )
    assert np.allclose(fi_acov(20, d), expected)


def test_fi_white_noise():
    assert np.allclose(fi_acov(5, 0.0), [1.0, 0.0, 0.0, 0.0, 0.0])


def test_fi_acf_decays_hyperbolically():
    d = 0.35
    acf = fi_acf(4000, d)
    # ρ(k) ~ C k^{2d-1}: the ratio ρ(2k)/ρ(k) tends to 2^{2d-1}
    assert np.isclose(acf[3000] / acf[1500], 2 ** (2 * d - 1), rtol=1e-3)


def test_csa_acov_matches_gamma_ratios():
    p, q = 1.3, 1.8
    k = np.arange(15)
    expected = np.exp(gammaln(q - 1) + gammaln(p + k / 2) - gammaln(p + q - 1 + k / 2))
    assert np.allclose(csa_acov(15, p, q), expected)


def test_csa_odd_length_is_truncated():
    assert csa_acov(7, 1.5, 1.5).size == 7
    assert csa_acov(8, 1.5, 1.5).size == 8


def test_domain_violations_raise():
    with pytest.raises(ValueError):
        fi_acov(10, 0.5)
    with pytest.raises(ValueError):
        csa_acov(10, 1.4, 1.0)
    with pytest.raises(ValueError):
        csa_acov(10, 0.0, 1.5)


def test_toeplitz_structure():
    coefs = np.array([4.0, 2.0, 1.0, 0.5])
    V = toeplitz_covariance(coefs)
    assert V.shape == (4, 4)
    assert np.array_equal(V, V.T)
    for i in range(4):
        for j in range(4):
            assert V[i, j] == coefs[abs(i - j)]


def test_covariance_matrices_are_positive_definite():
    np.linalg.cholesky(fi_cov_matrix(60, 0.3))
    np.linalg.cholesky(fi_cov_matrix(60, -0.3))
    np.linalg.cholesky(csa_cov_matrix(60, 1.5, 1.6))
