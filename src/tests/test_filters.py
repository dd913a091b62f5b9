import numpy as np
import pandas as pd
import pytest

from longmemory.filters import (
    FractionalOrder,
    IntegerOrder,
    csa_filter,
    csadiff,
    differencing_order,
    fi_survival_probs,
    fracdiff,
    fractional_filter,
    linear_convolve,
)


def test_fractional_filter_values():
    coefs = fractional_filter(5, 0.5)
    assert np.allclose(coefs, [1.0, -0.5, -0.125, -0.0625, -0.0390625])
    assert fractional_filter(1, 0.3).tolist() == [1.0]


def test_csa_filter_values():
    assert np.allclose(csa_filter(2, 1.5, 1.5), [1.0, np.sqrt(0.5)])
    coefs = csa_filter(200, 1.4, 1.6)
    assert coefs[0] == 1.0
    assert np.all(np.diff(coefs) < 0)


def test_csa_filter_rejects_nonpositive_parameters():
    with pytest.raises(ValueError):
        csa_filter(10, 0.0, 1.5)
    with pytest.raises(ValueError):
        csa_filter(10, 1.5, -1.0)


def test_survival_probabilities():
    assert fi_survival_probs(3, 0).tolist() == [1.0, 0.0, 0.0]
    probs = fi_survival_probs(100, 0.4)
    assert probs[0] == 1.0
    assert np.all(np.diff(probs) <= 0)
    with pytest.raises(ValueError):
        fi_survival_probs(10, 1.2)


def test_length_validation():
    with pytest.raises(ValueError):
        fractional_filter(0, 0.2)


def test_linear_convolution_matches_direct_sum():
    rng = np.random.default_rng(0)
    x = rng.normal(size=37)
    b = rng.normal(size=37)
    expected = np.convolve(x, b)[:37]
    assert np.allclose(linear_convolve(x, b), expected)


def test_linear_convolution_short_taps_are_padded():
    x = np.arange(1.0, 6.0)
    assert np.allclose(linear_convolve(x, [1.0, -1.0]), [1.0, 1.0, 1.0, 1.0, 1.0])


def test_fracdiff_integer_orders():
    x = np.random.default_rng(1).normal(size=10)
    same = fracdiff(x, 0)
    assert np.array_equal(same, x)
    assert same is not x
    assert np.array_equal(fracdiff(np.ones(10), 1), np.zeros(9))
    assert np.allclose(fracdiff(x, 1), np.diff(x))


def test_fracdiff_float_zero_is_identity():
    x = np.random.default_rng(2).normal(size=25)
    assert np.allclose(fracdiff(x, 0.0), x)


def test_fracdiff_reference_values():
    assert np.allclose(fracdiff(np.ones(3), 0.5), [1.0, 0.5, 0.375])


def test_fractional_integration_inverts_differencing():
    x = np.random.default_rng(3).normal(size=300)
    assert np.allclose(fracdiff(fracdiff(x, 0.35), -0.35), x)


def test_fracdiff_rejects_other_integer_orders():
    with pytest.raises(ValueError):
        fracdiff(np.ones(5), 2)
    with pytest.raises(ValueError):
        IntegerOrder(-1)


def test_differencing_order_resolution():
    assert differencing_order(np.int64(1)) == IntegerOrder(1)
    assert differencing_order(0.5) == FractionalOrder(0.5)
    assert differencing_order(1.0) == FractionalOrder(1.0)
    with pytest.raises(TypeError):
        differencing_order(True)


def test_fracdiff_accepts_pandas_and_rejects_matrices():
    s = pd.Series(np.ones(3), index=pd.date_range("2024-01-01", periods=3))
    assert np.allclose(fracdiff(s, 0.5), [1.0, 0.5, 0.375])
    with pytest.raises(ValueError):
        fracdiff(np.ones((3, 2)), 0.5)
    with pytest.raises(ValueError):
        fracdiff([1.0, np.nan, 2.0], 0.5)


def test_csadiff_preserves_zero():
    assert np.allclose(csadiff(np.zeros(10), 1.4, 1.4), np.zeros(10))


def test_csadiff_impulse_response_is_filter():
    impulse = np.zeros(50)
    impulse[0] = 1.0
    assert np.allclose(csadiff(impulse, 1.3, 1.7), csa_filter(50, 1.3, 1.7))
