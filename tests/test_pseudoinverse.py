"""Testing for the pseudoinverse regression (elmtoolbox.linear_model)."""

import numpy as np
import pytest
from sklearn.base import is_regressor
from sklearn.exceptions import NotFittedError

from elmtoolbox.exceptions import NumericalDegeneracyWarning
from elmtoolbox.linear_model import PseudoinverseRegression, pseudoinverse


def test_pseudoinverse_tall_and_wide() -> None:
    print('\ntest_pseudoinverse_tall_and_wide():')
    rs = np.random.RandomState(42)
    for shape in [(20, 5), (5, 20), (7, 7)]:
        X = rs.uniform(-1., 1., size=shape)
        np.testing.assert_allclose(pseudoinverse(X), np.linalg.pinv(X),
                                   atol=1e-8)


def test_pseudoinverse_regression_fit() -> None:
    print('\ntest_pseudoinverse_regression_fit():')
    rs = np.random.RandomState(42)
    X = rs.uniform(-1., 1., size=(50, 4))
    y = np.matmul(X, rs.rand(4, 2))
    reg = PseudoinverseRegression()
    assert is_regressor(reg)
    with pytest.raises(NotFittedError):
        reg.predict(X)
    reg.fit(X, y)
    np.testing.assert_allclose(reg.predict(X), y, atol=1e-8)
    assert reg.residual < 1e-8


def test_add_features_equals_refit() -> None:
    print('\ntest_add_features_equals_refit():')
    rs = np.random.RandomState(42)
    X = rs.uniform(-1., 1., size=(30, 8))
    y = rs.rand(30, 2)
    reg = PseudoinverseRegression().fit(X[:, :3], y)
    reg.add_features(X[:, 3:5])
    reg.add_features(X[:, 5:8])

    H, P = reg.hidden_layer_state, reg.pseudo_inverse
    assert H.shape == (30, 8)
    assert P.shape == (8, 30)
    np.testing.assert_allclose(P, np.linalg.pinv(X), atol=1e-8)
    np.testing.assert_allclose(np.matmul(H, np.matmul(P, H)), H, atol=1e-8)
    np.testing.assert_allclose(np.matmul(P, np.matmul(H, P)), P, atol=1e-8)
    np.testing.assert_allclose(
        reg.output_weights, np.linalg.lstsq(X, y, rcond=None)[0], atol=1e-8)


def test_add_features_wrong_samples() -> None:
    print('\ntest_add_features_wrong_samples():')
    rs = np.random.RandomState(42)
    reg = PseudoinverseRegression().fit(rs.rand(10, 2), rs.rand(10))
    with pytest.raises(ValueError):
        reg.add_features(rs.rand(9, 1))
    with pytest.raises(NotFittedError):
        PseudoinverseRegression().add_features(rs.rand(10, 1))


def test_add_dependent_features_warns() -> None:
    print('\ntest_add_dependent_features_warns():')
    rs = np.random.RandomState(42)
    X = rs.uniform(-1., 1., size=(20, 3))
    reg = PseudoinverseRegression().fit(X, rs.rand(20))
    with pytest.warns(NumericalDegeneracyWarning):
        reg.add_features(X[:, :1] * 2.)
    assert reg.hidden_layer_state.shape == (20, 4)
    H, P = reg.hidden_layer_state, reg.pseudo_inverse
    np.testing.assert_allclose(np.matmul(H, np.matmul(P, H)), H, atol=1e-8)
    assert np.all(np.abs(P) < 1e3)
