"""Testing for the Error Minimized Extreme Learning Machine."""

import numpy as np
import pytest
from sklearn.datasets import load_iris
from sklearn.exceptions import NotFittedError
from sklearn.model_selection import train_test_split
from sklearn.preprocessing import StandardScaler

from elmtoolbox.exceptions import ConfigurationError
from elmtoolbox.extreme_learning_machine import (EMELMClassifier,
                                                 EMELMRegressor)


def test_emelm_small_regression() -> None:
    print('\ntest_emelm_small_regression():')
    rs = np.random.RandomState(42)
    X = rs.rand(10, 4)
    y = rs.rand(10, 1)
    elm = EMELMRegressor(hidden_layer_size=1, max_hidden_layer_size=20,
                         nodes_by_iteration=1, max_error=0.05,
                         random_state=42)
    elm.fit(X, y)
    print("hidden nodes: {0}, residuals: {1}"
          .format(elm.n_hidden_, elm.residuals_))
    assert elm.n_hidden_ <= 20
    assert elm.residuals_[-1] <= 0.05 or elm.n_hidden_ == 20
    assert elm.predict(X).shape == (10, 1)


def test_emelm_pseudoinverse_identities() -> None:
    print('\ntest_emelm_pseudoinverse_identities():')
    rs = np.random.RandomState(42)
    X = rs.uniform(-3., 3., size=(100, 4))
    y = rs.rand(100, 2)
    elm = EMELMRegressor(hidden_layer_size=2, max_hidden_layer_size=12,
                         nodes_by_iteration=2, max_error=1e-12,
                         random_state=42).fit(X, y)
    H, P = elm.hidden_layer_state, elm.pseudo_inverse
    assert elm.n_hidden_ == 12
    assert H.shape == (100, 12)
    assert P.shape == (12, 100)
    np.testing.assert_allclose(np.matmul(H, np.matmul(P, H)), H, atol=1e-6)
    np.testing.assert_allclose(np.matmul(P, np.matmul(H, P)), P, atol=1e-6)
    np.testing.assert_allclose(H, elm.input_to_node.transform(X), atol=1e-12)
    np.testing.assert_allclose(
        elm.output_weights, np.linalg.lstsq(H, y, rcond=None)[0], atol=1e-6)


def test_emelm_monotonic_residual() -> None:
    print('\ntest_emelm_monotonic_residual():')
    rs = np.random.RandomState(42)
    X = rs.uniform(-3., 3., size=(80, 3))
    y = np.sin(X).sum(axis=1)
    elm = EMELMRegressor(max_hidden_layer_size=15, max_error=1e-12,
                         random_state=1).fit(X, y)
    print("residuals: {0}".format(elm.residuals_))
    assert len(elm.residuals_) == 15
    assert np.all(np.diff(elm.residuals_) <= 1e-10)


def test_emelm_termination() -> None:
    print('\ntest_emelm_termination():')
    rs = np.random.RandomState(42)
    X = rs.uniform(-3., 3., size=(100, 4))
    y = rs.rand(100)
    elm = EMELMRegressor(hidden_layer_size=3, max_hidden_layer_size=20,
                         nodes_by_iteration=4, max_error=1e-12,
                         random_state=42).fit(X, y)
    n_iterations = len(elm.residuals_) - 1
    assert n_iterations <= int(np.ceil((20 - 3) / 4))
    assert elm.n_hidden_ == 20
    assert elm.input_weights.shape == (4, 20)
    assert elm.bias_weights.shape == (20, )


def test_emelm_stops_at_max_error() -> None:
    print('\ntest_emelm_stops_at_max_error():')
    rs = np.random.RandomState(42)
    X = rs.uniform(-3., 3., size=(100, 2))
    y = rs.rand(100)
    elm = EMELMRegressor(max_hidden_layer_size=50, max_error=1e3,
                         random_state=42).fit(X, y)
    assert elm.n_hidden_ == 1
    assert len(elm.residuals_) == 1


def test_emelm_reproducible() -> None:
    print('\ntest_emelm_reproducible():')
    rs = np.random.RandomState(42)
    X = rs.uniform(-3., 3., size=(50, 3))
    y = rs.rand(50)
    elm = EMELMRegressor(max_hidden_layer_size=8, max_error=1e-12,
                         random_state=7)
    y1 = elm.fit(X, y).predict(X)
    y2 = elm.fit(X, y).predict(X)
    np.testing.assert_array_equal(y1, y2)


def test_emelm_invalid_params() -> None:
    print('\ntest_emelm_invalid_params():')
    X, y = np.zeros(shape=(10, 3)), np.zeros(10)
    with pytest.raises(ConfigurationError):
        EMELMRegressor(max_hidden_layer_size=0).fit(X, y)
    with pytest.raises(ConfigurationError):
        EMELMRegressor(hidden_layer_size=5,
                       max_hidden_layer_size=4).fit(X, y)
    with pytest.raises(ConfigurationError):
        EMELMRegressor(max_error=0.).fit(X, y)
    with pytest.raises(ConfigurationError):
        EMELMRegressor(nodes_by_iteration=0).fit(X, y)
    with pytest.raises(NotFittedError):
        EMELMRegressor().predict(X)


def test_iris_emelm_classifier() -> None:
    print('\ntest_iris_emelm_classifier():')
    X, y = load_iris(return_X_y=True)
    X = StandardScaler().fit_transform(X)
    X_train, X_test, y_train, y_test = train_test_split(
        X, y, test_size=5, random_state=42)
    cls = EMELMClassifier(max_hidden_layer_size=30, nodes_by_iteration=5,
                          max_error=1e-3, random_state=42)
    cls.fit(X_train, y_train)
    print('score: {0}'.format(cls.score(X_test, y_test)))
    assert cls.n_hidden_ <= 30
    assert cls.score(X_test, y_test) >= 4. / 5.


def test_emelm_attributes_not_fitted() -> None:
    print('\ntest_emelm_attributes_not_fitted():')
    elm = EMELMRegressor()
    for attribute in ['n_hidden_', 'hidden_layer_state', 'pseudo_inverse',
                      'input_to_node', 'input_weights', 'bias_weights',
                      'output_weights']:
        with pytest.raises(NotFittedError):
            getattr(elm, attribute)
