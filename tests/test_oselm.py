"""Testing for the Online Sequential Extreme Learning Machine."""

import numpy as np
import pytest
from sklearn.datasets import load_iris
from sklearn.exceptions import NotFittedError
from sklearn.model_selection import train_test_split
from sklearn.preprocessing import StandardScaler

from elmtoolbox.extreme_learning_machine import (OSELMClassifier,
                                                 OSELMRegressor)


def test_oselm_sequential_equals_batch() -> None:
    print('\ntest_oselm_sequential_equals_batch():')
    rs = np.random.RandomState(42)
    X = rs.uniform(-1., 1., size=(50, 4))
    y = rs.uniform(-1., 1., size=(50, 2))
    X_test = rs.uniform(-1., 1., size=(10, 4))

    sequential = OSELMRegressor(hidden_layer_size=8, input_scaling=3.,
                                random_state=42)
    sequential.partial_fit(X[:20], y[:20])
    sequential.partial_fit(X[20:], y[20:])
    batch = OSELMRegressor(hidden_layer_size=8, input_scaling=3.,
                           random_state=42).fit(X, y)

    np.testing.assert_array_equal(sequential.input_weights,
                                  batch.input_weights)
    assert np.linalg.norm(sequential.output_weights - batch.output_weights) \
        <= 1e-6 * np.linalg.norm(batch.output_weights)
    np.testing.assert_allclose(sequential.predict(X_test),
                               batch.predict(X_test), rtol=1e-5, atol=1e-8)


def test_oselm_fit_resets() -> None:
    print('\ntest_oselm_fit_resets():')
    rs = np.random.RandomState(42)
    X, y = rs.rand(40, 3), rs.rand(40)
    elm = OSELMRegressor(hidden_layer_size=5)
    elm.partial_fit(X[:20], y[:20])
    elm.fit(X[20:], y[20:])
    reference = OSELMRegressor(hidden_layer_size=5).fit(X[20:], y[20:])
    np.testing.assert_allclose(elm.output_weights, reference.output_weights)
    assert elm.correlation_inverse.shape == (5, 5)


def test_oselm_undersized_first_batch() -> None:
    print('\ntest_oselm_undersized_first_batch():')
    rs = np.random.RandomState(42)
    with pytest.warns(UserWarning):
        OSELMRegressor(hidden_layer_size=10).partial_fit(rs.rand(5, 2),
                                                         rs.rand(5))


def test_oselm_errors() -> None:
    print('\ntest_oselm_errors():')
    rs = np.random.RandomState(42)
    with pytest.raises(NotFittedError):
        OSELMRegressor().predict(rs.rand(3, 2))
    elm = OSELMRegressor(hidden_layer_size=5).partial_fit(rs.rand(20, 2),
                                                          rs.rand(20))
    with pytest.raises(ValueError):
        elm.partial_fit(rs.rand(10, 3), rs.rand(10))
    with pytest.raises(ValueError):
        elm.predict(rs.rand(3, 3))
    with pytest.raises(ValueError):
        OSELMClassifier().partial_fit(rs.rand(20, 2), np.zeros(20))


def test_iris_oselm_classifier() -> None:
    print('\ntest_iris_oselm_classifier():')
    X, y = load_iris(return_X_y=True)
    X = StandardScaler().fit_transform(X)
    X_train, X_test, y_train, y_test = train_test_split(
        X, y, test_size=5, random_state=42)
    cls = OSELMClassifier(hidden_layer_size=20, random_state=42)
    classes = np.unique(y)
    for X_batch, y_batch in zip(np.array_split(X_train, 5),
                                np.array_split(y_train, 5)):
        cls.partial_fit(X_batch, y_batch, classes=classes)
    print('score: {0}'.format(cls.score(X_test, y_test)))
    np.testing.assert_array_equal(cls.classes_, classes)
    assert cls.score(X_test, y_test) >= 4. / 5.


def test_oselm_target_shape_between_batches() -> None:
    print('\ntest_oselm_target_shape_between_batches():')
    rs = np.random.RandomState(42)
    X = rs.uniform(-1., 1., size=(50, 4))
    y = rs.uniform(-1., 1., size=50)
    elm = OSELMRegressor(hidden_layer_size=5)
    elm.partial_fit(X[:20], y[:20].reshape(-1, 1))
    elm.partial_fit(X[20:], y[20:])
    assert elm.output_weights.shape == (5, 1)
    assert elm.predict(X[:4]).shape == (4, 1)
    batch = OSELMRegressor(hidden_layer_size=5).fit(X, y)
    np.testing.assert_allclose(elm.predict(X[:4]).ravel(),
                               batch.predict(X[:4]), rtol=1e-5, atol=1e-8)


def test_oselm_attributes_not_fitted() -> None:
    print('\ntest_oselm_attributes_not_fitted():')
    elm = OSELMRegressor()
    for attribute in ['correlation_inverse', 'input_weights', 'output_weights']:
        with pytest.raises(NotFittedError):
            getattr(elm, attribute)
