"""Testing for blocks.input_to_node module."""
import numpy as np
import pytest
from sklearn.exceptions import NotFittedError

from elmtoolbox.base.blocks import InputToNode
from elmtoolbox.exceptions import ConfigurationError


def test_input_to_node_invalid_bias_scaling() -> None:
    print('\ntest_input_to_node_invalid_bias_scaling():')
    X = np.zeros(shape=(10, 5))
    with pytest.raises(ValueError):
        i2n = InputToNode(bias_scaling=-1e-5)
        i2n.fit(X)


def test_input_to_node_invalid_input_scaling() -> None:
    print('\ntest_input_to_node_invalid_input_scaling():')
    X = np.zeros(shape=(10, 5))
    with pytest.raises(ConfigurationError):
        i2n = InputToNode(input_scaling=0)
        i2n.fit(X)


def test_input_to_node_invalid_activation() -> None:
    print('\ntest_input_to_node_invalid_activation():')
    X = np.zeros(shape=(10, 5))
    with pytest.raises(ConfigurationError):
        i2n = InputToNode(input_activation="test")
        i2n.fit(X)


def test_input_to_node_invalid_hls() -> None:
    print('\ntest_input_to_node_invalid_hls():')
    X = np.zeros(shape=(10, 3))
    with pytest.raises(ConfigurationError):
        InputToNode(hidden_layer_size=0).fit(X)


def test_input_to_node_not_fitted() -> None:
    print('\ntest_input_to_node_not_fitted():')
    with pytest.raises(NotFittedError):
        InputToNode().transform(np.zeros(shape=(10, 3)))
    with pytest.raises(NotFittedError):
        InputToNode().add_nodes(1)


def test_input_to_node_shapes() -> None:
    print('\ntest_input_to_node_shapes():')
    X = np.random.RandomState(0).rand(10, 3)
    i2n = InputToNode(hidden_layer_size=5, random_state=42).fit(X)
    assert i2n.input_weights.shape == (3, 5)
    assert i2n.bias_weights.shape == (5, )
    assert np.all(np.abs(i2n.input_weights) <= 1.)
    assert np.all((i2n.bias_weights >= 0.) & (i2n.bias_weights <= 1.))
    assert i2n.transform(X).shape == (10, 5)
    with pytest.raises(ValueError):
        i2n.transform(np.zeros(shape=(10, 4)))


def test_input_to_node_reproducible() -> None:
    print('\ntest_input_to_node_reproducible():')
    X = np.random.RandomState(0).rand(10, 3)
    H1 = InputToNode(hidden_layer_size=5, random_state=1).fit_transform(X)
    H2 = InputToNode(hidden_layer_size=5, random_state=1).fit_transform(X)
    H3 = InputToNode(hidden_layer_size=5, random_state=2).fit_transform(X)
    np.testing.assert_array_equal(H1, H2)
    assert not np.allclose(H1, H3)


def test_input_to_node_add_nodes() -> None:
    print('\ntest_input_to_node_add_nodes():')
    X = np.random.RandomState(0).rand(10, 3)
    i2n = InputToNode(hidden_layer_size=2, random_state=42).fit(X)
    H = i2n.transform(X)
    input_weights, bias_weights = i2n.add_nodes(3)
    assert input_weights.shape == (3, 3)
    assert bias_weights.shape == (3, )
    assert i2n.n_hidden == 5
    delta_H = i2n.transform_nodes(X, input_weights, bias_weights)
    np.testing.assert_allclose(i2n.transform(X), np.hstack((H, delta_H)))
    with pytest.raises(ConfigurationError):
        i2n.add_nodes(0)


def test_input_to_node_callable_activation() -> None:
    print('\ntest_input_to_node_callable_activation():')
    X = np.random.RandomState(0).rand(10, 3)
    H_identity = InputToNode(hidden_layer_size=4, input_activation='identity',
                             random_state=42).fit_transform(X)
    H_square = InputToNode(hidden_layer_size=4, input_activation=np.square,
                           random_state=42).fit_transform(X)
    np.testing.assert_allclose(H_square, H_identity ** 2)


def test_input_to_node_unseeded_ignores_global_seed() -> None:
    print('\ntest_input_to_node_unseeded_ignores_global_seed():')
    X = np.random.RandomState(0).rand(10, 3)
    np.random.seed(123)
    i2n_1 = InputToNode(hidden_layer_size=5, random_state=None).fit(X)
    np.random.seed(123)
    i2n_2 = InputToNode(hidden_layer_size=5, random_state=None).fit(X)
    assert not np.allclose(i2n_1.input_weights, i2n_2.input_weights)
    assert i2n_1._random_state is not np.random.mtrand._rand
