"""The :mod:`base` contains the random initialization of ELM hidden layers."""

# License: BSD 3 clause

import numpy as np


def _uniform_random_input_weights(n_features_in: int, hidden_layer_size: int,
                                  random_state: np.random.RandomState) \
        -> np.ndarray:
    """
    Return uniform random input weights in range [-1, 1].

    Parameters
    ----------
    n_features_in : int
        Number of input features.
    hidden_layer_size : int
        Number of hidden nodes to draw weights for.
    random_state : numpy.random.RandomState

    Returns
    -------
    uniform_random_input_weights : ndarray of size
    (n_features_in, hidden_layer_size)
    """
    return random_state.uniform(low=-1., high=1.,
                                size=(n_features_in, hidden_layer_size))


def _uniform_random_bias(hidden_layer_size: int,
                         random_state: np.random.RandomState) -> np.ndarray:
    """
    Return uniform random bias in range [0, 1].

    Parameters
    ----------
    hidden_layer_size : int
    random_state : numpy.random.RandomState

    Returns
    -------
    uniform_random_bias : ndarray of size (hidden_layer_size)
    """
    return random_state.uniform(low=0., high=1., size=hidden_layer_size)
