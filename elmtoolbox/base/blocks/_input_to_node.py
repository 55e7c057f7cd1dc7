"""The :mod:`input_to_node` contains the random projection layer of ELMs."""

# License: BSD 3 clause

from __future__ import annotations

import sys
import logging
from typing import Callable, Tuple, Union

import numpy as np
from sklearn.base import BaseEstimator, TransformerMixin
from sklearn.utils import check_random_state
from sklearn.utils.validation import validate_data
from sklearn.exceptions import NotFittedError

from ...base import (ACTIVATIONS, _uniform_random_bias,
                     _uniform_random_input_weights)
from ...exceptions import ConfigurationError


logger = logging.getLogger(__name__)


class InputToNode(TransformerMixin, BaseEstimator):
    """
    InputToNode class for Extreme Learning Machines.

    Computes the hidden layer state ``H = f(X @ W * input_scaling + b *
    bias_scaling)`` for randomly drawn, fixed input weights ``W`` and bias
    ``b``. The layer can be extended by further nodes drawn from the same
    random stream, which is what growing ELMs rely on.

    Parameters
    ----------
    hidden_layer_size : int, default=500
        Sets the initial number of nodes in the hidden layer.
    input_activation : Union[str, Callable], default='sig'
        This element represents the activation function in the hidden layer.
            - 'sig', 'sigmoid' or 'logistic', the logistic sigmoid function,
            returns f(x) = 1/(1+exp(-x)).
            - 'sin' or 'sine', returns f(x) = sin(x).
            - 'hardlim', the hard limit function, returns f(x) = 1 if x >= 0
            else 0.
            - 'tribas', the triangular basis function,
            returns f(x) = max(1 - |x|, 0).
            - 'radbas', the radial basis function, returns f(x) = exp(-x^2).
            - 'tanh', 'relu' or 'identity'.
            - Any callable, that maps an ndarray to an ndarray of the same
            shape.
    input_scaling : float, default=1.
        Scales the input weight matrix.
    bias_scaling : float, default=1.
        Scales the input bias of the activation.
    random_state : Union[int, np.random.RandomState, None], default=42
        Seed or random stream used for the input weights and bias. The
        stream is kept and used again by :meth:`add_nodes`.
    """

    def __init__(self, *,
                 hidden_layer_size: int = 500,
                 input_activation: Union[str, Callable] = 'sig',
                 input_scaling: float = 1.,
                 bias_scaling: float = 1.,
                 random_state: Union[int, np.random.RandomState,
                                     None] = 42) -> None:
        """Construct the InputToNode."""
        self.hidden_layer_size = hidden_layer_size
        self.input_activation = input_activation
        self.input_scaling = input_scaling
        self.bias_scaling = bias_scaling
        self.random_state = random_state

    def fit(self, X: np.ndarray, y: None = None) -> InputToNode:
        """
        Fit the InputToNode. Initialize input weights and bias.

        Parameters
        ----------
        X : ndarray of shape (n_samples, n_features)
        y : None
            ignored

        Returns
        -------
        self : returns a trained InputToNode.
        """
        self._validate_hyperparameters()
        validate_data(self, X, reset=True)
        self._input_weights = _uniform_random_input_weights(
            n_features_in=self.n_features_in_,
            hidden_layer_size=self.hidden_layer_size,
            random_state=self._random_state)
        self._bias_weights = _uniform_random_bias(
            hidden_layer_size=self.hidden_layer_size,
            random_state=self._random_state)
        return self

    def transform(self, X: np.ndarray) -> np.ndarray:
        """
        Transform the input matrix X.

        Parameters
        ----------
        X : ndarray of size (n_samples, n_features)

        Returns
        -------
        y: ndarray of size (n_samples, n_hidden)
        """
        self._check_fitted()
        X = validate_data(self, X, reset=False)
        return self.transform_nodes(X, self._input_weights,
                                    self._bias_weights)

    def transform_nodes(self, X: np.ndarray, input_weights: np.ndarray,
                        bias_weights: np.ndarray) -> np.ndarray:
        """
        Compute the hidden layer state of a given block of nodes only.

        Parameters
        ----------
        X : ndarray of size (n_samples, n_features)
        input_weights : ndarray of size (n_features, n_nodes)
        bias_weights : ndarray of size (n_nodes)

        Returns
        -------
        y: ndarray of size (n_samples, n_nodes)
        """
        node_inputs = InputToNode._node_inputs(
            X, input_weights, self.input_scaling, bias_weights,
            self.bias_scaling)
        if callable(self.input_activation):
            return np.asarray(self.input_activation(node_inputs),
                              dtype=float)
        ACTIVATIONS[self.input_activation](node_inputs)
        return node_inputs

    def add_nodes(self, n_nodes: int) -> Tuple[np.ndarray, np.ndarray]:
        """
        Append randomly initialized nodes to the hidden layer.

        The new weights are drawn from the random stream that was used for
        the initial weights, so growing a layer node by node is as
        reproducible as drawing it at once.

        Parameters
        ----------
        n_nodes : int
            Number of nodes to be added.

        Returns
        -------
        input_weights : ndarray of size (n_features, n_nodes)
            The input weights of the new nodes.
        bias_weights : ndarray of size (n_nodes)
            The bias of the new nodes.
        """
        self._check_fitted()
        if n_nodes <= 0:
            raise ConfigurationError("n_nodes must be > 0, got {0}."
                                     .format(n_nodes))
        input_weights = _uniform_random_input_weights(
            n_features_in=self.n_features_in_, hidden_layer_size=n_nodes,
            random_state=self._random_state)
        bias_weights = _uniform_random_bias(
            hidden_layer_size=n_nodes, random_state=self._random_state)
        self._input_weights = np.hstack((self._input_weights, input_weights))
        self._bias_weights = np.concatenate((self._bias_weights,
                                             bias_weights))
        logger.debug("Added %d nodes, hidden layer has now %d nodes.",
                     n_nodes, self.n_hidden)
        return input_weights, bias_weights

    @staticmethod
    def _node_inputs(X: np.ndarray, input_weights: np.ndarray,
                     input_scaling: float, bias: np.ndarray,
                     bias_scaling: float) -> np.ndarray:
        """
        Scale the node inputs input_scaling, Multiply with input_weights and
        add bias.

        Parameters
        ----------
        X : ndarray of size (n_samples, n_features)
        input_weights : ndarray of size (n_features, n_nodes)
        input_scaling : float
        bias : ndarray of size (n_nodes)
        bias_scaling : float

        Returns
        -------
        node_inputs : ndarray of size (n_samples, n_nodes)
        """
        return np.matmul(X, input_weights) * input_scaling + \
            np.ones(shape=(X.shape[0], 1)) * bias * bias_scaling

    def _check_fitted(self) -> None:
        if not hasattr(self, '_input_weights'):
            raise NotFittedError(
                "This InputToNode instance is not fitted yet. Call 'fit' "
                "with appropriate arguments before using this estimator.")

    def _validate_hyperparameters(self) -> None:
        """Validate the hyperparameters."""
        if self.random_state is None:
            self._random_state = np.random.RandomState()
        else:
            self._random_state = check_random_state(self.random_state)

        if self.hidden_layer_size is None or self.hidden_layer_size <= 0:
            raise ConfigurationError("hidden_layer_size must be > 0, got {0}."
                                     .format(self.hidden_layer_size))
        if not callable(self.input_activation) \
                and self.input_activation not in ACTIVATIONS:
            raise ConfigurationError(
                "The input_activation '{0}' is not supported. "
                "Supported activations are {1}."
                .format(self.input_activation, sorted(ACTIVATIONS)))
        if self.input_scaling <= 0.:
            raise ConfigurationError("input_scaling must be > 0, got {0}."
                                     .format(self.input_scaling))
        if self.bias_scaling < 0:
            raise ConfigurationError("bias_scaling must be >= 0, got {0}."
                                     .format(self.bias_scaling))

    def __sizeof__(self) -> int:
        """
        Return the size of the object in bytes.

        Returns
        -------
        size : int
        Object memory in bytes.
        """
        size = object.__sizeof__(self)
        if hasattr(self, '_input_weights'):
            size += self._input_weights.nbytes + self._bias_weights.nbytes + \
                sys.getsizeof(self._random_state)
        return size

    @property
    def input_weights(self) -> np.ndarray:
        """
        Return the input weights.

        Returns
        -------
        input_weights : ndarray of size (n_features, n_hidden)
        """
        return self._input_weights

    @property
    def bias_weights(self) -> np.ndarray:
        """
        Return the bias.

        Returns
        -------
        bias : ndarray of size (n_hidden)
        """
        return self._bias_weights

    @property
    def n_hidden(self) -> int:
        """
        Return the current number of hidden nodes.

        Returns
        -------
        n_hidden : int
        """
        return self._input_weights.shape[1]
