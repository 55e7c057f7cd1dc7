"""
Incremental regression
"""

# License: BSD 3 clause

from __future__ import annotations

import logging
import warnings

import numpy as np
from sklearn.base import BaseEstimator, RegressorMixin
from sklearn.exceptions import NotFittedError

from ..exceptions import NumericalDegeneracyWarning


logger = logging.getLogger(__name__)


class IncrementalRegression(RegressorMixin, BaseEstimator):
    """
    Recursive least squares regression.

    This linear regression algorithm refines its solution batch by batch
    without refitting on the accumulated data [1]_. The inverse correlation
    matrix ``P = (X.T @ X)^-1`` is updated by the Woodbury identity, so that
    only a matrix of size ``n_samples x n_samples`` of the current batch is
    inverted.

    Attributes
    ----------
    correlation_inverse : ndarray of shape (n_features, n_features)
        Inverse correlation matrix of all samples seen so far.
    output_weights : ndarray of shape (n_features,) or (n_features, n_targets)
        Least squares solution.

    References
    ----------
    .. [1] N. Liang, G. Huang, P. Saratchandran and N. Sundararajan,
           "A Fast and Accurate Online Sequential Learning Algorithm for
           Feedforward Networks," in IEEE Transactions on Neural Networks,
           vol. 17, no. 6, pp. 1411-1423, Nov. 2006,
           doi: 10.1109/TNN.2006.880583.
    """

    def partial_fit(self, X: np.ndarray, y: np.ndarray,
                    reset: bool = False) -> IncrementalRegression:
        """
        Fit the regressor partially.

        Parameters
        ----------
        X : ndarray of shape (n_samples, n_features)
        y : ndarray of shape (n_samples,) or (n_samples, n_targets)
        reset : bool, default=False
            Begin a new fit, drop prior fits.

        Returns
        -------
        self
        """
        if reset or not hasattr(self, '_correlation_inverse'):
            self._initial_fit(X, y)
        else:
            self._recursive_update(X, y)
        return self

    def fit(self, X: np.ndarray, y: np.ndarray) -> IncrementalRegression:
        """
        Fit the regressor.

        Parameters
        ----------
        X : ndarray of shape (n_samples, n_features)
        y : ndarray of shape (n_samples,) or (n_samples, n_targets)

        Returns
        -------
        self
        """
        return self.partial_fit(X, y, reset=True)

    def predict(self, X: np.ndarray) -> np.ndarray:
        """
        Predict output y according to input X.

        Parameters
        ----------
        X : ndarray of shape (n_samples, n_features)

        Returns
        -------
        y : ndarray of shape (n_samples,) or (n_samples, n_targets)
        """
        if not hasattr(self, '_output_weights'):
            raise NotFittedError(self)
        return np.matmul(X, self._output_weights)

    def _initial_fit(self, X: np.ndarray, y: np.ndarray) -> None:
        if X.shape[0] < X.shape[1]:
            warnings.warn("Number of training samples ({0}) should be greater "
                          "than number of hidden nodes ({1}) for the initial "
                          "batch.".format(X.shape[0], X.shape[1]),
                          NumericalDegeneracyWarning)
        self._correlation_inverse = np.linalg.pinv(np.matmul(X.T, X))
        self._output_weights = np.matmul(np.linalg.pinv(X), y)
        logger.debug("Initial batch of %d samples.", X.shape[0])

    def _check_batch(self, X: np.ndarray, y: np.ndarray) -> np.ndarray:
        """Check a later batch against the first one and shape y alike."""
        if X.shape[1] != self._correlation_inverse.shape[0]:
            raise ValueError("X has {0} features, expected {1}."
                             .format(X.shape[1],
                                     self._correlation_inverse.shape[0]))
        if y.shape[0] != X.shape[0]:
            raise ValueError("X has {0} samples, but y has {1}."
                             .format(X.shape[0], y.shape[0]))
        n_targets = 1 if y.ndim == 1 else int(np.prod(y.shape[1:]))
        expected_shape = self._output_weights.shape[1:]
        if n_targets != int(np.prod(expected_shape)):
            raise ValueError("y has {0} targets, expected {1}."
                             .format(n_targets, int(np.prod(expected_shape))))
        return y.reshape((y.shape[0], ) + expected_shape)

    def _recursive_update(self, X: np.ndarray, y: np.ndarray) -> None:
        y = self._check_batch(X, y)
        P = self._correlation_inverse
        PXt = np.matmul(P, X.T)
        S = np.identity(X.shape[0]) + np.matmul(X, PXt)
        # gain = P @ X.T @ inv(S), S is symmetric
        gain = np.linalg.solve(S, PXt.T).T
        correlation_inverse = P - np.matmul(gain, PXt.T)
        output_weights = self._output_weights + np.matmul(
            gain, y - np.matmul(X, self._output_weights))
        self._correlation_inverse = correlation_inverse
        self._output_weights = output_weights
        logger.debug("Recursive update with a batch of %d samples.",
                     X.shape[0])

    @property
    def correlation_inverse(self) -> np.ndarray:
        """Return the inverse correlation matrix."""
        return self._correlation_inverse

    @property
    def output_weights(self) -> np.ndarray:
        """Return the output weights."""
        return self._output_weights
