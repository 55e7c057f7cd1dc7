"""
Pseudoinverse regression with block-column growth
"""

# License: BSD 3 clause

from __future__ import annotations

import logging
import warnings
from typing import Tuple

import numpy as np
from sklearn.base import BaseEstimator, RegressorMixin
from sklearn.exceptions import NotFittedError

from ..exceptions import NumericalDegeneracyWarning


logger = logging.getLogger(__name__)


def pseudoinverse(X: np.ndarray) -> np.ndarray:
    """
    Compute the Moore-Penrose pseudoinverse of X.

    The Gram matrix of the smaller dimension is inverted, e.g.,
    ``pinv(X.T @ X) @ X.T`` if X has at least as many rows as columns and
    ``X.T @ pinv(X @ X.T)`` otherwise.

    Parameters
    ----------
    X : ndarray of shape (n_samples, n_features)

    Returns
    -------
    X_pinv : ndarray of shape (n_features, n_samples)
    """
    if X.shape[0] >= X.shape[1]:
        return np.matmul(np.linalg.pinv(np.matmul(X.T, X)), X.T)
    else:
        return np.matmul(X.T, np.linalg.pinv(np.matmul(X, X.T)))


def _truncated_pseudoinverse(projected: np.ndarray,
                             reference: np.ndarray) -> Tuple[np.ndarray, bool]:
    """
    Compute the pseudoinverse of projected, ignoring singular values that
    are negligible relative to the scale of reference.

    Returns
    -------
    projected_pinv : ndarray of shape (n_features, n_samples)
    rank_deficient : bool
        True if any singular value was ignored.
    """
    u, s, vt = np.linalg.svd(projected, full_matrices=False)
    tol = max(projected.shape) * np.finfo(projected.dtype).eps \
        * np.linalg.norm(reference, ord=2)
    keep = s > tol
    projected_pinv = np.matmul(vt[keep].T / s[keep], u[:, keep].T)
    return projected_pinv, not np.all(keep)


class PseudoinverseRegression(RegressorMixin, BaseEstimator):
    """
    Least squares regression via the Moore-Penrose pseudoinverse.

    Besides a plain ``fit``, the regressor can be extended by new feature
    columns with :meth:`add_features`. The pseudoinverse is then updated by
    a block version of Greville's recursion [1]_: only matrices with as many
    rows or columns as new features are inverted, independent of the number
    of features already present.

    Attributes
    ----------
    hidden_layer_state : ndarray of shape (n_samples, n_features)
        The design matrix H of the last fit, including added features.
    pseudo_inverse : ndarray of shape (n_features, n_samples)
        The pseudoinverse of ``hidden_layer_state``.
    output_weights : ndarray of shape (n_features,) or (n_features, n_targets)
        Least squares solution.
    residual : float
        Frobenius norm of the training residual.

    References
    ----------
    .. [1] G. Feng, G.-B. Huang, Q. Lin and R. Gay, "Error Minimized
           Extreme Learning Machine With Growth of Hidden Nodes and
           Incremental Learning," in IEEE Transactions on Neural Networks,
           vol. 20, no. 8, pp. 1352-1357, Aug. 2009,
           doi: 10.1109/TNN.2009.2024147.
    """

    def fit(self, X: np.ndarray, y: np.ndarray) -> PseudoinverseRegression:
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
        self._hidden_layer_state = X
        self._targets = y
        self._pseudo_inverse = pseudoinverse(X)
        self._solve()
        return self

    def add_features(self, X: np.ndarray) -> PseudoinverseRegression:
        """
        Append feature columns and update the pseudoinverse incrementally.

        Parameters
        ----------
        X : ndarray of shape (n_samples, n_new_features)
            New columns for the same samples that were passed to ``fit``.

        Returns
        -------
        self
        """
        if not hasattr(self, '_pseudo_inverse'):
            raise NotFittedError(self)
        H, P = self._hidden_layer_state, self._pseudo_inverse
        if X.shape[0] != H.shape[0]:
            raise ValueError("X has {0} samples, expected {1}."
                             .format(X.shape[0], H.shape[0]))

        projected = X - np.matmul(H, np.matmul(P, X))
        D, rank_deficient = _truncated_pseudoinverse(projected, X)
        if rank_deficient:
            warnings.warn("The added features are (almost) linearly dependent "
                          "on the existing ones. Their dependent part does "
                          "not contribute to the solution.",
                          NumericalDegeneracyWarning)
        U = P - np.matmul(P, np.matmul(X, D))

        self._pseudo_inverse = np.vstack((U, D))
        self._hidden_layer_state = np.hstack((H, X))
        self._solve()
        return self

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

    def _solve(self) -> None:
        self._output_weights = np.matmul(self._pseudo_inverse, self._targets)
        self._residual = float(np.linalg.norm(
            np.matmul(self._hidden_layer_state, self._output_weights)
            - self._targets))
        logger.debug("Solved for %d features, residual %.6g.",
                     self._hidden_layer_state.shape[1], self._residual)

    @property
    def hidden_layer_state(self) -> np.ndarray:
        """Return the design matrix H."""
        return self._hidden_layer_state

    @property
    def pseudo_inverse(self) -> np.ndarray:
        """Return the pseudoinverse of H."""
        return self._pseudo_inverse

    @property
    def output_weights(self) -> np.ndarray:
        """Return the output weights."""
        return self._output_weights

    @property
    def residual(self) -> float:
        """Return the Frobenius norm of the training residual."""
        return self._residual
