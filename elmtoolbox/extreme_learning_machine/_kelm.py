"""The :mod:`kelm` contains the Kernel Extreme Learning Machine."""

# License: BSD 3 clause

from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple, Union

import numpy as np
import scipy.linalg
from sklearn.base import (BaseEstimator, ClassifierMixin, MultiOutputMixin,
                          RegressorMixin)
from sklearn.exceptions import NotFittedError
from sklearn.utils.validation import validate_data

from ._base import LabelBinarizerMixin
from ..exceptions import ConfigurationError
from ..kernels import check_kernel_params, kernel_matrix


logger = logging.getLogger(__name__)


class KELMRegressor(RegressorMixin, MultiOutputMixin, BaseEstimator):
    """
    Kernel Extreme Learning Machine regressor.

    The random hidden layer is replaced by a kernel matrix between the
    samples [1]_. Training solves ``(Omega + I / C) @ output_weights = y``,
    prediction computes ``kernel_matrix(X_train, X).T @ output_weights``.

    The training samples are kept for prediction. The kernel matrix needs
    O(n_samples^2) memory and the solve O(n_samples^3) operations.

    Parameters
    ----------
    kernel : str, default='rbf'
        The kernel function.
            - 'rbf' or 'RBF_kernel', exp(-||xi - xj||^2 / p1)
            - 'linear' or 'lin_kernel', xi . xj
            - 'poly' or 'poly_kernel', (xi . xj + p1)^p2
            - 'wavelet' or 'wav_kernel',
            cos(p3 * (sum(xi) - sum(xj)) / p2) * exp(-||xi - xj||^2 / p1)
    kernel_params : Union[float, Sequence[float], None], default=None
        Parameters (p1, p2, p3) of the kernel. A scalar is used for all
        parameters. If None, the defaults in
        :data:`elmtoolbox.kernels.KERNEL_PARAMS` are used.
    C : float, default=1000.
        Regularization parameter. The larger C, the weaker the
        regularization.
    n_jobs : Optional[int], default=None
        The number of jobs to compute the kernel matrix in parallel.
    verbose : bool, default=False
        Verbosity output

    References
    ----------
    .. [1] Guang-Bin Huang, Hongming Zhou, Xiaojian Ding and Rui Zhang,
           "Extreme Learning Machine for Regression and Multiclass
           Classification," in IEEE Transactions on Systems, Man, and
           Cybernetics, Part B, vol. 42, no. 2, pp. 513-529, April 2012,
           doi: 10.1109/TSMCB.2011.2168604.
    """

    def __init__(self, *,
                 kernel: str = 'rbf',
                 kernel_params: Union[float, Sequence[float], None] = None,
                 C: float = 1000.,
                 n_jobs: Optional[int] = None,
                 verbose: bool = False) -> None:
        """Construct the KELMRegressor."""
        self.kernel = kernel
        self.kernel_params = kernel_params
        self.C = C
        self.n_jobs = n_jobs
        self.verbose = verbose

    def fit(self, X: np.ndarray, y: np.ndarray) -> KELMRegressor:
        """
        Fit the regressor.

        Parameters
        ----------
        X : ndarray of shape (n_samples, n_features)
        y : ndarray of shape (n_samples,) or (n_samples, n_targets)
            The targets to predict.

        Returns
        -------
        self : Returns a trained KELMRegressor model.
        """
        kernel_params = self._validate_hyperparameters()
        X, y = validate_data(self, X, y, multi_output=True, y_numeric=True)

        self._kernel = self.kernel
        self._kernel_params = kernel_params
        self._training_samples = X
        omega = self.kernel_matrix()
        omega[np.diag_indices_from(omega)] += 1. / self.C
        self._output_weights = scipy.linalg.solve(omega, y, assume_a='sym')
        if self.verbose:
            logger.info("Solved a kernel system of size %d.", X.shape[0])
        return self

    def predict(self, X: np.ndarray) -> np.ndarray:
        """
        Predict the targets using the trained KELMRegressor.

        Parameters
        ----------
        X : ndarray of shape (n_samples, n_features)

        Returns
        -------
        y : ndarray of (n_samples,) or (n_samples, n_targets)
            The predicted targets
        """
        if not hasattr(self, '_output_weights'):
            raise NotFittedError(self)
        X = validate_data(self, X, reset=False)
        return np.matmul(self.kernel_matrix(X).T, self._output_weights)

    def kernel_matrix(self, X: Optional[np.ndarray] = None) -> np.ndarray:
        """
        Compute the kernel matrix between the training samples and X.

        Parameters
        ----------
        X : Optional[ndarray] of shape (n_samples, n_features), default=None
            If None, the kernel matrix of the training samples is returned.

        Returns
        -------
        omega : ndarray of shape (n_train, n_train) or (n_train, n_samples)
        """
        if not hasattr(self, '_training_samples'):
            raise NotFittedError(self)
        return kernel_matrix(self._training_samples, X, kernel=self._kernel,
                             kernel_params=self._kernel_params,
                             n_jobs=self.n_jobs)

    def _validate_hyperparameters(self) -> Tuple[float, ...]:
        """Validate the hyperparameters and return the kernel parameters."""
        kernel_params = check_kernel_params(self.kernel, self.kernel_params)
        if self.C is None or self.C <= 0.:
            raise ConfigurationError("C must be > 0, got {0}."
                                     .format(self.C))
        return kernel_params

    def __sizeof__(self) -> int:
        """
        Return the size of the object in bytes.

        Returns
        -------
        size : int
            Object memory in bytes.
        """
        size = object.__sizeof__(self)
        if hasattr(self, '_output_weights'):
            size += self._training_samples.nbytes + self._output_weights.nbytes
        return size

    @property
    def training_samples(self) -> np.ndarray:
        """
        Return the training samples.

        Returns
        -------
        training_samples : ndarray of shape (n_train, n_features)
        """
        if not hasattr(self, '_training_samples'):
            raise NotFittedError(self)
        return self._training_samples

    @property
    def output_weights(self) -> np.ndarray:
        """
        Return the output weights, one row per training sample.

        Returns
        -------
        output_weights : ndarray of shape (n_train, ) or (n_train, n_targets)
        """
        if not hasattr(self, '_output_weights'):
            raise NotFittedError(self)
        return self._output_weights


class KELMClassifier(LabelBinarizerMixin, ClassifierMixin, KELMRegressor):
    """
    Kernel Extreme Learning Machine classifier.

    The class labels are one-hot encoded and a ``KELMRegressor`` is fitted
    to the encoding.

    Parameters
    ----------
    kernel : str, default='rbf'
        The kernel function, see :class:`KELMRegressor`.
    kernel_params : Union[float, Sequence[float], None], default=None
        Parameters of the kernel.
    C : float, default=1000.
        Regularization parameter.
    n_jobs : Optional[int], default=None
        The number of jobs to compute the kernel matrix in parallel.
    verbose : bool, default=False
        Verbosity output
    """

    def fit(self, X: np.ndarray, y: np.ndarray) -> KELMClassifier:
        """
        Fit the classifier.

        Parameters
        ----------
        X : ndarray of shape (n_samples, n_features)
        y : ndarray of shape (n_samples,)
            The class labels.

        Returns
        -------
        self : Returns a trained KELMClassifier model.
        """
        return super().fit(X, self._fit_encoder(y))
