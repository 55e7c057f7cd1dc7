"""The :mod:`kernels` contains the kernel functions of Kernel ELMs."""

# License: BSD 3 clause

import logging
import numbers
from typing import Optional, Sequence, Tuple, Union

import numpy as np
from joblib import Parallel, delayed, effective_n_jobs
from sklearn.metrics.pairwise import euclidean_distances

from ..exceptions import ConfigurationError
from ..util import value_to_tuple


logger = logging.getLogger(__name__)


def rbf_kernel(X_train: np.ndarray, X: np.ndarray,
               kernel_params: Tuple[float, ...]) -> np.ndarray:
    """
    Compute the radial basis function kernel.

    .. math::
        k(x_i, x_j) = e^{-\\|x_i - x_j\\|^2 / p_1}

    Parameters
    ----------
    X_train : ndarray of shape (n_train, n_features)
    X : ndarray of shape (n_samples, n_features)
    kernel_params : Tuple[float]
        The width p_1.

    Returns
    -------
    omega : ndarray of shape (n_train, n_samples)
    """
    omega = euclidean_distances(X_train, X, squared=True)
    np.divide(omega, -kernel_params[0], out=omega)
    np.exp(omega, out=omega)
    return omega


def linear_kernel(X_train: np.ndarray, X: np.ndarray,
                  kernel_params: Tuple[float, ...]) -> np.ndarray:
    """
    Compute the linear kernel.

    .. math::
        k(x_i, x_j) = x_i^T x_j

    Parameters
    ----------
    X_train : ndarray of shape (n_train, n_features)
    X : ndarray of shape (n_samples, n_features)
    kernel_params : Tuple[()]
        ignored

    Returns
    -------
    omega : ndarray of shape (n_train, n_samples)
    """
    return np.matmul(X_train, X.T)


def polynomial_kernel(X_train: np.ndarray, X: np.ndarray,
                      kernel_params: Tuple[float, ...]) -> np.ndarray:
    """
    Compute the polynomial kernel.

    .. math::
        k(x_i, x_j) = (x_i^T x_j + p_1)^{p_2}

    Parameters
    ----------
    X_train : ndarray of shape (n_train, n_features)
    X : ndarray of shape (n_samples, n_features)
    kernel_params : Tuple[float, float]
        The offset p_1 and the degree p_2.

    Returns
    -------
    omega : ndarray of shape (n_train, n_samples)
    """
    omega = np.matmul(X_train, X.T)
    omega += kernel_params[0]
    np.power(omega, kernel_params[1], out=omega)
    return omega


def wavelet_kernel(X_train: np.ndarray, X: np.ndarray,
                   kernel_params: Tuple[float, ...]) -> np.ndarray:
    """
    Compute the wavelet kernel.

    .. math::
        k(x_i, x_j) = \\cos(p_3 (\\sum x_i - \\sum x_j) / p_2)
        e^{-\\|x_i - x_j\\|^2 / p_1}

    Parameters
    ----------
    X_train : ndarray of shape (n_train, n_features)
    X : ndarray of shape (n_samples, n_features)
    kernel_params : Tuple[float, float, float]
        The width p_1, the dilation p_2 and the frequency p_3.

    Returns
    -------
    omega : ndarray of shape (n_train, n_samples)
    """
    omega = rbf_kernel(X_train, X, kernel_params)
    shift = np.subtract.outer(np.sum(X_train, axis=1), np.sum(X, axis=1))
    omega *= np.cos(kernel_params[2] * shift / kernel_params[1])
    return omega


KERNELS = {'rbf': rbf_kernel,
           'RBF_kernel': rbf_kernel,
           'linear': linear_kernel,
           'lin_kernel': linear_kernel,
           'poly': polynomial_kernel,
           'poly_kernel': polynomial_kernel,
           'wavelet': wavelet_kernel,
           'wav_kernel': wavelet_kernel}

KERNEL_PARAMS = {rbf_kernel: (.1, ),
                 linear_kernel: (),
                 polynomial_kernel: (1., 2.),
                 wavelet_kernel: (1., 1., 1.)}


def check_kernel_params(kernel: str,
                        kernel_params: Union[float, Sequence[float],
                                             None] = None) \
        -> Tuple[float, ...]:
    """
    Validate a kernel configuration.

    Parameters
    ----------
    kernel : str
        One of the keys in ``KERNELS``.
    kernel_params : Union[float, Sequence[float], None], default=None
        Parameters of the kernel. A scalar is repeated for all parameters,
        ``None`` selects the defaults.

    Returns
    -------
    kernel_params : Tuple[float, ...]
        The parameters with the arity expected by the kernel.
    """
    if kernel not in KERNELS:
        raise ConfigurationError("The kernel '{0}' is not supported. "
                                 "Supported kernels are {1}."
                                 .format(kernel, sorted(KERNELS)))
    defaults = KERNEL_PARAMS[KERNELS[kernel]]
    if kernel_params is None:
        return defaults
    params = value_to_tuple(kernel_params, len(defaults))
    if not all(isinstance(param, numbers.Real) and not isinstance(param, bool)
               for param in params):
        raise ConfigurationError("The kernel parameters must be numbers, got "
                                 "{0}.".format(kernel_params))
    if len(params) != len(defaults):
        raise ConfigurationError("The kernel '{0}' expects {1} parameters, "
                                 "got {2}.".format(kernel, len(defaults),
                                                   kernel_params))
    if KERNELS[kernel] in (rbf_kernel, wavelet_kernel) and params[0] <= 0.:
        raise ConfigurationError("The kernel width must be > 0, got {0}."
                                 .format(params[0]))
    if KERNELS[kernel] is wavelet_kernel and params[1] == 0.:
        raise ConfigurationError("The wavelet dilation must not be 0.")
    return params


def kernel_matrix(X_train: np.ndarray, X: Optional[np.ndarray] = None, *,
                  kernel: str = 'rbf',
                  kernel_params: Union[float, Sequence[float], None] = None,
                  n_jobs: Optional[int] = None) -> np.ndarray:
    """
    Compute the kernel matrix between training samples and samples.

    Parameters
    ----------
    X_train : ndarray of shape (n_train, n_features)
    X : Optional[ndarray] of shape (n_samples, n_features), default=None
        If None, the symmetric kernel matrix of X_train is computed.
    kernel : str, default='rbf'
        One of the keys in ``KERNELS``.
    kernel_params : Union[float, Sequence[float], None], default=None
        Parameters of the kernel, see ``check_kernel_params``.
    n_jobs : Optional[int], default=None
        The number of jobs to compute column blocks of the kernel matrix in
        parallel. ``-1`` means using all processors.

    Returns
    -------
    omega : ndarray of shape (n_train, n_train) or (n_train, n_samples)
    """
    params = check_kernel_params(kernel, kernel_params)
    func = KERNELS[kernel]
    if X is None:
        X = X_train

    n_jobs = effective_n_jobs(n_jobs)
    if n_jobs == 1:
        return func(X_train, X, params)

    logger.debug("Computing a %dx%d kernel matrix with %d jobs.",
                 X_train.shape[0], X.shape[0], n_jobs)
    blocks = Parallel(n_jobs=n_jobs)(
        delayed(func)(X_train, X[idx, :], params)
        for idx in np.array_split(np.arange(X.shape[0]), n_jobs)
        if idx.size > 0)
    return np.hstack(blocks)
