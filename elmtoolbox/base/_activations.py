"""The :mod:`activations` contains various activation functions for ELMs."""

# License: BSD 3 clause

import numpy as np
# noinspection PyProtectedMember
from sklearn.neural_network._base import ACTIVATIONS as _SKLEARN_ACTIVATIONS


def inplace_sine(X: np.ndarray) -> None:
    """
    Compute the sine function inplace.

    Parameters
    ----------
    X : ndarray
        The input data.
    """
    np.sin(X, out=X)


def inplace_hardlim(X: np.ndarray) -> None:
    """
    Compute the hard limit function inplace.

    .. math::
        f(x) = 1 \\text{ if } x \\geq 0 \\text{ else } 0

    Parameters
    ----------
    X : ndarray
        The input data.
    """
    X[...] = X >= 0


def inplace_tribas(X: np.ndarray) -> None:
    """
    Compute the triangular basis function inplace.

    .. math::
        f(x) = \\max(1 - |x|, 0)

    Parameters
    ----------
    X : ndarray
        The input data.
    """
    np.abs(X, out=X)
    np.subtract(1., X, out=X)
    np.maximum(X, 0., out=X)


def inplace_radbas(X: np.ndarray) -> None:
    """
    Compute the radial basis function inplace.

    .. math::
        f(x) = e^{-x^2}

    Parameters
    ----------
    X : ndarray
        The input data.
    """
    np.square(X, out=X)
    np.negative(X, out=X)
    np.exp(X, out=X)


ACTIVATIONS = {key: _SKLEARN_ACTIVATIONS[key]
               for key in ('identity', 'tanh', 'logistic', 'relu')}

ACTIVATIONS.update({'sig': ACTIVATIONS['logistic'],
                    'sigmoid': ACTIVATIONS['logistic'],
                    'sin': inplace_sine,
                    'sine': inplace_sine,
                    'hardlim': inplace_hardlim,
                    'tribas': inplace_tribas,
                    'radbas': inplace_radbas})
