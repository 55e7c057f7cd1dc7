"""The :mod:`oselm` contains the Online Sequential Extreme Learning Machine."""

# License: BSD 3 clause

from __future__ import annotations

import logging
from typing import Callable, Optional, Union

import numpy as np
from sklearn.base import ClassifierMixin
from sklearn.utils.validation import validate_data

from ._base import BaseELMRegressor, LabelBinarizerMixin
from ..linear_model import IncrementalRegression


logger = logging.getLogger(__name__)


class OSELMRegressor(BaseELMRegressor):
    """
    Online Sequential Extreme Learning Machine regressor.

    The output weights are refined by recursive least squares whenever a
    new batch arrives via :meth:`partial_fit` [1]_. Training on the batches
    ``B1, B2, ..., Bk`` one after another yields the same output weights as
    training on their concatenation at once.

    The inverse correlation matrix of shape ``(n_hidden, n_hidden)`` is kept
    in memory. Each update inverts a matrix of shape
    ``(batch_size, batch_size)``.

    Parameters
    ----------
    hidden_layer_size : int, default=1000
        Number of nodes in the hidden layer.
    input_activation : Union[str, Callable], default='sig'
        Activation function of the hidden layer, see :class:`InputToNode`.
    input_scaling : float, default=1.
        Scales the input weight matrix.
    bias_scaling : float, default=1.
        Scales the input bias of the activation.
    random_state : Union[int, np.random.RandomState, None], default=42
        Seed or random stream for the hidden layer.
    verbose : bool, default=False
        Verbosity output

    References
    ----------
    .. [1] N. Liang, G. Huang, P. Saratchandran and N. Sundararajan,
           "A Fast and Accurate Online Sequential Learning Algorithm for
           Feedforward Networks," in IEEE Transactions on Neural Networks,
           vol. 17, no. 6, pp. 1411-1423, Nov. 2006,
           doi: 10.1109/TNN.2006.880583.
    """

    def __init__(self, *,
                 hidden_layer_size: int = 1000,
                 input_activation: Union[str, Callable] = 'sig',
                 input_scaling: float = 1.,
                 bias_scaling: float = 1.,
                 random_state: Union[int, np.random.RandomState, None] = 42,
                 verbose: bool = False) -> None:
        """Construct the OSELMRegressor."""
        super().__init__(hidden_layer_size=hidden_layer_size,
                         input_activation=input_activation,
                         input_scaling=input_scaling,
                         bias_scaling=bias_scaling,
                         random_state=random_state, verbose=verbose)

    def partial_fit(self, X: np.ndarray, y: np.ndarray) -> OSELMRegressor:
        """
        Fit the regressor partially.

        The first call initializes the hidden layer and should contain at
        least ``hidden_layer_size`` samples. Later calls update the output
        weights with the new batch.

        Parameters
        ----------
        X : ndarray of shape (n_samples, n_features)
        y : ndarray of shape (n_samples,) or (n_samples, n_targets)
            The targets to predict.

        Returns
        -------
        self : Returns a trained OSELMRegressor model.
        """
        first_call = not hasattr(self, '_regressor')
        X, y = validate_data(self, X, y, multi_output=True, y_numeric=True,
                             reset=first_call)

        if first_call:
            self._input_to_node = self._new_input_to_node()
            hidden_layer_state = self._input_to_node.fit_transform(X)
            self._regressor = IncrementalRegression()
        else:
            hidden_layer_state = self._input_to_node.transform(X)

        self._regressor.partial_fit(hidden_layer_state, y)
        if self.verbose:
            logger.info("Trained on a batch of %d samples.", X.shape[0])
        return self

    def fit(self, X: np.ndarray, y: np.ndarray) -> OSELMRegressor:
        """
        Fit the regressor on a single batch, dropping prior fits.

        Parameters
        ----------
        X : ndarray of shape (n_samples, n_features)
        y : ndarray of shape (n_samples,) or (n_samples, n_targets)
            The targets to predict.

        Returns
        -------
        self : Returns a trained OSELMRegressor model.
        """
        self._reset()
        return self.partial_fit(X, y)

    def _reset(self) -> None:
        """Drop the hidden layer and the output weights."""
        for attr in ('_input_to_node', '_regressor'):
            if hasattr(self, attr):
                delattr(self, attr)

    @property
    def correlation_inverse(self) -> np.ndarray:
        """
        Return the inverse correlation matrix.

        Returns
        -------
        correlation_inverse : ndarray of shape (n_hidden, n_hidden)
        """
        self._check_fitted()
        return self._regressor.correlation_inverse


class OSELMClassifier(LabelBinarizerMixin, ClassifierMixin, OSELMRegressor):
    """
    Online Sequential Extreme Learning Machine classifier.

    The class labels are one-hot encoded and an ``OSELMRegressor`` is
    fitted to the encoding.

    Parameters
    ----------
    hidden_layer_size : int, default=1000
        Number of nodes in the hidden layer.
    input_activation : Union[str, Callable], default='sig'
        Activation function of the hidden layer, see :class:`InputToNode`.
    input_scaling : float, default=1.
        Scales the input weight matrix.
    bias_scaling : float, default=1.
        Scales the input bias of the activation.
    random_state : Union[int, np.random.RandomState, None], default=42
        Seed or random stream for the hidden layer.
    verbose : bool, default=False
        Verbosity output
    """

    def partial_fit(self, X: np.ndarray, y: np.ndarray,
                    classes: Optional[np.ndarray] = None) -> OSELMClassifier:
        """
        Fit the classifier partially.

        Parameters
        ----------
        X : ndarray of shape (n_samples, n_features)
        y : ndarray of shape (n_samples,)
            The class labels.
        classes : Optional[ndarray] of shape (n_classes,), default=None
            Classes across all calls to partial_fit.
            Can be obtained via `np.unique(y_all)`, where y_all is the
            target vector of the entire dataset.
            This argument is required for the first call to partial_fit
            and can be omitted in the subsequent calls.
            Note that y doesn't need to contain all labels in `classes`.

        Returns
        -------
        self : returns a trained OSELMClassifier model
        """
        if not hasattr(self, '_encoder'):
            if classes is None:
                raise ValueError("classes must be passed on the first call "
                                 "to partial_fit.")
            y_encoded = self._fit_encoder(y, classes=classes)
        else:
            y_encoded = self._encoder.transform(y)
        return super().partial_fit(X, y_encoded)

    def fit(self, X: np.ndarray, y: np.ndarray) -> OSELMClassifier:
        """
        Fit the classifier on a single batch, dropping prior fits.

        Parameters
        ----------
        X : ndarray of shape (n_samples, n_features)
        y : ndarray of shape (n_samples,)
            The class labels.

        Returns
        -------
        self : Returns a trained OSELMClassifier model.
        """
        self._reset()
        return super().partial_fit(X, self._fit_encoder(y))
