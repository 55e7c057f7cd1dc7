"""The :mod:`extreme_learning_machine` contains the ELMRegressor and ELMClassifier."""

# License: BSD 3 clause

from __future__ import annotations

import logging
from typing import Callable, Union

import numpy as np
from sklearn.base import ClassifierMixin
from sklearn.utils.validation import validate_data

from ._base import BaseELMRegressor, LabelBinarizerMixin
from ..linear_model import PseudoinverseRegression


logger = logging.getLogger(__name__)


class ELMRegressor(BaseELMRegressor):
    """
    Extreme Learning Machine regressor.

    The hidden layer is drawn at random and kept fixed, the output weights
    are the least squares solution ``pinv(H) @ y`` [1]_.

    Parameters
    ----------
    hidden_layer_size : int, default=500
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
    .. [1] Guang-Bin Huang et al., 'Extreme learning machine: Theory and
           applications', p. 489-501, 2006, doi: 10.1016/j.neucom.2005.12.126.
    """

    def __init__(self, *,
                 hidden_layer_size: int = 500,
                 input_activation: Union[str, Callable] = 'sig',
                 input_scaling: float = 1.,
                 bias_scaling: float = 1.,
                 random_state: Union[int, np.random.RandomState, None] = 42,
                 verbose: bool = False) -> None:
        """Construct the ELMRegressor."""
        super().__init__(hidden_layer_size=hidden_layer_size,
                         input_activation=input_activation,
                         input_scaling=input_scaling,
                         bias_scaling=bias_scaling,
                         random_state=random_state, verbose=verbose)

    def fit(self, X: np.ndarray, y: np.ndarray) -> ELMRegressor:
        """
        Fit the regressor.

        Parameters
        ----------
        X : ndarray of shape (n_samples, n_features)
        y : ndarray of shape (n_samples,) or (n_samples, n_targets)
            The targets to predict.

        Returns
        -------
        self : Returns a trained ELMRegressor model.
        """
        X, y = validate_data(self, X, y, multi_output=True, y_numeric=True)
        self._input_to_node = self._new_input_to_node()
        hidden_layer_state = self._input_to_node.fit_transform(X)
        self._regressor = PseudoinverseRegression().fit(hidden_layer_state, y)
        if self.verbose:
            logger.info("Trained %d hidden nodes, residual %.6g.",
                        self._input_to_node.n_hidden,
                        self._regressor.residual)
        return self


class ELMClassifier(LabelBinarizerMixin, ClassifierMixin, ELMRegressor):
    """
    Extreme Learning Machine classifier.

    The class labels are one-hot encoded and an ``ELMRegressor`` is fitted
    to the encoding.

    Parameters
    ----------
    hidden_layer_size : int, default=500
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

    def fit(self, X: np.ndarray, y: np.ndarray) -> ELMClassifier:
        """
        Fit the classifier.

        Parameters
        ----------
        X : ndarray of shape (n_samples, n_features)
        y : ndarray of shape (n_samples,)
            The class labels.

        Returns
        -------
        self : Returns a trained ELMClassifier model.
        """
        return super().fit(X, self._fit_encoder(y))
