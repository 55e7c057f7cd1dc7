"""Shared functionality of the random hidden layer ELM estimators."""

# License: BSD 3 clause

from __future__ import annotations

import sys
from typing import Callable, Optional, Union

import numpy as np
from sklearn.base import (BaseEstimator, MultiOutputMixin, RegressorMixin)
from sklearn.exceptions import NotFittedError
from sklearn.preprocessing import LabelBinarizer
from sklearn.utils.validation import validate_data

from ..base.blocks import InputToNode


class BaseELMRegressor(RegressorMixin, MultiOutputMixin, BaseEstimator):
    """
    Base class for ELM regressors with a random hidden layer.

    The hidden layer is an :class:`InputToNode` object that is created from
    the hyperparameters of the estimator, the output layer is a solver from
    :mod:`elmtoolbox.linear_model`. Subclasses implement the training.

    Warning: This class should not be used directly.
    Use derived classes instead.
    """

    def __init__(self, *,
                 hidden_layer_size: int = 500,
                 input_activation: Union[str, Callable] = 'sig',
                 input_scaling: float = 1.,
                 bias_scaling: float = 1.,
                 random_state: Union[int, np.random.RandomState, None] = 42,
                 verbose: bool = False) -> None:
        """Construct the BaseELMRegressor."""
        self.hidden_layer_size = hidden_layer_size
        self.input_activation = input_activation
        self.input_scaling = input_scaling
        self.bias_scaling = bias_scaling
        self.random_state = random_state
        self.verbose = verbose

    def predict(self, X: np.ndarray) -> np.ndarray:
        """
        Predict the targets using the trained ELM.

        Parameters
        ----------
        X : ndarray of shape (n_samples, n_features)

        Returns
        -------
        y : ndarray of (n_samples,) or (n_samples, n_targets)
            The predicted targets
        """
        self._check_fitted()
        X = validate_data(self, X, reset=False)
        hidden_layer_state = self._input_to_node.transform(X)
        return self._regressor.predict(hidden_layer_state)

    def _check_fitted(self) -> None:
        if not hasattr(self, '_regressor'):
            raise NotFittedError(self)

    def _new_input_to_node(self) -> InputToNode:
        """Create the hidden layer from the hyperparameters."""
        return InputToNode(hidden_layer_size=self.hidden_layer_size,
                           input_activation=self.input_activation,
                           input_scaling=self.input_scaling,
                           bias_scaling=self.bias_scaling,
                           random_state=self.random_state)

    def __sizeof__(self) -> int:
        """
        Return the size of the object in bytes.

        Returns
        -------
        size : int
            Object memory in bytes.
        """
        size = object.__sizeof__(self)
        if hasattr(self, '_input_to_node'):
            size += sys.getsizeof(self._input_to_node)
        if hasattr(self, '_regressor'):
            size += sum(value.nbytes for value in vars(self._regressor).values()
                        if isinstance(value, np.ndarray))
        return size

    @property
    def input_to_node(self) -> InputToNode:
        """
        Return the hidden layer.

        Returns
        -------
        input_to_node : InputToNode
        """
        self._check_fitted()
        return self._input_to_node

    @property
    def input_weights(self) -> np.ndarray:
        """
        Return the input weights of the hidden layer.

        Returns
        -------
        input_weights : ndarray of shape (n_features, n_hidden)
        """
        self._check_fitted()
        return self._input_to_node.input_weights

    @property
    def bias_weights(self) -> np.ndarray:
        """
        Return the bias of the hidden layer.

        Returns
        -------
        bias_weights : ndarray of shape (n_hidden, )
        """
        self._check_fitted()
        return self._input_to_node.bias_weights

    @property
    def output_weights(self) -> np.ndarray:
        """
        Return the output weights.

        Returns
        -------
        output_weights : ndarray of shape (n_hidden, ) or (n_hidden, n_targets)
        """
        self._check_fitted()
        return self._regressor.output_weights


class LabelBinarizerMixin:
    """
    Mixin class that turns an ELM regressor into a classifier.

    The class labels are one-hot encoded with a ``LabelBinarizer``, the
    regressor is trained on the encoding, and predictions are decoded with
    the winner-takes-all rule.
    """

    def _fit_encoder(self, y: np.ndarray,
                     classes: Optional[np.ndarray] = None) -> np.ndarray:
        """Fit the label encoder on classes or y and encode y."""
        self._encoder = LabelBinarizer().fit(y if classes is None else classes)
        return self._encoder.transform(y)

    def predict(self, X: np.ndarray) -> np.ndarray:
        """
        Predict the classes using the trained classifier.

        Parameters
        ----------
        X : ndarray of shape (n_samples, n_features)
            The input data.

        Returns
        -------
        y_pred : ndarray of shape (n_samples,)
            The predicted classes.
        """
        y = super().predict(X)
        return self._encoder.inverse_transform(y, threshold=None)

    def predict_proba(self, X: np.ndarray) -> np.ndarray:
        """
        Predict the probability estimated using the trained classifier.

        Parameters
        ----------
        X : ndarray of shape (n_samples, n_features)
            The input data.

        Returns
        -------
        y_pred : ndarray of shape (n_samples, n_classes)
            The predicted probability estimates.
        """
        predicted_positive = np.clip(super().predict(X), a_min=1e-5,
                                     a_max=None)
        return np.asarray(predicted_positive)

    def predict_log_proba(self, X: np.ndarray) -> np.ndarray:
        """
        Predict the log probability estimated using the trained classifier.

        Parameters
        ----------
        X : ndarray of shape (n_samples, n_features)
            The input data.

        Returns
        -------
        y_pred : ndarray of shape (n_samples, n_classes)
            The predicted logarithmic probability estimated.
        """
        return np.log(self.predict_proba(X=X))

    @property
    def classes_(self) -> np.ndarray:
        """Return the class labels."""
        return self._encoder.classes_
