"""The :mod:`emelm` contains the Error Minimized Extreme Learning Machine."""

# License: BSD 3 clause

from __future__ import annotations

import logging
from typing import Callable, List, Union

import numpy as np
from sklearn.base import ClassifierMixin
from sklearn.utils.validation import validate_data
from tqdm import tqdm

from ._base import BaseELMRegressor, LabelBinarizerMixin
from ..exceptions import ConfigurationError
from ..linear_model import PseudoinverseRegression


logger = logging.getLogger(__name__)


class EMELMRegressor(BaseELMRegressor):
    """
    Error Minimized Extreme Learning Machine regressor.

    Starting from ``hidden_layer_size`` nodes, blocks of
    ``nodes_by_iteration`` random nodes are added until the training
    residual ``||H @ output_weights - y||_F`` drops to ``max_error`` or the
    hidden layer reaches ``max_hidden_layer_size`` nodes [1]_. The
    pseudoinverse of the hidden layer state is updated block by block
    instead of being recomputed, see :class:`PseudoinverseRegression`.

    Reaching ``max_hidden_layer_size`` before ``max_error`` is a regular
    end of training, check ``residuals_[-1]`` to see which criterion
    stopped it. The pseudoinverse update costs
    O(n_hidden * n_samples * nodes_by_iteration) per step and the design
    matrix of all training samples is kept in memory.

    Parameters
    ----------
    hidden_layer_size : int, default=1
        Initial number of nodes in the hidden layer.
    max_hidden_layer_size : int, default=1000
        Maximum number of nodes in the hidden layer.
    max_error : float, default=1e-3
        Training residual at which the growth stops.
    nodes_by_iteration : int, default=1
        Number of nodes added in each iteration.
    input_activation : Union[str, Callable], default='sig'
        Activation function of the hidden layer, see :class:`InputToNode`.
    input_scaling : float, default=1.
        Scales the input weight matrix.
    bias_scaling : float, default=1.
        Scales the input bias of the activation.
    random_state : Union[int, np.random.RandomState, None], default=42
        Seed or random stream for the initial and all added nodes.
    verbose : bool, default=False
        Log each growth step and show a progress bar.

    References
    ----------
    .. [1] G. Feng, G.-B. Huang, Q. Lin and R. Gay, "Error Minimized
           Extreme Learning Machine With Growth of Hidden Nodes and
           Incremental Learning," in IEEE Transactions on Neural Networks,
           vol. 20, no. 8, pp. 1352-1357, Aug. 2009,
           doi: 10.1109/TNN.2009.2024147.
    """

    def __init__(self, *,
                 hidden_layer_size: int = 1,
                 max_hidden_layer_size: int = 1000,
                 max_error: float = 1e-3,
                 nodes_by_iteration: int = 1,
                 input_activation: Union[str, Callable] = 'sig',
                 input_scaling: float = 1.,
                 bias_scaling: float = 1.,
                 random_state: Union[int, np.random.RandomState, None] = 42,
                 verbose: bool = False) -> None:
        """Construct the EMELMRegressor."""
        super().__init__(hidden_layer_size=hidden_layer_size,
                         input_activation=input_activation,
                         input_scaling=input_scaling,
                         bias_scaling=bias_scaling,
                         random_state=random_state, verbose=verbose)
        self.max_hidden_layer_size = max_hidden_layer_size
        self.max_error = max_error
        self.nodes_by_iteration = nodes_by_iteration

    def fit(self, X: np.ndarray, y: np.ndarray) -> EMELMRegressor:
        """
        Fit the regressor and grow the hidden layer.

        Parameters
        ----------
        X : ndarray of shape (n_samples, n_features)
        y : ndarray of shape (n_samples,) or (n_samples, n_targets)
            The targets to predict.

        Returns
        -------
        self : Returns a trained EMELMRegressor model.
        """
        self._validate_hyperparameters()
        X, y = validate_data(self, X, y, multi_output=True, y_numeric=True)

        self._input_to_node = self._new_input_to_node()
        hidden_layer_state = self._input_to_node.fit_transform(X)
        self._regressor = PseudoinverseRegression().fit(hidden_layer_state, y)
        self.residuals_: List[float] = [self._regressor.residual]

        with tqdm(total=self.max_hidden_layer_size,
                  initial=self._input_to_node.n_hidden,
                  disable=not self.verbose) as pbar:
            while self._input_to_node.n_hidden < self.max_hidden_layer_size \
                    and self._regressor.residual > self.max_error:
                n_nodes = min(self.nodes_by_iteration,
                              self.max_hidden_layer_size
                              - self._input_to_node.n_hidden)
                input_weights, bias_weights = \
                    self._input_to_node.add_nodes(n_nodes)
                delta_hidden_layer_state = self._input_to_node.transform_nodes(
                    X, input_weights, bias_weights)
                self._regressor.add_features(delta_hidden_layer_state)
                self.residuals_.append(self._regressor.residual)
                pbar.update(n_nodes)
                if self.verbose:
                    logger.info("%d hidden nodes, residual %.6g.",
                                self._input_to_node.n_hidden,
                                self._regressor.residual)

        logger.debug("Growth stopped with %d hidden nodes after %d "
                     "iterations, residual %.6g.", self.n_hidden_,
                     len(self.residuals_) - 1, self._regressor.residual)
        return self

    def _validate_hyperparameters(self) -> None:
        """Validate the hyperparameters."""
        if self.max_hidden_layer_size is None \
                or self.max_hidden_layer_size <= 0:
            raise ConfigurationError("max_hidden_layer_size must be > 0, "
                                     "got {0}."
                                     .format(self.max_hidden_layer_size))
        if self.hidden_layer_size is not None \
                and self.hidden_layer_size > self.max_hidden_layer_size:
            raise ConfigurationError("hidden_layer_size must be <= "
                                     "max_hidden_layer_size {0}, got {1}."
                                     .format(self.max_hidden_layer_size,
                                             self.hidden_layer_size))
        if self.max_error <= 0.:
            raise ConfigurationError("max_error must be > 0, got {0}."
                                     .format(self.max_error))
        if self.nodes_by_iteration is None or self.nodes_by_iteration <= 0:
            raise ConfigurationError("nodes_by_iteration must be > 0, got "
                                     "{0}.".format(self.nodes_by_iteration))

    @property
    def n_hidden_(self) -> int:
        """
        Return the number of hidden nodes after training.

        Returns
        -------
        n_hidden : int
        """
        self._check_fitted()
        return self._input_to_node.n_hidden

    @property
    def hidden_layer_state(self) -> np.ndarray:
        """
        Return the hidden layer state of the training data.

        Returns
        -------
        hidden_layer_state : ndarray of shape (n_samples, n_hidden)
        """
        self._check_fitted()
        return self._regressor.hidden_layer_state

    @property
    def pseudo_inverse(self) -> np.ndarray:
        """
        Return the pseudoinverse of the hidden layer state.

        Returns
        -------
        pseudo_inverse : ndarray of shape (n_hidden, n_samples)
        """
        self._check_fitted()
        return self._regressor.pseudo_inverse


class EMELMClassifier(LabelBinarizerMixin, ClassifierMixin, EMELMRegressor):
    """
    Error Minimized Extreme Learning Machine classifier.

    The class labels are one-hot encoded and an ``EMELMRegressor`` is
    fitted to the encoding. ``max_error`` refers to the residual of the
    encoding.

    Parameters
    ----------
    hidden_layer_size : int, default=1
        Initial number of nodes in the hidden layer.
    max_hidden_layer_size : int, default=1000
        Maximum number of nodes in the hidden layer.
    max_error : float, default=1e-3
        Training residual at which the growth stops.
    nodes_by_iteration : int, default=1
        Number of nodes added in each iteration.
    input_activation : Union[str, Callable], default='sig'
        Activation function of the hidden layer, see :class:`InputToNode`.
    input_scaling : float, default=1.
        Scales the input weight matrix.
    bias_scaling : float, default=1.
        Scales the input bias of the activation.
    random_state : Union[int, np.random.RandomState, None], default=42
        Seed or random stream for the initial and all added nodes.
    verbose : bool, default=False
        Log each growth step and show a progress bar.
    """

    def fit(self, X: np.ndarray, y: np.ndarray) -> EMELMClassifier:
        """
        Fit the classifier and grow the hidden layer.

        Parameters
        ----------
        X : ndarray of shape (n_samples, n_features)
        y : ndarray of shape (n_samples,)
            The class labels.

        Returns
        -------
        self : Returns a trained EMELMClassifier model.
        """
        return super().fit(X, self._fit_encoder(y))
