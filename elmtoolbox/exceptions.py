"""The :mod:`elmtoolbox.exceptions` module includes custom errors and warnings."""

# License: BSD 3 clause


class ConfigurationError(ValueError):
    """
    Exception class to raise if a hyperparameter is invalid.

    This covers missing or non-positive dimensions, unknown activation
    functions, unknown kernels and kernel parameters of the wrong arity.
    It inherits from ValueError so that code written against the
    scikit-learn conventions keeps working.
    """


class NumericalDegeneracyWarning(UserWarning):
    """
    Warning used to notify of a numerically degenerate training step.

    Examples are an initial online batch with fewer samples than hidden
    nodes, or a block of new hidden nodes that is (almost) linearly
    dependent on the existing ones. Training continues with a best-effort
    result.
    """
