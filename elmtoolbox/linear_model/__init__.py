"""
The :mod:`elmtoolbox.linear_model` module implements the least squares
solvers for the output layer of ELMs.
"""

# License: BSD 3 clause

from ._incremental_regression import IncrementalRegression
from ._pseudoinverse import PseudoinverseRegression, pseudoinverse

__all__ = ('IncrementalRegression',
           'PseudoinverseRegression',
           'pseudoinverse')
