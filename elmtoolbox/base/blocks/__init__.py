"""The :mod:`blocks` contains the building blocks for Extreme Learning Machines."""

# License: BSD 3 clause

from ._input_to_node import InputToNode

__all__ = ('InputToNode',)
