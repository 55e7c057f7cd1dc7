"""
The :mod:`elmtoolbox.base` contains activation functions and the random
initialization used by the building blocks of Extreme Learning Machines.
"""

# License: BSD 3 clause

from ._activations import ACTIVATIONS
from ._base import _uniform_random_input_weights, _uniform_random_bias

__all__ = ('ACTIVATIONS',
           '_uniform_random_input_weights',
           '_uniform_random_bias')
