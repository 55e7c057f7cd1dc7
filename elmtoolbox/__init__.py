"""The :mod:`elmtoolbox` module includes various Extreme Learning Machines."""

# License: BSD 3 clause

from ._version import __version__

from . import (base, exceptions, extreme_learning_machine, kernels,
               linear_model, util)


__all__ = ('__version__',
           'base',
           'exceptions',
           'extreme_learning_machine',
           'kernels',
           'linear_model',
           'util')
