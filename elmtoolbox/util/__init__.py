"""The :mod:`elmtoolbox.util` has utilities for running and testing."""

# License: BSD 3 clause

from ._util import new_logger, value_to_tuple

__all__ = ('new_logger', 'value_to_tuple')
