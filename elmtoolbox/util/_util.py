"""The :mod:`elmtoolbox.util` contains utilities for running and testing."""

# License: BSD 3 clause

import os
import logging
from typing import Sequence, Tuple, Union

import numpy as np


def new_logger(name: str, directory: str = os.getcwd()) -> logging.Logger:
    """Register a new logger for logfiles."""
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    formatter = logging.Formatter(
        fmt='%(asctime)s %(levelname)s %(name)s %(message)s')
    handler = logging.FileHandler(
        os.path.join(directory, '{0}.log'.format(name)))
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return logger


def value_to_tuple(value: Union[float, int, Sequence[Union[float, int]]],
                   size: int) -> Tuple[Union[float, int], ...]:
    """
    Convert a value to a tuple of values.

    Parameters
    ----------
    value : Union[float, int, Sequence[Union[float, int]]]
        The value to be inserted in the tuple. Sequences are converted
        as they are.
    size : int
        The length of the tuple if value is a scalar.

    Returns
    -------
    value : Tuple[Union[float, int], ...]
        Tuple of values.
    """
    if isinstance(value, (float, int, np.number)):
        return (value, ) * size
    else:
        return tuple(np.ravel(value).tolist())
