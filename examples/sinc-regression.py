#!/bin/python

"""
Compare the growing, the sequential and the kernel ELM on the sinc function
and log the results.
"""

import os
import sys

import numpy as np
from sklearn.metrics import mean_squared_error
from sklearn.model_selection import train_test_split

from elmtoolbox.util import new_logger
from elmtoolbox.extreme_learning_machine import (EMELMRegressor,
                                                 KELMRegressor,
                                                 OSELMRegressor)


def get_sinc(n_samples=5000, noise=.2, random_state=42):
    rs = np.random.RandomState(random_state)
    X = rs.uniform(-10., 10., size=(n_samples, 1))
    y = np.sinc(X / np.pi).ravel()
    return X, y + rs.uniform(-noise, noise, size=n_samples), y


def train_emelm(directory):
    self_name = 'train_emelm'
    logger = new_logger(self_name, directory=directory)
    X, y, y_clean = get_sinc()
    X_train, X_test, y_train, y_test = train_test_split(
        X, y_clean, test_size=.2, random_state=42)

    for nodes_by_iteration in [1, 5]:
        elm = EMELMRegressor(max_hidden_layer_size=50, max_error=1e-2,
                             nodes_by_iteration=nodes_by_iteration,
                             verbose=True)
        elm.fit(X_train, y_train)
        logger.info('nodes_by_iteration={0}: {1} hidden nodes, residual {2}, '
                    'test mse {3}'.format(nodes_by_iteration, elm.n_hidden_,
                                          elm.residuals_[-1],
                                          mean_squared_error(
                                              y_test, elm.predict(X_test))))


def train_oselm(directory):
    self_name = 'train_oselm'
    logger = new_logger(self_name, directory=directory)
    X, y, y_clean = get_sinc()
    X_train, X_test, y_train, y_test = train_test_split(
        X, y, test_size=.2, random_state=42)

    elm = OSELMRegressor(hidden_layer_size=20)
    for batch, (X_batch, y_batch) in enumerate(
            zip(np.array_split(X_train, 40), np.array_split(y_train, 40))):
        elm.partial_fit(X_batch, y_batch)
        if batch % 10 == 0:
            logger.info('batch {0}: test mse {1}'.format(
                batch, mean_squared_error(y_test, elm.predict(X_test))))


def train_kelm(directory):
    self_name = 'train_kelm'
    logger = new_logger(self_name, directory=directory)
    X, y, y_clean = get_sinc(n_samples=1000)
    X_train, X_test, y_train, y_test = train_test_split(
        X, y, test_size=.2, random_state=42)

    for kernel, kernel_params in [('rbf', 1.), ('wavelet', (1., 10., 1.)),
                                  ('poly', (1., 3.))]:
        kelm = KELMRegressor(kernel=kernel, kernel_params=kernel_params,
                             C=10., n_jobs=-1).fit(X_train, y_train)
        logger.info('{0}: test mse {1}'.format(
            kernel, mean_squared_error(y_test, kelm.predict(X_test))))


def main(out_path=os.path.join(os.getcwd(), 'elm-sinc'), function_name='train_emelm'):
    if not os.path.isdir(out_path):
        os.makedirs(out_path)

    functions = {'train_emelm': train_emelm,
                 'train_oselm': train_oselm,
                 'train_kelm': train_kelm}

    functions[function_name](out_path)


if __name__ == '__main__':
    main(*sys.argv[1:])
