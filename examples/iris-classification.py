"""
Cross-validate the ELM classifiers on the iris dataset.
"""
import os

import numpy as np
from sklearn.datasets import load_iris
from sklearn.model_selection import GridSearchCV
from sklearn.pipeline import make_pipeline
from sklearn.preprocessing import StandardScaler

from elmtoolbox.util import new_logger
from elmtoolbox.extreme_learning_machine import (ELMClassifier,
                                                 EMELMClassifier,
                                                 KELMClassifier)


def main(directory=os.getcwd()):
    logger = new_logger('iris-classification', directory=directory)
    X, y = load_iris(return_X_y=True)

    searches = {
        'elm': (ELMClassifier(), {'elmclassifier__hidden_layer_size':
                                  [10, 20, 50]}),
        'emelm': (EMELMClassifier(max_hidden_layer_size=50),
                  {'emelmclassifier__max_error': [1., 2., 4.]}),
        'kelm': (KELMClassifier(), {'kelmclassifier__C': [1., 10., 100.],
                                    'kelmclassifier__kernel_params':
                                        [.5, 1., 2.]}),
    }
    for name, (estimator, param_grid) in searches.items():
        search = GridSearchCV(make_pipeline(StandardScaler(), estimator),
                              param_grid=param_grid, cv=5).fit(X, y)
        logger.info('{0}: best params {1}, accuracy {2:.3f} +- {3:.3f}'.format(
            name, search.best_params_, search.best_score_,
            np.std([search.cv_results_['split{0}_test_score'.format(k)][
                search.best_index_] for k in range(5)])))


if __name__ == '__main__':
    main()
