"""
The :mod:`elmtoolbox.extreme_learning_machine` contains object-oriented
implementations of Extreme Learning Machines [#]_ and their growing [#]_,
online sequential [#]_ and kernel [#]_ variants.

Separate implementations of Classifiers and Regressors as specified by
scikit-learn.

References
----------
    .. [#] Guang-Bin Huang et al., 'Extreme learning machine: Theory and
           applications', p. 489-501, 2006, doi: 10.1016/j.neucom.2005.12.126.
    .. [#] G. Feng et al., 'Error Minimized Extreme Learning Machine With
           Growth of Hidden Nodes and Incremental Learning', 2009,
           doi: 10.1109/TNN.2009.2024147.
    .. [#] N. Liang et al., 'A Fast and Accurate Online Sequential Learning
           Algorithm for Feedforward Networks', 2006,
           doi: 10.1109/TNN.2006.880583.
    .. [#] Guang-Bin Huang et al., 'Extreme Learning Machine for Regression
           and Multiclass Classification', 2012,
           doi: 10.1109/TSMCB.2011.2168604.
"""

# License: BSD 3 clause

from ._elm import ELMClassifier, ELMRegressor
from ._emelm import EMELMClassifier, EMELMRegressor
from ._oselm import OSELMClassifier, OSELMRegressor
from ._kelm import KELMClassifier, KELMRegressor

__all__ = ('ELMClassifier',
           'ELMRegressor',
           'EMELMClassifier',
           'EMELMRegressor',
           'OSELMClassifier',
           'OSELMRegressor',
           'KELMClassifier',
           'KELMRegressor')
