"""
The :mod:`elmtoolbox.kernels` contains the kernel functions that replace
the random hidden layer in Kernel Extreme Learning Machines.
"""

# License: BSD 3 clause

from ._kernels import (KERNELS, KERNEL_PARAMS, check_kernel_params,
                       kernel_matrix, linear_kernel, polynomial_kernel,
                       rbf_kernel, wavelet_kernel)

__all__ = ('KERNELS',
           'KERNEL_PARAMS',
           'check_kernel_params',
           'kernel_matrix',
           'linear_kernel',
           'polynomial_kernel',
           'rbf_kernel',
           'wavelet_kernel')
