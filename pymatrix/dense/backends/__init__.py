"""
Compute backends for dense matrices.

    cpu:     Sequential reference kernels
    threads: Row-parallel kernels on a thread pool
"""

from pymatrix.dense.backends.cpu import CPUBackend
from pymatrix.dense.backends.threads import ThreadedBackend

__all__ = [
    "CPUBackend",
    "ThreadedBackend",
]
