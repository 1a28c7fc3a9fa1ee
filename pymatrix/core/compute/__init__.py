"""
Shared compute infrastructure for PyMatrix.

IMPORTANT: This is NOT where matrix kernels live. Those go in
pymatrix/matrix/. This module contains shared execution utilities.

Submodules:
    timing: Wall-clock timing of matrix operations
"""

from pymatrix.core.compute.timing import Timer

__all__ = [
    "Timer",
]
