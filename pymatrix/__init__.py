"""
PyMatrix: generic dense matrices for Python.

A matrix container parametrized by whatever element type the caller
supplies, with row-major storage, bounds-checked access and an optional
thread-per-row execution mode for addition and multiplication.

Submodules:
    matrix: The Matrix container and its execution mode
    core: Exceptions, validation, protocols and timing
"""

__version__ = "0.1.0"

from pymatrix import matrix
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    IllegalDimensionsError,
    DimensionMismatchError,
    NotSquareError,
    OutOfBoundsError,
)
from pymatrix.matrix import (
    ExecutionConfig,
    Matrix,
    is_parallel,
    parallel_mode,
    set_parallel,
)

__all__ = [
    "__version__",
    "matrix",
    "Matrix",
    "ExecutionConfig",
    "set_parallel",
    "is_parallel",
    "parallel_mode",
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "IllegalDimensionsError",
    "DimensionMismatchError",
    "NotSquareError",
    "OutOfBoundsError",
]
