"""
Core infrastructure for PyMatrix.

This module provides shared abstractions and utilities used by the
matrix container and its execution layer.

Key components:
    protocols: Element, Conjugable protocols
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing utilities
"""

from pymatrix.core.protocols import Element, Conjugable
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    IllegalDimensionsError,
    DimensionMismatchError,
    NotSquareError,
    OutOfBoundsError,
)

__all__ = [
    # Protocols
    "Element",
    "Conjugable",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "IllegalDimensionsError",
    "DimensionMismatchError",
    "NotSquareError",
    "OutOfBoundsError",
]
