"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent coercion of indices or dimensions (operator.index only)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Shapes are passed as (rows, cols) tuples
"""

import operator
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.exceptions import (
    DimensionError,
    DimensionMismatchError,
    IllegalDimensionsError,
    NotSquareError,
    OutOfBoundsError,
)


def check_integer(value: Any, name: str) -> int:
    """
    Validate that value is an integer and return it as int.

    Accepts anything implementing __index__ (int, numpy integers) and
    rejects floats and strings.

    Args:
        value: Value to validate
        name: Parameter name for error messages

    Returns:
        value as a plain int

    Raises:
        TypeError: If value is not an integer
    """
    try:
        return operator.index(value)
    except TypeError as e:
        raise TypeError(
            f"{name}: expected an integer, got {type(value).__name__}"
        ) from e


def check_dimensions(rows: int, cols: int) -> None:
    """
    Verify a (rows, cols) pair describes a legal matrix.

    A matrix is either empty (0x0) or has both dimensions positive.

    Args:
        rows: Requested number of rows
        cols: Requested number of columns

    Raises:
        IllegalDimensionsError: If either dimension is negative, or
            exactly one of them is zero
    """
    if rows < 0 or cols < 0:
        raise IllegalDimensionsError(
            f"dimensions must be non-negative, got {rows}x{cols}",
            rows=rows,
            cols=cols,
        )
    if (rows == 0) != (cols == 0):
        raise IllegalDimensionsError(
            f"a matrix can't have exactly one zero dimension, got {rows}x{cols}",
            rows=rows,
            cols=cols,
        )


def check_cell_count(n_cells: int, rows: int, cols: int) -> None:
    """
    Verify a flat cell sequence fills a rows x cols matrix exactly.

    Args:
        n_cells: Length of the supplied sequence
        rows: Number of rows
        cols: Number of columns

    Raises:
        DimensionMismatchError: If n_cells != rows * cols
    """
    expected = rows * cols
    if n_cells != expected:
        raise DimensionMismatchError(
            f"cells: expected {expected} values for a {rows}x{cols} matrix, "
            f"got {n_cells}",
            operation='construct',
            expected=expected,
            actual=n_cells,
        )


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands have identical shapes (elementwise operations).

    Args:
        left: Shape of the left operand
        right: Shape of the right operand
        operation: Operation name for error messages

    Raises:
        DimensionMismatchError: If shapes differ
    """
    if left != right:
        raise DimensionMismatchError(
            f"{operation}: operand shapes differ, "
            f"{left[0]}x{left[1]} vs {right[0]}x{right[1]}",
            operation=operation,
            expected=left,
            actual=right,
        )


def check_inner_dimensions(left: tuple[int, int], right: tuple[int, int]) -> None:
    """
    Verify two operands can be multiplied (left.cols == right.rows).

    Args:
        left: Shape of the left operand
        right: Shape of the right operand

    Raises:
        DimensionMismatchError: If the inner dimensions disagree
    """
    if left[1] != right[0]:
        raise DimensionMismatchError(
            f"multiply: left has {left[1]} columns but right has {right[0]} rows",
            operation='multiply',
            expected=left[1],
            actual=right[0],
        )


def check_square(rows: int, cols: int, operation: str) -> None:
    """
    Verify a matrix is square.

    Args:
        rows: Number of rows
        cols: Number of columns
        operation: Operation name for error messages

    Raises:
        NotSquareError: If rows != cols
    """
    if rows != cols:
        raise NotSquareError(
            f"{operation}: requires a square matrix, got {rows}x{cols}",
            rows=rows,
            cols=cols,
        )


def check_in_bounds(row: int, col: int, rows: int, cols: int) -> None:
    """
    Verify (row, col) addresses an existing cell.

    Negative indices are rejected; there is no wrap-around.

    Args:
        row: Requested row index
        col: Requested column index
        rows: Number of rows of the matrix
        cols: Number of columns of the matrix

    Raises:
        OutOfBoundsError: If the cell does not exist
    """
    if not (0 <= row < rows and 0 <= col < cols):
        raise OutOfBoundsError(
            f"cell ({row}, {col}) does not exist in a {rows}x{cols} matrix",
            row=row,
            col=col,
            rows=rows,
            cols=cols,
        )


def check_2d(array: NDArray[Any], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 2D
    """
    if np.ndim(array) != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {np.ndim(array)}D with shape "
            f"{np.shape(array)}"
        )


def check_operand_type(value: Any, expected: type, operation: str) -> None:
    """
    Verify a binary operation's right operand has the expected type.

    Args:
        value: The operand
        expected: Required type
        operation: Operation name for error messages

    Raises:
        TypeError: If value is not an instance of expected
    """
    if not isinstance(value, expected):
        raise TypeError(
            f"{operation}: expected a {expected.__name__} operand, "
            f"got {type(value).__name__}"
        )
