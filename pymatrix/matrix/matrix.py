"""
Matrix: generic dense matrix with row-major storage.

The element type is whatever the caller puts in: int, float, complex,
Fraction, Decimal, numpy scalars or a user-defined number type. An element
type needs zero construction (element_type(0)), +, -, * and ==.

Cells live in a flat Python list owned by the matrix, indexed as
row * cols + col. A matrix is either empty (0x0) or has both dimensions
positive.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import DimensionMismatchError
from pymatrix.core.validation import (
    check_2d,
    check_cell_count,
    check_dimensions,
    check_in_bounds,
    check_inner_dimensions,
    check_integer,
    check_operand_type,
    check_same_shape,
    check_square,
)
from pymatrix.matrix import _kernels
from pymatrix.matrix.elements import (
    DEFAULT_ELEMENT_TYPE,
    conjugate,
    infer_element_type,
    is_complex_type,
    promote,
)
from pymatrix.matrix.execution import ExecutionConfig, resolve_config


class Matrix:
    """
    Generic dense matrix.

    Construction:
        Matrix()                          1x1 zero matrix
        Matrix(rows, cols)                rows x cols zero matrix
        Matrix(rows, cols, cells)         from a flat row-major sequence
        Matrix.from_rows([[1, 2], [3, 4]])
        Matrix.from_array(ndarray)
        Matrix.take(other)                move other's storage

    Element access:
        m[row, col], m[row, col] = value, m.at(row, col), m.set(row, col, value)

    Arithmetic (operands are never mutated):
        a + b, a - b, a * b (also a @ b), a == b, m.transpose(), m.trace()

    Addition and multiplication honor the execution mode, see
    pymatrix.matrix.execution.
    """

    __hash__ = None  # mutable

    def __init__(
        self,
        rows: int | None = None,
        cols: int | None = None,
        cells: Iterable[Any] | None = None,
        *,
        element_type: type | None = None,
    ):
        if rows is None and cols is None:
            rows, cols = 1, 1
        elif rows is None or cols is None:
            raise TypeError(
                "Matrix() takes both rows and cols, or neither for a 1x1 matrix"
            )
        rows = check_integer(rows, 'rows')
        cols = check_integer(cols, 'cols')
        check_dimensions(rows, cols)

        if cells is None:
            element_type = element_type or DEFAULT_ELEMENT_TYPE
            storage = [element_type(0) for _ in range(rows * cols)]
        else:
            storage = list(cells)
            check_cell_count(len(storage), rows, cols)
            element_type = element_type or infer_element_type(storage)

        self._rows = rows
        self._cols = cols
        self._cells = storage
        self._element_type = element_type

    @classmethod
    def _from_storage(
        cls,
        rows: int,
        cols: int,
        cells: list[Any],
        element_type: type,
    ) -> Matrix:
        """Internal builder adopting an already validated cell list."""
        matrix = cls.__new__(cls)
        matrix._rows = rows
        matrix._cols = cols
        matrix._cells = cells
        matrix._element_type = element_type
        return matrix

    @classmethod
    def from_rows(
        cls,
        rows: Iterable[Iterable[Any]],
        *,
        element_type: type | None = None,
    ) -> Matrix:
        """
        Build a Matrix from nested rows.

        Parameters
        ----------
        rows : iterable of iterables
            One inner iterable per row. All rows must have the same length.
        element_type : type, optional
            Element type; inferred from the cells if omitted.

        Raises
        ------
        DimensionMismatchError
            If the rows have different lengths.
        IllegalDimensionsError
            If the rows are all empty (e.g. [[]]).
        """
        nested = [list(row) for row in rows]
        n_rows = len(nested)
        n_cols = len(nested[0]) if nested else 0
        for i, row in enumerate(nested):
            if len(row) != n_cols:
                raise DimensionMismatchError(
                    f"rows: row {i} has {len(row)} values, expected {n_cols}",
                    operation='construct',
                    expected=n_cols,
                    actual=len(row),
                )
        cells = [cell for row in nested for cell in row]
        return cls(n_rows, n_cols, cells, element_type=element_type)

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix:
        """
        Build a Matrix from a 2D array-like (numpy array, nested lists).

        numpy scalars are converted to the matching Python scalars.

        Raises
        ------
        DimensionError
            If the input is not 2-dimensional.
        IllegalDimensionsError
            If exactly one dimension is zero.
        """
        data = np.asarray(array)
        check_2d(data, 'array')
        rows, cols = data.shape
        cells = data.ravel().tolist()
        return cls(rows, cols, cells)

    @classmethod
    def take(cls, other: Matrix) -> Matrix:
        """
        Move other's storage into a new Matrix.

        other is left as a valid empty 0x0 matrix. Its element type is kept.
        """
        moved = cls._from_storage(
            other._rows, other._cols, other._cells, other._element_type
        )
        other._rows = 0
        other._cols = 0
        other._cells = []
        return moved

    def copy(self) -> Matrix:
        """Independent copy: dimensions and storage are duplicated."""
        return self._from_storage(
            self._rows, self._cols, list(self._cells), self._element_type
        )

    __copy__ = copy

    def assign(self, other: Matrix) -> None:
        """Replace this matrix's contents with a copy of other's."""
        self._rows = other._rows
        self._cols = other._cols
        self._cells = list(other._cells)
        self._element_type = other._element_type

    # ------------------------------------------------------------------
    # Storage and indexing
    # ------------------------------------------------------------------

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    @property
    def element_type(self) -> type:
        """Type used to build zeros: fill cells, accumulators, trace."""
        return self._element_type

    @property
    def is_square(self) -> bool:
        return self._rows == self._cols

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Any]:
        """Cells in storage (row-major) order. Each call starts over."""
        return iter(self._cells)

    def _index(self, row: Any, col: Any) -> int:
        row = check_integer(row, 'row')
        col = check_integer(col, 'col')
        check_in_bounds(row, col, self._rows, self._cols)
        return row * self._cols + col

    def at(self, row: int, col: int) -> Any:
        """
        Element at (row, col).

        Raises:
            OutOfBoundsError: If row >= rows, col >= cols, or either is negative
        """
        return self._cells[self._index(row, col)]

    def set(self, row: int, col: int, value: Any) -> None:
        """
        Overwrite the element at (row, col).

        Writing a complex value into a real matrix promotes its element
        type, so transpose() conjugates from then on.

        Raises:
            OutOfBoundsError: If row >= rows, col >= cols, or either is negative
        """
        self._cells[self._index(row, col)] = value
        self._element_type = promote(self._element_type, type(value))

    @staticmethod
    def _split_key(key: Any) -> tuple[Any, Any]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError(
                f"Matrix indices must be a (row, col) tuple, got {key!r}"
            )
        return key

    def __getitem__(self, key: tuple[int, int]) -> Any:
        return self.at(*self._split_key(key))

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        self.set(*self._split_key(key), value)

    def tolist(self) -> list[list[Any]]:
        """Nested list of rows."""
        cols = self._cols
        return [self._cells[i * cols:(i + 1) * cols] for i in range(self._rows)]

    def to_numpy(self, dtype: Any = None) -> NDArray[Any]:
        """
        Cells as a (rows, cols) numpy array.

        Element types numpy does not know (Fraction, Decimal, ...) end up in
        an object array.
        """
        return np.array(self._cells, dtype=dtype).reshape(self._rows, self._cols)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add(self, other: Matrix, *, config: ExecutionConfig | None = None) -> Matrix:
        """
        Elementwise sum.

        Parameters
        ----------
        other : Matrix
            Right operand, same shape as self.
        config : ExecutionConfig, optional
            Execution mode for this call. Defaults to the process-wide mode.

        Raises
        ------
        DimensionMismatchError
            If the shapes differ.
        """
        check_operand_type(other, Matrix, 'add')
        check_same_shape(self.shape, other.shape, 'add')
        config = resolve_config(config)
        rows, cols = self.shape
        out: list[Any] = [None] * (rows * cols)
        left, right = self._cells, other._cells

        def sequential() -> None:
            out[:] = _kernels.add_cells(left, right)

        def kernel(row: int) -> None:
            _kernels.add_row(left, right, out, row, cols)

        _kernels.execute('add', config, self.shape, sequential, kernel)
        return self._from_storage(
            rows, cols, out, promote(self._element_type, other._element_type)
        )

    def subtract(self, other: Matrix) -> Matrix:
        """
        Elementwise difference. Always sequential.

        Raises:
            DimensionMismatchError: If the shapes differ
        """
        check_operand_type(other, Matrix, 'subtract')
        check_same_shape(self.shape, other.shape, 'subtract')
        return self._from_storage(
            self._rows,
            self._cols,
            _kernels.subtract_cells(self._cells, other._cells),
            promote(self._element_type, other._element_type),
        )

    def multiply(
        self, other: Matrix, *, config: ExecutionConfig | None = None
    ) -> Matrix:
        """
        Matrix product self @ other.

        Cell (i, j) is the sum over k of self(i, k) * other(k, j),
        accumulated from element_type(0) in ascending k.

        Parameters
        ----------
        other : Matrix
            Right operand with other.rows == self.cols.
        config : ExecutionConfig, optional
            Execution mode for this call. Defaults to the process-wide mode.

        Raises
        ------
        DimensionMismatchError
            If self.cols != other.rows.
        """
        check_operand_type(other, Matrix, 'multiply')
        check_inner_dimensions(self.shape, other.shape)
        config = resolve_config(config)
        rows, inner, cols = self._rows, self._cols, other._cols
        element_type = promote(self._element_type, other._element_type)
        left, right = self._cells, other._cells
        out: list[Any] = [None] * (rows * cols)

        def kernel(row: int) -> None:
            _kernels.multiply_row(left, right, out, row, inner, cols, element_type)

        def sequential() -> None:
            _kernels.run_rows_sequential(kernel, rows)

        _kernels.execute('multiply', config, (rows, cols), sequential, kernel)
        return self._from_storage(rows, cols, out, element_type)

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    __matmul__ = __mul__

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and all(
            a == b for a, b in zip(self._cells, other._cells)
        )

    def transpose(self) -> Matrix:
        """
        Transposed matrix: cell (i, j) of the result is cell (j, i) of self.

        For complex element types every cell is also conjugated, giving the
        Hermitian transpose. Real element types get a plain transpose.
        """
        rows, cols = self._rows, self._cols
        src = self._cells
        cells = [src[j * cols + i] for i in range(cols) for j in range(rows)]
        if is_complex_type(self._element_type):
            cells = [conjugate(cell) for cell in cells]
        return self._from_storage(cols, rows, cells, self._element_type)

    def hermitian(self) -> Matrix:
        """
        Conjugate transpose: cell (i, j) of the result is conj(self(j, i)).

        Conjugates every cell regardless of the recorded element type, so
        complex cells in a matrix built as real are still conjugated. Real
        cells pass through unchanged.
        """
        rows, cols = self._rows, self._cols
        src = self._cells
        cells = [
            conjugate(src[j * cols + i]) for i in range(cols) for j in range(rows)
        ]
        return self._from_storage(
            cols, rows, cells, promote(self._element_type, infer_element_type(cells))
        )

    def trace(self) -> Any:
        """
        Sum of the diagonal, accumulated from element_type(0).

        Raises:
            NotSquareError: If rows != cols
        """
        check_square(self._rows, self._cols, 'trace')
        total = self._element_type(0)
        for i in range(self._rows):
            total = total + self._cells[i * self._cols + i]
        return total

    # ------------------------------------------------------------------
    # Printing
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        """Rows on separate lines, each cell followed by a tab."""
        return ''.join(
            ''.join(f"{cell}\t" for cell in row) + '\n' for row in self.tolist()
        )

    def __repr__(self) -> str:
        return (
            f"Matrix(rows={self._rows}, cols={self._cols}, "
            f"element_type={self._element_type.__name__})"
        )
