"""
Row kernels and runners for matrix addition and multiplication.

All kernels work on flat row-major lists. A row kernel reads both operands
and writes exactly one row slice of the output list, so row kernels for
different rows never touch the same cells and can run on separate threads
without locks.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable

from pymatrix.core.compute.timing import Timer
from pymatrix.matrix.execution import ExecutionConfig

logger = logging.getLogger(__name__)

Cells = list[Any]
RowKernel = Callable[[int], None]


def add_row(left: Cells, right: Cells, out: Cells, row: int, cols: int) -> None:
    """out[row] = left[row] + right[row], cell by cell."""
    start = row * cols
    stop = start + cols
    out[start:stop] = [a + b for a, b in zip(left[start:stop], right[start:stop])]


def multiply_row(
    left: Cells,
    right: Cells,
    out: Cells,
    row: int,
    inner: int,
    out_cols: int,
    element_type: type,
) -> None:
    """
    out[row] = left[row] @ right.

    Each cell is accumulated from element_type(0) over k in ascending
    order, so every execution path sums in the same order.
    """
    left_row = left[row * inner:(row + 1) * inner]
    values = []
    for j in range(out_cols):
        cell = element_type(0)
        for k in range(inner):
            cell = cell + left_row[k] * right[k * out_cols + j]
        values.append(cell)
    out[row * out_cols:(row + 1) * out_cols] = values


def add_cells(left: Cells, right: Cells) -> Cells:
    """Elementwise sum in a single pass over storage order."""
    return [a + b for a, b in zip(left, right)]


def subtract_cells(left: Cells, right: Cells) -> Cells:
    """Elementwise difference in a single pass over storage order."""
    return [a - b for a, b in zip(left, right)]


def run_rows_parallel(kernel: RowKernel, n_rows: int, timer: Timer) -> None:
    """
    Run kernel(row) for every row, one worker thread per row.

    Blocks until every row is done. The first exception raised by a
    worker is re-raised here after the remaining workers finish.
    """
    if n_rows == 0:
        return
    with ThreadPoolExecutor(
        max_workers=n_rows, thread_name_prefix='pymatrix-row'
    ) as pool:
        with timer.section('fan_out'):
            futures = [pool.submit(kernel, row) for row in range(n_rows)]
        with timer.section('join'):
            for future in futures:
                future.result()


def run_rows_sequential(kernel: RowKernel, n_rows: int) -> None:
    """Run kernel(row) for every row, in row order, on the calling thread."""
    for row in range(n_rows):
        kernel(row)


def execute(
    operation: str,
    config: ExecutionConfig,
    shape: tuple[int, int],
    sequential: Callable[[], None],
    kernel: RowKernel,
) -> None:
    """
    Run one operation in the mode selected by config and log its timing.

    Args:
        operation: Operation name for the debug log ('add', 'multiply')
        config: Execution config read at the start of the call
        shape: Shape of the result matrix
        sequential: Whole-matrix sequential implementation
        kernel: Row kernel used by the parallel path
    """
    timer = Timer()
    timer.start()
    if config.parallel:
        run_rows_parallel(kernel, shape[0], timer)
    else:
        sequential()
    timer.stop()
    logger.debug(
        "%s %dx%d (%s mode): %s",
        operation, shape[0], shape[1], config.mode_name, timer.result(),
    )
