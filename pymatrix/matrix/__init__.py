"""
Matrix module.

Generic dense matrix container with an optional row-parallel execution
mode for addition and multiplication.

Public API:
    Matrix            - the container
    set_parallel()    - switch the process-wide execution mode
    is_parallel()     - query the process-wide execution mode
    parallel_mode()   - context manager for a scoped mode change
    ExecutionConfig   - per-call execution mode override
    conjugate()       - element conjugation dispatch used by transpose()
"""

from pymatrix.matrix.elements import conjugate, is_complex_type
from pymatrix.matrix.execution import (
    ExecutionConfig,
    PARALLEL,
    SEQUENTIAL,
    get_config,
    is_parallel,
    parallel_mode,
    set_parallel,
)
from pymatrix.matrix.matrix import Matrix

__all__ = [
    "Matrix",
    "ExecutionConfig",
    "PARALLEL",
    "SEQUENTIAL",
    "get_config",
    "is_parallel",
    "parallel_mode",
    "set_parallel",
    "conjugate",
    "is_complex_type",
]
