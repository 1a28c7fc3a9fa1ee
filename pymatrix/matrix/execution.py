"""
Execution mode for matrix addition and multiplication.

One process-wide ExecutionConfig, initialised to sequential, is shared by
every Matrix regardless of element type. Operations read it once at the
start of each call, or use the config passed to them explicitly.

Changing the mode while another thread has an addition or multiplication
in flight is the caller's responsibility to serialize: the in-flight call
keeps the mode it started with.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExecutionConfig:
    """
    How addition and multiplication are executed.

    Attributes:
        parallel: If True, one worker thread computes each output row.
            If False, cells are computed in a single row-major pass.
    """
    parallel: bool = False

    @property
    def mode_name(self) -> str:
        return 'parallel' if self.parallel else 'non-parallel'


SEQUENTIAL = ExecutionConfig(parallel=False)
PARALLEL = ExecutionConfig(parallel=True)

_current: ExecutionConfig = SEQUENTIAL
_lock = threading.Lock()


def get_config() -> ExecutionConfig:
    """Current process-wide execution config."""
    return _current


def is_parallel() -> bool:
    """True if the process-wide mode is parallel."""
    return _current.parallel


def set_parallel(parallel: bool) -> None:
    """
    Switch the process-wide execution mode.

    Logs a one-line message when the mode actually changes. Setting the
    mode to its current value does nothing.

    Args:
        parallel: True for row-parallel execution, False for sequential
    """
    _swap(parallel)


def _swap(parallel: bool) -> ExecutionConfig:
    """Install the requested mode and return the one it replaced."""
    global _current
    new = PARALLEL if parallel else SEQUENTIAL
    with _lock:
        previous = _current
        if new != previous:
            _current = new
            # log order matches change order
            logger.info("Generic Matrix mode changed to %s mode.", new.mode_name)
    return previous


def resolve_config(config: ExecutionConfig | None) -> ExecutionConfig:
    """The explicit config if given, else the process-wide one."""
    return config if config is not None else _current


@contextmanager
def parallel_mode(parallel: bool = True) -> Iterator[ExecutionConfig]:
    """
    Set the execution mode for the duration of a with-block.

    Usage:
        with parallel_mode():
            c = a * b

    Args:
        parallel: Mode to use inside the block

    Yields:
        The config in effect inside the block
    """
    previous = _swap(parallel)
    try:
        yield PARALLEL if parallel else SEQUENTIAL
    finally:
        _swap(previous.parallel)
