"""
Element-type helpers: zero construction and conjugation dispatch.

conjugate() is a functools.singledispatch function. Real number types
(anything registered as numbers.Real: int, float, Fraction, numpy reals)
resolve to the identity, so transposing them is a plain transpose.
Complex types resolve to their conjugate, which turns transpose into the
Hermitian transpose. Types outside the numeric tower fall back to their
own conj() method when they provide one.
"""

from __future__ import annotations

import numbers
from functools import singledispatch
from typing import Any, Sequence

import numpy as np

from pymatrix.core.protocols import Conjugable


DEFAULT_ELEMENT_TYPE: type = float


def zero(element_type: type) -> Any:
    """Additive identity of element_type, built as element_type(0)."""
    return element_type(0)


@singledispatch
def conjugate(value: Any) -> Any:
    """
    Complex conjugate of value, or value itself for real elements.

    Register additional element types with ``conjugate.register(MyType)``.
    """
    if isinstance(value, Conjugable):
        return value.conj()
    return value


@conjugate.register(numbers.Real)
def _conjugate_real(value: Any) -> Any:
    return value


@conjugate.register(complex)
@conjugate.register(np.complexfloating)
def _conjugate_complex(value: Any) -> Any:
    return value.conjugate()


def is_complex_type(element_type: type) -> bool:
    """
    Whether transposing a matrix of element_type conjugates its cells.

    Args:
        element_type: The element type to check

    Returns:
        True for complex types and types exposing conj(), False otherwise
    """
    impl = conjugate.dispatch(element_type)
    if impl is _conjugate_complex:
        return True
    if impl is _conjugate_real:
        return False
    return callable(getattr(element_type, 'conj', None))


def infer_element_type(cells: Sequence[Any]) -> type:
    """
    Element type of a cell sequence.

    The type of the first complex cell if there is one, so a mixed
    [1, 2j] sequence still transposes to its Hermitian transpose.
    Otherwise the type of the first cell.
    """
    if len(cells) == 0:
        return DEFAULT_ELEMENT_TYPE
    for cell in cells:
        if is_complex_type(type(cell)):
            return type(cell)
    return type(cells[0])


def promote(left: type, right: type) -> type:
    """Element type of a result combining left and right cells."""
    if is_complex_type(right) and not is_complex_type(left):
        return right
    return left
