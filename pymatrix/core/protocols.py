"""
Core protocols for PyMatrix.

These define the structural interfaces an element type must satisfy to
live inside a Matrix. We use Protocol (structural typing) rather than ABC
(nominal typing) so int, float, complex, Fraction, Decimal, numpy scalars
and user-defined number types all qualify without registration.

Design Principles:
    - Minimal contracts: prescribe only what the matrix operations use
    - Capability-driven: conjugation is an optional extra, checked at runtime
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Element(Protocol):
    """
    Minimal protocol for a matrix element.

    The element type itself must also be constructible from zero,
    i.e. ``type(x)(0)`` yields the additive identity. That part of the
    contract cannot be expressed in a Protocol and is documented here.
    """

    def __add__(self, other, /): ...

    def __sub__(self, other, /): ...

    def __mul__(self, other, /): ...

    def __eq__(self, other, /) -> bool: ...


@runtime_checkable
class Conjugable(Protocol):
    """
    Element types providing complex conjugation through ``conj()``.

    A Matrix whose element type satisfies this protocol transposes to the
    Hermitian (conjugate) transpose.
    """

    def conj(self): ...
