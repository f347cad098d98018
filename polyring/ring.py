"""Coefficient capability layer.

A polynomial only asks its coefficients for ``+``, ``-``, unary ``-``, ``*``
and ``==``, plus a zero and a one. The zero and one come from the *ring*
object describing the coefficient domain: either a type with ``zero()`` /
``one()`` factories (``IntegerModN`` subclasses, ``PolynomialRing``) or a
plain numeric type such as ``int`` or ``Fraction`` that converts from 0 and 1.
"""

from typing import Protocol, runtime_checkable

from polyring import rng
from polyring.errors import NotInvertibleError

SAMPLE_BOUND = 1 << 16  # |x| bound for random_element over int-like rings


@runtime_checkable
class Ring(Protocol):
    """Anything usable as a polynomial coefficient."""

    def __add__(self, other): ...

    def __sub__(self, other): ...

    def __neg__(self): ...

    def __mul__(self, other): ...

    def __eq__(self, other): ...


def zero_of(ring):
    factory = getattr(ring, 'zero', None)
    if factory is not None:
        return factory()
    return ring(0)


def one_of(ring):
    factory = getattr(ring, 'one', None)
    if factory is not None:
        return factory()
    return ring(1)


def ring_of(value):
    """Ring a coefficient belongs to: its ``parent`` if it has one, else its type."""
    parent = getattr(value, 'parent', None)
    if parent is not None:
        return parent
    return type(value)


def coerce(value, ring):
    """Convert a scalar into ``ring``, leaving members of ``ring`` untouched."""
    if ring_of(value) == ring:
        return value
    return ring(value)


def invert(value, ring):
    """Multiplicative inverse of ``value`` in ``ring``.

    Raises NotInvertibleError when ``value`` is not a unit.
    """
    inverse = getattr(value, 'inverse', None)
    if inverse is not None:
        return inverse()
    if isinstance(value, int):
        if value in (1, -1):
            return value
        raise NotInvertibleError(f"{value!r} is not a unit in the integers")
    try:
        return one_of(ring) / value
    except (TypeError, ZeroDivisionError) as exc:
        raise NotInvertibleError(f"{value!r} has no inverse in {ring!r}") from exc


def random_element(ring):
    factory = getattr(ring, 'random', None)
    if factory is not None:
        return factory()
    return ring(rng.randint(-SAMPLE_BOUND, SAMPLE_BOUND))
