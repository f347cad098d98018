"""Modular integer coefficient types Z/nZ.

``integers_mod(n)`` builds a concrete subclass of ``IntegerModN`` for one
modulus; elements of different moduli never mix.
"""

import functools
import logging

from polyring import rng
from polyring.errors import NotInvertibleError

_logger = logging.getLogger(__name__)


class IntegerModN:
    """Element of Z/nZ. Concrete subclasses set MODULUS."""

    __slots__ = ('value',)

    MODULUS: int = 0

    def __init__(self, value: int):
        if isinstance(value, IntegerModN):
            value = value.value
        self.value = value % self.MODULUS

    def _coerce(self, other):
        if isinstance(other, int):
            return type(self)(other)
        if type(other) is type(self):
            return other
        return None

    def __add__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return type(self)(self.value + other.value)

    def __radd__(self, other):
        if isinstance(other, int):
            return type(self)(other + self.value)
        return NotImplemented

    def __sub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return type(self)(self.value - other.value)

    def __rsub__(self, other):
        if isinstance(other, int):
            return type(self)(other - self.value)
        return NotImplemented

    def __mul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return type(self)(self.value * other.value)

    def __rmul__(self, other):
        if isinstance(other, int):
            return type(self)(other * self.value)
        return NotImplemented

    def __truediv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self * other.inverse()

    def __rtruediv__(self, other):
        if isinstance(other, int):
            return type(self)(other) * self.inverse()
        return NotImplemented

    def __neg__(self):
        return type(self)(-self.value)

    def __pow__(self, exp):
        if isinstance(exp, IntegerModN):
            exp = exp.value
        if exp < 0:
            return type(self)(pow(self.inverse().value, -exp, self.MODULUS))
        return type(self)(pow(self.value, exp, self.MODULUS))

    def __eq__(self, other):
        if isinstance(other, int):
            return self.value == (other % self.MODULUS)
        if type(other) is type(self):
            return self.value == other.value
        return NotImplemented

    def __hash__(self):
        return hash(self.value)

    def __repr__(self):
        return f"{type(self).__name__}({self.value})"

    def __bool__(self):
        return self.value != 0

    def inverse(self):
        """Multiplicative inverse modulo MODULUS.

        Zero raises ZeroDivisionError; a zero divisor (gcd with the modulus
        greater than one) raises NotInvertibleError.
        """
        if self.value == 0:
            raise ZeroDivisionError("Cannot invert zero")
        try:
            return type(self)(pow(self.value, -1, self.MODULUS))
        except ValueError as exc:
            raise NotInvertibleError(
                f"{self!r} is a zero divisor modulo {self.MODULUS}") from exc

    def to_int(self):
        return self.value

    @classmethod
    def random(cls):
        """Return a random non-zero element."""
        return cls(rng.randbelow(cls.MODULUS - 1) + 1)

    @classmethod
    def zero(cls):
        return cls(0)

    @classmethod
    def one(cls):
        return cls(1)


@functools.lru_cache(maxsize=None)
def integers_mod(modulus: int, name: str | None = None) -> type[IntegerModN]:
    """Create the coefficient type Z/``modulus``Z.

    >>> IntegerMod4 = integers_mod(4)
    >>> IntegerMod4(3) + IntegerMod4(1)
    IntegerMod4(0)
    """
    if not isinstance(modulus, int) or isinstance(modulus, bool) or modulus < 2:
        raise ValueError(f"modulus must be int >= 2, got {modulus!r}")
    name = name or f"IntegerMod{modulus}"
    _logger.debug("creating %s over modulus %d", name, modulus)
    return type(name, (IntegerModN,), {'__slots__': (), 'MODULUS': modulus})
