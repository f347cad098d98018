"""Dense univariate polynomials over an arbitrary coefficient ring.

Coefficients only need the operations described by ``polyring.ring.Ring``.
A polynomial is itself a valid coefficient, so ``Polynomial`` over
``PolynomialRing(int)`` is a polynomial in two variables.
"""

import functools
import logging
from dataclasses import dataclass

from polyring import ring as rings
from polyring.errors import NotInvertibleError

_logger = logging.getLogger(__name__)


def _find_degree(coeffs, zero) -> int:
    """Highest index holding a nonzero coefficient, or 0."""
    for i in range(len(coeffs) - 1, -1, -1):
        if coeffs[i] != zero:
            return i
    return 0


def _infer_ring(coeffs):
    """Ring of the first coefficient that is not a plain int, else int."""
    for c in coeffs:
        if not isinstance(c, int):
            return rings.ring_of(c)
    return int


def _common_ring(a: 'Polynomial', b: 'Polynomial'):
    """Coefficient ring for a result built from ``a`` and ``b``.

    The ``int`` default (empty input, lifted integer constants) yields to the
    other operand's ring.
    """
    if a.ring == b.ring:
        return a.ring
    if a.ring is int:
        return b.ring
    if b.ring is int:
        return a.ring
    raise TypeError(f"cannot combine polynomials over {a.ring!r} and {b.ring!r}")


_VARIABLES = "xyzw"


def _variable_name(ring) -> str:
    """x for coefficients in a base ring, y over Z[x], and so on."""
    depth = 0
    while isinstance(ring, PolynomialRing):
        ring = ring.coefficient_ring
        depth += 1
    if depth < len(_VARIABLES):
        return _VARIABLES[depth]
    return f"x{depth}"


def _lifting(method):
    """Lift the right operand to a Polynomial, or return NotImplemented.

    When self is a coefficient of other, self becomes a constant over
    other's ring and the operation runs there.
    """
    @functools.wraps(method)
    def wrapper(self, other):
        if isinstance(other, Polynomial) and other.ring == self.parent:
            constant = Polynomial([self], ring=other.ring)
            return getattr(constant, method.__name__)(other)
        other = self._lift(other)
        if other is None:
            return NotImplemented
        return method(self, other)
    return wrapper


class Polynomial:
    """Polynomial with coefficients in ``ring``. coeffs[i] is the coefficient of x^i.

    The backing tuple may carry trailing zeros; only ``coeffs[0..degree]`` is
    significant, and every operation ignores the rest.
    """

    __slots__ = ('_coeffs', '_degree', '_ring')

    def __init__(self, coeffs=(), ring=None):
        coeffs = tuple(coeffs)
        if ring is None:
            ring = _infer_ring(coeffs)
        if any(rings.ring_of(c) != ring for c in coeffs):
            coeffs = tuple(rings.coerce(c, ring) for c in coeffs)
        self._coeffs = coeffs
        self._ring = ring
        self._degree = _find_degree(coeffs, rings.zero_of(ring)) if coeffs else 0

    @property
    def coeffs(self) -> tuple:
        """The backing tuple, shared rather than copied."""
        return self._coeffs

    @property
    def degree(self) -> int:
        return self._degree

    @property
    def ring(self):
        return self._ring

    @property
    def parent(self) -> 'PolynomialRing':
        return PolynomialRing(self._ring)

    @property
    def leading_coefficient(self):
        return self.coefficient(self._degree)

    def coefficient(self, i: int):
        if i < 0:
            raise IndexError(f"negative exponent {i}")
        if i <= self._degree and i < len(self._coeffs):
            return self._coeffs[i]
        return rings.zero_of(self._ring)

    def significant(self) -> tuple:
        """Coefficients 0..degree."""
        if not self._coeffs:
            return (rings.zero_of(self._ring),)
        return self._coeffs[:self._degree + 1]

    @classmethod
    def zero(cls, ring=int) -> 'Polynomial':
        return cls([rings.zero_of(ring)], ring=ring)

    @classmethod
    def one(cls, ring=int) -> 'Polynomial':
        return cls([rings.one_of(ring)], ring=ring)

    def is_zero(self) -> bool:
        return self == Polynomial.zero(self._ring)

    def is_one(self) -> bool:
        return self == Polynomial.one(self._ring)

    def compare_deg(self, other: 'Polynomial') -> bool:
        """True if self has degree higher than or equal to other."""
        return self._degree >= other._degree

    def _lift(self, other):
        if isinstance(other, Polynomial) and other.parent != self._ring:
            return other
        if isinstance(other, int):
            return Polynomial([rings.coerce(other, self._ring)], ring=self._ring)
        if isinstance(other, rings.Ring):
            # a coefficient of this polynomial, or a scalar from another ring
            return Polynomial([other])
        return None

    @_lifting
    def __eq__(self, other):
        if self._ring != other._ring and int in (self._ring, other._ring):
            ring = _common_ring(self, other)
            self = Polynomial(self.significant(), ring=ring)
            other = Polynomial(other.significant(), ring=ring)
        if self._degree != other._degree:
            return False
        return self.significant() == other.significant()

    def __hash__(self):
        if self._degree == 0:
            # agrees with the constant coefficient, which compares equal
            return hash(self.significant()[0])
        return hash(self.significant())

    def __bool__(self):
        return not self.is_zero()

    def _add_padded(self, shorter: 'Polynomial') -> 'Polynomial':
        """Add, assuming shorter has lower or equal degree to self."""
        ring = _common_ring(self, shorter)
        low = shorter.significant()
        summed = [c + low[i] if i < len(low) else c
                  for i, c in enumerate(self.significant())]
        return Polynomial(summed, ring=ring)

    @_lifting
    def __add__(self, other):
        if self.compare_deg(other):
            return self._add_padded(other)
        return other._add_padded(self)

    @_lifting
    def __radd__(self, other):
        return other + self

    def __neg__(self):
        return Polynomial([-c for c in self.significant()], ring=self._ring)

    @_lifting
    def __sub__(self, other):
        return self + (-other)

    @_lifting
    def __rsub__(self, other):
        return other + (-self)

    @_lifting
    def __mul__(self, other):
        # c_k = sum_{i=0}^{k} a_i * b_{k-i}, skipping i > n and k - i > m
        ring = _common_ring(self, other)
        a, b = self.significant(), other.significant()
        n, m = len(a) - 1, len(b) - 1
        zero = rings.zero_of(ring)
        product = []
        for k in range(n + m + 1):
            kth_coeff = zero
            for i in range(max(0, k - m), min(k, n) + 1):
                kth_coeff = kth_coeff + a[i] * b[k - i]
            product.append(kth_coeff)
        return Polynomial(product, ring=ring)

    @_lifting
    def __rmul__(self, other):
        return other * self

    def __pow__(self, exponent):
        if not isinstance(exponent, int):
            return NotImplemented
        if exponent < 0:
            raise ValueError(f"negative exponent {exponent} for a polynomial")
        result = Polynomial.one(self._ring)
        base = self
        while exponent:
            if exponent & 1:
                result = result * base
            exponent >>= 1
            if exponent:
                base = base * base
        return result

    def _long_division(self, divisor: 'Polynomial'):
        """Return (quotient, remainder) with self == quotient * divisor + remainder.

        Raises ZeroDivisionError for a zero divisor and NotInvertibleError when
        the divisor's leading coefficient is needed but is not a unit.
        """
        if divisor.is_zero():
            raise ZeroDivisionError("polynomial division by the zero polynomial")
        ring = _common_ring(self, divisor)
        zero = rings.zero_of(ring)
        d = divisor.significant()
        m = divisor.degree
        remainder = list(self.significant())
        r_deg = self._degree
        quotient = [zero] * (max(r_deg - m, 0) + 1)
        lead_inverse = None
        steps = 0
        _logger.debug("dividing degree %d by degree %d over %r", r_deg, m, ring)
        while r_deg >= m and remainder[r_deg] != zero:
            if lead_inverse is None:
                lead_inverse = rings.invert(d[m], ring)
            shift = r_deg - m
            t = remainder[r_deg] * lead_inverse
            quotient[shift] = t
            for i, c in enumerate(d):
                remainder[shift + i] = remainder[shift + i] - t * c
            remainder[r_deg] = zero
            r_deg = _find_degree(remainder, zero)
            steps += 1
        _logger.debug("division finished after %d steps, remainder degree %d",
                      steps, r_deg)
        return Polynomial(quotient, ring=ring), Polynomial(remainder, ring=ring)

    @_lifting
    def __divmod__(self, other):
        return self._long_division(other)

    @_lifting
    def __rdivmod__(self, other):
        return other._long_division(self)

    @_lifting
    def __floordiv__(self, other):
        return self._long_division(other)[0]

    @_lifting
    def __rfloordiv__(self, other):
        return other._long_division(self)[0]

    __truediv__ = __floordiv__
    __rtruediv__ = __rfloordiv__

    @_lifting
    def __mod__(self, other):
        return self._long_division(other)[1]

    @_lifting
    def __rmod__(self, other):
        return other._long_division(self)[1]

    def inverse(self) -> 'Polynomial':
        """Inverse of a constant polynomial whose coefficient is a unit."""
        if self.is_zero():
            raise ZeroDivisionError("Cannot invert the zero polynomial")
        if self._degree != 0:
            raise NotInvertibleError(f"{self!r} is not a constant")
        return Polynomial([rings.invert(self.coefficient(0), self._ring)],
                          ring=self._ring)

    def evaluate(self, x):
        """Evaluate polynomial at x using Horner's method."""
        result = rings.zero_of(self._ring)
        for coeff in reversed(self.significant()):
            result = result * x + coeff
        return result

    def __call__(self, x):
        return self.evaluate(x)

    @staticmethod
    def random(degree: int, ring=int, constant=None) -> 'Polynomial':
        """Random polynomial of the given degree, with p(0) = constant if given."""
        if degree < 0:
            raise ValueError(f"degree must be >= 0, got {degree}")
        coeffs = [rings.random_element(ring) for _ in range(degree + 1)]
        if constant is not None:
            coeffs[0] = rings.coerce(constant, ring)
        zero = rings.zero_of(ring)
        while degree > 0 and coeffs[degree] == zero:
            coeffs[degree] = rings.random_element(ring)
        return Polynomial(coeffs, ring=ring)

    def __repr__(self):
        return f"Polynomial({list(self.significant())!r})"

    def __str__(self):
        variable = _variable_name(self._ring)
        zero = rings.zero_of(self._ring)
        terms = []
        for i, coeff in enumerate(self.significant()):
            if coeff == zero:
                continue
            text = str(coeff)
            if ' ' in text:
                text = f"({text})"
            if i == 1:
                text = f"{text}*{variable}"
            elif i > 1:
                text = f"{text}*{variable}^{i}"
            terms.append(text)
        if not terms:
            return str(zero)
        out = terms[0]
        for term in terms[1:]:
            if term.startswith('-'):
                out += f" - {term[1:]}"
            else:
                out += f" + {term}"
        return out


@dataclass(frozen=True)
class PolynomialRing:
    """R[x] for a coefficient ring R; lets polynomials be coefficients."""

    coefficient_ring: object

    def zero(self) -> Polynomial:
        return Polynomial.zero(self.coefficient_ring)

    def one(self) -> Polynomial:
        return Polynomial.one(self.coefficient_ring)

    def random(self, degree: int = 1) -> Polynomial:
        return Polynomial.random(degree, self.coefficient_ring)

    def __call__(self, value) -> Polynomial:
        if isinstance(value, Polynomial):
            if value.parent == self.coefficient_ring:
                return Polynomial([value], ring=self.coefficient_ring)
            if value.ring is int and self.coefficient_ring is not int:
                return Polynomial(value.coeffs, ring=self.coefficient_ring)
            return value
        if isinstance(value, (list, tuple)):
            return Polynomial(value, ring=self.coefficient_ring)
        return Polynomial([rings.coerce(value, self.coefficient_ring)],
                          ring=self.coefficient_ring)
