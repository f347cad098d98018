"""Test utilities: coefficient rings and polynomial builders."""

from polyring import rng
from polyring.integers_mod import integers_mod
from polyring.polynomial import Polynomial, PolynomialRing

Z4 = integers_mod(4)
Z5 = integers_mod(5)
Z7 = integers_mod(7)
ZX = PolynomialRing(int)


def poly_mod(ring, *values):
    """Polynomial over ``ring`` from plain integers, constant term first."""
    return Polynomial([ring(v) for v in values], ring=ring)


def random_polynomials(count, max_degree, ring=int, seed=42):
    rng.set_seed(seed)
    return [Polynomial.random(rng.randint(0, max_degree), ring)
            for _ in range(count)]
