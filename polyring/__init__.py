"""Dense univariate polynomials over generic coefficient rings."""

from polyring.errors import NotInvertibleError
from polyring.ring import Ring, zero_of, one_of, ring_of, invert
from polyring.integers_mod import IntegerModN, integers_mod
from polyring.polynomial import Polynomial, PolynomialRing
from polyring import rng

__version__ = "0.1.0"
