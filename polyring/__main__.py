"""Worked examples of polynomial arithmetic: ``python -m polyring [seed]``."""

import sys

from polyring import rng
from polyring.errors import NotInvertibleError
from polyring.integers_mod import integers_mod
from polyring.polynomial import Polynomial, PolynomialRing


DEMO_MODULUS = 4  # composite on purpose: shows zero divisors
DEMO_SEED = 42


def integer_scenario():
    a = Polynomial([1, 1])
    b = Polynomial([-1, 0, 2])
    print(f"a = {a}")
    print(f"b = {b}")
    print(f"  a + b = {a + b}")
    print(f"  a - b = {a - b}")
    print(f"  a * b = {a * b}")
    q, r = divmod(b, a)
    print(f"  b = ({q}) * a + ({r})")
    return a, b


def modular_scenario(modulus: int):
    Zn = integers_mod(modulus)
    a = Polynomial([Zn(c) for c in (1, 3, 0, 2)])
    b = Polynomial([Zn(c) for c in (3, 1)])
    print(f"over Z/{modulus}Z:")
    print(f"  a = {a!r}")
    print(f"  b = {b!r}")
    print(f"  a + b = {a + b!r} (degree {(a + b).degree})")
    print(f"  a * b = {a * b!r}")
    try:
        q, r = divmod(a, b)
        print(f"  a = {q!r} * b + {r!r}")
    except NotInvertibleError as exc:
        print(f"  a / b failed: {exc}")
    return a, b


def bivariate_scenario():
    ZX = PolynomialRing(int)
    # -1 + x*y and 1 - x*y, as polynomials in y with coefficients in Z[x]
    r = Polynomial([ZX([-1]), ZX([0, 1])])
    s = Polynomial([ZX([1]), ZX([0, -1])])
    print("over Z[x][y]:")
    print(f"  r = {r}")
    print(f"  s = {s}")
    print(f"  r + s = {r + s}")
    print(f"  r * s = {r * s}")
    return r, s


def random_scenario(seed: int):
    rng.set_seed(seed)
    Zp = integers_mod(7)
    a = Polynomial.random(4, Zp)
    b = Polynomial.random(2, Zp)
    q, r = divmod(a, b)
    print(f"random over Z/7Z (seed {seed}):")
    print(f"  a = {a!r}")
    print(f"  b = {b!r}")
    print(f"  q = {q!r}, r = {r!r}")
    print(f"  q * b + r == a: {q * b + r == a}")
    return a, b


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    seed = int(argv[0]) if argv else DEMO_SEED

    print("=" * 50)
    print("SCENARIO 1: integer coefficients")
    print("=" * 50)
    integer_scenario()

    print("=" * 50)
    print(f"SCENARIO 2: coefficients mod {DEMO_MODULUS}")
    print("=" * 50)
    modular_scenario(DEMO_MODULUS)

    print("=" * 50)
    print("SCENARIO 3: nested (bivariate) polynomials")
    print("=" * 50)
    bivariate_scenario()

    print("=" * 50)
    print("SCENARIO 4: random division over a prime field")
    print("=" * 50)
    random_scenario(seed)


if __name__ == "__main__":
    main()
