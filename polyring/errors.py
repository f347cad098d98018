"""Exceptions raised by polynomial and coefficient arithmetic."""


class NotInvertibleError(ArithmeticError):
    """A coefficient (or polynomial) has no multiplicative inverse in its ring.

    Raised by Euclidean division when the divisor's leading coefficient is not
    a unit. Unlike dividing by the zero polynomial, this is recoverable: the
    caller may retry over a larger ring or a field.
    """
