"""Exception hierarchy for polynomial operations."""


class PolynomialError(Exception):
    """Base class for errors raised by the polynomial types."""

    pass


class DivisionByZeroPolynomial(PolynomialError, ZeroDivisionError):
    """Division or reduction by the zero polynomial.

    Raised by ``/``, ``%``, ``divmod`` and ``gcd`` when the divisor is the
    zero polynomial, including the final normalization of ``gcd`` when both
    operands are zero.
    """

    pass
