from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Callable, Generic, Union

import numpy
from numpy.typing import NDArray

from algebra import T, format_terms, parse_terms, power
from errors import DivisionByZeroPolynomial

logger = logging.getLogger(__name__)

Terms = Union[Mapping[int, Any], Iterable[tuple[int, Any]]]


def _as_array(values: Iterable[Any]) -> NDArray[numpy.object_]:
    values = list(values)
    array = numpy.empty((len(values),), dtype=object)
    # element-wise so sequence-like coefficients stay scalars
    for i, value in enumerate(values):
        array[i] = value
    return array


def _trim(coefficients: NDArray[numpy.object_]) -> NDArray[numpy.object_]:
    end = coefficients.shape[0]
    while end and coefficients[end - 1] == 0:
        end -= 1
    return coefficients[:end].copy()


class DensePolynomial(Generic[T]):
    """Polynomial in one variable stored as a coefficient array.

    ``coefficients[i]`` is the coefficient of ``x^i``. The array never ends
    in a zero, so the zero polynomial is the empty array and has degree -1.
    """

    coefficients: NDArray[numpy.object_]

    def __init__(self, coefficients: Iterable[T] = ()) -> None:
        self.coefficients = _trim(_as_array(coefficients))

    @staticmethod
    def from_scalar(k: T) -> DensePolynomial[T]:
        return DensePolynomial([k])

    @staticmethod
    def from_terms(terms: Terms) -> DensePolynomial[Any]:
        """Build from ``{exponent: coefficient}`` or ``(exponent, coefficient)`` pairs.

        Coefficients given for the same exponent are summed.
        """
        pairs = list(terms.items() if isinstance(terms, Mapping) else terms)
        if any(exponent < 0 for exponent, _ in pairs):
            raise ValueError("exponents must be non-negative")
        order = max((exponent for exponent, _ in pairs), default=-1)
        coefficients = numpy.zeros((order + 1,), dtype=object)
        for exponent, c in pairs:
            coefficients[exponent] += c
        return DensePolynomial(coefficients)

    @staticmethod
    def from_string(
        s: str, coefficient: Callable[[str], Any] = int, variable: str = "x"
    ) -> DensePolynomial[Any]:
        return DensePolynomial.from_terms(parse_terms(s, coefficient, variable))

    @staticmethod
    def _coerce(p: Any) -> Any:
        if isinstance(p, DensePolynomial):
            return p
        # other polynomial representations and containers are not scalars
        if isinstance(p, Iterable):
            return NotImplemented
        return DensePolynomial.from_scalar(p)

    @property
    def degree(self) -> int:
        return self.coefficients.shape[0] - 1

    @property
    def leading_coefficient(self) -> Any:
        return self[self.degree]

    def copy(self) -> DensePolynomial[T]:
        return DensePolynomial(self.coefficients)

    def __getitem__(self, exponent: int) -> Any:
        if 0 <= exponent < self.coefficients.shape[0]:
            return self.coefficients[exponent]
        return 0

    def __iter__(self) -> Iterator[Any]:
        return iter(self.coefficients.tolist())

    def __bool__(self) -> bool:
        return self.coefficients.shape[0] > 0

    def __repr__(self) -> str:
        return f"DensePolynomial({self.coefficients.tolist()!r})"

    def __str__(self) -> str:
        return self.to_string()

    def to_string(self, variable: str = "x") -> str:
        c = self.coefficients
        return format_terms(((i, c[i]) for i in range(c.shape[0] - 1, -1, -1)), variable)

    def __eq__(self, __o: object) -> bool:
        other = self._coerce(__o)
        if other is NotImplemented:
            return NotImplemented
        return bool(numpy.array_equal(self.coefficients, other.coefficients))

    def __iadd__(self, p: Any) -> DensePolynomial[T]:
        p = self._coerce(p)
        if p is NotImplemented:
            return NotImplemented
        coefficients = numpy.zeros(
            (max(self.coefficients.shape + p.coefficients.shape),), dtype=object
        )
        coefficients[: self.coefficients.shape[0]] += self.coefficients
        coefficients[: p.coefficients.shape[0]] += p.coefficients
        self.coefficients = _trim(coefficients)
        return self

    def __isub__(self, p: Any) -> DensePolynomial[T]:
        p = self._coerce(p)
        if p is NotImplemented:
            return NotImplemented
        coefficients = numpy.zeros(
            (max(self.coefficients.shape + p.coefficients.shape),), dtype=object
        )
        coefficients[: self.coefficients.shape[0]] += self.coefficients
        coefficients[: p.coefficients.shape[0]] -= p.coefficients
        self.coefficients = _trim(coefficients)
        return self

    def __imul__(self, p: Any) -> DensePolynomial[T]:
        p = self._coerce(p)
        if p is NotImplemented:
            return NotImplemented
        a, b = self.coefficients, p.coefficients
        coefficients = numpy.zeros((a.shape[0] + b.shape[0],), dtype=object)
        for i in range(a.shape[0]):
            for j in range(b.shape[0]):
                coefficients[i + j] += a[i] * b[j]
        self.coefficients = _trim(coefficients)
        return self

    def __add__(self, p: Any) -> DensePolynomial[T]:
        other = self._coerce(p)
        if other is NotImplemented:
            return NotImplemented
        result = self.copy()
        result += other
        return result

    __radd__ = __add__

    def __sub__(self, p: Any) -> DensePolynomial[T]:
        other = self._coerce(p)
        if other is NotImplemented:
            return NotImplemented
        result = self.copy()
        result -= other
        return result

    def __rsub__(self, p: Any) -> DensePolynomial[T]:
        other = self._coerce(p)
        if other is NotImplemented:
            return NotImplemented
        return other - self

    def __mul__(self, p: Any) -> DensePolynomial[T]:
        other = self._coerce(p)
        if other is NotImplemented:
            return NotImplemented
        result = self.copy()
        result *= other
        return result

    __rmul__ = __mul__

    def __neg__(self) -> DensePolynomial[T]:
        return DensePolynomial(-c for c in self.coefficients)

    def __pow__(self, exponent: int) -> DensePolynomial[T]:
        return power(self, exponent, DensePolynomial.from_scalar(1))

    def evaluate(self, v: Any) -> Any:
        """Value at ``v``, accumulating ``c_i * v^i`` with a running power of ``v``."""
        result, x = 0, 1
        for c in self.coefficients:
            result = result + c * x
            x = x * v
        return result

    def __call__(self, v: Any) -> Any:
        return self.evaluate(v)

    def compose(self, inner: Any) -> DensePolynomial[Any]:
        """Substitute ``inner`` for x: ``sum(c_i * inner^i)``."""
        q = self._coerce(inner)
        if q is NotImplemented:
            raise TypeError(f"cannot compose DensePolynomial with {type(inner).__name__}")
        result: DensePolynomial[Any] = DensePolynomial()
        x: DensePolynomial[Any] = DensePolynomial.from_scalar(1)
        for c in self.coefficients:
            result += x * c
            x *= q
        return result

    def __and__(self, p: Any) -> DensePolynomial[Any]:
        if self._coerce(p) is NotImplemented:
            return NotImplemented
        return self.compose(p)

    def __divmod__(self, p: Any) -> tuple[DensePolynomial[Any], DensePolynomial[Any]]:
        divisor = self._coerce(p)
        if divisor is NotImplemented:
            return NotImplemented
        if not divisor:
            raise DivisionByZeroPolynomial(f"cannot divide {self} by the zero polynomial")
        quotient: DensePolynomial[Any] = DensePolynomial()
        remainder = self.copy()
        lead = divisor.leading_coefficient
        steps = 0
        while remainder.degree >= divisor.degree:
            degree = remainder.degree
            term = DensePolynomial.from_terms(
                {degree - divisor.degree: remainder.leading_coefficient / lead}
            )
            quotient += term
            remainder -= divisor * term
            # the leading terms cancel; drop any rounding residue of inexact fields
            remainder.coefficients = _trim(remainder.coefficients[:degree])
            steps += 1
        logger.debug(
            "divided degree %d by degree %d in %d steps",
            self.degree,
            divisor.degree,
            steps,
        )
        return quotient, remainder

    def __truediv__(self, p: Any) -> DensePolynomial[Any]:
        if self._coerce(p) is NotImplemented:
            return NotImplemented
        return divmod(self, p)[0]

    def __mod__(self, p: Any) -> DensePolynomial[Any]:
        if self._coerce(p) is NotImplemented:
            return NotImplemented
        return divmod(self, p)[1]

    def __rtruediv__(self, p: Any) -> DensePolynomial[Any]:
        other = self._coerce(p)
        if other is NotImplemented:
            return NotImplemented
        return other / self

    def __rmod__(self, p: Any) -> DensePolynomial[Any]:
        other = self._coerce(p)
        if other is NotImplemented:
            return NotImplemented
        return other % self

    def __rdivmod__(self, p: Any) -> tuple[DensePolynomial[Any], DensePolynomial[Any]]:
        other = self._coerce(p)
        if other is NotImplemented:
            return NotImplemented
        return divmod(other, self)

    def gcd(self, p: Any) -> DensePolynomial[Any]:
        """Monic greatest common divisor, by Euclid's algorithm.

        Raises DivisionByZeroPolynomial when both polynomials are zero.
        """
        b = self._coerce(p)
        if b is NotImplemented:
            raise TypeError(f"cannot take gcd of DensePolynomial and {type(p).__name__}")
        a = self.copy()
        steps = 0
        while b:
            a, b = b, a % b
            steps += 1
        logger.debug("gcd has degree %d after %d remainder steps", a.degree, steps)
        return a / a.leading_coefficient


if __name__ == "__main__":
    print(DensePolynomial.from_string("x^2 - 1") / DensePolynomial.from_string("x - 1"))
