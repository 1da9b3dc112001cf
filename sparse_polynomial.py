from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Callable, Generic, Union

from algebra import T, format_terms, parse_terms, power
from errors import DivisionByZeroPolynomial

logger = logging.getLogger(__name__)

Terms = Union[Mapping[int, Any], Iterable[tuple[int, Any]]]


class SparsePolynomial(Generic[T]):
    """Polynomial in one variable stored as ``{exponent: coefficient}``.

    Only nonzero coefficients are stored. Products, evaluation and
    composition only touch stored terms, which pays off for polynomials
    like ``x^1000 + 1`` with few terms and a large degree.
    """

    terms: dict[int, Any]

    def __init__(self, coefficients: Iterable[T] = ()) -> None:
        self.terms = {}
        for exponent, c in enumerate(coefficients):
            self._set(exponent, c)

    def _set(self, exponent: int, c: Any) -> None:
        if c == 0:
            self.terms.pop(exponent, None)
        else:
            self.terms[exponent] = c

    @staticmethod
    def from_scalar(k: T) -> SparsePolynomial[T]:
        return SparsePolynomial([k])

    @staticmethod
    def from_terms(terms: Terms) -> SparsePolynomial[Any]:
        """Build from ``{exponent: coefficient}`` or ``(exponent, coefficient)`` pairs.

        Coefficients given for the same exponent are summed.
        """
        p: SparsePolynomial[Any] = SparsePolynomial()
        for exponent, c in terms.items() if isinstance(terms, Mapping) else terms:
            if exponent < 0:
                raise ValueError("exponents must be non-negative")
            p._set(exponent, p[exponent] + c)
        return p

    @staticmethod
    def from_string(
        s: str, coefficient: Callable[[str], Any] = int, variable: str = "x"
    ) -> SparsePolynomial[Any]:
        return SparsePolynomial.from_terms(parse_terms(s, coefficient, variable))

    @staticmethod
    def _coerce(p: Any) -> Any:
        if isinstance(p, SparsePolynomial):
            return p
        if isinstance(p, Iterable):
            return NotImplemented
        return SparsePolynomial.from_scalar(p)

    @property
    def degree(self) -> int:
        return max(self.terms, default=-1)

    @property
    def leading_coefficient(self) -> Any:
        return self[self.degree]

    def copy(self) -> SparsePolynomial[T]:
        p: SparsePolynomial[T] = SparsePolynomial()
        p.terms = dict(self.terms)
        return p

    def __getitem__(self, exponent: int) -> Any:
        return self.terms.get(exponent, 0)

    def __iter__(self) -> Iterator[tuple[int, Any]]:
        return iter(sorted(self.terms.items()))

    def __bool__(self) -> bool:
        return bool(self.terms)

    def __repr__(self) -> str:
        return f"SparsePolynomial.from_terms({dict(sorted(self.terms.items()))!r})"

    def __str__(self) -> str:
        return self.to_string()

    def to_string(self, variable: str = "x") -> str:
        return format_terms(sorted(self.terms.items(), reverse=True), variable)

    def __eq__(self, __o: object) -> bool:
        other = self._coerce(__o)
        if other is NotImplemented:
            return NotImplemented
        return self.terms == other.terms

    def __iadd__(self, p: Any) -> SparsePolynomial[T]:
        p = self._coerce(p)
        if p is NotImplemented:
            return NotImplemented
        for exponent, c in list(p.terms.items()):
            self._set(exponent, self[exponent] + c)
        return self

    def __isub__(self, p: Any) -> SparsePolynomial[T]:
        p = self._coerce(p)
        if p is NotImplemented:
            return NotImplemented
        for exponent, c in list(p.terms.items()):
            self._set(exponent, self[exponent] - c)
        return self

    def __imul__(self, p: Any) -> SparsePolynomial[T]:
        p = self._coerce(p)
        if p is NotImplemented:
            return NotImplemented
        product: SparsePolynomial[T] = SparsePolynomial()
        for i, a in self.terms.items():
            for j, b in p.terms.items():
                product._set(i + j, product[i + j] + a * b)
        self.terms = product.terms
        return self

    def __add__(self, p: Any) -> SparsePolynomial[T]:
        other = self._coerce(p)
        if other is NotImplemented:
            return NotImplemented
        result = self.copy()
        result += other
        return result

    __radd__ = __add__

    def __sub__(self, p: Any) -> SparsePolynomial[T]:
        other = self._coerce(p)
        if other is NotImplemented:
            return NotImplemented
        result = self.copy()
        result -= other
        return result

    def __rsub__(self, p: Any) -> SparsePolynomial[T]:
        other = self._coerce(p)
        if other is NotImplemented:
            return NotImplemented
        return other - self

    def __mul__(self, p: Any) -> SparsePolynomial[T]:
        other = self._coerce(p)
        if other is NotImplemented:
            return NotImplemented
        result = self.copy()
        result *= other
        return result

    __rmul__ = __mul__

    def __neg__(self) -> SparsePolynomial[T]:
        p: SparsePolynomial[T] = SparsePolynomial()
        p.terms = {exponent: -c for exponent, c in self.terms.items()}
        return p

    def __pow__(self, exponent: int) -> SparsePolynomial[T]:
        return power(self, exponent, SparsePolynomial.from_scalar(1))

    def evaluate(self, v: Any) -> Any:
        """Value at ``v``; each ``v^e`` is computed by repeated squaring."""
        result = 0
        for exponent, c in self:
            result = result + c * power(v, exponent)
        return result

    def __call__(self, v: Any) -> Any:
        return self.evaluate(v)

    def compose(self, inner: Any) -> SparsePolynomial[Any]:
        """Substitute ``inner`` for x, raising ``inner`` to each stored exponent."""
        q = self._coerce(inner)
        if q is NotImplemented:
            raise TypeError(f"cannot compose SparsePolynomial with {type(inner).__name__}")
        result: SparsePolynomial[Any] = SparsePolynomial()
        for exponent, c in self:
            result += (q**exponent) * c
        return result

    def __and__(self, p: Any) -> SparsePolynomial[Any]:
        if self._coerce(p) is NotImplemented:
            return NotImplemented
        return self.compose(p)

    def __divmod__(self, p: Any) -> tuple[SparsePolynomial[Any], SparsePolynomial[Any]]:
        divisor = self._coerce(p)
        if divisor is NotImplemented:
            return NotImplemented
        if not divisor:
            raise DivisionByZeroPolynomial(f"cannot divide {self} by the zero polynomial")
        quotient: SparsePolynomial[Any] = SparsePolynomial()
        remainder = self.copy()
        lead = divisor.leading_coefficient
        steps = 0
        while remainder.degree >= divisor.degree:
            degree = remainder.degree
            term = SparsePolynomial.from_terms(
                {degree - divisor.degree: remainder.leading_coefficient / lead}
            )
            quotient += term
            remainder -= divisor * term
            remainder.terms.pop(degree, None)
            steps += 1
        logger.debug(
            "divided degree %d by degree %d in %d steps",
            self.degree,
            divisor.degree,
            steps,
        )
        return quotient, remainder

    def __truediv__(self, p: Any) -> SparsePolynomial[Any]:
        if self._coerce(p) is NotImplemented:
            return NotImplemented
        return divmod(self, p)[0]

    def __mod__(self, p: Any) -> SparsePolynomial[Any]:
        if self._coerce(p) is NotImplemented:
            return NotImplemented
        return divmod(self, p)[1]

    def __rtruediv__(self, p: Any) -> SparsePolynomial[Any]:
        other = self._coerce(p)
        if other is NotImplemented:
            return NotImplemented
        return other / self

    def __rmod__(self, p: Any) -> SparsePolynomial[Any]:
        other = self._coerce(p)
        if other is NotImplemented:
            return NotImplemented
        return other % self

    def __rdivmod__(self, p: Any) -> tuple[SparsePolynomial[Any], SparsePolynomial[Any]]:
        other = self._coerce(p)
        if other is NotImplemented:
            return NotImplemented
        return divmod(other, self)

    def gcd(self, p: Any) -> SparsePolynomial[Any]:
        """Monic greatest common divisor, by Euclid's algorithm.

        Raises DivisionByZeroPolynomial when both polynomials are zero.
        """
        b = self._coerce(p)
        if b is NotImplemented:
            raise TypeError(f"cannot take gcd of SparsePolynomial and {type(p).__name__}")
        a = self.copy()
        steps = 0
        while b:
            a, b = b, a % b
            steps += 1
        logger.debug("gcd has degree %d after %d remainder steps", a.degree, steps)
        return a / a.leading_coefficient


if __name__ == "__main__":
    print(SparsePolynomial.from_string("x^100 - 1") / SparsePolynomial.from_string("x - 1"))
