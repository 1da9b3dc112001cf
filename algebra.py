"""Representation-independent helpers shared by the polynomial types.

Important functions:
 - power: exponentiation by repeated squaring, for scalars and polynomials
 - format_terms: the canonical text form, e.g. ``3*x^2+3*x+2``
 - parse_terms: the inverse of format_terms
"""

from __future__ import annotations

import re
from collections import defaultdict
from typing import Any, Callable, Iterable, Protocol, TypeVar


class Field(Protocol):
    """What a coefficient type has to support.

    The integers ``0`` and ``1`` act as the additive and multiplicative
    identities, so ``c == 0``, ``0 + c`` and ``1 * c`` must work. Ordering
    is only needed for rendering.
    """

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...

    def __truediv__(self, other: Any) -> Any: ...

    def __neg__(self) -> Any: ...

    def __lt__(self, other: Any) -> bool: ...


T = TypeVar("T", bound=Field)

# a sign right after a digit and an exponent marker belongs to a float literal
_TERM = re.compile(r"[+-]?(?:(?<=\d)[eE][+-]|[^+-])+")


def power(base: Any, exponent: int, one: Any = 1) -> Any:
    """Raise ``base`` to a non-negative integer power by repeated squaring.

    ``one`` is returned for exponent 0 and seeds the product otherwise, so
    callers raising polynomials pass their constant polynomial ``1``.
    """
    if exponent < 0:
        raise ValueError(f"Exponent must be non-negative, got {exponent}")
    result = one
    while exponent:
        if exponent & 1:
            result = result * base
        exponent >>= 1
        if exponent:
            base = base * base
    return result


def format_terms(terms: Iterable[tuple[int, Any]], variable: str = "x") -> str:
    """Render ``(exponent, coefficient)`` pairs given in descending order."""
    parts: list[str] = []
    for exponent, c in terms:
        if c == 0:
            continue
        if parts and c > 0:
            parts.append("+")
        if exponent == 0:
            parts.append(str(c))
            continue
        if c == -1:
            parts.append("-")
        elif c != 1:
            parts.append(f"{c}*")
        parts.append(variable if exponent == 1 else f"{variable}^{exponent}")
    return "".join(parts) if parts else str(0)


def parse_terms(
    s: str, coefficient: Callable[[str], Any] = int, variable: str = "x"
) -> dict[int, Any]:
    """Parse the canonical text form into ``{exponent: coefficient}``.

    Coefficient text such as ``3``, ``1/2`` or ``1e-05`` goes through
    ``coefficient``; like terms are summed. Raises ValueError on malformed
    input.
    """
    text = "".join(s.split())
    if text == "":
        raise ValueError("cannot parse a polynomial from an empty string")
    coeff: defaultdict[int, Any] = defaultdict(lambda: 0)
    position = 0
    for match in _TERM.finditer(text):
        if match.start() != position:
            raise ValueError(f"unexpected sign at position {position} in {s!r}")
        position = match.end()
        term = match.group()
        sign, body = (term[0], term[1:]) if term[0] in "+-" else ("+", term)
        head, found, tail = body.partition(variable)
        if found:
            if tail and not tail.startswith("^"):
                raise ValueError(f"malformed term {term!r} in {s!r}")
            exponent = int(tail[1:]) if tail else 1
            head = head[:-1] if head.endswith("*") else head
            value = coefficient(head) if head else coefficient("1")
        else:
            exponent, value = 0, coefficient(body)
        coeff[exponent] += -value if sign == "-" else value
    if position != len(text):
        raise ValueError(f"trailing sign in {s!r}")
    return dict(coeff)
