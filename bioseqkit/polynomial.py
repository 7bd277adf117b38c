"""
Univariate polynomials with real coefficients.

Coefficients are stored lowest power first, so ``Polynomial([1.0, 2.0, 3.0])`` is ``1 + 2x + 3x^2``. Trailing zero
coefficients are trimmed at construction, which keeps the stored degree minimal. The zero polynomial keeps a single
``0.0`` coefficient and has degree 0.
"""
from itertools import zip_longest
from typing import Iterable, Tuple

from bioseqkit.exc import EmptyPolynomialError


class Polynomial:
    """An immutable polynomial in one variable"""

    __slots__ = ["_coefficients"]

    def __init__(self, coefficients: Iterable[float]):
        coefficients = [float(c) for c in coefficients]
        if not coefficients:
            raise EmptyPolynomialError("Polynomial must have at least one coefficient")
        while len(coefficients) > 1 and coefficients[-1] == 0.0:
            coefficients.pop()
        self._coefficients = tuple(coefficients)

    @property
    def coefficients(self) -> Tuple[float, ...]:
        """Coefficients ordered from x^0 to x^n"""
        return self._coefficients

    def degree(self) -> int:
        return len(self._coefficients) - 1

    def __call__(self, x: float) -> float:
        """Evaluates this polynomial at ``x``"""
        return sum(c * x**i for i, c in enumerate(self._coefficients))

    def __add__(self, other: "Polynomial") -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        return Polynomial(a + b for a, b in zip_longest(self._coefficients, other._coefficients, fillvalue=0.0))

    def __sub__(self, other: "Polynomial") -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        return Polynomial(a - b for a, b in zip_longest(self._coefficients, other._coefficients, fillvalue=0.0))

    def __mul__(self, other: "Polynomial") -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        product = [0.0] * (self.degree() + other.degree() + 1)
        for i, a in enumerate(self._coefficients):
            for j, b in enumerate(other._coefficients):
                product[i + j] += a * b
        return Polynomial(product)

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return False
        return self._coefficients == other._coefficients

    def __hash__(self):
        return hash(self._coefficients)

    def __str__(self):
        terms = ["{}*x^{}".format(self._coefficients[i], i) for i in range(self.degree(), -1, -1)]
        return "P(x) = " + " + ".join(terms)

    def __repr__(self):
        return "Polynomial({})".format(list(self._coefficients))

    def to_dict(self):
        return dict(coefficients=list(self._coefficients))
