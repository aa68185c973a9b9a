# Polynomial.py
"""""
Polynomial extraction.

Maps a canonical equation 'terms = 0' onto a table of (exponent, coefficient)
pairs. Exponents are unique, sorted highest first; terms that cancel out are
dropped. Anything that isn't a sum of monomials in one variable is rejected
with a PolynomialError ("not a polynomial").
"""""

from decimal import Decimal

from . import error as E
from .Expression import Number, Variable, Neg, Add, Mul, Pow, Equation, to_plain_string


# -----------------------------
# Term classification
# -----------------------------

def exponent_of(node):
    """Return the exponent as int if node is a non-negative integral Number, else None."""
    if not isinstance(node, Number):
        return None
    value = node.value
    if value < 0 or value != value.to_integral_value():
        return None
    return int(value)


def classify_product(coefficient, factors):
    # Only c*x and c*x^n are monomials; x*x is never rewritten into x^2
    if len(factors) != 1:
        return None
    factor = factors[0]

    if isinstance(factor, Variable):
        return (1, coefficient)
    elif isinstance(factor, Pow) and isinstance(factor.base, Variable):
        exponent = exponent_of(factor.exponent)
        if exponent is not None:
            return (exponent, coefficient)
    return None


def classify_term(term):
    """Map one summand onto (exponent, coefficient), or None if it isn't a monomial."""
    if isinstance(term, Number):
        return (0, term.value)

    elif isinstance(term, Variable):
        return (1, Decimal(1))

    elif isinstance(term, Mul):
        return classify_product(term.coefficient, term.factors)

    elif isinstance(term, Pow):
        exponent = exponent_of(term.exponent)
        if exponent is None:
            return None
        if isinstance(term.base, Variable):
            return (exponent, Decimal(1))
        if isinstance(term.base, Neg) and isinstance(term.base.inner, Variable):
            return (exponent, Decimal(-1))

    elif isinstance(term, Neg):
        inner = term.inner
        if isinstance(inner, Variable):
            return (1, Decimal(-1))
        elif isinstance(inner, Mul):
            return classify_product(-inner.coefficient, inner.factors)
        elif isinstance(inner, Pow) and isinstance(inner.base, Variable):
            exponent = exponent_of(inner.exponent)
            if exponent is not None:
                return (exponent, Decimal(-1))

    return None


def collect(pairs):
    """Sum coefficients per exponent, drop cancelled exponents, sort descending."""
    table = {}
    for exponent, coefficient in pairs:
        table[exponent] = table.get(exponent, Decimal(0)) + coefficient

    collected = [(exponent, coefficient) for exponent, coefficient in table.items() if coefficient != 0]
    collected.sort(key=lambda pair: pair[0], reverse=True)
    return collected


# -----------------------------
# Polynomial table
# -----------------------------

class Polynomial:
    """Ordered (exponent, coefficient) table, highest exponent first."""

    def __init__(self, terms):
        self.terms = list(terms)

    @classmethod
    def from_expr(cls, expr):
        """Extract the table from a canonical 'expr = 0' tree.

        Raises:
            PolynomialError: if a term isn't c, x, c*x or c*x^n (optionally negated)
        """
        if not isinstance(expr, Equation) or not isinstance(expr.right, Number):
            raise E.PolynomialError(f"Not a polynomial: {expr}")
        left = expr.left

        if isinstance(left, Add):
            pairs = []
            for term in left.terms:
                pair = classify_term(term)
                if pair is None:
                    raise E.PolynomialError(f"Not a polynomial, unsupported term: {term}")
                pairs.append(pair)
            return cls(collect(pairs))

        # --- Degenerate single-term equations ---
        if isinstance(left, Variable) or (isinstance(left, Neg) and isinstance(left.inner, Variable)):
            return cls([(1, Decimal(0))])

        if isinstance(left, Mul):
            pair = classify_product(left.coefficient, left.factors)
            if pair is None:
                raise E.PolynomialError(f"Not a polynomial, unsupported term: {left}")
            return cls([pair])

        pair = classify_term(left)
        if pair is None:
            raise E.PolynomialError(f"Not a polynomial, unsupported term: {left}")
        return cls(collect([pair]))

    @property
    def degree(self):
        if not self.terms:
            return 0
        return self.terms[0][0]

    def reduced_form(self, symbol="x"):
        """Render as 'a * x^2 + b * x^1 + c * x^0 = 0'."""
        if not self.terms:
            return "0 = 0"

        rendered = ""
        for exponent, coefficient in self.terms:
            monomial = f"{to_plain_string(abs(coefficient))} * {symbol}^{exponent}"
            if not rendered:
                rendered = ("-" if coefficient < 0 else "") + monomial
            elif coefficient < 0:
                rendered += " - " + monomial
            else:
                rendered += " + " + monomial
        return rendered + " = 0"

    def __str__(self):
        pairs = ", ".join(f"({exponent}, {to_plain_string(coefficient)})" for exponent, coefficient in self.terms)
        return "[" + pairs + "]"

    def __repr__(self):
        return f"Polynomial({self})"
