# Solver.py
"""""
Closed-form roots for polynomials of degree 0, 1 and 2.

solve() dispatches on the shape of the (exponent, coefficient) table; every
other shape is reported as "I can't solve that" (SolverError, code 3032).
"""""

from decimal import Decimal

from . import error as E

ZERO = Decimal(0)


class Root:
    """x = (numerator + imaginary*i) / denominator. Keeps the fraction for the report."""
    def __init__(self, numerator, denominator=Decimal(1), imaginary=ZERO):
        self.numerator = numerator
        self.denominator = denominator
        self.imaginary = imaginary

    @property
    def real(self):
        return self.numerator / self.denominator

    @property
    def imag(self):
        return self.imaginary / self.denominator

    @property
    def is_complex(self):
        return self.imaginary != 0

    def __repr__(self):
        return f"Root({self.numerator}, {self.denominator}, {self.imaginary})"


class Solution:
    """Result of solve(): kind is one of 'all', 'none', 'one', 'two', 'complex'."""

    MESSAGES = {
        "all": "Every real number is a solution.",
        "none": "There is no solution.",
        "one": "The solution is:",
        "two": "Discriminant is strictly positive, the two solutions are:",
        "complex": "Discriminant is strictly negative. No real solutions. Let's use imagination:",
    }

    def __init__(self, kind, roots=(), discriminant=None):
        self.kind = kind
        self.roots = list(roots)
        self.discriminant = discriminant

    @property
    def message(self):
        if self.kind == "one" and self.discriminant is not None:
            return "Discriminant is zero, the solution is:"
        return self.MESSAGES[self.kind]

    def __repr__(self):
        return f"Solution({self.kind!r}, {self.roots!r}, discriminant={self.discriminant})"


# -----------------------------
# Closed forms
# -----------------------------

def solve_linear(b, c):
    """b*x + c = 0"""
    return Solution("one", [Root(-c, b)])


def solve_quadratic(a, b, c):
    """a*x^2 + b*x + c = 0 via the discriminant D = b^2 - 4ac."""
    discriminant = b * b - 4 * a * c
    denominator = 2 * a

    if discriminant > 0:
        d = discriminant.sqrt()
        roots = [Root(-b - d, denominator), Root(-b + d, denominator)]
        return Solution("two", roots, discriminant)

    elif discriminant == 0:
        return Solution("one", [Root(-b, denominator)], discriminant)

    # Complex conjugate pair: (-b -/+ i*sqrt(-D)) / 2a
    d = (-discriminant).sqrt()
    roots = [Root(-b, denominator, -d), Root(-b, denominator, d)]
    return Solution("complex", roots, discriminant)


def solve(polynomial):
    """Solve a Polynomial whose terms are sorted by exponent, highest first."""
    exponents = [exponent for exponent, _ in polynomial.terms]
    coefficients = [coefficient for _, coefficient in polynomial.terms]

    if exponents == []:
        # Everything cancelled: 0 = 0
        return Solution("all")

    elif exponents == [0]:
        if coefficients[0] == 0:
            return Solution("all")
        return Solution("none")

    elif exponents == [1]:
        return Solution("one", [Root(ZERO)])

    elif exponents == [2]:
        a, = coefficients
        return solve_quadratic(a, ZERO, ZERO)

    elif exponents == [1, 0]:
        b, c = coefficients
        return solve_linear(b, c)

    elif exponents == [2, 1]:
        a, b = coefficients
        return solve_quadratic(a, b, ZERO)

    elif exponents == [2, 0]:
        a, c = coefficients
        return solve_quadratic(a, ZERO, c)

    elif exponents == [2, 1, 0]:
        a, b, c = coefficients
        return solve_quadratic(a, b, c)

    raise E.SolverError(f"I can't solve that: {polynomial}", code="3032", polynomial=polynomial)
