# Expression.py
"""""
Expression tree for the polynomial solver.

Every node type implements the rewrite passes of the pipeline:
- flatten():  merge nested products into one coefficient and one flat factor list
- simplify(): fold constants, splice nested sums, collapse single-child containers
- __str__:    render the tree back into a readable equation

Nodes are never modified after construction; every pass returns a new tree.
"""""

from decimal import Decimal

ZERO = Decimal(0)
ONE = Decimal(1)


def to_plain_string(value):
    """Render a Decimal without exponent notation or trailing zeros ('1E+2' -> '100')."""
    if value == 0:
        # Also catches Decimal('-0')
        return "0"
    return format(value.normalize(), "f")


# -----------------------------
# AST node types
# -----------------------------

class Expr:
    """Base class for all tree nodes. Two nodes are equal when their structure is equal."""

    def flatten(self):
        return self

    def simplify(self):
        return self

    def _key(self):
        raise NotImplementedError

    def __eq__(self, other):
        return type(self) is type(other) and self._key() == other._key()

    __hash__ = None


class Number(Expr):
    """Numeric literal backed by Decimal."""
    def __init__(self, value):
        # Normalize through str so floats don't leak binary artifacts into Decimal
        if not isinstance(value, Decimal):
            value = str(value)
        self.value = Decimal(value)

    def _key(self):
        return (self.value,)

    def __str__(self):
        return to_plain_string(self.value)

    def __repr__(self):
        return f"Number({to_plain_string(self.value)})"


class Variable(Expr):
    """The single free variable of an equation (one-letter symbol)."""
    def __init__(self, name):
        self.name = name

    def _key(self):
        return (self.name,)

    def __str__(self):
        return self.name

    def __repr__(self):
        return f"Variable('{self.name}')"


class Neg(Expr):
    """Unary negation."""
    def __init__(self, inner):
        self.inner = inner

    def simplify(self):
        inner = self.inner

        if isinstance(inner, Number):
            return Number(-inner.value)
        elif isinstance(inner, Variable):
            return self
        elif isinstance(inner, Neg):
            return inner.inner.simplify()
        elif isinstance(inner, Add):
            # -(a + b) = -a + -b
            return Add([Neg(term) for term in inner.terms]).simplify()
        elif isinstance(inner, Equation):
            raise AssertionError("Negation of an equation reached simplify()")

        simplified = inner.simplify()
        if isinstance(simplified, (Number, Neg, Add)):
            # The operand collapsed into a shape that has its own negation rule
            return Neg(simplified).simplify()
        return Neg(simplified)

    def _key(self):
        return (self.inner,)

    def __str__(self):
        if isinstance(self.inner, (Number, Variable, Mul, Pow)):
            return "-" + str(self.inner)
        return "-(" + str(self.inner) + ")"

    def __repr__(self):
        return f"Neg({self.inner!r})"


class Add(Expr):
    """Sum of one or more terms."""
    def __init__(self, terms):
        self.terms = list(terms)

    def simplify(self):
        # --- 1. Simplify terms and splice nested sums into this one ---
        spliced = []
        for term in self.terms:
            term = term.simplify()
            if isinstance(term, Add):
                spliced.extend(term.terms)
            else:
                spliced.append(term)

        # --- 2. Sum up the numeric leaves, keep the order of everything else ---
        total = ZERO
        others = []
        for term in spliced:
            if isinstance(term, Number):
                total += term.value
            else:
                others.append(term)

        if total != 0:
            others.append(Number(total))

        # --- 3. Collapse degenerate sums ---
        if not others:
            return Number(0)
        elif len(others) == 1:
            return others[0]
        return Add(others)

    def _key(self):
        return tuple(self.terms)

    def __str__(self):
        rendered = str(self.terms[0])
        for term in self.terms[1:]:
            term_string = str(term)
            if term_string.startswith("-"):
                rendered += " - " + term_string[1:]
            else:
                rendered += " + " + term_string
        return rendered

    def __repr__(self):
        return f"Add({self.terms!r})"


class Mul(Expr):
    """Product: one scalar coefficient times a list of non-numeric factors."""
    def __init__(self, coefficient, factors):
        if not isinstance(coefficient, Decimal):
            coefficient = Decimal(str(coefficient))
        self.coefficient = coefficient
        self.factors = list(factors)

    def flatten(self):
        """Pull numbers into the coefficient and splice nested products into one factor list."""
        coefficient = self.coefficient
        factors = []

        for factor in self.factors:
            factor = factor.flatten()

            if isinstance(factor, Number):
                coefficient *= factor.value
            elif isinstance(factor, Mul):
                # 2*(3*x*y) -> 6*x*y
                coefficient *= factor.coefficient
                factors.extend(factor.factors)
            else:
                factors.append(factor)

        if not factors:
            return Number(coefficient)
        return Mul(coefficient, factors)

    def simplify(self):
        """Fold numeric factors into the coefficient; variables first, then the rest.

        A coefficient of exactly 1 keeps every remaining factor: one factor is
        returned bare, two or more stay wrapped in Mul(1, ...).
        """
        if self.coefficient == 0:
            return Number(0)

        coefficient = self.coefficient
        variables = []
        others = []

        for factor in self.factors:
            factor = factor.simplify()

            if isinstance(factor, Number):
                coefficient *= factor.value
            elif isinstance(factor, Variable):
                variables.append(factor)
            else:
                others.append(factor)

        if coefficient == 0:
            return Number(0)

        factors = variables + others
        if not factors:
            return Number(coefficient)
        elif coefficient != 1 or len(factors) > 1:
            return Mul(coefficient, factors)
        return factors[0]

    def _key(self):
        return (self.coefficient, tuple(self.factors))

    def __str__(self):
        rendered = ""
        if self.coefficient != 1:
            rendered = to_plain_string(self.coefficient) + "*"

        parts = []
        for factor in self.factors:
            if isinstance(factor, Add):
                parts.append("(" + str(factor) + ")")
            else:
                parts.append(str(factor))
        return rendered + "*".join(parts)

    def __repr__(self):
        return f"Mul({to_plain_string(self.coefficient)}, {self.factors!r})"


class Pow(Expr):
    """base ^ exponent. Neither pass distributes across this node."""
    def __init__(self, base, exponent):
        self.base = base
        self.exponent = exponent

    def flatten(self):
        return Pow(self.base.flatten(), self.exponent.flatten())

    def simplify(self):
        base = self.base.simplify()
        exponent = self.exponent.simplify()

        if isinstance(base, Number) and isinstance(exponent, Number):
            if base.value == 0 and exponent.value == 0:
                # 0^0 = 1; Decimal itself rejects it
                return Number(1)
            # No domain check: Decimal raises for e.g. (-8)^0.5 or 0^-1
            return Number(base.value ** exponent.value)
        elif isinstance(exponent, Number) and exponent.value == 1:
            return base
        return Pow(base, exponent)

    def _key(self):
        return (self.base, self.exponent)

    def __str__(self):
        base = str(self.base)
        exponent = str(self.exponent)

        negative_number = isinstance(self.base, Number) and self.base.value < 0
        if isinstance(self.base, (Add, Mul, Neg, Pow)) or negative_number:
            base = "(" + base + ")"
        if isinstance(self.exponent, (Add, Mul)):
            exponent = "(" + exponent + ")"
        return base + "^" + exponent

    def __repr__(self):
        return f"Pow({self.base!r}, {self.exponent!r})"


class Equation(Expr):
    """Top level 'left = right'. Only ever the root of a tree."""
    def __init__(self, left, right):
        self.left = left
        self.right = right

    def flatten(self):
        return Equation(self.left.flatten(), self.right.flatten())

    def simplify(self):
        # Sides are simplified independently
        return Equation(self.left.simplify(), self.right.simplify())

    def move_to_left(self):
        return move_to_left(self)

    def _key(self):
        return (self.left, self.right)

    def __str__(self):
        return str(self.left) + " = " + str(self.right)

    def __repr__(self):
        return f"Equation({self.left!r}, {self.right!r})"


# -----------------------------
# Canonicalization
# -----------------------------

def move_to_left(expr):
    """Rewrite 'L = R' into 'L + -(R) = 0'. Needs another flatten/simplify round afterwards."""
    if not isinstance(expr, Equation):
        raise AssertionError(f"move_to_left() called on a non-equation: {expr!r}")
    return Equation(Add([expr.left, Neg(expr.right)]), Number(0))
