from decimal import Decimal

import pytest

from computor import error as E
from computor.Expression import Number, Variable, Neg, Add, Mul, Pow, Equation
from computor.Polynomial import Polynomial, classify_term, exponent_of

x = Variable("x")


@pytest.mark.parametrize("term, expected", [
    (Number(3), (0, 3)),
    (x, (1, 1)),
    (Neg(x), (1, -1)),
    (Mul(3, [x]), (1, 3)),
    (Mul(3, [Pow(x, Number(2))]), (2, 3)),
    (Neg(Mul(2, [x])), (1, -2)),
    (Neg(Mul(2, [Pow(x, Number(2))])), (2, -2)),
    (Pow(x, Number(2)), (2, 1)),
    (Pow(Neg(x), Number(2)), (2, -1)),
    (Neg(Pow(x, Number(2))), (2, -1)),
])
def test_classify_term(term, expected):
    assert classify_term(term) == expected


@pytest.mark.parametrize("term", [
    Mul(1, [x, x]),
    Pow(x, x),
    Pow(x, Number(-1)),
    Pow(x, Number(Decimal("0.5"))),
    Pow(Add([x, Number(1)]), Number(2)),
    Neg(Add([x, Number(1)])),
])
def test_classify_term_rejects_non_monomials(term):
    assert classify_term(term) is None


def test_exponent_of():
    assert exponent_of(Number(3)) == 3
    assert exponent_of(Number(Decimal("2.0"))) == 2
    assert exponent_of(Number(Decimal("2.5"))) is None
    assert exponent_of(Number(-1)) is None
    assert exponent_of(x) is None


# -----------------------------
# from_expr()
# -----------------------------

def test_from_expr_groups_and_sorts():
    tree = Equation(Add([x, Pow(x, Number(2)), Mul(2, [x]), Number(-4)]), Number(0))
    assert Polynomial.from_expr(tree).terms == [(2, 1), (1, 3), (0, -4)]


def test_from_expr_drops_cancelled_exponents():
    tree = Equation(Add([Pow(x, Number(2)), x, Neg(Pow(x, Number(2))), Number(-5)]), Number(0))
    assert Polynomial.from_expr(tree).terms == [(1, 1), (0, -5)]


@pytest.mark.parametrize("left, expected", [
    (x, [(1, 0)]),
    (Neg(x), [(1, 0)]),
    (Mul(3, [x]), [(1, 3)]),
    (Mul(3, [Pow(x, Number(2))]), [(2, 3)]),
    (Pow(x, Number(2)), [(2, 1)]),
    (Number(5), [(0, 5)]),
    (Number(0), []),
])
def test_from_expr_single_term(left, expected):
    assert Polynomial.from_expr(Equation(left, Number(0))).terms == expected


@pytest.mark.parametrize("tree", [
    Equation(Mul(1, [x, x]), Number(0)),
    Equation(Add([Mul(1, [x, x]), Number(1)]), Number(0)),
    Equation(Pow(x, x), Number(0)),
    Equation(x, x),
    Add([x, Number(1)]),
])
def test_from_expr_not_a_polynomial(tree):
    with pytest.raises(E.PolynomialError) as excinfo:
        Polynomial.from_expr(tree)
    assert excinfo.value.code == "3031"


# -----------------------------
# Rendering
# -----------------------------

def test_degree():
    assert Polynomial([(2, Decimal(1)), (0, Decimal(-4))]).degree == 2
    assert Polynomial([]).degree == 0


def test_reduced_form():
    polynomial = Polynomial([(2, Decimal(1)), (1, Decimal(-3)), (0, Decimal("2.5"))])
    assert polynomial.reduced_form() == "1 * x^2 - 3 * x^1 + 2.5 * x^0 = 0"
    assert Polynomial([(1, Decimal(-2))]).reduced_form("y") == "-2 * y^1 = 0"
    assert Polynomial([]).reduced_form() == "0 = 0"


def test_str():
    assert str(Polynomial([(2, Decimal(1)), (0, Decimal(-4))])) == "[(2, 1), (0, -4)]"
