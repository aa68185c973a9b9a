from decimal import Decimal

import pytest

from computor import error as E
from computor.Parser import parse, translator
from computor.Expression import Number, Variable, Neg, Add, Mul, Pow, Equation

x = Variable("x")


# -----------------------------
# Tokenizer
# -----------------------------

def test_translator_columns_and_symbol():
    tokens, symbol = translator("x^2 = 4")
    assert symbol == "x"
    assert tokens == [("x", 1), ("^", 2), (Decimal(2), 3), ("=", 5), (Decimal(4), 7)]


def test_translator_inserts_implicit_multiplication():
    tokens, _ = translator("2x(x)")
    assert [token for token, _ in tokens] == [Decimal(2), "*", "x", "*", "(", "x", ")"]


def test_translator_constant_equation_has_no_symbol():
    _, symbol = translator("2 = 2")
    assert symbol is None


def test_translator_decimal_literals():
    tokens, _ = translator("9.3 = .5")
    assert tokens[0][0] == Decimal("9.3")
    assert tokens[2][0] == Decimal("0.5")


# -----------------------------
# Trees
# -----------------------------

@pytest.mark.parametrize("problem, expected", [
    ("x^2 = 4", Equation(Pow(x, Number(2)), Number(4))),
    ("2x + 4 = 0", Equation(Add([Mul(1, [Number(2), x]), Number(4)]), Number(0))),
    ("x - 3 = 0", Equation(Add([x, Neg(Number(3))]), Number(0))),
    ("-x^2 = 1", Equation(Neg(Pow(x, Number(2))), Number(1))),
    ("-2 = x", Equation(Number(-2), x)),
    ("x/2 = 1", Equation(Mul(Decimal("0.5"), [x]), Number(1))),
    ("(x + 1)/(1 + 1) = 0", Equation(Mul(Decimal("0.5"), [Add([x, Number(1)])]), Number(0))),
    ("2*(3*x) = 1", Equation(Mul(1, [Number(2), Number(3), x]), Number(1))),
    ("x^2^3 = 0", Equation(Pow(x, Pow(Number(2), Number(3))), Number(0))),
    ("x^-1 = 0", Equation(Pow(x, Number(-1)), Number(0))),
    ("2 * x * x = 0", Equation(Mul(1, [Number(2), x, x]), Number(0))),
])
def test_parse_trees(problem, expected):
    tree, symbol = parse(problem)
    assert tree == expected
    assert symbol == "x"


def test_parse_keeps_the_variable_name():
    tree, symbol = parse("y + 1 = 0")
    assert symbol == "y"
    assert tree == Equation(Add([Variable("y"), Number(1)]), Number(0))


def test_multiplication_binds_tighter_than_addition():
    tree, _ = parse("1 + 2 * x = 0")
    assert tree.left == Add([Number(1), Mul(1, [Number(2), x])])


# -----------------------------
# Errors
# -----------------------------

@pytest.mark.parametrize("problem, code, column", [
    ("x + y = 1", "3002", 5),
    ("x^2 + 1", "3012", 8),
    ("= x", "3022", 1),
    ("x =", "3022", 4),
    ("x = 2 )", "3011", 7),
    ("x = 2 $", "3011", 7),
    ("x = x = 1", "3011", 7),
    ("x = 1.2.3", "3008", 8),
    ("x / x = 1", "3006", 3),
    ("x / 0 = 1", "3003", 3),
    ("(x + 1 = 2", "3009", 8),
    ("x + = 1", "3027", 5),
])
def test_parse_errors(problem, code, column):
    with pytest.raises(E.ParseError) as excinfo:
        parse(problem)
    assert excinfo.value.code == code
    assert excinfo.value.column == column


def test_parse_error_is_a_math_error():
    with pytest.raises(E.MathError):
        parse("x + y = 1")
