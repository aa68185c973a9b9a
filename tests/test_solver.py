from decimal import Decimal

import pytest

from computor import error as E
from computor.Polynomial import Polynomial
from computor.Solver import solve, solve_quadratic, Root


def poly(*pairs):
    return Polynomial([(exponent, Decimal(str(coefficient))) for exponent, coefficient in pairs])


def reals(solution):
    return [root.real for root in solution.roots]


def test_two_real_roots_smaller_first():
    solution = solve(poly((2, 1), (0, -4)))
    assert solution.kind == "two"
    assert solution.discriminant == 16
    assert reals(solution) == [-2, 2]


def test_double_root():
    solution = solve(poly((2, 1), (1, 2), (0, 1)))
    assert solution.kind == "one"
    assert solution.discriminant == 0
    assert reals(solution) == [-1]
    assert solution.message == "Discriminant is zero, the solution is:"


def test_complex_pair():
    solution = solve(poly((2, 1), (0, 1)))
    assert solution.kind == "complex"
    assert solution.discriminant == -4
    assert [root.imag for root in solution.roots] == [-1, 1]
    assert reals(solution) == [0, 0]
    assert "No real solutions" in solution.message


def test_complex_pair_with_real_part():
    solution = solve(poly((2, 1), (1, 1), (0, 1)))
    half_root_three = Decimal(3).sqrt() / 2
    assert reals(solution) == [Decimal("-0.5"), Decimal("-0.5")]
    assert abs(solution.roots[1].imag - half_root_three) < Decimal("1e-40")
    assert solution.roots[0].imag == -solution.roots[1].imag


def test_linear():
    solution = solve(poly((1, 2), (0, 4)))
    assert solution.kind == "one"
    assert solution.discriminant is None
    (root,) = solution.roots
    assert (root.numerator, root.denominator) == (-4, 2)
    assert root.real == -2


@pytest.mark.parametrize("pairs, expected", [
    (((1, 0),), [0]),
    (((1, 5),), [0]),
    (((2, 3),), [0]),
    (((2, 1), (1, -1)), [0, 1]),
])
def test_degenerate_shapes(pairs, expected):
    assert reals(solve(poly(*pairs))) == expected


def test_every_real_is_a_solution():
    assert solve(poly()).kind == "all"


def test_no_solution():
    solution = solve(poly((0, 5)))
    assert solution.kind == "none"
    assert solution.roots == []


def test_unsupported_degree():
    polynomial = poly((3, 1), (0, -8))
    with pytest.raises(E.SolverError) as excinfo:
        solve(polynomial)
    assert excinfo.value.code == "3032"
    assert excinfo.value.polynomial is polynomial
    assert not isinstance(excinfo.value, E.PolynomialError)


def test_negative_leading_coefficient_keeps_formula_order():
    solution = solve_quadratic(Decimal(-1), Decimal(0), Decimal(4))
    assert reals(solution) == [2, -2]


def test_root_defaults_to_real():
    root = Root(Decimal(3))
    assert root.real == 3
    assert not root.is_complex
