# MathEngine.py
"""""
Core engine of the polynomial equation solver.

Pipeline
--------
1) Parser: equation string -> expression tree (Parser.parse)
2) Rewriting: flatten -> simplify -> move_to_left -> flatten -> simplify -> flatten -> simplify
   (move_to_left reintroduces nested negations/sums, one extra round makes the tree stable)
3) Extraction: canonical 'terms = 0' tree -> (exponent, coefficient) table
4) Solver: closed forms for degree 0, 1 and 2, complex roots included
5) Formatter: renders roots using Decimal/Fraction and user preferences
"""""

import fractions
from decimal import Decimal, getcontext, Overflow, InvalidOperation, DivisionByZero

from . import config_manager as config_manager
from . import error as E
from . import Parser
from . import Solver
from .Expression import Number, Neg, Add, Mul, Pow, Equation, move_to_left, to_plain_string
from .Polynomial import Polynomial

# Debug toggle for optional prints in this module (the "debug" setting enables it as well)
debug = False

# Global Decimal precision used by this module
getcontext().prec = 50


# -----------------------------
# Rewriting
# -----------------------------

def canonicalize(baum):
    """Return (simplified, canonical) for a parsed equation tree."""
    simplified = baum.flatten().simplify()

    canonical = move_to_left(simplified)
    canonical = canonical.flatten().simplify()
    canonical = canonical.flatten().simplify()
    return simplified, canonical


# -----------------------------
# Milestone display
# -----------------------------

def round_for_display(baum, places):
    """Copy of the tree with non-integral numbers and coefficients rounded to 'places' decimals."""
    if places >= 0:
        rundungs_muster = Decimal('1e-' + str(places))
    else:
        rundungs_muster = Decimal('1')

    def runden(value):
        if value == value.to_integral_value():
            return value
        return value.quantize(rundungs_muster)

    def kopie(node):
        if isinstance(node, Number):
            return Number(runden(node.value))
        elif isinstance(node, Neg):
            return Neg(kopie(node.inner))
        elif isinstance(node, Add):
            return Add([kopie(term) for term in node.terms])
        elif isinstance(node, Mul):
            return Mul(runden(node.coefficient), [kopie(factor) for factor in node.factors])
        elif isinstance(node, Pow):
            return Pow(kopie(node.base), kopie(node.exponent))
        elif isinstance(node, Equation):
            return Equation(kopie(node.left), kopie(node.right))
        return node

    getcontext().prec = 128  # Prevent quantize overflow
    try:
        return kopie(baum)
    finally:
        getcontext().prec = 50


# -----------------------------
# Result formatting
# -----------------------------

def cleanup(ergebnis, settings=None):
    """Format a Decimal as Fraction or rounded Decimal depending on settings.

    Returns:
        (rendered_value, rounding_flag)
    where rounding_flag indicates whether the shown value differs from the exact one.
    """
    if settings is None:
        settings = config_manager.load_setting_value("all")

    rounding = False
    target_decimals = settings.get("decimal_places", 6)
    target_fractions = settings.get("fractions", False)

    if ergebnis == 0:
        return "0", rounding

    # Integer result – return normalized without rounding
    if ergebnis == ergebnis.to_integral_value():
        return to_plain_string(ergebnis), rounding

    if target_fractions == True:
        bruch_ergebnis = fractions.Fraction.from_decimal(ergebnis)
        gekuerzter_bruch = bruch_ergebnis.limit_denominator(100000)
        if gekuerzter_bruch != bruch_ergebnis:
            rounding = True

        zaehler = gekuerzter_bruch.numerator
        nenner = gekuerzter_bruch.denominator
        if abs(zaehler) > nenner:
            # Mixed fraction form (e.g., 3/2 -> "1 1/2")
            ganzzahl = zaehler // nenner
            rest_zaehler = zaehler % nenner

            if rest_zaehler == 0:
                return str(ganzzahl), rounding
            # Adjust for negatives so that the remainder part is positive
            if ganzzahl < 0 and rest_zaehler > 0:
                ganzzahl += 1
                rest_zaehler = abs(nenner - rest_zaehler)
            return f"{ganzzahl} {rest_zaehler}/{nenner}", rounding

        return str(gekuerzter_bruch), rounding

    # Non-integer result (e.g. 1/3 or irrational roots)
    getcontext().prec = 128  # Prevent quantize overflow

    if target_decimals >= 0:
        rundungs_muster = Decimal('1e-' + str(target_decimals))
    else:
        rundungs_muster = Decimal('1')

    gerundetes_ergebnis = ergebnis.quantize(rundungs_muster)
    getcontext().prec = 50  # Restore standard precision

    if gerundetes_ergebnis != ergebnis:
        rounding = True

    return to_plain_string(gerundetes_ergebnis), rounding


def format_root(root, settings):
    """'2', '-0.5 + 0.866025*i' or '1*i'; returns (text, rounding_flag)."""
    real, real_rounded = cleanup(root.real, settings)
    if not root.is_complex:
        return real, real_rounded

    imag, imag_rounded = cleanup(abs(root.imag), settings)
    if real == "0":
        text = ("-" if root.imag < 0 else "") + f"{imag}*i"
    else:
        sign = "-" if root.imag < 0 else "+"
        text = f"{real} {sign} {imag}*i"
    return text, real_rounded or imag_rounded


def format_working(root, settings):
    """The unreduced fraction of a root, e.g. '4 / 2' or '(0 - 2*i) / 2'."""
    numerator = cleanup(root.numerator, settings)[0]
    denominator = cleanup(root.denominator, settings)[0]
    if not root.is_complex:
        return f"{numerator} / {denominator}"

    imaginary = cleanup(abs(root.imaginary), settings)[0]
    sign = "-" if root.imaginary < 0 else "+"
    return f"({numerator} {sign} {imaginary}*i) / {denominator}"


# -----------------------------
# Computation result
# -----------------------------

class Computation:
    """Everything a calculate() call produced: milestone renderings, polynomial and solution."""

    def __init__(self, equation, symbol, steps, polynomial, solution, settings):
        self.equation = equation
        self.symbol = symbol
        self.steps = steps
        self.polynomial = polynomial
        self.solution = solution
        self.settings = settings

    def root_lines(self, workings=False):
        lines = []
        for root in self.solution.roots:
            value, rounding = format_root(root, self.settings)
            relation = "\u2248" if rounding else "="  # "≈"

            if workings and root.denominator != 1:
                lines.append(f"{self.symbol} = {format_working(root, self.settings)} {relation} {value}")
            else:
                lines.append(f"{self.symbol} {relation} {value}")
        return lines

    def report(self):
        """Display lines: milestones, reduced form, degree, discriminant and roots."""
        lines = list(self.steps)
        lines.append(f"Reduced form: {self.polynomial.reduced_form(self.symbol)}")
        lines.append(f"Polynomial: {self.polynomial}")
        lines.append(f"Polynomial degree: {self.polynomial.degree}")

        if self.solution.discriminant is not None:
            lines.append(f"Discriminant is {to_plain_string(self.solution.discriminant)}")
        lines.append(self.solution.message)
        lines.extend(self.root_lines(workings=True))
        return lines


# -----------------------------
# Public entry point
# -----------------------------

def calculate(problem, settings=None):
    """Main API: parse -> rewrite -> extract -> solve. Returns a Computation.

    Raises:
        ParseError, PolynomialError, SolverError, CalculationError (all MathError)
    """
    # Guard precision locally before each calculation (cleanup() changes it temporarily)
    getcontext().prec = 50
    if settings is None:
        settings = config_manager.load_setting_value("all")
    show_debug = debug or settings.get("debug", False) == True
    places = settings.get("decimal_places", 6)

    steps = []
    try:
        finaler_baum, variable_symbol = Parser.parse(problem)
        steps.append(f"==> {round_for_display(finaler_baum, places)}")

        simplified, canonical = canonicalize(finaler_baum)
        steps.append(f"==> {round_for_display(simplified, places)}")
        steps.append(f"==> {round_for_display(canonical, places)}")

        if show_debug == True:
            print("\n".join(steps))
            print("Final AST:")
            print(repr(canonical))

        polynomial = Polynomial.from_expr(canonical)
        if show_debug == True:
            print(f"Polynomial: {polynomial}")

        solution = Solver.solve(polynomial)

    # Known numeric overflow
    except Overflow:
        raise E.CalculationError(
            message="Number too large (Arithmetic overflow).",
            code="3026",
            equation=problem
        )
    # 0^0, (-8)^0.5, 0^-1 ...
    except (InvalidOperation, DivisionByZero) as e:
        raise E.CalculationError(f"Invalid power: {e!r}", code="3028", equation=problem)
    # Re-raise our domain errors after attaching the source equation and the steps so far
    except E.MathError as e:
        e.equation = problem
        e.steps = steps
        raise e

    return Computation(problem, variable_symbol or "x", steps, polynomial, solution, settings)
