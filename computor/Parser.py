# Parser.py
"""""
Tokenizer and recursive-descent parser for single-variable equations.

1) translator(): raw string -> list of (token, column) pairs, implicit '*' inserted
2) parse():      token list -> Expression tree with an Equation at the root

Columns are 1-based so callers can draw a caret under the offending character.
"""""

from decimal import Decimal

from . import error as E
from .Expression import Number, Variable, Neg, Add, Mul, Pow, Equation, to_plain_string

# Supported operators (kept as a simple list for quick membership checks)
Operations = ["+", "-", "*", "/", "=", "^"]


def isInt(zahl):
    """Return True if the given string can be parsed as int; else False."""
    try:
        int(zahl)
        return True
    except ValueError:
        return False


def is_operand(token):
    """Numbers and variable symbols."""
    return isinstance(token, Decimal) or (isinstance(token, str) and token.isalpha())


def describe(token):
    if isinstance(token, Decimal):
        return to_plain_string(token)
    return token


# -----------------------------
# Tokenizer
# -----------------------------

def translator(problem):
    """Convert the raw input into (token, column) pairs.

    Tokens are Decimal numbers, operator / parenthesis strings and one-letter
    variable symbols. Only one distinct variable symbol is allowed.

    Returns:
        (tokens, variable_symbol) where variable_symbol is None for constant equations
    """
    full_problem = []
    variable_symbol = None
    b = 0

    while b < len(problem):
        current_char = problem[b]
        column = b + 1

        # --- Numbers: digits and decimal separator ---
        if isInt(current_char) or current_char == ".":
            str_number = current_char
            hat_schon_komma = current_char == "."  # Only one dot allowed in a numeric literal

            while (b + 1 < len(problem)) and (isInt(problem[b + 1]) or problem[b + 1] == "."):
                if problem[b + 1] == ".":
                    if hat_schon_komma:
                        raise E.ParseError("More than one '.' in one number.", column=b + 2, code="3008")
                    hat_schon_komma = True
                b += 1
                str_number += problem[b]

            if str_number == ".":
                raise E.ParseError("Unexpected token: '.'", column=column, code="3011")
            full_problem.append((Decimal(str_number), column))

        # --- Operators and parentheses ---
        elif current_char in Operations or current_char in "()":
            full_problem.append((current_char, column))

        # --- Whitespace (ignored) ---
        elif current_char.isspace():
            pass

        # --- Variable ---
        elif current_char.isalpha():
            if variable_symbol is None:
                variable_symbol = current_char
            elif current_char != variable_symbol:
                raise E.ParseError(f"Multiple variables found: {variable_symbol}, {current_char}",
                                   column=column, code="3002")
            full_problem.append((current_char, column))

        else:
            raise E.ParseError(f"Unexpected token: '{current_char}'", column=column, code="3011")

        b = b + 1

    # --- Implicit multiplication pass ---
    # number/variable/')' directly followed by number/variable/'(' -> insert '*'
    b = 0
    while b + 1 < len(full_problem):
        aktuelles_element = full_problem[b][0]
        nachfolger, nachfolger_column = full_problem[b + 1]

        if (is_operand(aktuelles_element) or aktuelles_element == ")") and \
                (is_operand(nachfolger) or nachfolger == "("):
            full_problem.insert(b + 1, ("*", nachfolger_column))

        b += 1

    return full_problem, variable_symbol


# -----------------------------
# Parser (recursive descent)
# -----------------------------

def parse(problem):
    """Parse an equation string into an Equation tree.

    Precedence via nested functions: factor -> power -> unary -> term -> sum -> equation.

    Returns:
        (equation_tree, variable_symbol)
    """
    tokens, variable_symbol = translator(problem)
    end_column = len(problem) + 1

    if not any(token == "=" for token, _ in tokens):
        raise E.ParseError("Invalid equation, missing '='.", column=end_column, code="3012")

    def parse_factor():
        """Numbers, the variable and sub-expressions in '()'."""
        if not tokens:
            raise E.ParseError("Missing Number.", column=end_column, code="3027")
        token, column = tokens.pop(0)

        if token == "(":
            baum_in_der_klammer = parse_sum()
            if not tokens or tokens[0][0] != ")":
                fehler_column = tokens[0][1] if tokens else end_column
                raise E.ParseError("Missing closing parenthesis ')'", column=fehler_column, code="3009")
            tokens.pop(0)
            return baum_in_der_klammer

        elif isinstance(token, Decimal):
            return Number(token)
        elif token.isalpha():
            return Variable(token)
        elif token in Operations:
            raise E.ParseError(f"Missing Number before '{token}'.", column=column, code="3027")
        else:
            raise E.ParseError(f"Unexpected token: '{describe(token)}'", column=column, code="3011")

    def parse_power():
        """Exponentiation '^', right associative (x^2^3 = x^(2^3))."""
        basis = parse_factor()
        if tokens and tokens[0][0] == "^":
            tokens.pop(0)
            exponent = parse_unary()
            return Pow(basis, exponent)
        return basis

    def parse_unary():
        """Leading '+'/'-'. A negated literal becomes a negative Number."""
        if tokens and tokens[0][0] in ("+", "-"):
            operator, _ = tokens.pop(0)
            operand = parse_unary()

            if operator == "-":
                if isinstance(operand, Number):
                    return Number(-operand.value)
                return Neg(operand)
            return operand
        return parse_power()

    def parse_term():
        """Multiplication and division by a constant; builds a single Mul."""
        coefficient = Decimal(1)
        factors = []
        operator, column = "*", None

        while True:
            rechtes_teil = parse_unary()

            if operator == "/":
                # The divisor must fold to a constant
                divisor = rechtes_teil.flatten().simplify()
                if not isinstance(divisor, Number):
                    raise E.ParseError("Non linear problem (Division by Variable)", column=column, code="3006")
                if divisor.value == 0:
                    raise E.ParseError("Division by zero", column=column, code="3003")
                coefficient /= divisor.value
            elif isinstance(rechtes_teil, Mul):
                # Parenthesised product: 2*(3*x) is read as one product
                coefficient *= rechtes_teil.coefficient
                factors.extend(rechtes_teil.factors)
            else:
                factors.append(rechtes_teil)

            if not tokens or tokens[0][0] not in ("*", "/"):
                break
            operator, column = tokens.pop(0)

        if not factors:
            return Number(coefficient)
        elif coefficient == 1 and len(factors) == 1:
            return factors[0]
        return Mul(coefficient, factors)

    def parse_sum():
        """Addition and subtraction; 'a - b' becomes Add([a, Neg(b)])."""
        terms = [parse_term()]
        while tokens and tokens[0][0] in ("+", "-"):
            operator, _ = tokens.pop(0)
            rechte_seite = parse_term()
            if operator == "-":
                rechte_seite = Neg(rechte_seite)
            terms.append(rechte_seite)

        if len(terms) == 1:
            return terms[0]
        return Add(terms)

    def parse_gleichung():
        """'sum = sum', exactly one '=' at the top level."""
        if tokens[0][0] == "=":
            raise E.ParseError("One of the equation sides is empty", column=tokens[0][1], code="3022")
        linke_seite = parse_sum()

        if tokens[0][0] != "=":
            token, column = tokens[0]
            raise E.ParseError(f"Unexpected token: '{describe(token)}'", column=column, code="3011")
        tokens.pop(0)

        if not tokens:
            raise E.ParseError("One of the equation sides is empty", column=end_column, code="3022")
        rechte_seite = parse_sum()

        if tokens:
            token, column = tokens[0]
            raise E.ParseError(f"Unexpected token: '{describe(token)}'", column=column, code="3011")
        return Equation(linke_seite, rechte_seite)

    return parse_gleichung(), variable_symbol
