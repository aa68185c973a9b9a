

class MathError(Exception):
    def __init__(self, message, code="9999", equation=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.equation = equation
        self.steps = []  # Pipeline milestones reached before the error

class SyntaxError(MathError):
    pass

class ParseError(SyntaxError):
    """Input could not be parsed; column is 1-based, pointing at the offending character."""
    def __init__(self, message, column, code="3011", equation=None):
        super().__init__(message, code=code, equation=equation)
        self.column = column

class CalculationError(MathError):
    pass

class SolverError(MathError):
    def __init__(self, message, code="3032", equation=None, polynomial=None):
        super().__init__(message, code=code, equation=equation)
        self.polynomial = polynomial

class PolynomialError(SolverError):
    def __init__(self, message, code="3031", equation=None):
        super().__init__(message, code=code, equation=equation)




Error_Dictionary= {

    "1" : "Missing Files",
    "3" : "Solver Error",
    "4" : "UI Error",
    "5" : "Configuration Error",
    "9" : "Runtime Error"

}

#Error Messages are structured in:
# 1. Digit: Main Error
# 2. Digit: Specification
# 3. and 4. Digit: Error Number



ERROR_MESSAGES = {
    "1000" : "Required files are missing: ", # + file names

    "3002" : "Multiple Variables in problem: ", # + symbol
    "3003" : "Division by Zero",
    "3006" : "Non linear problem (Division by Variable)",
    "3008" : "More than one '.' in one number.",
    "3009" : "Missing ')'. ",
    "3011" : "Unexpected Token: ", # + Token
    "3012" : "Invalid equation, missing '='. ",
    "3022" : "One of the equation sides is empty", # + equation
    "3026" : "Number too big.",
    "3027" : "Missing Number.",
    "3028" : "Invalid power.",
    "3031" : "Not a polynomial.",
    "3032" : "I can't solve that. ", # + polynomial

    "4002" : "Calculation already Running!",
    "4501" : "Not all Settings could be saved: ", # + setting

    "9999" : "Unexpected Error: " #+error
}
